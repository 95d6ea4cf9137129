"""
Emprendedor Repository Interface

This module defines the persistence contract for Emprendedor entities.
"""

from abc import ABC, abstractmethod
from typing import List, Optional, Union

from emprendimiento.domain.entities.emprendedor import (
    ActualizarEmprendedorDTO,
    CrearEmprendedorDTO,
    Emprendedor,
    EstadoEmprendedor,
    NivelExperiencia,
    SectorEmprendimiento,
)
from emprendimiento.domain.entities.result import OperationResult


class IEmprendedorRepository(ABC):
    """Interface for Emprendedor repository implementations."""

    @abstractmethod
    async def crear(self, datos: CrearEmprendedorDTO) -> Emprendedor:
        """
        Create and persist a new Emprendedor.

        Raises:
            DuplicateKeyError: If the e-mail is already registered
            DuplicatePlatformError: If two social accounts share a platform
            ValidationError: If any value object rejects its input
        """
        pass

    @abstractmethod
    async def obtener_por_id(self, emprendedor_id: str) -> Optional[Emprendedor]:
        pass

    @abstractmethod
    async def obtener_por_email(self, email: str) -> Optional[Emprendedor]:
        pass

    @abstractmethod
    async def obtener_por_usuario_id(self, usuario_id: str) -> Optional[Emprendedor]:
        pass

    @abstractmethod
    async def obtener_todos(self) -> List[Emprendedor]:
        pass

    @abstractmethod
    async def obtener_por_estado(
        self, estado: Union[EstadoEmprendedor, str]
    ) -> List[Emprendedor]:
        pass

    @abstractmethod
    async def obtener_por_sector(
        self, sector: Union[SectorEmprendimiento, str]
    ) -> List[Emprendedor]:
        pass

    @abstractmethod
    async def obtener_por_experiencia(
        self, experiencia: Union[NivelExperiencia, str]
    ) -> List[Emprendedor]:
        pass

    @abstractmethod
    async def obtener_verificados(self) -> List[Emprendedor]:
        pass

    @abstractmethod
    async def obtener_mejor_puntuados(self, limite: int = 10) -> List[Emprendedor]:
        """Highest rated first, at most ``limite`` entries."""
        pass

    @abstractmethod
    async def actualizar(
        self, emprendedor_id: str, datos: ActualizarEmprendedorDTO
    ) -> OperationResult[Emprendedor]:
        pass

    @abstractmethod
    async def eliminar(self, emprendedor_id: str) -> bool:
        pass

    @abstractmethod
    async def existe_email(self, email: str) -> bool:
        pass

    @abstractmethod
    async def contar_por_sector(
        self, sector: Union[SectorEmprendimiento, str]
    ) -> int:
        pass

    @abstractmethod
    async def contar_verificados(self) -> int:
        pass

    @abstractmethod
    async def obtener_puntuacion_promedio(self) -> float:
        """Mean rating rounded to two decimals; 0 when there are no profiles."""
        pass
