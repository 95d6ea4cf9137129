"""
Cliente Repository Interface

This module defines the persistence contract for Cliente entities.
"""

from abc import ABC, abstractmethod
from typing import List, Optional, Union

from emprendimiento.domain.entities.cliente import (
    ActualizarClienteDTO,
    CategoriaCliente,
    Cliente,
    CrearClienteDTO,
    EstadoCliente,
)
from emprendimiento.domain.entities.result import OperationResult
from emprendimiento.domain.value_objects import TipoDocumento


class IClienteRepository(ABC):
    """Interface for Cliente repository implementations."""

    @abstractmethod
    async def crear(self, datos: CrearClienteDTO) -> Cliente:
        """
        Create and persist a new Cliente.

        Raises:
            DuplicateKeyError: If the e-mail or document is already registered
            ValidationError: If the client is under age or any value is invalid
        """
        pass

    @abstractmethod
    async def obtener_por_id(self, cliente_id: str) -> Optional[Cliente]:
        pass

    @abstractmethod
    async def obtener_por_email(self, email: str) -> Optional[Cliente]:
        pass

    @abstractmethod
    async def obtener_por_documento(
        self, tipo_documento: Union[TipoDocumento, str], numero_documento: str
    ) -> Optional[Cliente]:
        """Lookup by document; the number is compared digits-only."""
        pass

    @abstractmethod
    async def obtener_todos(self) -> List[Cliente]:
        pass

    @abstractmethod
    async def obtener_por_estado(
        self, estado: Union[EstadoCliente, str]
    ) -> List[Cliente]:
        pass

    @abstractmethod
    async def obtener_por_categoria(
        self, categoria: Union[CategoriaCliente, str]
    ) -> List[Cliente]:
        pass

    @abstractmethod
    async def obtener_por_usuario_id(self, usuario_id: str) -> Optional[Cliente]:
        pass

    @abstractmethod
    async def actualizar(
        self, cliente_id: str, datos: ActualizarClienteDTO
    ) -> OperationResult[Cliente]:
        pass

    @abstractmethod
    async def eliminar(self, cliente_id: str) -> bool:
        pass

    @abstractmethod
    async def existe_email(self, email: str) -> bool:
        pass

    @abstractmethod
    async def existe_documento(
        self, tipo_documento: Union[TipoDocumento, str], numero_documento: str
    ) -> bool:
        pass

    @abstractmethod
    async def contar_por_categoria(
        self, categoria: Union[CategoriaCliente, str]
    ) -> int:
        pass
