"""
Usuario Repository Interface

This module defines the persistence contract for Usuario entities.
Implementations live in the infrastructure layer.
"""

from abc import ABC, abstractmethod
from typing import List, Optional

from emprendimiento.domain.entities.result import OperationResult
from emprendimiento.domain.entities.usuario import (
    ActualizarUsuarioDTO,
    CrearUsuarioDTO,
    Usuario,
)


class IUsuarioRepository(ABC):
    """Interface for Usuario repository implementations."""

    @abstractmethod
    async def crear(self, datos: CrearUsuarioDTO) -> Usuario:
        """
        Create and persist a new Usuario.

        Args:
            datos: Creation DTO; the id is assigned by the repository

        Returns:
            The persisted Usuario

        Raises:
            DuplicateKeyError: If the username or e-mail is already registered
            ValidationError: If any value object rejects its input
        """
        pass

    @abstractmethod
    async def obtener_por_id(self, usuario_id: str) -> Optional[Usuario]:
        pass

    @abstractmethod
    async def obtener_por_username(self, username: str) -> Optional[Usuario]:
        """Exact, case-sensitive lookup."""
        pass

    @abstractmethod
    async def obtener_por_email(self, email: str) -> Optional[Usuario]:
        """Case-insensitive lookup."""
        pass

    @abstractmethod
    async def obtener_todos(self) -> List[Usuario]:
        pass

    @abstractmethod
    async def actualizar(
        self, usuario_id: str, datos: ActualizarUsuarioDTO
    ) -> OperationResult[Usuario]:
        """
        Apply a partial update.

        Returns:
            A successful result with the updated Usuario, or a failed result
            when the id is unknown. Unexpected failures are raised.
        """
        pass

    @abstractmethod
    async def eliminar(self, usuario_id: str) -> bool:
        """Remove a Usuario. Returns False when the id is unknown."""
        pass

    @abstractmethod
    async def existe_username(self, username: str) -> bool:
        pass

    @abstractmethod
    async def existe_email(self, email: str) -> bool:
        pass
