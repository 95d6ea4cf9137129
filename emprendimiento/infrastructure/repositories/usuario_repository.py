"""
Infrastructure Repository - Usuario In-Memory Implementation

This module implements the Usuario repository on top of the in-memory store.
"""

from typing import Optional

import structlog

from emprendimiento.domain.entities.base import coerce_enum
from emprendimiento.domain.entities.usuario import (
    CrearUsuarioDTO,
    RolUsuario,
    Usuario,
)
from emprendimiento.domain.errors import DomainError, DuplicateKeyError
from emprendimiento.domain.repositories.usuario_repository import IUsuarioRepository
from emprendimiento.domain.value_objects import Email, Password, Username
from emprendimiento.infrastructure.database.memory_store import USUARIOS_COLLECTION

from .base import InMemoryRepository

logger = structlog.get_logger(__name__)


class UsuarioMemoryRepository(InMemoryRepository[Usuario], IUsuarioRepository):
    """In-memory implementation of the Usuario repository."""

    collection_name = USUARIOS_COLLECTION
    entity_label = "Usuario"

    async def crear(self, datos: CrearUsuarioDTO) -> Usuario:
        """Create a new usuario after checking username and e-mail uniqueness."""
        await self._simulate_latency()

        try:
            if self._existe_username(datos.username):
                raise DuplicateKeyError(
                    "username",
                    datos.username,
                    f"Username '{datos.username}' ya existe",
                )
            if self._existe_email(datos.email):
                raise DuplicateKeyError(
                    "email", datos.email, f"Email '{datos.email}' ya existe"
                )

            usuario = Usuario(
                username=Username(datos.username),
                email=Email(datos.email),
                password=Password(datos.password),
                nombre=datos.nombre,
                apellido=datos.apellido,
                rol=coerce_enum(RolUsuario, datos.rol, "Rol de usuario"),
                telefono=datos.telefono,
            )
        except DomainError as e:
            logger.error(
                "Failed to create usuario", username=datos.username, error=e.message
            )
            raise e

        self._items[usuario.id] = usuario
        logger.info(
            "Usuario created", usuario_id=usuario.id, username=str(usuario.username)
        )
        return usuario

    async def obtener_por_username(self, username: str) -> Optional[Usuario]:
        await self._simulate_latency()
        return self._find_one(lambda u: str(u.username) == username)

    async def obtener_por_email(self, email: str) -> Optional[Usuario]:
        await self._simulate_latency()
        buscado = (email or "").strip().lower()
        return self._find_one(lambda u: str(u.email) == buscado)

    async def existe_username(self, username: str) -> bool:
        await self._simulate_latency()
        return self._existe_username(username)

    async def existe_email(self, email: str) -> bool:
        await self._simulate_latency()
        return self._existe_email(email)

    def _existe_username(self, username: str) -> bool:
        return self._find_one(lambda u: str(u.username) == username) is not None

    def _existe_email(self, email: str) -> bool:
        buscado = (email or "").strip().lower()
        return self._find_one(lambda u: str(u.email) == buscado) is not None
