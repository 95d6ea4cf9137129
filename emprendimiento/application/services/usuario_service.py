"""
Usuario Service - Application Layer

This module orchestrates the Usuario operations: creation with business
validation, lookups, updates, authentication and statistics.
"""

from typing import Dict, List, Optional, Union

import structlog
from dependency_injector.wiring import Provide, inject

from emprendimiento.domain.entities.result import OperationResult
from emprendimiento.domain.entities.usuario import (
    ActualizarUsuarioDTO,
    CrearUsuarioDTO,
    EstadoUsuario,
    RolUsuario,
    Usuario,
)
from emprendimiento.domain.repositories.usuario_repository import IUsuarioRepository
from emprendimiento.domain.services import require_text, validate_crear_usuario

from ..dtos.estadisticas_dto import EstadisticasUsuariosDTO

logger = structlog.get_logger(__name__)


class UsuarioService:
    """Application service for system accounts."""

    @inject
    def __init__(
        self,
        usuario_repository: IUsuarioRepository = Provide["usuario_repository"],
    ):
        self.usuario_repository = usuario_repository

    async def crear_usuario(self, datos: CrearUsuarioDTO) -> Usuario:
        """
        Validate and create a new usuario.

        Args:
            datos: Creation payload

        Returns:
            The persisted usuario

        Raises:
            ValidationError: If the payload breaks a business rule
            DuplicateKeyError: If the username or e-mail is taken
        """
        validate_crear_usuario(datos)
        usuario = await self.usuario_repository.crear(datos)
        logger.info(
            "Usuario registered",
            usuario_id=usuario.id,
            nombre=usuario.nombre_completo,
            rol=usuario.rol.value,
        )
        return usuario

    async def obtener_usuario_por_id(self, usuario_id: str) -> Optional[Usuario]:
        require_text(usuario_id, "ID de usuario requerido")

        usuario = await self.usuario_repository.obtener_por_id(usuario_id)
        if usuario is None:
            logger.info("Usuario not found", usuario_id=usuario_id)
        return usuario

    async def obtener_usuario_por_username(self, username: str) -> Optional[Usuario]:
        require_text(username, "Username requerido")
        return await self.usuario_repository.obtener_por_username(username)

    async def obtener_usuario_por_email(self, email: str) -> Optional[Usuario]:
        require_text(email, "Email requerido")
        return await self.usuario_repository.obtener_por_email(email)

    async def listar_usuarios(self) -> List[Usuario]:
        usuarios = await self.usuario_repository.obtener_todos()
        logger.debug("Usuarios listed", total=len(usuarios))
        return usuarios

    async def actualizar_usuario(
        self, usuario_id: str, datos: ActualizarUsuarioDTO
    ) -> OperationResult[Usuario]:
        """
        Apply a partial update.

        Every failure is reported through the returned result; nothing is
        raised to the caller.
        """
        if not usuario_id or not usuario_id.strip():
            return OperationResult.fail(
                error="ID de usuario requerido", message="Parámetros inválidos"
            )

        try:
            return await self.usuario_repository.actualizar(usuario_id, datos)
        except Exception as e:
            logger.error("Failed to update usuario", usuario_id=usuario_id, error=str(e))
            return OperationResult.fail(
                error=str(e), message="Error actualizando usuario"
            )

    async def eliminar_usuario(self, usuario_id: str) -> bool:
        require_text(usuario_id, "ID de usuario requerido")

        usuario = await self.usuario_repository.obtener_por_id(usuario_id)
        if usuario is None:
            logger.info("Usuario not found for deletion", usuario_id=usuario_id)
            return False

        eliminado = await self.usuario_repository.eliminar(usuario_id)
        if eliminado:
            logger.info("Usuario removed", usuario_id=usuario_id)
        return eliminado

    async def autenticar_usuario(
        self, username: str, password: str
    ) -> Optional[Usuario]:
        """
        Check credentials.

        Returns:
            The usuario when it exists, is active and the password matches;
            None otherwise
        """
        usuario = await self.usuario_repository.obtener_por_username(username)

        if usuario is None:
            logger.info("Authentication failed", username=username, reason="not_found")
            return None
        if not usuario.esta_activo():
            logger.info("Authentication failed", username=username, reason="inactive")
            return None
        if not usuario.verificar_password(password):
            logger.info(
                "Authentication failed", username=username, reason="bad_password"
            )
            return None

        logger.info("Usuario authenticated", usuario_id=usuario.id)
        return usuario

    async def cambiar_estado_usuario(
        self, usuario_id: str, nuevo_estado: Union[EstadoUsuario, str]
    ) -> OperationResult[Usuario]:
        return await self.actualizar_usuario(
            usuario_id, ActualizarUsuarioDTO(estado=nuevo_estado)
        )

    async def verificar_disponibilidad_username(self, username: str) -> bool:
        return not await self.usuario_repository.existe_username(username)

    async def verificar_disponibilidad_email(self, email: str) -> bool:
        return not await self.usuario_repository.existe_email(email)

    async def obtener_usuarios_por_rol(
        self, rol: Union[RolUsuario, str]
    ) -> List[Usuario]:
        usuarios = await self.usuario_repository.obtener_todos()
        return [usuario for usuario in usuarios if usuario.rol == rol]

    async def obtener_estadisticas(self) -> EstadisticasUsuariosDTO:
        usuarios = await self.usuario_repository.obtener_todos()

        por_rol: Dict[str, int] = {}
        activos = 0
        for usuario in usuarios:
            por_rol[usuario.rol.value] = por_rol.get(usuario.rol.value, 0) + 1
            if usuario.esta_activo():
                activos += 1

        return EstadisticasUsuariosDTO(
            total=len(usuarios),
            por_rol=por_rol,
            activos=activos,
            inactivos=len(usuarios) - activos,
        )
