"""
Domain Entities - Usuario

System account with login credentials and a role. Username and e-mail are
unique across all accounts; uniqueness itself is enforced by the repository.
"""

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import Any, Dict, Optional, Union

from emprendimiento.domain.value_objects import Email, Password, Username

from .base import coerce_enum, new_id, utcnow


class EstadoUsuario(str, Enum):
    """Status of a system account."""

    ACTIVO = "ACTIVO"
    INACTIVO = "INACTIVO"
    SUSPENDIDO = "SUSPENDIDO"


class RolUsuario(str, Enum):
    """Role granted to a system account."""

    ADMINISTRADOR = "ADMINISTRADOR"
    EMPRENDEDOR = "EMPRENDEDOR"
    CLIENTE = "CLIENTE"


@dataclass
class CrearUsuarioDTO:
    """Input for creating a Usuario."""

    username: str
    email: str
    password: str
    nombre: str
    apellido: str
    rol: Union[RolUsuario, str]
    telefono: Optional[str] = None


@dataclass
class ActualizarUsuarioDTO:
    """Partial update: only the fields that are not None are applied."""

    nombre: Optional[str] = None
    apellido: Optional[str] = None
    telefono: Optional[str] = None
    estado: Optional[Union[EstadoUsuario, str]] = None


@dataclass
class Usuario:
    """Represents a registered user of the platform."""

    username: Username
    email: Email
    password: Password = field(repr=False)
    nombre: str
    apellido: str
    rol: RolUsuario
    telefono: Optional[str] = None
    estado: EstadoUsuario = EstadoUsuario.ACTIVO

    id: str = field(default_factory=new_id)
    created_at: datetime = field(default_factory=utcnow)
    updated_at: datetime = field(default_factory=utcnow)

    @property
    def nombre_completo(self) -> str:
        return f"{self.nombre} {self.apellido}"

    def update_timestamp(self) -> None:
        """Update the 'updated_at' timestamp to current time."""
        self.updated_at = utcnow()

    def actualizar_informacion(self, datos: ActualizarUsuarioDTO) -> None:
        """Apply the provided subset of fields and refresh updated_at."""
        estado = (
            coerce_enum(EstadoUsuario, datos.estado, "Estado de usuario")
            if datos.estado
            else None
        )

        if datos.nombre:
            self.nombre = datos.nombre
        if datos.apellido:
            self.apellido = datos.apellido
        if datos.telefono is not None:
            self.telefono = datos.telefono
        if estado is not None:
            self.estado = estado
        self.update_timestamp()

    def verificar_password(self, password: str) -> bool:
        return self.password.verify(password)

    def cambiar_password(self, nueva_password: str) -> None:
        self.password = Password(nueva_password)
        self.update_timestamp()

    def activar(self) -> None:
        self.estado = EstadoUsuario.ACTIVO
        self.update_timestamp()

    def desactivar(self) -> None:
        self.estado = EstadoUsuario.INACTIVO
        self.update_timestamp()

    def suspender(self) -> None:
        self.estado = EstadoUsuario.SUSPENDIDO
        self.update_timestamp()

    def esta_activo(self) -> bool:
        return self.estado is EstadoUsuario.ACTIVO

    def to_dict(self) -> Dict[str, Any]:
        """Plain serializable view. The password is never included."""
        return {
            "id": self.id,
            "username": str(self.username),
            "email": str(self.email),
            "nombre": self.nombre,
            "apellido": self.apellido,
            "telefono": self.telefono,
            "rol": self.rol.value,
            "estado": self.estado.value,
            "created_at": self.created_at.isoformat(),
            "updated_at": self.updated_at.isoformat(),
        }
