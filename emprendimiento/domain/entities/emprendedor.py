"""
Domain Entities - Emprendedor

Entrepreneur profile: specialty, biography, sector, experience, linked
social accounts (one per platform) and a 0-5 rating. New profiles start
pending verification; the verification date is recorded once.
"""

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import Any, Dict, Iterable, List, Mapping, Optional, Union

from emprendimiento.domain.errors import DuplicatePlatformError
from emprendimiento.domain.value_objects import (
    Biografia,
    Email,
    Especialidad,
    PlataformaRedSocial,
    RedSocial,
)

from .base import coerce_enum, new_id, utcnow

PUNTUACION_MINIMA = 0.0
PUNTUACION_MAXIMA = 5.0
PUNTUACION_BUENA = 4.0


class EstadoEmprendedor(str, Enum):
    """Status of an entrepreneur profile."""

    ACTIVO = "ACTIVO"
    INACTIVO = "INACTIVO"
    PENDIENTE_VERIFICACION = "PENDIENTE_VERIFICACION"
    VERIFICADO = "VERIFICADO"
    SUSPENDIDO = "SUSPENDIDO"


class NivelExperiencia(str, Enum):
    PRINCIPIANTE = "PRINCIPIANTE"
    INTERMEDIO = "INTERMEDIO"
    AVANZADO = "AVANZADO"
    EXPERTO = "EXPERTO"


class SectorEmprendimiento(str, Enum):
    TECNOLOGIA = "TECNOLOGIA"
    ALIMENTACION = "ALIMENTACION"
    MODA = "MODA"
    SALUD = "SALUD"
    EDUCACION = "EDUCACION"
    SERVICIOS = "SERVICIOS"
    COMERCIO = "COMERCIO"
    TURISMO = "TURISMO"
    ARTE = "ARTE"
    DEPORTES = "DEPORTES"


@dataclass
class RedSocialDTO:
    plataforma: Union[PlataformaRedSocial, str]
    url: str
    nombre_usuario: str


@dataclass
class CrearEmprendedorDTO:
    """Input for creating an Emprendedor."""

    nombre: str
    apellido: str
    email: str
    telefono: str
    especialidad: str
    biografia: str
    sector: Union[SectorEmprendimiento, str]
    experiencia: Union[NivelExperiencia, str]
    usuario_id: Optional[str] = None
    redes_sociales: Optional[List[RedSocialDTO]] = None


@dataclass
class ActualizarEmprendedorDTO:
    """Partial update: only the fields that are not None are applied."""

    nombre: Optional[str] = None
    apellido: Optional[str] = None
    telefono: Optional[str] = None
    especialidad: Optional[str] = None
    biografia: Optional[str] = None
    sector: Optional[Union[SectorEmprendimiento, str]] = None
    experiencia: Optional[Union[NivelExperiencia, str]] = None
    estado: Optional[Union[EstadoEmprendedor, str]] = None
    redes_sociales: Optional[List[RedSocialDTO]] = None


def clamp_puntuacion(valor: float) -> float:
    return max(PUNTUACION_MINIMA, min(PUNTUACION_MAXIMA, float(valor)))


def to_red_social(datos: Union[RedSocialDTO, Mapping[str, Any]]) -> RedSocial:
    if isinstance(datos, Mapping):
        return RedSocial(
            plataforma=datos.get("plataforma"),
            url=datos.get("url", ""),
            nombre_usuario=datos.get("nombre_usuario", ""),
        )
    return RedSocial(
        plataforma=datos.plataforma,
        url=datos.url,
        nombre_usuario=datos.nombre_usuario,
    )


def build_redes_sociales(
    redes: Iterable[Union[RedSocialDTO, Mapping[str, Any], RedSocial]],
) -> List[RedSocial]:
    """Build the social accounts, rejecting a second entry for a platform."""
    resultado: List[RedSocial] = []
    vistas = set()
    for red in redes:
        red_social = red if isinstance(red, RedSocial) else to_red_social(red)
        if red_social.plataforma in vistas:
            raise DuplicatePlatformError(red_social.plataforma.value)
        vistas.add(red_social.plataforma)
        resultado.append(red_social)
    return resultado


@dataclass
class Emprendedor:
    """Represents an entrepreneur offering products or services."""

    nombre: str
    apellido: str
    email: Email
    telefono: str
    especialidad: Especialidad
    biografia: Biografia
    sector: SectorEmprendimiento
    experiencia: NivelExperiencia
    usuario_id: Optional[str] = None
    redes_sociales: List[RedSocial] = field(default_factory=list)
    estado: EstadoEmprendedor = EstadoEmprendedor.PENDIENTE_VERIFICACION
    puntuacion: float = 0.0
    fecha_verificacion: Optional[datetime] = None

    id: str = field(default_factory=new_id)
    created_at: datetime = field(default_factory=utcnow)
    updated_at: datetime = field(default_factory=utcnow)

    def __post_init__(self) -> None:
        self.puntuacion = clamp_puntuacion(self.puntuacion)
        self.redes_sociales = build_redes_sociales(self.redes_sociales)

    @property
    def nombre_completo(self) -> str:
        return f"{self.nombre} {self.apellido}"

    def update_timestamp(self) -> None:
        """Update the 'updated_at' timestamp to current time."""
        self.updated_at = utcnow()

    def actualizar_informacion(self, datos: ActualizarEmprendedorDTO) -> None:
        """
        Apply the provided subset of fields and refresh updated_at.

        Every value object is built before the first assignment, so an
        invalid field leaves the profile unchanged.
        """
        especialidad = (
            Especialidad(datos.especialidad) if datos.especialidad else None
        )
        biografia = Biografia(datos.biografia) if datos.biografia else None
        sector = (
            coerce_enum(SectorEmprendimiento, datos.sector, "Sector")
            if datos.sector
            else None
        )
        experiencia = (
            coerce_enum(NivelExperiencia, datos.experiencia, "Nivel de experiencia")
            if datos.experiencia
            else None
        )
        estado = (
            coerce_enum(EstadoEmprendedor, datos.estado, "Estado de emprendedor")
            if datos.estado
            else None
        )
        redes = (
            build_redes_sociales(datos.redes_sociales)
            if datos.redes_sociales is not None
            else None
        )

        if datos.nombre:
            self.nombre = datos.nombre
        if datos.apellido:
            self.apellido = datos.apellido
        if datos.telefono:
            self.telefono = datos.telefono
        if especialidad is not None:
            self.especialidad = especialidad
        if biografia is not None:
            self.biografia = biografia
        if sector is not None:
            self.sector = sector
        if experiencia is not None:
            self.experiencia = experiencia
        if estado is not None:
            if estado is EstadoEmprendedor.VERIFICADO:
                self._registrar_verificacion()
            self.estado = estado
        if redes is not None:
            self.redes_sociales = redes
        self.update_timestamp()

    def _registrar_verificacion(self) -> None:
        if self.fecha_verificacion is None:
            self.fecha_verificacion = utcnow()

    def verificar(self) -> None:
        self.estado = EstadoEmprendedor.VERIFICADO
        self._registrar_verificacion()
        self.update_timestamp()

    def suspender(self) -> None:
        self.estado = EstadoEmprendedor.SUSPENDIDO
        self.update_timestamp()

    def activar(self) -> None:
        self.estado = EstadoEmprendedor.ACTIVO
        self.update_timestamp()

    def desactivar(self) -> None:
        self.estado = EstadoEmprendedor.INACTIVO
        self.update_timestamp()

    def agregar_red_social(self, red_social: RedSocial) -> None:
        """
        Link a new social account.

        Raises:
            DuplicatePlatformError: If the platform is already linked.
        """
        if any(rs.plataforma == red_social.plataforma for rs in self.redes_sociales):
            raise DuplicatePlatformError(red_social.plataforma.value)
        self.redes_sociales.append(red_social)
        self.update_timestamp()

    def remover_red_social(self, plataforma: Union[PlataformaRedSocial, str]) -> bool:
        """Unlink the account for ``plataforma``. Returns whether one existed."""
        for indice, red_social in enumerate(self.redes_sociales):
            if red_social.plataforma == plataforma:
                del self.redes_sociales[indice]
                self.update_timestamp()
                return True
        return False

    def actualizar_puntuacion(self, nueva_puntuacion: float) -> None:
        self.puntuacion = clamp_puntuacion(nueva_puntuacion)
        self.update_timestamp()

    def esta_verificado(self) -> bool:
        return self.estado is EstadoEmprendedor.VERIFICADO

    def esta_activo(self) -> bool:
        return self.estado in (EstadoEmprendedor.ACTIVO, EstadoEmprendedor.VERIFICADO)

    def tiene_buena_puntuacion(self) -> bool:
        return self.puntuacion >= PUNTUACION_BUENA

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "nombre": self.nombre,
            "apellido": self.apellido,
            "email": str(self.email),
            "telefono": self.telefono,
            "especialidad": str(self.especialidad),
            "biografia": str(self.biografia),
            "sector": self.sector.value,
            "experiencia": self.experiencia.value,
            "estado": self.estado.value,
            "usuario_id": self.usuario_id,
            "redes_sociales": [rs.to_dict() for rs in self.redes_sociales],
            "fecha_verificacion": (
                self.fecha_verificacion.isoformat()
                if self.fecha_verificacion
                else None
            ),
            "puntuacion": self.puntuacion,
            "created_at": self.created_at.isoformat(),
            "updated_at": self.updated_at.isoformat(),
        }
