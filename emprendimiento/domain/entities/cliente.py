"""
Domain Entities - Cliente

Customer of the marketplace. A Cliente is identified by e-mail and by the
(tipo, numero) document pair, must be an adult when registered and climbs a
fixed category ladder BRONCE -> PLATA -> ORO -> PLATINO.
"""

from dataclasses import dataclass, field
from datetime import date, datetime
from enum import Enum
from typing import Any, Dict, Mapping, Optional, Union

from emprendimiento.domain.value_objects import (
    Direccion,
    Email,
    NumeroDocumento,
    TipoDocumento,
)

from .base import coerce_enum, new_id, utcnow

EDAD_MINIMA = 18


class EstadoCliente(str, Enum):
    """Status of a customer."""

    ACTIVO = "ACTIVO"
    INACTIVO = "INACTIVO"
    BLOQUEADO = "BLOQUEADO"


class CategoriaCliente(str, Enum):
    """Customer tier, declared in ascending order."""

    BRONCE = "BRONCE"
    PLATA = "PLATA"
    ORO = "ORO"
    PLATINO = "PLATINO"


CATEGORIAS_VIP = frozenset({CategoriaCliente.ORO, CategoriaCliente.PLATINO})


@dataclass
class DireccionDTO:
    calle: str
    ciudad: str
    departamento: str
    codigo_postal: Optional[str] = None


@dataclass
class CrearClienteDTO:
    """Input for creating a Cliente."""

    nombre: str
    apellido: str
    email: str
    telefono: str
    tipo_documento: Union[TipoDocumento, str]
    numero_documento: str
    fecha_nacimiento: date
    direccion: DireccionDTO
    usuario_id: Optional[str] = None


@dataclass
class ActualizarClienteDTO:
    """Partial update: only the fields that are not None are applied."""

    nombre: Optional[str] = None
    apellido: Optional[str] = None
    telefono: Optional[str] = None
    direccion: Optional[DireccionDTO] = None
    estado: Optional[Union[EstadoCliente, str]] = None
    categoria: Optional[Union[CategoriaCliente, str]] = None


def to_direccion(datos: Union[DireccionDTO, Mapping[str, Any]]) -> Direccion:
    """Build the Direccion value object from a DTO or a plain mapping."""
    if isinstance(datos, Mapping):
        return Direccion(
            calle=datos.get("calle", ""),
            ciudad=datos.get("ciudad", ""),
            departamento=datos.get("departamento", ""),
            codigo_postal=datos.get("codigo_postal"),
        )
    return Direccion(
        calle=datos.calle,
        ciudad=datos.ciudad,
        departamento=datos.departamento,
        codigo_postal=datos.codigo_postal,
    )


def calcular_edad(fecha_nacimiento: date, hoy: Optional[date] = None) -> int:
    """Age in whole years, one less while this year's birthday is pending."""
    if isinstance(fecha_nacimiento, datetime):
        fecha_nacimiento = fecha_nacimiento.date()
    referencia = hoy or date.today()
    if isinstance(referencia, datetime):
        referencia = referencia.date()

    edad = referencia.year - fecha_nacimiento.year
    if (referencia.month, referencia.day) < (
        fecha_nacimiento.month,
        fecha_nacimiento.day,
    ):
        edad -= 1
    return edad


@dataclass
class Cliente:
    """Represents a customer registered in the marketplace."""

    nombre: str
    apellido: str
    email: Email
    telefono: str
    numero_documento: NumeroDocumento
    fecha_nacimiento: date
    direccion: Direccion
    usuario_id: Optional[str] = None
    estado: EstadoCliente = EstadoCliente.ACTIVO
    categoria: CategoriaCliente = CategoriaCliente.BRONCE

    id: str = field(default_factory=new_id)
    created_at: datetime = field(default_factory=utcnow)
    updated_at: datetime = field(default_factory=utcnow)

    @property
    def tipo_documento(self) -> TipoDocumento:
        return self.numero_documento.tipo

    @property
    def nombre_completo(self) -> str:
        return f"{self.nombre} {self.apellido}"

    @property
    def edad(self) -> int:
        return calcular_edad(self.fecha_nacimiento)

    def edad_en(self, hoy: date) -> int:
        return calcular_edad(self.fecha_nacimiento, hoy)

    def update_timestamp(self) -> None:
        """Update the 'updated_at' timestamp to current time."""
        self.updated_at = utcnow()

    def actualizar_informacion(self, datos: ActualizarClienteDTO) -> None:
        """Apply the provided subset of fields and refresh updated_at."""
        direccion = to_direccion(datos.direccion) if datos.direccion else None
        estado = (
            coerce_enum(EstadoCliente, datos.estado, "Estado de cliente")
            if datos.estado
            else None
        )
        categoria = (
            coerce_enum(CategoriaCliente, datos.categoria, "Categoría de cliente")
            if datos.categoria
            else None
        )

        if datos.nombre:
            self.nombre = datos.nombre
        if datos.apellido:
            self.apellido = datos.apellido
        if datos.telefono:
            self.telefono = datos.telefono
        if direccion is not None:
            self.direccion = direccion
        if estado is not None:
            self.estado = estado
        if categoria is not None:
            self.categoria = categoria
        self.update_timestamp()

    def activar(self) -> None:
        self.estado = EstadoCliente.ACTIVO
        self.update_timestamp()

    def desactivar(self) -> None:
        self.estado = EstadoCliente.INACTIVO
        self.update_timestamp()

    def bloquear(self) -> None:
        self.estado = EstadoCliente.BLOQUEADO
        self.update_timestamp()

    def ascender_categoria(self) -> bool:
        """Move one step up the ladder. Returns False when already at the top."""
        categorias = list(CategoriaCliente)
        indice = categorias.index(self.categoria)
        if indice >= len(categorias) - 1:
            return False
        self.categoria = categorias[indice + 1]
        self.update_timestamp()
        return True

    def esta_activo(self) -> bool:
        return self.estado is EstadoCliente.ACTIVO

    def es_mayor_de_edad(self) -> bool:
        return self.edad >= EDAD_MINIMA

    def es_vip(self) -> bool:
        return self.categoria in CATEGORIAS_VIP

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "nombre": self.nombre,
            "apellido": self.apellido,
            "email": str(self.email),
            "telefono": self.telefono,
            "tipo_documento": self.tipo_documento.value,
            "numero_documento": str(self.numero_documento),
            "fecha_nacimiento": self.fecha_nacimiento.isoformat(),
            "direccion": self.direccion.to_dict(),
            "estado": self.estado.value,
            "categoria": self.categoria.value,
            "usuario_id": self.usuario_id,
            "edad": self.edad,
            "created_at": self.created_at.isoformat(),
            "updated_at": self.updated_at.isoformat(),
        }
