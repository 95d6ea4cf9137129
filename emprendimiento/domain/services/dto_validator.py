"""Domain service helpers for validating creation DTOs before persistence."""

from datetime import date
from enum import Enum
from typing import Any, List, Optional, Type

from emprendimiento.domain.entities.cliente import CrearClienteDTO, DireccionDTO
from emprendimiento.domain.entities.emprendedor import (
    CrearEmprendedorDTO,
    NivelExperiencia,
    SectorEmprendimiento,
)
from emprendimiento.domain.entities.usuario import CrearUsuarioDTO, RolUsuario
from emprendimiento.domain.errors import ValidationError
from emprendimiento.domain.value_objects import PlataformaRedSocial, TipoDocumento

NOMBRE_MIN = 2
TELEFONO_MIN = 10


def _is_member(enum_cls: Type[Enum], value: Any) -> bool:
    try:
        enum_cls(value)
    except ValueError:
        return False
    return True


def _text_length(value: Optional[str]) -> int:
    if not isinstance(value, str):
        return 0
    return len(value.strip())


def _validate_nombres(nombre: str, apellido: str, errors: List[str]) -> None:
    if _text_length(nombre) < NOMBRE_MIN:
        errors.append(f"Nombre debe tener al menos {NOMBRE_MIN} caracteres")
    if _text_length(apellido) < NOMBRE_MIN:
        errors.append(f"Apellido debe tener al menos {NOMBRE_MIN} caracteres")


def _validate_telefono(telefono: str, errors: List[str]) -> None:
    if _text_length(telefono) < TELEFONO_MIN:
        errors.append(f"Teléfono debe tener al menos {TELEFONO_MIN} caracteres")


def _validate_direccion(direccion: Optional[DireccionDTO], errors: List[str]) -> None:
    if direccion is None:
        errors.append("Dirección incompleta")
        return
    if isinstance(direccion, dict):
        partes = [direccion.get(k) for k in ("calle", "ciudad", "departamento")]
    else:
        partes = [direccion.calle, direccion.ciudad, direccion.departamento]
    if not all(_text_length(parte) for parte in partes):
        errors.append("Dirección incompleta")


def _raise_if_errors(errors: List[str], entidad: str) -> None:
    if errors:
        raise ValidationError(
            f"Datos de {entidad} inválidos", details={"errors": errors}
        )


def validate_crear_usuario(datos: CrearUsuarioDTO) -> None:
    """Validate a Usuario creation DTO.

    Raises:
        ValidationError: If one or more validation rules fail.
    """

    errors: List[str] = []
    _validate_nombres(datos.nombre, datos.apellido, errors)
    if not _is_member(RolUsuario, datos.rol):
        errors.append("Rol de usuario inválido")
    _raise_if_errors(errors, "usuario")


def validate_crear_cliente(datos: CrearClienteDTO) -> None:
    """Validate a Cliente creation DTO.

    Raises:
        ValidationError: If one or more validation rules fail.
    """

    errors: List[str] = []
    _validate_nombres(datos.nombre, datos.apellido, errors)
    _validate_telefono(datos.telefono, errors)
    if not _is_member(TipoDocumento, datos.tipo_documento):
        errors.append("Tipo de documento inválido")
    if not isinstance(datos.fecha_nacimiento, date):
        errors.append("Fecha de nacimiento inválida")
    _validate_direccion(datos.direccion, errors)
    _raise_if_errors(errors, "cliente")


def validate_crear_emprendedor(datos: CrearEmprendedorDTO) -> None:
    """Validate an Emprendedor creation DTO.

    Raises:
        ValidationError: If one or more validation rules fail.
    """

    errors: List[str] = []
    _validate_nombres(datos.nombre, datos.apellido, errors)
    _validate_telefono(datos.telefono, errors)
    if not _is_member(SectorEmprendimiento, datos.sector):
        errors.append("Sector de emprendimiento inválido")
    if not _is_member(NivelExperiencia, datos.experiencia):
        errors.append("Nivel de experiencia inválido")

    for red in datos.redes_sociales or []:
        plataforma = red.get("plataforma") if isinstance(red, dict) else red.plataforma
        if not _is_member(PlataformaRedSocial, plataforma):
            errors.append(f"Plataforma de red social inválida: {plataforma}")

    _raise_if_errors(errors, "emprendedor")


def require_text(value: Optional[str], message: str) -> str:
    """Return ``value`` unchanged, or raise when it is missing or blank.

    Raises:
        ValidationError: If the value is None, not text or only whitespace.
    """
    if not _text_length(value):
        raise ValidationError(message)
    return value
