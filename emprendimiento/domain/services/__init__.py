"""Domain services package."""

from .dto_validator import (
    require_text,
    validate_crear_cliente,
    validate_crear_emprendedor,
    validate_crear_usuario,
)

__all__ = [
    "require_text",
    "validate_crear_usuario",
    "validate_crear_cliente",
    "validate_crear_emprendedor",
]
