"""Small helpers shared by the domain entities."""

from datetime import datetime, timezone
from enum import Enum
from typing import Any, Type, TypeVar
from uuid import uuid4

from emprendimiento.domain.errors import ValidationError

E = TypeVar("E", bound=Enum)


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


def new_id() -> str:
    """Opaque identifier assigned by repositories at creation time."""
    return str(uuid4())


def coerce_enum(enum_cls: Type[E], value: Any, label: str) -> E:
    """
    Convert a raw value into a member of ``enum_cls``.

    Raises:
        ValidationError: If the value is not a member of the enumeration.
    """
    try:
        return enum_cls(value)
    except ValueError as exc:
        allowed = [member.value for member in enum_cls]
        raise ValidationError(
            f"{label} inválido: {value}",
            details={"value": value, "allowed": allowed},
        ) from exc
