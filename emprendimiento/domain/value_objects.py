"""
Domain Value Objects

Immutable wrappers that enforce a data invariant when they are built.
Every value object is a frozen dataclass, so equality is by value and
instances can be shared freely between entities.
"""

import re
from dataclasses import dataclass
from enum import Enum
from typing import Optional
from urllib.parse import urlsplit

from emprendimiento.domain.errors import ValidationError

_EMAIL_PATTERN = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")
_USERNAME_PATTERN = re.compile(r"^[a-zA-Z0-9_]{3,20}$")
_PASSWORD_PATTERN = re.compile(r"^(?=.*[a-z])(?=.*[A-Z])(?=.*\d)[a-zA-Z\d@$!%*?&]{8,}$")
_NON_DIGITS = re.compile(r"\D")


def _require_str(value: object, label: str) -> str:
    if not isinstance(value, str):
        raise ValidationError(f"{label} debe ser texto", details={"value": value})
    return value


class TipoDocumento(str, Enum):
    """Identity document types accepted for a Cliente."""

    CEDULA = "CEDULA"
    PASSPORT = "PASSPORT"
    EXTRANJERIA = "EXTRANJERIA"


# Inclusive digit-count bounds per document type.
DOCUMENTO_LONGITUDES = {
    TipoDocumento.CEDULA: (6, 10),
    TipoDocumento.PASSPORT: (6, 15),
    TipoDocumento.EXTRANJERIA: (6, 12),
}


class PlataformaRedSocial(str, Enum):
    """Social platforms an Emprendedor can link."""

    INSTAGRAM = "INSTAGRAM"
    FACEBOOK = "FACEBOOK"
    TWITTER = "TWITTER"
    LINKEDIN = "LINKEDIN"
    YOUTUBE = "YOUTUBE"
    TIKTOK = "TIKTOK"
    WHATSAPP = "WHATSAPP"


@dataclass(frozen=True)
class Email:
    """E-mail address, normalized to lowercase without surrounding blanks."""

    value: str

    def __post_init__(self) -> None:
        raw = _require_str(self.value, "Email")
        if not _EMAIL_PATTERN.fullmatch(raw):
            raise ValidationError("Email inválido", details={"email": raw})
        object.__setattr__(self, "value", raw.lower().strip())

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class Username:
    """Login name: 3 to 20 letters, digits or underscores."""

    value: str

    def __post_init__(self) -> None:
        raw = _require_str(self.value, "Username")
        if not _USERNAME_PATTERN.fullmatch(raw):
            raise ValidationError(
                "Username debe tener entre 3 y 20 caracteres alfanuméricos",
                details={"username": raw},
            )
        object.__setattr__(self, "value", raw.strip())

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True, repr=False)
class Password:
    """
    Account password.

    The value is kept as provided and compared by plain equality; it is
    never rendered by repr or str.
    """

    value: str

    def __post_init__(self) -> None:
        raw = _require_str(self.value, "Contraseña")
        if not _PASSWORD_PATTERN.fullmatch(raw):
            raise ValidationError(
                "Contraseña debe tener al menos 8 caracteres, una mayúscula, "
                "una minúscula y un número"
            )

    def verify(self, candidate: str) -> bool:
        return self.value == candidate

    def __repr__(self) -> str:
        return "Password('********')"

    __str__ = __repr__


@dataclass(frozen=True)
class NumeroDocumento:
    """Document number stored as digits only, length-checked per type."""

    value: str
    tipo: TipoDocumento

    def __post_init__(self) -> None:
        raw = _require_str(self.value, "Número de documento")
        try:
            tipo = TipoDocumento(self.tipo)
        except ValueError as exc:
            raise ValidationError(
                f"Tipo de documento inválido: {self.tipo}",
                details={"tipo": self.tipo},
            ) from exc

        digits = _NON_DIGITS.sub("", raw)
        minimo, maximo = DOCUMENTO_LONGITUDES[tipo]
        if not minimo <= len(digits) <= maximo:
            raise ValidationError(
                f"Número de documento {tipo.value} inválido",
                details={"numero": raw, "tipo": tipo.value},
            )
        object.__setattr__(self, "value", digits)
        object.__setattr__(self, "tipo", tipo)

    @staticmethod
    def normalizar(numero: str) -> str:
        """Strip every non-digit character, as done before storage."""
        return _NON_DIGITS.sub("", numero or "")

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class Direccion:
    """Postal address; street, city and department are mandatory."""

    calle: str
    ciudad: str
    departamento: str
    codigo_postal: Optional[str] = None

    def __post_init__(self) -> None:
        partes = [
            _require_str(self.calle, "Calle").strip(),
            _require_str(self.ciudad, "Ciudad").strip(),
            _require_str(self.departamento, "Departamento").strip(),
        ]
        if not all(partes):
            raise ValidationError("Calle, ciudad y departamento son obligatorios")

        calle, ciudad, departamento = partes
        object.__setattr__(self, "calle", calle)
        object.__setattr__(self, "ciudad", ciudad)
        object.__setattr__(self, "departamento", departamento)
        if self.codigo_postal is not None:
            object.__setattr__(self, "codigo_postal", self.codigo_postal.strip())

    def to_dict(self) -> dict:
        return {
            "calle": self.calle,
            "ciudad": self.ciudad,
            "departamento": self.departamento,
            "codigo_postal": self.codigo_postal,
        }

    def __str__(self) -> str:
        codigo = f" ({self.codigo_postal})" if self.codigo_postal else ""
        return f"{self.calle}, {self.ciudad}, {self.departamento}{codigo}"


@dataclass(frozen=True)
class Especialidad:
    value: str

    def __post_init__(self) -> None:
        limpio = _require_str(self.value, "Especialidad").strip()
        if not 3 <= len(limpio) <= 50:
            raise ValidationError("Especialidad debe tener entre 3 y 50 caracteres")
        object.__setattr__(self, "value", limpio)

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class Biografia:
    value: str

    RESUMEN_MAX = 100

    def __post_init__(self) -> None:
        limpio = _require_str(self.value, "Biografía").strip()
        if not 10 <= len(limpio) <= 500:
            raise ValidationError("Biografía debe tener entre 10 y 500 caracteres")
        object.__setattr__(self, "value", limpio)

    @property
    def resumen(self) -> str:
        """First 100 characters, with an ellipsis when the text was cut."""
        if len(self.value) > self.RESUMEN_MAX:
            return self.value[: self.RESUMEN_MAX] + "..."
        return self.value

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class RedSocial:
    """A social account; url is stored lowercased and trimmed."""

    plataforma: PlataformaRedSocial
    url: str
    nombre_usuario: str

    def __post_init__(self) -> None:
        try:
            plataforma = PlataformaRedSocial(self.plataforma)
        except ValueError as exc:
            raise ValidationError(
                f"Plataforma de red social inválida: {self.plataforma}",
                details={"plataforma": self.plataforma},
            ) from exc

        url = _require_str(self.url, "URL").strip()
        if not self._is_valid_url(url):
            raise ValidationError("URL de red social inválida", details={"url": url})

        nombre = _require_str(self.nombre_usuario, "Nombre de usuario").strip()
        if not 1 <= len(nombre) <= 30:
            raise ValidationError("Nombre de usuario de red social inválido")

        object.__setattr__(self, "plataforma", plataforma)
        object.__setattr__(self, "url", url.lower())
        object.__setattr__(self, "nombre_usuario", nombre)

    @staticmethod
    def _is_valid_url(url: str) -> bool:
        if not url or any(ch.isspace() for ch in url):
            return False
        try:
            parts = urlsplit(url)
        except ValueError:
            return False
        return bool(parts.scheme) and bool(parts.netloc or parts.path)

    def to_dict(self) -> dict:
        return {
            "plataforma": self.plataforma.value,
            "url": self.url,
            "nombre_usuario": self.nombre_usuario,
        }
