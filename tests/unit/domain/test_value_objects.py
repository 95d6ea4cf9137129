from __future__ import annotations

import dataclasses

import pytest

from emprendimiento.domain.errors import ValidationError
from emprendimiento.domain.value_objects import (
    Biografia,
    Direccion,
    Email,
    Especialidad,
    NumeroDocumento,
    Password,
    PlataformaRedSocial,
    RedSocial,
    TipoDocumento,
    Username,
)


def test_email_is_normalized_and_compared_by_value() -> None:
    assert Email("Ana@X.com") == Email("ana@x.com")
    assert str(Email("Ana@X.com")) == "ana@x.com"


@pytest.mark.parametrize("raw", ["sin-arroba.com", "a@b", "a b@c.com", ""])
def test_email_rejects_malformed_addresses(raw: str) -> None:
    with pytest.raises(ValidationError):
        Email(raw)


def test_value_objects_are_immutable() -> None:
    email = Email("ana@x.com")
    with pytest.raises(dataclasses.FrozenInstanceError):
        email.value = "otra@x.com"  # type: ignore[misc]


def test_username_pattern() -> None:
    assert str(Username("maria_tech")) == "maria_tech"
    for invalido in ("ab", "a" * 21, "con espacio", "guion-medio"):
        with pytest.raises(ValidationError):
            Username(invalido)


def test_password_requires_mixed_case_and_digit() -> None:
    password = Password("Admin123$")
    assert password.verify("Admin123$")
    assert not password.verify("admin123$")

    for invalido in ("corta1A", "sinmayuscula1", "SINMINUSCULA1", "SinNumero"):
        with pytest.raises(ValidationError):
            Password(invalido)


def test_password_is_masked_in_repr_and_str() -> None:
    password = Password("Admin123$")
    assert "Admin123$" not in repr(password)
    assert "Admin123$" not in str(password)


def test_numero_documento_keeps_digits_only() -> None:
    numero = NumeroDocumento("1.234.567-8", TipoDocumento.CEDULA)
    assert numero.value == "12345678"
    assert numero.tipo is TipoDocumento.CEDULA


def test_numero_documento_length_depends_on_type() -> None:
    assert NumeroDocumento("123456789012345", TipoDocumento.PASSPORT)
    with pytest.raises(ValidationError):
        NumeroDocumento("123456789012345", TipoDocumento.CEDULA)
    with pytest.raises(ValidationError):
        NumeroDocumento("12345", TipoDocumento.EXTRANJERIA)


def test_numero_documento_accepts_raw_type_string() -> None:
    numero = NumeroDocumento("AB1234567", "PASSPORT")
    assert numero.tipo is TipoDocumento.PASSPORT
    assert str(numero) == "1234567"

    with pytest.raises(ValidationError):
        NumeroDocumento("12345678", "LICENCIA")


def test_direccion_requires_main_parts_and_renders() -> None:
    direccion = Direccion(" Calle 1 ", "Bogotá", "Cundinamarca", "110111")
    assert direccion.calle == "Calle 1"
    assert str(direccion) == "Calle 1, Bogotá, Cundinamarca (110111)"
    assert str(Direccion("Calle 1", "Cali", "Valle")) == "Calle 1, Cali, Valle"

    with pytest.raises(ValidationError):
        Direccion("Calle 1", "   ", "Valle")


def test_especialidad_length_bounds() -> None:
    assert str(Especialidad("  Diseño  ")) == "Diseño"
    with pytest.raises(ValidationError):
        Especialidad("ab")
    with pytest.raises(ValidationError):
        Especialidad("x" * 51)


def test_biografia_resumen_truncates_long_text() -> None:
    corta = Biografia("Texto de prueba corto.")
    assert corta.resumen == "Texto de prueba corto."

    larga = Biografia("a" * 150)
    assert larga.resumen == "a" * 100 + "..."

    with pytest.raises(ValidationError):
        Biografia("muy corta")
    with pytest.raises(ValidationError):
        Biografia("b" * 501)


def test_red_social_lowercases_url() -> None:
    red = RedSocial("INSTAGRAM", " https://Instagram.com/Chef ", "chef")
    assert red.plataforma is PlataformaRedSocial.INSTAGRAM
    assert red.url == "https://instagram.com/chef"
    assert red.to_dict() == {
        "plataforma": "INSTAGRAM",
        "url": "https://instagram.com/chef",
        "nombre_usuario": "chef",
    }


@pytest.mark.parametrize(
    "plataforma,url,nombre",
    [
        ("MYSPACE", "https://myspace.com/x", "x"),
        ("TWITTER", "no es una url", "x"),
        ("TWITTER", "twitter.com/x", "x"),
        ("TWITTER", "https://twitter.com/x", ""),
        ("TWITTER", "https://twitter.com/x", "n" * 31),
    ],
)
def test_red_social_rejects_invalid_input(plataforma: str, url: str, nombre: str) -> None:
    with pytest.raises(ValidationError):
        RedSocial(plataforma, url, nombre)


@pytest.mark.parametrize(
    "url",
    [
        "https://wa.me/573001234567",
        "tel:+573001234567",
        "mailto:laura@cafeorigen.co",
    ],
)
def test_red_social_accepts_uris_without_host(url: str) -> None:
    red = RedSocial(PlataformaRedSocial.WHATSAPP, url, "laura")
    assert red.url == url.lower()


@pytest.mark.parametrize("url", ["https://", "tel:"])
def test_red_social_rejects_scheme_without_body(url: str) -> None:
    with pytest.raises(ValidationError):
        RedSocial(PlataformaRedSocial.WHATSAPP, url, "laura")
