from __future__ import annotations

from datetime import datetime, timedelta, timezone

import pytest

from emprendimiento.domain.entities.usuario import (
    ActualizarUsuarioDTO,
    EstadoUsuario,
    RolUsuario,
    Usuario,
)
from emprendimiento.domain.errors import ValidationError
from emprendimiento.domain.value_objects import Email, Password, Username


def _usuario() -> Usuario:
    return Usuario(
        username=Username("admin"),
        email=Email("admin@emprendimiento.com"),
        password=Password("Admin123$"),
        nombre="Carlos",
        apellido="Administrador",
        rol=RolUsuario.ADMINISTRADOR,
    )


def test_usuario_defaults() -> None:
    usuario = _usuario()

    assert usuario.estado is EstadoUsuario.ACTIVO
    assert usuario.esta_activo()
    assert usuario.nombre_completo == "Carlos Administrador"
    assert usuario.id
    assert usuario.created_at.tzinfo is not None


def test_update_timestamp_moves_forward() -> None:
    usuario = _usuario()
    usuario.updated_at = datetime.now(timezone.utc) - timedelta(minutes=5)
    anterior = usuario.updated_at

    usuario.update_timestamp()

    assert usuario.updated_at > anterior


def test_actualizar_informacion_applies_only_given_fields() -> None:
    usuario = _usuario()
    anterior = usuario.updated_at

    usuario.actualizar_informacion(
        ActualizarUsuarioDTO(nombre="Carla", estado="SUSPENDIDO")
    )

    assert usuario.nombre == "Carla"
    assert usuario.apellido == "Administrador"
    assert usuario.estado is EstadoUsuario.SUSPENDIDO
    assert usuario.updated_at >= anterior


def test_actualizar_informacion_with_invalid_estado_changes_nothing() -> None:
    usuario = _usuario()

    with pytest.raises(ValidationError):
        usuario.actualizar_informacion(
            ActualizarUsuarioDTO(nombre="Otro", estado="BORRADO")
        )

    assert usuario.nombre == "Carlos"
    assert usuario.estado is EstadoUsuario.ACTIVO


def test_state_transitions() -> None:
    usuario = _usuario()

    usuario.desactivar()
    assert usuario.estado is EstadoUsuario.INACTIVO
    assert not usuario.esta_activo()

    usuario.suspender()
    assert usuario.estado is EstadoUsuario.SUSPENDIDO

    usuario.activar()
    assert usuario.esta_activo()


def test_password_verification_and_change() -> None:
    usuario = _usuario()

    assert usuario.verificar_password("Admin123$")
    assert not usuario.verificar_password("otra")

    usuario.cambiar_password("Nueva456$")
    assert usuario.verificar_password("Nueva456$")

    with pytest.raises(ValidationError):
        usuario.cambiar_password("debil")


def test_to_dict_matches_attributes_without_password() -> None:
    usuario = _usuario()

    data = usuario.to_dict()

    assert data["id"] == usuario.id
    assert data["username"] == "admin"
    assert data["email"] == "admin@emprendimiento.com"
    assert data["rol"] == "ADMINISTRADOR"
    assert data["estado"] == "ACTIVO"
    assert data["created_at"] == usuario.created_at.isoformat()
    assert "password" not in data
    assert "Admin123$" not in str(data.values())
    assert "Admin123$" not in repr(usuario)
