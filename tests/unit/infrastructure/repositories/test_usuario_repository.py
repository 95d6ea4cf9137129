from __future__ import annotations

import asyncio
import dataclasses

import pytest

from emprendimiento.domain.entities import (
    ActualizarUsuarioDTO,
    CrearUsuarioDTO,
    EstadoUsuario,
)
from emprendimiento.domain.errors import DuplicateKeyError, ValidationError
from emprendimiento.infrastructure.database import USUARIOS_COLLECTION, InMemoryStore
from emprendimiento.infrastructure.repositories import UsuarioMemoryRepository


@pytest.mark.asyncio
async def test_crear_assigns_id_and_normalizes_email(
    usuario_repository: UsuarioMemoryRepository,
    crear_usuario_dto: CrearUsuarioDTO,
) -> None:
    usuario = await usuario_repository.crear(crear_usuario_dto)

    assert usuario.id
    assert str(usuario.email) == "lucia@example.com"
    assert usuario.estado is EstadoUsuario.ACTIVO
    assert await usuario_repository.obtener_por_id(usuario.id) is usuario


@pytest.mark.asyncio
async def test_crear_rejects_duplicate_username(
    usuario_repository: UsuarioMemoryRepository,
    crear_usuario_dto: CrearUsuarioDTO,
) -> None:
    await usuario_repository.crear(crear_usuario_dto)
    otro = dataclasses.replace(crear_usuario_dto, email="otra@example.com")

    with pytest.raises(DuplicateKeyError) as exc_info:
        await usuario_repository.crear(otro)

    assert exc_info.value.field == "username"
    assert exc_info.value.message == "Username 'lucia_dev' ya existe"
    assert len(await usuario_repository.obtener_todos()) == 1


@pytest.mark.asyncio
async def test_crear_rejects_duplicate_email_case_insensitively(
    usuario_repository: UsuarioMemoryRepository,
    crear_usuario_dto: CrearUsuarioDTO,
) -> None:
    await usuario_repository.crear(crear_usuario_dto)
    otro = dataclasses.replace(
        crear_usuario_dto, username="lucia_dos", email="  LUCIA@example.COM "
    )

    with pytest.raises(DuplicateKeyError) as exc_info:
        await usuario_repository.crear(otro)

    assert exc_info.value.field == "email"


@pytest.mark.asyncio
async def test_crear_with_invalid_value_persists_nothing(
    usuario_repository: UsuarioMemoryRepository,
    crear_usuario_dto: CrearUsuarioDTO,
) -> None:
    for datos in (
        dataclasses.replace(crear_usuario_dto, password="debil"),
        dataclasses.replace(crear_usuario_dto, email="no-es-email"),
        dataclasses.replace(crear_usuario_dto, rol="ROOT"),
    ):
        with pytest.raises(ValidationError):
            await usuario_repository.crear(datos)

    assert await usuario_repository.obtener_todos() == []


@pytest.mark.asyncio
async def test_concurrent_creates_with_same_username_store_one() -> None:
    store = InMemoryStore()
    repository = UsuarioMemoryRepository(store, latency_ms=5)
    datos = CrearUsuarioDTO(
        username="gemelo",
        email="gemelo1@example.com",
        password="Segura123$",
        nombre="Gemelo",
        apellido="Uno",
        rol="CLIENTE",
    )
    copia = dataclasses.replace(datos, email="gemelo2@example.com")

    resultados = await asyncio.gather(
        repository.crear(datos), repository.crear(copia), return_exceptions=True
    )

    errores = [r for r in resultados if isinstance(r, DuplicateKeyError)]
    assert len(errores) == 1
    assert store.count(USUARIOS_COLLECTION) == 1


@pytest.mark.asyncio
async def test_lookups(
    usuario_repository: UsuarioMemoryRepository,
    crear_usuario_dto: CrearUsuarioDTO,
) -> None:
    usuario = await usuario_repository.crear(crear_usuario_dto)

    assert await usuario_repository.obtener_por_username("lucia_dev") is usuario
    assert await usuario_repository.obtener_por_username("LUCIA_DEV") is None
    assert await usuario_repository.obtener_por_email("LUCIA@EXAMPLE.COM") is usuario
    assert await usuario_repository.existe_username("lucia_dev")
    assert await usuario_repository.existe_email("lucia@example.com")
    assert not await usuario_repository.existe_email("nadie@example.com")
    assert await usuario_repository.obtener_por_id("no-existe") is None


@pytest.mark.asyncio
async def test_actualizar_unknown_id_returns_failure(
    usuario_repository: UsuarioMemoryRepository,
) -> None:
    resultado = await usuario_repository.actualizar(
        "no-existe", ActualizarUsuarioDTO(nombre="X")
    )

    assert not resultado.success
    assert resultado.error == "Usuario con ID 'no-existe' no encontrado"
    assert resultado.message == "Usuario no existe"


@pytest.mark.asyncio
async def test_actualizar_applies_changes(
    usuario_repository: UsuarioMemoryRepository,
    crear_usuario_dto: CrearUsuarioDTO,
) -> None:
    usuario = await usuario_repository.crear(crear_usuario_dto)

    resultado = await usuario_repository.actualizar(
        usuario.id, ActualizarUsuarioDTO(apellido="Gómez Ruiz", estado="INACTIVO")
    )

    assert resultado.success
    assert resultado.message == "Usuario actualizado exitosamente"
    assert resultado.data.apellido == "Gómez Ruiz"
    assert resultado.data.estado is EstadoUsuario.INACTIVO


@pytest.mark.asyncio
async def test_actualizar_propagates_validation_errors(
    usuario_repository: UsuarioMemoryRepository,
    crear_usuario_dto: CrearUsuarioDTO,
) -> None:
    usuario = await usuario_repository.crear(crear_usuario_dto)

    with pytest.raises(ValidationError):
        await usuario_repository.actualizar(
            usuario.id, ActualizarUsuarioDTO(estado="BORRADO")
        )


@pytest.mark.asyncio
async def test_eliminar_reports_whether_entity_existed(
    usuario_repository: UsuarioMemoryRepository,
    crear_usuario_dto: CrearUsuarioDTO,
) -> None:
    usuario = await usuario_repository.crear(crear_usuario_dto)

    assert await usuario_repository.eliminar(usuario.id) is True
    assert await usuario_repository.eliminar(usuario.id) is False
    assert await usuario_repository.obtener_por_id(usuario.id) is None
