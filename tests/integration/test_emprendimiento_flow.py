from __future__ import annotations

import asyncio
import dataclasses
from datetime import date

import pytest

from emprendimiento.domain.entities import (
    ActualizarEmprendedorDTO,
    CategoriaCliente,
    CrearClienteDTO,
    CrearEmprendedorDTO,
    CrearUsuarioDTO,
    DireccionDTO,
    EstadoEmprendedor,
    NivelExperiencia,
    RolUsuario,
    SectorEmprendimiento,
)
from emprendimiento.domain.errors import DuplicateKeyError
from emprendimiento.infrastructure.database import USUARIOS_COLLECTION
from emprendimiento.main.config import AppSettings, StoreSettings
from emprendimiento.main.container import app_lifespan, init_container


def _settings(latency_ms: int = 0) -> AppSettings:
    return AppSettings(
        store=StoreSettings(
            usuario_latency_ms=latency_ms,
            cliente_latency_ms=latency_ms,
            emprendedor_latency_ms=latency_ms,
        )
    )


@pytest.mark.asyncio
async def test_usuario_cliente_and_emprendedor_lifecycle() -> None:
    init_container(_settings())

    async with app_lifespan() as container:
        usuarios = container.usuario_service()
        clientes = container.cliente_service()
        emprendedores = container.emprendedor_service()

        cuenta = await usuarios.crear_usuario(
            CrearUsuarioDTO(
                username="sofia_cafe",
                email="sofia@cafeorigen.co",
                password="CafeOrigen1",
                nombre="Sofía",
                apellido="Herrera",
                rol=RolUsuario.EMPRENDEDOR,
            )
        )
        assert await usuarios.autenticar_usuario("sofia_cafe", "CafeOrigen1") is cuenta

        perfil = await emprendedores.crear_emprendedor(
            CrearEmprendedorDTO(
                nombre="Sofía",
                apellido="Herrera",
                email="sofia@cafeorigen.co",
                telefono="+57-317-1010101",
                especialidad="Café de especialidad",
                biografia="Tostadora de café de origen del Huila desde 2015.",
                sector=SectorEmprendimiento.ALIMENTACION,
                experiencia=NivelExperiencia.AVANZADO,
                usuario_id=cuenta.id,
            )
        )
        assert (await emprendedores.obtener_emprendedor_por_usuario_id(cuenta.id)) is perfil

        verificado = await emprendedores.verificar_emprendedor(perfil.id)
        assert verificado.success
        assert (await emprendedores.actualizar_puntuacion(perfil.id, 4.9)).success

        mejores = await emprendedores.obtener_mejor_puntuados(1)
        assert mejores[0] is perfil

        comprador = await clientes.crear_cliente(
            CrearClienteDTO(
                nombre="Mateo",
                apellido="Quintero",
                email="mateo.q@example.com",
                telefono="+57-316-2020202",
                tipo_documento="EXTRANJERIA",
                numero_documento="E-4455667",
                fecha_nacimiento=date(1979, 11, 2),
                direccion={
                    "calle": "Calle 8 #3-14",
                    "ciudad": "Neiva",
                    "departamento": "Huila",
                },
            )
        )
        assert str(comprador.numero_documento) == "4455667"

        for _ in range(2):
            await clientes.ascender_categoria_cliente(comprador.id)
        assert comprador.es_vip()
        assert comprador.categoria is CategoriaCliente.ORO

        estadisticas = await emprendedores.obtener_estadisticas()
        assert estadisticas.total == 4
        assert estadisticas.verificados == 2
        assert estadisticas.puntuacion_promedio == round((4.8 + 4.5 + 4.2 + 4.9) / 4, 2)

        cliente_stats = await clientes.obtener_estadisticas()
        assert cliente_stats.total == 4
        assert cliente_stats.vip == 3


@pytest.mark.asyncio
async def test_concurrent_registration_keeps_usernames_unique() -> None:
    init_container(_settings(latency_ms=10))

    async with app_lifespan() as container:
        service = container.usuario_service()
        base = CrearUsuarioDTO(
            username="carrera",
            email="carrera0@example.com",
            password="Carrera123",
            nombre="Carrera",
            apellido="Paralela",
            rol="CLIENTE",
        )
        intentos = [
            dataclasses.replace(base, email=f"carrera{i}@example.com") for i in range(5)
        ]

        resultados = await asyncio.gather(
            *(service.crear_usuario(datos) for datos in intentos),
            return_exceptions=True,
        )

        creados = [r for r in resultados if not isinstance(r, Exception)]
        duplicados = [r for r in resultados if isinstance(r, DuplicateKeyError)]
        assert len(creados) == 1
        assert len(duplicados) == 4
        assert container.store().count(USUARIOS_COLLECTION) == 4


@pytest.mark.asyncio
async def test_failed_update_is_reported_and_leaves_profile_intact() -> None:
    init_container(_settings())

    async with app_lifespan() as container:
        service = container.emprendedor_service()

        resultado = await service.actualizar_emprendedor(
            "emp-002",
            ActualizarEmprendedorDTO(estado="CERRADO", nombre="Otro"),
        )

        assert not resultado.success
        diego = await service.obtener_emprendedor_por_id("emp-002")
        assert diego.nombre == "Diego"
        assert diego.estado is EstadoEmprendedor.ACTIVO
