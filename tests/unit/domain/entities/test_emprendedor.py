from __future__ import annotations

import pytest

from emprendimiento.domain.entities.emprendedor import (
    ActualizarEmprendedorDTO,
    Emprendedor,
    EstadoEmprendedor,
    NivelExperiencia,
    RedSocialDTO,
    SectorEmprendimiento,
    build_redes_sociales,
)
from emprendimiento.domain.errors import DuplicatePlatformError, ValidationError
from emprendimiento.domain.value_objects import (
    Biografia,
    Email,
    Especialidad,
    PlataformaRedSocial,
    RedSocial,
)


def _emprendedor(**overrides) -> Emprendedor:
    datos = dict(
        nombre="Laura",
        apellido="Martínez",
        email=Email("laura.martinez@techstartup.com"),
        telefono="+57-315-7894561",
        especialidad=Especialidad("Desarrollo de Software"),
        biografia=Biografia("Desarrolladora Full Stack con experiencia en startups."),
        sector=SectorEmprendimiento.TECNOLOGIA,
        experiencia=NivelExperiencia.EXPERTO,
    )
    datos.update(overrides)
    return Emprendedor(**datos)


def _linkedin() -> RedSocial:
    return RedSocial(
        PlataformaRedSocial.LINKEDIN,
        "https://linkedin.com/in/laura",
        "laura",
    )


def test_emprendedor_defaults() -> None:
    emprendedor = _emprendedor()

    assert emprendedor.estado is EstadoEmprendedor.PENDIENTE_VERIFICACION
    assert emprendedor.puntuacion == 0.0
    assert emprendedor.fecha_verificacion is None
    assert emprendedor.redes_sociales == []
    assert not emprendedor.esta_activo()


def test_puntuacion_is_clamped() -> None:
    emprendedor = _emprendedor(puntuacion=9)
    assert emprendedor.puntuacion == 5.0

    emprendedor.actualizar_puntuacion(7)
    assert emprendedor.puntuacion == 5.0
    emprendedor.actualizar_puntuacion(-3)
    assert emprendedor.puntuacion == 0.0
    emprendedor.actualizar_puntuacion(4.0)
    assert emprendedor.tiene_buena_puntuacion()
    emprendedor.actualizar_puntuacion(3.99)
    assert not emprendedor.tiene_buena_puntuacion()


def test_verificar_records_date_once() -> None:
    emprendedor = _emprendedor()

    emprendedor.verificar()
    primera = emprendedor.fecha_verificacion
    assert primera is not None
    assert emprendedor.esta_verificado()
    assert emprendedor.esta_activo()

    emprendedor.suspender()
    emprendedor.verificar()
    assert emprendedor.fecha_verificacion == primera


def test_estado_verificado_through_update_sets_date() -> None:
    emprendedor = _emprendedor()

    emprendedor.actualizar_informacion(
        ActualizarEmprendedorDTO(estado=EstadoEmprendedor.VERIFICADO)
    )

    assert emprendedor.esta_verificado()
    assert emprendedor.fecha_verificacion is not None


def test_agregar_red_social_rejects_second_account_on_platform() -> None:
    emprendedor = _emprendedor()
    emprendedor.agregar_red_social(_linkedin())

    with pytest.raises(DuplicatePlatformError) as exc_info:
        emprendedor.agregar_red_social(
            RedSocial(
                PlataformaRedSocial.LINKEDIN,
                "https://linkedin.com/in/otra",
                "otra",
            )
        )

    assert exc_info.value.plataforma == "LINKEDIN"
    assert len(emprendedor.redes_sociales) == 1


def test_remover_red_social_reports_whether_it_existed() -> None:
    emprendedor = _emprendedor(redes_sociales=[_linkedin()])

    assert emprendedor.remover_red_social(PlataformaRedSocial.LINKEDIN) is True
    assert emprendedor.remover_red_social("LINKEDIN") is False
    assert emprendedor.redes_sociales == []


def test_build_redes_sociales_detects_duplicates() -> None:
    redes = [
        RedSocialDTO("INSTAGRAM", "https://instagram.com/a", "a"),
        {"plataforma": "INSTAGRAM", "url": "https://instagram.com/b", "nombre_usuario": "b"},
    ]

    with pytest.raises(DuplicatePlatformError):
        build_redes_sociales(redes)


def test_failed_update_leaves_emprendedor_untouched() -> None:
    emprendedor = _emprendedor()

    with pytest.raises(ValidationError):
        emprendedor.actualizar_informacion(
            ActualizarEmprendedorDTO(
                nombre="Otra",
                especialidad="Diseño",
                biografia="corta",
            )
        )

    assert emprendedor.nombre == "Laura"
    assert str(emprendedor.especialidad) == "Desarrollo de Software"


def test_to_dict_matches_attributes() -> None:
    emprendedor = _emprendedor(redes_sociales=[_linkedin()], puntuacion=4.8)
    emprendedor.verificar()

    data = emprendedor.to_dict()

    assert data["id"] == emprendedor.id
    assert data["especialidad"] == "Desarrollo de Software"
    assert data["sector"] == "TECNOLOGIA"
    assert data["estado"] == "VERIFICADO"
    assert data["puntuacion"] == 4.8
    assert data["fecha_verificacion"] == emprendedor.fecha_verificacion.isoformat()
    assert data["redes_sociales"] == [_linkedin().to_dict()]
