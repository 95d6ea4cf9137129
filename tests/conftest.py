from __future__ import annotations

import sys
from datetime import date
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from emprendimiento.application.services import (  # noqa: E402
    ClienteService,
    EmprendedorService,
    UsuarioService,
)
from emprendimiento.domain.entities import (  # noqa: E402
    CrearClienteDTO,
    CrearEmprendedorDTO,
    CrearUsuarioDTO,
    DireccionDTO,
    NivelExperiencia,
    RedSocialDTO,
    RolUsuario,
    SectorEmprendimiento,
)
from emprendimiento.domain.value_objects import (  # noqa: E402
    PlataformaRedSocial,
    TipoDocumento,
)
from emprendimiento.infrastructure.database import (  # noqa: E402
    InMemoryStore,
    seed_demo_data,
)
from emprendimiento.infrastructure.repositories import (  # noqa: E402
    ClienteMemoryRepository,
    EmprendedorMemoryRepository,
    UsuarioMemoryRepository,
)


@pytest.fixture()
def store() -> InMemoryStore:
    return InMemoryStore()


@pytest.fixture()
def seeded_store(store: InMemoryStore) -> InMemoryStore:
    seed_demo_data(store)
    return store


@pytest.fixture()
def usuario_repository(store: InMemoryStore) -> UsuarioMemoryRepository:
    return UsuarioMemoryRepository(store)


@pytest.fixture()
def cliente_repository(store: InMemoryStore) -> ClienteMemoryRepository:
    return ClienteMemoryRepository(store)


@pytest.fixture()
def emprendedor_repository(store: InMemoryStore) -> EmprendedorMemoryRepository:
    return EmprendedorMemoryRepository(store)


@pytest.fixture()
def usuario_service(usuario_repository: UsuarioMemoryRepository) -> UsuarioService:
    return UsuarioService(usuario_repository=usuario_repository)


@pytest.fixture()
def cliente_service(cliente_repository: ClienteMemoryRepository) -> ClienteService:
    return ClienteService(cliente_repository=cliente_repository)


@pytest.fixture()
def emprendedor_service(
    emprendedor_repository: EmprendedorMemoryRepository,
) -> EmprendedorService:
    return EmprendedorService(emprendedor_repository=emprendedor_repository)


@pytest.fixture()
def crear_usuario_dto() -> CrearUsuarioDTO:
    return CrearUsuarioDTO(
        username="lucia_dev",
        email="Lucia@Example.com",
        password="Segura123$",
        nombre="Lucía",
        apellido="Gómez",
        rol=RolUsuario.EMPRENDEDOR,
        telefono="+57-300-0000001",
    )


@pytest.fixture()
def crear_cliente_dto() -> CrearClienteDTO:
    return CrearClienteDTO(
        nombre="Pedro",
        apellido="Castaño",
        email="pedro.castano@example.com",
        telefono="+57-301-2223344",
        tipo_documento=TipoDocumento.CEDULA,
        numero_documento="1.020.304.050",
        fecha_nacimiento=date(1990, 1, 1),
        direccion=DireccionDTO(
            calle="Calle 10 #5-20",
            ciudad="Bogotá",
            departamento="Cundinamarca",
            codigo_postal="110111",
        ),
    )


@pytest.fixture()
def crear_emprendedor_dto() -> CrearEmprendedorDTO:
    return CrearEmprendedorDTO(
        nombre="Valentina",
        apellido="Rojas",
        email="valentina@artesanias.com",
        telefono="+57-312-4445566",
        especialidad="Cerámica artesanal",
        biografia="Ceramista con diez años de oficio creando piezas únicas.",
        sector=SectorEmprendimiento.ARTE,
        experiencia=NivelExperiencia.INTERMEDIO,
        redes_sociales=[
            RedSocialDTO(
                plataforma=PlataformaRedSocial.INSTAGRAM,
                url="https://instagram.com/Valentina_Ceramica",
                nombre_usuario="valentina_ceramica",
            )
        ],
    )
