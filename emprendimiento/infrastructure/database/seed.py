"""
Demo Seed Data - Infrastructure Layer

Sample records loaded into a store for the demo runner. Entities are built
directly with fixed ids, bypassing the repositories' create path.
"""

from datetime import date

import structlog

from emprendimiento.domain.entities.cliente import (
    CategoriaCliente,
    Cliente,
    EstadoCliente,
)
from emprendimiento.domain.entities.emprendedor import (
    Emprendedor,
    EstadoEmprendedor,
    NivelExperiencia,
    SectorEmprendimiento,
)
from emprendimiento.domain.entities.usuario import RolUsuario, Usuario
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

from .memory_store import (
    CLIENTES_COLLECTION,
    EMPRENDEDORES_COLLECTION,
    USUARIOS_COLLECTION,
    InMemoryStore,
)

logger = structlog.get_logger(__name__)


def _usuarios() -> list:
    return [
        Usuario(
            id="admin-001",
            username=Username("admin"),
            email=Email("admin@emprendimiento.com"),
            password=Password("Admin123$"),
            nombre="Carlos",
            apellido="Administrador",
            rol=RolUsuario.ADMINISTRADOR,
            telefono="+57-300-1234567",
        ),
        Usuario(
            id="emp-001",
            username=Username("maria_tech"),
            email=Email("maria@techstartup.com"),
            password=Password("Emprendedor123$"),
            nombre="María",
            apellido="González",
            rol=RolUsuario.EMPRENDEDOR,
            telefono="+57-310-9876543",
        ),
        Usuario(
            id="cli-001",
            username=Username("juan_cliente"),
            email=Email("juan@email.com"),
            password=Password("Cliente123$"),
            nombre="Juan",
            apellido="Pérez",
            rol=RolUsuario.CLIENTE,
            telefono="+57-320-5555555",
        ),
    ]


def _clientes() -> list:
    return [
        Cliente(
            id="cli-001",
            nombre="Ana",
            apellido="Rodríguez",
            email=Email("ana.rodriguez@email.com"),
            telefono="+57-311-2468135",
            numero_documento=NumeroDocumento("12345678", TipoDocumento.CEDULA),
            fecha_nacimiento=date(1990, 5, 15),
            direccion=Direccion("Calle 123 #45-67", "Bogotá", "Cundinamarca", "110111"),
            usuario_id="cli-001",
            estado=EstadoCliente.ACTIVO,
            categoria=CategoriaCliente.ORO,
        ),
        Cliente(
            id="cli-002",
            nombre="Carlos",
            apellido="Méndez",
            email=Email("carlos.mendez@gmail.com"),
            telefono="+57-320-9753186",
            numero_documento=NumeroDocumento("87654321", TipoDocumento.CEDULA),
            fecha_nacimiento=date(1985, 12, 3),
            direccion=Direccion("Carrera 50 #30-25", "Medellín", "Antioquia", "050001"),
            estado=EstadoCliente.ACTIVO,
            categoria=CategoriaCliente.PLATA,
        ),
        Cliente(
            id="cli-003",
            nombre="Sophia",
            apellido="Johnson",
            email=Email("sophia.johnson@international.com"),
            telefono="+1-555-0123456",
            numero_documento=NumeroDocumento("AB1234567", TipoDocumento.PASSPORT),
            fecha_nacimiento=date(1992, 8, 20),
            direccion=Direccion("International Street 456", "Cartagena", "Bolívar"),
            estado=EstadoCliente.ACTIVO,
            categoria=CategoriaCliente.PLATINO,
        ),
    ]


def _emprendedores() -> list:
    laura = Emprendedor(
        id="emp-001",
        nombre="Laura",
        apellido="Martínez",
        email=Email("laura.martinez@techstartup.com"),
        telefono="+57-315-7894561",
        especialidad=Especialidad("Desarrollo de Software"),
        biografia=Biografia(
            "Desarrolladora Full Stack con 8 años de experiencia en crear "
            "soluciones tecnológicas innovadoras para startups. Especializada "
            "en React, Node.js y arquitecturas cloud. Fundadora de 3 empresas "
            "exitosas en el sector fintech."
        ),
        sector=SectorEmprendimiento.TECNOLOGIA,
        experiencia=NivelExperiencia.EXPERTO,
        usuario_id="emp-001",
        redes_sociales=[
            RedSocial(
                PlataformaRedSocial.LINKEDIN,
                "https://linkedin.com/in/laura-martinez-dev",
                "laura-martinez-dev",
            ),
            RedSocial(
                PlataformaRedSocial.TWITTER,
                "https://twitter.com/laura_codes",
                "laura_codes",
            ),
        ],
        puntuacion=4.8,
    )
    laura.verificar()

    diego = Emprendedor(
        id="emp-002",
        nombre="Diego",
        apellido="Ramírez",
        email=Email("diego.ramirez@foodie.com"),
        telefono="+57-300-1122334",
        especialidad=Especialidad("Chef y Creación de Productos Alimenticios"),
        biografia=Biografia(
            "Chef profesional con experiencia en restaurantes de alta cocina. "
            "Especializado en comida saludable y sostenible, con certificaciones "
            "internacionales en nutrición y manejo de alimentos orgánicos."
        ),
        sector=SectorEmprendimiento.ALIMENTACION,
        experiencia=NivelExperiencia.AVANZADO,
        redes_sociales=[
            RedSocial(
                PlataformaRedSocial.INSTAGRAM,
                "https://instagram.com/chef_diego_gourmet",
                "chef_diego_gourmet",
            ),
            RedSocial(
                PlataformaRedSocial.YOUTUBE,
                "https://youtube.com/c/DiegoGourmetChannel",
                "DiegoGourmetChannel",
            ),
        ],
        estado=EstadoEmprendedor.ACTIVO,
        puntuacion=4.5,
    )

    camila = Emprendedor(
        id="emp-003",
        nombre="Camila",
        apellido="Torres",
        email=Email("camila.torres@fashiondesign.com"),
        telefono="+57-310-5566778",
        especialidad=Especialidad("Diseño de Moda Sostenible"),
        biografia=Biografia(
            "Diseñadora de modas enfocada en crear piezas únicas utilizando "
            "materiales reciclados y técnicas artesanales tradicionales "
            "colombianas. Graduada de diseño con especialización en sostenibilidad."
        ),
        sector=SectorEmprendimiento.MODA,
        experiencia=NivelExperiencia.INTERMEDIO,
        usuario_id="emp-003",
        redes_sociales=[
            RedSocial(
                PlataformaRedSocial.INSTAGRAM,
                "https://instagram.com/camila_eco_fashion",
                "camila_eco_fashion",
            ),
            RedSocial(
                PlataformaRedSocial.FACEBOOK,
                "https://facebook.com/CamilaEcoFashion",
                "CamilaEcoFashion",
            ),
        ],
        estado=EstadoEmprendedor.PENDIENTE_VERIFICACION,
        puntuacion=4.2,
    )
    return [laura, diego, camila]


def seed_demo_data(store: InMemoryStore) -> None:
    """Load the sample usuarios, clientes and emprendedores into ``store``."""
    for collection_name, entities in (
        (USUARIOS_COLLECTION, _usuarios()),
        (CLIENTES_COLLECTION, _clientes()),
        (EMPRENDEDORES_COLLECTION, _emprendedores()),
    ):
        collection = store.get_collection(collection_name)
        for entity in entities:
            collection[entity.id] = entity
        logger.info("Demo data loaded", collection=collection_name, count=len(entities))
