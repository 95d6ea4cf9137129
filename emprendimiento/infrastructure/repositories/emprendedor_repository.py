"""
Infrastructure Repository - Emprendedor In-Memory Implementation

This module implements the Emprendedor repository on top of the in-memory
store, including the rating and verification queries.
"""

from typing import List, Optional, Union

import structlog

from emprendimiento.domain.entities.base import coerce_enum
from emprendimiento.domain.entities.emprendedor import (
    CrearEmprendedorDTO,
    Emprendedor,
    EstadoEmprendedor,
    NivelExperiencia,
    SectorEmprendimiento,
    build_redes_sociales,
)
from emprendimiento.domain.errors import DomainError, DuplicateKeyError
from emprendimiento.domain.repositories.emprendedor_repository import (
    IEmprendedorRepository,
)
from emprendimiento.domain.value_objects import Biografia, Email, Especialidad
from emprendimiento.infrastructure.database.memory_store import (
    EMPRENDEDORES_COLLECTION,
)

from .base import InMemoryRepository

logger = structlog.get_logger(__name__)


class EmprendedorMemoryRepository(
    InMemoryRepository[Emprendedor], IEmprendedorRepository
):
    """In-memory implementation of the Emprendedor repository."""

    collection_name = EMPRENDEDORES_COLLECTION
    entity_label = "Emprendedor"

    async def crear(self, datos: CrearEmprendedorDTO) -> Emprendedor:
        """Create a new emprendedor, pending verification with a zero rating."""
        await self._simulate_latency()

        try:
            if self._existe_email(datos.email):
                raise DuplicateKeyError(
                    "email", datos.email, f"Email '{datos.email}' ya existe"
                )

            emprendedor = Emprendedor(
                nombre=datos.nombre,
                apellido=datos.apellido,
                email=Email(datos.email),
                telefono=datos.telefono,
                especialidad=Especialidad(datos.especialidad),
                biografia=Biografia(datos.biografia),
                sector=coerce_enum(SectorEmprendimiento, datos.sector, "Sector"),
                experiencia=coerce_enum(
                    NivelExperiencia, datos.experiencia, "Nivel de experiencia"
                ),
                usuario_id=datos.usuario_id,
                redes_sociales=build_redes_sociales(datos.redes_sociales or []),
            )
        except DomainError as e:
            logger.error(
                "Failed to create emprendedor", email=datos.email, error=e.message
            )
            raise e

        self._items[emprendedor.id] = emprendedor
        logger.info(
            "Emprendedor created",
            emprendedor_id=emprendedor.id,
            sector=emprendedor.sector.value,
        )
        return emprendedor

    async def obtener_por_email(self, email: str) -> Optional[Emprendedor]:
        await self._simulate_latency()
        buscado = (email or "").strip().lower()
        return self._find_one(lambda e: str(e.email) == buscado)

    async def obtener_por_usuario_id(self, usuario_id: str) -> Optional[Emprendedor]:
        await self._simulate_latency()
        return self._find_one(lambda e: e.usuario_id == usuario_id)

    async def obtener_por_estado(
        self, estado: Union[EstadoEmprendedor, str]
    ) -> List[Emprendedor]:
        await self._simulate_latency()
        return self._find_all(lambda e: e.estado == estado)

    async def obtener_por_sector(
        self, sector: Union[SectorEmprendimiento, str]
    ) -> List[Emprendedor]:
        await self._simulate_latency()
        return self._find_all(lambda e: e.sector == sector)

    async def obtener_por_experiencia(
        self, experiencia: Union[NivelExperiencia, str]
    ) -> List[Emprendedor]:
        await self._simulate_latency()
        return self._find_all(lambda e: e.experiencia == experiencia)

    async def obtener_verificados(self) -> List[Emprendedor]:
        await self._simulate_latency()
        return self._find_all(lambda e: e.esta_verificado())

    async def obtener_mejor_puntuados(self, limite: int = 10) -> List[Emprendedor]:
        await self._simulate_latency()
        ordenados = sorted(
            self._items.values(), key=lambda e: e.puntuacion, reverse=True
        )
        return ordenados[: max(limite, 0)]

    async def existe_email(self, email: str) -> bool:
        await self._simulate_latency()
        return self._existe_email(email)

    async def contar_por_sector(
        self, sector: Union[SectorEmprendimiento, str]
    ) -> int:
        await self._simulate_latency()
        return len(self._find_all(lambda e: e.sector == sector))

    async def contar_verificados(self) -> int:
        await self._simulate_latency()
        return len(self._find_all(lambda e: e.esta_verificado()))

    async def obtener_puntuacion_promedio(self) -> float:
        await self._simulate_latency()
        emprendedores = list(self._items.values())
        if not emprendedores:
            return 0.0
        suma = sum(e.puntuacion for e in emprendedores)
        return round(suma / len(emprendedores), 2)

    def _existe_email(self, email: str) -> bool:
        buscado = (email or "").strip().lower()
        return self._find_one(lambda e: str(e.email) == buscado) is not None
