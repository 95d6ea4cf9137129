"""
Infrastructure Repository - In-Memory Base

Shared read, update and delete behaviour for repositories backed by an
``InMemoryStore`` collection. Every public operation awaits a simulated
network latency first; the work after that await runs without yielding.
"""

import asyncio
from typing import Any, Callable, Dict, Generic, List, Optional, TypeVar

import structlog

from emprendimiento.domain.entities.result import OperationResult
from emprendimiento.domain.errors import DomainError
from emprendimiento.infrastructure.database.memory_store import InMemoryStore

logger = structlog.get_logger(__name__)

T = TypeVar("T")


class InMemoryRepository(Generic[T]):
    """Base class for the in-memory repositories."""

    collection_name: str = ""
    entity_label: str = ""

    def __init__(self, store: InMemoryStore, latency_ms: int = 0):
        """Initialize repository with the shared store and its latency."""
        self.store = store
        self.latency_ms = latency_ms

    @property
    def _items(self) -> Dict[str, T]:
        return self.store.get_collection(self.collection_name)

    async def _simulate_latency(self) -> None:
        await asyncio.sleep(max(self.latency_ms, 0) / 1000)

    def _find_one(self, predicate: Callable[[T], bool]) -> Optional[T]:
        for entity in self._items.values():
            if predicate(entity):
                return entity
        return None

    def _find_all(self, predicate: Callable[[T], bool]) -> List[T]:
        return [entity for entity in self._items.values() if predicate(entity)]

    async def obtener_por_id(self, entity_id: str) -> Optional[T]:
        await self._simulate_latency()
        return self._items.get(entity_id)

    async def obtener_todos(self) -> List[T]:
        await self._simulate_latency()
        return list(self._items.values())

    async def actualizar(self, entity_id: str, datos: Any) -> OperationResult[T]:
        """
        Apply a partial update to a stored entity.

        Returns:
            A successful result with the entity, or a failed result when the
            id is unknown

        Raises:
            DomainError: If the entity rejects the update
        """
        await self._simulate_latency()

        entity = self._items.get(entity_id)
        if entity is None:
            logger.warning(
                f"{self.entity_label} not found for update", entity_id=entity_id
            )
            return OperationResult.fail(
                error=f"{self.entity_label} con ID '{entity_id}' no encontrado",
                message=f"{self.entity_label} no existe",
            )

        try:
            entity.actualizar_informacion(datos)
        except DomainError as e:
            logger.error(
                f"Failed to update {self.entity_label.lower()}",
                entity_id=entity_id,
                error=e.message,
            )
            raise e

        logger.info(f"{self.entity_label} updated", entity_id=entity_id)
        return OperationResult.ok(
            entity, message=f"{self.entity_label} actualizado exitosamente"
        )

    async def eliminar(self, entity_id: str) -> bool:
        await self._simulate_latency()

        if self._items.pop(entity_id, None) is None:
            return False
        logger.info(f"{self.entity_label} deleted", entity_id=entity_id)
        return True
