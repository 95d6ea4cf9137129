"""
In-Memory Store - Infrastructure Layer

This module provides the explicit key-value store shared by the in-memory
repositories. Each entity type gets its own named collection, a plain dict
keyed by entity id. The store is created by the composition root and
injected into every repository, so its lifecycle is owned by the caller.
"""

from typing import Any, Dict, List, Optional

import structlog

logger = structlog.get_logger(__name__)

USUARIOS_COLLECTION = "usuarios"
CLIENTES_COLLECTION = "clientes"
EMPRENDEDORES_COLLECTION = "emprendedores"


class InMemoryStore:
    """Process-local store holding one collection per entity type."""

    def __init__(self) -> None:
        self._collections: Dict[str, Dict[str, Any]] = {}

    def get_collection(self, collection_name: str) -> Dict[str, Any]:
        """
        Get a collection, creating it on first access.

        The same dict object is returned on every call, so repositories
        observe writes made through any other reference.

        Args:
            collection_name: Name of the collection

        Returns:
            Mapping of entity id to entity
        """
        return self._collections.setdefault(collection_name, {})

    def collection_names(self) -> List[str]:
        return sorted(self._collections)

    def count(self, collection_name: str) -> int:
        return len(self._collections.get(collection_name, {}))

    def clear(self, collection_name: Optional[str] = None) -> None:
        """Empty one collection, or all of them when no name is given."""
        if collection_name is not None:
            self.get_collection(collection_name).clear()
            return
        for collection in self._collections.values():
            collection.clear()

    def close(self) -> None:
        total = sum(len(c) for c in self._collections.values())
        self.clear()
        logger.info("In-memory store closed", documents_dropped=total)
