from .memory_store import (
    CLIENTES_COLLECTION,
    EMPRENDEDORES_COLLECTION,
    USUARIOS_COLLECTION,
    InMemoryStore,
)
from .seed import seed_demo_data

__all__ = [
    "InMemoryStore",
    "USUARIOS_COLLECTION",
    "CLIENTES_COLLECTION",
    "EMPRENDEDORES_COLLECTION",
    "seed_demo_data",
]
