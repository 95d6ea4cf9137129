from __future__ import annotations

from emprendimiento.infrastructure.database import (
    CLIENTES_COLLECTION,
    USUARIOS_COLLECTION,
    InMemoryStore,
)


def test_get_collection_returns_same_dict() -> None:
    store = InMemoryStore()

    coleccion = store.get_collection(USUARIOS_COLLECTION)
    coleccion["u-1"] = object()

    assert store.get_collection(USUARIOS_COLLECTION) is coleccion
    assert store.count(USUARIOS_COLLECTION) == 1
    assert store.collection_names() == [USUARIOS_COLLECTION]


def test_count_of_unknown_collection_is_zero() -> None:
    store = InMemoryStore()

    assert store.count("desconocida") == 0
    assert store.collection_names() == []


def test_clear_single_collection() -> None:
    store = InMemoryStore()
    store.get_collection(USUARIOS_COLLECTION)["u-1"] = object()
    store.get_collection(CLIENTES_COLLECTION)["c-1"] = object()

    store.clear(USUARIOS_COLLECTION)

    assert store.count(USUARIOS_COLLECTION) == 0
    assert store.count(CLIENTES_COLLECTION) == 1


def test_close_drops_every_document() -> None:
    store = InMemoryStore()
    store.get_collection(USUARIOS_COLLECTION)["u-1"] = object()
    store.get_collection(CLIENTES_COLLECTION)["c-1"] = object()

    store.close()

    assert store.count(USUARIOS_COLLECTION) == 0
    assert store.count(CLIENTES_COLLECTION) == 0
    assert store.collection_names() == [CLIENTES_COLLECTION, USUARIOS_COLLECTION]
