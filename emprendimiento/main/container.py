"""
Dependency container injection module - Main Layer

This module implements the dependency injection container that owns the
in-memory store, the repositories built on it and the application
services.
"""

from contextlib import asynccontextmanager
from typing import Optional

from dependency_injector import containers, providers

from emprendimiento.application.services import (
    ClienteService,
    EmprendedorService,
    UsuarioService,
)
from emprendimiento.infrastructure.database import InMemoryStore, seed_demo_data
from emprendimiento.infrastructure.repositories import (
    ClienteMemoryRepository,
    EmprendedorMemoryRepository,
    UsuarioMemoryRepository,
)
from emprendimiento.shared import get_logger

from .config import AppSettings

logger = get_logger(__name__)


class AppContainer(containers.DeclarativeContainer):
    """Composition Root using dependency-injector."""

    wiring_config = containers.WiringConfiguration(packages=["..application"])

    # Settings
    config = providers.Configuration()

    # Infrastructure
    store = providers.Singleton(InMemoryStore)

    usuario_repository = providers.Singleton(
        UsuarioMemoryRepository,
        store=store,
        latency_ms=config.store.usuario_latency_ms,
    )

    cliente_repository = providers.Singleton(
        ClienteMemoryRepository,
        store=store,
        latency_ms=config.store.cliente_latency_ms,
    )

    emprendedor_repository = providers.Singleton(
        EmprendedorMemoryRepository,
        store=store,
        latency_ms=config.store.emprendedor_latency_ms,
    )

    # Application (services)
    usuario_service = providers.Factory(
        UsuarioService,
        usuario_repository=usuario_repository,
    )

    cliente_service = providers.Factory(
        ClienteService,
        cliente_repository=cliente_repository,
    )

    emprendedor_service = providers.Factory(
        EmprendedorService,
        emprendedor_repository=emprendedor_repository,
    )


# -------------------------
# Global Container Instance
# -------------------------
_app_container: Optional[AppContainer] = None


def init_container(settings: AppSettings) -> AppContainer:
    """Initialize global container with application settings."""

    global _app_container

    container = AppContainer()
    container.config.from_pydantic(settings)
    _app_container = container
    return container


def get_container() -> AppContainer:
    """Get the initialized global container."""

    if _app_container is None:
        raise RuntimeError("Container has not been initialized yet")

    return _app_container


@asynccontextmanager
async def app_lifespan():
    """
    Lifecycle of the in-memory store.

    Seeds the demo records on startup when ``store.seed_demo_data`` is
    enabled and empties the store on shutdown.
    """
    container = get_container()
    store = container.store()

    try:
        if container.config.store.seed_demo_data():
            seed_demo_data(store)
        logger.info(
            "container.resources.initialized",
            collections=store.collection_names(),
        )
        yield container

    finally:
        store.close()
        logger.info("container.resources.shutdown")
