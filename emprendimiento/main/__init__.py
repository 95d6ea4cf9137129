"""
Main module - Main/Composition Root Layer

This module wires the application together: it loads the settings,
builds the dependency container and hosts the demo entry point.
"""

from .config import AppSettings, get_settings
from .container import AppContainer, app_lifespan, get_container, init_container

__all__ = [
    "AppSettings",
    "get_settings",
    "AppContainer",
    "init_container",
    "get_container",
    "app_lifespan",
]
