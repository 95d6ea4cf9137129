"""
Application Settings - Main Layer

Use Pydantic Settings for configuration management.
This module handles configuration settings provided using
environment variables, .env files and default values.
"""

from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from emprendimiento.shared import EnumEnvironment, EnumLogLevel
from emprendimiento.shared.consts import (
    DEFAULT_CLIENTE_LATENCY_MS,
    DEFAULT_EMPRENDEDOR_LATENCY_MS,
    DEFAULT_USUARIO_LATENCY_MS,
)


class StoreSettings(BaseSettings):
    """In-memory store and repository settings."""

    usuario_latency_ms: int = Field(
        default=DEFAULT_USUARIO_LATENCY_MS,
        ge=0,
        description="Simulated latency of the usuario repository",
    )
    cliente_latency_ms: int = Field(
        default=DEFAULT_CLIENTE_LATENCY_MS,
        ge=0,
        description="Simulated latency of the cliente repository",
    )
    emprendedor_latency_ms: int = Field(
        default=DEFAULT_EMPRENDEDOR_LATENCY_MS,
        ge=0,
        description="Simulated latency of the emprendedor repository",
    )
    seed_demo_data: bool = Field(
        default=True, description="Load the sample records on startup"
    )

    model_config = SettingsConfigDict(
        env_prefix="STORE_", case_sensitive=False, extra="ignore"
    )


class AppInfoSettings(BaseSettings):
    """Descriptive application settings."""

    title: str = Field(default="Emprendimiento Core", description="App title")
    description: str = Field(
        default="Gestión de usuarios, clientes y emprendedores",
        description="App description",
    )
    version: str = Field(default="1.0.0", description="App version")

    model_config = SettingsConfigDict(
        env_prefix="APP_", case_sensitive=False, extra="ignore"
    )


class LoggingSettings(BaseSettings):
    """Logging configuration settings."""

    level: EnumLogLevel = Field(default=EnumLogLevel.INFO, description="Logging level")
    file_path: Optional[str] = Field(
        default=None, description="Log file path (if None, logs to console)"
    )

    model_config = SettingsConfigDict(
        env_prefix="LOG_", case_sensitive=False, extra="ignore"
    )


class AppSettings(BaseSettings):
    """Main application settings, aggregating all sub-settings."""

    environment: EnumEnvironment = Field(
        default=EnumEnvironment.DEVELOPMENT, description="Application environment"
    )

    app: AppInfoSettings = Field(default_factory=AppInfoSettings)
    logging: LoggingSettings = Field(default_factory=LoggingSettings)
    store: StoreSettings = Field(default_factory=StoreSettings)

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        env_nested_delimiter="__",
        extra="ignore",
    )


def get_settings() -> AppSettings:
    """
    Get application settings instance Factory.

    Used to be mocked in tests, allowing different settings per environment.
    """
    return AppSettings()
