"""
Domain Errors

This module defines the error taxonomy shared by every aggregate.
Expected "not found" outcomes are not errors: repositories and services
return None, False or a failed OperationResult instead.
"""

from typing import Any, Dict, Optional


class DomainError(Exception):
    """Base class for domain errors."""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        self.message = message
        self.details = details or {}
        super().__init__(message)


class ValidationError(DomainError):
    """Raised when a value object, DTO or business rule rejects its input."""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(message, details)


class DuplicateKeyError(ValidationError):
    """Raised when a unique key (email, username, document) is already taken."""

    def __init__(
        self,
        field: str,
        value: str,
        message: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
    ):
        self.field = field
        self.value = value
        merged = {"field": field, "value": value}
        merged.update(details or {})
        super().__init__(message or f"{field} '{value}' ya existe", merged)


class DuplicatePlatformError(ValidationError):
    """Raised when an Emprendedor already has an account on a platform."""

    def __init__(self, plataforma: str):
        self.plataforma = plataforma
        super().__init__(
            f"Ya existe una cuenta de {plataforma}",
            details={"plataforma": plataforma},
        )
