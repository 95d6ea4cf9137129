"""
Shared module - Cross-cutting concerns

Constants, enums and the logging setup used by every other layer. It must
not depend on the domain, application or infrastructure packages.
"""

from .consts import EnumEnvironment, EnumLogLevel
from .logging import configure_logging, get_logger, update_logging_from_settings

__all__ = [
    "EnumEnvironment",
    "EnumLogLevel",
    "configure_logging",
    "get_logger",
    "update_logging_from_settings",
]
