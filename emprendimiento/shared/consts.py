from enum import Enum


class EnumEnvironment(str, Enum):
    DEVELOPMENT = "development"
    TESTING = "testing"
    PRODUCTION = "production"


class EnumLogLevel(str, Enum):
    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"
    CRITICAL = "CRITICAL"


# Simulated network latency of each in-memory repository, in milliseconds.
DEFAULT_USUARIO_LATENCY_MS = 100
DEFAULT_CLIENTE_LATENCY_MS = 120
DEFAULT_EMPRENDEDOR_LATENCY_MS = 150
