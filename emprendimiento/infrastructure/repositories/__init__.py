from .cliente_repository import ClienteMemoryRepository
from .emprendedor_repository import EmprendedorMemoryRepository
from .usuario_repository import UsuarioMemoryRepository

__all__ = [
    "UsuarioMemoryRepository",
    "ClienteMemoryRepository",
    "EmprendedorMemoryRepository",
]
