"""
Repositories Package

This package contains interfaces defining repository contracts
for data access operations. Specific implementations are provided
by the infrastructure layer.
"""

from .cliente_repository import IClienteRepository
from .emprendedor_repository import IEmprendedorRepository
from .usuario_repository import IUsuarioRepository

__all__ = ["IUsuarioRepository", "IClienteRepository", "IEmprendedorRepository"]
