"""
Services Package - Application Layer

One service per aggregate. Each receives its repository through
dependency-injector wiring and adds the cross-field rules, derived
queries and statistics on top of it.
"""

from .cliente_service import ClienteService
from .emprendedor_service import EmprendedorService
from .usuario_service import UsuarioService

__all__ = ["UsuarioService", "ClienteService", "EmprendedorService"]
