"""
Domain Entities Package

This package contains the aggregates of the marketplace, their status
enumerations and the DTOs used to create or update them.
"""

from .cliente import (
    ActualizarClienteDTO,
    CategoriaCliente,
    Cliente,
    CrearClienteDTO,
    DireccionDTO,
    EstadoCliente,
    calcular_edad,
)
from .emprendedor import (
    ActualizarEmprendedorDTO,
    CrearEmprendedorDTO,
    Emprendedor,
    EstadoEmprendedor,
    NivelExperiencia,
    RedSocialDTO,
    SectorEmprendimiento,
)
from .result import OperationResult
from .usuario import (
    ActualizarUsuarioDTO,
    CrearUsuarioDTO,
    EstadoUsuario,
    RolUsuario,
    Usuario,
)

__all__ = [
    "Usuario",
    "RolUsuario",
    "EstadoUsuario",
    "CrearUsuarioDTO",
    "ActualizarUsuarioDTO",
    "Cliente",
    "EstadoCliente",
    "CategoriaCliente",
    "CrearClienteDTO",
    "ActualizarClienteDTO",
    "DireccionDTO",
    "calcular_edad",
    "Emprendedor",
    "EstadoEmprendedor",
    "NivelExperiencia",
    "SectorEmprendimiento",
    "CrearEmprendedorDTO",
    "ActualizarEmprendedorDTO",
    "RedSocialDTO",
    "OperationResult",
]
