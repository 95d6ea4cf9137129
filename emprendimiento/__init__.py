"""Emprendimiento core: usuarios, clientes and emprendedores of a marketplace."""

__version__ = "1.0.0"
