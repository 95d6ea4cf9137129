"""
Application Layer Package

This package contains the application services and the DTOs they return.
It orchestrates the domain entities through the repository contracts.
"""
