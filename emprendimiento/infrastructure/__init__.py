"""
Infrastructure Layer Package

This package contains the in-memory store, the demo seed data and the
repository implementations of the domain contracts.
"""
