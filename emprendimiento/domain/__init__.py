"""
Domain Layer Package

This package contains the core business logic and rules of the application.
It defines value objects, entities, repository contracts and domain services
without dependencies on external frameworks or infrastructure concerns.
"""
