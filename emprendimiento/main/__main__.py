"""
Main module entry point.

This allows running the demo as: python -m emprendimiento.main
"""

from .demo import main

if __name__ == "__main__":
    main()
