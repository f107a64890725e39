"""A grid snake game with smooth animation and rounded bends."""

__version__ = "0.1.0"
__all__ = ["__version__"]