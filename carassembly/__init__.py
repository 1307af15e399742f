"""Interactive console car assembly simulator with part-combination checks."""

__version__ = "0.1.0"

__all__ = ["__version__"]