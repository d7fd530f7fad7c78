"""Selector conditions, typed values, errors and self-updating for dasel."""

__version__ = "1.24.0"

__all__ = ["__version__"]