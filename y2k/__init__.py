"""Interpreter for an esoteric language encoded in file timestamps."""

__version__ = "0.1.0"
__all__ = ["__version__"]