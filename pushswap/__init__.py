"""Two-stack integer sorting with a move solver, checker and number generator."""

__version__ = "0.1.0"
__all__ = ["__version__"]