"""Solvers for days 2 to 16 of a season of three-part programming puzzles."""

__version__ = "0.1.0"
__all__ = ["__version__"]