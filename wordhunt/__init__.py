"""Solve 4x4 Word Hunt boards against a dictionary of words."""

__version__ = "0.1.0"
__all__ = ["board", "dictionary", "solver"]