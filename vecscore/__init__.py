"""Parse a compact text notation for musical scores into Python objects."""

__version__ = "0.1.0"
__all__ = ["data", "parser", "processor", "cli"]