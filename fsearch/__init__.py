"""Parallel directory walker that prints paths whose names match regular expressions."""

__version__ = "0.1.0"