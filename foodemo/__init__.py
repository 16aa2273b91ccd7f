"""A small example application built around a configurable foo."""

__version__ = "0.8.0"
__all__ = ["foo", "main"]