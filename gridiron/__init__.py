"""Gridiron - season simulation engine for an American football league."""

__version__ = "0.1.0"
