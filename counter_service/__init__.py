"""Shared in-memory counter exposed over HTTP."""

__version__ = "1.0.0"
