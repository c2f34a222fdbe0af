"""Folio: personal investment portfolio tracker with live multi-provider quotes."""

__version__ = "0.1.0"
