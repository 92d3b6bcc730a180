"""Paster: clipboard history cards."""

__version__ = "0.1.0"
