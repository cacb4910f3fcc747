"""Catalog Admin: product, brand and type management backend."""

__version__ = "0.1.0"
