"""Utility helpers for Catalog Admin."""
