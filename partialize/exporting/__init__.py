# partialize/exporting/__init__.py

"""
Exporting Package

Writes extraction results to disk as EJS views.
"""

from .writer import ViewWriter

__all__ = ["ViewWriter"]
