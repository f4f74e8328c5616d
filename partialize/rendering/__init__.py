# partialize/rendering/__init__.py

"""
Rendering Package

Thin wrappers around BeautifulSoup for parsing, serializing and pretty-printing.
"""

from .parser import parse_document, render_node
from .formatter import format_markup

__all__ = ["parse_document", "render_node", "format_markup"]
