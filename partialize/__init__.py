# partialize/__init__.py

"""
partialize - Source Package

Splits HTML documents into deduplicated EJS partials plus a main template
that includes them.
"""

__version__ = "1.0.0"

from .extraction import PartialExtractor, extract_partials, generate_views, inline_includes
from .analysis import analyze_components
from .exporting import ViewWriter
from .exceptions import PartializeError, ParseError, RenderError

__all__ = [
    'PartialExtractor', 'extract_partials', 'generate_views', 'inline_includes',
    'analyze_components', 'ViewWriter', 'PartializeError', 'ParseError', 'RenderError',
]
