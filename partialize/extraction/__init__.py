# partialize/extraction/__init__.py

"""
Extraction Package

Finds reusable subtrees in an HTML document, names and deduplicates them,
and rewrites the document to include them as EJS partials.
"""

from .extractor import PartialExtractor, extract_partials, generate_views
from .models import Candidate, Partial, ExtractionContext, ExtractionResult
from .includes import IncludeGraph, inline_includes

__all__ = [
    "PartialExtractor",
    "extract_partials",
    "generate_views",
    "Candidate",
    "Partial",
    "ExtractionContext",
    "ExtractionResult",
    "IncludeGraph",
    "inline_includes",
]
