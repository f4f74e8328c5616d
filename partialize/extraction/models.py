# partialize/extraction/models.py

from collections import Counter
from dataclasses import dataclass, field
from typing import Dict, Iterator, Optional

from bs4 import Tag

from config.config import ExtractionConfig, config
from partialize.extraction.naming import NameAssigner


@dataclass
class Candidate:
    node: Tag
    depth: int
    pattern_key: str


@dataclass
class Partial:
    name: str
    html: str
    source: Optional[Tag] = None


@dataclass
class ExtractionContext:
    """Mutable state for a single document conversion. Never shared between runs."""
    settings: ExtractionConfig = field(default_factory=lambda: config.extraction)
    names: NameAssigner = field(default_factory=NameAssigner)
    partials: Dict[str, Partial] = field(default_factory=dict)
    references: Counter = field(default_factory=Counter)


@dataclass
class ExtractionResult:
    main_document: str
    partials: Dict[str, str]
    references: Dict[str, int] = field(default_factory=dict)

    def __iter__(self) -> Iterator:
        # Unpacks as (main_document, partials).
        yield self.main_document
        yield self.partials
