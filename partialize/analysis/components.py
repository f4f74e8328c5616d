# partialize/analysis/components.py

from collections import Counter
from dataclasses import dataclass, field
from typing import Dict, List

from bs4 import BeautifulSoup

from config.config import config
from partialize.extraction.filters import is_component_candidate
from partialize.extraction.nodes import element_children
from partialize.extraction.patterns import pattern_key
from partialize.rendering.parser import parse_document
from partialize.utils.logging import Logger

logger = Logger.get_logger("AnalysisLogger", config.paths.log_dir / config.logging.analysis_log)

NAME_SUFFIXES = (
    ("card", "Card"),
    ("button", "Button"),
    ("nav", "Item"),
    ("list", "Item"),
    ("form", "Field"),
)


@dataclass
class ElementPattern:
    tag_name: str
    count: int = 0
    attributes: Counter = field(default_factory=Counter)
    children: Counter = field(default_factory=Counter)


@dataclass
class ComponentSuggestion:
    name: str
    description: str
    tag_name: str
    pattern_key: str
    count: int
    attributes: List[str] = field(default_factory=list)
    children: List[str] = field(default_factory=list)


def suggest_name(tag_name: str, key: str) -> str:
    name = tag_name.capitalize()
    for keyword, suffix in NAME_SUFFIXES:
        if keyword in key:
            return name + suffix
    return name + "Component"


def describe(pattern: ElementPattern) -> str:
    description = f"A reusable {pattern.tag_name} component"
    if pattern.count > 1:
        description += f" (appears {pattern.count} times)"
    if pattern.attributes:
        description += " with configurable attributes"
    if pattern.children:
        description += " and child elements"
    return description


class ComponentAnalyzer:
    """Summarises recurring element patterns as component suggestions."""

    def collect_patterns(self, soup: BeautifulSoup) -> Dict[str, ElementPattern]:
        patterns: Dict[str, ElementPattern] = {}
        for node in soup.find_all(True):
            if not is_component_candidate(node):
                continue
            key = pattern_key(node)
            pattern = patterns.setdefault(key, ElementPattern(tag_name=node.name))
            pattern.count += 1
            pattern.attributes.update(node.attrs.keys())
            pattern.children.update(child.name for child in element_children(node))
        return patterns

    @staticmethod
    def _common(counter: Counter, total: int) -> List[str]:
        # Present on at least half of the instances.
        return sorted(key for key, seen in counter.items() if seen * 2 >= total)

    def suggest(self, patterns: Dict[str, ElementPattern]) -> List[ComponentSuggestion]:
        suggestions = []
        for key, pattern in patterns.items():
            if pattern.count < 2 and len(pattern.children) < 2:
                continue
            suggestions.append(ComponentSuggestion(
                name=suggest_name(pattern.tag_name, key),
                description=describe(pattern),
                tag_name=pattern.tag_name,
                pattern_key=key,
                count=pattern.count,
                attributes=self._common(pattern.attributes, pattern.count),
                children=self._common(pattern.children, pattern.count),
            ))
        suggestions.sort(key=lambda s: (-s.count, s.pattern_key))
        return suggestions


def analyze_components(content: str, parser: str = None) -> List[ComponentSuggestion]:
    soup = parse_document(content, parser)
    analyzer = ComponentAnalyzer()
    suggestions = analyzer.suggest(analyzer.collect_patterns(soup))
    logger.info(f"Found {len(suggestions)} component suggestions.")
    return suggestions
