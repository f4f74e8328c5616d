# partialize/extraction/patterns.py

from collections import Counter
from typing import Iterable, List

from bs4 import Tag

from partialize.extraction.nodes import class_list, is_element, walk_elements

STATE_CLASSES = frozenset({"active", "current", "open", "closed", "selected"})
STATE_CLASS_PREFIXES = ("is-", "has-", "js-", "w--")


def is_state_class(class_name: str) -> bool:
    return class_name in STATE_CLASSES or class_name.startswith(STATE_CLASS_PREFIXES)


def normalize_class_list(classes: Iterable[str]) -> List[str]:
    """Lowercase, dedupe and sort classes, dropping volatile state classes."""
    normalized = set()
    for class_name in classes:
        class_name = class_name.strip().lower()
        if not class_name or is_state_class(class_name):
            continue
        normalized.add(class_name)
    return sorted(normalized)


def pattern_key(node: Tag) -> str:
    """Structural signature: tag name plus normalized classes, e.g. `div.card.shadow`."""
    if not is_element(node):
        return ""
    classes = normalize_class_list(class_list(node))
    if not classes:
        return node.name
    return ".".join([node.name, *classes])


class PatternCounter:
    """
    Counts pattern keys among the descendants of a subtree.
    """
    def __init__(self, max_depth: int):
        self.max_depth = max_depth

    def count(self, root: Tag, accept=None) -> Counter:
        counts = Counter()
        for node, _ in walk_elements(root, self.max_depth):
            if accept is not None and not accept(node):
                continue
            key = pattern_key(node)
            if key:
                counts[key] += 1
        return counts
