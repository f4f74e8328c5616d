# partialize/extraction/nodes.py

"""
Read-only helpers over BeautifulSoup nodes shared by the selection heuristics.
"""

from typing import Iterator, List, Tuple

from bs4 import BeautifulSoup, NavigableString, Tag
from bs4.element import PreformattedString

NON_CONTENT_TAGS = frozenset({
    "script", "style", "link", "meta", "title", "noscript",
    "svg", "path", "circle", "rect", "line", "polygon", "polyline", "defs", "g", "use",
})
EMBED_TAGS = frozenset({"style", "script", "link"})


def is_element(node) -> bool:
    return isinstance(node, Tag) and not isinstance(node, BeautifulSoup)


def get_attribute(node: Tag, key: str) -> str:
    """Attribute value as a single string; multi-valued attributes are space-joined."""
    value = node.get(key)
    if value is None:
        return ""
    if isinstance(value, (list, tuple)):
        return " ".join(value)
    return str(value)


def class_list(node: Tag) -> List[str]:
    return get_attribute(node, "class").split()


def identity_text(node: Tag) -> str:
    """Lowercased `class id` string used for keyword matching."""
    return f"{get_attribute(node, 'class').lower()} {get_attribute(node, 'id').lower()}"


def is_non_content(node) -> bool:
    if not is_element(node):
        return True
    return node.name in NON_CONTENT_TAGS


def element_children(node: Tag) -> List[Tag]:
    return [child for child in node.children if is_element(child)]


def content_children(node: Tag) -> List[Tag]:
    return [child for child in element_children(node) if not is_non_content(child)]


def is_embed_only(node) -> bool:
    """An element whose only children are style/script/link tags and blank text."""
    if not is_element(node):
        return False

    has_element = False
    for child in node.children:
        if isinstance(child, Tag):
            if child.name not in EMBED_TAGS:
                return False
            has_element = True
        elif isinstance(child, NavigableString) and not isinstance(child, PreformattedString):
            if child.strip():
                return False
    return has_element


def text_length(node: Tag) -> int:
    """Length of the visible, trimmed text under a node."""
    return sum(len(text) for text in node.stripped_strings)


def node_depth(node: Tag) -> int:
    return sum(1 for _ in node.parents)


def walk_elements(root: Tag, max_depth: int) -> Iterator[Tuple[Tag, int]]:
    """Yield (element, relative depth) for descendants of root, depth 1..max_depth, in document order."""
    def walk(node: Tag, depth: int):
        if depth > max_depth:
            return
        if depth > 0:
            yield node, depth
        for child in element_children(node):
            yield from walk(child, depth + 1)

    yield from walk(root, 0)


def unique_nodes(nodes: List[Tag]) -> List[Tag]:
    """Drop repeats by identity; Tag equality compares markup, not identity."""
    seen = set()
    unique = []
    for node in nodes:
        if node is None or id(node) in seen:
            continue
        seen.add(id(node))
        unique.append(node)
    return unique
