# partialize/extraction/naming.py

import re
from typing import Dict, Optional, Tuple

from bs4 import Tag

from partialize.extraction.nodes import class_list, get_attribute

_NON_SLUG = re.compile(r"[^a-z0-9]+")


def sanitize_name(name: str) -> str:
    """Lowercase slug: runs of anything outside [a-z0-9] become one `-`."""
    return _NON_SLUG.sub("-", name.lower()).strip("-")


def base_name(node: Tag, ordinal: int) -> str:
    """`tag-id`, else `tag-firstclass`, else `tag`; `component-N` if nothing survives."""
    base = node.name
    element_id = get_attribute(node, "id")
    classes = class_list(node)
    if element_id:
        base += f"-{element_id}"
    elif classes:
        base += f"-{classes[0]}"

    return sanitize_name(base) or f"component-{ordinal}"


class NameAssigner:
    """
    Hands out unique partial names for one conversion run and remembers which
    name was given to which rendered content, so identical subtrees share one
    partial.
    """
    def __init__(self):
        self.used: Dict[str, int] = {}
        self.by_content: Dict[str, str] = {}

    def lookup(self, content: str) -> Optional[str]:
        return self.by_content.get(content.strip())

    def allocate(self, node: Tag, ordinal: int) -> str:
        base = base_name(node, ordinal)
        if base not in self.used:
            self.used[base] = 1
            return base

        count = self.used[base]
        while True:
            count += 1
            name = f"{base}-{count}"
            if name not in self.used:
                break
        self.used[base] = count
        self.used[name] = 1
        return name

    def assign(self, node: Tag, content: str, ordinal: int) -> Tuple[str, bool]:
        """Return (name, created) for a candidate's rendered content."""
        existing = self.lookup(content)
        if existing is not None:
            return existing, False
        name = self.allocate(node, ordinal)
        self.by_content[content.strip()] = name
        return name, True
