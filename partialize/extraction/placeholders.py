# partialize/extraction/placeholders.py

from typing import Dict, Iterable, Tuple

from config.config import config
from partialize.extraction.rewriter import PLACEHOLDER_PREFIX


def placeholder_markup(name: str) -> str:
    return f"<!--{PLACEHOLDER_PREFIX}{name}-->"


def include_directive(name: str, partials_dir: str = None) -> str:
    partials_dir = partials_dir or config.files.partials_dir
    return f"<%- include('{partials_dir}/{name}') %>"


class PlaceholderResolver:
    """
    Turns rendered placeholder comments into EJS include directives.

    The same replacement map is applied to the main document and to every
    partial, so placeholders nested at any depth resolve in a single pass.
    """
    def __init__(self, names: Iterable[str], partials_dir: str = None):
        self.replacements = {
            placeholder_markup(name): include_directive(name, partials_dir)
            for name in names
        }

    def resolve(self, content: str) -> str:
        for placeholder, include in self.replacements.items():
            content = content.replace(placeholder, include)
        return content

    def resolve_all(self, main_document: str, partials: Dict[str, str]) -> Tuple[str, Dict[str, str]]:
        return (
            self.resolve(main_document),
            {name: self.resolve(body) for name, body in partials.items()},
        )
