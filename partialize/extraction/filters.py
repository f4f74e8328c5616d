# partialize/extraction/filters.py

from bs4 import Tag

from config.config import ExtractionConfig
from partialize.extraction.nodes import (
    element_children,
    get_attribute,
    identity_text,
    is_element,
    is_embed_only,
    is_non_content,
    text_length,
)

DOCUMENT_TAGS = frozenset({"html", "head", "body"})
WRAPPER_TAGS = frozenset({"div", "main", "section"})
SECTION_TAGS = frozenset({"nav", "header", "footer", "section", "main", "aside"})

SECTION_KEYWORDS = (
    "navbar", "nav", "menu", "header", "footer", "hero", "section", "cta",
    "pricing", "gallery", "grid", "slider", "carousel", "tabs", "accordion", "form",
)
COMPONENT_KEYWORDS = (
    "navbar", "nav", "menu", "header", "footer", "hero", "section", "cta",
    "button", "btn", "card", "tile", "banner", "pricing", "gallery", "feature",
    "testimonial", "form", "input", "field", "dropdown", "modal", "popup",
    "slider", "carousel", "tabs", "accordion",
)
LAYOUT_HINTS = (
    "wrapper", "container", "page", "layout", "root", "app", "site", "content",
)


def _matches_any(text: str, keywords) -> bool:
    return any(keyword in text for keyword in keywords)


def is_component_candidate(node) -> bool:
    if not is_element(node):
        return False
    if is_non_content(node) or is_embed_only(node):
        return False
    if node.has_attr("data-component"):
        return True
    return node.name not in DOCUMENT_TAGS


def is_wrapper_element(node) -> bool:
    # Any single-child div/main/section counts, whatever its class says.
    return is_element(node) and node.name in WRAPPER_TAGS


def is_section_boundary(node) -> bool:
    if is_non_content(node) or is_embed_only(node):
        return False
    if node.name in SECTION_TAGS:
        return True
    combined = identity_text(node)
    if not combined.strip():
        return False
    return _matches_any(combined, SECTION_KEYWORDS)


def has_component_keyword(node: Tag) -> bool:
    combined = identity_text(node)
    if not combined.strip():
        return False
    return _matches_any(combined, COMPONENT_KEYWORDS)


def is_layout_container(node: Tag) -> bool:
    return is_element(node) and _matches_any(identity_text(node), LAYOUT_HINTS)


def is_pure_layout(node: Tag) -> bool:
    return is_layout_container(node) and not has_component_keyword(node)


def is_button_element(node) -> bool:
    if not is_element(node):
        return False
    if node.name == "button":
        return True
    if get_attribute(node, "role").lower() == "button":
        return True
    if node.name == "a":
        class_attr = get_attribute(node, "class").lower()
        return "button" in class_attr or "btn" in class_attr
    return False


def has_identifying_class_or_id(node: Tag) -> bool:
    return bool(get_attribute(node, "class") or get_attribute(node, "id"))


class CandidateFilter:
    """
    Decides whether a single element is worth extracting as a component.

    A node qualifies when it is a clickable control, when it carries a
    component keyword and has some content, or when its pattern recurs in the
    surrounding subtree and it is labelled and non-trivial. Script/style
    internals, embed-only nodes and pure layout containers never qualify.
    """
    def __init__(self, settings: ExtractionConfig):
        self.settings = settings

    def has_meaningful_content(self, node: Tag) -> bool:
        return (
            len(element_children(node)) >= self.settings.meaningful_min_children
            or text_length(node) >= self.settings.meaningful_min_text
        )

    def should_select(self, node: Tag, pattern_count: int) -> bool:
        if is_non_content(node) or is_embed_only(node):
            return False

        keyword_match = has_component_keyword(node)
        if is_layout_container(node) and not keyword_match:
            return False

        if is_button_element(node):
            return True

        if keyword_match and (
            len(element_children(node)) > 0
            or text_length(node) > self.settings.keyword_min_text
        ):
            return True

        return (
            pattern_count >= self.settings.min_pattern_count
            and has_identifying_class_or_id(node)
            and self.has_meaningful_content(node)
        )
