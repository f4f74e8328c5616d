# partialize/extraction/boundaries.py

from typing import List, Tuple

from bs4 import BeautifulSoup, Tag

from config.config import ExtractionConfig, config
from partialize.extraction.filters import (
    CandidateFilter,
    is_component_candidate,
    is_pure_layout,
    is_section_boundary,
    is_wrapper_element,
)
from partialize.extraction.models import Candidate
from partialize.extraction.nodes import (
    content_children,
    element_children,
    node_depth,
    unique_nodes,
    walk_elements,
)
from partialize.extraction.patterns import PatternCounter, pattern_key
from partialize.utils.logging import Logger

logger = Logger.get_logger("BoundaryLogger", config.paths.log_dir / config.logging.extractor_log)


def find_body(soup: BeautifulSoup) -> Tag:
    """The body element, or the closest thing a tolerant parse produced."""
    return soup.body or soup.find("html") or soup


def select_content_root(body: Tag, max_depth: int = 4) -> Tag:
    """Skip single-child wrapper shells such as `<div id="app">`."""
    root = body
    for _ in range(max_depth):
        children = content_children(root)
        if len(children) != 1:
            break
        child = children[0]
        if not is_wrapper_element(child):
            break
        logger.debug(f"Skipping wrapper <{child.name}> while locating content root")
        root = child
    return root


class BoundarySelector:
    """
    Chooses which subtrees of the content root get extracted: top-level
    boundaries first, then nested components inside each of them.
    """
    def __init__(self, settings: ExtractionConfig = None):
        self.settings = settings or config.extraction
        self.filter = CandidateFilter(self.settings)
        self.counter = PatternCounter(self.settings.nested_max_depth)

    def collect_sections(self, root: Tag) -> List[Tag]:
        sections = []

        def walk(node: Tag, depth: int):
            if depth >= self.settings.boundary_max_depth:
                return
            for child in element_children(node):
                if is_section_boundary(child):
                    sections.append(child)
                    continue
                walk(child, depth + 1)

        walk(root, 0)
        return sections

    @staticmethod
    def _top_level_filter(nodes: List[Tag]) -> List[Tag]:
        return [node for node in nodes if is_component_candidate(node)]

    def select_top_level(self, root: Tag) -> Tuple[List[Tag], List[Tag]]:
        """
        Returns (regions to extract, regions to search for nested components).

        Every region is searched; pure layout containers and a lone region
        that is not a component in its own right are searched but not
        extracted.
        """
        sections = self.collect_sections(root)
        if len(sections) > 1:
            logger.debug(f"Using {len(sections)} section boundaries")
            return sections, sections

        regions = self._top_level_filter(content_children(root))
        if len(regions) == 1:
            deeper = self._top_level_filter(content_children(regions[0]))
            if len(deeper) > 1:
                regions = deeper

        if len(regions) > 1:
            extract = [region for region in regions if not is_pure_layout(region)]
        else:
            extract = [region for region in regions if self.filter.should_select(region, 1)]
        return extract, regions

    def collect_nested(self, roots: List[Tag]) -> List[Tag]:
        nested = []
        for root in roots:
            counts = self.counter.count(root, accept=is_component_candidate)
            for node, _ in walk_elements(root, self.settings.nested_max_depth):
                if not is_component_candidate(node):
                    continue
                if self.filter.should_select(node, counts[pattern_key(node)]):
                    nested.append(node)
        return nested

    def select_candidates(self, root: Tag) -> List[Candidate]:
        """Top-level and nested candidates, deepest first."""
        primary, search_roots = self.select_top_level(root)
        nested = self.collect_nested(search_roots)
        nodes = unique_nodes(nested + primary)
        if not nodes:
            return []

        candidates = [
            Candidate(node=node, depth=node_depth(node), pattern_key=pattern_key(node))
            for node in nodes
            if is_component_candidate(node)
        ]
        # Stable sort keeps document order within a depth level.
        candidates.sort(key=lambda candidate: candidate.depth, reverse=True)

        logger.info(
            f"Selected {len(candidates)} candidates "
            f"({len(primary)} top-level, {len(candidates) - len(primary)} nested)"
        )
        return candidates
