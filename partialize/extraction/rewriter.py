# partialize/extraction/rewriter.py

from typing import List

from bs4 import BeautifulSoup, Comment, Tag

from config.config import config
from partialize.exceptions import RenderError
from partialize.extraction.models import Candidate, ExtractionContext, Partial
from partialize.rendering.formatter import format_markup
from partialize.rendering.parser import render_node
from partialize.utils.logging import Logger

logger = Logger.get_logger("RewriterLogger", config.paths.log_dir / config.logging.extractor_log)

PLACEHOLDER_PREFIX = "EJS_INCLUDE:"
DEFUSED_PREFIX = "EJS_INCLUDE\uff1a"  # fullwidth colon


def make_placeholder(name: str) -> Comment:
    return Comment(f"{PLACEHOLDER_PREFIX}{name}")


def is_placeholder(node) -> bool:
    return isinstance(node, Comment) and node.strip().startswith(PLACEHOLDER_PREFIX)


def replace_with_placeholder(node: Tag, name: str) -> Comment:
    """Swap node for a placeholder at the same sibling index; node leaves the tree."""
    placeholder = make_placeholder(name)
    node.replace_with(placeholder)
    return placeholder


def defuse(value: str) -> str:
    return value.replace(PLACEHOLDER_PREFIX, DEFUSED_PREFIX)


def strip_placeholders(soup: BeautifulSoup) -> int:
    """
    Remove marker comments that were already present in the input and defuse
    the marker prefix wherever else it appears (text, other comments,
    attribute values), so the only markers left are the ones we insert.

    Returns the number of marker comments removed.
    """
    stray = soup.find_all(string=is_placeholder)
    for comment in stray:
        comment.extract()
    if stray:
        logger.warning(f"Removed {len(stray)} pre-existing include markers from input")

    defused = 0
    for string in soup.find_all(string=lambda text: PLACEHOLDER_PREFIX in text):
        string.replace_with(type(string)(defuse(string)))
        defused += 1
    for tag in soup.find_all(True):
        for key, value in list(tag.attrs.items()):
            if isinstance(value, list):
                if any(PLACEHOLDER_PREFIX in item for item in value):
                    tag[key] = [defuse(item) for item in value]
                    defused += 1
            elif isinstance(value, str) and PLACEHOLDER_PREFIX in value:
                tag[key] = defuse(value)
                defused += 1
    if defused:
        logger.warning(f"Defused include marker prefix in {defused} strings or attributes")
    return len(stray)


class TreeRewriter:
    """
    Captures each candidate into a partial and puts a placeholder in its place.

    Candidates must arrive deepest first: a partial's body is rendered after
    its own nested candidates were swapped for placeholders, and before any
    ancestor is detached.
    """
    def __init__(self, context: ExtractionContext):
        self.context = context

    def extract(self, candidates: List[Candidate]) -> int:
        extracted = 0
        for ordinal, candidate in enumerate(candidates, start=1):
            if self.extract_one(candidate, ordinal):
                extracted += 1
        logger.info(
            f"Extracted {extracted} of {len(candidates)} candidates into "
            f"{len(self.context.partials)} partials"
        )
        return extracted

    def extract_one(self, candidate: Candidate, ordinal: int) -> bool:
        node = candidate.node
        if node.parent is None:
            logger.debug(f"Candidate <{node.name}> is no longer attached; skipping")
            return False

        try:
            content = render_node(node)
        except RenderError as e:
            logger.warning(f"Skipping candidate <{node.name}>: {e}")
            return False

        if not content.strip():
            return False

        name, created = self.context.names.assign(node, content, ordinal)
        if created:
            body = format_markup(node) if self.context.settings.format_partials else content
            self.context.partials[name] = Partial(name=name, html=body, source=node)
            logger.debug(f"Created partial '{name}' from <{node.name}> at depth {candidate.depth}")
        else:
            logger.debug(f"Reusing partial '{name}' for identical <{node.name}>")

        self.context.references[name] += 1
        replace_with_placeholder(node, name)
        return True
