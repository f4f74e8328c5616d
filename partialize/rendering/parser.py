# partialize/rendering/parser.py

from typing import Optional

from bs4 import BeautifulSoup, Tag
from bs4.exceptions import ParserRejectedMarkup

from config.config import config
from partialize.exceptions import ParseError, RenderError
from partialize.utils.logging import Logger

logger = Logger.get_logger("ParserLogger", config.paths.log_dir / config.logging.extractor_log)


def parse_document(content: str, parser: Optional[str] = None) -> BeautifulSoup:
    """
    Parse HTML text into a BeautifulSoup tree.

    Tolerant parsers recover from most malformed markup the way browsers do;
    only input the parser rejects outright raises ParseError.
    """
    if not isinstance(content, (str, bytes)):
        raise ParseError(f"Expected HTML text, got {type(content).__name__}")

    parser = parser or config.extraction.parser
    try:
        return BeautifulSoup(content, parser)
    except ParserRejectedMarkup as e:
        logger.error(f"Parser '{parser}' rejected the document: {e}")
        raise ParseError(str(e)) from e


def render_node(node: Tag) -> str:
    """Serialize a single subtree exactly as it stands in the tree."""
    try:
        return node.decode()
    except Exception as e:
        raise RenderError(f"Failed to render <{getattr(node, 'name', '?')}>: {e}") from e
