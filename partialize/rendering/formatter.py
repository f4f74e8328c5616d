# partialize/rendering/formatter.py

from bs4 import Tag

from config.config import config
from partialize.utils.logging import Logger

logger = Logger.get_logger("FormatterLogger", config.paths.log_dir / config.logging.extractor_log)


def format_markup(node: Tag) -> str:
    """Pretty-print a document or subtree, falling back to plain output."""
    try:
        return node.prettify()
    except Exception as e:
        logger.warning(f"Formatting failed, using unformatted markup: {e}")
        return node.decode()

