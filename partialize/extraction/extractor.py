# partialize/extraction/extractor.py

from typing import Dict, Tuple

from config.config import ExtractionConfig, config
from partialize.extraction.boundaries import BoundarySelector, find_body, select_content_root
from partialize.extraction.models import ExtractionContext, ExtractionResult
from partialize.extraction.placeholders import PlaceholderResolver
from partialize.extraction.rewriter import TreeRewriter, strip_placeholders
from partialize.rendering.formatter import format_markup
from partialize.rendering.parser import parse_document
from partialize.utils.logging import Logger

logger = Logger.get_logger("ExtractorLogger", config.paths.log_dir / config.logging.extractor_log)


class PartialExtractor:
    """
    Splits one HTML document into a main template and reusable partials.

    Each call to `extract` works on its own ExtractionContext, so a single
    extractor can convert any number of documents independently.
    """
    def __init__(self, settings: ExtractionConfig = None, partials_dir: str = None):
        self.settings = settings or config.extraction
        self.partials_dir = partials_dir or config.files.partials_dir

    def extract(self, content: str) -> ExtractionResult:
        soup = parse_document(content, self.settings.parser)
        strip_placeholders(soup)

        body = find_body(soup)
        root = select_content_root(body, self.settings.root_max_depth)
        candidates = BoundarySelector(self.settings).select_candidates(root)

        if not candidates:
            logger.info("No partial candidates found; returning formatted document.")
            return ExtractionResult(main_document=format_markup(soup), partials={})

        context = ExtractionContext(settings=self.settings)
        TreeRewriter(context).extract(candidates)

        resolver = PlaceholderResolver(context.partials.keys(), self.partials_dir)
        main_document, partials = resolver.resolve_all(
            format_markup(soup),
            {name: partial.html for name, partial in context.partials.items()},
        )

        logger.info(f"Produced {len(partials)} partials.")
        return ExtractionResult(
            main_document=main_document,
            partials=partials,
            references=dict(context.references),
        )


def extract_partials(content: str, settings: ExtractionConfig = None) -> ExtractionResult:
    return PartialExtractor(settings).extract(content)


def generate_views(content: str) -> Tuple[str, Dict[str, str]]:
    """(main document, partials by name) for an HTML string."""
    result = extract_partials(content)
    return result.main_document, result.partials
