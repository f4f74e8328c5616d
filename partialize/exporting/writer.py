# partialize/exporting/writer.py

import asyncio
from dataclasses import asdict
from pathlib import Path
from typing import Any, Dict, List

from config.config import config
from partialize.analysis.components import ComponentSuggestion
from partialize.extraction.includes import IncludeGraph, inline_includes
from partialize.extraction.models import ExtractionResult
from partialize.utils.file_operations import FileOperations
from partialize.utils.logging import Logger

logger = Logger.get_logger("WriterLogger", config.paths.log_dir / config.logging.writer_log)


class ViewWriter:
    """
    Persists an extraction result as an EJS views directory:

        <destination>/views/index.ejs
        <destination>/views/partials/<name>.ejs
        <destination>/manifest.yaml
    """
    def __init__(self, destination: Path):
        self.destination = destination
        self.views_dir = destination / config.files.views_dir
        self.partials_dir = self.views_dir / config.files.partials_dir

    def template_path(self, name: str, directory: Path) -> Path:
        return directory / f"{name}{config.files.template_extension}"

    def build_manifest(self, result: ExtractionResult, suggestions: List[ComponentSuggestion] = None) -> Dict[str, Any]:
        entry = self.template_path(config.files.entry_template, self.views_dir)
        manifest = {
            "entry": str(entry.relative_to(self.destination)),
            "partials": [
                {
                    "name": name,
                    "file": str(self.template_path(name, self.partials_dir).relative_to(self.destination)),
                    "hash": FileOperations.content_hash(body),
                    "references": result.references.get(name, 0),
                }
                for name, body in result.partials.items()
            ],
        }
        if suggestions:
            manifest["suggestions"] = [asdict(suggestion) for suggestion in suggestions]
        return manifest

    async def write(self, result: ExtractionResult, suggestions: List[ComponentSuggestion] = None) -> Path:
        await FileOperations.ensure_directory(self.partials_dir)

        writes = [
            FileOperations.write_file_async(
                self.template_path(config.files.entry_template, self.views_dir),
                result.main_document,
            )
        ]
        writes.extend(
            FileOperations.write_file_async(self.template_path(name, self.partials_dir), body)
            for name, body in result.partials.items()
        )

        if config.files.write_preview:
            graph = IncludeGraph(result.partials)
            if graph.validate():
                preview = inline_includes(result.main_document, result.partials)
                writes.append(
                    FileOperations.write_file_async(self.destination / config.files.preview_html, preview)
                )
            else:
                logger.warning(f"Skipping preview for {self.destination}: include graph is invalid.")

        await asyncio.gather(*writes)

        manifest_path = self.destination / config.files.manifest_yaml
        await FileOperations.save_yaml(self.build_manifest(result, suggestions), manifest_path)

        logger.info(f"Wrote {len(result.partials)} partials to {self.partials_dir}")
        return manifest_path
