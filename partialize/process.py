# partialize/process.py

import asyncio
from pathlib import Path
from typing import Dict, Optional

import yaml
from tqdm.asyncio import tqdm

from config.config import config
from partialize.analysis.components import analyze_components
from partialize.exceptions import PartializeError
from partialize.exporting.writer import ViewWriter
from partialize.extraction.extractor import PartialExtractor
from partialize.extraction.models import ExtractionResult
from partialize.utils.file_operations import FileOperations
from partialize.utils.logging import Logger

logger = Logger.get_logger(
    "ProcessLogger",
    config.paths.log_dir / config.logging.processor_log
)


async def check_input_exists(input_dir: Path):
    """Check that the input folder exists."""
    folder_exists = await asyncio.to_thread(input_dir.is_dir)
    if not folder_exists:
        logger.error(f"Error: '{input_dir}' directory does not exist.")
        raise FileNotFoundError(f"Input directory {input_dir} is missing.")


async def convert_file(file_path: Path, output_dir: Path, extractor: PartialExtractor) -> ExtractionResult:
    content = await FileOperations.read_file_async(file_path)
    result = extractor.extract(content)
    suggestions = analyze_components(content, extractor.settings.parser)
    await ViewWriter(output_dir / file_path.stem).write(result, suggestions)
    return result


async def main(input_dir: Optional[Path] = None, output_dir: Optional[Path] = None) -> Dict[str, int]:
    """Convert every HTML file in input_dir; returns partial counts per converted file."""
    input_dir = input_dir or config.paths.input_folder
    output_dir = output_dir or config.paths.output_dir

    await check_input_exists(input_dir)
    await FileOperations.ensure_directory(output_dir)

    files = await FileOperations.list_files(input_dir, "*.html")
    if not files:
        logger.warning(f"No HTML files found in {input_dir}.")
        return {}
    logger.info(f"Found {len(files)} HTML files to convert.")

    extractor = PartialExtractor()
    summary = {}
    failed = 0
    for file_path in tqdm(files, desc="Extracting partials", unit="file"):
        try:
            result = await convert_file(file_path, output_dir, extractor)
        except (PartializeError, OSError, UnicodeDecodeError, ValueError, yaml.YAMLError) as e:
            failed += 1
            logger.error(f"Failed to convert {file_path.name}: {e}")
            logger.debug(f"Detailed error for {file_path.name}:", exc_info=True)
            continue
        summary[file_path.name] = len(result.partials)

    logger.info(f"Converted {len(summary)} files, {failed} failed.")
    return summary


if __name__ == "__main__":
    asyncio.run(main())
