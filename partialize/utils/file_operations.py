# partialize/utils/file_operations.py

import aiofiles
import asyncio
import xxhash
import yaml
from pathlib import Path
from typing import Dict, List, Any

from partialize.utils.logging import Logger
from config.config import config

# Initialize Logger
logger = Logger.get_logger(
    "FileOperationsLogger", config.paths.log_dir / "file_operations.log"
)

class FileOperations:
    @staticmethod
    async def read_file_async(file_path: Path) -> str:
        """Asynchronously read a file's content."""
        try:
            async with aiofiles.open(file_path, "r", encoding="utf-8") as f:
                content = await f.read()
            logger.debug(f"Read file asynchronously: {file_path}")
            return content
        except Exception as e:
            logger.error(
                f"Failed to read file asynchronously {file_path}: {e}", exc_info=True
            )
            raise

    @staticmethod
    async def write_file_async(file_path: Path, content: str):
        """Asynchronously write content to a file."""
        try:
            async with aiofiles.open(file_path, "w", encoding="utf-8") as f:
                await f.write(content)
            logger.debug(f"Wrote file asynchronously: {file_path}")
        except Exception as e:
            logger.error(
                f"Failed to write file asynchronously {file_path}: {e}", exc_info=True
            )
            raise

    @staticmethod
    async def ensure_directory(directory: Path):
        """Ensure that a directory exists asynchronously."""
        try:
            await asyncio.to_thread(directory.mkdir, parents=True, exist_ok=True)
            logger.debug(f"Ensured existence of directory: {directory}")
        except Exception as e:
            logger.error(f"Failed to create directory {directory}: {e}", exc_info=True)
            raise

    @staticmethod
    async def list_files(directory: Path, pattern: str = "*") -> List[Path]:
        """List files in a directory matching the given pattern."""
        return await asyncio.to_thread(lambda: sorted(directory.glob(pattern)))

    @staticmethod
    def content_hash(content: str) -> str:
        """xxHash of a text body, as written to manifests."""
        return xxhash.xxh64(content.encode("utf-8")).hexdigest()

    @staticmethod
    async def save_yaml(data: Dict[str, Any], filepath: Path):
        """Save data to a YAML file asynchronously."""
        try:
            yaml_content = yaml.dump(
                data, default_flow_style=False, allow_unicode=True, sort_keys=False
            )
            async with aiofiles.open(filepath, "w", encoding="utf-8") as f:
                await f.write(yaml_content)
            logger.debug(f"Saved YAML data to {filepath}")
        except Exception as e:
            logger.error(f"Failed to save YAML data to {filepath}: {e}", exc_info=True)
            raise
