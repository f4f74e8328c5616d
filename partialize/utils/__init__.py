# partialize/utils/__init__.py

"""
Utilities Package

Provides shared utilities for logging and file operations.
"""

from .logging import Logger
from .file_operations import FileOperations

__all__ = ["Logger", "FileOperations"]
