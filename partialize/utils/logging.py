# partialize/utils/logging.py
import logging
from pathlib import Path
from typing import Optional

from config.config import config


# Define VERBOSE Level
VERBOSE_LEVEL_NUM = 5
logging.addLevelName(VERBOSE_LEVEL_NUM, "VERBOSE")


def verbose(self, message, *args, **kws):
    if self.isEnabledFor(VERBOSE_LEVEL_NUM):
        self._log(VERBOSE_LEVEL_NUM, message, args, **kws)


logging.Logger.verbose = verbose


def _level(name: str) -> int:
    numeric_level = getattr(logging, name.upper(), None)
    if not isinstance(numeric_level, int):
        raise ValueError(f"Invalid log level: {name}")
    return numeric_level


class Logger:
    _loggers = {}

    @staticmethod
    def get_logger(name: str, log_file: Optional[Path] = None) -> logging.Logger:
        if name not in Logger._loggers:
            logger = logging.getLogger(name)
            logger.setLevel(logging.DEBUG)
            logger.propagate = False

            formatter = logging.Formatter(
                "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
            )

            console_handler = logging.StreamHandler()
            console_handler.setLevel(_level(config.logging.console_level))
            console_handler.setFormatter(formatter)
            logger.addHandler(console_handler)

            if log_file:
                log_file.parent.mkdir(parents=True, exist_ok=True)

                file_handler = logging.FileHandler(log_file, mode="a", encoding="utf-8")
                file_handler.setLevel(_level(config.logging.file_level))
                file_handler.setFormatter(formatter)
                logger.addHandler(file_handler)

            Logger._loggers[name] = logger

        return Logger._loggers[name]

    @staticmethod
    def set_log_level(level: str):
        """
        Set the log level for all loggers. Console handlers follow the new
        level; file handlers keep capturing everything down to DEBUG.
        """
        numeric_level = _level(level)

        for logger in Logger._loggers.values():
            logger.setLevel(min(numeric_level, logging.DEBUG))
            for handler in logger.handlers:
                # FileHandler subclasses StreamHandler, so check it first.
                if isinstance(handler, logging.FileHandler):
                    handler.setLevel(logging.DEBUG)
                elif isinstance(handler, logging.StreamHandler):
                    handler.setLevel(numeric_level)
