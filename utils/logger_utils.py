from __future__ import annotations

import logging
import sys
from logging import Formatter, StreamHandler
from logging.handlers import RotatingFileHandler
from typing import TYPE_CHECKING, ClassVar, Final, Literal, NamedTuple, Self, TextIO, TypeAlias

if TYPE_CHECKING:
    from pathlib import Path

__all__: list[str] = ["LogLevel", "LoggerUtils"]

LevelType: TypeAlias = Literal[
    "NOTSET",
    "DEBUG",
    "INFO",
    "WARNING",
    "ERROR",
    "CRITICAL",
]

_LOG_FILE_SIZE: Final[int] = 2 * 1024 * 1024  # 2MB
_LOG_BACKUP_COUNT: Final[int] = 2

DEFAULT_LOG_LEVEL: Final[int] = logging.INFO
DEFAULT_NAMESPACE: Final[str] = "FusionTranslator"


class LogLevel(NamedTuple):
    """Logging level as a (name, value) pair."""

    name: str
    value: int


class LoggerUtils:
    """Process-wide logging setup for the translator.

    Library modules only ever call ``LoggerUtils.get_logger(__name__)``; handlers are attached once,
    by the entry point, through the constructor. Until that happens, records propagate to whatever
    the host application has configured.

    Attributes:
        _LOGGER_NAMESPACE (str): Prefix for every logger created by ``get_logger``.
        _configured (bool): Set after the first successful construction.
        _instance (LoggerUtils | None): The singleton instance.
    """

    _LOGGER_NAMESPACE: ClassVar[str] = DEFAULT_NAMESPACE
    _configured: ClassVar[bool] = False
    _instance: ClassVar[Self | None] = None

    def __new__(cls, *args, **kwargs) -> Self:
        _ = args, kwargs
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __init__(self, filename: str | Path = "") -> None:
        """Attach console and (optionally) file handlers to the namespace root logger.

        Args:
            filename (str | Path): Absolute path of the log file. If empty, only console logging is set up.
        """
        if LoggerUtils._configured:
            return

        self.root_logger: logging.Logger = logging.getLogger(self._LOGGER_NAMESPACE)
        # debug mode lowers this through set_level()
        self.root_logger.setLevel(DEFAULT_LOG_LEVEL)

        self._console_logging()
        filename = str(filename)
        if filename.strip():
            self._file_logging(filename)

        LoggerUtils._configured = True

    @classmethod
    def reset(cls) -> None:
        """Detach all handlers and forget the singleton. Used by tests."""
        root_logger: logging.Logger = logging.getLogger(cls._LOGGER_NAMESPACE)
        for handler in list(root_logger.handlers):
            root_logger.removeHandler(handler)
            handler.close()
        root_logger.setLevel(logging.NOTSET)
        cls._configured = False
        cls._instance = None

    def _console_logging(self) -> None:
        """Console output is WARNING and above, message only."""
        if self._has_handler(StreamHandler, exact=True):
            self.root_logger.warning("Console logging is already configured.")
            return

        console_handler: StreamHandler[TextIO] = StreamHandler(sys.stderr)
        console_handler.setLevel(logging.WARNING)
        console_handler.setFormatter(Formatter("%(message)s"))
        self.root_logger.addHandler(console_handler)

    def _file_logging(self, filename: str) -> None:
        """Rotating UTF-8 file output at DEBUG level.

        Args:
            filename (str): Absolute path to the log file.
        """
        if self._has_handler(RotatingFileHandler):
            self.root_logger.warning("File logging is already configured.")
            return

        try:
            file_handler = RotatingFileHandler(
                filename=filename,
                maxBytes=_LOG_FILE_SIZE,
                backupCount=_LOG_BACKUP_COUNT,
                encoding="utf-8",
            )
        except (FileNotFoundError, PermissionError):
            self.root_logger.error("Incorrect log file name: %s\nLogging to the file is not performed.", filename)
            return

        file_handler.setLevel(logging.DEBUG)
        file_handler.setFormatter(
            Formatter("%(asctime)s %(levelname)-8s %(lineno)4d %(name)-44s\t%(funcName)s\t%(message)s")
        )
        self.root_logger.addHandler(file_handler)

    def _has_handler(self, handler_type: type, *, exact: bool = False) -> bool:
        # RotatingFileHandler is itself a StreamHandler, hence the exact-type option
        if exact:
            return any(type(h) is handler_type for h in self.root_logger.handlers)
        return any(isinstance(h, handler_type) for h in self.root_logger.handlers)

    def set_level(self, level: LevelType) -> None:
        """Set the namespace logging level. Unknown names fall back to INFO with a warning."""
        level_map: dict[str, int] = logging.getLevelNamesMapping()
        try:
            self.root_logger.setLevel(level_map[level.upper()])
        except KeyError:
            self.root_logger.setLevel(DEFAULT_LOG_LEVEL)
            self.root_logger.warning("Unknown logging level '%s' specified.\nLogging level set to 'INFO'.", level)

    def get_level(self) -> LogLevel:
        level_value: int = self.root_logger.getEffectiveLevel()
        return LogLevel(name=logging.getLevelName(level_value), value=level_value)

    @staticmethod
    def get_logger(name: str | None = None) -> logging.Logger:
        """Get a logger below the translator namespace.

        Args:
            name (str | None): Module name. If None, the namespace root logger is returned.

        Returns:
            logging.Logger: The logger instance.
        """
        full_name: str | None
        if LoggerUtils._LOGGER_NAMESPACE:
            full_name = f"{LoggerUtils._LOGGER_NAMESPACE}.{name}" if name else LoggerUtils._LOGGER_NAMESPACE
        else:
            full_name = name or None
        return logging.getLogger(full_name)
