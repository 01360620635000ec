"""Logging for the help client.

Every logger is a child of the "helptree" logger, which holds the shared
handlers installed by `init_logger`: the screen and, optionally, a file.
"""

import logging
import os

from .ansi import LogStyles, make_style, should_colorize

__all__ = [
    "LogState",
    "ScreenLogFormatter",
    "get_logger",
    "init_logger",
    "is_debug",
]

ROOT_LOGGER = "helptree"
DEBUG_FORMAT = r"%(name)20s - %(message)s // %(filename)s:%(lineno)d"
FILE_FORMAT = r"%(asctime)s [%(levelname)s] %(name)s :: %(message)s"


class LogState:
    """Process wide logging state."""

    debug: bool = bool(os.environ.get("HELPTREE_DEBUG"))
    handlers: list[logging.Handler] = []


def is_debug() -> bool:
    """Return True when debug messages are enabled."""
    return LogState.debug


class ScreenLogFormatter(logging.Formatter):
    """Terminal formatter, warnings and errors are colored.

    Colors follow NO_COLOR, FORCE_COLOR and the TTY detection of stderr.
    """

    STYLES = {
        logging.WARNING: LogStyles.WARNING,
        logging.ERROR: LogStyles.ERROR,
        logging.CRITICAL: LogStyles.CRITICAL,
    }

    def __init__(self, debug: bool = False, colors: bool | None = None) -> None:
        super().__init__(DEBUG_FORMAT if debug else r"%(message)s")
        if colors is None:
            colors = should_colorize()
        self._styles = {level: make_style(*codes) for level, codes in self.STYLES.items()} if colors else {}

    def format(self, record: logging.LogRecord) -> str:
        text = super().format(record)
        if record.levelno not in self._styles:
            return text
        prefix, suffix = self._styles[record.levelno]
        return f"{prefix}{text}{suffix}"


def init_logger(filename: str | None = None, force_debug: bool = False) -> None:
    """Install the shared handlers, replacing previous ones.

    Args:
        filename: Also write every record to this file
        force_debug: Enable debug messages (HELPTREE_DEBUG does it too)
    """
    if force_debug:
        LogState.debug = True

    for handler in LogState.handlers:
        handler.close()
    LogState.handlers = []
    if filename:
        file_handler = logging.FileHandler(filename)
        file_handler.setFormatter(logging.Formatter(FILE_FORMAT))
        LogState.handlers.append(file_handler)
    screen_handler = logging.StreamHandler()
    screen_handler.setFormatter(ScreenLogFormatter(is_debug()))
    LogState.handlers.append(screen_handler)

    root = logging.getLogger(ROOT_LOGGER)
    root.handlers = list(LogState.handlers)
    root.setLevel(logging.DEBUG if is_debug() else logging.WARNING)
    root.propagate = False


def get_logger(name: str = ROOT_LOGGER, level: int | None = None) -> logging.Logger:
    """Return a logger writing to the shared handlers.

    Args:
        name: logger's name, "help" gives "helptree.help"
        level: logger's level (inherited if not set)

    Returns:
        The logger instance
    """
    logger = logging.getLogger(name if name == ROOT_LOGGER else f"{ROOT_LOGGER}.{name}")
    if level is not None:
        logger.setLevel(level)
    return logger
