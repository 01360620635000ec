"""ANSI terminal color utilities.

Provides constants and helpers for terminal coloring with proper
NO_COLOR environment variable support and TTY detection, and the
translation of the `&x` style markers embedded in help messages.
"""

import os
import re
import sys
from typing import TextIO

__all__ = [
    "BOLD",
    "DARK_GRAY",
    "DIM",
    "GRAY",
    "GREEN",
    "RED",
    "RESET",
    "YELLOW",
    "escape_markers",
    "LogStyles",
    "MARKER_CODES",
    "make_style",
    "should_colorize",
    "strip_markers",
    "translate_markers",
]

# ANSI escape sequence prefix
_ESC = "\x1b["

# Reset all attributes
RESET = f"{_ESC}0m"

# Style codes
BOLD = "1"
DIM = "2"

# Foreground color codes
RED = "31"
GREEN = "32"
YELLOW = "33"
GRAY = "37"
DARK_GRAY = "90"

# Style markers understood in message templates
MARKER_CODES: dict[str, tuple[str, ...]] = {
    "a": (GREEN,),
    "c": (RED,),
    "e": (YELLOW, BOLD),
    "7": (GRAY,),
    "8": (DARK_GRAY,),
    "r": (),
}

# "&&" is an escaped literal "&"
_MARKER_PATTERN = re.compile(r"&(&|[0-9a-fk-or])")


def should_colorize(stream: TextIO | None = None) -> bool:
    """Determine if ANSI colors should be used for the given stream.

    Respects:
    - NO_COLOR environment variable (disables colors)
    - FORCE_COLOR environment variable (forces colors)
    - TTY detection (disables colors when piping)

    Args:
        stream: The output stream to check. Defaults to sys.stderr.

    Returns:
        True if colors should be used, False otherwise.
    """
    if os.environ.get("NO_COLOR"):
        return False
    if os.environ.get("FORCE_COLOR"):
        return True
    if stream is None:
        stream = sys.stderr
    return hasattr(stream, "isatty") and stream.isatty()


def make_style(*codes: str) -> tuple[str, str]:
    """Create a style prefix and suffix pair.

    Args:
        *codes: ANSI codes to apply.

    Returns:
        Tuple of (prefix, suffix) strings for use in formatters.
    """
    if not codes:
        return ("", RESET)
    return (f"{_ESC}{';'.join(codes)}m", RESET)


def escape_markers(text: str) -> str:
    """Protect every `&` of `text` so it prints as is."""
    return text.replace("&", "&&")


def strip_markers(text: str) -> str:
    """Remove every `&x` style marker from `text`, unescaping `&&`."""
    return _MARKER_PATTERN.sub(lambda match: "&" if match.group(1) == "&" else "", text)


def translate_markers(text: str) -> str:
    """Replace `&x` style markers with ANSI sequences.

    Unknown markers are dropped. Each line is terminated with a reset
    so styles never leak into the next line.
    """

    def _replace(match: re.Match[str]) -> str:
        if match.group(1) == "&":
            return "&"
        codes = MARKER_CODES.get(match.group(1))
        if not codes:
            return RESET if codes is not None else ""
        return f"{RESET}{_ESC}{';'.join(codes)}m"

    lines = []
    for line in text.split("\n"):
        styled = any(match.group(1) != "&" for match in _MARKER_PATTERN.finditer(line))
        translated = _MARKER_PATTERN.sub(_replace, line)
        lines.append(translated + RESET if styled else translated)
    return "\n".join(lines)


class LogStyles:
    """Pre-built styles for log levels."""

    WARNING = (YELLOW, DIM)
    ERROR = (RED, DIM)
    CRITICAL = (RED, BOLD)
