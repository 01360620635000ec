"""Shared constants for helptree."""

import os
import re
from pathlib import Path

__all__ = [
    "CONFIG_FILE",
    "CONSOLE_PAGE_SIZE",
    "DEFAULT_GROUP",
    "INTERACTIVE_PAGE_SIZE",
    "PATH_SEPARATOR",
    "ROOT_MARKERS",
    "COMMAND_CLEAN_PATTERN",
]

# Config file path - use XDG_CONFIG_HOME with fallback to ~/.config
_xdg_config_home = Path(os.environ.get("XDG_CONFIG_HOME") or Path.home() / ".config")
CONFIG_FILE = _xdg_config_home / "helptree" / "commands.toml"

# Group label used when a command declares none
DEFAULT_GROUP = "Miscellaneous"

# Page sizes (items per page)
INTERACTIVE_PAGE_SIZE = 8
CONSOLE_PAGE_SIZE = 20

# Root commands may be typed with zero, one or two leading separators
PATH_SEPARATOR = "/"
ROOT_MARKERS = (PATH_SEPARATOR * 2, PATH_SEPARATOR)

# Leading separators ignored when sorting commands
COMMAND_CLEAN_PATTERN = re.compile(r"^[/]+")
