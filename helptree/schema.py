"""Configuration schemas."""

from typing import Any

from .constants import CONSOLE_PAGE_SIZE, INTERACTIVE_PAGE_SIZE
from .validation import ConfigField, ConfigItems

__all__ = ["COMMAND_SCHEMA", "HELPTREE_SCHEMA"]


def _positive(value: Any) -> list[str]:  # noqa: ANN401
    return [] if value > 0 else [f"Must be greater than 0, got {value}"]


def _strings(value: Any) -> list[str]:  # noqa: ANN401
    if isinstance(value, list) and not all(isinstance(item, str) for item in value):
        return ["Every item must be a string"]
    return []


HELPTREE_SCHEMA = ConfigItems(
    ConfigField("page_size_interactive", int, default=INTERACTIVE_PAGE_SIZE, description="Commands per page at an interactive prompt", validator=_positive),
    ConfigField("page_size_console", int, default=CONSOLE_PAGE_SIZE, description="Commands per page for console output", validator=_positive),
    ConfigField("command_prefix", str, default="", description="Text prepended to listed command paths"),
    ConfigField("help_command", str, default="help", description="Command shown in category listings"),
    ConfigField("permissions", (list, str), default=[], description="Permissions granted to the local user", validator=_strings),
    ConfigField("include", (list, str), default=[], description="Extra configuration files to merge", validator=_strings),
    ConfigField("colors", bool, description="Colored console output, auto-detected when unset"),
)

COMMAND_SCHEMA = ConfigItems(
    ConfigField("aliases", (list, str), description="Extra names of the command", validator=_strings),
    ConfigField("description", str, description="One line summary"),
    ConfigField("usage", str, description="Argument signature, e.g. <pattern> [radius]"),
    ConfigField("help", str, description="Long help text"),
    ConfigField("group", str, description="Category label"),
    ConfigField("permissions", (list, str), description="Any of them grants access", validator=_strings),
    ConfigField("commands", dict, description="Sub-commands"),
)
