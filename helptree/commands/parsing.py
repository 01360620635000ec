"""Docstring and usage parsing utilities."""

from __future__ import annotations

import re

from .models import CommandArg

__all__ = ["format_usage", "parse_docstring", "parse_usage"]

# Regex pattern to match args: <required> or [optional]
_ARG_PATTERN = re.compile(r"([<\[])([^>\]]+)([>\]])")


def parse_usage(text: str) -> tuple[list[CommandArg], int]:
    """Parse the leading `<required>` / `[optional]` arguments of `text`.

    Args:
        text: A single line, e.g. "<pattern> [depth] Fill a hole"

    Returns:
        Tuple of (args, end) where `end` is the offset right after the last
        argument and its trailing spaces
    """
    args: list[CommandArg] = []
    last_end = 0

    for match in _ARG_PATTERN.finditer(text):
        # Stop at the first non-whitespace text between two arguments
        if match.start() != last_end and text[last_end : match.start()].strip():
            break

        args.append(CommandArg(value=match.group(2), required=match.group(1) == "<"))
        last_end = match.end()

        while last_end < len(text) and text[last_end] == " ":
            last_end += 1

    return args, last_end


def parse_docstring(docstring: str) -> tuple[list[CommandArg], str, str]:
    """Parse a docstring to extract arguments and descriptions.

    The first line may contain arguments like:
    "<arg> Short description" or "[optional_arg] Short description"

    Args:
        docstring: The raw docstring to parse

    Returns:
        Tuple of (args, short_description, full_description)
        - args: List of CommandArg objects
        - short_description: Text after arguments on first line
        - full_description: Complete docstring
    """
    if not docstring:
        return [], "No description available.", ""

    full_description = docstring.strip()
    first_line = full_description.split("\n")[0].strip()

    args, last_end = parse_usage(first_line)

    short_description = first_line
    if args and first_line[last_end:].strip():
        short_description = first_line[last_end:].strip()

    return args, short_description, full_description


def format_usage(args: list[CommandArg]) -> str:
    """Format arguments back to a usage signature."""
    return " ".join(f"<{arg.value}>" if arg.required else f"[{arg.value}]" for arg in args)
