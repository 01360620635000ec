"""Consumers of help output."""

from __future__ import annotations

import fnmatch
import sys
from typing import TYPE_CHECKING, ClassVar, Protocol

import questionary

from .ansi import should_colorize, strip_markers, translate_markers

if TYPE_CHECKING:
    from collections.abc import Iterable
    from typing import TextIO

__all__ = ["Caller", "ConsoleCaller", "PermissionHolder", "PromptCaller"]


class Caller(Protocol):
    """Whoever asked for help: receives the output and holds permissions."""

    def print(self, text: str) -> None:
        """Print a message."""

    def print_error(self, text: str) -> None:
        """Print an error message."""

    def print_raw(self, text: str) -> None:
        """Print pre-formatted text."""

    def is_interactive(self) -> bool:
        """Return True for a single user at a prompt."""

    def has_permission(self, permission: str) -> bool:
        """Return True if `permission` is granted."""


class PermissionHolder:
    """Grants permissions by name, `*` wildcards allowed (e.g. "worldedit.*")."""

    def __init__(self, permissions: Iterable[str] = ()) -> None:
        self.permissions = frozenset(permissions)

    def has_permission(self, permission: str) -> bool:
        if permission in self.permissions:
            return True
        return any(fnmatch.fnmatchcase(permission, granted) for granted in self.permissions if "*" in granted)


class ConsoleCaller(PermissionHolder):
    """Non-interactive consumer writing to a text stream."""

    def __init__(self, permissions: Iterable[str] = (), stream: TextIO | None = None, colors: bool | None = None) -> None:
        super().__init__(permissions)
        self.stream = stream or sys.stdout
        self.colors = should_colorize(self.stream) if colors is None else colors

    def _style(self, text: str) -> str:
        return translate_markers(text) if self.colors else strip_markers(text)

    def print(self, text: str) -> None:
        self.stream.write(self._style(text) + "\n")

    def print_error(self, text: str) -> None:
        self.stream.write(self._style(f"&c{text}") + "\n")

    def print_raw(self, text: str) -> None:
        self.stream.write(text if text.endswith("\n") else f"{text}\n")

    def is_interactive(self) -> bool:
        return False


class PromptCaller(PermissionHolder):
    """Interactive single-user consumer printing through questionary.

    Each line is styled after its leading marker.
    """

    LINE_STYLES: ClassVar[dict[str, str]] = {
        "&a": "fg:green",
        "&c": "fg:red",
        "&e": "bold fg:yellow",
        "&8": "fg:gray",
    }

    def print(self, text: str) -> None:
        for line in text.split("\n"):
            style = self.LINE_STYLES.get(line.lstrip()[:2])
            questionary.print(strip_markers(line), style=style)

    def print_error(self, text: str) -> None:
        questionary.print(strip_markers(text), style="bold fg:red")

    def print_raw(self, text: str) -> None:
        questionary.print(text.rstrip("\n"))

    def is_interactive(self) -> bool:
        return True
