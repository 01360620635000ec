"""Command path resolution."""

from __future__ import annotations

from dataclasses import dataclass, field

from .commands.models import CommandNode, Dispatcher
from .constants import PATH_SEPARATOR, ROOT_MARKERS
from .models import LeafHasNoChildren, RootCommandNotFound, SubCommandNotFound

__all__ = ["Resolution", "detect_command", "resolve_path"]


@dataclass
class Resolution:
    """Outcome of a successful path walk."""

    node: CommandNode
    visited: list[str] = field(default_factory=list)  # tokens as typed

    @property
    def is_dispatcher(self) -> bool:
        """Return True if the node can be listed."""
        return not self.node.is_leaf


def detect_command(dispatcher: Dispatcher, command: str, is_root: bool) -> CommandNode | None:
    """Look `command` up in `dispatcher`.

    At the root, a command typed without any separator is also tried
    with two, then one leading separator: some root commands are only
    registered under their marked form, and "//x" and "/x" may be
    different commands.
    """
    mapping = dispatcher.get(command)
    if mapping is not None or not is_root or PATH_SEPARATOR in command:
        return mapping

    for marker in ROOT_MARKERS:
        mapping = dispatcher.get(marker + command)
        if mapping is not None:
            return mapping
    return None


def resolve_path(root: Dispatcher, tokens: list[str]) -> Resolution:
    """Walk `tokens` down from `root`.

    Raises:
        RootCommandNotFound: if the first token matches no root command
        SubCommandNotFound: if a later token matches no sub-command
        LeafHasNoChildren: if tokens remain once a leaf is reached
    """
    node: CommandNode = root
    visited: list[str] = []

    for token in tokens:
        if not isinstance(node, Dispatcher):
            raise LeafHasNoChildren(visited, token)

        is_root = not visited
        mapping = None
        command = token
        if is_root:
            # The typed form comes first so "//x" and "/x" can name different commands
            mapping = node.get(token)
            if mapping is None and len(token) > 1 and token.startswith(PATH_SEPARATOR):
                command = token[1:]
        if mapping is None:
            mapping = detect_command(node, command, is_root)

        if mapping is None:
            if is_root:
                raise RootCommandNotFound(token)
            raise SubCommandNotFound(command, visited)

        node = mapping
        visited.append(token)

    return Resolution(node=node, visited=visited)
