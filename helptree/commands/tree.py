"""Hierarchical command tree building and display path utilities."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from ..constants import DEFAULT_GROUP
from ..models import HelpTreeError
from .models import CommandNode, Dispatcher

if TYPE_CHECKING:
    import logging
    from collections.abc import Iterable

__all__ = ["ROOT_NAME", "build_command_tree", "get_display_path", "walk"]

ROOT_NAME = "helptree"


def _as_tuple(value: str | Iterable[str] | None) -> tuple[str, ...]:
    if value is None:
        return ()
    if isinstance(value, str):
        return (value,)
    return tuple(str(item) for item in value)


def _build_node(name: str, entry: dict[str, Any], path: list[str], log: logging.Logger) -> CommandNode:
    """Build a node (and its sub-tree) from a configuration entry."""
    if not isinstance(entry, dict):
        log.critical("Command '%s' must be a table, got %s", " ".join(path), type(entry).__name__)
        raise HelpTreeError
    aliases = (name, *(alias for alias in _as_tuple(entry.get("aliases")) if alias != name))
    kwargs: dict[str, Any] = {
        "aliases": aliases,
        "description": str(entry.get("description", "")),
        "group": str(entry.get("group") or DEFAULT_GROUP),
        "usage": str(entry.get("usage", "")),
        "help": str(entry.get("help", "")),
        "permissions": _as_tuple(entry.get("permissions")),
    }
    children = entry.get("commands")
    if children is None:
        return CommandNode(**kwargs)
    dispatcher = Dispatcher(**kwargs)
    _populate(dispatcher, children, path, log)
    return dispatcher


def _populate(dispatcher: Dispatcher, section: dict[str, Any], path: list[str], log: logging.Logger) -> None:
    if not isinstance(section, dict):
        log.critical("'commands' of '%s' must be a table", " ".join(path) or ROOT_NAME)
        raise HelpTreeError
    for name, entry in section.items():
        node = _build_node(name, entry, [*path, name], log)
        try:
            dispatcher.register(node)
        except ValueError as e:
            log.critical("Invalid command tree: %s", e)
            raise HelpTreeError from e


def build_command_tree(section: dict[str, Any], log: logging.Logger, name: str = ROOT_NAME) -> Dispatcher:
    """Build the root dispatcher from the `[commands]` configuration table.

    Each key is the primary alias of a command. A nested `commands` table
    turns the entry into a dispatcher:

        [commands."//brush"]
        description = "Brushing commands"
        [commands."//brush".commands.sphere]
        usage = "<pattern> [radius]"

    Args:
        section: The `commands` table
        log: Logger used to report invalid entries
        name: Alias of the root dispatcher

    Returns:
        The root Dispatcher

    Raises:
        HelpTreeError: on malformed entries or alias collisions
    """
    root = Dispatcher(aliases=(name,))
    _populate(root, section, [], log)
    log.debug("Command tree built with %d root commands", len(root))
    return root


def get_display_path(visited: list[str], node: CommandNode, prefix: str = "") -> str:
    """Return the fully-qualified display text of `node`.

    Args:
        visited: Tokens typed to reach the dispatcher owning `node`
        node: The listed command
        prefix: Text prepended to the whole path (e.g. "/")
    """
    return prefix + " ".join([*visited, node.primary_alias])


def walk(dispatcher: Dispatcher, path: tuple[str, ...] = ()) -> Iterable[tuple[tuple[str, ...], CommandNode]]:
    """Yield (path, node) for every node below `dispatcher`, depth first."""
    for child in dispatcher.commands():
        child_path = (*path, child.primary_alias)
        yield child_path, child
        if isinstance(child, Dispatcher):
            yield from walk(child, child_path)
