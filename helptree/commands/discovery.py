"""Command extraction and registration from handler objects."""

from __future__ import annotations

import inspect
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any, TypeVar

from ..constants import DEFAULT_GROUP
from .models import CommandNode, Dispatcher
from .parsing import format_usage, parse_docstring

__all__ = ["CommandMeta", "command", "extract_commands_from_object", "register_object"]

_META_ATTRIBUTE = "__helptree_command__"

F = TypeVar("F", bound=Callable[..., Any])


@dataclass
class CommandMeta:
    """Metadata attached to a handler method by the `command` decorator."""

    aliases: tuple[str, ...] = ()
    description: str = ""
    usage: str | None = None
    permissions: tuple[str, ...] = ()


def command(*aliases: str, desc: str = "", usage: str | None = None, permissions: tuple[str, ...] = ()) -> Callable[[F], F]:
    """Decorator declaring a handler method as a command.

    Missing values are taken from the docstring (see `parse_docstring`)
    and the method name.
    """

    def _decorate(fn: F) -> F:
        setattr(fn, _META_ATTRIBUTE, CommandMeta(aliases=tuple(aliases), description=desc, usage=usage, permissions=tuple(permissions)))
        return fn

    return _decorate


def extract_commands_from_object(obj: object, group: str = DEFAULT_GROUP) -> list[CommandNode]:
    """Extract commands from a handler class or instance.

    Works with both classes and instances.
    Picks methods decorated with `command` and methods starting with "run_".

    Args:
        obj: A handler class or instance
        group: Group label given to every extracted command

    Returns:
        List of leaf CommandNode objects
    """
    commands: list[CommandNode] = []

    for name in dir(obj):
        if name.startswith("__"):
            continue
        method = getattr(obj, name)
        if not callable(method):
            continue

        meta: CommandMeta | None = getattr(method, _META_ATTRIBUTE, None)
        if meta is None:
            if not name.startswith("run_"):
                continue
            meta = CommandMeta()

        args, short_desc, full_desc = parse_docstring(inspect.getdoc(method) or "")
        commands.append(
            CommandNode(
                aliases=meta.aliases or (name.removeprefix("run_"),),
                description=meta.description or short_desc,
                group=group,
                usage=format_usage(args) if meta.usage is None else meta.usage,
                help=full_desc,
                permissions=meta.permissions,
            )
        )

    return commands


def register_object(dispatcher: Dispatcher, obj: object, group: str | None = None) -> list[CommandNode]:
    """Register the commands of `obj` as children of `dispatcher`.

    The group label is `group` if given, else the `group` attribute
    declared by the handler, else the default group.

    Raises:
        ValueError: on an alias collision
    """
    if group is None:
        group = getattr(obj, "group", None) or DEFAULT_GROUP
    nodes = extract_commands_from_object(obj, group)
    for node in nodes:
        dispatcher.register(node)
    return nodes
