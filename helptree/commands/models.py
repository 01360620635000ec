"""Data models for the command tree."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from ..constants import DEFAULT_GROUP

if TYPE_CHECKING:
    from ..caller import Caller

__all__ = ["CommandArg", "CommandNode", "Dispatcher"]


@dataclass
class CommandArg:
    """An argument parsed from a command's usage or docstring."""

    value: str  # e.g., "next|pause|clear" or "name"
    required: bool  # True for <arg>, False for [arg]


@dataclass(eq=False)
class CommandNode:
    """A leaf command: something that can be invoked but not drilled into.

    The first alias is the primary one, used for display.
    """

    aliases: tuple[str, ...]
    description: str = ""
    group: str = DEFAULT_GROUP
    usage: str = ""  # Argument signature, e.g. "<pattern> <radius> [depth]"
    help: str = ""  # Long help text
    permissions: tuple[str, ...] = ()  # Any of them grants access

    def __post_init__(self) -> None:
        if not self.aliases:
            msg = "A command needs at least one alias"
            raise ValueError(msg)
        self.aliases = tuple(self.aliases)
        self.permissions = tuple(self.permissions)
        if not self.group or not self.group.strip():
            self.group = DEFAULT_GROUP

    @property
    def primary_alias(self) -> str:
        """Return the alias used for display."""
        return self.aliases[0]

    @property
    def is_leaf(self) -> bool:
        """Return True if the node has no children."""
        return True

    def check_permission(self, caller: Caller) -> bool:
        """Return True if `caller` may use this command."""
        if not self.permissions:
            return True
        return any(caller.has_permission(perm) for perm in self.permissions)


@dataclass(eq=False)
class Dispatcher(CommandNode):
    """A command owning named sub-commands.

    Children are kept in insertion order and indexed by every alias,
    case-insensitively.
    """

    _children: list[CommandNode] = field(default_factory=list, init=False, repr=False)
    _index: dict[str, CommandNode] = field(default_factory=dict, init=False, repr=False)

    @property
    def is_leaf(self) -> bool:
        return False

    def register(self, node: CommandNode) -> CommandNode:
        """Add `node` as a child.

        Raises:
            ValueError: if one of its aliases is already used by a sibling
        """
        keys = [alias.casefold() for alias in node.aliases]
        for alias, key in zip(node.aliases, keys, strict=True):
            if key in self._index:
                msg = f"Alias '{alias}' is already registered under '{self.primary_alias}'"
                raise ValueError(msg)
        for key in keys:
            self._index[key] = node
        self._children.append(node)
        return node

    def get(self, alias: str) -> CommandNode | None:
        """Return the child registered under `alias`, if any."""
        return self._index.get(alias.casefold())

    def commands(self) -> list[CommandNode]:
        """Return the direct children in insertion order."""
        return list(self._children)

    def __len__(self) -> int:
        return len(self._children)

    def check_permission(self, caller: Caller) -> bool:
        """Return True if `caller` may use this command or any sub-command."""
        if self.permissions or not self._children:
            return super().check_permission(caller)
        return any(child.check_permission(caller) for child in self._children)
