"""Grouping of sibling commands into categories."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Iterable

    from .commands.models import CommandNode

__all__ = ["find_group", "group_commands"]


def group_commands(nodes: Iterable[CommandNode]) -> dict[str, list[CommandNode]]:
    """Partition `nodes` by group label.

    Labels are compared case-insensitively; the first spelling seen is kept.
    Keys are ordered case-insensitively and members keep their input order.
    """
    labels: dict[str, str] = {}
    members: dict[str, list[CommandNode]] = {}
    for node in nodes:
        key = node.group.casefold()
        labels.setdefault(key, node.group)
        members.setdefault(key, []).append(node)
    return {labels[key]: members[key] for key in sorted(members)}


def find_group(groups: dict[str, list[CommandNode]], token: str) -> list[CommandNode] | None:
    """Return the members of the group labelled `token` (any case), if any."""
    key = token.casefold()
    for label, nodes in groups.items():
        if label.casefold() == key:
            return nodes
    return None
