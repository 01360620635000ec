"""Single-command usage rendering."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

from .commands.models import Dispatcher
from .commands.parsing import parse_usage

if TYPE_CHECKING:
    from .commands.models import CommandNode

__all__ = ["CommandUsageBox", "UsageRenderer"]


class UsageRenderer(Protocol):
    """Formats the usage of one command."""

    def __call__(self, node: CommandNode, path: str) -> str:
        """Return the usage text of `node`, reached by typing `path`."""


class CommandUsageBox:
    """Default usage renderer.

    Output::

        Usage: //fill <pattern> <radius> [depth]
        Fill a hole
        Aliases: /fill
        Arguments:
          <pattern>  required
          [depth]    optional

        <long help>
    """

    def __init__(self, prefix: str = "") -> None:
        self.prefix = prefix

    def __call__(self, node: CommandNode, path: str) -> str:
        path = path or node.primary_alias
        lines: list[str] = []

        if isinstance(node, Dispatcher):
            subcommands = "|".join(sorted(child.primary_alias for child in node.commands()))
            lines.append(f"Usage: {self.prefix}{path} <{subcommands}>")
        else:
            lines.append(f"Usage: {self.prefix}{path} {node.usage}".rstrip())

        if node.description:
            lines.append(node.description)
        if len(node.aliases) > 1:
            lines.append(f"Aliases: {', '.join(node.aliases[1:])}")

        args, _ = parse_usage(node.usage)
        if args:
            width = max(len(arg.value) for arg in args) + 2
            lines.append("Arguments:")
            for arg in args:
                label = f"<{arg.value}>" if arg.required else f"[{arg.value}]"
                lines.append(f"  {label:{width}s} {'required' if arg.required else 'optional'}")

        if isinstance(node, Dispatcher) and len(node):
            lines.append("Sub-commands:")
            width = max(len(child.primary_alias) for child in node.commands())
            for child in sorted(node.commands(), key=lambda c: c.primary_alias.casefold()):
                lines.append(f"  {child.primary_alias:{width}s} {child.description}".rstrip())

        if node.help and node.help.strip() != node.description:
            lines.append("")
            lines.append(node.help.strip())

        return "\n".join(lines) + "\n"
