"""Built-in commands, registered next to the configured command tree."""

from __future__ import annotations

from typing import TYPE_CHECKING

from .commands.discovery import command, register_object

if TYPE_CHECKING:
    from .caller import Caller
    from .commands.models import CommandNode, Dispatcher
    from .help import HelpCommand

__all__ = ["BuiltinCommands"]


class BuiltinCommands:
    """Commands every tree gets."""

    group = "Help"

    def __init__(self, help_command: HelpCommand) -> None:
        self.help_command = help_command

    @command("help", "?")
    def run_help(self, caller: Caller, *args: str) -> None:
        """[category|command...] [page] Displays help for commands.

        Without argument, lists the command categories.
        A trailing number selects the page of a listing.
        """
        self.help_command.run(caller, list(args))

    def register(self, root: Dispatcher) -> list[CommandNode]:
        """Add the built-in commands to `root`.

        Raises:
            ValueError: if the tree already defines one of them
        """
        return register_object(root, self)
