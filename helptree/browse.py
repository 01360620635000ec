"""Interactive help browser."""

from __future__ import annotations

from typing import TYPE_CHECKING

import questionary

from .builtin_commands import BuiltinCommands
from .caller import PromptCaller
from .commands.tree import walk
from .grouping import group_commands
from .help import HelpCommand
from .logging_setup import get_logger

if TYPE_CHECKING:
    from collections.abc import Iterable

    from .commands.models import Dispatcher
    from .config import Configuration

__all__ = ["browse", "get_choices"]

EXIT_WORDS = frozenset({"exit", "quit", "q"})


def get_choices(root: Dispatcher) -> list[str]:
    """Return completion candidates: category labels and command paths."""
    choices = list(group_commands(root.commands()))
    choices.extend(" ".join(path) for path, _node in walk(root))
    return choices


async def browse(root: Dispatcher, config: Configuration | None = None, permissions: Iterable[str] = ()) -> None:
    """Prompt for help queries until the user leaves.

    Each answer is handled like the arguments of the help command,
    with page sizes of an interactive caller.
    """
    log = get_logger("browse")
    caller = PromptCaller(permissions)
    builtins = BuiltinCommands(HelpCommand(root, config))
    choices = get_choices(root)

    questionary.print("Type a category, a command or a page number. Empty line to quit.", style="fg:gray")
    while True:
        answer = await questionary.autocomplete("help>", choices=choices, ignore_case=True, match_middle=True).ask_async()
        if answer is None or not answer.strip() or answer.strip().casefold() in EXIT_WORDS:
            break
        log.debug("query: %s", answer)
        builtins.run_help(caller, *answer.split())
