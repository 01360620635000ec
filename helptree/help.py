"""Help listing and rendering for command trees."""

from __future__ import annotations

from typing import TYPE_CHECKING

from . import messages
from .ansi import escape_markers
from .arguments import CommandArguments
from .commands.tree import get_display_path
from .constants import COMMAND_CLEAN_PATTERN
from .grouping import find_group, group_commands
from .logging_setup import get_logger
from .models import HelpError
from .paging import classify_arguments, page_size_for, paginate
from .resolver import resolve_path
from .usage import CommandUsageBox

if TYPE_CHECKING:
    from collections.abc import Iterable

    from .caller import Caller
    from .commands.models import CommandNode, Dispatcher
    from .config import Configuration
    from .paging import Page
    from .usage import UsageRenderer

__all__ = ["HelpCommand", "get_help", "render_categories", "render_page", "sort_commands"]


def _sort_key(node: CommandNode) -> tuple[str, str, str]:
    cleaned = COMMAND_CLEAN_PATTERN.sub("", node.primary_alias)
    return (cleaned.casefold(), cleaned, node.primary_alias)


def sort_commands(nodes: Iterable[CommandNode]) -> list[CommandNode]:
    """Return `nodes` sorted by primary alias, ignoring case and leading separators."""
    return sorted(nodes, key=_sort_key)


def render_categories(groups: dict[str, list[CommandNode]], help_command: str = "help") -> str:
    """Render the category summary: one line per group with its size."""
    lines = [messages.HELP_HEADER_CATEGORIES]
    lines.extend(messages.HELP_ITEM_ALLOWED.format(path=escape_markers(f"{help_command} {label}"), description=len(nodes)) for label, nodes in groups.items())
    lines.append(messages.HELP_FOOTER.format(help_command=escape_markers(help_command)))
    return "\n".join(lines)


def render_page(page: Page[CommandNode], visited: list[str], caller: Caller, prefix: str = "", help_command: str = "help") -> str:
    """Render one page of commands, marking those `caller` can't use."""
    lines = [messages.HELP_HEADER.format(page=page.number, total=page.total)]
    for node in page.items:
        template = messages.HELP_ITEM_ALLOWED if node.check_permission(caller) else messages.HELP_ITEM_DENIED
        lines.append(template.format(path=escape_markers(get_display_path(visited, node, prefix)), description=escape_markers(node.description)))
    lines.append(messages.HELP_FOOTER.format(help_command=escape_markers(help_command)))
    return "\n".join(lines)


class HelpCommand:
    """The `help` command: finds what the user asked about and prints it.

    - no argument: list the categories of root commands
    - a page number only: list every root command
    - a category name: list the commands of that category
    - a command path: list its sub-commands, or show its usage
    """

    def __init__(self, root: Dispatcher, config: Configuration | None = None, usage_renderer: UsageRenderer | None = None) -> None:
        self.root = root
        self.config = config
        self.log = get_logger("help")
        self.prefix = config.get_str("command_prefix") if config else ""
        self.help_command = config.get_str("help_command", "help") if config else "help"
        self.usage_renderer = usage_renderer or CommandUsageBox(self.prefix)

    def run(self, caller: Caller, args: CommandArguments | list[str] | str = "") -> None:
        """Print the help requested by `args` to `caller`.

        Problems are reported with `caller.print_error`, never raised.
        """
        if not isinstance(args, CommandArguments):
            args = CommandArguments.parse(args)
        try:
            self._run(caller, args)
        except HelpError as e:
            self.log.debug("help %s failed: %r", args.tokens, e)
            caller.print_error(e.message)

    def _run(self, caller: Caller, args: CommandArguments) -> None:
        request = classify_arguments(args)
        nodes = self.root.commands()
        visited: list[str] = []

        if request.path:
            members = None
            if len(request.path) == 1:
                members = find_group(group_commands(nodes), request.path[0])
            if members is not None:
                nodes = members
            else:
                resolution = resolve_path(self.root, request.path)
                if not resolution.is_dispatcher:
                    self.log.debug("help %s: usage of %s", request.path, resolution.node.primary_alias)
                    caller.print_raw(self.usage_renderer(resolution.node, " ".join(resolution.visited)))
                    return
                nodes = resolution.node.commands()  # type: ignore[attr-defined]
                visited = resolution.visited
        elif request.index is None:
            caller.print(render_categories(group_commands(nodes), self.help_command))
            return

        page = paginate(sort_commands(nodes), page_size_for(caller, self.config), request.index)
        self.log.debug("help %s: page %d/%d", request.path, page.number, page.total)
        caller.print(render_page(page, visited, caller, self.prefix, self.help_command))


def get_help(root: Dispatcher, caller: Caller, args: CommandArguments | list[str] | str = "", config: Configuration | None = None) -> None:
    """Run the help command once against `root`."""
    HelpCommand(root, config).run(caller, args)
