"""Error types and shared enums."""

from enum import IntEnum

from . import messages
from .ansi import escape_markers

__all__ = [
    "ExitCode",
    "HelpError",
    "HelpTreeError",
    "LeafHasNoChildren",
    "PageOutOfRange",
    "RootCommandNotFound",
    "SubCommandNotFound",
]


class HelpTreeError(BaseException):
    """Used for errors which already triggered logging."""


class HelpError(Exception):
    """A help request that can't be satisfied, reported to the caller."""

    @property
    def message(self) -> str:
        """Return the user facing message, with `&` escaped for the caller."""
        raise NotImplementedError


class RootCommandNotFound(HelpError):
    """No root command matches the token, even after normalization."""

    def __init__(self, token: str) -> None:
        super().__init__(token)
        self.token = token

    @property
    def message(self) -> str:
        return messages.COMMAND_NOT_FOUND.format(token=escape_markers(self.token))


class SubCommandNotFound(HelpError):
    """A dispatcher below the root has no child named `token`."""

    def __init__(self, token: str, visited: list[str]) -> None:
        super().__init__(token, visited)
        self.token = token
        self.visited = list(visited)

    @property
    def message(self) -> str:
        return messages.SUB_COMMAND_NOT_FOUND.format(token=escape_markers(self.token), visited=escape_markers(" ".join(self.visited)))


class LeafHasNoChildren(HelpError):
    """Path tokens remain after reaching a leaf command."""

    def __init__(self, visited: list[str], token: str) -> None:
        super().__init__(visited, token)
        self.visited = list(visited)
        self.token = token

    @property
    def message(self) -> str:
        return messages.NO_SUB_COMMANDS.format(visited=escape_markers(" ".join(self.visited)), token=escape_markers(self.token))


class PageOutOfRange(HelpError):
    """The requested page is past the last one."""

    def __init__(self, page: int, total: int) -> None:
        super().__init__(page, total)
        self.page = page  # 1-based
        self.total = total

    @property
    def message(self) -> str:
        return messages.PAGE_OUT_OF_RANGE.format(page=self.page, total=self.total)


# Exit codes for the CLI
class ExitCode(IntEnum):
    """Standard exit codes for the helptree CLI."""

    SUCCESS = 0
    USAGE_ERROR = 1  # Invalid command line
    CONFIG_ERROR = 2  # Configuration could not be loaded or is invalid
    COMMAND_ERROR = 3  # Unexpected failure
