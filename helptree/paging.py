"""Argument classification and pagination."""

from __future__ import annotations

import math
from collections.abc import Sequence
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Generic, TypeVar

from .constants import CONSOLE_PAGE_SIZE, INTERACTIVE_PAGE_SIZE
from .models import PageOutOfRange

if TYPE_CHECKING:
    from .arguments import CommandArguments
    from .caller import Caller
    from .config import Configuration

__all__ = ["Page", "PageRequest", "classify_arguments", "page_size_for", "paginate"]

T = TypeVar("T")


@dataclass
class PageRequest:
    """What the user asked for: a path and maybe a page."""

    path: list[str] = field(default_factory=list)
    index: int | None = None  # 0-based, None when no page was given


@dataclass
class Page(Generic[T]):
    """One slice of a paginated listing."""

    items: list[T]
    index: int  # 0-based
    total: int

    @property
    def number(self) -> int:
        """Return the 1-based page number."""
        return self.index + 1


def classify_arguments(args: CommandArguments) -> PageRequest:
    """Split arguments into path tokens and an optional page number.

    The last token is a page number when it parses as an integer
    (pages <= 0 mean the first page). Otherwise every token is a path token.
    """
    if not len(args):
        return PageRequest()
    try:
        page = args.get_integer(len(args) - 1)
    except ValueError:
        return PageRequest(path=list(args.tokens))
    return PageRequest(path=list(args.tokens[:-1]), index=max(page, 1) - 1)


def page_size_for(caller: Caller, config: Configuration | None = None) -> int:
    """Return how many items fit on a page for `caller`.

    Interactive callers get short pages, consoles long ones.
    """
    name, default = ("page_size_interactive", INTERACTIVE_PAGE_SIZE) if caller.is_interactive() else ("page_size_console", CONSOLE_PAGE_SIZE)
    if config is None:
        return default
    size = config.get_int(name, default)
    if size <= 0:
        config.log.warning("Invalid %s: %s, using %d", name, size, default)
        return default
    return size


def paginate(items: Sequence[T], page_size: int, page_index: int | None = None) -> Page[T]:
    """Return the page `page_index` (0-based, first page if None) of `items`.

    Raises:
        PageOutOfRange: if the page starts past the last item
        ValueError: if `page_size` isn't positive
    """
    if page_size <= 0:
        msg = f"Page size must be positive, got {page_size}"
        raise ValueError(msg)
    index = max(0, page_index or 0)
    total = math.ceil(len(items) / page_size)
    offset = page_size * index
    if offset >= len(items):
        raise PageOutOfRange(index + 1, total)
    return Page(items=list(items[offset : offset + page_size]), index=index, total=total)
