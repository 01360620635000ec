"""Message templates for help output.

Templates carry `&x` style markers (see `helptree.ansi.MARKER_CODES`);
the renderer never interprets them, callers translate or strip them.
Values put into the placeholders must be escaped with
`helptree.ansi.escape_markers`.
"""

__all__ = [
    "COMMAND_NOT_FOUND",
    "HELP_FOOTER",
    "HELP_HEADER",
    "HELP_HEADER_CATEGORIES",
    "HELP_ITEM_ALLOWED",
    "HELP_ITEM_DENIED",
    "NO_SUB_COMMANDS",
    "PAGE_OUT_OF_RANGE",
    "SUB_COMMAND_NOT_FOUND",
]

HELP_HEADER_CATEGORIES = "&e Help: categories"
HELP_HEADER = "&e Help: page {page}/{total}"
HELP_ITEM_ALLOWED = "&a{path}&8 - &7{description}"
HELP_ITEM_DENIED = "&c{path}&8 - &7{description}"
HELP_FOOTER = "&8 Use '{help_command} <category|command> [page]' for more."

COMMAND_NOT_FOUND = "The command '{token}' could not be found."
SUB_COMMAND_NOT_FOUND = "The sub-command '{token}' under '{visited}' could not be found."
NO_SUB_COMMANDS = "'{visited}' has no sub-commands. (Maybe '{token}' is for a parameter?)"
PAGE_OUT_OF_RANGE = "There is no page {page} (total number of pages is {total})."
