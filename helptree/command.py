"""Helptree CLI: print help for a command tree described in TOML."""

import asyncio
import logging
import sys

from .browse import browse
from .builtin_commands import BuiltinCommands
from .caller import ConsoleCaller
from .commands.models import Dispatcher
from .commands.tree import build_command_tree, walk
from .config import Configuration
from .config_loader import ConfigLoader
from .help import HelpCommand
from .logging_setup import get_logger, init_logger
from .models import ExitCode, HelpTreeError
from .schema import COMMAND_SCHEMA, HELPTREE_SCHEMA
from .validation import ConfigValidator, validate_commands
from .version import VERSION

__all__ = ["load_tree", "main", "run_client"]

USAGE = """Syntax: helptree [options] [category|command...] [page]

Options:
  --config <path>   Use a different configuration file or directory
  --debug <file>    Enable debug mode and log to a file
  --grant <perm>    Grant a permission (repeatable, wildcards allowed)
  --browse          Browse the help interactively
  --validate        Only check the configuration
  --version         Show the version
"""


def use_param(txt: str, argv: list[str]) -> str:
    """Check if parameter `txt` is in argv.

    if found, removes it from argv & returns the argument value
    """
    v = ""
    if txt in argv:
        i = argv.index(txt)
        if i + 1 >= len(argv):
            msg = f"{txt} requires a value"
            raise ValueError(msg)
        v = argv[i + 1]
        del argv[i : i + 2]
    return v


def use_flag(txt: str, argv: list[str]) -> bool:
    """Remove flag `txt` from argv, returning True if it was there."""
    if txt in argv:
        argv.remove(txt)
        return True
    return False


async def load_tree(config_filename: str, log: logging.Logger) -> tuple[Dispatcher, Configuration, list[str]]:
    """Load the configuration and build the command tree.

    Returns:
        Tuple of (root dispatcher, [helptree] section, validation errors)

    Raises:
        HelpTreeError: if the configuration can't be read or the tree can't be built
    """
    raw = await ConfigLoader(log).load(config_filename)
    section = raw.get("helptree", {})
    commands = raw.get("commands", {})

    validator = ConfigValidator(section, "helptree", log)
    errors = validator.validate(HELPTREE_SCHEMA)
    validator.warn_unknown_keys(HELPTREE_SCHEMA)
    if isinstance(commands, dict):
        errors.extend(validate_commands(commands, COMMAND_SCHEMA, log))
    for error in errors:
        log.error(error)

    config = Configuration(section, logger=log, schema=HELPTREE_SCHEMA)
    return build_command_tree(commands, log), config, errors


async def run_client(argv: list[str], config_filename: str = "", grants: tuple[str, ...] = (), interactive: bool = False, validate_only: bool = False) -> ExitCode:
    """Run the client with the remaining command line words."""
    log = get_logger("helptree")
    root, config, errors = await load_tree(config_filename, log)

    if validate_only:
        if errors:
            print("\n".join(errors))
            return ExitCode.CONFIG_ERROR
        print(f"Configuration OK: {sum(1 for _ in walk(root))} commands")
        return ExitCode.SUCCESS

    builtins = BuiltinCommands(HelpCommand(root, config))
    try:
        builtins.register(root)
    except ValueError as e:
        log.critical("Invalid command tree: %s", e)
        raise HelpTreeError from e

    permissions = [*config.get_list("permissions"), *grants]
    if interactive:
        await browse(root, config, permissions)
    else:
        colors = config.get_bool("colors") if "colors" in config else None
        builtins.run_help(ConsoleCaller(permissions, colors=colors), *argv)
    return ExitCode.SUCCESS


def main() -> None:
    """Run the command."""
    argv = sys.argv[1:]
    try:
        debug_flag = use_param("--debug", argv)
        config_override = use_param("--config", argv)
        grants = []
        while "--grant" in argv:
            grants.append(use_param("--grant", argv))
    except ValueError as e:
        print(f"{e}\n\n{USAGE}", file=sys.stderr)
        sys.exit(ExitCode.USAGE_ERROR)

    if debug_flag:
        init_logger(filename=debug_flag, force_debug=True)
    else:
        init_logger()
    log = get_logger("startup")

    if use_flag("--help", argv):
        print(USAGE)
        sys.exit(ExitCode.SUCCESS)
    if use_flag("--version", argv):
        print(VERSION)
        sys.exit(ExitCode.SUCCESS)
    interactive = use_flag("--browse", argv)
    validate_only = use_flag("--validate", argv)

    unknown = [word for word in argv if word.startswith("--") and word != "--"]
    if unknown:
        log.error("Unknown option: %s", unknown[0])
        print(USAGE, file=sys.stderr)
        sys.exit(ExitCode.USAGE_ERROR)

    exit_code = ExitCode.SUCCESS
    try:
        exit_code = asyncio.run(run_client(argv, config_override, tuple(grants), interactive, validate_only))
    except KeyboardInterrupt:
        pass
    except HelpTreeError:
        log.critical("Command failed.")
        exit_code = ExitCode.CONFIG_ERROR
    except Exception:  # pylint: disable=W0718
        log.critical("Unhandled exception:", exc_info=True)
        exit_code = ExitCode.COMMAND_ERROR
    sys.exit(exit_code)


if __name__ == "__main__":
    main()
