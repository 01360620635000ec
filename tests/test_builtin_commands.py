"""Tests for the built-in help command."""

import pytest

from helptree.builtin_commands import BuiltinCommands
from helptree.help import HelpCommand

from .testtools import RecordingCaller


@pytest.fixture
def builtins(sample_tree):
    return BuiltinCommands(HelpCommand(sample_tree))


def test_register(builtins, sample_tree):
    (node,) = builtins.register(sample_tree)
    assert node.aliases == ("help", "?")
    assert node.group == "Help"
    assert node.usage == "[category|command...] [page]"
    assert node.description == "Displays help for commands."
    assert sample_tree.get("?") is node


def test_register_twice(builtins, sample_tree):
    builtins.register(sample_tree)
    with pytest.raises(ValueError, match="Alias 'help' is already registered"):
        builtins.register(sample_tree)


def test_help_on_help(builtins, sample_tree):
    builtins.register(sample_tree)
    caller = RecordingCaller()
    builtins.run_help(caller, "?")
    assert caller.raw[0].startswith("Usage: ? [category|command...] [page]\nDisplays help for commands.\nAliases: ?\n")


def test_help_category(builtins, sample_tree):
    builtins.register(sample_tree)
    caller = RecordingCaller()
    builtins.run_help(caller, "Help")
    assert caller.printed[0].split("\n")[1] == "&ahelp&8 - &7Displays help for commands."
