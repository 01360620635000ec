"""Tests for the output consumers."""

from io import StringIO
from unittest.mock import call

import pytest

from helptree.ansi import RESET
from helptree.caller import ConsoleCaller, PermissionHolder, PromptCaller


class TestPermissionHolder:
    def test_exact(self):
        holder = PermissionHolder(["worldedit.fill"])
        assert holder.has_permission("worldedit.fill")
        assert not holder.has_permission("worldedit.drain")

    def test_wildcard(self):
        holder = PermissionHolder(["worldedit.*"])
        assert holder.has_permission("worldedit.fill")
        assert holder.has_permission("worldedit.brush.sphere")
        assert not holder.has_permission("tools.cmd")

    def test_nothing_granted(self):
        assert not PermissionHolder().has_permission("anything")


class TestConsoleCaller:
    @pytest.fixture
    def stream(self):
        return StringIO()

    def test_plain(self, stream):
        caller = ConsoleCaller(stream=stream, colors=False)
        caller.print("&e Help: categories\n&aGeneral&8 - &72")
        assert stream.getvalue() == " Help: categories\nGeneral - 2\n"

    def test_colored(self, stream):
        ConsoleCaller(stream=stream, colors=True).print("&aok")
        assert stream.getvalue() == f"{RESET}\x1b[32mok{RESET}\n"

    def test_error(self, stream):
        ConsoleCaller(stream=stream, colors=False).print_error("The command 'x' could not be found.")
        assert stream.getvalue() == "The command 'x' could not be found.\n"

    def test_error_colored(self, stream):
        ConsoleCaller(stream=stream, colors=True).print_error("bad")
        assert stream.getvalue().startswith(f"{RESET}\x1b[31mbad")

    def test_raw_is_verbatim(self, stream):
        caller = ConsoleCaller(stream=stream, colors=True)
        caller.print_raw("Usage: a &a\n")
        caller.print_raw("no newline")
        assert stream.getvalue() == "Usage: a &a\nno newline\n"

    def test_not_interactive(self, stream):
        caller = ConsoleCaller(["a.*"], stream=stream)
        assert caller.is_interactive() is False
        assert caller.has_permission("a.b")

    def test_no_color_env(self, stream, monkeypatch):
        monkeypatch.setenv("NO_COLOR", "1")
        ConsoleCaller(stream=stream).print("&aok")
        assert stream.getvalue() == "ok\n"


class TestPromptCaller:
    @pytest.fixture
    def qprint(self, mocker):
        return mocker.patch("helptree.caller.questionary.print")

    def test_lines_are_styled(self, qprint):
        PromptCaller().print("&e Help: page 1/1\n&afill&8 - &7Fill\n&cdrain&8 - &7Drain\nplain")
        assert qprint.call_args_list == [
            call(" Help: page 1/1", style="bold fg:yellow"),
            call("fill - Fill", style="fg:green"),
            call("drain - Drain", style="fg:red"),
            call("plain", style=None),
        ]

    def test_error(self, qprint):
        PromptCaller().print_error("nope")
        qprint.assert_called_once_with("nope", style="bold fg:red")

    def test_raw(self, qprint):
        PromptCaller().print_raw("Usage: fill\n")
        qprint.assert_called_once_with("Usage: fill")

    def test_interactive(self):
        caller = PromptCaller(["tools.cmd"])
        assert caller.is_interactive() is True
        assert caller.has_permission("tools.cmd")


class TestLiteralAmpersands:
    """Descriptions, labels and typed tokens come out unchanged."""

    @pytest.fixture
    def region_help(self):
        from helptree.commands.models import CommandNode, Dispatcher
        from helptree.help import HelpCommand

        root = Dispatcher(aliases=("root",))
        root.register(CommandNode(aliases=("//replace",), description="Search&replace blocks, R&D 5&8 tool", group="Region&a"))
        return HelpCommand(root)

    def test_console(self, region_help):
        stream = StringIO()
        region_help.run(ConsoleCaller(stream=stream, colors=False), ["region&a"])
        assert "//replace - Search&replace blocks, R&D 5&8 tool\n" in stream.getvalue()

    def test_console_colored(self, region_help):
        stream = StringIO()
        region_help.run(ConsoleCaller(stream=stream, colors=True), [])
        assert "help Region&a" in stream.getvalue()

    def test_console_error(self, region_help):
        stream = StringIO()
        region_help.run(ConsoleCaller(stream=stream, colors=False), ["R&D"])
        assert stream.getvalue() == "The command 'R&D' could not be found.\n"

    def test_prompt(self, region_help, mocker):
        qprint = mocker.patch("helptree.caller.questionary.print")
        region_help.run(PromptCaller(), ["Region&a"])
        assert call("//replace - Search&replace blocks, R&D 5&8 tool", style="fg:green") in qprint.call_args_list

    def test_prompt_error(self, region_help, mocker):
        qprint = mocker.patch("helptree.caller.questionary.print")
        region_help.run(PromptCaller(), ["5&8"])
        qprint.assert_called_once_with("The command '5&8' could not be found.", style="bold fg:red")
