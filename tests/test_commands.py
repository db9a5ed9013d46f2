"""Tests for slash command routing."""

import pytest

from commands import (
    CommandParser,
    CommandRegistry,
    HelpCommand,
    QuitCommand,
    RollemCommand,
    UnknownCommand,
    build_default_registry,
)


class FakeApp:
    def __init__(self):
        self.calls = []

    def action_toggle_help(self):
        self.calls.append("help")

    def action_leave(self):
        self.calls.append("leave")

    def notify(self, message, severity="information"):
        self.calls.append((severity, message))


@pytest.fixture
def parser():
    return CommandParser(build_default_registry())


class TestCommandParser:
    def test_dice_text_is_not_a_command(self, parser) -> None:
        assert parser.parse("3#2d6+1") == (None, None)

    @pytest.mark.parametrize("text", ["/h", "/help", "/?", "/HELP"])
    def test_help_aliases(self, parser, text) -> None:
        cmd, _ = parser.parse(text)
        assert isinstance(cmd, HelpCommand)

    @pytest.mark.parametrize("text", ["/q", "/quit", "/exit"])
    def test_quit_aliases(self, parser, text) -> None:
        cmd, _ = parser.parse(text)
        assert isinstance(cmd, QuitCommand)

    def test_argument_split_off(self, parser) -> None:
        cmd, arg = parser.parse("  /h  extra words ")
        assert isinstance(cmd, HelpCommand)
        assert arg == "extra words"

    def test_unknown_command_keeps_full_text(self, parser) -> None:
        cmd, arg = parser.parse("/roll 2d6")
        assert isinstance(cmd, UnknownCommand)
        assert arg == "/roll 2d6"


class TestCommands:
    def test_help_toggles(self, parser) -> None:
        app = FakeApp()
        cmd, arg = parser.parse("/h")
        cmd.execute(app, arg)
        assert app.calls == ["help"]

    def test_quit_leaves(self, parser) -> None:
        app = FakeApp()
        cmd, arg = parser.parse("/q")
        cmd.execute(app, arg)
        assert app.calls == ["leave"]

    def test_unknown_warns(self, parser) -> None:
        app = FakeApp()
        cmd, arg = parser.parse("/nope")
        cmd.execute(app, arg)
        assert app.calls == [("warning", "Unknown command: /nope")]

    def test_base_command_is_abstract(self) -> None:
        with pytest.raises(NotImplementedError):
            RollemCommand().execute(FakeApp(), "")


class TestRegistry:
    def test_registers_aliases(self) -> None:
        registry = CommandRegistry()
        help_cmd = HelpCommand()
        registry.register(help_cmd)
        assert registry.get("/h") is registry.get("/help") is help_cmd
        assert registry.get("/q") is None

    def test_fallback_lives_on_the_parser(self) -> None:
        registry = build_default_registry()
        parser = CommandParser(registry)
        assert registry.get("/unknown") is None
        assert isinstance(parser.parse("/unknown")[0], UnknownCommand)
