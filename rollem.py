#!/usr/bin/env python3
# rollem.py - interactive dice roller

import logging

from rich.console import Console
from rich.text import Text
from textual import events
from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.containers import Horizontal
from textual.widgets import Input, RichLog, Static

from commands import build_default_registry, CommandParser
from config import AppConfig
from log_setup import setup_logging
from session import Session, TranscriptLine

logger = logging.getLogger(__name__)
console = Console()


def render_line(line: TranscriptLine, theme) -> Text:
    """Echoed expression in the sender style, then each total in its crit style."""
    text = Text()
    text.append(line.expression, style=theme.sender)
    text.append(": ")
    for i, (total, tag) in enumerate(line.totals):
        if i:
            text.append(" ")
        text.append(str(total), style=theme.style_for(tag))
    return text


# ---------- App ----------
class RollemApp(App):
    CSS = """
    #transcript {
        height: 1fr;
        scrollbar-gutter: stable;
    }

    #input-row {
        height: auto;
        margin-top: 1;
    }

    #prompt {
        width: auto;
        padding: 1 0;
    }

    #roll-input {
        width: 1fr;
    }

    #help {
        height: auto;
        margin-top: 1;
        display: none;
    }
    """

    BINDINGS = [
        Binding("up", "recall_previous", "prev roll", priority=True),
        Binding("down", "recall_next", "next roll", priority=True),
        Binding("f1", "toggle_help", "toggle help", priority=True),
        Binding("escape", "leave", "quit", priority=True),
        Binding("ctrl+c", "leave", "quit", priority=True),
    ]

    def __init__(self, config: AppConfig = None, rng=None):
        super().__init__()
        self.app_config = config or AppConfig()
        self.theme_config = self.app_config.theme
        self.session = Session(
            rng=rng,
            input_height=self.app_config.input_height,
            gap=self.app_config.gap,
        )
        self.parser = CommandParser(build_default_registry())
        self.help_visible = False
        self._transcript_ready = False
        self.quitting = False

    def compose(self) -> ComposeResult:
        yield RichLog(id="transcript", wrap=True, markup=False)
        with Horizontal(id="input-row"):
            yield Static(self.app_config.prompt, id="prompt")
            yield Input(
                placeholder=self.app_config.placeholder,
                max_length=self.app_config.char_limit,
                id="roll-input",
            )
        yield Static(
            Text("\n".join(self.app_config.help_lines), style=self.theme_config.help),
            id="help",
        )

    def on_mount(self) -> None:
        self._transcript_ready = True
        self.render_transcript()
        self.query_one("#roll-input", Input).focus()

    # ------------------- TRANSCRIPT -------------------
    def render_transcript(self) -> None:
        """Redraw every line at the current width; the greeting stands in until the first roll."""
        log = self.query_one("#transcript", RichLog)
        log.clear()
        if not self.session.transcript:
            log.write(self.app_config.greeting)
            return
        for line in self.session.transcript:
            log.write(render_line(line, self.theme_config))
        log.scroll_end(animate=False)

    def set_input(self, value: str) -> None:
        box = self.query_one("#roll-input", Input)
        box.value = value
        box.cursor_position = len(value)

    # ------------------- EVENTS -------------------
    def on_input_changed(self, event: Input.Changed) -> None:
        self.session.input_text = event.value

    def on_input_submitted(self, event: Input.Submitted) -> None:
        user_input = event.value

        handler, arg = self.parser.parse(user_input)
        if handler:
            self.set_input("")
            handler.execute(self, arg)
            return

        first_roll = not self.session.transcript
        outcome = self.session.submit(user_input)

        if outcome.error is not None:
            if self.app_config.show_errors:
                self.notify(str(outcome.error), severity="error")
            return
        if not outcome.ok:
            return

        if first_roll:
            self.render_transcript()
        else:
            log = self.query_one("#transcript", RichLog)
            log.write(render_line(outcome.line, self.theme_config))
            log.scroll_end(animate=False)
        self.set_input("")

    def on_resize(self, event: events.Resize) -> None:
        geometry = self.session.resize(event.size.width, event.size.height)
        logger.debug("Resized to %sx%s", geometry.width, geometry.height)
        if self._transcript_ready:
            self.render_transcript()

    # ------------------- ACTIONS -------------------
    def action_recall_previous(self) -> None:
        if self.session.history:
            self.set_input(self.session.recall_previous())

    def action_recall_next(self) -> None:
        if self.session.history and not self.session.past_end:
            self.set_input(self.session.recall_next())

    def action_toggle_help(self) -> None:
        self.help_visible = not self.help_visible
        self.query_one("#help", Static).display = self.help_visible

    def action_leave(self) -> None:
        self.quitting = True
        self.exit()


# ---------- Main ----------
def main():
    config = AppConfig()
    setup_logging(config)

    app = RollemApp(config)
    app.run()

    if app.quitting:
        console.print(config.farewell)


if __name__ == "__main__":
    main()
