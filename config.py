# config.py - settings for the Rollem session
#
# Nothing here is global state: main() builds an AppConfig and hands it to
# the app, which passes the Theme on to whatever renders the transcript.

from dataclasses import dataclass, field

from rich.style import Style

from dice import CritTag

GREETING = "Rollem if you gottem..."
FAREWELL = "Bye!"
PLACEHOLDER = "<total num of rolls>#<num dice>d<num sides>[+,-]<modifier>"
PROMPT = "> "
CHAR_LIMIT = 280                        # longest expression the input box accepts
INPUT_HEIGHT = 1                        # rows taken by the input box
GAP = 2                                 # blank rows between viewport, input and help
HELP_LINES = [
    "enter      - Roll",
    "↑          - Previous roll",
    "↓          - Next roll",
    "f1         - Toggle help",
    "esc        - Quit",
    "/h         - Toggle help",
    "/q         - Quit",
    "",
    "Notation: [<rolls>#][<dice>]d<sides>[+,-<modifier>]  e.g. 3#2d6+1",
]


@dataclass(frozen=True)
class Theme:
    """
    Rich style strings for each part of the transcript.
    Crit styles are looked up by CritTag; CritTag.NONE is left unstyled.
    """
    sender: str = "color(5)"
    crit_success: str = "color(2)"
    crit_failure: str = "color(1)"
    crit_both: str = "color(3)"
    help: str = "#FF75B7"

    def style_for(self, tag: CritTag) -> Style:
        styles = {
            CritTag.SUCCESS: self.crit_success,
            CritTag.FAILURE: self.crit_failure,
            CritTag.BOTH: self.crit_both,
        }
        return Style.parse(styles[tag]) if tag in styles else Style.null()


@dataclass(frozen=True)
class AppConfig:
    greeting: str = GREETING
    farewell: str = FAREWELL
    placeholder: str = PLACEHOLDER
    prompt: str = PROMPT
    char_limit: int = CHAR_LIMIT
    input_height: int = INPUT_HEIGHT
    gap: int = GAP
    help_lines: tuple = tuple(HELP_LINES)
    show_errors: bool = False           # notify on bad expressions instead of ignoring them
    log_level: str = "INFO"
    log_file: str = None                # extra plain-text log, off by default
    theme: Theme = field(default_factory=Theme)
