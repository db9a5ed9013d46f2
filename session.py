# session.py - roll session state: transcript, history recall and geometry

import logging
from dataclasses import dataclass, field

import dice
from config import INPUT_HEIGHT, GAP

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class TranscriptLine:
    """One submitted expression and the tagged total of each repetition."""
    expression: str
    totals: tuple    # ((total, CritTag), ...)

    @property
    def text(self) -> str:
        return f"{self.expression}: " + " ".join(str(total) for total, _ in self.totals)


@dataclass(frozen=True)
class SubmitOutcome:
    line: TranscriptLine = None
    error: dice.DiceError = None

    @property
    def ok(self) -> bool:
        return self.line is not None


@dataclass(frozen=True)
class Geometry:
    width: int
    height: int
    viewport_height: int


@dataclass
class Session:
    """
    Owns everything that changes while the user rolls:
      - transcript (rendered roll lines, append-only)
      - history (raw submitted expressions, append-only)
      - cursor (index into history, len(history) means nothing recalled)
      - input_text (what the input box should show)
      - geometry (last known terminal size)

    Recall cycles newest -> oldest -> newest with previous, and the reverse
    with next. next does nothing until something has been recalled.
    """
    rng: object = None
    input_height: int = INPUT_HEIGHT
    gap: int = GAP
    transcript: list = field(default_factory=list)
    history: list = field(default_factory=list)
    cursor: int = 0
    input_text: str = ""
    geometry: Geometry = None

    @property
    def past_end(self) -> bool:
        return self.cursor == len(self.history)

    # ------------------- SUBMIT -------------------
    def submit(self, text: str) -> SubmitOutcome:
        if not text:
            return SubmitOutcome()

        try:
            results = dice.roll(text, self.rng)
        except dice.DiceError as e:
            logger.debug("Rejected %r: %s", text, e)
            return SubmitOutcome(error=e)

        line = TranscriptLine(
            expression=text,
            totals=tuple((r.total, r.tag) for r in results),
        )
        self.transcript.append(line)
        self.history.append(text)
        self.cursor = len(self.history)
        self.input_text = ""

        logger.info("Rolled %s", line.text)
        return SubmitOutcome(line=line)

    # ------------------- RECALL -------------------
    def recall_previous(self) -> str:
        if not self.history:
            return self.input_text

        if self.cursor == 0:
            self.cursor = len(self.history) - 1
        else:
            self.cursor -= 1

        return self._select()

    def recall_next(self) -> str:
        if not self.history or self.past_end:
            return self.input_text

        if self.cursor == len(self.history) - 1:
            self.cursor = 0
        else:
            self.cursor += 1

        return self._select()

    def _select(self) -> str:
        self.input_text = self.history[self.cursor]
        logger.debug("Recalled history[%d] = %r", self.cursor, self.input_text)
        return self.input_text

    # ------------------- RESIZE -------------------
    def resize(self, width: int, height: int) -> Geometry:
        viewport_height = max(1, height - self.input_height - self.gap)
        self.geometry = Geometry(width=width, height=height, viewport_height=viewport_height)
        return self.geometry
