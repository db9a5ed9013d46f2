# dice.py - dice notation parser and roller
#
# Notation: [<rolls>#][<dice>]d<sides>[+|-<modifier>]
# Examples: d20, 2d6, 1d20+3, 3#2d6+1, 4d4-1

import logging
import random
import re
from dataclasses import dataclass, field
from enum import Enum

logger = logging.getLogger(__name__)

# ---------- Grammar ----------
DICE_RE = re.compile(
    r"(?:(?P<repeat_count>\d+)#)?(?P<dice_count>\d*)d(?P<sides>\d+)(?P<modifier>[+-]\d+)?"
)
# A sign and digits right after the match mean the modifier was split off by
# whitespace or chained onto a second term.
DANGLING_AFTER_RE = re.compile(r"\s*[+-]\s*\d")
# A digit or '#' just before the match (optionally separated by whitespace)
# is a count split off from the dice term, unless the match has its own.
DANGLING_DIGIT_RE = re.compile(r"\d\s*$")
DANGLING_HASH_RE = re.compile(r"#\s*$")

FIELD_LIMITS = {
    "repeat_count": 100,
    "dice_count": 1000,
    "sides": 1_000_000,
    "modifier": 1_000_000,
}

_rng = random.Random()


# ============================================================
# ERRORS
# ============================================================

class DiceError(ValueError):
    """Raised when a dice expression cannot be parsed."""


class MalformedExpression(DiceError):
    def __init__(self, text: str):
        self.text = text
        super().__init__(f"Invalid dice notation: {text!r}")


class InvalidField(DiceError):
    def __init__(self, field_name: str, raw: str, reason: str = "not an integer"):
        self.field = field_name
        self.raw = raw
        super().__init__(f"Invalid {field_name.replace('_', ' ')}: {raw!r} ({reason})")


class NonPositiveField(DiceError):
    def __init__(self, field_name: str, value: int):
        self.field = field_name
        self.value = value
        super().__init__(f"{field_name.replace('_', ' ').capitalize()} must be positive, got {value}")


# ============================================================
# DATA
# ============================================================

class CritTag(str, Enum):
    NONE = "none"
    SUCCESS = "success"
    FAILURE = "failure"
    BOTH = "both"

    @classmethod
    def from_flags(cls, failure: bool, success: bool) -> "CritTag":
        if failure and success:
            return cls.BOTH
        if success:
            return cls.SUCCESS
        if failure:
            return cls.FAILURE
        return cls.NONE


@dataclass(frozen=True)
class RollSpec:
    sides: int
    dice_count: int = 1
    modifier: int = 0
    repeat_count: int = 1

    def __str__(self):
        """
        Canonical form, e.g. "2d6", "1d20+3", "3d10-1".
        The repeat count is not part of it.
        """
        base = f"{self.dice_count}d{self.sides}"
        if self.modifier > 0:
            return f"{base}+{self.modifier}"
        if self.modifier < 0:
            return f"{base}{self.modifier}"
        return base


@dataclass(frozen=True)
class RollResult:
    total: int
    is_critical_failure: bool = False
    is_critical_success: bool = False
    rolls: tuple = field(default_factory=tuple)

    @property
    def tag(self) -> CritTag:
        return CritTag.from_flags(self.is_critical_failure, self.is_critical_success)


# ============================================================
# PARSING
# ============================================================

def _to_int(field_name: str, raw: str) -> int:
    try:
        value = int(raw)
    except ValueError:
        raise InvalidField(field_name, raw) from None

    if abs(value) > FIELD_LIMITS[field_name]:
        raise InvalidField(field_name, raw, f"max {FIELD_LIMITS[field_name]}")
    return value


def _split_by_whitespace(text: str, m) -> bool:
    if DANGLING_AFTER_RE.match(text, m.end()):
        return True

    before = text[:m.start()]
    if not m.group("repeat_count") and DANGLING_HASH_RE.search(before):
        return True
    if not m.group("repeat_count") and not m.group("dice_count") and DANGLING_DIGIT_RE.search(before):
        return True
    return False


def parse(text: str) -> RollSpec:
    """
    Parse the first dice expression found in text.

    Missing repeat and dice counts default to 1, a missing modifier to 0.
    Raises MalformedExpression when nothing matches (or the match was split
    by whitespace), InvalidField when a number cannot be used and
    NonPositiveField when a count or the sides are zero.
    """
    m = DICE_RE.search(text)
    if not m:
        logger.debug("No dice expression in %r", text)
        raise MalformedExpression(text)

    if _split_by_whitespace(text, m):
        logger.debug("Dice expression split by whitespace in %r", text)
        raise MalformedExpression(text)

    repeat_count = _to_int("repeat_count", m.group("repeat_count")) if m.group("repeat_count") else 1
    dice_count = _to_int("dice_count", m.group("dice_count")) if m.group("dice_count") else 1
    sides = _to_int("sides", m.group("sides"))
    modifier = _to_int("modifier", m.group("modifier")) if m.group("modifier") else 0

    for name, value in (("repeat_count", repeat_count), ("dice_count", dice_count), ("sides", sides)):
        if value <= 0:
            raise NonPositiveField(name, value)

    return RollSpec(
        sides=sides,
        dice_count=dice_count,
        modifier=modifier,
        repeat_count=repeat_count,
    )


# ============================================================
# ROLLING
# ============================================================

def evaluate(spec: RollSpec, rng=None) -> list:
    """
    Roll spec.repeat_count times and return one RollResult per repetition,
    in the order rolled. rng is anything with randint(a, b).
    """
    if rng is None:
        rng = _rng
    results = []

    for _ in range(spec.repeat_count):
        rolls = tuple(rng.randint(1, spec.sides) for _ in range(spec.dice_count))
        results.append(RollResult(
            total=sum(rolls) + spec.modifier,
            is_critical_failure=1 in rolls,
            is_critical_success=spec.sides in rolls,
            rolls=rolls,
        ))

    return results


def roll(text: str, rng=None) -> list:
    """Parse and evaluate in one go."""
    return evaluate(parse(text), rng)
