"""Password entropy estimation and strength classification.

The estimate assumes the password was drawn uniformly from every character
class it uses, which is rarely true for human-chosen passwords. Treat the
result as a coarse heuristic, not as information-theoretic entropy.
"""
from __future__ import annotations

import logging
import math
import string
from dataclasses import dataclass
from typing import Literal

from pwstrength.errors import PasswordTypeError

logger = logging.getLogger(__name__)

LOWERCASE_SIZE = 26
UPPERCASE_SIZE = 26
DIGIT_SIZE = 10
PUNCTUATION_SIZE = 31

StrengthLabel = Literal["very-weak", "weak", "strong", "very-strong"]

STRENGTH_LABELS: tuple[StrengthLabel, ...] = ("very-weak", "weak", "strong", "very-strong")

_LOWERCASE = frozenset(string.ascii_lowercase)
_UPPERCASE = frozenset(string.ascii_uppercase)
_DIGITS = frozenset(string.digits)
_PUNCTUATION = frozenset(string.punctuation)


@dataclass(frozen=True)
class Thresholds:
    """Inclusive upper entropy bounds for the three lower labels."""

    very_weak: float = 28
    weak: float = 59
    strong: float = 127  # above this is very-strong


DEFAULT_THRESHOLDS = Thresholds()


@dataclass(frozen=True)
class CharacterClasses:
    lowercase: bool = False
    uppercase: bool = False
    digit: bool = False
    punctuation: bool = False

    @property
    def alphabet_size(self) -> int:
        size = 0
        if self.lowercase:
            size += LOWERCASE_SIZE
        if self.uppercase:
            size += UPPERCASE_SIZE
        if self.digit:
            size += DIGIT_SIZE
        if self.punctuation:
            size += PUNCTUATION_SIZE
        return size

    def names(self) -> list[str]:
        return [
            name
            for name, present in (
                ("lowercase", self.lowercase),
                ("uppercase", self.uppercase),
                ("digit", self.digit),
                ("punctuation", self.punctuation),
            )
            if present
        ]


def detect_character_classes(password: str) -> CharacterClasses:
    """Return which ASCII character classes occur in *password*.

    Whitespace and non-ASCII characters belong to no class.
    """
    chars = set(password)
    return CharacterClasses(
        lowercase=not chars.isdisjoint(_LOWERCASE),
        uppercase=not chars.isdisjoint(_UPPERCASE),
        digit=not chars.isdisjoint(_DIGITS),
        punctuation=not chars.isdisjoint(_PUNCTUATION),
    )


def _round_half_away(value: float) -> float:
    return math.copysign(math.floor(abs(value) + 0.5), value)


def estimate_entropy(password: str) -> float:
    """Estimate password entropy from its length and character classes.

    Returns ``round(length * log2(alphabet_size) / 2)`` with ties rounded
    away from zero. A password with no recognised character class (including
    the empty string) has an entropy of ``0.0``.
    """
    if not isinstance(password, str):
        raise PasswordTypeError(f"Password must be str, got {type(password).__name__}")

    classes = detect_character_classes(password)
    alphabet_size = classes.alphabet_size
    if alphabet_size == 0:
        logger.debug("no tracked character classes in %d-char password, entropy is 0", len(password))
        return 0.0

    entropy = _round_half_away(len(password) * math.log2(alphabet_size) / 2)
    logger.debug(
        "entropy=%s for length=%d alphabet=%d (%s)",
        entropy,
        len(password),
        alphabet_size,
        ",".join(classes.names()),
    )
    return entropy


def classify_entropy(entropy: float, thresholds: Thresholds = DEFAULT_THRESHOLDS) -> StrengthLabel:
    """Map an entropy estimate to a strength label."""
    if math.isnan(entropy) or entropy <= thresholds.very_weak:
        return "very-weak"
    if entropy <= thresholds.weak:
        return "weak"
    if entropy <= thresholds.strong:
        return "strong"
    return "very-strong"


class StrengthCalculator:
    """Read-only view over a password that reports entropy and strength.

    The password is stored as given. Nothing is validated or cached; each
    call recomputes its result from the stored value.
    """

    __slots__ = ("_password", "_thresholds")

    def __init__(self, password: str, *, thresholds: Thresholds = DEFAULT_THRESHOLDS) -> None:
        self._password = password
        self._thresholds = thresholds

    @classmethod
    def new(cls, password: str) -> StrengthCalculator:
        return cls(password)

    @property
    def password(self) -> str:
        return self._password

    @property
    def thresholds(self) -> Thresholds:
        return self._thresholds

    def get_entropy(self) -> float:
        """Get an entropy estimate of the password."""
        return estimate_entropy(self._password)

    def get_strength(self) -> StrengthLabel:
        """Get a strength estimate of the password."""
        return classify_entropy(self.get_entropy(), self._thresholds)

    def __repr__(self) -> str:
        # never echo the password itself
        return f"{type(self).__name__}(<hidden>)"
