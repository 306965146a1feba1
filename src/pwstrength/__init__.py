"""pwstrength package."""

from importlib.metadata import PackageNotFoundError, version

from pwstrength.errors import PasswordStrengthError, PasswordTypeError
from pwstrength.estimator import (
    DEFAULT_THRESHOLDS,
    STRENGTH_LABELS,
    CharacterClasses,
    StrengthCalculator,
    StrengthLabel,
    Thresholds,
    classify_entropy,
    detect_character_classes,
    estimate_entropy,
)

__all__ = [
    "DEFAULT_THRESHOLDS",
    "STRENGTH_LABELS",
    "CharacterClasses",
    "PasswordStrengthError",
    "PasswordTypeError",
    "StrengthCalculator",
    "StrengthLabel",
    "Thresholds",
    "__version__",
    "classify_entropy",
    "detect_character_classes",
    "estimate_entropy",
]

try:
    __version__ = version("pwstrength")
except PackageNotFoundError:  # pragma: no cover - happens only from source checkout
    __version__ = "0.0.0-dev"
