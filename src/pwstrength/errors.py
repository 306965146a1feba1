"""Custom exceptions for pwstrength."""


class PasswordStrengthError(Exception):
    """Base exception for pwstrength."""


class PasswordTypeError(PasswordStrengthError, TypeError):
    """Password value is not text."""
