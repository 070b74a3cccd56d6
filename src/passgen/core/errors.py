from __future__ import annotations

EMPTY_POOL_TEXT = 'Select at least one option'


class PassgenError(Exception):
    """Base class for password generation errors."""


class EmptyPoolError(PassgenError, ValueError):
    """Raised when no character class is enabled."""

    def __init__(self, msg: str = EMPTY_POOL_TEXT) -> None:
        super().__init__(msg)


class InvalidLengthError(PassgenError, ValueError):
    """Raised when a password length is not an integer."""
