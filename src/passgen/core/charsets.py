from __future__ import annotations

import logging

from enum import Enum
from typing import Final, Iterable

from .errors import EmptyPoolError

logger = logging.getLogger(__name__)


class CharacterClass(Enum):
    """A named group of characters with a fixed literal alphabet."""

    UPPER = 'ABCDEFGHIJKLMNOPQRSTUVWXYZ'
    LOWER = 'abcdefghijklmnopqrstuvwxyz'
    DIGIT = '0123456789'
    SPECIAL = '!@#$%^&*()-_=+[]{}|;:,.<>?/~`'

    @property
    def chars(self) -> str:
        return self.value

    @property
    def label(self) -> str:
        """Short checkbox caption, e.g. 'ABC'."""
        return _LABELS[self]


_LABELS: Final[dict[CharacterClass, str]] = {
    CharacterClass.UPPER: 'ABC',
    CharacterClass.LOWER: 'abc',
    CharacterClass.DIGIT: '123',
    CharacterClass.SPECIAL: '#$&',
}

CLASS_ORDER: Final[tuple[CharacterClass, ...]] = (
    CharacterClass.UPPER,
    CharacterClass.LOWER,
    CharacterClass.DIGIT,
    CharacterClass.SPECIAL,
)


def build_alphabet(enabled_classes: Iterable[CharacterClass]) -> str:
    """
    Concatenate the literals of the enabled classes.

    Classes are always joined in CLASS_ORDER, whatever order they are
    given in, so the result only depends on which classes are enabled.

    Args:
        enabled_classes: Character classes to draw from.

    Returns:
        The alphabet as a non-empty string.

    Raises:
        EmptyPoolError: If no class is enabled.
    """
    enabled = frozenset(enabled_classes)
    alphabet = ''.join(cls.chars for cls in CLASS_ORDER if cls in enabled)

    if not alphabet:
        logger.debug('No character class enabled')
        raise EmptyPoolError()

    logger.debug('Built alphabet of %d characters from %d classes', len(alphabet), len(enabled))
    return alphabet
