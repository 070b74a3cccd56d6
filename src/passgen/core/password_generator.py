from __future__ import annotations

import logging
import random

from dataclasses import dataclass, field, replace
from typing import Iterable, Optional

from .charsets import CharacterClass, build_alphabet
from .errors import EmptyPoolError, InvalidLengthError
from .strength import StrengthLabel, classify

logger = logging.getLogger(__name__)

ALL_CLASSES = frozenset(CharacterClass)


@dataclass(frozen=True)
class GenerationConfig:
    """Inputs for a single generation call."""

    length: int = 10
    enabled_classes: frozenset[CharacterClass] = field(default=ALL_CLASSES)

    def __post_init__(self) -> None:
        # Accept any iterable of classes but always store a frozenset.
        object.__setattr__(self, 'enabled_classes', frozenset(self.enabled_classes))

    def alphabet(self) -> str:
        """
        Build the alphabet for the enabled classes.

        Raises:
            EmptyPoolError: If no class is enabled.
        """
        return build_alphabet(self.enabled_classes)

    def is_enabled(self, cls: CharacterClass) -> bool:
        return cls in self.enabled_classes

    def with_class_toggled(self, cls: CharacterClass) -> GenerationConfig:
        """Return a copy with `cls` switched on or off."""
        return replace(self, enabled_classes=self.enabled_classes ^ {cls})

    def with_length(self, length: int) -> GenerationConfig:
        return replace(self, length=length)


def _check_length(length: int) -> int:
    """
    Validate a requested length and clamp it to at least 1.

    Raises:
        InvalidLengthError: If length is not an integer.
    """
    if isinstance(length, bool) or not isinstance(length, int):
        msg = f'Password length must be an integer, got {length!r}'
        raise InvalidLengthError(msg)

    if length < 1:
        logger.debug('Clamping password length %d to 1', length)
        return 1
    return length


def draw(alphabet: str, length: int, rng: random.Random) -> list[str]:
    """
    Pick `length` characters from `alphabet`, uniformly and independently.

    Sampling is with replacement, so characters may repeat.
    """
    size = len(alphabet)
    return [alphabet[rng.randrange(size)] for _ in range(length)]


def scramble(chars: Iterable[str], rng: random.Random) -> list[str]:
    """Return a uniformly shuffled copy of `chars`."""
    scrambled = list(chars)
    rng.shuffle(scrambled)
    return scrambled


def generate(alphabet: str, length: int, rng: Optional[random.Random] = None) -> str:
    """
    Generate a password from an alphabet.

    Args:
        alphabet: Characters to draw from, as built by build_alphabet.
        length: Number of characters. Values below 1 are clamped to 1.
        rng: Random source. A fresh SystemRandom is used when omitted.

    Returns:
        A string of exactly `length` characters, each taken from `alphabet`.

    Raises:
        EmptyPoolError: If the alphabet is empty.
        InvalidLengthError: If length is not an integer.
    """
    length = _check_length(length)

    if not alphabet:
        raise EmptyPoolError()

    if rng is None:
        rng = random.SystemRandom()

    return ''.join(scramble(draw(alphabet, length, rng), rng))


@dataclass
class PasswordGenerator:
    """Generate random passwords based on configurable rules."""

    length: int = 10
    use_upper: bool = True
    use_lower: bool = True
    use_digits: bool = True
    use_special: bool = True
    rng: Optional[random.Random] = field(default=None, repr=False)

    @classmethod
    def from_config(
        cls,
        config: GenerationConfig,
        rng: Optional[random.Random] = None,
    ) -> PasswordGenerator:
        """Create a generator from a GenerationConfig."""
        return cls(
            length=config.length,
            use_upper=config.is_enabled(CharacterClass.UPPER),
            use_lower=config.is_enabled(CharacterClass.LOWER),
            use_digits=config.is_enabled(CharacterClass.DIGIT),
            use_special=config.is_enabled(CharacterClass.SPECIAL),
            rng=rng,
        )

    def config(self) -> GenerationConfig:
        """Return the current settings as an immutable GenerationConfig."""
        toggles = (
            (CharacterClass.UPPER, self.use_upper),
            (CharacterClass.LOWER, self.use_lower),
            (CharacterClass.DIGIT, self.use_digits),
            (CharacterClass.SPECIAL, self.use_special),
        )
        return GenerationConfig(
            length=self.length,
            enabled_classes=frozenset(cls for cls, enabled in toggles if enabled),
        )

    def generate_password(self) -> str:
        """
        Return a randomly generated password.

        Raises:
            EmptyPoolError: If no character sets are enabled.
        """
        alphabet = self.config().alphabet()
        return generate(alphabet, self.length, self.rng)

    def strength(self) -> StrengthLabel:
        """Return the strength label for the configured length."""
        return classify(self.length)
