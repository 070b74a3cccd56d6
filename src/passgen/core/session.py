from __future__ import annotations

import logging
import random

from dataclasses import dataclass, field
from typing import Optional

from ..config import DEFAULT_CLASSES, DEFAULT_LENGTH, EMPTY_POOL_MESSAGE, MAX_LENGTH, MIN_LENGTH
from .charsets import CharacterClass
from .errors import EmptyPoolError
from .password_generator import GenerationConfig, generate
from .strength import StrengthLabel, classify

logger = logging.getLogger(__name__)


def clamp_length(length: int) -> int:
    """Clamp a requested length to [MIN_LENGTH, MAX_LENGTH]."""
    return max(MIN_LENGTH, min(MAX_LENGTH, length))


@dataclass(frozen=True)
class GenerationResult:
    """What a front end displays after a refresh."""

    text: str
    strength: StrengthLabel
    ok: bool = True


@dataclass
class GeneratorSession:
    """
    Caller-side state shared by the terminal and Tkinter front ends.

    Every change to the settings regenerates the password, so `result`
    always matches `config`. An empty pool is not fatal: the result then
    carries EMPTY_POOL_MESSAGE and `ok` is False until a class is
    enabled again.
    """

    config: GenerationConfig = field(
        default_factory=lambda: GenerationConfig(DEFAULT_LENGTH, DEFAULT_CLASSES),
    )
    rng: Optional[random.Random] = field(default=None, repr=False)
    result: Optional[GenerationResult] = field(default=None, init=False)

    def __post_init__(self) -> None:
        self.config = self.config.with_length(clamp_length(self.config.length))
        if self.rng is None:
            self.rng = random.SystemRandom()
        self.refresh()

    @property
    def length(self) -> int:
        return self.config.length

    def refresh(self) -> GenerationResult:
        """Generate a new password for the current settings."""
        strength = classify(self.config.length)

        try:
            alphabet = self.config.alphabet()
        except EmptyPoolError:
            logger.debug('Empty pool, showing fallback message')
            self.result = GenerationResult(EMPTY_POOL_MESSAGE, strength, ok=False)
            return self.result

        password = generate(alphabet, self.config.length, self.rng)
        self.result = GenerationResult(password, strength)
        return self.result

    def toggle(self, cls: CharacterClass) -> GenerationResult:
        self.config = self.config.with_class_toggled(cls)
        return self.refresh()

    def set_length(self, length: int) -> GenerationResult:
        self.config = self.config.with_length(clamp_length(length))
        return self.refresh()

    def change_length(self, delta: int) -> GenerationResult:
        return self.set_length(self.config.length + delta)
