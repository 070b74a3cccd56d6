"""Random password generation with length-based strength feedback."""

from __future__ import annotations

from .core.charsets import CharacterClass, build_alphabet
from .core.errors import EmptyPoolError, InvalidLengthError, PassgenError
from .core.password_generator import GenerationConfig, PasswordGenerator, generate
from .core.strength import StrengthLabel, classify

__all__ = [
    'CharacterClass',
    'EmptyPoolError',
    'GenerationConfig',
    'InvalidLengthError',
    'PassgenError',
    'PasswordGenerator',
    'StrengthLabel',
    'build_alphabet',
    'classify',
    'generate',
]
