from __future__ import annotations

from enum import IntEnum
from typing import Final


class StrengthLabel(IntEnum):
    """Coarse strength tiers, ordered from weakest to strongest."""

    VERY_WEAK = 0
    WEAK = 1
    GOOD = 2
    STRONG = 3
    VERY_STRONG = 4

    @property
    def text(self) -> str:
        return self.name.replace('_', ' ').lower()

    @property
    def color(self) -> str:
        return _COLORS[self]


_COLORS: Final[dict[StrengthLabel, str]] = {
    StrengthLabel.VERY_WEAK: '#ce3a3a',
    StrengthLabel.WEAK: '#e28d3e',
    StrengthLabel.GOOD: '#667d58',
    StrengthLabel.STRONG: '#56ab3d',
    StrengthLabel.VERY_STRONG: '#3c5ef8',
}

# Inclusive upper bound of each tier; anything longer is VERY_STRONG.
_THRESHOLDS: Final[tuple[tuple[int, StrengthLabel], ...]] = (
    (4, StrengthLabel.VERY_WEAK),
    (8, StrengthLabel.WEAK),
    (10, StrengthLabel.GOOD),
    (14, StrengthLabel.STRONG),
)


def classify(length: int) -> StrengthLabel:
    """
    Return the strength tier for a password of the given length.

    Only the length is considered; alphabet size and composition are not.
    """
    for upper_bound, label in _THRESHOLDS:
        if length <= upper_bound:
            return label
    return StrengthLabel.VERY_STRONG
