from __future__ import annotations

import random
from collections import Counter

import pytest

from passgen.core.charsets import CharacterClass, build_alphabet
from passgen.core.errors import EmptyPoolError, InvalidLengthError
from passgen.core.password_generator import (
    GenerationConfig,
    PasswordGenerator,
    draw,
    generate,
    scramble,
)
from passgen.core.strength import StrengthLabel, classify


@pytest.mark.parametrize("length", [1, 2, 7, 16, 40])
def test_generate_length_and_membership(rng: random.Random, length: int) -> None:
    alphabet = build_alphabet({CharacterClass.LOWER, CharacterClass.SPECIAL})
    password = generate(alphabet, length, rng)
    assert len(password) == length
    assert all(c in alphabet for c in password)


def test_digits_only_end_to_end(rng: random.Random) -> None:
    config = GenerationConfig(length=5, enabled_classes={CharacterClass.DIGIT})
    password = generate(config.alphabet(), config.length, rng)
    assert len(password) == 5
    assert set(password) <= set("0123456789")
    assert classify(config.length) is StrengthLabel.WEAK


def test_short_alphabet_repeats_characters(rng: random.Random) -> None:
    password = generate("ab", 30, rng)
    assert len(password) == 30
    assert set(password) == {"a", "b"}


def test_length_below_one_is_clamped(rng: random.Random) -> None:
    assert len(generate("xyz", 0, rng)) == 1
    assert len(generate("xyz", -5, rng)) == 1


@pytest.mark.parametrize("bad", ["5", 5.0, None, True])
def test_non_integer_length_raises(bad: object) -> None:
    with pytest.raises(InvalidLengthError):
        generate("abc", bad)  # type: ignore[arg-type]


def test_empty_alphabet_raises() -> None:
    with pytest.raises(EmptyPoolError):
        generate("", 8)


def test_default_rng_is_used_when_omitted() -> None:
    password = generate("0123456789", 12)
    assert len(password) == 12
    assert password.isdigit()


def test_seeded_generation_is_reproducible() -> None:
    alphabet = build_alphabet(CharacterClass)
    assert generate(alphabet, 20, random.Random(7)) == generate(alphabet, 20, random.Random(7))


def test_generate_is_draw_then_scramble() -> None:
    alphabet = build_alphabet(CharacterClass)
    expected_rng = random.Random(99)
    expected = "".join(scramble(draw(alphabet, 15, expected_rng), expected_rng))
    assert generate(alphabet, 15, random.Random(99)) == expected


def test_scramble_preserves_multiset(rng: random.Random) -> None:
    drawn = draw("abcdefgh", 25, rng)
    scrambled = scramble(drawn, rng)
    assert Counter(scrambled) == Counter(drawn)
    assert len(scrambled) == len(drawn)


def test_scramble_does_not_mutate_input(rng: random.Random) -> None:
    drawn = list("abcdefghij")
    scramble(drawn, rng)
    assert drawn == list("abcdefghij")


def test_positions_are_uniform() -> None:
    """Chi-square check that every position draws each digit about 1/k of the time."""
    alphabet = CharacterClass.DIGIT.chars
    k = len(alphabet)
    n = 5
    runs = 5000
    rng = random.Random(2024)

    counts = [Counter() for _ in range(n)]
    for _ in range(runs):
        password = generate(alphabet, n, rng)
        for position, char in enumerate(password):
            counts[position][char] += 1

    expected = runs / k
    # Critical value for 9 degrees of freedom at p ~ 1e-5.
    critical = 40.0
    for position_counts in counts:
        chi2 = sum((position_counts[c] - expected) ** 2 / expected for c in alphabet)
        assert chi2 < critical


def test_config_toggle_and_length() -> None:
    config = GenerationConfig(length=10)
    assert config.enabled_classes == frozenset(CharacterClass)

    toggled = config.with_class_toggled(CharacterClass.SPECIAL)
    assert not toggled.is_enabled(CharacterClass.SPECIAL)
    assert config.is_enabled(CharacterClass.SPECIAL)
    assert toggled.with_class_toggled(CharacterClass.SPECIAL) == config

    assert config.with_length(3).length == 3
    assert config.length == 10


def test_config_is_frozen() -> None:
    config = GenerationConfig()
    with pytest.raises(AttributeError):
        config.length = 4  # type: ignore[misc]


def test_password_generator_roundtrips_config(rng: random.Random) -> None:
    config = GenerationConfig(length=12, enabled_classes={CharacterClass.UPPER, CharacterClass.DIGIT})
    generator = PasswordGenerator.from_config(config, rng=rng)
    assert generator.config() == config
    assert not generator.use_lower
    assert not generator.use_special

    password = generator.generate_password()
    assert len(password) == 12
    assert set(password) <= set(config.alphabet())
    assert generator.strength() is StrengthLabel.STRONG


def test_password_generator_without_classes_raises() -> None:
    generator = PasswordGenerator(use_upper=False, use_lower=False, use_digits=False, use_special=False)
    with pytest.raises(EmptyPoolError):
        generator.generate_password()
