from __future__ import annotations

import random
import sys
from pathlib import Path

import pytest

# Ensure the src/ directory is importable when tests run without an install.
sys.path.append(str(Path(__file__).resolve().parents[1] / "src"))


@pytest.fixture
def rng() -> random.Random:
    return random.Random(1234)
