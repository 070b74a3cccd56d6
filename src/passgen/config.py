from __future__ import annotations

import os

from typing import Final

from .core.charsets import CharacterClass
from .core.errors import EMPTY_POOL_TEXT

# --- Length policy ---
MIN_LENGTH: Final[int] = 1
MAX_LENGTH: Final[int] = 40
DEFAULT_LENGTH: Final[int] = 10

# --- Character classes ---
DEFAULT_CLASSES: Final[frozenset[CharacterClass]] = frozenset(CharacterClass)

# --- User-facing text ---
EMPTY_POOL_MESSAGE: Final[str] = EMPTY_POOL_TEXT
COPY_LABEL: Final[str] = 'Copy'
COPIED_LABEL: Final[str] = 'Copied!'
COPY_FAILED_MESSAGE: Final[str] = 'Failed to copy password.'
COPY_RESET_MS: Final[int] = 5000

# --- Logging ---
LOG_LEVEL: Final[str] = os.getenv('PASSGEN_LOG_LEVEL', 'WARNING').upper()
LOG_FORMAT: Final[str] = '%(asctime)s %(levelname)s %(name)s: %(message)s'
