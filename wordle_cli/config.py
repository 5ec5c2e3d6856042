"""
Game-wide settings.

Single source of truth for the turn budget, the word length and the
languages that ship with a bundled word list. The data home (where each
language keeps its word list and solved-word state) is resolved in this
order:

  1. explicit argument (``--home`` on the command line)
  2. the ``WORDLE_CLI_HOME`` environment variable
  3. ``~/.wordle_cli``
"""

from __future__ import annotations

import os
from pathlib import Path

# Wordle turn budget.
MAX_ATTEMPTS = 6

# Length of every word in the bundled and imported lists.
WORD_LENGTH = 5

DEFAULT_LANGUAGE = "en"
SUPPORTED_LANGUAGES = ("en", "de")

HOME_ENV_VAR = "WORDLE_CLI_HOME"


def data_home(override: Path | str | None = None) -> Path:
    """Return the directory holding per-language dictionary data."""
    if override:
        return Path(override).expanduser()
    env = os.environ.get(HOME_ENV_VAR)
    if env:
        return Path(env).expanduser()
    return Path.home() / ".wordle_cli"


def normalize_language(lang: str | None) -> str:
    """
    Lowercase and check a language tag.

    Raises ValueError for tags without a bundled word list.
    """
    code = (lang or DEFAULT_LANGUAGE).strip().lower()
    if code not in SUPPORTED_LANGUAGES:
        raise ValueError(
            f"Unsupported language: {lang}. Available: {sorted(SUPPORTED_LANGUAGES)}")
    return code
