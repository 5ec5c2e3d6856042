"""
Locale-aware folding of player input and word-list entries.

Everything the game compares is lowercase a-z after this step:
  - German spells umlauts and sharp s out ("schön" -> "schoen")
  - every language then drops any remaining diacritic ("schön" -> "schon" in en)

Lengths are counted in characters after folding, so the same keystrokes can
give a 5-letter guess in one language and a 6-letter guess in another.
"""

from __future__ import annotations

import unicodedata
from typing import Dict

# Per-language transliterations applied before diacritics are stripped.
TRANSLITERATIONS: Dict[str, Dict[str, str]] = {
    "de": {"ä": "ae", "ö": "oe", "ü": "ue", "ß": "ss"},
    "en": {"ß": "ss"},
}


def _strip_marks(text: str) -> str:
    decomposed = unicodedata.normalize("NFKD", text)
    return "".join(ch for ch in decomposed if not unicodedata.combining(ch))


def replace_unicode(text: str, lang: str) -> str:
    """
    Fold `text` into the plain alphabet used by the `lang` dictionary.

    Examples:
      replace_unicode("Schön", "de") -> "schoen"
      replace_unicode("Schön", "en") -> "schon"
    """
    # NFC first so "o" + combining diaeresis matches the "ö" table entry
    folded = unicodedata.normalize("NFC", text).lower()
    for src, dst in TRANSLITERATIONS.get(lang, {}).items():
        folded = folded.replace(src, dst)
    return _strip_marks(folded)
