"""
File-backed dictionary service.

Layout under the data home (see `wordle_cli.config.data_home`):

    <home>/<lang>/words.txt    one word per line
    <home>/<lang>/state.json   {"solved": [...], "daily": {"date": ..., "word": ..., "finished": bool}}

The words file is seeded from the bundled list on first use; after that it is
only extended by the importer. The state file pins a word of the day and
records which words have been solved, so a player who already won today gets
the same word back marked as solved, and one who lost it is not offered it again.

One Dictionary instance serves one game session; nothing here is global.
"""

from __future__ import annotations

import datetime as dt
import json
import logging
import os
import random
from dataclasses import dataclass
from pathlib import Path
from typing import Dict, Iterable, List, Set

from wordle_cli.config import WORD_LENGTH, data_home, normalize_language
from wordle_cli.lang import replace_unicode
from .io import read_lines, write_lines
from .validator import is_valid_word

logger = logging.getLogger(__name__)

BUNDLED_DIR = Path(__file__).resolve().parent / "data"


@dataclass(frozen=True)
class Solution:
    """The hidden word of one session."""
    word: str
    previously_guessed: bool = False
    previously_lost: bool = False


def bundled_wordlist(lang: str) -> Path:
    return BUNDLED_DIR / f"words_{lang}.txt"


class Dictionary:
    """
    Vocabulary, solution selection and solved-word persistence for one language.

    Args:
        lang:        language tag, used for folding and the storage folder
        home:        data home override (defaults to `data_home()`)
        word_length: length every stored word must have
        rng:         random.Random used for picking (seed it in tests)
        today:       date used for the word of the day (defaults to today)
    """

    def __init__(self, lang: str, *, home: Path | str | None = None,
                 word_length: int = WORD_LENGTH, rng: random.Random | None = None,
                 today: dt.date | None = None):
        self.lang = lang
        self.word_length = int(word_length)
        self.rng = rng or random.Random()
        self.today = today or dt.date.today()

        self.root = data_home(home) / lang
        self.words_path = self.root / "words.txt"
        self.state_path = self.root / "state.json"

        self._ensure_seeded()
        self.words: List[str] = self._load_words()
        self._index: Set[str] = set(self.words)
        self.state: Dict = self._load_state()

    # ---- storage ----

    def _ensure_seeded(self) -> None:
        if self.words_path.exists():
            return
        src = bundled_wordlist(self.lang)
        lines = read_lines(src) if src.exists() else []
        write_lines(lines, self.words_path)
        logger.info("Seeded %s with %d bundled words", self.words_path, len(lines))

    def _load_words(self) -> List[str]:
        out: List[str] = []
        seen: Set[str] = set()
        skipped = 0
        for raw in read_lines(self.words_path):
            w = replace_unicode(raw.strip(), self.lang)
            if not is_valid_word(w, self.word_length):
                if raw.strip():
                    skipped += 1
                continue
            if w not in seen:
                seen.add(w)
                out.append(w)
        if skipped:
            logger.warning("Skipped %d invalid entries in %s", skipped, self.words_path)
        logger.info("Loaded %d words for '%s'", len(out), self.lang)
        return out

    def _load_state(self) -> Dict:
        if not self.state_path.exists():
            return {"solved": [], "daily": None}
        try:
            with self.state_path.open("r", encoding="utf-8") as f:
                state = json.load(f)
        except json.JSONDecodeError as e:
            logger.warning("Ignoring unreadable %s (%s)", self.state_path, e)
            return {"solved": [], "daily": None}
        state.setdefault("solved", [])
        state.setdefault("daily", None)
        return state

    def _save_state(self) -> None:
        self.root.mkdir(parents=True, exist_ok=True)
        # atomic replace
        tmp = self.state_path.with_name(self.state_path.name + ".tmp")
        with tmp.open("w", encoding="utf-8") as f:
            json.dump(self.state, f, indent=2)
        os.replace(tmp, self.state_path)

    # ---- contract used by the game loop ----

    def get_random_word(self) -> Solution | None:
        """
        Return today's solution, or None if there is nothing left to play.

        The first call of a day picks a random unsolved word and pins it;
        later calls on the same day return the pinned word, flagged as
        previously guessed once it has been solved, or as previously lost
        once a game on it ended without a match.
        """
        solved = set(self.state["solved"])
        daily = self.state.get("daily")
        if daily and daily.get("date") == self.today.isoformat() \
                and daily.get("word") in self._index:
            word = daily["word"]
            return Solution(word=word, previously_guessed=word in solved,
                            previously_lost=bool(daily.get("finished")) and word not in solved)

        pool = [w for w in self.words if w not in solved]
        if not pool:
            if self.words:
                logger.warning("Every word in the '%s' dictionary is solved", self.lang)
            return None

        word = pool[self.rng.randrange(len(pool))]
        self.state["daily"] = {"date": self.today.isoformat(), "word": word}
        self._save_state()
        return Solution(word=word, previously_guessed=False)

    def find_word(self, candidate: str) -> str | None:
        """Return the stored word equal to `candidate`, or None."""
        return candidate if candidate in self._index else None

    def guessed_word(self, solution: Solution) -> None:
        """Record `solution` as solved. Recording it twice is a no-op."""
        if solution.word in self.state["solved"]:
            return
        self.state["solved"].append(solution.word)
        self._save_state()
        logger.info("Marked '%s' as solved", solution.word)

    def lost_word(self, solution: Solution) -> None:
        """Close today's word after a lost game so it is not offered again today."""
        daily = self.state.get("daily")
        if not daily or daily.get("word") != solution.word or daily.get("finished"):
            return
        daily["finished"] = True
        self._save_state()
        logger.info("Closed '%s' for today after a loss", solution.word)

    # ---- maintenance ----

    def add_words(self, words: Iterable[str]) -> int:
        """
        Append valid, not yet stored words to the list; return how many were added.

        Entries are folded with the dictionary's language before checking.
        """
        added: List[str] = []
        for raw in words:
            w = replace_unicode(raw.strip(), self.lang)
            if not is_valid_word(w, self.word_length) or w in self._index:
                continue
            self._index.add(w)
            added.append(w)

        if added:
            self.words.extend(added)
            write_lines(self.words, self.words_path)
        return len(added)


def get_dictionary(lang: str | None, home: Path | str | None = None, **kwargs) -> Dictionary:
    """
    Factory: build the dictionary service for a language tag.

    Raises ValueError for unsupported languages.
    """
    return Dictionary(normalize_language(lang), home=home, **kwargs)
