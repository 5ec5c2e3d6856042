"""
Duplicate-aware scoring, selected with ``--strict-duplicates``.

Algorithm (two-pass, canonical for Wordle):
  1) First pass marks all EXACT letters and counts the remaining (unmatched)
     letters of the solution.
  2) Second pass marks PRESENT only while the letter still has remaining count.

Unlike `evaluate`, a letter is never reported more often than the solution
holds it.
"""

from __future__ import annotations

from collections import Counter

from .evaluate import Evaluation
from .feedback import Feedback


def score_strict(solution_word: str, guessed_word: str) -> Evaluation:
    """
    Compute feedback for `guessed_word` against `solution_word`.

    Preconditions:
      - len(guessed_word) == len(solution_word)

    Examples (as patterns):
      score_strict("level", "belle") -> "-GYYY"
      score_strict("crane", "eerie") -> "--Y-G"
    """
    assert len(guessed_word) == len(solution_word), \
        "Guess and solution must be the same length"

    n = len(guessed_word)
    out = [Feedback.ABSENT] * n

    # Pass 1: exact hits; everything else in the solution stays available.
    remaining = Counter()
    for i, (g, s) in enumerate(zip(guessed_word, solution_word)):
        if g == s:
            out[i] = Feedback.EXACT
        else:
            remaining[s] += 1

    # Pass 2: present only while an unmatched copy is left.
    for i, g in enumerate(guessed_word):
        if out[i] is Feedback.EXACT:
            continue
        if remaining[g] > 0:
            out[i] = Feedback.PRESENT
            remaining[g] -= 1

    return tuple(out), guessed_word == solution_word
