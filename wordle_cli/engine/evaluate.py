"""
Default guess evaluation.

For each guessed letter, left to right:
  1) if the letter does not occur anywhere in the solution -> ABSENT
  2) else if the solution has the same letter at the same index -> EXACT
  3) else -> PRESENT

The occurrence test looks at the whole solution and ignores multiplicity:
a letter guessed twice that the solution holds once can be PRESENT twice.
`scoring.score_strict` implements the multiplicity-aware variant.
"""

from __future__ import annotations

from typing import Tuple

from .feedback import Feedback

# (per-letter feedback, full match)
Evaluation = Tuple[Tuple[Feedback, ...], bool]


def evaluate(solution_word: str, guessed_word: str) -> Evaluation:
    """
    Compare `guessed_word` against `solution_word`.

    Preconditions:
      - len(guessed_word) == len(solution_word) (checked by the caller)

    Examples:
      evaluate("crane", "crate") -> ((G, G, G, -, G), False)
      evaluate("crane", "crane") -> ((G, G, G, G, G), True)
    """
    out = []
    for i, g in enumerate(guessed_word):
        if g not in solution_word:
            out.append(Feedback.ABSENT)
        elif solution_word[i] == g:
            out.append(Feedback.EXACT)
        else:
            out.append(Feedback.PRESENT)

    return tuple(out), guessed_word == solution_word
