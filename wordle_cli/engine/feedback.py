"""
Per-letter feedback categories.

Conventions (pattern symbols in text reports and tests):
  - 'G' : EXACT   = correct letter in the correct position
  - 'Y' : PRESENT = letter occurs in the solution, other position
  - '-' : ABSENT  = letter does not occur in the solution
"""

from __future__ import annotations

from enum import Enum
from typing import Iterable


class Feedback(Enum):
    EXACT = "G"
    PRESENT = "Y"
    ABSENT = "-"

    @property
    def symbol(self) -> str:
        return self.value


def pattern(feedback: Iterable[Feedback]) -> str:
    """Join feedback into a pattern string, e.g. "GGG-G"."""
    return "".join(f.symbol for f in feedback)
