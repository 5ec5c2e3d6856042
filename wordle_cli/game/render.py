"""
Terminal rendering of feedback.

Evaluation never depends on anything here; these helpers only turn Feedback
values into text for the player.
"""

from __future__ import annotations

from typing import Sequence

from colorama import Fore, Style

from wordle_cli.config import MAX_ATTEMPTS, WORD_LENGTH
from wordle_cli.engine import Feedback, pattern

COLORS = {
    Feedback.EXACT: Fore.GREEN,
    Feedback.PRESENT: Fore.YELLOW,
}

BANNER = r"""
____    __    ____  ______   .______       _______   __       _______          ______  __       __
\   \  /  \  /   / /  __  \  |   _  \     |       \ |  |     |   ____|        /      ||  |     |  |
 \   \/    \/   / |  |  |  | |  |_)  |    |  .--.  ||  |     |  |__    ______|  ,----'|  |     |  |
  \            /  |  |  |  | |      /     |  |  |  ||  |     |   __|  |______|  |     |  |     |  |
   \    /\    /   |  `--'  | |  |\  \----.|  '--'  ||  `----.|  |____        |  `----.|  `----.|  |
    \__/  \__/     \______/  | _| `._____||_______/ |_______||_______|        \______||_______||__|
"""


def render_feedback(word: str, feedback: Sequence[Feedback]) -> str:
    """Color each letter: green for EXACT, yellow for PRESENT, plain for ABSENT."""
    cells = []
    for letter, fb in zip(word, feedback):
        color = COLORS.get(fb)
        cells.append(f"{color}{letter}{Style.RESET_ALL}" if color else letter)
    return " ".join(cells)


def render_plain(word: str, feedback: Sequence[Feedback]) -> str:
    """Uncolored variant: the letters followed by the G/Y/- pattern."""
    return f"{' '.join(word)}   {pattern(feedback)}"


def welcome(max_attempts: int = MAX_ATTEMPTS, word_length: int = WORD_LENGTH) -> str:
    return (
        f"{BANNER}\n"
        f"Welcome! Guess today's word in {max_attempts} guesses.\n"
        f"{' '.join('_' * word_length)}\n"
    )
