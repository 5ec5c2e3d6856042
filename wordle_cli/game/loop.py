"""
Game loop: one session against one solution.

- play_game:    run a full session and return a GameResult.
- read_attempt: pull guesses until one has the solution's length.
- Enforces the attempt budget at this layer (MAX_ATTEMPTS).

The loop is UI-agnostic: guesses come from a GuessProvider, every line of
output goes through `emit`, and feedback is styled by `render`, so the same
code serves the terminal and the tests.

States:
  AWAITING_GUESS -> WON | LOST
  ALREADY_SOLVED  (today's word was solved before; nothing is consumed)
  ALREADY_LOST    (today's word was lost before; nothing is consumed)
  NO_WORD         (the dictionary had no solution to offer)
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field, asdict
from enum import Enum
from typing import Callable, List, Tuple

from wordle_cli.config import MAX_ATTEMPTS
from wordle_cli.engine import evaluate, pattern, validate_attempt
from wordle_cli.engine.evaluate import Evaluation
from wordle_cli.lang import replace_unicode
from .inputs import GuessProvider
from .render import render_feedback

logger = logging.getLogger(__name__)

Evaluator = Callable[[str, str], Evaluation]


class GameState(Enum):
    AWAITING_GUESS = "awaiting_guess"
    WON = "won"
    LOST = "lost"
    ALREADY_SOLVED = "already_solved"
    ALREADY_LOST = "already_lost"
    NO_WORD = "no_word"


@dataclass
class GameResult:
    state: GameState
    attempts: int = 0
    answer: str | None = None
    # (attempt, pattern) for every guess that reached the evaluator
    history: List[Tuple[str, str]] = field(default_factory=list)

    @property
    def won(self) -> bool:
        return self.state in (GameState.WON, GameState.ALREADY_SOLVED)

    def as_dict(self) -> dict:
        d = asdict(self)
        d["state"] = self.state.value
        return d


def polish(raw: str, lang: str) -> str:
    """Trim, lowercase and fold one line of player input."""
    return replace_unicode(raw.strip().lower(), lang)


def read_attempt(guesses: GuessProvider, word_len: int, lang: str,
                 emit: Callable[[str], None] = print) -> str:
    """
    Return the next guess whose folded length is `word_len`.

    Wrong-length input is reported and read again; there is no retry limit.
    EOFError from the provider propagates.
    """
    while True:
        attempt = polish(guesses.next_guess(), lang)
        if validate_attempt(attempt, word_len):
            return attempt
        emit(f"Invalid input: Your guess must have a size of {word_len} characters. "
             f"You entered {len(attempt)} characters.")


def play_game(
        dictionary,
        guesses: GuessProvider,
        *,
        lang: str,
        evaluator: Evaluator = evaluate,
        emit: Callable[[str], None] = print,
        render: Callable = render_feedback,
        max_attempts: int = MAX_ATTEMPTS,
) -> GameResult:
    """
    Play one session until the solution is guessed or the budget is spent.

    Args:
        dictionary:   object with get_random_word / find_word / guessed_word /
                      lost_word
        guesses:      where raw guesses come from
        lang:         language tag for input folding
        evaluator:    evaluate (default) or score_strict
        emit:         sink for every output line
        render:       (word, feedback) -> str used to display evaluations
        max_attempts: turn budget

    Returns:
        GameResult with the terminal state, attempts consumed and history.
    """
    solution = dictionary.get_random_word()
    if solution is None:
        emit("Maybe the dictionary is empty?")
        return GameResult(state=GameState.NO_WORD)

    word = solution.word

    if solution.previously_guessed:
        feedback, _ = evaluator(word, word)
        emit(render(word, feedback))
        emit("You won! Come back tomorrow!")
        return GameResult(state=GameState.ALREADY_SOLVED, answer=word)

    if solution.previously_lost:
        emit("You already played today's word. Come back tomorrow!")
        return GameResult(state=GameState.ALREADY_LOST, answer=word)

    history: List[Tuple[str, str]] = []
    full_match = False
    counter = 0

    while counter < max_attempts:
        attempt = read_attempt(guesses, len(word), lang, emit)

        if dictionary.find_word(attempt) is None:
            emit("The guessed word is not in the word list.")
            continue

        remaining = max_attempts - counter - 1
        feedback, full_match = evaluator(word, attempt)
        history.append((attempt, pattern(feedback)))
        emit(render(attempt, feedback))
        counter += 1

        if full_match:
            break

        if remaining > 1:
            emit(f"You now have {remaining} guesses.")
        else:
            emit("This is your last guess.")
        if remaining == 0:
            emit("Better luck next time!")

    if full_match:
        dictionary.guessed_word(solution)
        emit("Congratulations! You won!")
        logger.info("Solved '%s' in %d attempt(s)", word, counter)
        return GameResult(state=GameState.WON, attempts=counter, answer=word, history=history)

    dictionary.lost_word(solution)
    emit(f"The word was: {word}")
    logger.info("Lost on '%s'", word)
    return GameResult(state=GameState.LOST, attempts=counter, answer=word, history=history)
