"""
Guess input providers.

The game loop pulls one raw line per read through `next_guess()`; folding and
length checks happen in the loop, so providers stay trivial. A provider
signals that no more input will come by raising EOFError, the same way
`input()` does.
"""

from __future__ import annotations

import sys
from typing import Iterable, Iterator, TextIO


class GuessProvider:
    def next_guess(self) -> str:
        raise NotImplementedError("Override in subclass")


class ConsoleGuesses(GuessProvider):
    """Read guesses line by line from a text stream (stdin by default)."""

    def __init__(self, stream: TextIO | None = None):
        self.stream = stream or sys.stdin

    def next_guess(self) -> str:
        line = self.stream.readline()
        if not line:
            raise EOFError("input stream closed")
        return line


class ScriptedGuesses(GuessProvider):
    """Replay a fixed sequence of lines; used by tests and demos."""

    def __init__(self, lines: Iterable[str]):
        self._lines: Iterator[str] = iter(lines)
        self.consumed = 0

    def next_guess(self) -> str:
        try:
            line = next(self._lines)
        except StopIteration:
            raise EOFError("no scripted guesses left") from None
        self.consumed += 1
        return line
