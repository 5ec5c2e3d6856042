"""wordle-cli: a terminal word-guessing game."""

__version__ = "0.3.0"
