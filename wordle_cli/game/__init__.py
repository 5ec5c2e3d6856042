from .loop import GameResult, GameState, play_game, read_attempt
from .inputs import GuessProvider, ConsoleGuesses, ScriptedGuesses
from .render import render_feedback, render_plain, welcome

__all__ = [
    "GameResult", "GameState", "play_game", "read_attempt",
    "GuessProvider", "ConsoleGuesses", "ScriptedGuesses",
    "render_feedback", "render_plain", "welcome",
]
