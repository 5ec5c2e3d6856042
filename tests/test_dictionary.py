import datetime as dt
import json
import random
from pathlib import Path

import pytest
from wordle_cli.dictionary import Dictionary, Solution, get_dictionary
from wordle_cli.game import GameState, ScriptedGuesses, play_game

DAY = dt.date(2026, 3, 1)


def _words(home: Path, lang: str, lines):
    p = home / lang / "words.txt"
    p.parent.mkdir(parents=True, exist_ok=True)
    p.write_text("\n".join(lines) + "\n", encoding="utf-8")
    return p


def _open(home: Path, lang="en", day=DAY, seed=7) -> Dictionary:
    return Dictionary(lang, home=home, rng=random.Random(seed), today=day)


def test_seeds_from_bundled_list(tmp_path: Path):
    d = _open(tmp_path)
    assert d.words_path.exists()
    assert d.find_word("crane") == "crane"
    assert d.find_word("zzzzz") is None


def test_daily_pick_is_stable_within_a_day(tmp_path: Path):
    _words(tmp_path, "en", ["crane", "stare", "raise"])
    first = _open(tmp_path).get_random_word()
    again = _open(tmp_path, seed=99).get_random_word()
    assert first == again
    assert first.word in {"crane", "stare", "raise"}
    assert first.previously_guessed is False


def test_solved_word_comes_back_flagged(tmp_path: Path):
    _words(tmp_path, "en", ["crane", "stare", "raise"])
    d = _open(tmp_path)
    sol = d.get_random_word()
    d.guessed_word(sol)
    d.guessed_word(sol)  # idempotent

    state = json.loads(d.state_path.read_text(encoding="utf-8"))
    assert state["solved"] == [sol.word]

    again = _open(tmp_path).get_random_word()
    assert again == Solution(word=sol.word, previously_guessed=True)


def test_next_day_skips_solved_words(tmp_path: Path):
    _words(tmp_path, "en", ["crane", "stare"])
    d = _open(tmp_path)
    sol = d.get_random_word()
    d.guessed_word(sol)

    tomorrow = _open(tmp_path, day=DAY + dt.timedelta(days=1)).get_random_word()
    assert tomorrow.word != sol.word
    assert tomorrow.previously_guessed is False


def test_empty_dictionary_has_no_solution(tmp_path: Path):
    _words(tmp_path, "en", [])
    assert _open(tmp_path).get_random_word() is None


def test_all_solved_has_no_solution(tmp_path: Path):
    _words(tmp_path, "en", ["crane"])
    d = _open(tmp_path)
    d.guessed_word(d.get_random_word())
    assert _open(tmp_path, day=DAY + dt.timedelta(days=1)).get_random_word() is None


def test_invalid_entries_are_skipped(tmp_path: Path):
    _words(tmp_path, "en", ["crane", "cran", "cr4ne", "CRANE", "Stare"])
    d = _open(tmp_path)
    assert d.words == ["crane", "stare"]


def test_german_entries_are_folded(tmp_path: Path):
    _words(tmp_path, "de", ["Lüge", "Apfel"])
    d = _open(tmp_path, lang="de")
    assert d.find_word("luege") == "luege"
    assert d.find_word("apfel") == "apfel"


def test_add_words(tmp_path: Path):
    _words(tmp_path, "en", ["crane"])
    d = _open(tmp_path)
    added = d.add_words(["stare", "crane", "STARE", "toolong", "", "raise"])
    assert added == 2
    assert _open(tmp_path).words == ["crane", "stare", "raise"]


def test_get_dictionary_rejects_unknown_language(tmp_path: Path):
    with pytest.raises(ValueError):
        get_dictionary("xx", home=tmp_path)
    assert get_dictionary("DE", home=tmp_path).lang == "de"


def test_lost_word_is_not_reissued_the_same_day(tmp_path: Path):
    _words(tmp_path, "en", ["crane", "stare", "raise"])
    d = _open(tmp_path)
    sol = d.get_random_word()
    d.lost_word(sol)

    again = _open(tmp_path).get_random_word()
    assert again == Solution(word=sol.word, previously_guessed=False, previously_lost=True)
    assert json.loads(d.state_path.read_text(encoding="utf-8"))["solved"] == []

    tomorrow = _open(tmp_path, day=DAY + dt.timedelta(days=1)).get_random_word()
    assert tomorrow.previously_lost is False


def test_lost_game_then_relaunch_cannot_win(tmp_path: Path):
    _words(tmp_path, "en", ["crane", "stare"])
    (tmp_path / "en" / "state.json").write_text(
        json.dumps({"solved": [], "daily": {"date": DAY.isoformat(), "word": "crane"}}),
        encoding="utf-8")

    first = play_game(_open(tmp_path), ScriptedGuesses(["stare"] * 6), lang="en",
                      emit=lambda line: None)
    assert first.state is GameState.LOST
    assert first.answer == "crane"

    relaunch = play_game(_open(tmp_path), ScriptedGuesses(["crane"]), lang="en",
                         emit=lambda line: None)
    assert relaunch.state is GameState.ALREADY_LOST
    assert relaunch.attempts == 0
    state = json.loads((tmp_path / "en" / "state.json").read_text(encoding="utf-8"))
    assert state["solved"] == []


def test_corrupt_state_falls_back_to_empty(tmp_path: Path):
    _words(tmp_path, "en", ["crane", "stare"])
    (tmp_path / "en" / "state.json").write_text("{bad", encoding="utf-8")

    d = _open(tmp_path)
    sol = d.get_random_word()
    assert sol.word in {"crane", "stare"}

    state = json.loads(d.state_path.read_text(encoding="utf-8"))
    assert state["daily"]["word"] == sol.word
    assert not (tmp_path / "en" / "state.json.tmp").exists()
