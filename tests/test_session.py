"""Tests for the UI scoreboard session (no pygame needed)."""

import random

from scoreboard.session import ScoreboardSession
from scoring.types import Player

L, R = Player.LEFT, Player.RIGHT


def _started(left="Alice", right="Bob", seed=0):
    session = ScoreboardSession(rng=random.Random(seed))
    session.type_text(left)
    session.switch_field()
    session.type_text(right)
    session.start()
    return session


def test_name_entry():
    """Typing fills the active field; TAB switches; backspace deletes."""
    session = ScoreboardSession()
    session.type_text("Ann")
    session.backspace()
    session.type_text("a")
    session.switch_field()
    session.type_text("Bo")
    assert session.left_name == "Ana"
    assert session.right_name == "Bo"
    assert session.active_field is R
    assert not session.started


def test_start_creates_history():
    """Start builds a history with the entered names."""
    session = _started()
    assert session.started
    assert session.history.players[L] == "Alice"
    assert session.history.players[R] == "Bob"
    assert "serves first" in session.message


def test_typing_ignored_after_start():
    """Name fields are frozen once the match runs."""
    session = _started()
    session.type_text("x")
    session.backspace()
    assert session.left_name == "Alice"


def test_point_replaces_history():
    """Each point swaps in a new history snapshot."""
    session = _started()
    before = session.history
    session.point(L)
    assert session.history is not before
    assert session.history.current.current_game.points_left == 1
    assert session.message == "Point Alice."


def test_game_win_message():
    """Winning a game reports the game and match score."""
    session = _started()
    for _ in range(11):
        session.point(R)
    assert session.message == "Bob wins game 0-11. Games 0-1."


def test_disabled_undo_is_ignored():
    """Undo with nothing to undo leaves the history and reports it."""
    session = _started()
    before = session.history
    session.undo()
    assert session.history is before
    assert session.message == "Nothing to undo."


def test_disabled_redo_is_ignored():
    """Redo with nothing to redo leaves the history and reports it."""
    session = _started()
    session.point(L)
    before = session.history
    session.redo()
    assert session.history is before
    assert session.message == "Nothing to redo."


def test_undo_redo_roundtrip():
    """Undo then redo returns to the same match."""
    session = _started()
    session.point(L)
    session.point(R)
    scored = session.history.current
    session.undo()
    assert session.history.current.current_game.points_right == 0
    session.redo()
    assert session.history.current == scored


def test_blank_names_fall_back():
    """Empty name fields display as Left and Right."""
    session = _started(left="", right="")
    assert session.player_name(L) == "Left"
    assert session.player_name(R) == "Right"


def test_restart_returns_to_entry():
    """Restart drops the match and keeps the typed names."""
    session = _started()
    session.point(L)
    session.restart()
    assert not session.started
    assert session.active_field is L
    assert session.left_name == "Alice"


def test_names_before_start_use_side_names():
    """Before a match starts the sides display as Left and Right."""
    session = ScoreboardSession()
    assert session.player_name(L) == "Left"
    assert session.player_name(R) == "Right"
