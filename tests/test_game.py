"""Tests for single-game scoring, deuce and serve rotation."""

import random
import pytest

from scoring.errors import InvalidOperation
from scoring.game import is_deuce, new_game, next_serve, points, score_point
from scoring.types import FinishedGame, OngoingGame, Player

L, R = Player.LEFT, Player.RIGHT


def _play(game, sequence):
    for player in sequence:
        game = score_point(game, player)
    return game


def _at_ten_all(serve=L):
    return _play(new_game(serve), [L, R] * 10)


def test_player_next_rotates():
    """Left and Right rotate into each other."""
    assert L.next() is R
    assert R.next() is L
    assert L.next().next() is L


def test_player_random_picks_both():
    """Random pick returns a Player and reaches both sides."""
    rng = random.Random(1)
    picks = {Player.random(rng) for _ in range(50)}
    assert picks == {L, R}


def test_new_game_starts_at_zero():
    """A new game is 0-0 and the initial server serves first."""
    game = new_game(R)
    assert isinstance(game, OngoingGame)
    assert (game.points_left, game.points_right) == (0, 0)
    assert game.initial_serve is R
    assert game.serve is R


def test_score_11_0_winner():
    """Score 11-0 → finished, Left wins."""
    game = _play(new_game(L), [L] * 11)
    assert isinstance(game, FinishedGame)
    assert game.points_left == 11
    assert game.points_right == 0
    assert game.winner is L


def test_score_11_5_winner_right():
    """Right reaching 11 while Left is below 10 wins."""
    game = _play(new_game(L), [L] * 5 + [R] * 11)
    assert isinstance(game, FinishedGame)
    assert game.winner is R
    assert (game.points_left, game.points_right) == (5, 11)


def test_11_9_finishes_without_deuce():
    """At 10-9 the leader wins on the next point."""
    game = _play(new_game(L), [L, R] * 9 + [L, L])
    assert isinstance(game, FinishedGame)
    assert (game.points_left, game.points_right) == (11, 9)


def test_no_points_after_finished():
    """Scoring a finished game is an invalid operation."""
    game = _play(new_game(L), [L] * 11)
    with pytest.raises(InvalidOperation):
        score_point(game, R)


def test_invalid_player_rejected():
    """Only Player values can score."""
    with pytest.raises(InvalidOperation):
        score_point(new_game(L), "left")


def test_deuce_mode():
    """Score 10-10 → deuce."""
    game = _at_ten_all()
    assert isinstance(game, OngoingGame)
    assert is_deuce(game)
    assert not is_deuce(_play(new_game(L), [L] * 10 + [R] * 9))


def test_win_after_deuce():
    """10-10 → 11-10 → 12-10 finishes."""
    game = score_point(_at_ten_all(), L)
    assert isinstance(game, OngoingGame)
    game = score_point(game, L)
    assert isinstance(game, FinishedGame)
    assert game.winner is L
    assert (game.points_left, game.points_right) == (12, 10)


def test_no_winner_when_level_again():
    """10-10 → 11-10 → 11-11 does not finish."""
    game = _play(_at_ten_all(), [L, R])
    assert isinstance(game, OngoingGame)
    assert (game.points_left, game.points_right) == (11, 11)


def test_long_deuce_sequence():
    """10-11, 11-11, 12-11 stay ongoing; 13-11 finishes for Left."""
    game = score_point(_at_ten_all(), R)
    assert isinstance(game, OngoingGame)
    game = score_point(game, L)
    assert isinstance(game, OngoingGame)
    game = score_point(game, L)
    assert isinstance(game, OngoingGame)
    assert (game.points_left, game.points_right) == (12, 11)
    game = score_point(game, L)
    assert isinstance(game, FinishedGame)
    assert game.winner is L
    assert (game.points_left, game.points_right) == (13, 11)


@pytest.mark.parametrize("first", [L, R])
def test_serve_rotation_normal(first):
    """Serve changes every 2 points: S, S, ¬S, ¬S, S."""
    game = new_game(first)
    servers = []
    for scorer in [L, R, R, L, L]:
        servers.append(game.serve)
        game = score_point(game, scorer)
    assert servers == [first, first, first.next(), first.next(), first]


def test_serve_rotation_independent_of_scorer():
    """Who wins the point does not affect who serves."""
    a = _play(new_game(L), [L, L, L])
    b = _play(new_game(L), [R, R, R])
    assert a.serve is b.serve is R


def test_serve_rotation_deuce():
    """At deuce the serve changes after every point."""
    game = _at_ten_all()
    previous = game.serve
    for scorer in [L, R, L, R, L, R]:
        game = score_point(game, scorer)
        assert game.serve is previous.next()
        previous = game.serve


def test_next_serve_matches_transition():
    """next_serve predicts the server after the coming point."""
    game = _play(new_game(R), [L, L, R])
    expected = next_serve(game)
    assert score_point(game, L).serve is expected


def test_points_lookup():
    """points() reads the side's total."""
    game = _play(new_game(L), [L, L, R])
    assert points(game, L) == 2
    assert points(game, R) == 1


def test_finished_game_keeps_initial_serve():
    """The initial server survives the finish."""
    game = _play(new_game(R), [R] * 11)
    assert game.initial_serve is R
