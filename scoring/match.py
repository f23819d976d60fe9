"""Match sequencing: games in order, serve alternating game to game."""

import random
from typing import Optional

from scoring import game as games
from scoring.errors import InvalidOperation
from scoring.types import FinishedGame, Match, OngoingGame, Player


def create_match(
    initial_serve: Optional[Player] = None,
    rng: Optional[random.Random] = None,
) -> Match:
    """Start a match with one game at 0-0.

    The first server is picked at random unless `initial_serve` is given.
    """
    if initial_serve is None:
        initial_serve = Player.random(rng)
    return Match((games.new_game(initial_serve),))


def start_next_game(match: Match) -> Match:
    """Append a fresh game served first by the other player."""
    initial_serve = match.current_game.initial_serve.next()
    return Match(match.games + (games.new_game(initial_serve),))


def score_point(match: Match, player: Player) -> Match:
    """Score a point in the current game.

    A game that finishes is immediately followed by a new one, so the
    returned match always ends with an ongoing game.

    Raises:
        InvalidOperation: the current game is already finished.
    """
    last = match.current_game
    if not isinstance(last, OngoingGame):
        raise InvalidOperation("Can not add a point to a finished game")

    last_with_point = games.score_point(last, player)
    scored = Match(match.games[:-1] + (last_with_point,))

    if isinstance(last_with_point, FinishedGame):
        return start_next_game(scored)
    return scored
