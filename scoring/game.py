"""Single-game scoring: points, deuce, serve rotation and win detection.

ITTF rules:
- Game to 11, must win by 2
- Serve rotates every 2 points
- At deuce (10-10): serve rotates every point
"""

from scoring import rules
from scoring.errors import InvalidOperation
from scoring.types import FinishedGame, Game, OngoingGame, Player


def new_game(initial_serve: Player) -> OngoingGame:
    """Create a game at 0-0 served first by `initial_serve`."""
    return OngoingGame(0, 0, initial_serve, initial_serve)


def is_deuce(game: Game) -> bool:
    return game.points_left >= rules.DEUCE_AT and game.points_right >= rules.DEUCE_AT


def points(game: Game, player: Player) -> int:
    return game.points_left if player is Player.LEFT else game.points_right


def next_serve(game: OngoingGame) -> Player:
    """Server of the point after the one about to be played on `game`."""
    point_number = game.points_left + game.points_right + 1
    if is_deuce(game) or point_number % rules.SERVES_PER_TURN == 0:
        return game.serve.next()
    return game.serve


def _is_won(deuce: bool, points_left: int, points_right: int) -> bool:
    if deuce:
        return abs(points_left - points_right) == rules.DEUCE_MARGIN
    return max(points_left, points_right) == rules.POINTS_TO_WIN


def score_point(game: Game, player: Player) -> Game:
    """Score a point for `player` and return the resulting game.

    Deuce is judged on the score before the point. Scores only move by one,
    so a deuce game ends exactly when one side is two ahead.

    Raises:
        InvalidOperation: the game is already finished or `player` is not
            a Player.
    """
    if isinstance(game, FinishedGame):
        raise InvalidOperation("Can not add a point to a finished game")
    if not isinstance(player, Player):
        raise InvalidOperation(f"Invalid player: {player!r}")

    points_left = game.points_left + (1 if player is Player.LEFT else 0)
    points_right = game.points_right + (1 if player is Player.RIGHT else 0)

    if _is_won(is_deuce(game), points_left, points_right):
        return FinishedGame(points_left, points_right, game.initial_serve)

    return OngoingGame(points_left, points_right, game.initial_serve, next_serve(game))
