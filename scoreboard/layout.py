"""Display projections of a match: ordering, score rows and a text board."""

from scoring import game as games
from scoring import history as histories
from scoring.types import Match, MatchHistory, OngoingGame, Player


def player_order(match: Match) -> list:
    """Players in the order their controls are shown, switching every game."""
    order = [Player.LEFT, Player.RIGHT]
    if match.reverse_order:
        order.reverse()
    return order


def game_rows(match: Match) -> list:
    """(left, right) points of every finished game, oldest first."""
    return [(g.points_left, g.points_right) for g in match.finished_games]


def is_leading(points: int, other: int) -> bool:
    return points > other


def _score_line(left, right, width: int) -> str:
    l_txt = f"*{left}" if is_leading(left, right) else str(left)
    r_txt = f"{right}*" if is_leading(right, left) else str(right)
    return f"{l_txt:>{width}} - {r_txt:<{width}}"


def render_text(history: MatchHistory) -> str:
    """Plain-text scoreboard for the terminal.

    Shows the name header, finished game scores, the games total and the
    current game with the server marked.
    """
    match = history.current
    left_name = histories.player_name(history, Player.LEFT)
    right_name = histories.player_name(history, Player.RIGHT)
    width = max(len(left_name), len(right_name), 3)

    lines = [f"{left_name:>{width}}   {right_name:<{width}}"]
    rows = game_rows(match)
    if rows:
        for left, right in rows:
            lines.append(_score_line(left, right, width))
        lines.append("-" * (width * 2 + 3))
        lines.append(_score_line(*match.score, width))

    current = match.current_game
    lines.append("")
    lines.append(f"Game {len(match.games)}:")
    for player in player_order(match):
        marker = ">" if isinstance(current, OngoingGame) and current.serve is player else " "
        name = histories.player_name(history, player)
        lines.append(f" {marker} {name:<{width}} {games.points(current, player):>2}")
    if games.is_deuce(current):
        lines.append("   DEUCE")
    return "\n".join(lines)
