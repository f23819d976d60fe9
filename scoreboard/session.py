"""Scoreboard session holding the single mutable slot the UI renders from.

Holds the name entry fields before a match starts and the latest
MatchHistory afterwards. Every command replaces the history wholesale.
"""

from typing import Optional

from scoring import history as histories
from scoring import rules
from scoring.types import MatchHistory, Player


class ScoreboardSession:
    """UI-owned state for one scoreboard window or terminal."""

    def __init__(self, rng=None):
        self.rng = rng
        self.left_name = ""
        self.right_name = ""
        self.active_field = Player.LEFT
        self.history: Optional[MatchHistory] = None
        self.message = "Enter player names and press ENTER to start."

    @property
    def started(self) -> bool:
        return self.history is not None

    # ---------------------------------------------------------
    # Name entry
    # ---------------------------------------------------------

    def type_text(self, text: str):
        if self.started:
            return
        if self.active_field is Player.LEFT:
            self.left_name += text
        else:
            self.right_name += text

    def backspace(self):
        if self.started:
            return
        if self.active_field is Player.LEFT:
            self.left_name = self.left_name[:-1]
        else:
            self.right_name = self.right_name[:-1]

    def switch_field(self):
        self.active_field = self.active_field.next()

    def start(self) -> MatchHistory:
        self.history = histories.create_matches(self.left_name, self.right_name, rng=self.rng)
        first = self.player_name(self.history.current.current_game.serve)
        self.message = f"Match started. {first} serves first."
        return self.history

    def restart(self):
        """Drop the current match and go back to name entry."""
        self.history = None
        self.active_field = Player.LEFT
        self.message = "Enter player names and press ENTER to start."

    # ---------------------------------------------------------
    # Match commands
    # ---------------------------------------------------------

    def player_name(self, player: Player) -> str:
        if self.history is None:
            return rules.DEFAULT_NAMES[player.value]
        return histories.player_name(self.history, player)

    def point(self, player: Player) -> MatchHistory:
        games_before = len(self.history.current.finished_games)
        self.history = histories.point(self.history, player)
        match = self.history.current

        if len(match.finished_games) > games_before:
            game = match.finished_games[-1]
            left, right = match.score
            self.message = (
                f"{self.player_name(game.winner)} wins game "
                f"{game.points_left}-{game.points_right}. Games {left}-{right}."
            )
        else:
            self.message = f"Point {self.player_name(player)}."
        return self.history

    def undo(self) -> MatchHistory:
        if not self.history.can_undo:
            self.message = "Nothing to undo."
            return self.history
        self.history = histories.undo(self.history)
        self.message = "Undone."
        return self.history

    def redo(self) -> MatchHistory:
        if not self.history.can_redo:
            self.message = "Nothing to redo."
            return self.history
        self.history = histories.redo(self.history)
        self.message = "Redone."
        return self.history
