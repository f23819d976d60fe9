"""Core data types for the scoreboard: players, games, matches and history.

All types are frozen value snapshots. Transitions live in `scoring.game`,
`scoring.match` and `scoring.history` and always return new objects.
"""

import random
from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType
from typing import Mapping, Optional, Union


class Player(Enum):
    """One of the two sides of the table."""
    LEFT = "left"
    RIGHT = "right"

    def next(self) -> "Player":
        return Player.RIGHT if self is Player.LEFT else Player.LEFT

    @classmethod
    def random(cls, rng: Optional[random.Random] = None) -> "Player":
        return (rng or random).choice(list(cls))


@dataclass(frozen=True)
class OngoingGame:
    """A game still being played."""
    points_left: int
    points_right: int
    initial_serve: Player
    serve: Player  # who serves the next point


@dataclass(frozen=True)
class FinishedGame:
    """A completed game. Never scored again."""
    points_left: int
    points_right: int
    initial_serve: Player

    @property
    def winner(self) -> Player:
        return Player.LEFT if self.points_left > self.points_right else Player.RIGHT


Game = Union[OngoingGame, FinishedGame]


@dataclass(frozen=True)
class Match:
    """Ordered games between the same two players.

    Every game but the last is finished. The last one is normally ongoing,
    since a finished game is followed by a fresh one straight away.
    """
    games: tuple

    @property
    def current_game(self) -> Game:
        return self.games[-1]

    @property
    def finished_games(self) -> list:
        return [g for g in self.games if isinstance(g, FinishedGame)]

    @property
    def reverse_order(self) -> bool:
        # Players change ends every game
        return len(self.games) % 2 == 0

    @property
    def score(self) -> tuple:
        """Games won as (left, right)."""
        left, right = 0, 0
        for game in self.finished_games:
            if game.winner is Player.LEFT:
                left += 1
            else:
                right += 1
        return left, right


@dataclass(frozen=True)
class MatchHistory:
    """Append-only log of match snapshots with an undo pointer.

    `undo_pointer` is 1-based and marks the logically current snapshot.
    `undo_pointer_at_start_of_undo` is the pointer captured at the last
    forward command and bounds how far redo may go.
    Hashing skips `players`, which is a read-only view.
    """
    players: Mapping = field(hash=False)
    matches: tuple
    undo_pointer: int = 1
    undo_pointer_at_start_of_undo: int = 1

    def __post_init__(self):
        if not isinstance(self.players, MappingProxyType):
            object.__setattr__(self, "players", MappingProxyType(dict(self.players)))

    @property
    def current(self) -> Match:
        return self.matches[-1]

    @property
    def can_undo(self) -> bool:
        return self.undo_pointer > 1

    @property
    def can_redo(self) -> bool:
        return (
            0 < self.undo_pointer <= len(self.matches)
            and self.undo_pointer < self.undo_pointer_at_start_of_undo
        )
