"""Undo/redo history of match snapshots.

History is a single append-only log. A point appends the new match.
Undo and redo do not truncate the log: they append a copy of an earlier
snapshot and move `undo_pointer` to it, so `current` (the last entry) is
always the snapshot the pointer designates.
"""

import random
from typing import Optional

from scoring import match as matches
from scoring import rules
from scoring.errors import InvalidOperation
from scoring.types import MatchHistory, Player


def create_matches(
    left_name: str,
    right_name: str,
    initial_serve: Optional[Player] = None,
    rng: Optional[random.Random] = None,
) -> MatchHistory:
    """Start a new history holding one fresh match."""
    return MatchHistory(
        players={Player.LEFT: left_name, Player.RIGHT: right_name},
        matches=(matches.create_match(initial_serve, rng),),
        undo_pointer=1,
        undo_pointer_at_start_of_undo=1,
    )


def player_name(history: MatchHistory, player: Player) -> str:
    """Display name for `player`, falling back to the side name if blank."""
    name = (history.players.get(player) or "").strip()
    return name or rules.DEFAULT_NAMES[player.value]


def point(history: MatchHistory, player: Player) -> MatchHistory:
    """Score a point for `player`. Forward progress resets the redo bound."""
    new_match = matches.score_point(history.current, player)
    new_matches = history.matches + (new_match,)
    pointer = len(new_matches)
    return MatchHistory(
        players=history.players,
        matches=new_matches,
        undo_pointer=pointer,
        undo_pointer_at_start_of_undo=pointer,
    )


def undo(history: MatchHistory) -> MatchHistory:
    """Step back to the snapshot before the current one.

    Raises:
        InvalidOperation: nothing to undo.
    """
    if not history.can_undo:
        raise InvalidOperation("Nothing to undo")
    previous = history.matches[history.undo_pointer - 2]
    return MatchHistory(
        players=history.players,
        matches=history.matches + (previous,),
        undo_pointer=history.undo_pointer - 1,
        undo_pointer_at_start_of_undo=history.undo_pointer_at_start_of_undo,
    )


def redo(history: MatchHistory) -> MatchHistory:
    """Step forward to the snapshot that was undone.

    Raises:
        InvalidOperation: nothing to redo.
    """
    if not history.can_redo:
        raise InvalidOperation("Nothing to redo")
    following = history.matches[history.undo_pointer]
    return MatchHistory(
        players=history.players,
        matches=history.matches + (following,),
        undo_pointer=history.undo_pointer + 1,
        undo_pointer_at_start_of_undo=history.undo_pointer_at_start_of_undo,
    )
