"""Errors raised by the scoring core."""


class InvalidOperation(Exception):
    """A command was issued that the current state does not allow.

    Scoring a finished game, undoing with nothing to undo, redoing with
    nothing to redo. Always a caller bug, never retried.
    """
