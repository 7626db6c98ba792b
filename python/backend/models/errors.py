"""Board error hierarchy."""

from __future__ import annotations


class BoardError(ValueError):
    """Malformed board or violated board invariant."""


class OutOfBoundsError(BoardError, IndexError):
    """A cell reference outside the grid."""

    def __init__(self, row: int, col: int, size: int) -> None:
        super().__init__(f"Cell ({row}, {col}) is outside the {size}×{size} board.")
        self.row = row
        self.col = col


class InvalidRelocationError(BoardError):
    """A relocate call whose preconditions do not hold.

    Only a broken move chain can trigger this, so nothing in the engine
    catches it.
    """
