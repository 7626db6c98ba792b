"""Board model for the sliding puzzle game."""

from __future__ import annotations

import logging
from enum import StrEnum
from typing import Iterable

from backend.models.errors import BoardError, InvalidRelocationError, OutOfBoundsError

log = logging.getLogger(__name__)

Cell = tuple[int, int]


class Direction(StrEnum):
    UP = "up"
    DOWN = "down"
    LEFT = "left"
    RIGHT = "right"

    @property
    def delta(self) -> Cell:
        """(row-delta, col-delta) of one step in this direction."""
        return _DELTAS[self]

    @property
    def opposite(self) -> Direction:
        return _OPPOSITES[self]


_DELTAS: dict[Direction, Cell] = {
    Direction.UP: (-1, 0),
    Direction.DOWN: (1, 0),
    Direction.LEFT: (0, -1),
    Direction.RIGHT: (0, 1),
}

_OPPOSITES: dict[Direction, Direction] = {
    Direction.UP: Direction.DOWN,
    Direction.DOWN: Direction.UP,
    Direction.LEFT: Direction.RIGHT,
    Direction.RIGHT: Direction.LEFT,
}


class Board:
    """Represents the sliding puzzle board.

    Tiles are stored as a 2D list of ints.  ``None`` marks the single empty
    cell.  The grid only changes through :meth:`relocate`, which keeps the
    one-empty-cell invariant by construction.
    """

    def __init__(self, size: int, tiles: Iterable[Iterable[int | None]]) -> None:
        self.size = size
        self._tiles: list[list[int | None]] = [list(row) for row in tiles]
        self._empty = self._validate()

    # -- construction helpers -------------------------------------------------

    @classmethod
    def solved(cls, size: int) -> Board:
        """Identifiers in row-major order, last cell left empty."""
        flat: list[int | None] = list(range(1, size * size))
        flat.append(None)
        return cls.from_flat(size, flat)

    @classmethod
    def from_flat(cls, size: int, flat: list[int | None]) -> Board:
        """Create a board from a flat row-major tile list.

        Example::

            Board.from_flat(3, [1, 2, 3, 4, 5, 6, 7, None, 8])
        """
        if len(flat) != size * size:
            raise BoardError(
                f"Expected {size * size} tiles for a {size}×{size} board, "
                f"got {len(flat)}."
            )
        return cls(size, (flat[r * size : (r + 1) * size] for r in range(size)))

    def _validate(self) -> Cell:
        if self.size < 2:
            raise BoardError(f"Board size must be at least 2, got {self.size}.")
        if len(self._tiles) != self.size or any(
            len(row) != self.size for row in self._tiles
        ):
            raise BoardError(f"Grid is not {self.size}×{self.size}.")

        empty: list[Cell] = []
        seen: set[int] = set()
        for r, row in enumerate(self._tiles):
            for c, val in enumerate(row):
                if val is None:
                    empty.append((r, c))
                elif not isinstance(val, int) or isinstance(val, bool):
                    raise BoardError(f"Tile {val!r} at ({r}, {c}) is not an integer.")
                elif not 1 <= val < self.size * self.size or val in seen:
                    raise BoardError(f"Invalid or duplicate tile {val!r} at ({r}, {c}).")
                else:
                    seen.add(val)
        if len(empty) != 1:
            raise BoardError(f"Expected exactly one empty cell, found {len(empty)}.")
        return empty[0]

    # -- queries --------------------------------------------------------------

    @property
    def tiles(self) -> tuple[tuple[int | None, ...], ...]:
        return tuple(tuple(row) for row in self._tiles)

    @property
    def empty_cell(self) -> Cell:
        return self._empty

    def in_bounds(self, row: int, col: int) -> bool:
        return 0 <= row < self.size and 0 <= col < self.size

    def cell_at(self, row: int, col: int) -> int | None:
        if not self.in_bounds(row, col):
            raise OutOfBoundsError(row, col, self.size)
        return self._tiles[row][col]

    def neighbor(self, row: int, col: int, direction: Direction) -> Cell:
        """Return the cell one step from (row, col) in *direction*."""
        dr, dc = direction.delta
        nr, nc = row + dr, col + dc
        if not self.in_bounds(nr, nc):
            raise OutOfBoundsError(nr, nc, self.size)
        return nr, nc

    def position_of(self, tile: int) -> Cell:
        for r, row in enumerate(self._tiles):
            for c, val in enumerate(row):
                if val == tile:
                    return r, c
        raise KeyError(tile)

    def flat(self) -> list[int | None]:
        return [val for row in self._tiles for val in row]

    def copy(self) -> Board:
        return Board(self.size, self._tiles)

    # -- mutation -------------------------------------------------------------

    def relocate(self, src_row: int, src_col: int, dst_row: int, dst_col: int) -> int:
        """Move the tile at the source cell into the adjacent empty destination.

        Returns the identifier of the relocated tile.
        """
        if not (self.in_bounds(src_row, src_col) and self.in_bounds(dst_row, dst_col)):
            raise InvalidRelocationError(
                f"({src_row}, {src_col}) -> ({dst_row}, {dst_col}) leaves the board"
            )
        if abs(src_row - dst_row) + abs(src_col - dst_col) != 1:
            raise InvalidRelocationError(
                f"({src_row}, {src_col}) and ({dst_row}, {dst_col}) are not adjacent"
            )
        tile = self._tiles[src_row][src_col]
        if tile is None:
            raise InvalidRelocationError(f"source ({src_row}, {src_col}) is empty")
        if self._tiles[dst_row][dst_col] is not None:
            raise InvalidRelocationError(f"destination ({dst_row}, {dst_col}) is occupied")

        self._tiles[dst_row][dst_col] = tile
        self._tiles[src_row][src_col] = None
        self._empty = (src_row, src_col)
        log.debug("tile %d: (%d, %d) -> (%d, %d)", tile, src_row, src_col, dst_row, dst_col)
        return tile

    # -- dunder ---------------------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return self.size == other.size and self._tiles == other._tiles

    def __repr__(self) -> str:
        return f"Board(size={self.size}, tiles={self._tiles!r})"
