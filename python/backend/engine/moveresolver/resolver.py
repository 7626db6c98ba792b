"""Chain-move resolution: which tiles slide when a cell is clicked."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Iterable

from backend.models.board import Board, Cell, Direction
from backend.models.errors import OutOfBoundsError

log = logging.getLogger(__name__)

# Search order when several directions could move the clicked tile.
DIRECTION_ORDER: tuple[Direction, ...] = (
    Direction.UP,
    Direction.DOWN,
    Direction.LEFT,
    Direction.RIGHT,
)


@dataclass(frozen=True, slots=True)
class TileMove:
    tile: int
    source: Cell
    dest: Cell


class MoveResolver:
    """Stateless resolver — all methods are static."""

    @staticmethod
    def resolve(
        board: Board,
        row: int,
        col: int,
        directions: Iterable[Direction] | None = None,
    ) -> list[TileMove]:
        """Slide the tile at (row, col) toward the empty cell, if it can.

        Every direction in *directions* (default: all four, in
        ``DIRECTION_ORDER``) is tried in turn.  A direction succeeds when
        the neighbour in that direction is empty, or can itself be pushed
        further in the same direction.  Chains never bend.

        Returns the relocations performed, innermost first; ``[]`` when
        nothing could move.
        """
        if board.cell_at(row, col) is None:
            return []

        moves: list[TileMove] = []
        for direction in DIRECTION_ORDER if directions is None else directions:
            if MoveResolver._push(board, row, col, direction, moves):
                log.debug(
                    "click (%d, %d): %d tile(s) moved %s", row, col, len(moves), direction
                )
                break
        return moves

    @staticmethod
    def _push(
        board: Board,
        row: int,
        col: int,
        direction: Direction,
        moves: list[TileMove],
    ) -> bool:
        try:
            nr, nc = board.neighbor(row, col, direction)
        except OutOfBoundsError:
            return False

        if board.cell_at(nr, nc) is not None:
            MoveResolver._push(board, nr, nc, direction, moves)
            # check again; the neighbour may have slid out of the way
            if board.cell_at(nr, nc) is not None:
                return False

        tile = board.relocate(row, col, nr, nc)
        moves.append(TileMove(tile, (row, col), (nr, nc)))
        return True
