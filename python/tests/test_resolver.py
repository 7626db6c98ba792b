"""Chain-move resolution."""

from __future__ import annotations

import random

import pytest

from backend.engine.moveresolver import DIRECTION_ORDER, MoveResolver, TileMove
from backend.models.board import Board, Direction

# -- helpers ------------------------------------------------------------------


def _assert_valid(board: Board) -> None:
    """Rebuilding from the raw rows re-runs every structural check."""
    Board(board.size, board.tiles)
    ids = sorted(v for v in board.flat() if v is not None)
    assert ids == list(range(1, board.size * board.size))


# -- single and chained moves -------------------------------------------------


def test_adjacent_tile_moves_directly() -> None:
    board = Board.solved(3)
    moves = MoveResolver.resolve(board, 2, 1)
    assert moves == [TileMove(8, (2, 1), (2, 2))]
    assert board.tiles[2] == (7, None, 8)


def test_horizontal_chain_moves_innermost_first() -> None:
    board = Board.from_flat(3, [None, 2, 1, 3, 4, 5, 6, 7, 8])
    moves = MoveResolver.resolve(board, 0, 2)
    assert board.tiles[0] == (2, 1, None)
    assert moves == [
        TileMove(2, (0, 1), (0, 0)),
        TileMove(1, (0, 2), (0, 1)),
    ]


def test_vertical_chain() -> None:
    board = Board.solved(3)
    moves = MoveResolver.resolve(board, 0, 2)
    assert [m.tile for m in moves] == [6, 3]
    assert all(m.dest == (m.source[0] + 1, m.source[1]) for m in moves)
    assert [row[2] for row in board.tiles] == [None, 3, 6]


def test_long_chain_on_large_board() -> None:
    board = Board.solved(6)
    moves = MoveResolver.resolve(board, 5, 0)
    assert len(moves) == 5
    assert board.tiles[5] == (None, 31, 32, 33, 34, 35)


# -- no-ops -------------------------------------------------------------------


def test_clicking_empty_cell_is_noop() -> None:
    board = Board.solved(3)
    assert MoveResolver.resolve(board, 2, 2) == []
    assert board == Board.solved(3)


@pytest.mark.parametrize("row, col", [(0, 0), (0, 1), (1, 0), (1, 1)])
def test_tile_off_the_empty_row_and_column_cannot_move(row: int, col: int) -> None:
    board = Board.solved(3)
    assert MoveResolver.resolve(board, row, col) == []
    assert board == Board.solved(3)


def test_edge_tile_is_not_pushed_off_the_board() -> None:
    # empty cell to the right of tile 1; pushing 1 left would leave the grid
    board = Board.from_flat(3, [1, None, 2, 3, 4, 5, 6, 7, 8])
    assert MoveResolver.resolve(board, 0, 0, (Direction.LEFT, Direction.UP)) == []
    assert board.tiles[0] == (1, None, 2)


# -- direction restriction ----------------------------------------------------


def test_restricted_direction_set() -> None:
    board = Board.solved(3)
    assert MoveResolver.resolve(board, 2, 0, (Direction.LEFT,)) == []
    assert board == Board.solved(3)

    moves = MoveResolver.resolve(board, 2, 0, (Direction.RIGHT,))
    assert [m.tile for m in moves] == [8, 7]
    assert board.tiles[2] == (None, 7, 8)


def test_default_order() -> None:
    assert DIRECTION_ORDER == (Direction.UP, Direction.DOWN, Direction.LEFT, Direction.RIGHT)


# -- properties ---------------------------------------------------------------


def test_inverse_click_restores_board() -> None:
    start = Board.from_flat(3, [None, 2, 1, 3, 4, 5, 6, 7, 8])
    board = start.copy()
    MoveResolver.resolve(board, 0, 2, (Direction.LEFT,))
    assert board.empty_cell == (0, 2)
    MoveResolver.resolve(board, 0, 0, (Direction.LEFT.opposite,))
    assert board == start


def test_random_clicks_keep_invariant() -> None:
    rng = random.Random(1234)
    board = Board.solved(4)
    for _ in range(500):
        before = board.copy()
        r, c = rng.randrange(4), rng.randrange(4)
        moves = MoveResolver.resolve(board, r, c)
        _assert_valid(board)
        if not moves:
            assert board == before
        else:
            # the empty cell ends up where the clicked tile was
            assert board.empty_cell == (r, c)
            for m in moves:
                assert abs(m.source[0] - m.dest[0]) + abs(m.source[1] - m.dest[1]) == 1
