"""Builds and shuffles sliding puzzle boards."""

from __future__ import annotations

import logging
import random

from backend.engine.moveresolver import DIRECTION_ORDER, MoveResolver, TileMove
from backend.models.board import Board

log = logging.getLogger(__name__)

SCRAMBLE_MOVES = 100


class GameGenerator:
    """Creates boards in the solved state and scrambles them with real moves."""

    @staticmethod
    def solved(size: int) -> Board:
        """Return the goal-state board (all tiles in order, empty bottom-right)."""
        return Board.solved(size)

    @staticmethod
    def scramble(
        board: Board,
        moves: int = SCRAMBLE_MOVES,
        rng: random.Random | None = None,
    ) -> list[TileMove]:
        """Scramble *board* in-place with *moves* random click attempts.

        Each attempt picks a random cell and a single random direction, and
        only that direction is handed to the resolver.  Attempts that cannot
        move anything are simply skipped, so the returned list of
        relocations is usually shorter than *moves*.
        """
        rng = rng or random.Random()
        performed: list[TileMove] = []

        for _ in range(moves):
            row = rng.randrange(board.size)
            col = rng.randrange(board.size)
            direction = rng.choice(DIRECTION_ORDER)
            performed.extend(MoveResolver.resolve(board, row, col, (direction,)))

        log.debug(
            "scrambled %d×%d board: %d attempts, %d relocations",
            board.size, board.size, moves, len(performed),
        )
        return performed
