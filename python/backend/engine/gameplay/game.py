"""Core gameplay logic — turns clicks into chain moves and tile slides."""

from __future__ import annotations

import logging
import random

from backend.config import PuzzleConfig
from backend.engine.animation import STEP, AnimationController, Renderer
from backend.engine.gamegenerator import SCRAMBLE_MOVES, GameGenerator
from backend.engine.moveresolver import MoveResolver, TileMove
from backend.models.board import Board, Cell
from backend.models.tile import Tile

log = logging.getLogger(__name__)


class GamePlay:
    """Orchestrates a single game session.

    The board is the source of truth.  ``tiles`` holds one :class:`Tile` per
    identifier carrying its on-screen position, which may lag behind the
    board while an animation is running.
    """

    def __init__(
        self,
        size: int,
        tile_size: int,
        renderer: Renderer,
        *,
        step: int = STEP,
        rng: random.Random | None = None,
    ) -> None:
        self.size = size
        self.tile_size = tile_size
        self.renderer = renderer
        self.rng = rng or random.Random()
        self.animator = AnimationController(renderer, step)
        self._load(GameGenerator.solved(size))

    @classmethod
    def from_config(cls, config: PuzzleConfig, renderer: Renderer) -> GamePlay:
        config.validate()
        return cls(
            config.size,
            config.tile_size,
            renderer,
            step=config.step,
            rng=config.rng(),
        )

    @classmethod
    def from_board(
        cls,
        board: Board,
        tile_size: int,
        renderer: Renderer,
        *,
        step: int = STEP,
        rng: random.Random | None = None,
    ) -> GamePlay:
        """Create a game session from an existing board."""
        obj = cls(board.size, tile_size, renderer, step=step, rng=rng)
        obj._load(board)
        return obj

    def _load(self, board: Board) -> None:
        self.board = board
        self.tiles: dict[int, Tile] = {}
        for r in range(board.size):
            for c in range(board.size):
                number = board.cell_at(r, c)
                if number is not None:
                    x, y = self.coordinates(r, c)
                    self.tiles[number] = Tile(number, self.tile_size, x, y)

    # -- geometry -------------------------------------------------------------

    def coordinates(self, row: int, col: int) -> tuple[int, int]:
        """Pixel (x, y) of the top-left corner of a cell."""
        return col * self.tile_size, row * self.tile_size

    def cell_at_pixel(self, x: int, y: int) -> Cell | None:
        """Find the board cell of the tile drawn under (x, y).

        Returns ``None`` when the pixel is over the empty cell or off the
        board.
        """
        for r in range(self.size):
            for c in range(self.size):
                number = self.board.cell_at(r, c)
                if number is not None and self.tiles[number].contains(x, y):
                    return r, c
        return None

    # -- drawing --------------------------------------------------------------

    def start(self) -> None:
        self.draw()

    def draw(self) -> None:
        """Static pass: every tile at its cell, the empty cell cleared."""
        for r in range(self.size):
            for c in range(self.size):
                number = self.board.cell_at(r, c)
                x, y = self.coordinates(r, c)
                if number is None:
                    self.renderer.clear_region(x, y, self.tile_size, self.tile_size)
                else:
                    tile = self.tiles[number]
                    tile.x, tile.y = x, y
                    self.renderer.render_tile(number, x, y, self.tile_size)

    # -- movement -------------------------------------------------------------

    def click(self, cell: Cell | None) -> list[TileMove]:
        """Slide the clicked tile (and whatever blocks it) toward the empty cell.

        Board changes are applied in full before any animation is queued.
        """
        if cell is None:
            return []
        moves = MoveResolver.resolve(self.board, *cell)
        for move in moves:
            self.animator.animate(self.tiles[move.tile], self.coordinates(*move.dest))
        return moves

    def tick(self) -> int:
        return self.animator.tick()

    def scramble(self, count: int = SCRAMBLE_MOVES) -> list[TileMove]:
        """Shuffle without animation, then redraw the whole board."""
        self.animator.cancel_all()
        moves = GameGenerator.scramble(self.board, count, self.rng)
        log.info("scramble: %d attempts moved %d tiles", count, len(moves))
        self.draw()
        return moves

    def reset(self) -> None:
        """Replace the board with a fresh solved one."""
        self.animator.cancel_all()
        self._load(GameGenerator.solved(self.size))
        self.draw()
