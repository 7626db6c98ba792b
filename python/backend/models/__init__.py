from backend.models.board import Board, Cell, Direction
from backend.models.errors import BoardError, InvalidRelocationError, OutOfBoundsError
from backend.models.tile import Tile

__all__ = [
    "Board",
    "BoardError",
    "Cell",
    "Direction",
    "InvalidRelocationError",
    "OutOfBoundsError",
    "Tile",
]
