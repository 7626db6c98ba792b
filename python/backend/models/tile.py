"""Visual tile entity."""

from __future__ import annotations


class Tile:
    """A numbered square drawn at a pixel position.

    ``number`` never changes.  ``x`` and ``y`` are written by the animation
    controller while the tile slides and by the static draw pass otherwise.
    """

    __slots__ = ("_number", "x", "y", "size")

    def __init__(self, number: int, size: int, x: int = 0, y: int = 0) -> None:
        self._number = number
        self.size = size
        self.x = x
        self.y = y

    @property
    def number(self) -> int:
        return self._number

    @property
    def position(self) -> tuple[int, int]:
        return self.x, self.y

    def contains(self, x: int, y: int) -> bool:
        """Check if the tile's square overlaps the given pixel."""
        return (
            self.x <= x <= self.x + self.size
            and self.y <= y <= self.y + self.size
        )

    def __repr__(self) -> str:
        return f"Tile({self._number}, x={self.x}, y={self.y}, size={self.size})"
