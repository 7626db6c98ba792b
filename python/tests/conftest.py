from __future__ import annotations

import pytest


class RecordingRenderer:
    """Render collaborator that only remembers what it was asked to do."""

    def __init__(self) -> None:
        self.calls: list[tuple] = []

    def render_tile(self, number: int, x: int, y: int, size: int) -> None:
        self.calls.append(("draw", number, x, y, size))

    def clear_region(self, x: int, y: int, width: int, height: int) -> None:
        self.calls.append(("clear", x, y, width, height))

    def draws(self) -> list[tuple]:
        return [c for c in self.calls if c[0] == "draw"]

    def clears(self) -> list[tuple]:
        return [c for c in self.calls if c[0] == "clear"]


@pytest.fixture
def renderer() -> RecordingRenderer:
    return RecordingRenderer()
