"""Drawing surface the engine paints tiles onto."""

from __future__ import annotations

from typing import Protocol


class Renderer(Protocol):
    """Implemented by each GUI frontend.

    Both calls are synchronous and idempotent.
    """

    def render_tile(self, number: int, x: int, y: int, size: int) -> None: ...

    def clear_region(self, x: int, y: int, width: int, height: int) -> None: ...
