"""Frame-driven tile slide animations.

Nothing here owns a timer.  The frontend calls :meth:`AnimationController.tick`
once per display frame (pygame's ``Clock.tick`` loop, a Qt ``QTimer``) and
every active animation advances by one step.  Each animation is a plain
:class:`TileAnimation` record, so tests can drive ticks by hand.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from backend.engine.animation.renderer import Renderer
from backend.models.tile import Tile

log = logging.getLogger(__name__)

STEP = 8  # pixels per tick on each axis

Point = tuple[int, int]


def step_axis(current: int, target: int, step: int = STEP) -> int:
    """Advance one axis by *step* toward *target*, snapping when closer than that."""
    remaining = target - current
    if remaining == 0:
        return current
    if abs(remaining) < step:
        return target
    return current + step if remaining > 0 else current - step


def step_toward(current: Point, target: Point, step: int = STEP) -> Point:
    return step_axis(current[0], target[0], step), step_axis(current[1], target[1], step)


@dataclass(slots=True)
class TileAnimation:
    tile: Tile
    start: Point
    target: Point
    ticks: int = 0

    @property
    def done(self) -> bool:
        return self.tile.position == self.target


class AnimationController:
    """Drives every in-flight tile slide from a single tick dispatcher.

    At most one :class:`TileAnimation` exists per tile.  Asking to animate a
    tile that is already sliding retargets the existing record: it keeps
    going from wherever it is now toward the new destination.
    """

    def __init__(self, renderer: Renderer, step: int = STEP) -> None:
        if step < 1:
            raise ValueError(f"step must be positive, got {step}")
        self.renderer = renderer
        self.step = step
        self._active: dict[int, TileAnimation] = {}

    # -- queries --------------------------------------------------------------

    @property
    def idle(self) -> bool:
        return not self._active

    @property
    def active(self) -> list[TileAnimation]:
        return list(self._active.values())

    def is_animating(self, tile: Tile | int) -> bool:
        number = tile.number if isinstance(tile, Tile) else tile
        return number in self._active

    # -- scheduling -----------------------------------------------------------

    def animate(self, tile: Tile, target: Point) -> TileAnimation | None:
        """Start (or retarget) a slide of *tile* to the pixel *target*."""
        anim = self._active.get(tile.number)
        if anim is not None:
            log.debug(
                "retarget tile %d at %s: %s -> %s",
                tile.number, tile.position, anim.target, target,
            )
            anim.start = tile.position
            anim.target = target
            anim.ticks = 0
        elif tile.position == target:
            return None
        else:
            anim = TileAnimation(tile, tile.position, target)
            self._active[tile.number] = anim
            log.debug("animate tile %d: %s -> %s", tile.number, anim.start, target)

        if anim.done:
            del self._active[tile.number]
            return None
        return anim

    def cancel(self, tile: Tile | int) -> None:
        number = tile.number if isinstance(tile, Tile) else tile
        self._active.pop(number, None)

    def cancel_all(self) -> None:
        self._active.clear()

    def tick(self) -> int:
        """Advance every active animation by one step.

        All old squares are cleared before any tile is redrawn, so a tile
        sliding into its neighbour's old spot is never painted over within
        the same frame.  Returns the number of animations still running.
        """
        frame = list(self._active.values())
        for anim in frame:
            tile = anim.tile
            self.renderer.clear_region(tile.x, tile.y, tile.size, tile.size)

        for anim in frame:
            tile = anim.tile
            tile.x, tile.y = step_toward(tile.position, anim.target, self.step)
            anim.ticks += 1
            self.renderer.render_tile(tile.number, tile.x, tile.y, tile.size)
            if anim.done:
                del self._active[tile.number]
                log.debug("tile %d settled after %d ticks", tile.number, anim.ticks)

        return len(self._active)

    def finish(self) -> int:
        """Tick until idle; returns how many ticks that took."""
        ticks = 0
        while self._active:
            self.tick()
            ticks += 1
        return ticks
