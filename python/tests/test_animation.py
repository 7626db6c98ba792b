"""Tile slide animations driven by manual ticks."""

from __future__ import annotations

import math

import pytest

from backend.engine.animation import STEP, AnimationController, step_axis, step_toward
from backend.models.tile import Tile

# -- step function ------------------------------------------------------------


@pytest.mark.parametrize(
    "current, target, expected",
    [
        (0, 0, 0),     # axis already done
        (0, 5, 5),     # closer than a step: snap
        (10, 3, 3),
        (0, 8, 8),     # exactly one step
        (0, 100, 8),
        (100, 0, 92),
    ],
)
def test_step_axis(current: int, target: int, expected: int) -> None:
    assert step_axis(current, target) == expected


@pytest.mark.parametrize(
    "start, target",
    [
        ((0, 0), (120, 0)),
        ((120, 0), (0, 0)),
        ((0, 0), (0, 117)),
        ((37, 200), (160, 3)),
        ((5, 5), (5, 5)),
    ],
)
def test_step_toward_converges_without_overshoot(start, target) -> None:
    pos = start
    ticks = 0
    bound = max(
        math.ceil(abs(target[0] - start[0]) / STEP),
        math.ceil(abs(target[1] - start[1]) / STEP),
    )
    while pos != target:
        nxt = step_toward(pos, target)
        for axis in (0, 1):
            lo, hi = sorted((start[axis], target[axis]))
            assert lo <= nxt[axis] <= hi, f"overshoot on axis {axis}: {nxt}"
            assert abs(target[axis] - nxt[axis]) <= abs(target[axis] - pos[axis])
        pos = nxt
        ticks += 1
        assert ticks <= bound
    assert ticks == bound


# -- controller ---------------------------------------------------------------


def test_tile_already_at_target_is_not_scheduled(renderer) -> None:
    anim = AnimationController(renderer)
    assert anim.animate(Tile(1, 40, 40, 0), (40, 0)) is None
    assert anim.idle
    assert anim.tick() == 0
    assert renderer.calls == []


def test_single_slide_clears_then_draws_each_tick(renderer) -> None:
    anim = AnimationController(renderer)
    tile = Tile(3, 40, 0, 0)
    anim.animate(tile, (20, 0))

    assert anim.tick() == 1
    assert renderer.calls == [("clear", 0, 0, 40, 40), ("draw", 3, 8, 0, 40)]

    anim.tick()
    assert anim.tick() == 0
    assert tile.position == (20, 0)
    assert anim.idle
    assert renderer.draws()[-1] == ("draw", 3, 20, 0, 40)


def test_concurrent_slides_clear_before_any_draw(renderer) -> None:
    anim = AnimationController(renderer)
    a = Tile(1, 40, 40, 0)
    b = Tile(2, 40, 80, 0)
    anim.animate(a, (0, 0))
    anim.animate(b, (40, 0))

    anim.tick()
    kinds = [c[0] for c in renderer.calls]
    assert kinds == ["clear", "clear", "draw", "draw"]

    ticks = anim.finish()
    assert ticks == 4
    assert a.position == (0, 0)
    assert b.position == (40, 0)


def test_retarget_reuses_the_running_animation(renderer) -> None:
    anim = AnimationController(renderer)
    tile = Tile(7, 40, 0, 0)
    first = anim.animate(tile, (80, 0))
    anim.tick()
    anim.tick()
    assert tile.position == (16, 0)

    second = anim.animate(tile, (0, 0))
    assert second is first
    assert second.start == (16, 0)
    assert len(anim.active) == 1

    assert anim.finish() == 2
    assert tile.position == (0, 0)


def test_retarget_onto_current_position_stops(renderer) -> None:
    anim = AnimationController(renderer)
    tile = Tile(7, 40, 0, 0)
    anim.animate(tile, (80, 0))
    anim.tick()
    assert anim.animate(tile, (8, 0)) is None
    assert not anim.is_animating(tile)


def test_cancel(renderer) -> None:
    anim = AnimationController(renderer)
    tile = Tile(2, 40, 0, 0)
    anim.animate(tile, (40, 0))
    assert anim.is_animating(2)
    anim.cancel(tile)
    assert anim.idle
    assert anim.tick() == 0


def test_custom_step(renderer) -> None:
    anim = AnimationController(renderer, step=20)
    tile = Tile(1, 40, 0, 0)
    anim.animate(tile, (40, 0))
    assert anim.finish() == 2


def test_step_must_be_positive(renderer) -> None:
    with pytest.raises(ValueError):
        AnimationController(renderer, step=0)
