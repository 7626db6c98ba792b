from __future__ import annotations

import pytest

from backend.config import ConfigError, PuzzleConfig


def test_defaults() -> None:
    config = PuzzleConfig().validate()
    assert config.size == 4
    assert config.tile_size == 120
    assert config.step == 8
    assert config.scramble_moves == 100


def test_tile_size_floors() -> None:
    assert PuzzleConfig(size=3, canvas_width=500).tile_size == 166


@pytest.mark.parametrize(
    "kwargs",
    [
        {"size": 1},
        {"size": 10, "canvas_width": 9},
        {"step": 0},
        {"scramble_moves": -1},
        {"fps": 0},
    ],
)
def test_validate_rejects(kwargs: dict) -> None:
    with pytest.raises(ConfigError):
        PuzzleConfig(**kwargs).validate()


def test_seeded_rng_is_reproducible() -> None:
    config = PuzzleConfig(seed=99)
    assert config.rng().random() == config.rng().random()
