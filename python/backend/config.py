"""Puzzle construction parameters."""

from __future__ import annotations

import random
from dataclasses import dataclass

from backend.engine.animation.controller import STEP


class ConfigError(ValueError):
    """Invalid puzzle configuration."""


@dataclass(frozen=True)
class PuzzleConfig:
    size: int = 4
    canvas_width: int = 480
    step: int = STEP
    scramble_moves: int = 100
    seed: int | None = None
    fps: int = 60

    def validate(self) -> PuzzleConfig:
        if self.size < 2:
            raise ConfigError(f"Grid size must be at least 2, got {self.size}.")
        if self.canvas_width < self.size:
            raise ConfigError(
                f"Canvas width {self.canvas_width}px is too narrow "
                f"for a {self.size}×{self.size} grid."
            )
        if self.step < 1:
            raise ConfigError(f"Animation step must be positive, got {self.step}.")
        if self.scramble_moves < 0:
            raise ConfigError(
                f"Scramble move count cannot be negative, got {self.scramble_moves}."
            )
        if self.fps < 1:
            raise ConfigError(f"Frame rate must be positive, got {self.fps}.")
        return self

    @property
    def tile_size(self) -> int:
        """Pixel side of one tile."""
        return self.canvas_width // self.size

    def rng(self) -> random.Random:
        return random.Random(self.seed)
