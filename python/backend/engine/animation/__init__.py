from backend.engine.animation.controller import (
    STEP,
    AnimationController,
    TileAnimation,
    step_axis,
    step_toward,
)
from backend.engine.animation.renderer import Renderer

__all__ = [
    "STEP",
    "AnimationController",
    "Renderer",
    "TileAnimation",
    "step_axis",
    "step_toward",
]
