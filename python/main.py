#!/usr/bin/env python3
"""Sliding Tile Puzzle.

Usage::

    python main.py                     # Pygame window, 4×4, scrambled
    python main.py -f pyqt -s 3        # PyQt window, 3×3
    python main.py -f rich --seed 7    # print the board for seed 7
    python main.py --no-scramble -v    # solved board, debug logging
"""

import importlib
import logging
import sys
from enum import StrEnum
from pathlib import Path
from typing import Optional

import typer
from rich.logging import RichHandler

ROOT = Path(__file__).resolve().parent  # python/

if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from backend.config import ConfigError, PuzzleConfig  # noqa: E402

log = logging.getLogger("puzzle")


# -- frontend registry -------------------------------------------------------


class Frontend(StrEnum):
    rich = "rich"
    pygame = "pygame"
    pyqt = "pyqt"


_RUNNERS = {
    Frontend.rich: "frontend.cli.rich.app",
    Frontend.pygame: "frontend.gui.pygame.app",
    Frontend.pyqt: "frontend.gui.pyqt.app",
}


# -- helpers ------------------------------------------------------------------


def _setup_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(rich_tracebacks=True, show_path=False)],
    )


# -- CLI entry point ----------------------------------------------------------

app = typer.Typer(add_completion=False)


@app.command()
def main(
    frontend: Frontend = typer.Option(
        Frontend.pygame, "-f", "--frontend",
        help="Frontend to launch.",
    ),
    size: int = typer.Option(
        4, "-s", "--size",
        min=2,
        help="Grid size N (N×N board).",
    ),
    width: int = typer.Option(
        480, "-w", "--width",
        help="Canvas width in pixels; tiles are width // size wide.",
    ),
    step: int = typer.Option(
        8, "--step",
        help="Animation step in pixels per frame.",
    ),
    scramble: bool = typer.Option(
        True, "--scramble/--no-scramble",
        help="Shuffle the board before play.",
    ),
    moves: int = typer.Option(
        100, "-n", "--moves",
        help="Random move attempts per scramble.",
    ),
    seed: Optional[int] = typer.Option(
        None, "--seed",
        help="Seed for reproducible scrambles.",
    ),
    fps: int = typer.Option(
        60, "--fps",
        help="Animation frames per second.",
    ),
    verbose: bool = typer.Option(
        False, "-v", "--verbose",
        help="Log every relocation and animation.",
    ),
) -> None:
    """Sliding Tile Puzzle."""
    _setup_logging(verbose)

    config = PuzzleConfig(
        size=size,
        canvas_width=width,
        step=step,
        scramble_moves=moves,
        seed=seed,
        fps=fps,
    )
    try:
        config.validate()
    except ConfigError as exc:
        raise typer.BadParameter(str(exc)) from exc

    log.debug("starting %s frontend with %s", frontend.value, config)
    mod = importlib.import_module(_RUNNERS[frontend])
    mod.run(config, scramble=scramble)


if __name__ == "__main__":
    app()
