"""Rich terminal viewer — prints a (scrambled) board and exits.

Useful for checking what a given ``--seed`` produces without opening a
window.
"""

from __future__ import annotations

import rich.box
from rich.align import Align
from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from backend.config import PuzzleConfig
from backend.engine.gamegenerator import GameGenerator
from backend.models.board import Board

console = Console()


# -- board rendering ----------------------------------------------------------


def render_board(board: Board) -> Table:
    """Return a Rich Table representing the puzzle grid."""
    width = len(str(board.size * board.size - 1))
    table = Table(
        show_header=False,
        show_edge=True,
        pad_edge=True,
        box=rich.box.HEAVY,
        border_style="bright_blue",
        padding=(0, 1),
    )
    for _ in range(board.size):
        table.add_column(width=width + 1, justify="center")

    for row in board.tiles:
        cells: list[str] = []
        for val in row:
            if val is None:
                cells.append("[dim]·[/dim]")
            else:
                cells.append(f"[bold white]{val:>{width}}[/bold white]")
        table.add_row(*cells)

    return table


# -- public entry point -------------------------------------------------------


def run(config: PuzzleConfig, scramble: bool = True) -> None:
    """Print the board for *config* to the terminal."""
    config.validate()
    board = GameGenerator.solved(config.size)
    relocations = 0
    if scramble:
        relocations = len(
            GameGenerator.scramble(board, config.scramble_moves, config.rng())
        )

    size = config.size
    panel = Panel(
        Align.center(render_board(board)),
        title=f"[bold cyan]Puzzle  {size}×{size}[/bold cyan]",
        border_style="bright_blue",
        padding=(1, 2),
    )

    stats = Text()
    stats.append("  Seed: ", style="dim")
    stats.append(str(config.seed), style="bold yellow")
    stats.append("    Relocations: ", style="dim")
    stats.append(str(relocations), style="bold yellow")

    console.print()
    console.print(Align.center(panel))
    console.print(Align.center(stats))
