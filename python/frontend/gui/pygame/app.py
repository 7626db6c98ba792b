"""Pygame GUI frontend.

The board is painted incrementally: a full static pass on start and after
each scramble, and per-tile clear/draw calls from the animation controller
in between.  The animation controller is ticked once per frame.
"""

from __future__ import annotations

import logging

import pygame

from backend.config import PuzzleConfig
from backend.engine.gameplay import GamePlay

log = logging.getLogger(__name__)

# ---------------------------------------------------------------------------
# Palette
# ---------------------------------------------------------------------------
COL_BASE = (30, 30, 46)
COL_MANTLE = (24, 24, 37)
COL_OVERLAY0 = (108, 112, 134)
COL_TILE = (229, 75, 75)  # #E54B4B
COL_TILE_EDGE = (255, 255, 255)
COL_TILE_TEXT = (255, 255, 255)

# ---------------------------------------------------------------------------
# Layout
# ---------------------------------------------------------------------------
FOOTER_H = 32


# ---------------------------------------------------------------------------
# Render collaborator
# ---------------------------------------------------------------------------
class PygameRenderer:
    """Draws tiles onto a pygame surface."""

    def __init__(self, surf: pygame.Surface, tile_size: int) -> None:
        self._surf = surf
        self._font = pygame.font.SysFont("Arial", max(14, tile_size // 3))

    def render_tile(self, number: int, x: int, y: int, size: int) -> None:
        rect = pygame.Rect(x, y, size, size)
        pygame.draw.rect(self._surf, COL_TILE, rect)
        pygame.draw.rect(self._surf, COL_TILE_EDGE, rect, width=1)
        lbl = self._font.render(str(number), True, COL_TILE_TEXT)
        self._surf.blit(
            lbl,
            (
                rect.centerx - lbl.get_width() // 2,
                rect.centery - lbl.get_height() // 2,
            ),
        )

    def clear_region(self, x: int, y: int, width: int, height: int) -> None:
        self._surf.fill(COL_MANTLE, pygame.Rect(x, y, width, height))


# ---------------------------------------------------------------------------
# Main application
# ---------------------------------------------------------------------------
class PygameApp:
    def __init__(self, config: PuzzleConfig, scramble: bool = True) -> None:
        self._config = config.validate()
        width = config.canvas_width

        pygame.init()
        self._surf = pygame.display.set_mode((width, width + FOOTER_H))
        pygame.display.set_caption(f"Puzzle {config.size}×{config.size}")
        self._clock = pygame.time.Clock()
        self._f_small = pygame.font.SysFont("Helvetica", 13)

        self._surf.fill(COL_MANTLE)
        board_surf = self._surf.subsurface(pygame.Rect(0, 0, width, width))
        self._game = GamePlay.from_config(
            config, PygameRenderer(board_surf, config.tile_size)
        )
        self._game.start()
        if scramble:
            self._game.scramble(config.scramble_moves)

    # ── drawing ─────────────────────────────────────────────────────────────

    def _draw_footer(self) -> None:
        width = self._config.canvas_width
        footer = pygame.Rect(0, width, width, FOOTER_H)
        self._surf.fill(COL_BASE, footer)
        lbl = self._f_small.render(
            "Click  slide     R  scramble     N  new     Esc  quit",
            True,
            COL_OVERLAY0,
        )
        self._surf.blit(
            lbl,
            (
                (width - lbl.get_width()) // 2,
                footer.centery - lbl.get_height() // 2,
            ),
        )

    # ── event handling ──────────────────────────────────────────────────────

    def _handle(self, ev: pygame.event.Event) -> bool:
        if ev.type == pygame.MOUSEBUTTONDOWN and ev.button == 1:
            x, y = ev.pos
            if y < self._config.canvas_width:
                self._game.click(self._game.cell_at_pixel(x, y))
        elif ev.type == pygame.KEYDOWN:
            if ev.key == pygame.K_r:
                self._game.scramble(self._config.scramble_moves)
            elif ev.key == pygame.K_n:
                self._game.reset()
            elif ev.key in (pygame.K_q, pygame.K_ESCAPE):
                return False
        return True

    # ── main loop ───────────────────────────────────────────────────────────

    def run_loop(self) -> None:
        running = True
        while running:
            for ev in pygame.event.get():
                if ev.type == pygame.QUIT or not self._handle(ev):
                    running = False
                    break

            self._game.tick()
            self._draw_footer()
            pygame.display.flip()
            self._clock.tick(self._config.fps)

        log.debug("pygame loop exited")
        pygame.quit()


# ---------------------------------------------------------------------------
# Public entry point
# ---------------------------------------------------------------------------
def run(config: PuzzleConfig, scramble: bool = True) -> None:
    """Launch the Pygame GUI."""
    app = PygameApp(config, scramble)
    app.run_loop()
