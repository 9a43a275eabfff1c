"""Pygame GUI frontend — photo puzzle.

Loads a photo, letterboxes it into a square, slices it into nine tiles
and lets the player click tiles next to the blank.  Shuffle / Solve /
Reset / Random photo buttons sit under the board; dropping an image
file on the window replaces the photo.
"""

from __future__ import annotations

import logging
import random
from collections.abc import Iterator
from pathlib import Path

import pygame

from backend.engine.gameplay import GamePlay
from backend.models.board import Board, Direction
from frontend.config import FrontendConfig
from frontend.gui.layout import cell_at, fit_contain, tile_rect, tile_slices

logger = logging.getLogger(__name__)

# ---------------------------------------------------------------------------
# Catppuccin Mocha palette
# ---------------------------------------------------------------------------
COL_BASE = (30, 30, 46)
COL_MANTLE = (24, 24, 37)
COL_SURFACE0 = (49, 50, 68)
COL_SURFACE1 = (69, 71, 90)
COL_OVERLAY0 = (108, 112, 134)
COL_TEXT = (205, 214, 244)
COL_SUBTEXT = (166, 173, 200)
COL_BLUE = (137, 180, 250)
COL_LAVENDER = (180, 190, 254)
COL_GREEN = (166, 227, 161)
COL_PINK = (245, 194, 231)
COL_YELLOW = (249, 226, 175)
COL_RED = (243, 139, 168)
COL_PAPER = (244, 244, 246)  # letterbox padding and blank tile

# ---------------------------------------------------------------------------
# Layout
# ---------------------------------------------------------------------------
WIN_W, WIN_H = 540, 660
TILE_GAP = 4
TILE_PX = 160
BOARD_PX = 3 * TILE_PX + 4 * TILE_GAP
BOARD_Y = 64
SLICE_PAD = 1  # px of overlap per slice edge

IMAGE_SUFFIXES = {".png", ".jpg", ".jpeg", ".bmp", ".webp"}


# ---------------------------------------------------------------------------
# Simple clickable button
# ---------------------------------------------------------------------------
class _Btn:
    __slots__ = ("rect", "text", "font", "bg", "hover", "fg", "radius", "enabled", "_hot")

    def __init__(
        self,
        rect: tuple[int, int, int, int],
        text: str,
        font: pygame.font.Font,
        *,
        bg: tuple = COL_SURFACE0,
        hover: tuple = COL_SURFACE1,
        fg: tuple = COL_TEXT,
        radius: int = 8,
    ) -> None:
        self.rect = pygame.Rect(rect)
        self.text = text
        self.font = font
        self.bg = bg
        self.hover = hover
        self.fg = fg
        self.radius = radius
        self.enabled = True
        self._hot = False

    def draw(self, surf: pygame.Surface) -> None:
        if not self.enabled:
            c, fg = COL_SURFACE0, COL_OVERLAY0
        else:
            c, fg = (self.hover if self._hot else self.bg), self.fg
        pygame.draw.rect(surf, c, self.rect, border_radius=self.radius)
        lbl = self.font.render(self.text, True, fg)
        surf.blit(
            lbl,
            (
                self.rect.centerx - lbl.get_width() // 2,
                self.rect.centery - lbl.get_height() // 2,
            ),
        )

    def motion(self, pos: tuple[int, int]) -> None:
        self._hot = self.rect.collidepoint(pos)

    def hit(self, pos: tuple[int, int]) -> bool:
        return self.enabled and self.rect.collidepoint(pos)


def _cx(w: int) -> int:
    return (WIN_W - w) // 2


def _blit_center(surf: pygame.Surface, rendered: pygame.Surface, y: int) -> None:
    surf.blit(rendered, (_cx(rendered.get_width()), y))


# ---------------------------------------------------------------------------
# Photo slicing
# ---------------------------------------------------------------------------
def slice_photo(image: pygame.Surface, tile_px: int = TILE_PX) -> list[pygame.Surface]:
    """Letterbox *image* into a square canvas and cut it into 9 tiles.

    Index ``v - 1`` holds tile label ``v``; index 8 is a plain blank
    placeholder.
    """
    size = 3 * tile_px
    canvas = pygame.Surface((size, size))
    canvas.fill(COL_PAPER)
    dx, dy, dw, dh = fit_contain(image.get_width(), image.get_height(), size)
    canvas.blit(pygame.transform.smoothscale(image, (dw, dh)), (dx, dy))

    tiles = [
        pygame.transform.smoothscale(canvas.subsurface(pygame.Rect(r)), (tile_px, tile_px))
        for r in tile_slices(tile_px, pad=SLICE_PAD)[:8]
    ]
    blank = pygame.Surface((tile_px, tile_px))
    blank.fill(COL_PAPER)
    tiles.append(blank)
    return tiles


# ---------------------------------------------------------------------------
# Main application
# ---------------------------------------------------------------------------
class PygameApp:
    def __init__(self, config: FrontendConfig) -> None:
        self._delay_ms = int(config.delay * 1000)
        self._images_dir = config.images_dir
        self._pick = random.Random()
        self._tiles: list[pygame.Surface] | None = None

        pygame.init()
        self._surf = pygame.display.set_mode((WIN_W, WIN_H))
        pygame.display.set_caption("8-Puzzle")
        self._clock = pygame.time.Clock()

        self._f_title = pygame.font.SysFont("Helvetica", 22, bold=True)
        self._f_tile = pygame.font.SysFont("Helvetica", 54, bold=True)
        self._f_badge = pygame.font.SysFont("Helvetica", 16, bold=True)
        self._f_btn = pygame.font.SysFont("Helvetica", 14, bold=True)
        self._f_small = pygame.font.SysFont("Helvetica", 13)

        self._game = GamePlay(config.make_rng())
        self._playback: Iterator[Board] | None = None
        self._next_step_at = 0
        self._status_msg = ""

        self._build_btns()
        if config.image is not None:
            self._load_photo(config.image)
        else:
            self._load_random_photo()

    # ── buttons ─────────────────────────────────────────────────────────────

    def _build_btns(self) -> None:
        bw, bh, gap = 118, 38, 10
        sx = _cx(4 * bw + 3 * gap)
        y = BOARD_Y + BOARD_PX + 14
        self._shuffle_btn = _Btn(
            (sx, y, bw, bh), "SHUFFLE (R)", self._f_btn,
            bg=COL_PINK, hover=(245, 210, 227), fg=COL_BASE,
        )
        self._solve_btn = _Btn(
            (sx + (bw + gap), y, bw, bh), "SOLVE (V)", self._f_btn,
            bg=COL_GREEN, hover=(190, 240, 190), fg=COL_BASE,
        )
        self._reset_btn = _Btn(
            (sx + 2 * (bw + gap), y, bw, bh), "RESET (X)", self._f_btn,
        )
        self._photo_btn = _Btn(
            (sx + 3 * (bw + gap), y, bw, bh), "PHOTO (P)", self._f_btn,
            bg=COL_BLUE, hover=COL_LAVENDER, fg=COL_BASE,
        )
        self._btns = [self._shuffle_btn, self._solve_btn, self._reset_btn, self._photo_btn]

    # ── photos ──────────────────────────────────────────────────────────────

    def _photos(self) -> list[Path]:
        if self._images_dir is None or not self._images_dir.is_dir():
            return []
        return sorted(
            p for p in self._images_dir.iterdir() if p.suffix.lower() in IMAGE_SUFFIXES
        )

    def _load_random_photo(self) -> None:
        photos = self._photos()
        if not photos:
            self._tiles = None
            return
        self._load_photo(self._pick.choice(photos))

    def _load_photo(self, path: Path) -> None:
        try:
            image = pygame.image.load(str(path)).convert()
        except (pygame.error, FileNotFoundError) as exc:
            logger.warning("Could not load photo %s: %s", path, exc)
            self._status_msg = f"Could not load {path.name}"
            return
        self._tiles = slice_photo(image)
        logger.debug("Sliced photo %s", path)
        self._status_msg = ""

    # ── drawing ─────────────────────────────────────────────────────────────

    def _origin(self) -> tuple[int, int]:
        return _cx(BOARD_PX) + TILE_GAP, BOARD_Y + TILE_GAP

    def _draw(self) -> None:
        self._surf.fill(COL_BASE)
        board = self._game.board

        _blit_center(
            self._surf,
            self._f_title.render(
                f"8-Puzzle    Moves: {self._game.state.moves}", True, COL_TEXT
            ),
            20,
        )

        pygame.draw.rect(
            self._surf,
            COL_MANTLE,
            pygame.Rect(_cx(BOARD_PX), BOARD_Y, BOARD_PX, BOARD_PX),
            border_radius=10,
        )

        origin = self._origin()
        for idx, val in enumerate(board.tiles):
            rect = pygame.Rect(tile_rect(idx, origin, TILE_PX, TILE_GAP))
            if self._tiles is not None:
                self._surf.blit(self._tiles[8 if val == 0 else val - 1], rect.topleft)
                if val != 0:
                    num = self._f_badge.render(str(val), True, (255, 255, 255))
                    badge = pygame.Surface(
                        (num.get_width() + 8, num.get_height() + 4), pygame.SRCALPHA
                    )
                    badge.fill((0, 0, 0, 150))
                    badge.blit(num, (4, 2))
                    self._surf.blit(badge, (rect.x + 2, rect.y + 2))
            elif val != 0:
                col = COL_GREEN if board.is_tile_correct(idx) else COL_BLUE
                pygame.draw.rect(self._surf, col, rect, border_radius=6)
                lbl = self._f_tile.render(str(val), True, COL_BASE)
                self._surf.blit(
                    lbl,
                    (
                        rect.centerx - lbl.get_width() // 2,
                        rect.centery - lbl.get_height() // 2,
                    ),
                )

        busy = self._playback is not None
        for btn in self._btns:
            btn.enabled = not busy
            btn.draw(self._surf)

        y = self._shuffle_btn.rect.bottom + 12
        if self._status_msg:
            _blit_center(
                self._surf, self._f_small.render(self._status_msg, True, COL_YELLOW), y
            )
        hint_text = (
            "Esc  stop solving" if busy
            else "Click a tile next to the gap     Arrows  move     Drop an image to use it"
        )
        _blit_center(
            self._surf, self._f_small.render(hint_text, True, COL_OVERLAY0), y + 22
        )

    # ── actions ─────────────────────────────────────────────────────────────

    def _do_solve(self) -> None:
        path = self._game.solution()
        if path is None:
            self._status_msg = "Board is unsolvable"
            return
        if not path:
            self._status_msg = "Already solved!"
            return
        self._playback = self._game.playback(path)
        self._status_msg = f"Solving… {len(path)} moves"
        self._step_playback()

    def _step_playback(self) -> None:
        assert self._playback is not None
        try:
            next(self._playback)
        except StopIteration:
            self._playback = None
            self._status_msg = f"Solved in {self._game.state.moves} moves"
            return
        self._next_step_at = pygame.time.get_ticks() + self._delay_ms

    def _cancel_playback(self) -> None:
        if self._playback is not None:
            self._playback.close()
            self._playback = None
            self._status_msg = "Stopped"

    # ── event handling ──────────────────────────────────────────────────────

    def _ev(self, ev: pygame.event.Event) -> bool:
        if ev.type == pygame.MOUSEMOTION:
            for btn in self._btns:
                btn.motion(ev.pos)
        elif ev.type == pygame.DROPFILE:
            if self._playback is None:
                self._load_photo(Path(ev.file))
        elif ev.type == pygame.MOUSEBUTTONDOWN and ev.button == 1:
            if self._shuffle_btn.hit(ev.pos):
                self._game.shuffle()
                self._status_msg = ""
            elif self._solve_btn.hit(ev.pos):
                self._do_solve()
            elif self._reset_btn.hit(ev.pos):
                self._game.reset()
                self._status_msg = ""
            elif self._photo_btn.hit(ev.pos):
                self._load_random_photo()
            else:
                cell = cell_at(ev.pos, self._origin(), TILE_PX, TILE_GAP)
                if cell is not None and self._game.move_tile(cell):
                    self._status_msg = "Solved!" if self._game.is_won else ""
        elif ev.type == pygame.KEYDOWN:
            _dirs = {
                pygame.K_UP: Direction.UP,
                pygame.K_w: Direction.UP,
                pygame.K_DOWN: Direction.DOWN,
                pygame.K_s: Direction.DOWN,
                pygame.K_LEFT: Direction.LEFT,
                pygame.K_a: Direction.LEFT,
                pygame.K_RIGHT: Direction.RIGHT,
                pygame.K_d: Direction.RIGHT,
            }
            if ev.key == pygame.K_ESCAPE:
                if self._playback is None:
                    return False
                self._cancel_playback()
            elif self._playback is not None:
                return True
            elif ev.key in _dirs:
                if self._game.move(_dirs[ev.key]):
                    self._status_msg = "Solved!" if self._game.is_won else ""
            elif ev.key == pygame.K_r:
                self._game.shuffle()
            elif ev.key == pygame.K_v:
                self._do_solve()
            elif ev.key == pygame.K_x:
                self._game.reset()
            elif ev.key == pygame.K_p:
                self._load_random_photo()
            elif ev.key == pygame.K_q:
                return False
        return True

    # ── main loop ───────────────────────────────────────────────────────────

    def run_loop(self) -> None:
        running = True
        while running:
            for ev in pygame.event.get():
                if ev.type == pygame.QUIT or not self._ev(ev):
                    running = False
                    break

            if self._playback is not None and pygame.time.get_ticks() >= self._next_step_at:
                self._step_playback()

            self._draw()
            pygame.display.flip()
            self._clock.tick(60)

        self._cancel_playback()
        pygame.quit()


# ---------------------------------------------------------------------------
# Public entry point
# ---------------------------------------------------------------------------
def run(config: FrontendConfig) -> None:
    """Launch the Pygame GUI."""
    app = PygameApp(config)
    app.run_loop()
