"""Pixel geometry for the image-tile board (no GUI toolkit imports)."""

from __future__ import annotations

GRID = 3


def fit_contain(src_w: int, src_h: int, size: int) -> tuple[int, int, int, int]:
    """Fit a *src_w*×*src_h* image fully inside a *size* square.

    Returns ``(dx, dy, dw, dh)``: the letterboxed destination rectangle,
    centred on the short axis.
    """
    if src_w <= 0 or src_h <= 0:
        raise ValueError(f"Image has no area: {src_w}×{src_h}")
    ar = src_w / src_h
    if ar >= 1:
        dw = size
        dh = round(size / ar)
        return 0, round((size - dh) / 2), dw, dh
    dh = size
    dw = round(size * ar)
    return round((size - dw) / 2), 0, dw, dh


def tile_slices(tile_px: int, pad: int = 0) -> list[tuple[int, int, int, int]]:
    """Source rectangles of the 9 slices in reading order.

    Slice ``v - 1`` belongs to tile label ``v``; slice 8 is the blank's.
    *pad* grows each slice past its cell (clamped to the canvas) so the
    scaled tiles overlap slightly and no seam shows between them.
    """
    size = GRID * tile_px
    out: list[tuple[int, int, int, int]] = []
    for r in range(GRID):
        for c in range(GRID):
            x0 = max(0, c * tile_px - pad)
            y0 = max(0, r * tile_px - pad)
            x1 = min(size, (c + 1) * tile_px + pad)
            y1 = min(size, (r + 1) * tile_px + pad)
            out.append((x0, y0, x1 - x0, y1 - y0))
    return out


def tile_rect(
    index: int, origin: tuple[int, int], tile_px: int, gap: int
) -> tuple[int, int, int, int]:
    """Screen rectangle of grid cell *index*."""
    r, c = divmod(index, GRID)
    ox, oy = origin
    return ox + c * (tile_px + gap), oy + r * (tile_px + gap), tile_px, tile_px


def cell_at(
    pos: tuple[int, int], origin: tuple[int, int], tile_px: int, gap: int
) -> int | None:
    """Grid index under screen point *pos*, or ``None`` (outside / in a gap)."""
    rx, ry = pos[0] - origin[0], pos[1] - origin[1]
    if rx < 0 or ry < 0:
        return None
    pitch = tile_px + gap
    c, cx = divmod(rx, pitch)
    r, cy = divmod(ry, pitch)
    if r >= GRID or c >= GRID or cx >= tile_px or cy >= tile_px:
        return None
    return r * GRID + c
