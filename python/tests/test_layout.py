"""Photo tile geometry tests."""

from __future__ import annotations

import pytest

from frontend.gui.layout import cell_at, fit_contain, tile_rect, tile_slices


@pytest.mark.parametrize(
    ("w", "h", "expected"),
    [
        (600, 600, (0, 0, 600, 600)),
        (1200, 600, (0, 150, 600, 300)),
        (300, 600, (150, 0, 300, 600)),
        (100, 50, (0, 150, 600, 300)),
    ],
    ids=["square", "wide", "tall", "upscaled"],
)
def test_fit_contain(w: int, h: int, expected: tuple[int, int, int, int]) -> None:
    assert fit_contain(w, h, 600) == expected


def test_fit_contain_rejects_empty_image() -> None:
    with pytest.raises(ValueError):
        fit_contain(0, 10, 600)


def test_tile_slices_cover_canvas_in_reading_order() -> None:
    slices = tile_slices(100)
    assert len(slices) == 9
    assert slices[0] == (0, 0, 100, 100)
    assert slices[2] == (200, 0, 100, 100)
    assert slices[3] == (0, 100, 100, 100)
    assert slices[8] == (200, 200, 100, 100)


def test_tile_rect_includes_gaps() -> None:
    assert tile_rect(0, (10, 20), 100, 4) == (10, 20, 100, 100)
    assert tile_rect(4, (10, 20), 100, 4) == (114, 124, 100, 100)
    assert tile_rect(8, (10, 20), 100, 4) == (218, 228, 100, 100)


@pytest.mark.parametrize(
    ("pos", "expected"),
    [
        ((10, 20), 0),
        ((150, 150), 4),
        ((317, 327), 8),
        ((112, 50), None),  # gap between columns
        ((5, 50), None),
        ((400, 50), None),
    ],
)
def test_cell_at(pos: tuple[int, int], expected: int | None) -> None:
    assert cell_at(pos, (10, 20), 100, 4) == expected


def test_cell_at_round_trips_tile_rect() -> None:
    for index in range(9):
        x, y, w, h = tile_rect(index, (0, 0), 80, 6)
        assert cell_at((x + w // 2, y + h // 2), (0, 0), 80, 6) == index


def test_padded_slices_overlap_and_stay_on_canvas() -> None:
    slices = tile_slices(100, pad=1)
    assert slices[0] == (0, 0, 101, 101)
    assert slices[4] == (99, 99, 102, 102)
    assert slices[8] == (199, 199, 101, 101)
    for x, y, w, h in slices:
        assert x >= 0 and y >= 0
        assert x + w <= 300 and y + h <= 300
