from __future__ import annotations

import pytest

from connect_four.core.models import Coord, empty_board
from connect_four.ui.geometry import Rect
from connect_four.ui.input_mapper import map_point_to_cell

BOARD = empty_board(6, 7)
JAGGED = ((None,) * 4, (None,) * 5)


def test_maps_point_inside_cell() -> None:
    display = Rect(0.0, 0.0, 700.0, 600.0)
    assert map_point_to_cell(display, BOARD, 350.0, 550.0) == Coord(5, 3)
    assert map_point_to_cell(display, BOARD, 1.0, 1.0) == Coord(0, 0)


def test_uses_display_rect_not_intrinsic_size() -> None:
    display = Rect(50.0, 20.0, 350.0, 300.0)
    assert map_point_to_cell(display, BOARD, 50.0 + 176.0, 20.0 + 151.0) == Coord(3, 3)
    assert map_point_to_cell(display, BOARD, 650.0, 550.0) is None


def test_point_outside_every_cell_maps_to_none() -> None:
    display = Rect(10.0, 10.0, 700.0, 600.0)
    assert map_point_to_cell(display, BOARD, 5.0, 100.0) is None
    assert map_point_to_cell(display, BOARD, 100.0, 700.0) is None
    assert map_point_to_cell(display, BOARD, 10.0, 10.0) is None


def test_shared_column_edge_belongs_to_earlier_cell() -> None:
    display = Rect(0.0, 0.0, 400.0, 200.0)
    assert map_point_to_cell(display, JAGGED, 100.0, 50.0) == Coord(0, 0)
    assert map_point_to_cell(display, JAGGED, 160.0, 150.0) == Coord(1, 1)


def test_shared_row_edge_belongs_to_earlier_row() -> None:
    display = Rect(0.0, 0.0, 400.0, 200.0)
    assert map_point_to_cell(display, JAGGED, 50.0, 100.0) == Coord(0, 0)


def test_jagged_rows_use_their_own_widths() -> None:
    display = Rect(10.0, 20.0, 400.0, 200.0)
    assert map_point_to_cell(display, JAGGED, 10.0 + 85.0, 20.0 + 50.0) == Coord(0, 0)
    assert map_point_to_cell(display, JAGGED, 10.0 + 85.0, 20.0 + 150.0) == Coord(1, 1)
    assert map_point_to_cell(display, JAGGED, 10.0 + 390.0, 20.0 + 150.0) == Coord(1, 4)


def test_mapping_is_idempotent() -> None:
    display = Rect(3.0, 7.0, 333.0, 211.0)
    results = {map_point_to_cell(display, BOARD, 123.4, 98.7) for _ in range(5)}
    assert len(results) == 1


@pytest.mark.parametrize("width", [10.0, 123.456, 333.0, 451.3, 700.0])
@pytest.mark.parametrize("cols", range(2, 12))
def test_shared_edges_resolve_for_fractional_cell_widths(cols: int, width: float) -> None:
    board = ((None,) * cols,)
    display = Rect(0.0, 0.0, width, 100.0)
    cell_w = width / cols
    for col in range(cols):
        assert map_point_to_cell(display, board, (col + 1) * cell_w, 50.0) == Coord(0, col)


@pytest.mark.parametrize("height", [7.0, 333.0, 451.3])
def test_shared_row_edges_resolve_for_fractional_cell_heights(height: float) -> None:
    rows = 9
    board = empty_board(rows, 2)
    display = Rect(0.0, 0.0, 20.0, height)
    cell_h = height / rows
    for row in range(rows):
        assert map_point_to_cell(display, board, 5.0, (row + 1) * cell_h) == Coord(row, 0)
