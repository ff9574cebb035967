from __future__ import annotations

from connect_four.core.models import Coord, Owner, empty_board, place
from connect_four.ui.board_renderer import LEGAL_COLOR, OWNER_COLORS, render_board, render_legal_overlay
from connect_four.ui.geometry import Rect
from tests.connect_four.unit.helpers import RecordingSurface


def test_render_board_clears_every_cell_and_draws_pieces() -> None:
    board = place(place(empty_board(2, 2), Coord(1, 0), Owner.FIRST), Coord(1, 1), Owner.SECOND)
    surface = RecordingSurface(200, 100)

    render_board(surface, board)

    assert surface.ctx.ops == [
        ("clear", Rect(0.0, 0.0, 100.0, 50.0)),
        ("clear", Rect(100.0, 0.0, 100.0, 50.0)),
        ("clear", Rect(0.0, 50.0, 100.0, 50.0)),
        ("ellipse", Rect(0.0, 50.0, 100.0, 50.0), OWNER_COLORS[Owner.FIRST]),
        ("clear", Rect(100.0, 50.0, 100.0, 50.0)),
        ("ellipse", Rect(100.0, 50.0, 100.0, 50.0), OWNER_COLORS[Owner.SECOND]),
    ]


def test_render_uses_intrinsic_size_not_display_rect() -> None:
    surface = RecordingSurface(700, 600, display=Rect(0.0, 0.0, 350.0, 300.0))
    render_board(surface, empty_board(6, 7))
    assert surface.ctx.ops[0] == ("clear", Rect(0.0, 0.0, 100.0, 100.0))


def test_legal_overlay_draws_without_clearing() -> None:
    surface = RecordingSurface(700, 600)
    render_legal_overlay(surface, empty_board(6, 7), [Coord(5, 0), Coord(5, 6)])
    assert surface.ctx.ops == [
        ("ellipse", Rect(0.0, 500.0, 100.0, 100.0), LEGAL_COLOR),
        ("ellipse", Rect(600.0, 500.0, 100.0, 100.0), LEGAL_COLOR),
    ]


def test_jagged_board_renders_per_row_widths() -> None:
    board = ((None,) * 4, (None,) * 5)
    surface = RecordingSurface(400, 200)
    render_board(surface, board)
    widths = {op[1].y: op[1].w for op in surface.ctx.ops}
    assert widths == {0.0: 100.0, 100.0: 80.0}


def test_distinct_colors() -> None:
    assert len({OWNER_COLORS[Owner.FIRST], OWNER_COLORS[Owner.SECOND], LEGAL_COLOR}) == 3
