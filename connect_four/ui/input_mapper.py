"""Pointer position to board cell mapping."""

from __future__ import annotations

from collections.abc import Sequence

from connect_four.core.models import Coord
from connect_four.ui.geometry import BoardGeometry, Rect


def map_point_to_cell(
    display_rect: Rect,
    board: Sequence[Sequence[object]],
    x: float,
    y: float,
) -> Coord | None:
    """Return the cell under client point ``(x, y)``, if any.

    Geometry is sized to the displayed rectangle, which can differ from the
    surface's intrinsic pixel size when the layout scales it. A point on an
    edge shared by two cells resolves to the earlier cell in row-major order.
    """
    local_x = x - display_rect.x
    local_y = y - display_rect.y
    geometry = BoardGeometry.for_board(board, display_rect.h, display_rect.w)
    return geometry.cell_at(local_x, local_y)
