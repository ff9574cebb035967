"""Board and legal-move overlay drawing."""

from __future__ import annotations

from collections.abc import Iterable

from connect_four.core.models import Board, Coord, Owner
from connect_four.ui.geometry import BoardGeometry
from connect_four.ui.surface import RenderSurface

OWNER_COLORS: dict[Owner, str] = {
    Owner.FIRST: "#ffe0c1",
    Owner.SECOND: "#c1e0ff",
}
LEGAL_COLOR = "#efefef"


def render_board(surface: RenderSurface, board: Board) -> None:
    """Clear every cell and draw the pieces that occupy it."""
    ctx = surface.context()
    geometry = BoardGeometry.for_board(board, surface.height, surface.width)
    for coord, rect in geometry.cells():
        ctx.clear_rect(rect)
        owner = board[coord.row][coord.col]
        if owner is not None:
            ctx.fill_ellipse(rect, OWNER_COLORS[owner])


def render_legal_overlay(surface: RenderSurface, board: Board, legal_actions: Iterable[Coord]) -> None:
    """Mark legal landing cells on top of an already rendered board.

    Only meaningful while the game is ongoing; callers skip it otherwise.
    """
    ctx = surface.context()
    geometry = BoardGeometry.for_board(board, surface.height, surface.width)
    for coord in legal_actions:
        ctx.fill_ellipse(geometry.cell_rect(coord.row, coord.col), LEGAL_COLOR)
