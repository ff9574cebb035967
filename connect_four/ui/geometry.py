"""Per-row board geometry shared by rendering and hit-testing."""

from __future__ import annotations

from collections.abc import Iterator, Sequence
from dataclasses import dataclass

from connect_four.core.models import Coord


@dataclass(frozen=True, slots=True)
class Rect:
    """Simple axis-aligned rectangle."""

    x: float
    y: float
    w: float
    h: float


@dataclass(frozen=True, slots=True)
class BoardGeometry:
    """Cell rectangles for a board drawn into a ``width`` x ``height`` target.

    Row height divides the target by the total row count. Cell width divides it
    by the column count of that row only, so jagged boards get per-row widths.
    """

    height: float
    width: float
    row_widths: tuple[int, ...]

    @classmethod
    def for_board(cls, board: Sequence[Sequence[object]], height: float, width: float) -> BoardGeometry:
        return cls(height=float(height), width=float(width), row_widths=tuple(len(row) for row in board))

    @property
    def row_count(self) -> int:
        return len(self.row_widths)

    def cell_rect(self, row: int, col: int) -> Rect:
        """Return the target-space rectangle of cell ``(row, col)``."""
        w = self.width / self.row_widths[row]
        h = self.height / self.row_count
        return Rect(x=col * w, y=row * h, w=w, h=h)

    def cells(self) -> Iterator[tuple[Coord, Rect]]:
        """Yield every cell and its rectangle in row-major order."""
        for row, count in enumerate(self.row_widths):
            for col in range(count):
                yield Coord(row, col), self.cell_rect(row, col)

    def cell_at(self, px: float, py: float) -> Coord | None:
        """Return the first cell, row-major, whose span holds ``(px, py)``.

        A span is open at its left/top edge and closed at its right/bottom edge.
        Both edges come from the cell index (``k * size`` and ``(k + 1) * size``)
        so neighbouring cells share the exact same float boundary.
        """
        if not self.row_widths:
            return None
        row = _span_index(py, self.height / self.row_count, self.row_count)
        if row is None:
            return None
        count = self.row_widths[row]
        col = _span_index(px, self.width / count, count) if count else None
        if col is None:
            return None
        return Coord(row, col)


def _span_index(value: float, size: float, count: int) -> int | None:
    for index in range(count):
        if index * size < value <= (index + 1) * size:
            return index
    return None


def cell_rect(board: Sequence[Sequence[object]], row: int, col: int, height: float, width: float) -> Rect:
    """Return the rectangle of ``(row, col)`` for ``board`` inside ``width`` x ``height``."""
    return BoardGeometry.for_board(board, height, width).cell_rect(row, col)
