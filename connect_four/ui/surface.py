"""Rendering surface contracts consumed by the renderer and input mapper."""

from __future__ import annotations

from typing import Protocol

from connect_four.ui.geometry import Rect


class DrawingContext(Protocol):
    """Minimal raster drawing operations."""

    def clear_rect(self, rect: Rect) -> None:
        """Reset the pixels of ``rect`` to the background."""

    def fill_ellipse(self, rect: Rect, color: str) -> None:
        """Fill the ellipse inscribed in ``rect`` with ``color``."""


class RenderSurface(Protocol):
    """Raster surface with an intrinsic size and an on-screen rectangle."""

    @property
    def height(self) -> int:
        """Intrinsic pixel height."""

    @property
    def width(self) -> int:
        """Intrinsic pixel width."""

    def display_rect(self) -> Rect:
        """Return the on-screen bounding rectangle in client coordinates."""

    def context(self) -> DrawingContext:
        """Return a drawing context targeting the intrinsic pixels."""
