"""Input event model."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class PointerPressed:
    """Primary pointer press in client coordinates."""

    x: float
    y: float
