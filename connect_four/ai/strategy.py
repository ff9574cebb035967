"""Automated opponent strategy contract."""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Sequence

from connect_four.core.models import Coord, GameState


class MoveStrategy(ABC):
    """Picks the automated player's landing cell.

    Implementations must return a member of ``legal``; the engine rejects
    anything else with ``IllegalMoveError``.
    """

    name: str = "strategy"

    @abstractmethod
    def choose_move(self, state: GameState, legal: Sequence[Coord]) -> Coord:
        """Return the next landing cell for the player to move in ``state``."""
