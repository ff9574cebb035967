"""Uniform random move strategy."""

from __future__ import annotations

import random
from collections.abc import Sequence

from connect_four.ai.strategy import MoveStrategy
from connect_four.core.models import Coord, GameState


class RandomStrategy(MoveStrategy):
    name = "random"

    def __init__(self, rng: random.Random) -> None:
        self._rng = rng

    def choose_move(self, state: GameState, legal: Sequence[Coord]) -> Coord:
        if not legal:
            raise ValueError("no legal moves to choose from")
        return self._rng.choice(list(legal))
