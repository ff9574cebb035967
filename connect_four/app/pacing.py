"""Reveal pacing for the automated opponent's reply."""

from __future__ import annotations

import random
from dataclasses import dataclass

DEFAULT_REVEAL_BASE_MS = 1000.0
DEFAULT_REVEAL_SPREAD_MS = 1000.0


@dataclass(frozen=True, slots=True)
class RevealPacing:
    """Delay before a computed automated move becomes visible.

    The delay is ``base + u1 * u2 * spread`` milliseconds with independent
    uniform draws, which skews it toward ``base``.
    """

    base_ms: float = DEFAULT_REVEAL_BASE_MS
    spread_ms: float = DEFAULT_REVEAL_SPREAD_MS

    def __post_init__(self) -> None:
        if self.base_ms < 0.0 or self.spread_ms < 0.0:
            raise ValueError("reveal pacing must be non-negative")

    def delay_ms(self, rng: random.Random) -> float:
        return self.base_ms + rng.random() * rng.random() * self.spread_ms

    def delay_seconds(self, rng: random.Random) -> float:
        return self.delay_ms(rng) / 1000.0
