"""Engine and automated strategy construction from configuration."""

from __future__ import annotations

import random

from connect_four.ai.monte_carlo import MonteCarloStrategy
from connect_four.ai.random_move import RandomStrategy
from connect_four.ai.strategy import MoveStrategy
from connect_four.core.rules import ConnectFourEngine
from connect_four.infra.config import AppConfig


def build_strategy(name: str, rng: random.Random, playouts: int) -> MoveStrategy:
    """Construct the automated strategy selected by ``name``."""
    if name == "random":
        return RandomStrategy(rng)
    if name == "montecarlo":
        return MonteCarloStrategy(rng, playouts)
    raise ValueError(f"Unsupported strategy '{name}'.")


def build_engine(config: AppConfig, rng: random.Random) -> ConnectFourEngine:
    """Construct the reference engine for ``config``."""
    strategy = build_strategy(config.ai, rng, config.ai_playouts)
    return ConnectFourEngine(rows=config.rows, cols=config.cols, strategy=strategy)
