from __future__ import annotations

import random

from connect_four.app.controller import SessionController
from connect_four.app.engine_factory import build_engine
from connect_four.app.pacing import RevealPacing
from connect_four.app.scheduler import Scheduler
from connect_four.core.models import GameStatus
from connect_four.infra.config import AppConfig
from tests.connect_four.unit.helpers import RecordingSurface, click


def _play_out(config: AppConfig, seed: int) -> SessionController:
    rng = random.Random(seed)
    scheduler = Scheduler()
    surface = RecordingSurface(*config.canvas_size)
    engine = build_engine(config, rng)
    controller = SessionController(
        engine,
        scheduler,
        rng=rng,
        pacing=RevealPacing(base_ms=config.reveal_base_ms, spread_ms=config.reveal_spread_ms),
        surface=surface,
    )
    assert controller.initialize() is True
    for _ in range(config.rows * config.cols):
        state = controller.current_state
        assert state is not None
        if state.status is not GameStatus.ONGOING:
            break
        assert state.is_human_turn
        landing = engine.legal_actions(state)[-1]
        assert click(controller, surface, landing) is True
        scheduler.advance(2.0)
    return controller


def test_game_against_random_opponent_runs_to_completion() -> None:
    controller = _play_out(AppConfig(ai="random"), seed=11)

    state = controller.current_state
    assert state is not None
    assert state.status is not GameStatus.ONGOING
    assert controller.has_pending_reveal is False
    pieces = sum(1 for row in state.board for cell in row if cell is not None)
    assert pieces == state.turn
    expected = {
        (GameStatus.LAST_PLAYER_WIN, 1): "You Win!!",
        (GameStatus.LAST_PLAYER_WIN, 0): "You Lose...",
        (GameStatus.DRAW, 0): "Draw",
        (GameStatus.DRAW, 1): "Draw",
    }
    assert controller.status_text() == expected[(state.status, state.turn_parity)]


def test_monte_carlo_opponent_stops_naive_column_stack() -> None:
    config = AppConfig(ai="montecarlo", ai_playouts=40, reveal_base_ms=0.0, reveal_spread_ms=0.0)
    controller = _play_out(config, seed=3)

    state = controller.current_state
    assert state is not None
    assert state.status is not GameStatus.ONGOING
    # A three-high stack in one column is always blocked, so no four-move win.
    assert state.turn > 7
