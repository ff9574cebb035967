"""Session controller: owns the visible game state and paces the opponent."""

from __future__ import annotations

import logging
import random
from collections.abc import Callable

from connect_four.app.events import PointerPressed
from connect_four.app.pacing import RevealPacing
from connect_four.app.ports import GameEngine, TaskScheduler
from connect_four.app.status import status_text
from connect_four.core.errors import GameEngineError
from connect_four.core.models import AutomatedMove, GameState, GameStatus, HumanMove
from connect_four.ui.board_renderer import render_board, render_legal_overlay
from connect_four.ui.input_mapper import map_point_to_cell
from connect_four.ui.surface import RenderSurface

logger = logging.getLogger(__name__)

StateListener = Callable[[GameState], None]

# Bounded set of failures treated as "engine unavailable" during bootstrap.
ENGINE_BOOTSTRAP_ERRORS: tuple[type[BaseException], ...] = (
    GameEngineError,
    RuntimeError,
    OSError,
    ValueError,
    TypeError,
    AttributeError,
    ImportError,
)


class SessionController:
    """Single-session state machine between pointer input, engine, and renderer.

    The current state is replaced, never mutated. The automated reply is
    computed as soon as the human move lands but only committed after the
    reveal delay; until then the old state keeps odd parity, so human input is
    rejected by the ordinary precondition checks.
    """

    def __init__(
        self,
        engine: GameEngine,
        scheduler: TaskScheduler,
        *,
        rng: random.Random | None = None,
        pacing: RevealPacing | None = None,
        surface: RenderSurface | None = None,
        on_state_changed: StateListener | None = None,
    ) -> None:
        self._engine = engine
        self._scheduler = scheduler
        self._rng = rng or random.Random()
        self._pacing = pacing or RevealPacing()
        self._surface = surface
        self._on_state_changed = on_state_changed

        self._state: GameState | None = None
        self._session_id = 1
        self._live = True
        self._pending_task_id: int | None = None

    @property
    def current_state(self) -> GameState | None:
        return self._state

    @property
    def is_initialized(self) -> bool:
        return self._state is not None

    @property
    def is_live(self) -> bool:
        return self._live

    @property
    def session_id(self) -> int:
        return self._session_id

    @property
    def has_pending_reveal(self) -> bool:
        return self._pending_task_id is not None

    def bind_surface(self, surface: RenderSurface) -> None:
        """Attach the surface to draw on and resolve pointer input against."""
        self._surface = surface
        self.render()

    def set_state_listener(self, listener: StateListener | None) -> None:
        self._on_state_changed = listener

    def status_text(self) -> str:
        if self._state is None:
            return ""
        return status_text(self._state.turn_parity, self._state.status)

    def initialize(self) -> bool:
        """Load the initial state from the engine and render it."""
        if self._state is not None:
            logger.warning("session_already_initialized session=%d", self._session_id)
            return True
        try:
            state = self._engine.initial_state()
        except ENGINE_BOOTSTRAP_ERRORS:
            logger.exception("engine_bootstrap_failed session=%d", self._session_id)
            return False
        logger.info(
            "session_initialized session=%d rows=%d cols=%d",
            self._session_id,
            state.rows,
            state.cols,
        )
        self._commit(state)
        return True

    def handle_pointer_input(self, event: PointerPressed) -> bool:
        """Apply a human move for the clicked cell; return whether state changed."""
        state = self._state
        if state is None or not self._live or self._surface is None:
            return False
        if state.status is not GameStatus.ONGOING or not state.is_human_turn:
            logger.debug("pointer_ignored reason=not_human_turn turn=%d status=%s", state.turn, state.status.value)
            return False
        coord = map_point_to_cell(self._surface.display_rect(), state.board, event.x, event.y)
        if coord is None:
            logger.debug("pointer_ignored reason=outside_board x=%.1f y=%.1f", event.x, event.y)
            return False
        if coord not in self._engine.legal_actions(state):
            logger.debug("pointer_ignored reason=illegal row=%d col=%d", coord.row, coord.col)
            return False
        next_state = self._engine.apply(state, HumanMove(coord))
        logger.info(
            "human_move session=%d turn=%d row=%d col=%d status=%s",
            self._session_id,
            state.turn,
            coord.row,
            coord.col,
            next_state.status.value,
        )
        self._commit(next_state)
        if next_state.status is GameStatus.ONGOING:
            self.schedule_automated_turn(next_state)
        return True

    def schedule_automated_turn(self, state: GameState) -> None:
        """Compute the automated reply now and commit it after the reveal delay."""
        if state.status is not GameStatus.ONGOING:
            return
        if self._pending_task_id is not None:
            logger.warning("automated_turn_already_pending session=%d", self._session_id)
            return
        result = self._engine.apply(state, AutomatedMove())
        delay_seconds = self._pacing.delay_seconds(self._rng)
        session_id = self._session_id
        self._pending_task_id = self._scheduler.call_later(
            delay_seconds,
            lambda: self._commit_automated(session_id, result),
        )
        logger.debug(
            "automated_turn_scheduled session=%d turn=%d delay_ms=%.0f",
            session_id,
            state.turn,
            delay_seconds * 1000.0,
        )

    def render(self) -> None:
        """Draw the current state and notify the state listener."""
        state = self._state
        if state is None:
            return
        if self._surface is not None:
            render_board(self._surface, state.board)
            if state.status is GameStatus.ONGOING:
                render_legal_overlay(self._surface, state.board, self._engine.legal_actions(state))
        if self._on_state_changed is not None:
            self._on_state_changed(state)

    def close(self) -> None:
        """Tear the session down; a reveal still in flight is dropped."""
        if not self._live:
            return
        self._live = False
        if self._pending_task_id is not None:
            self._scheduler.cancel(self._pending_task_id)
            self._pending_task_id = None
        logger.info("session_closed session=%d", self._session_id)

    def restart(self) -> bool:
        """Close the current session and start a fresh one."""
        self.close()
        self._session_id += 1
        self._live = True
        self._state = None
        return self.initialize()

    def _commit_automated(self, session_id: int, result: GameState) -> None:
        if not self._live or session_id != self._session_id:
            logger.debug("stale_reveal_dropped session=%d current=%d", session_id, self._session_id)
            return
        self._pending_task_id = None
        logger.info(
            "automated_move_revealed session=%d turn=%d status=%s",
            session_id,
            result.turn,
            result.status.value,
        )
        self._commit(result)

    def _commit(self, state: GameState) -> None:
        self._state = state
        self.render()
