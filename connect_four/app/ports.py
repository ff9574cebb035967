"""Collaborator contracts the session controller depends on."""

from __future__ import annotations

from collections.abc import Callable, Sequence
from typing import Protocol

from connect_four.core.models import Coord, GameState, MoveSpec

TaskCallback = Callable[[], None]


class GameEngine(Protocol):
    """Move enumeration and application.

    ``apply`` with an ``AutomatedMove`` lets the engine pick its own cell; the
    engine guarantees that cell is legal.
    """

    def initial_state(self) -> GameState: ...

    def legal_actions(self, state: GameState) -> Sequence[Coord]: ...

    def apply(self, state: GameState, move: MoveSpec) -> GameState: ...


class TaskScheduler(Protocol):
    """One-shot deferred callbacks with cancellation."""

    def call_later(self, delay_seconds: float, callback: TaskCallback) -> int: ...

    def cancel(self, task_id: int) -> None: ...
