from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, field

from connect_four.ai.strategy import MoveStrategy
from connect_four.app.controller import SessionController
from connect_four.app.events import PointerPressed
from connect_four.core.errors import EngineUnavailableError
from connect_four.core.models import Coord, GameState, MoveSpec
from connect_four.core.rules import ConnectFourEngine
from connect_four.ui.geometry import Rect


class LeftmostStrategy(MoveStrategy):
    name = "leftmost"

    def choose_move(self, state: GameState, legal: Sequence[Coord]) -> Coord:
        return min(legal, key=lambda coord: coord.col)


@dataclass
class RecordingContext:
    ops: list[tuple[object, ...]] = field(default_factory=list)

    def clear_rect(self, rect: Rect) -> None:
        self.ops.append(("clear", rect))

    def fill_ellipse(self, rect: Rect, color: str) -> None:
        self.ops.append(("ellipse", rect, color))


class RecordingSurface:
    def __init__(self, width: int, height: int, display: Rect | None = None) -> None:
        self._width = width
        self._height = height
        self.display = display or Rect(0.0, 0.0, float(width), float(height))
        self.ctx = RecordingContext()

    @property
    def height(self) -> int:
        return self._height

    @property
    def width(self) -> int:
        return self._width

    def display_rect(self) -> Rect:
        return self.display

    def context(self) -> RecordingContext:
        return self.ctx


class RecordingEngine:
    """Wraps the reference engine and records every call."""

    def __init__(self, inner: ConnectFourEngine) -> None:
        self._inner = inner
        self.calls: list[tuple[str, GameState, object]] = []

    def initial_state(self) -> GameState:
        state = self._inner.initial_state()
        self.calls.append(("initial_state", state, None))
        return state

    def legal_actions(self, state: GameState) -> tuple[Coord, ...]:
        legal = self._inner.legal_actions(state)
        self.calls.append(("legal_actions", state, legal))
        return legal

    def apply(self, state: GameState, move: MoveSpec) -> GameState:
        self.calls.append(("apply", state, move))
        return self._inner.apply(state, move)

    def calls_named(self, name: str) -> list[tuple[str, GameState, object]]:
        return [call for call in self.calls if call[0] == name]


class UnavailableEngine:
    def initial_state(self) -> GameState:
        raise EngineUnavailableError("engine module failed to load")

    def legal_actions(self, state: GameState) -> tuple[Coord, ...]:
        raise AssertionError("must not be called")

    def apply(self, state: GameState, move: MoveSpec) -> GameState:
        raise AssertionError("must not be called")


def cell_center(surface: RecordingSurface, state: GameState, coord: Coord) -> PointerPressed:
    display = surface.display_rect()
    w = display.w / len(state.board[coord.row])
    h = display.h / len(state.board)
    return PointerPressed(x=display.x + (coord.col + 0.5) * w, y=display.y + (coord.row + 0.5) * h)


def click(controller: SessionController, surface: RecordingSurface, coord: Coord) -> bool:
    state = controller.current_state
    assert state is not None
    return controller.handle_pointer_input(cell_center(surface, state, coord))
