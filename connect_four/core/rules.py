"""Reference Connect Four engine: gravity placement and line detection."""

from __future__ import annotations

import logging
import random

import numpy as np

from connect_four.ai.random_move import RandomStrategy
from connect_four.ai.strategy import MoveStrategy
from connect_four.core.errors import IllegalMoveError, TerminalStateError
from connect_four.core.models import (
    CONNECT_LENGTH,
    DEFAULT_COLS,
    DEFAULT_ROWS,
    AutomatedMove,
    Board,
    Coord,
    GameState,
    GameStatus,
    MoveSpec,
    Owner,
    empty_board,
    owner_for_turn,
    place,
)

logger = logging.getLogger(__name__)

EMPTY = 0
_OWNER_CODES: dict[Owner, int] = {Owner.FIRST: 1, Owner.SECOND: 2}
_DIRECTIONS: tuple[tuple[int, int], ...] = ((0, 1), (1, 0), (1, 1), (1, -1))


def owner_code(owner: Owner) -> int:
    """Return the grid code used for ``owner``."""
    return _OWNER_CODES[owner]


def to_grid(board: Board) -> np.ndarray:
    """Convert a rectangular board into an int8 grid (0 empty, 1 first, 2 second)."""
    widths = {len(row) for row in board}
    if len(widths) != 1:
        raise ValueError("Connect Four requires a rectangular board.")
    grid = np.zeros((len(board), widths.pop()), dtype=np.int8)
    for r, row in enumerate(board):
        for c, cell in enumerate(row):
            if cell is not None:
                grid[r, c] = _OWNER_CODES[cell]
    return grid


def landing_cells(grid: np.ndarray) -> list[Coord]:
    """Return the lowest empty cell of every non-full column, left to right."""
    cells: list[Coord] = []
    for col in range(grid.shape[1]):
        empties = np.flatnonzero(grid[:, col] == EMPTY)
        if empties.size:
            cells.append(Coord(row=int(empties[-1]), col=col))
    return cells


def connects(grid: np.ndarray, row: int, col: int, length: int = CONNECT_LENGTH) -> bool:
    """Return whether the piece at ``(row, col)`` completes a line of ``length``."""
    code = grid[row, col]
    if code == EMPTY:
        return False
    rows, cols = grid.shape
    for dr, dc in _DIRECTIONS:
        run = 1
        for sign in (1, -1):
            r = row + sign * dr
            c = col + sign * dc
            while 0 <= r < rows and 0 <= c < cols and grid[r, c] == code:
                run += 1
                r += sign * dr
                c += sign * dc
        if run >= length:
            return True
    return False


def advance(state: GameState, coord: Coord, *, length: int = CONNECT_LENGTH) -> GameState:
    """Place the active player's piece at ``coord`` and resolve the outcome."""
    board = place(state.board, coord, owner_for_turn(state.turn))
    grid = to_grid(board)
    if connects(grid, coord.row, coord.col, length):
        status = GameStatus.LAST_PLAYER_WIN
    elif not landing_cells(grid):
        status = GameStatus.DRAW
    else:
        status = GameStatus.ONGOING
    return GameState(board=board, turn=state.turn + 1, status=status, rows=state.rows, cols=state.cols)


class ConnectFourEngine:
    """Deterministic Connect Four engine over resolved landing cells."""

    def __init__(
        self,
        rows: int = DEFAULT_ROWS,
        cols: int = DEFAULT_COLS,
        strategy: MoveStrategy | None = None,
        *,
        connect_length: int = CONNECT_LENGTH,
    ) -> None:
        if rows <= 0 or cols <= 0:
            raise ValueError("rows and cols must be > 0")
        if connect_length <= 1:
            raise ValueError("connect_length must be > 1")
        self._rows = rows
        self._cols = cols
        self._connect_length = connect_length
        self._strategy = strategy if strategy is not None else RandomStrategy(random.Random())

    @property
    def strategy(self) -> MoveStrategy:
        return self._strategy

    def initial_state(self) -> GameState:
        return GameState(
            board=empty_board(self._rows, self._cols),
            turn=0,
            status=GameStatus.ONGOING,
            rows=self._rows,
            cols=self._cols,
        )

    def legal_actions(self, state: GameState) -> tuple[Coord, ...]:
        self._require_ongoing(state)
        return tuple(landing_cells(to_grid(state.board)))

    def apply(self, state: GameState, move: MoveSpec) -> GameState:
        legal = self.legal_actions(state)
        if isinstance(move, AutomatedMove):
            coord = self._strategy.choose_move(state, legal)
        else:
            coord = move.coord
        if coord not in legal:
            raise IllegalMoveError(f"({coord.row}, {coord.col}) is not a legal landing cell.")
        next_state = advance(state, coord, length=self._connect_length)
        logger.debug(
            "engine_move turn=%d row=%d col=%d status=%s automated=%s",
            state.turn,
            coord.row,
            coord.col,
            next_state.status.value,
            isinstance(move, AutomatedMove),
        )
        return next_state

    @staticmethod
    def _require_ongoing(state: GameState) -> None:
        if state.is_terminal:
            raise TerminalStateError(f"Game already finished ({state.status.value}).")
