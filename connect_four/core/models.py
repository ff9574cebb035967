"""Core domain models shared by the engine, controller, and renderer."""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum
from typing import TypeAlias

DEFAULT_ROWS = 6
DEFAULT_COLS = 7
CONNECT_LENGTH = 4


class Owner(StrEnum):
    """Player that placed a piece."""

    FIRST = "First"
    SECOND = "Second"


class GameStatus(StrEnum):
    """Outcome of the most recent move."""

    ONGOING = "Ongoing"
    LAST_PLAYER_WIN = "LastPlayerWin"
    DRAW = "Draw"


Cell: TypeAlias = Owner | None
Row: TypeAlias = tuple[Cell, ...]
Board: TypeAlias = tuple[Row, ...]


@dataclass(frozen=True, slots=True)
class Coord:
    """Resolved landing cell."""

    row: int
    col: int


@dataclass(frozen=True, slots=True)
class HumanMove:
    """Move chosen by the local player."""

    coord: Coord


@dataclass(frozen=True, slots=True)
class AutomatedMove:
    """Move the engine selects on its own."""


MoveSpec: TypeAlias = HumanMove | AutomatedMove


@dataclass(frozen=True, slots=True)
class GameState:
    """Immutable snapshot of a session.

    ``turn`` counts the moves applied since the initial state. Even parity is
    the human's turn and odd parity the automated opponent's.
    """

    board: Board
    turn: int
    status: GameStatus
    rows: int
    cols: int

    @property
    def dimensions(self) -> tuple[int, int]:
        return self.rows, self.cols

    @property
    def turn_parity(self) -> int:
        return self.turn % 2

    @property
    def is_human_turn(self) -> bool:
        return self.turn_parity == 0

    @property
    def is_terminal(self) -> bool:
        return self.status is not GameStatus.ONGOING

    def cell(self, coord: Coord) -> Cell:
        """Return the owner at ``coord``."""
        return self.board[coord.row][coord.col]


def owner_for_turn(turn: int) -> Owner:
    """Return the player who moves on ``turn``."""
    return Owner.FIRST if turn % 2 == 0 else Owner.SECOND


def empty_board(rows: int, cols: int) -> Board:
    """Build an empty rectangular board."""
    if rows <= 0 or cols <= 0:
        raise ValueError("board dimensions must be positive")
    return tuple(tuple(None for _ in range(cols)) for _ in range(rows))


def place(board: Board, coord: Coord, owner: Owner) -> Board:
    """Return a copy of ``board`` with ``owner`` placed at ``coord``."""
    row = board[coord.row]
    updated = row[: coord.col] + (owner,) + row[coord.col + 1 :]
    return board[: coord.row] + (updated,) + board[coord.row + 1 :]
