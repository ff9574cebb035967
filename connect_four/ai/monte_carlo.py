"""UCT Monte Carlo tree search over integer bitboards."""

from __future__ import annotations

import logging
import math
import random
from collections.abc import Sequence
from dataclasses import dataclass

from connect_four.ai.strategy import MoveStrategy
from connect_four.core.models import CONNECT_LENGTH, Board, Coord, GameState, owner_for_turn

logger = logging.getLogger(__name__)

DEFAULT_PLAYOUTS = 2000
EXPAND_THRESHOLD = 10
UCB_C = 1.0
_WIN = 1.0
_DRAW = 0.5
_LOSS = 0.0


@dataclass(frozen=True, slots=True)
class _Layout:
    """Bit layout: column ``c`` uses bits ``c*(rows+1)`` upward, plus one empty guard bit."""

    rows: int
    cols: int
    bottoms: tuple[int, ...]
    tops: tuple[int, ...]
    runs: tuple[tuple[int, ...], ...]

    @classmethod
    def build(cls, rows: int, cols: int, length: int) -> _Layout:
        stride = rows + 1
        runs = tuple(tuple(step * k for k in range(1, length)) for step in (1, stride, stride + 1, stride - 1))
        return cls(
            rows=rows,
            cols=cols,
            bottoms=tuple(c * stride for c in range(cols)),
            tops=tuple(c * stride + rows for c in range(cols)),
            runs=runs,
        )

    def connects(self, bits: int) -> bool:
        for steps in self.runs:
            line = bits
            for step in steps:
                line &= bits >> step
                if not line:
                    break
            else:
                return True
        return False


class _Position:
    """Side-to-move bitboard; ``current`` holds the stones of the player to move."""

    __slots__ = ("layout", "current", "mask", "heights")

    def __init__(self, layout: _Layout, current: int, mask: int, heights: list[int]) -> None:
        self.layout = layout
        self.current = current
        self.mask = mask
        self.heights = heights

    @classmethod
    def from_board(cls, layout: _Layout, board: Board, turn: int) -> _Position:
        to_move = owner_for_turn(turn)
        current = 0
        mask = 0
        heights = list(layout.bottoms)
        for col in range(layout.cols):
            for row in range(layout.rows - 1, -1, -1):
                owner = board[row][col]
                if owner is None:
                    break
                bit = 1 << heights[col]
                heights[col] += 1
                mask |= bit
                if owner is to_move:
                    current |= bit
        return cls(layout, current, mask, heights)

    def copy(self) -> _Position:
        return _Position(self.layout, self.current, self.mask, list(self.heights))

    def playable(self) -> list[int]:
        tops = self.layout.tops
        return [c for c in range(self.layout.cols) if self.heights[c] < tops[c]]

    def wins_with(self, col: int, *, opponent: bool = False) -> bool:
        stones = self.mask ^ self.current if opponent else self.current
        return self.layout.connects(stones | (1 << self.heights[col]))

    def play(self, col: int) -> bool:
        """Drop a stone for the side to move; return whether it connects."""
        bit = 1 << self.heights[col]
        self.heights[col] += 1
        mine = self.current | bit
        self.mask |= bit
        self.current = mine ^ self.mask
        return self.layout.connects(mine)


class _Node:
    __slots__ = ("position", "terminal", "wins", "visits", "children", "col")

    def __init__(self, position: _Position, col: int = -1, terminal: float | None = None) -> None:
        self.position = position
        self.col = col
        self.terminal = terminal
        self.wins = 0.0
        self.visits = 0
        self.children: list[_Node] = []

    def expand(self) -> None:
        for col in self.position.playable():
            child_position = self.position.copy()
            if child_position.play(col):
                terminal: float | None = _LOSS
            elif not child_position.playable():
                terminal = _DRAW
            else:
                terminal = None
            self.children.append(_Node(child_position, col, terminal))


class MonteCarloStrategy(MoveStrategy):
    """Plays an immediate win or block, otherwise runs UCT tree search.

    Node values are from the point of view of the player to move at that node.
    A leaf is scored by one random playout and expanded once it has been
    visited ``EXPAND_THRESHOLD`` times. The most visited root move is played.
    """

    name = "montecarlo"

    def __init__(
        self,
        rng: random.Random,
        playouts: int = DEFAULT_PLAYOUTS,
        *,
        connect_length: int = CONNECT_LENGTH,
    ) -> None:
        if playouts <= 0:
            raise ValueError("playouts must be > 0")
        self._rng = rng
        self._playouts = playouts
        self._connect_length = connect_length

    def choose_move(self, state: GameState, legal: Sequence[Coord]) -> Coord:
        if not legal:
            raise ValueError("no legal moves to choose from")
        by_col = {coord.col: coord for coord in legal}
        if len(by_col) == 1:
            return legal[0]
        layout = _Layout.build(state.rows, state.cols, self._connect_length)
        position = _Position.from_board(layout, state.board, state.turn)

        for opponent in (False, True):
            for col in by_col:
                if position.wins_with(col, opponent=opponent):
                    return by_col[col]

        root = _Node(position)
        root.expand()
        root.children = [child for child in root.children if child.col in by_col]
        for _ in range(self._playouts):
            self._evaluate(root)
        best = max(root.children, key=lambda child: child.visits)
        logger.debug(
            "mcts_choice col=%d visits=%d value=%.3f iterations=%d",
            best.col,
            best.visits,
            1.0 - best.wins / max(1, best.visits),
            self._playouts,
        )
        return by_col[best.col]

    def _evaluate(self, node: _Node) -> float:
        if node.terminal is not None:
            value = node.terminal
        elif not node.children:
            value = self._playout(node.position)
            if node.visits + 1 >= EXPAND_THRESHOLD:
                node.expand()
        else:
            value = 1.0 - self._evaluate(self._select(node))
        node.wins += value
        node.visits += 1
        return value

    @staticmethod
    def _select(node: _Node) -> _Node:
        for child in node.children:
            if child.visits == 0:
                return child
        log_total = 2.0 * math.log(sum(child.visits for child in node.children))
        return max(
            node.children,
            key=lambda child: 1.0 - child.wins / child.visits + UCB_C * math.sqrt(log_total / child.visits),
        )

    def _playout(self, position: _Position) -> float:
        layout = position.layout
        tops = layout.tops
        connects = layout.connects
        choice = self._rng.choice
        heights = list(position.heights)
        current = position.current
        mask = position.mask
        open_cols = [c for c in range(layout.cols) if heights[c] < tops[c]]
        ply = 0
        while open_cols:
            col = choice(open_cols)
            bit = 1 << heights[col]
            heights[col] += 1
            if heights[col] == tops[col]:
                open_cols.remove(col)
            mine = current | bit
            mask |= bit
            if connects(mine):
                return _WIN if ply % 2 == 0 else _LOSS
            current = mine ^ mask
            ply += 1
        return _DRAW
