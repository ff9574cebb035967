"""Status line framing from the human player's point of view."""

from __future__ import annotations

from connect_four.core.models import GameStatus, Owner

YOUR_TURN = "turn: You"
CPU_TURN = "turn: CPU"
YOU_WIN = "You Win!!"
YOU_LOSE = "You Lose..."
DRAW = "Draw"


def status_text(turn_parity: int, status: GameStatus) -> str:
    """Return the status line for ``turn_parity`` and ``status``.

    After a winning move the turn counter has already moved on, so an odd
    parity means the human made the last move.
    """
    human_to_move = turn_parity % 2 == 0
    if status is GameStatus.ONGOING:
        return YOUR_TURN if human_to_move else CPU_TURN
    if status is GameStatus.LAST_PLAYER_WIN:
        return YOU_LOSE if human_to_move else YOU_WIN
    return DRAW


def active_owner(turn_parity: int) -> Owner:
    """Return whose indicator color to show next to an ongoing status."""
    return Owner.FIRST if turn_parity % 2 == 0 else Owner.SECOND
