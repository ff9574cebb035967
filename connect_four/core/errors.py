"""Game engine error types."""

from __future__ import annotations


class GameEngineError(RuntimeError):
    """Base class for engine contract failures."""


class EngineUnavailableError(GameEngineError):
    """Engine could not be constructed or loaded."""


class TerminalStateError(GameEngineError):
    """A finished game was passed back into the engine."""


class IllegalMoveError(GameEngineError):
    """A move outside the legal action set was applied."""
