"""Contracts between the entry point and a concrete UI toolkit."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import Protocol


class FrontendWindow(Protocol):
    def show_windowed(self, width: int, height: int) -> None:
        """Show the game window at ``width`` x ``height``."""

    def sync_ui(self) -> None:
        """Refresh labels and repaint from the controller's current state."""


@dataclass(frozen=True, slots=True)
class FrontendBundle:
    """Window plus the hooks needed to run and stop the toolkit loop.

    ``run_event_loop`` blocks until the window closes and returns the exit code.
    ``shutdown`` drops any timers the frontend still owns.
    """

    window: FrontendWindow
    run_event_loop: Callable[[], int]
    shutdown: Callable[[], None]
