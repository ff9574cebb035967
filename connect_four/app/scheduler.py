"""Manual-clock one-shot scheduler used for headless sessions and tests."""

from __future__ import annotations

from heapq import heappop, heappush

from connect_four.app.ports import TaskCallback


class Scheduler:
    """Holds deferred callbacks until its clock is moved past their due time.

    Ties on the due time run in scheduling order.
    """

    def __init__(self) -> None:
        self._clock = 0.0
        self._last_id = 0
        self._heap: list[tuple[float, int]] = []
        self._pending: dict[int, TaskCallback] = {}

    @property
    def now_seconds(self) -> float:
        return self._clock

    @property
    def queued_task_count(self) -> int:
        return len(self._pending)

    @property
    def next_due_seconds(self) -> float | None:
        """Due time of the earliest pending callback, if any."""
        self._discard_cancelled_head()
        return self._heap[0][0] if self._heap else None

    def is_pending(self, task_id: int) -> bool:
        return task_id in self._pending

    def call_later(self, delay_seconds: float, callback: TaskCallback) -> int:
        if delay_seconds < 0.0:
            raise ValueError("delay_seconds must be >= 0")
        self._last_id += 1
        self._pending[self._last_id] = callback
        heappush(self._heap, (self._clock + delay_seconds, self._last_id))
        return self._last_id

    def cancel(self, task_id: int) -> None:
        self._pending.pop(task_id, None)

    def advance(self, delta_seconds: float) -> int:
        """Move the clock forward by ``delta_seconds`` and run what fell due."""
        if delta_seconds < 0.0:
            raise ValueError("delta_seconds must be >= 0")
        return self.run_due(self._clock + delta_seconds)

    def run_due(self, now_seconds: float) -> int:
        """Set the clock to ``now_seconds`` and run due callbacks; return how many ran."""
        if now_seconds < self._clock:
            raise ValueError("now_seconds cannot move backwards")
        self._clock = now_seconds
        ran = 0
        while self._heap and self._heap[0][0] <= now_seconds:
            _, task_id = heappop(self._heap)
            callback = self._pending.pop(task_id, None)
            if callback is None:
                continue
            callback()
            ran += 1
        return ran

    def _discard_cancelled_head(self) -> None:
        while self._heap and self._heap[0][1] not in self._pending:
            heappop(self._heap)
