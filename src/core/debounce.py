from __future__ import annotations

from typing import Callable, Optional, Protocol


class TimerHandle(Protocol):
    def cancel(self) -> None: ...


class Scheduler(Protocol):
    def schedule(self, delay_ms: int, action: Callable[[], None]) -> TimerHandle: ...


class Debouncer:
    """
    Runs the last triggered action once no new trigger arrived for `delay_ms`.

    Each trigger cancels the pending handle before scheduling again, so at most
    one trailing call happens per quiet period.
    """

    def __init__(self, scheduler: Scheduler, delay_ms: int):
        self.scheduler = scheduler
        self.delay_ms = int(delay_ms)
        self._pending: Optional[TimerHandle] = None

    @property
    def pending(self) -> bool:
        return self._pending is not None

    def trigger(self, action: Callable[[], None]) -> None:
        self.cancel()

        def fire():
            self._pending = None
            action()

        self._pending = self.scheduler.schedule(self.delay_ms, fire)

    def cancel(self) -> None:
        if self._pending is not None:
            self._pending.cancel()
            self._pending = None
