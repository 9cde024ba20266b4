# ui/scheduler.py
from __future__ import annotations

from typing import Callable

from PySide6.QtCore import QObject, QTimer


class QtTimerHandle:
    def __init__(self, timer: QTimer):
        self._timer = timer

    def cancel(self) -> None:
        self._timer.stop()
        self._timer.deleteLater()


class QtScheduler(QObject):
    """Single-shot QTimer per schedule() call; runs the action on the GUI thread."""

    def schedule(self, delay_ms: int, action: Callable[[], None]) -> QtTimerHandle:
        timer = QTimer(self)
        timer.setSingleShot(True)

        def fire():
            timer.deleteLater()
            action()

        timer.timeout.connect(fire)
        timer.start(max(0, int(delay_ms)))
        return QtTimerHandle(timer)
