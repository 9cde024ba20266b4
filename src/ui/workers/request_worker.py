# ui/workers/request_worker.py
from __future__ import annotations

from typing import Any, Callable

from PySide6.QtCore import QObject, QThread, Signal, Slot


class RequestWorker(QThread):
    succeeded = Signal(object)  # client result
    failed = Signal(object)     # exception

    def __init__(self, call: Callable[[], Any], parent=None):
        super().__init__(parent)
        self.call = call

    def run(self):
        try:
            result = self.call()
        except Exception as e:
            self.failed.emit(e)
            return
        if self.isInterruptionRequested():
            return
        self.succeeded.emit(result)


class _Delivery(QObject):
    """Lives on the GUI thread so worker signals arrive through a queued connection."""

    def __init__(self, on_success, on_error, parent=None):
        super().__init__(parent)
        self.on_success = on_success
        self.on_error = on_error

    @Slot(object)
    def success(self, result):
        self.on_success(result)

    @Slot(object)
    def error(self, exc):
        self.on_error(exc)


class QtRequestRunner(QObject):
    """Runs each client call on its own QThread; no queueing, no cancellation."""

    def __init__(self, parent=None):
        super().__init__(parent)
        self._active: dict[RequestWorker, _Delivery] = {}

    def submit(self, call, on_success, on_error) -> None:
        worker = RequestWorker(call, self)
        delivery = _Delivery(on_success, on_error, self)

        worker.succeeded.connect(delivery.success)
        worker.failed.connect(delivery.error)
        worker.finished.connect(self._on_worker_finished)

        # keep a reference until the thread is done
        self._active[worker] = delivery
        worker.start()

    @Slot()
    def _on_worker_finished(self):
        worker = self.sender()
        delivery = self._active.pop(worker, None)
        if worker is not None:
            worker.deleteLater()
        if delivery is not None:
            delivery.deleteLater()

    def shutdown(self) -> None:
        # a client call cannot be aborted mid-request; block until every thread is done
        for worker in list(self._active):
            worker.requestInterruption()
            worker.quit()
        for worker in list(self._active):
            worker.wait()
