from __future__ import annotations
from dataclasses import dataclass
from PySide6.QtCore import QObject, Signal, Slot

@dataclass(frozen=True)
class Notify:
    message: str
    notify_type: str = "info"   # info/success/warn/error

class AppState(QObject):
    notification = Signal(object)   # emits Notify
    config_changed = Signal(object)  # emits db.models.Config

    def __init__(self):
        super().__init__()
        self.app_data_dir = None
        self.db_path = None
        self.db = None
        self.config = None

    @Slot(str, str)
    def notify(self, message: str, notify_type: str = "info"):
        self.notification.emit(Notify(message=message, notify_type=notify_type))
