from urllib.parse import urlparse

from PySide6.QtWidgets import (
    QDialog, QVBoxLayout, QFormLayout, QLineEdit, QSpinBox,
    QPushButton, QHBoxLayout, QMessageBox
)

from core.lyrics_client import DEFAULT_BASE_URL
from db.database import get_config, set_config
from db.models import Config


def is_valid_base_url(url: str) -> bool:
    parsed = urlparse((url or "").strip())
    return parsed.scheme in ("http", "https") and bool(parsed.netloc)


class SettingsDialog(QDialog):
    def __init__(self, app_state, parent=None):
        super().__init__(parent)
        self.setWindowTitle("Settings")
        self.resize(460, 180)
        self.app_state = app_state

        layout = QVBoxLayout(self)

        form = QFormLayout()
        self.base_url_edit = QLineEdit()
        self.base_url_edit.setPlaceholderText(DEFAULT_BASE_URL)
        form.addRow("Lyrics API", self.base_url_edit)

        self.debounce_spin = QSpinBox()
        self.debounce_spin.setRange(0, 5000)
        self.debounce_spin.setSingleStep(50)
        self.debounce_spin.setSuffix(" ms")
        form.addRow("Live search delay", self.debounce_spin)

        self.min_chars_spin = QSpinBox()
        self.min_chars_spin.setRange(1, 20)
        form.addRow("Live search min. characters", self.min_chars_spin)
        layout.addLayout(form)

        btn_layout = QHBoxLayout()
        self.reset_btn = QPushButton("Reset")
        self.save_btn = QPushButton("Save")
        btn_layout.addWidget(self.reset_btn)
        btn_layout.addStretch(1)
        btn_layout.addWidget(self.save_btn)
        layout.addLayout(btn_layout)

        # load existing config
        self._load(get_config(self.app_state.db))

        # connect
        self.reset_btn.clicked.connect(lambda: self._load(Config()))
        self.save_btn.clicked.connect(self.save)

    def _load(self, config: Config):
        self.base_url_edit.setText(config.api_base_url)
        self.debounce_spin.setValue(int(config.debounce_ms))
        self.min_chars_spin.setValue(int(config.min_live_chars))

    def save(self):
        base_url = self.base_url_edit.text().strip().rstrip("/")

        if not is_valid_base_url(base_url):
            QMessageBox.warning(
                self, "Invalid URL", "Please enter an http(s) URL for the lyrics API."
            )
            return

        config = Config(
            api_base_url=base_url,
            debounce_ms=self.debounce_spin.value(),
            min_live_chars=self.min_chars_spin.value(),
        )
        set_config(self.app_state.db, config)
        self.app_state.config = config
        self.app_state.config_changed.emit(config)
        self.accept()
