from PySide6.QtWidgets import (
    QMainWindow, QWidget, QVBoxLayout, QLabel, QPushButton, QProgressBar,
    QMessageBox, QLineEdit, QHBoxLayout, QSplitter, QToolButton, QStyle
)
from PySide6.QtCore import Qt
from PySide6.QtGui import QShortcut, QKeySequence

from core.controller import SearchController
from core.favorites import FavoritesStore
from core.lyrics_client import LyricsOvhClient
from core.render import ResultsView, FavoritesView, SaveFavorite, render_placeholder
from db.database import SqliteStorage
from ui.dialogs.settings_dialog import SettingsDialog
from ui.favorites_view import FavoritesPanel
from ui.results_view import ResultsPanel
from ui.scheduler import QtScheduler
from ui.workers.request_worker import QtRequestRunner


class MainWindow(QMainWindow):
    def __init__(self, app_state):
        super().__init__()
        self.setWindowTitle("Lyrics Finder")
        self.resize(960, 640)
        self.app_state = app_state
        config = app_state.config

        self.central_widget = QWidget()
        self.setCentralWidget(self.central_widget)
        self.layout = QVBoxLayout(self.central_widget)

        # --- Top controls (search + settings) ---
        top_bar = QHBoxLayout()

        self.search_box = QLineEdit()
        self.search_box.setPlaceholderText("Enter artist or song name...")
        self.search_box.setClearButtonEnabled(True)
        top_bar.addWidget(self.search_box, stretch=1)

        self.btn_search = QPushButton("Search")
        top_bar.addWidget(self.btn_search)

        self.btn_config = QToolButton()
        self.btn_config.setIcon(self.style().standardIcon(QStyle.StandardPixmap.SP_FileDialogDetailedView))
        self.btn_config.setToolTip("Settings")
        self.btn_config.clicked.connect(self.open_config_modal)
        top_bar.addWidget(self.btn_config)

        self.layout.addLayout(top_bar)

        # --- Loading strip (hidden when idle) ---
        self.loading_row = QWidget()
        self.loading_row.setObjectName("LoadingRow")
        loading_layout = QHBoxLayout(self.loading_row)
        loading_layout.setContentsMargins(8, 4, 8, 4)
        loading_layout.setSpacing(10)

        self.loading_label = QLabel("Loading…")
        self.loading_label.setObjectName("LoadingLabel")
        self.loading_bar = QProgressBar()
        self.loading_bar.setObjectName("LoadingProgress")
        self.loading_bar.setTextVisible(False)
        self.loading_bar.setRange(0, 0)  # indeterminate

        loading_layout.addWidget(self.loading_label)
        loading_layout.addWidget(self.loading_bar, 1)
        self.layout.addWidget(self.loading_row)
        self.loading_row.setVisible(False)

        # --- Results | Favorites ---
        splitter = QSplitter(Qt.Orientation.Horizontal)

        self.results = ResultsPanel()
        splitter.addWidget(self.results)

        self.favorites_panel = FavoritesPanel()
        splitter.addWidget(self.favorites_panel)

        splitter.setStretchFactor(0, 3)
        splitter.setStretchFactor(1, 2)
        self.layout.addWidget(splitter, 1)

        # --- Controller ---
        self.client = LyricsOvhClient(base_url=config.api_base_url)
        self.favorites = FavoritesStore(SqliteStorage(app_state.db))
        self.runner = QtRequestRunner(self)
        self.scheduler = QtScheduler(self)
        self.controller = SearchController(
            client=self.client,
            favorites=self.favorites,
            view=self,
            runner=self.runner,
            scheduler=self.scheduler,
            debounce_ms=config.debounce_ms,
            min_live_chars=config.min_live_chars,
        )

        # --- Signals ---
        self.btn_search.clicked.connect(self._submit)
        self.search_box.returnPressed.connect(self._submit)
        self.search_box.textChanged.connect(self.controller.text_changed)
        self.results.actionTriggered.connect(self._on_action)
        self.favorites_panel.actionTriggered.connect(self._on_action)
        self.app_state.notification.connect(self._on_notify)
        self.app_state.config_changed.connect(self._on_config_changed)

        QShortcut(QKeySequence("Ctrl+L"), self, activated=self.search_box.setFocus)

        # initial state
        self.show_results(render_placeholder())
        self.controller.start()

        self.setStyleSheet(self.styleSheet() + """
            QWidget#LoadingRow {
                background: #020617;
                border-top: 1px solid #111827;
            }

            QLabel#LoadingLabel {
                color: #9ca3af;
                font-size: 11px;
            }

            QProgressBar#LoadingProgress {
                background: #0b1222;
                border: 1px solid #1f2937;
                border-radius: 999px;
                height: 10px;
            }

            QProgressBar#LoadingProgress::chunk {
                border-radius: 999px;
                background: #38bdf8;
            }

            QFrame#SongRow {
                border-bottom: 1px solid #1f2937;
            }

            QPushButton#SmallButton {
                padding: 2px 8px;
                font-size: 11px;
            }
            """)

    # ------------------ SearchView ------------------
    def show_results(self, view: ResultsView):
        self.results.show_view(view)

    def show_favorites(self, view: FavoritesView):
        self.favorites_panel.show_view(view)

    def set_loading(self, loading: bool):
        self.loading_row.setVisible(bool(loading))

    def warn(self, message: str):
        QMessageBox.warning(self, "Lyrics Finder", message)

    # ------------------ actions ------------------
    def _submit(self):
        self.controller.submit(self.search_box.text())

    def _on_action(self, action):
        if isinstance(action, SaveFavorite):
            if self.controller.save_favorite(action.artist, action.title):
                self.app_state.notify(f"Saved {action.artist} - {action.title}", "success")
            else:
                self.app_state.notify("Already in favorites.", "info")
            return
        self.controller.dispatch(action)

    # ------------------ modals ------------------
    def open_config_modal(self):
        dlg = SettingsDialog(self.app_state, self)
        dlg.exec()

    def _on_config_changed(self, config):
        self.client.base_url = config.api_base_url.rstrip("/")
        self.controller.set_debounce_ms(config.debounce_ms)
        self.controller.set_min_live_chars(config.min_live_chars)
        self.app_state.notify("Settings saved.", "success")

    # ------------------ notifications ------------------
    def _on_notify(self, n):
        # n is core.state.Notify
        msg = getattr(n, "message", "") or ""
        if not msg:
            return
        self.statusBar().showMessage(msg, 3000)

    def closeEvent(self, event):
        self.runner.shutdown()
        super().closeEvent(event)
