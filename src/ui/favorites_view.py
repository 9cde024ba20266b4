# ui/favorites_view.py
from __future__ import annotations

from PySide6.QtCore import Qt, Signal
from PySide6.QtWidgets import QWidget, QVBoxLayout

from core.render import NO_FAVORITES_MESSAGE, FavoritesView
from ui.results_view import clear_layout, plain_label, song_row_widget


class FavoritesPanel(QWidget):
    actionTriggered = Signal(object)  # ViewLyrics / RemoveFavorite

    def __init__(self, parent=None):
        super().__init__(parent)

        root = QVBoxLayout(self)
        root.setContentsMargins(0, 0, 0, 0)
        root.setSpacing(6)

        root.addWidget(plain_label("Favorites", bold=True))

        self.empty_label = plain_label(NO_FAVORITES_MESSAGE)
        self.empty_label.setObjectName("NoFavorites")
        root.addWidget(self.empty_label)

        self.list_widget = QWidget()
        self.list_layout = QVBoxLayout(self.list_widget)
        self.list_layout.setContentsMargins(0, 0, 0, 0)
        self.list_layout.setSpacing(4)
        self.list_layout.setAlignment(Qt.AlignmentFlag.AlignTop)
        root.addWidget(self.list_widget, 1)

    def show_view(self, view: FavoritesView):
        clear_layout(self.list_layout)
        self.empty_label.setVisible(view.empty)
        for row in view.rows:
            self.list_layout.addWidget(song_row_widget(row, self.actionTriggered.emit))
