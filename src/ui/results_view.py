# ui/results_view.py
from __future__ import annotations

from PySide6.QtCore import Qt, Signal
from PySide6.QtGui import QFont
from PySide6.QtWidgets import (
    QWidget, QVBoxLayout, QHBoxLayout, QLabel, QPushButton,
    QScrollArea, QFrame, QLayout,
)

from core.render import (
    Button, Heading, LyricsBody, Message, ResultsView, SongList, SongRow,
)


def plain_label(text: str, bold: bool = False, wrap: bool = True) -> QLabel:
    # External text is always plain: no rich-text / HTML interpretation.
    lbl = QLabel()
    lbl.setTextFormat(Qt.TextFormat.PlainText)
    lbl.setText(text)
    lbl.setWordWrap(wrap)
    if bold:
        f = QFont(lbl.font())
        f.setBold(True)
        lbl.setFont(f)
    return lbl


def clear_layout(layout: QLayout) -> None:
    while layout.count():
        item = layout.takeAt(0)
        w = item.widget()
        if w is not None:
            w.hide()
            w.deleteLater()
        elif item.layout() is not None:
            clear_layout(item.layout())


def heading_widget(heading: Heading, large: bool = False) -> QWidget:
    w = QWidget()
    row = QHBoxLayout(w)
    row.setContentsMargins(0, 0, 0, 0)
    row.setSpacing(0)

    artist = plain_label(heading.artist, bold=True, wrap=False)
    title = plain_label(heading.suffix, wrap=False)
    if large:
        for lbl in (artist, title):
            f = QFont(lbl.font())
            f.setPointSize(f.pointSize() + 4)
            lbl.setFont(f)

    row.addWidget(artist)
    row.addWidget(title)
    row.addStretch(1)
    return w


def button_widget(b: Button, on_action) -> QPushButton:
    btn = QPushButton(b.label)
    btn.setObjectName("SmallButton" if b.small else "Button")
    btn.setCursor(Qt.CursorShape.PointingHandCursor)
    action = b.action
    btn.clicked.connect(lambda _checked=False, a=action: on_action(a))
    return btn


def song_row_widget(row: SongRow, on_action) -> QWidget:
    w = QFrame()
    w.setObjectName("SongRow")
    layout = QHBoxLayout(w)
    layout.setContentsMargins(8, 4, 8, 4)
    layout.addWidget(heading_widget(row.heading), 1)
    for b in row.buttons:
        layout.addWidget(button_widget(b, on_action))
    return w


class ResultsPanel(QWidget):
    """
    Applies a ResultsView to widgets. The body goes into a scroll area, the
    navigation buttons (Prev/Next) into their own row below it.
    """
    actionTriggered = Signal(object)  # core.render action

    def __init__(self, parent=None):
        super().__init__(parent)

        root = QVBoxLayout(self)
        root.setContentsMargins(0, 0, 0, 0)
        root.setSpacing(8)

        self.scroll = QScrollArea()
        self.scroll.setWidgetResizable(True)
        self.scroll.setFrameShape(QFrame.Shape.NoFrame)

        self.body = QWidget()
        self.body.setObjectName("ResultsBody")
        self.body_layout = QVBoxLayout(self.body)
        self.body_layout.setContentsMargins(8, 8, 8, 8)
        self.body_layout.setSpacing(6)
        self.body_layout.setAlignment(Qt.AlignmentFlag.AlignTop)
        self.scroll.setWidget(self.body)

        self.nav = QWidget()
        self.nav_layout = QHBoxLayout(self.nav)
        self.nav_layout.setContentsMargins(0, 0, 0, 0)
        self.nav_layout.setAlignment(Qt.AlignmentFlag.AlignHCenter)

        root.addWidget(self.scroll, 1)
        root.addWidget(self.nav)

    # -------------------------
    # External API
    # -------------------------
    def show_view(self, view: ResultsView):
        clear_layout(self.body_layout)
        clear_layout(self.nav_layout)

        for node in view.body:
            self.body_layout.addWidget(self._node_widget(node))

        for b in view.navigation:
            self.nav_layout.addWidget(self._button(b))

        self.nav.setVisible(bool(view.navigation))
        self.scroll.verticalScrollBar().setValue(0)

    # -------------------------
    # Helpers
    # -------------------------
    def _node_widget(self, node) -> QWidget:
        if isinstance(node, Message):
            return plain_label(node.text)
        if isinstance(node, Heading):
            return heading_widget(node, large=True)
        if isinstance(node, LyricsBody):
            # one label per line keeps empty lines as blank lines
            w = QWidget()
            col = QVBoxLayout(w)
            col.setContentsMargins(0, 8, 0, 8)
            col.setSpacing(2)
            for line in node.lines:
                lbl = plain_label(line)
                lbl.setTextInteractionFlags(Qt.TextInteractionFlag.TextSelectableByMouse)
                lbl.setMinimumHeight(lbl.fontMetrics().height())
                col.addWidget(lbl)
            return w
        if isinstance(node, SongList):
            w = QWidget()
            col = QVBoxLayout(w)
            col.setContentsMargins(0, 0, 0, 0)
            col.setSpacing(4)
            for row in node.rows:
                col.addWidget(self.song_row(row))
            return w
        if isinstance(node, Button):
            w = QWidget()
            row = QHBoxLayout(w)
            row.setContentsMargins(0, 8, 0, 0)
            row.addWidget(self._button(node))
            row.addStretch(1)
            return w
        raise TypeError(f"Unsupported display node: {node!r}")

    def song_row(self, row: SongRow) -> QWidget:
        return song_row_widget(row, self.actionTriggered.emit)

    def _button(self, b: Button) -> QPushButton:
        return button_widget(b, self.actionTriggered.emit)
