"""List column UI: LevelRowButton and LevelListWidget."""

from __future__ import annotations

from typing import Callable, List, Optional, Type

from PySide6.QtCore import Qt
from PySide6.QtWidgets import (
    QFrame,
    QHBoxLayout,
    QLabel,
    QPushButton,
    QScrollArea,
    QVBoxLayout,
    QWidget,
)

from demonlist.ui.colors import ListColors, row_colors
from demonlist.ui.models import NO_MATCHES_TEXT, LevelRow


class LevelRowButton(QWidget):
    """A rank label next to a clickable level name."""

    def __init__(
        self,
        row: LevelRow,
        *,
        colors: Type[ListColors],
        on_click: Callable[[int], None],
        parent: Optional[QWidget] = None,
    ) -> None:
        super().__init__(parent)
        self._row = row
        self._colors = colors

        self._rank = QLabel(row.rank_label)
        self._rank.setObjectName("levelRowRank")
        self._rank.setFixedWidth(64)
        self._rank.setAlignment(Qt.AlignRight | Qt.AlignVCenter)

        self._button = QPushButton(row.title)
        self._button.setObjectName("levelRowButton")
        self._button.setCursor(Qt.PointingHandCursor)
        self._button.clicked.connect(lambda: on_click(row.index))

        layout = QHBoxLayout(self)
        layout.setContentsMargins(0, 0, 0, 0)
        layout.setSpacing(12)
        layout.addWidget(self._rank, 0)
        layout.addWidget(self._button, 1)

        self._apply_styles()

    def _apply_styles(self) -> None:
        c = self._colors
        fill, hover, text = row_colors(c, error=self._row.error, active=self._row.active)
        self.setStyleSheet(
            f"""
            QLabel#levelRowRank {{
                color: {c.TEXT_SECONDARY};
                font-weight: 700;
                font-size: 14px;
            }}
            QPushButton#levelRowButton {{
                background: {fill};
                color: {text};
                border: 1px solid {c.BORDER};
                border-radius: 8px;
                padding: 10px 14px;
                text-align: left;
                font-weight: 700;
                font-size: 14px;
            }}
            QPushButton#levelRowButton:hover {{
                background: {hover};
            }}
            """
        )


class LevelListWidget(QScrollArea):
    """Scrollable column of level rows, rebuilt whenever the view changes."""

    def __init__(
        self,
        *,
        colors: Type[ListColors],
        on_select: Callable[[int], None],
        parent: Optional[QWidget] = None,
    ) -> None:
        super().__init__(parent)
        self._colors = colors
        self._on_select = on_select
        self.setWidgetResizable(True)
        self.setFrameShape(QFrame.NoFrame)

        self._container = QWidget()
        self._layout = QVBoxLayout(self._container)
        self._layout.setContentsMargins(4, 4, 4, 4)
        self._layout.setSpacing(6)
        self.setWidget(self._container)

    def set_rows(self, rows: List[LevelRow]) -> None:
        # Rows may be replaced from inside their own click handler, so they
        # stay parented until Qt deletes them.
        while self._layout.count():
            item = self._layout.takeAt(0)
            w = item.widget()
            if w is not None:
                w.hide()
                w.deleteLater()

        if not rows:
            empty = QLabel(NO_MATCHES_TEXT)
            empty.setStyleSheet(f"color: {self._colors.TEXT_MUTED}; font-size: 14px;")
            self._layout.addWidget(empty)
        for row in rows:
            self._layout.addWidget(LevelRowButton(row, colors=self._colors, on_click=self._on_select))
        self._layout.addStretch(1)
