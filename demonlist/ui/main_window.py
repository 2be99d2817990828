from __future__ import annotations

import html
import logging
from typing import Optional, Type

from PySide6.QtCore import Qt, QTimer
from PySide6.QtWidgets import (
    QFrame,
    QHBoxLayout,
    QLabel,
    QLayout,
    QLineEdit,
    QMainWindow,
    QScrollArea,
    QStackedWidget,
    QVBoxLayout,
    QWidget,
)

from demonlist.core.content import ContentRepository
from demonlist.core.rules import ScoreFunction
from demonlist.core.score import score as default_score
from demonlist.core.session import ListSession, load_session
from demonlist.ui.colors import ListColors, palette
from demonlist.ui.level_rows import LevelListWidget
from demonlist.ui.models import (
    LIST_REQUIREMENTS,
    LevelDetails,
    build_details,
    build_editor_rows,
    build_rows,
)

logger = logging.getLogger(__name__)

ROLE_GLYPHS = {
    "crown": "👑",
    "user-gear": "⚙",
    "user-shield": "🛡",
    "code": "⌨",
    "user-lock": "🔒",
}


def _clear_layout(layout: QLayout) -> None:
    while layout.count():
        item = layout.takeAt(0)
        w = item.widget()
        if w is not None:
            w.setParent(None)
            w.deleteLater()
        elif item.layout() is not None:
            _clear_layout(item.layout())
            item.layout().deleteLater()


def _link(text: str, url: Optional[str]) -> str:
    if not url:
        return html.escape(text)
    return f'<a href="{html.escape(url, quote=True)}">{html.escape(text)}</a>'


class MainWindow(QMainWindow):
    """The list page: search, ranked rows, selection details and the meta column.

    A loading screen is shown until the one-time content load finishes; after
    that every user action updates the session and re-renders from it.
    """

    def __init__(
        self,
        content: ContentRepository,
        *,
        dark: bool = False,
        score: ScoreFunction = default_score,
    ) -> None:
        super().__init__()
        self._content = content
        self._score = score
        self._colors: Type[ListColors] = palette(dark)
        self._session: Optional[ListSession] = None

        self._stack: Optional[QStackedWidget] = None
        self._loading_screen: Optional[QWidget] = None
        self._list_screen: Optional[QWidget] = None
        self._search_input: Optional[QLineEdit] = None
        self._level_list: Optional[LevelListWidget] = None
        self._details_layout: Optional[QVBoxLayout] = None
        self._meta_layout: Optional[QVBoxLayout] = None

        self._build_ui()
        QTimer.singleShot(0, self._load)

    @property
    def session(self) -> Optional[ListSession]:
        return self._session

    def _build_ui(self) -> None:
        """Construct the loading screen and the three-column list page."""
        c = self._colors
        self.setWindowTitle("Demonlist")
        self.setMinimumSize(1100, 720)
        self.setStyleSheet(
            f"""
            QMainWindow {{ background: {c.BG}; }}
            QLabel {{ color: {c.TEXT_PRIMARY}; }}
            QLineEdit#searchInput {{
                background: {c.SURFACE};
                color: {c.TEXT_PRIMARY};
                border: 1px solid {c.BORDER};
                border-radius: 8px;
                padding: 8px 12px;
                font-size: 14px;
            }}
            QLabel#errorText {{ color: {c.ERROR}; }}
            QLabel#sectionTitle {{ font-size: 18px; font-weight: 800; }}
            """
        )

        self._stack = QStackedWidget()
        self.setCentralWidget(self._stack)

        self._loading_screen = QLabel("Loading…")
        self._loading_screen.setAlignment(Qt.AlignCenter)
        self._loading_screen.setStyleSheet(f"color: {c.TEXT_MUTED}; font-size: 18px;")
        self._stack.addWidget(self._loading_screen)

        self._list_screen = QWidget()
        columns = QHBoxLayout(self._list_screen)
        columns.setContentsMargins(16, 16, 16, 16)
        columns.setSpacing(24)

        list_column = QVBoxLayout()
        list_column.setSpacing(10)
        self._search_input = QLineEdit()
        self._search_input.setObjectName("searchInput")
        self._search_input.setPlaceholderText("Search levels...")
        self._search_input.textChanged.connect(self._on_query_changed)
        list_column.addWidget(self._search_input)
        self._level_list = LevelListWidget(colors=c, on_select=self._on_row_selected)
        list_column.addWidget(self._level_list, 1)
        columns.addLayout(list_column, 3)

        self._details_layout = self._scroll_column(columns, stretch=4)
        self._meta_layout = self._scroll_column(columns, stretch=3)

        self._stack.addWidget(self._list_screen)
        self._stack.setCurrentWidget(self._loading_screen)

    def _scroll_column(self, parent: QHBoxLayout, stretch: int) -> QVBoxLayout:
        scroll = QScrollArea()
        scroll.setWidgetResizable(True)
        scroll.setFrameShape(QFrame.NoFrame)
        container = QWidget()
        layout = QVBoxLayout(container)
        layout.setContentsMargins(4, 4, 4, 4)
        layout.setSpacing(8)
        scroll.setWidget(container)
        parent.addWidget(scroll, stretch)
        return layout

    def _load(self) -> None:
        self._session = load_session(self._content)
        logger.info(
            "List page ready: %d entries, %d error(s)",
            len(self._session.slots),
            len(self._session.errors),
        )
        if not self._session.list_loaded and self._search_input is not None:
            self._search_input.setEnabled(False)
        self._render()
        if self._stack is not None and self._list_screen is not None:
            self._stack.setCurrentWidget(self._list_screen)

    def _on_query_changed(self, text: str) -> None:
        if self._session is None:
            return
        self._session.set_query(text)
        self._render()

    def _on_row_selected(self, index: int) -> None:
        if self._session is None:
            return
        self._session.select(index)
        self._render()

    def _render(self) -> None:
        """Re-derive every panel from the session; nothing is cached between renders."""
        if self._session is None:
            return
        if self._level_list is not None:
            self._level_list.setVisible(self._session.list_loaded)
            if self._session.list_loaded:
                self._level_list.set_rows(build_rows(self._session))
        self._render_details()
        self._render_meta()

    def _render_details(self) -> None:
        if self._details_layout is None or self._session is None:
            return
        _clear_layout(self._details_layout)
        details = build_details(self._session, score=self._score)
        if details is not None:
            self._add_details(details)
        self._details_layout.addStretch(1)

    def _add_details(self, details: LevelDetails) -> None:
        layout = self._details_layout
        c = self._colors

        title = QLabel(details.name)
        title.setStyleSheet("font-size: 28px; font-weight: 900;")
        title.setWordWrap(True)
        layout.addWidget(title)

        layout.addWidget(self._authors_label(details))

        if details.video:
            video = QLabel(_link("Watch video", details.video))
            video.setOpenExternalLinks(True)
            layout.addWidget(video)

        stats = QHBoxLayout()
        stats.setSpacing(24)
        for header, value in (
            ("Points when completed", f"{details.points:g}"),
            ("ID", details.level_id),
            ("Password", details.password),
        ):
            cell = QLabel(
                f'<div style="color:{c.TEXT_SECONDARY}; font-size:12px;">{html.escape(header)}</div>'
                f'<div style="font-size:16px;">{html.escape(value)}</div>'
            )
            cell.setTextInteractionFlags(Qt.TextSelectableByMouse)
            stats.addWidget(cell)
        stats.addStretch(1)
        layout.addLayout(stats)

        records_title = QLabel("Records")
        records_title.setObjectName("sectionTitle")
        layout.addWidget(records_title)
        layout.addWidget(QLabel(details.qualification))

        for record in details.records:
            row = QLabel(
                f"<b>{record.percent}%</b>&nbsp;&nbsp;{_link(record.user, record.link)}"
                + ("&nbsp;&nbsp;📱" if record.mobile else "")
            )
            row.setOpenExternalLinks(True)
            layout.addWidget(row)

    def _authors_label(self, details: LevelDetails) -> QLabel:
        if details.creators:
            creators = ", ".join(details.creators)
            text = f"Creators: {creators} · Verifier: {details.verifier}"
        elif details.author == details.verifier:
            text = f"Creator & Verifier: {details.author}"
        else:
            text = f"Creator: {details.author} · Verifier: {details.verifier}"
        label = QLabel(text)
        label.setWordWrap(True)
        label.setStyleSheet(f"color: {self._colors.TEXT_SECONDARY};")
        return label

    def _render_meta(self) -> None:
        if self._meta_layout is None or self._session is None:
            return
        layout = self._meta_layout
        _clear_layout(layout)

        for message in self._session.errors:
            error = QLabel(message)
            error.setObjectName("errorText")
            error.setWordWrap(True)
            layout.addWidget(error)

        editor_rows = build_editor_rows(self._session.editors)
        if editor_rows is not None:
            heading = QLabel("List Editors")
            heading.setObjectName("sectionTitle")
            layout.addWidget(heading)
            for editor in editor_rows:
                glyph = ROLE_GLYPHS[editor.icon]
                label = QLabel(f"{glyph}&nbsp;&nbsp;{_link(editor.name, editor.link)}")
                label.setToolTip(editor.role.value)
                label.setOpenExternalLinks(True)
                layout.addWidget(label)

        heading = QLabel("List Requirements")
        heading.setObjectName("sectionTitle")
        layout.addWidget(heading)
        for requirement in LIST_REQUIREMENTS:
            text = QLabel(requirement)
            text.setWordWrap(True)
            layout.addWidget(text)
        layout.addStretch(1)
