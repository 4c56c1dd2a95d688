"""Preset list — the landing view.

One card per preset.  Clicking a card selects it; the pencil and bin
buttons edit or delete it.  The owning window decides what those
requests mean (confirmation, storage, switching views).
"""

from __future__ import annotations

from PyQt6.QtCore import Qt, pyqtSignal
from PyQt6.QtWidgets import (
    QWidget, QVBoxLayout, QHBoxLayout, QLabel, QPushButton,
    QFrame, QScrollArea,
)

from ..timer.schedule import Preset
from .formatting import preset_summary


class PresetCard(QFrame):
    clicked = pyqtSignal(str)
    edit_clicked = pyqtSignal(str)
    delete_clicked = pyqtSignal(str)

    def __init__(self, preset: Preset, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self.setObjectName("card")
        self.setCursor(Qt.CursorShape.PointingHandCursor)
        self._preset_id = preset.id

        row = QHBoxLayout(self)
        row.setContentsMargins(16, 12, 8, 12)

        info = QVBoxLayout()
        name = QLabel(preset.name, self)
        name.setObjectName("title")
        self._summary = QLabel(preset_summary(preset), self)
        self._summary.setObjectName("muted")
        info.addWidget(name)
        info.addWidget(self._summary)
        row.addLayout(info, 1)

        edit_btn = QPushButton("✎", self)
        edit_btn.setObjectName("iconButton")
        edit_btn.setToolTip("Edit preset")
        edit_btn.clicked.connect(lambda: self.edit_clicked.emit(self._preset_id))

        delete_btn = QPushButton("🗑", self)
        delete_btn.setObjectName("iconButton")
        delete_btn.setToolTip("Delete preset")
        delete_btn.clicked.connect(lambda: self.delete_clicked.emit(self._preset_id))

        row.addWidget(edit_btn)
        row.addWidget(delete_btn)

    @property
    def preset_id(self) -> str:
        return self._preset_id

    @property
    def summary_text(self) -> str:
        return self._summary.text()

    def mousePressEvent(self, event) -> None:  # type: ignore[override]
        if event.button() == Qt.MouseButton.LeftButton:
            self.clicked.emit(self._preset_id)
        super().mousePressEvent(event)


class PresetListWidget(QWidget):
    """Scrollable list of preset cards plus an "Add preset" button."""

    select_requested = pyqtSignal(str)
    edit_requested = pyqtSignal(str)
    delete_requested = pyqtSignal(str)
    add_requested = pyqtSignal()

    def __init__(self, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self._cards: list[PresetCard] = []

        root = QVBoxLayout(self)
        root.setContentsMargins(0, 0, 0, 0)

        header = QHBoxLayout()
        title = QLabel("Presets", self)
        title.setObjectName("title")
        self._add_btn = QPushButton("+ Add preset", self)
        self._add_btn.setObjectName("primaryButton")
        self._add_btn.clicked.connect(self.add_requested)
        header.addWidget(title, 1)
        header.addWidget(self._add_btn)
        root.addLayout(header)

        scroll = QScrollArea(self)
        scroll.setWidgetResizable(True)
        scroll.setFrameShape(QFrame.Shape.NoFrame)
        container = QWidget(scroll)
        self._list_layout = QVBoxLayout(container)
        self._list_layout.setSpacing(8)
        self._list_layout.addStretch()
        scroll.setWidget(container)
        root.addWidget(scroll, 1)

    @property
    def cards(self) -> list[PresetCard]:
        return list(self._cards)

    def set_presets(self, presets: list[Preset]) -> None:
        """Rebuild every card from *presets*."""
        for card in self._cards:
            self._list_layout.removeWidget(card)
            card.setParent(None)
            card.deleteLater()
        self._cards = []

        for preset in presets:
            card = PresetCard(preset)
            card.clicked.connect(self.select_requested)
            card.edit_clicked.connect(self.edit_requested)
            card.delete_clicked.connect(self.delete_requested)
            # Keep the trailing stretch last.
            self._list_layout.insertWidget(self._list_layout.count() - 1, card)
            self._cards.append(card)
