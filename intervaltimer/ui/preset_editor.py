"""Modal dialog for creating or editing a preset."""

from __future__ import annotations

from PyQt6.QtCore import pyqtSignal
from PyQt6.QtWidgets import (
    QDialog, QWidget, QVBoxLayout, QHBoxLayout, QFormLayout,
    QLineEdit, QSpinBox, QComboBox, QPushButton, QLabel,
    QDialogButtonBox, QMessageBox,
)

from ..timer.schedule import Preset, SetSpec, StepType, SET_TYPES
from .formatting import (
    UNIT_SECONDS, UNIT_MINUTES, split_duration, join_duration,
)


DEFAULT_NEW_SETS: tuple[SetSpec, ...] = (
    SetSpec(StepType.WORK, 20),
    SetSpec(StepType.REST, 10),
)
DEFAULT_ADDED_SET = SetSpec(StepType.WORK, 30)
MAX_DURATION_VALUE = 9999


def _unit_combo(parent: QWidget, unit: str) -> QComboBox:
    combo = QComboBox(parent)
    combo.addItem("Sec", UNIT_SECONDS)
    combo.addItem("Min", UNIT_MINUTES)
    combo.setCurrentIndex(combo.findData(unit))
    return combo


class SetRow(QWidget):
    """Type, duration and unit for one set, plus a remove button."""

    remove_requested = pyqtSignal(object)

    def __init__(self, set_spec: SetSpec, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        row = QHBoxLayout(self)
        row.setContentsMargins(0, 0, 0, 0)

        self._type = QComboBox(self)
        for step_type in SET_TYPES:
            self._type.addItem(step_type.value.capitalize(), step_type.value)
        self._type.setCurrentIndex(self._type.findData(set_spec.type.value))

        value, unit = split_duration(set_spec.duration)
        self._duration = QSpinBox(self)
        self._duration.setRange(1, MAX_DURATION_VALUE)
        self._duration.setValue(value)
        self._unit = _unit_combo(self, unit)

        remove_btn = QPushButton("×", self)
        remove_btn.setObjectName("iconButton")
        remove_btn.clicked.connect(lambda: self.remove_requested.emit(self))

        row.addWidget(self._type)
        row.addWidget(self._duration, 1)
        row.addWidget(self._unit)
        row.addWidget(remove_btn)

    def to_set_spec(self) -> SetSpec:
        return SetSpec(
            type=StepType(self._type.currentData()),
            duration=join_duration(self._duration.value(), self._unit.currentData()),
        )


class PresetEditorDialog(QDialog):
    """Edit *preset*, or build a new one when ``preset`` is None.

    After ``exec()`` returns Accepted, ``result_preset()`` holds the
    preset to save.  ``preset_id`` is used for new presets.
    """

    def __init__(
        self,
        preset: Preset | None = None,
        parent: QWidget | None = None,
        *,
        preset_id: str = "",
    ) -> None:
        super().__init__(parent)
        self.setWindowTitle("Edit preset" if preset else "New preset")
        self.setModal(True)
        self._preset_id = preset.id if preset else preset_id
        self._rows: list[SetRow] = []
        self._result: Preset | None = None

        root = QVBoxLayout(self)
        form = QFormLayout()

        self._name = QLineEdit(self)
        self._name.setPlaceholderText("e.g. Tabata")
        form.addRow("Name", self._name)

        self._repetitions = QSpinBox(self)
        self._repetitions.setRange(1, 999)
        form.addRow("Repetitions", self._repetitions)

        break_row = QHBoxLayout()
        self._break = QSpinBox(self)
        self._break.setRange(0, MAX_DURATION_VALUE)
        self._break_unit = _unit_combo(self, UNIT_SECONDS)
        break_row.addWidget(self._break, 1)
        break_row.addWidget(self._break_unit)
        form.addRow("Long break", break_row)
        root.addLayout(form)

        root.addWidget(QLabel("Sets", self))
        self._sets_layout = QVBoxLayout()
        root.addLayout(self._sets_layout)

        add_btn = QPushButton("+ Add set", self)
        add_btn.clicked.connect(lambda: self.add_set_row())
        root.addWidget(add_btn)

        buttons = QDialogButtonBox(
            QDialogButtonBox.StandardButton.Save
            | QDialogButtonBox.StandardButton.Cancel,
            self,
        )
        buttons.accepted.connect(self.accept)
        buttons.rejected.connect(self.reject)
        root.addWidget(buttons)

        self._populate(preset)

    # ── public API ────────────────────────────────────────────────────────

    @property
    def rows(self) -> list[SetRow]:
        return list(self._rows)

    def add_set_row(self, set_spec: SetSpec = DEFAULT_ADDED_SET) -> SetRow:
        row = SetRow(set_spec, self)
        row.remove_requested.connect(self.remove_set_row)
        self._sets_layout.addWidget(row)
        self._rows.append(row)
        return row

    def remove_set_row(self, row: SetRow) -> None:
        if row in self._rows:
            self._rows.remove(row)
            self._sets_layout.removeWidget(row)
            row.setParent(None)
            row.deleteLater()

    def build_preset(self) -> Preset | None:
        """Preset from the current form, or None when there are no sets."""
        if not self._rows:
            return None
        return Preset(
            id=self._preset_id,
            name=self._name.text().strip() or "Untitled",
            sets=tuple(row.to_set_spec() for row in self._rows),
            repetitions=self._repetitions.value(),
            break_duration=join_duration(
                self._break.value(), self._break_unit.currentData(),
            ),
        )

    def result_preset(self) -> Preset | None:
        return self._result

    def accept(self) -> None:  # type: ignore[override]
        preset = self.build_preset()
        if preset is None:
            QMessageBox.warning(self, "No sets", "Please add at least one set.")
            return
        self._result = preset
        super().accept()

    # ── internal ──────────────────────────────────────────────────────────

    def _populate(self, preset: Preset | None) -> None:
        if preset is None:
            self._repetitions.setValue(1)
            for set_spec in DEFAULT_NEW_SETS:
                self.add_set_row(set_spec)
            return

        self._name.setText(preset.name)
        self._repetitions.setValue(preset.repetitions)
        value, unit = split_duration(preset.break_duration)
        self._break.setValue(value)
        self._break_unit.setCurrentIndex(self._break_unit.findData(unit))
        for set_spec in preset.sets:
            self.add_set_row(set_spec)
