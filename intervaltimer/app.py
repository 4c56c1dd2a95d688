"""Main application window for IntervalTimer."""

from __future__ import annotations

from loguru import logger
from PyQt6.QtWidgets import QMainWindow, QStackedWidget, QMessageBox, QDialog

from .audio.sounds import SoundManager
from .database.storage import new_preset_id
from .session import AppSession
from .settings import Settings, load_settings, save_settings
from .timer.scheduler import FrameScheduler
from .ui.preset_editor import PresetEditorDialog
from .ui.preset_list import PresetListWidget
from .ui.styles import build_stylesheet
from .ui.timer_widget import TimerWidget


class IntervalTimerApp(QMainWindow):
    """Main window: preset list and timer view in a stack."""

    def __init__(
        self,
        settings: Settings | None = None,
        *,
        session: AppSession | None = None,
        sounds=None,
        scheduler: FrameScheduler | None = None,
    ) -> None:
        super().__init__()
        self.setWindowTitle("Interval Timer")
        self.setMinimumSize(400, 600)

        # ── settings & session ────────────────────────────────────────
        self._settings: Settings = settings or load_settings()
        self.resize(self._settings.window_width, self._settings.window_height)
        self._session = session or AppSession.load(self._settings.last_preset_id)

        # ── sound manager ─────────────────────────────────────────────
        if sounds is None:
            sounds = SoundManager(parent=self)
            sounds.set_volume(self._settings.sound_volume)
            sounds.set_enabled(self._settings.sound_enabled)
        self._sounds = sounds

        self.setStyleSheet(build_stylesheet())

        # ── views ─────────────────────────────────────────────────────
        self._stack = QStackedWidget(self)
        self.setCentralWidget(self._stack)

        self._preset_list = PresetListWidget(self._stack)
        self._timer_widget = TimerWidget(
            self._sounds,
            self._stack,
            scheduler=scheduler,
            frame_interval_ms=self._settings.frame_interval_ms,
        )
        self._stack.addWidget(self._preset_list)
        self._stack.addWidget(self._timer_widget)

        # ── wire signals ──────────────────────────────────────────────
        self._preset_list.select_requested.connect(self._on_select)
        self._preset_list.edit_requested.connect(self._on_edit)
        self._preset_list.delete_requested.connect(self._on_delete)
        self._preset_list.add_requested.connect(self._on_add)
        self._timer_widget.back_requested.connect(self._show_presets)

        self._preset_list.set_presets(self._session.presets)
        logger.info("Loaded {} presets", len(self._session.presets))

    # ── accessors ─────────────────────────────────────────────────────────

    @property
    def session(self) -> AppSession:
        return self._session

    @property
    def preset_list(self) -> PresetListWidget:
        return self._preset_list

    @property
    def timer_widget(self) -> TimerWidget:
        return self._timer_widget

    @property
    def showing_timer(self) -> bool:
        return self._stack.currentWidget() is self._timer_widget

    # ── slots ─────────────────────────────────────────────────────────────

    def _on_select(self, preset_id: str) -> None:
        preset = self._session.select(preset_id)
        if preset is None:
            logger.warning("Selected unknown preset {}", preset_id)
            return
        self._settings.last_preset_id = preset.id
        self._timer_widget.load_preset(preset)
        self._stack.setCurrentWidget(self._timer_widget)

    def _on_add(self) -> None:
        dialog = PresetEditorDialog(None, self, preset_id=new_preset_id())
        if dialog.exec() == QDialog.DialogCode.Accepted:
            self._session.add(dialog.result_preset())
            self._refresh_list()

    def _on_edit(self, preset_id: str) -> None:
        preset = self._session.find(preset_id)
        if preset is None:
            return
        dialog = PresetEditorDialog(preset, self)
        if dialog.exec() == QDialog.DialogCode.Accepted:
            self._session.update(dialog.result_preset())
            self._refresh_list()

    def _on_delete(self, preset_id: str) -> None:
        answer = QMessageBox.question(
            self,
            "Delete preset",
            "Are you sure you want to delete this preset?",
        )
        if answer == QMessageBox.StandardButton.Yes:
            self.delete_preset(preset_id)

    def delete_preset(self, preset_id: str) -> None:
        self._session.delete(preset_id)
        if self._settings.last_preset_id == preset_id:
            self._settings.last_preset_id = None
        self._refresh_list()

    def _show_presets(self) -> None:
        self._stack.setCurrentWidget(self._preset_list)

    def _refresh_list(self) -> None:
        self._preset_list.set_presets(self._session.presets)

    # ── window events ─────────────────────────────────────────────────────

    def closeEvent(self, event) -> None:  # type: ignore[override]
        self._timer_widget.engine.reset()
        self._settings.window_width = self.width()
        self._settings.window_height = self.height()
        save_settings(self._settings)
        super().closeEvent(event)
