"""Timer view — runs the selected preset.

Layout (top → bottom):
    - Back button + preset name
    - ProgressRing (large, centred)
    - Reset / Start-Pause-Resume buttons
"""

from __future__ import annotations

from PyQt6.QtCore import Qt, pyqtSignal
from PyQt6.QtWidgets import (
    QWidget, QVBoxLayout, QHBoxLayout,
    QLabel, QPushButton, QFrame, QSizePolicy,
)

from ..timer.engine import IntervalTimer, TimerSignals, TimerState, DisplayState
from ..timer.schedule import Preset, Step
from ..timer.scheduler import FrameScheduler, QtFrameScheduler, FRAME_INTERVAL_MS
from .formatting import format_time, step_label, rep_text
from .progress_ring import ProgressRing


TOGGLE_LABELS: dict[TimerState, str] = {
    TimerState.STOPPED: "Start",
    TimerState.RUNNING: "Pause",
    TimerState.PAUSED:  "Resume",
}


class TimerWidget(QWidget):
    """Shows one preset and drives the engine from its buttons.

    ``sounds`` only needs ``play_step_change()`` and ``play_complete()``.
    """

    back_requested = pyqtSignal()

    def __init__(
        self,
        sounds=None,
        parent: QWidget | None = None,
        *,
        scheduler: FrameScheduler | None = None,
        frame_interval_ms: int = FRAME_INTERVAL_MS,
    ) -> None:
        super().__init__(parent)
        self._sounds = sounds
        self._preset: Preset | None = None

        self._signals = TimerSignals(self)
        if scheduler is None:
            scheduler = QtFrameScheduler(self, interval_ms=frame_interval_ms)
        self._engine = IntervalTimer(self._signals, scheduler)

        self._build_ui()
        self._connect_signals()

    # ── build ─────────────────────────────────────────────────────────────

    def _build_ui(self) -> None:
        root = QVBoxLayout(self)
        root.setContentsMargins(0, 0, 0, 0)
        root.setSpacing(0)

        card = QFrame(self)
        card.setObjectName("card")
        root.addWidget(card)

        layout = QVBoxLayout(card)
        layout.setContentsMargins(24, 16, 24, 24)
        layout.setSpacing(0)

        # ── header ───────────────────────────────────────────────────
        header = QHBoxLayout()
        self._back_btn = QPushButton("←", card)
        self._back_btn.setObjectName("iconButton")
        self._back_btn.setToolTip("Back to presets")
        self._title = QLabel("", card)
        self._title.setObjectName("title")
        header.addWidget(self._back_btn)
        header.addWidget(self._title, 1)
        layout.addLayout(header)

        layout.addSpacing(16)

        # ── progress ring ────────────────────────────────────────────
        ring_row = QHBoxLayout()
        ring_row.setAlignment(Qt.AlignmentFlag.AlignCenter)
        self._ring = ProgressRing(card)
        self._ring.setSizePolicy(QSizePolicy.Policy.Fixed, QSizePolicy.Policy.Fixed)
        self._ring.setFixedSize(320, 320)
        ring_row.addWidget(self._ring)
        layout.addLayout(ring_row)

        layout.addSpacing(16)

        # ── controls ─────────────────────────────────────────────────
        btn_row = QHBoxLayout()
        btn_row.setSpacing(12)
        btn_row.setAlignment(Qt.AlignmentFlag.AlignCenter)

        self._reset_btn = QPushButton("Reset", card)
        self._reset_btn.setObjectName("dangerButton")
        self._toggle_btn = QPushButton(TOGGLE_LABELS[TimerState.STOPPED], card)
        self._toggle_btn.setObjectName("primaryButton")

        btn_row.addWidget(self._reset_btn)
        btn_row.addWidget(self._toggle_btn)
        layout.addLayout(btn_row)
        layout.addStretch()

    def _connect_signals(self) -> None:
        self._back_btn.clicked.connect(self._on_back)
        self._toggle_btn.clicked.connect(self._on_toggle)
        self._reset_btn.clicked.connect(self._on_reset)

        self._signals.tick.connect(self._on_tick)
        self._signals.step_changed.connect(self._on_step_changed)
        self._signals.completed.connect(self._on_completed)

    # ── public API ────────────────────────────────────────────────────────

    @property
    def engine(self) -> IntervalTimer:
        return self._engine

    @property
    def ring(self) -> ProgressRing:
        return self._ring

    @property
    def preset(self) -> Preset | None:
        return self._preset

    @property
    def toggle_text(self) -> str:
        return self._toggle_btn.text()

    def load_preset(self, preset: Preset) -> None:
        """Show *preset* ready to start.  Stops whatever was running."""
        self._engine.reset()
        self._preset = preset
        self._title.setText(preset.name)
        self._show_initial()
        self._update_toggle()

    # ── slots ─────────────────────────────────────────────────────────────

    def _on_toggle(self) -> None:
        state = self._engine.timer_state
        if state == TimerState.RUNNING:
            self._engine.pause()
        elif state == TimerState.PAUSED:
            self._engine.resume()
        elif self._preset is not None:
            self._engine.start(self._preset)
        self._update_toggle()

    def _on_reset(self) -> None:
        self._engine.reset()
        self._show_initial()
        self._update_toggle()

    def _on_back(self) -> None:
        self._engine.reset()
        self._update_toggle()
        self.back_requested.emit()

    def _on_tick(self, state: DisplayState) -> None:
        if state is None:
            return
        self._ring.set_step_label(step_label(state.step_name))
        self._ring.set_time_text(format_time(state.time_remaining))
        self._ring.set_rep_text(
            rep_text(state.step_name, state.rep_index, state.total_reps)
        )
        self._ring.set_percent(state.progress)
        self._ring.apply_step(state.step_name)

    def _on_step_changed(self, step: Step) -> None:
        if self._sounds is not None:
            self._sounds.play_step_change()

    def _on_completed(self) -> None:
        if self._sounds is not None:
            self._sounds.play_complete()
        self._ring.set_step_label("DONE")
        self._ring.set_time_text(format_time(0))
        self._ring.set_percent(1.0)
        self._ring.trigger_celebration()
        self._update_toggle()

    # ── helpers ───────────────────────────────────────────────────────────

    def _show_initial(self) -> None:
        """First set at full duration, empty ring."""
        preset = self._preset
        if preset is None or not preset.sets:
            self._ring.set_step_label("")
            self._ring.set_time_text(format_time(0))
            self._ring.set_rep_text("")
            self._ring.set_percent(0.0)
            self._ring.apply_step(None)
            return
        first = preset.sets[0]
        self._ring.set_step_label(step_label(first.type))
        self._ring.set_time_text(format_time(first.duration))
        self._ring.set_rep_text(f"Set 1/{preset.repetitions}")
        self._ring.set_percent(0.0)
        self._ring.apply_step(first.type)

    def _update_toggle(self) -> None:
        self._toggle_btn.setText(TOGGLE_LABELS[self._engine.timer_state])
