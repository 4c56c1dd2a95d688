"""Tests for the widgets and the main window.

Covers:
- Text helpers (time formatting, sec/min duration units, summaries)
- TimerWidget start/pause/resume/reset/back and completion display
- Starting a second preset after pausing the first
- PresetEditorDialog defaults, population and preset building
- PresetListWidget cards and signals
- IntervalTimerApp navigation and deletion
"""

from __future__ import annotations

import pytest
from PyQt6.QtCore import Qt, QEvent, QPointF
from PyQt6.QtGui import QMouseEvent

from intervaltimer.app import IntervalTimerApp
from intervaltimer.session import AppSession
from intervaltimer.settings import Settings
from intervaltimer.timer.engine import TimerState
from intervaltimer.timer.schedule import SetSpec, StepType
from intervaltimer.ui.formatting import (
    format_time, split_duration, join_duration, preset_summary, rep_text, step_label,
)
from intervaltimer.ui.preset_editor import PresetEditorDialog
from intervaltimer.ui.preset_list import PresetListWidget
from intervaltimer.ui.timer_widget import TimerWidget

from helpers import (
    RecordingSounds, SignalCollector, make_preset,
)


# ═══════════════════════════════════════════════════════════════════════
#  TEXT HELPERS
# ═══════════════════════════════════════════════════════════════════════


class TestFormatting:

    @pytest.mark.parametrize("seconds,text", [
        (0, "0:00"), (5, "0:05"), (25, "0:25"), (75, "1:15"),
        (1500, "25:00"), (-3, "0:00"),
    ])
    def test_format_time(self, seconds, text):
        assert format_time(seconds) == text

    def test_whole_minutes_use_minutes(self):
        assert split_duration(1800) == (30, "min")
        assert split_duration(60) == (1, "min")

    def test_other_values_use_seconds(self):
        assert split_duration(90) == (90, "sec")
        assert split_duration(0) == (0, "sec")

    def test_join_duration(self):
        assert join_duration(30, "min") == 1800
        assert join_duration(45, "sec") == 45

    def test_summary(self):
        preset = make_preset(sets=[("work", 20), ("rest", 10)], repetitions=8)
        assert preset_summary(preset) == "2 steps x 8 reps • Total: 4:00"

    def test_labels(self):
        assert step_label(StepType.LONG_BREAK) == "LONG BREAK"
        assert rep_text(StepType.WORK, 2, 8) == "Set 2/8"
        assert rep_text(StepType.LONG_BREAK, 8, 8) == "Long Break"


# ═══════════════════════════════════════════════════════════════════════
#  TIMER WIDGET
# ═══════════════════════════════════════════════════════════════════════


@pytest.fixture
def sounds():
    return RecordingSounds()


@pytest.fixture
def timer_widget(qapp, clock, sounds):
    return TimerWidget(sounds, scheduler=clock)


@pytest.mark.usefixtures("qapp")
class TestTimerWidget:

    def test_initial_display(self, timer_widget):
        timer_widget.load_preset(make_preset(sets=[("work", 25)], repetitions=3))
        ring = timer_widget.ring
        assert ring.time_text == "0:25"
        assert ring.step_label == "WORK"
        assert ring.rep_text == "Set 1/3"
        assert ring.percent == 0.0
        assert timer_widget.toggle_text == "Start"

    def test_toggle_cycles_states(self, timer_widget, work_rest_preset):
        timer_widget.load_preset(work_rest_preset)
        timer_widget._on_toggle()
        assert timer_widget.engine.timer_state == TimerState.RUNNING
        assert timer_widget.toggle_text == "Pause"

        timer_widget._on_toggle()
        assert timer_widget.engine.timer_state == TimerState.PAUSED
        assert timer_widget.toggle_text == "Resume"

        timer_widget._on_toggle()
        assert timer_widget.engine.timer_state == TimerState.RUNNING
        assert timer_widget.toggle_text == "Pause"

    def test_toggle_without_preset_does_nothing(self, timer_widget):
        timer_widget._on_toggle()
        assert timer_widget.engine.timer_state == TimerState.STOPPED

    def test_display_follows_ticks(self, timer_widget, clock, work_rest_preset):
        timer_widget.load_preset(work_rest_preset)
        timer_widget._on_toggle()
        clock.advance(12_000)
        ring = timer_widget.ring
        assert ring.step_label == "REST"
        assert ring.time_text == "0:03"
        assert ring.step_type == StepType.REST
        assert 0.0 < ring.percent < 1.0

    def test_step_change_plays_cue(self, timer_widget, clock, sounds, work_rest_preset):
        timer_widget.load_preset(work_rest_preset)
        timer_widget._on_toggle()
        clock.advance(10_000)
        assert sounds.played == ["step_change"]

    def test_completion_display(self, timer_widget, clock, sounds, work_rest_preset):
        timer_widget.load_preset(work_rest_preset)
        timer_widget._on_toggle()
        clock.advance(31_000)
        ring = timer_widget.ring
        assert ring.step_label == "DONE"
        assert ring.time_text == "0:00"
        assert ring.percent == 1.0
        assert sounds.played[-1] == "complete"
        assert sounds.played.count("complete") == 1
        assert timer_widget.toggle_text == "Start"

    def test_reset_restores_initial_display(self, timer_widget, clock, work_rest_preset):
        timer_widget.load_preset(work_rest_preset)
        timer_widget._on_toggle()
        clock.advance(4000)
        timer_widget._on_reset()
        assert timer_widget.engine.timer_state == TimerState.STOPPED
        assert timer_widget.ring.time_text == "0:10"
        assert timer_widget.ring.percent == 0.0
        assert timer_widget.toggle_text == "Start"

    def test_back_resets_and_signals(self, timer_widget, work_rest_preset):
        collector = SignalCollector()
        timer_widget.back_requested.connect(collector)
        timer_widget.load_preset(work_rest_preset)
        timer_widget._on_toggle()
        timer_widget._on_back()
        assert len(collector) == 1
        assert timer_widget.engine.timer_state == TimerState.STOPPED
        assert timer_widget.toggle_text == "Start"

    def test_new_preset_starts_from_beginning_after_pause(self, timer_widget, clock):
        timer_a = make_preset(sets=[("work", 10)], preset_id="preset-1", name="Timer A")
        timer_b = make_preset(sets=[("work", 25)], preset_id="preset-2", name="Timer B")

        timer_widget.load_preset(timer_a)
        timer_widget._on_toggle()
        clock.advance(2000)
        timer_widget._on_toggle()
        assert timer_widget.engine.remaining_in_step < 10_000

        timer_widget._on_back()
        timer_widget.load_preset(timer_b)
        assert timer_widget.ring.time_text == "0:25"

        timer_widget._on_toggle()
        assert timer_widget.engine.remaining_in_step > 24_000

    def test_empty_preset_display(self, timer_widget):
        timer_widget.load_preset(make_preset(sets=[]))
        assert timer_widget.ring.time_text == "0:00"
        assert timer_widget.ring.step_label == ""


# ═══════════════════════════════════════════════════════════════════════
#  PRESET EDITOR
# ═══════════════════════════════════════════════════════════════════════


@pytest.mark.usefixtures("qapp")
class TestPresetEditor:

    def test_new_preset_defaults(self):
        dialog = PresetEditorDialog(None, preset_id="preset-42")
        preset = dialog.build_preset()
        assert preset.id == "preset-42"
        assert preset.sets == (SetSpec(StepType.WORK, 20), SetSpec(StepType.REST, 10))
        assert preset.repetitions == 1
        assert preset.break_duration == 0

    def test_edit_populates_fields(self):
        original = make_preset(
            sets=[("work", 1500), ("rest", 300)],
            repetitions=4,
            break_duration=1800,
            preset_id="preset-2",
            name="Pomodoro 25/5",
        )
        dialog = PresetEditorDialog(original)
        assert len(dialog.rows) == 2
        assert dialog._break.value() == 30
        assert dialog._break_unit.currentData() == "min"
        assert dialog.build_preset() == original

    def test_add_set_row(self):
        dialog = PresetEditorDialog(None, preset_id="x")
        dialog.add_set_row(SetSpec(StepType.REST, 45))
        preset = dialog.build_preset()
        assert len(preset.sets) == 3
        assert preset.sets[-1] == SetSpec(StepType.REST, 45)

    def test_remove_all_rows_blocks_save(self):
        dialog = PresetEditorDialog(None, preset_id="x")
        for row in dialog.rows:
            dialog.remove_set_row(row)
        assert dialog.rows == []
        assert dialog.build_preset() is None

    def test_blank_name_gets_placeholder(self):
        dialog = PresetEditorDialog(None, preset_id="x")
        assert dialog.build_preset().name == "Untitled"

    def test_accept_stores_result(self):
        dialog = PresetEditorDialog(None, preset_id="x")
        dialog._name.setText("Sprints")
        dialog.accept()
        assert dialog.result_preset().name == "Sprints"


# ═══════════════════════════════════════════════════════════════════════
#  PRESET LIST
# ═══════════════════════════════════════════════════════════════════════


@pytest.mark.usefixtures("qapp")
class TestPresetList:

    def test_cards_per_preset(self):
        widget = PresetListWidget()
        widget.set_presets([
            make_preset(preset_id="a", sets=[("work", 20), ("rest", 10)], repetitions=8),
            make_preset(preset_id="b"),
        ])
        assert [c.preset_id for c in widget.cards] == ["a", "b"]
        assert widget.cards[0].summary_text == "2 steps x 8 reps • Total: 4:00"

    def test_rebuild_replaces_cards(self):
        widget = PresetListWidget()
        widget.set_presets([make_preset(preset_id="a"), make_preset(preset_id="b")])
        widget.set_presets([make_preset(preset_id="c")])
        assert [c.preset_id for c in widget.cards] == ["c"]

    def test_click_card_requests_select(self):
        widget = PresetListWidget()
        widget.set_presets([make_preset(preset_id="a")])
        collector = SignalCollector()
        widget.select_requested.connect(collector)
        event = QMouseEvent(
            QEvent.Type.MouseButtonPress, QPointF(5, 5), QPointF(5, 5),
            Qt.MouseButton.LeftButton, Qt.MouseButton.LeftButton,
            Qt.KeyboardModifier.NoModifier,
        )
        widget.cards[0].mousePressEvent(event)
        assert collector.last == "a"

    def test_card_buttons_request_edit_and_delete(self):
        widget = PresetListWidget()
        widget.set_presets([make_preset(preset_id="a")])
        edits, deletes = SignalCollector(), SignalCollector()
        widget.edit_requested.connect(edits)
        widget.delete_requested.connect(deletes)
        card = widget.cards[0]
        card.edit_clicked.emit(card.preset_id)
        card.delete_clicked.emit(card.preset_id)
        assert edits.last == "a"
        assert deletes.last == "a"


# ═══════════════════════════════════════════════════════════════════════
#  MAIN WINDOW
# ═══════════════════════════════════════════════════════════════════════


@pytest.fixture
def window(qapp, clock, sounds):
    return IntervalTimerApp(
        Settings(),
        session=AppSession.load(),
        sounds=sounds,
        scheduler=clock,
    )


@pytest.mark.usefixtures("qapp")
class TestMainWindow:

    def test_lists_seeded_presets(self, window):
        assert len(window.preset_list.cards) == 2
        assert not window.showing_timer

    def test_select_opens_timer(self, window):
        window._on_select("preset-1")
        assert window.showing_timer
        assert window.session.current_preset_id == "preset-1"
        assert window.timer_widget.ring.time_text == "0:20"
        assert window.timer_widget.ring.rep_text == "Set 1/8"

    def test_select_unknown_stays_on_list(self, window):
        window._on_select("missing")
        assert not window.showing_timer

    def test_back_returns_to_list(self, window):
        window._on_select("preset-1")
        window.timer_widget._on_toggle()
        window.timer_widget._on_back()
        assert not window.showing_timer
        assert window.timer_widget.engine.timer_state == TimerState.STOPPED

    def test_delete_preset_refreshes_list(self, window):
        window._on_select("preset-1")
        window.delete_preset("preset-1")
        assert [c.preset_id for c in window.preset_list.cards] == ["preset-2"]
        assert window.session.current_preset_id is None
