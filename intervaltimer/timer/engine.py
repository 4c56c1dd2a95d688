"""Interval timer state machine.

States
------
STOPPED   Initial and terminal state.  No schedule is running.
RUNNING   Frames are ticking and the current step counts down.
PAUSED    Frozen.  No frame is pending and no time is counted.

Transitions
-----------
any      → RUNNING    (start — always rebuilds the schedule)
RUNNING  → PAUSED     (pause)
PAUSED   → RUNNING    (resume — re-anchors the clock to "now")
any      → STOPPED    (reset)
RUNNING  → STOPPED    (schedule exhausted → on_complete)

Time is kept in milliseconds.  When a step runs out, whatever overshoot
the last frame produced is dropped and the next step starts with its
full duration, so slow frame rates drift slightly late.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from enum import Enum

from loguru import logger
from PyQt6.QtCore import QObject, pyqtSignal

from .schedule import Preset, Step, StepType, build_schedule
from .scheduler import FrameScheduler


# ── enums ─────────────────────────────────────────────────────────────────


class TimerState(Enum):
    STOPPED = "stopped"
    RUNNING = "running"
    PAUSED = "paused"


# ── display state ─────────────────────────────────────────────────────────


@dataclass(frozen=True)
class DisplayState:
    step_name: StepType
    time_remaining: int  # whole seconds, rounded up
    rep_index: int
    total_reps: int
    progress: float  # 0.0 → 1.0 through the current repetition


# ── listeners ─────────────────────────────────────────────────────────────


class TimerListener:
    """Receives engine notifications.  Override what you need."""

    def on_tick(self, state: DisplayState) -> None:
        pass

    def on_step_change(self, step: Step) -> None:
        pass

    def on_complete(self) -> None:
        pass


class TimerSignals(QObject):
    """Listener that forwards engine notifications as Qt signals.

    Signals
    -------
    tick(state: DisplayState)
        Every frame while running.
    step_changed(step: Step)
        When the engine moves on to a new step.
    completed()
        Once, when the schedule is exhausted.
    """

    tick = pyqtSignal(object)
    step_changed = pyqtSignal(object)
    completed = pyqtSignal()

    def on_tick(self, state: DisplayState) -> None:
        self.tick.emit(state)

    def on_step_change(self, step: Step) -> None:
        self.step_changed.emit(step)

    def on_complete(self) -> None:
        self.completed.emit()


# ── engine ────────────────────────────────────────────────────────────────


class IntervalTimer:
    """Walks a preset's schedule against the scheduler's clock.

    One instance is reused for every preset the user runs; ``start``
    wipes all previous position state.
    """

    def __init__(
        self,
        listener: TimerListener | TimerSignals,
        scheduler: FrameScheduler,
    ) -> None:
        self._listener = listener
        self._scheduler = scheduler

        self._state: TimerState = TimerState.STOPPED
        self._schedule: tuple[Step, ...] = ()
        self._index: int = 0
        self._remaining_ms: float = 0.0
        self._last_frame: float = 0.0

    # ══════════════════════════════════════════════════════════════════
    #  PUBLIC PROPERTIES
    # ══════════════════════════════════════════════════════════════════

    @property
    def timer_state(self) -> TimerState:
        return self._state

    @property
    def is_running(self) -> bool:
        return self._state == TimerState.RUNNING

    @property
    def schedule(self) -> tuple[Step, ...]:
        return self._schedule

    @property
    def current_index(self) -> int:
        return self._index

    @property
    def remaining_in_step(self) -> float:
        """Milliseconds left in the current step."""
        return self._remaining_ms

    @property
    def current_step(self) -> Step | None:
        if 0 <= self._index < len(self._schedule):
            return self._schedule[self._index]
        return None

    # ══════════════════════════════════════════════════════════════════
    #  CONTROLS
    # ══════════════════════════════════════════════════════════════════

    def start(self, preset: Preset) -> None:
        """Run *preset* from its first step, whatever state we were in."""
        self._scheduler.cancel_frame()
        self._schedule = build_schedule(preset)
        self._index = 0
        first = self.current_step
        self._remaining_ms = first.duration * 1000.0 if first else 0.0
        self._state = TimerState.RUNNING
        self._last_frame = self._scheduler.now()
        logger.debug(
            "Timer started: preset={} steps={}", preset.id, len(self._schedule),
        )
        self._tick()

    def pause(self) -> None:
        if self._state != TimerState.RUNNING:
            return
        self._state = TimerState.PAUSED
        self._scheduler.cancel_frame()
        logger.debug("Timer paused at step {} ({:.0f} ms left)",
                     self._index, self._remaining_ms)

    def resume(self) -> None:
        if self._state != TimerState.PAUSED:
            return
        self._state = TimerState.RUNNING
        # Paused wall-clock time must not count as elapsed.
        self._last_frame = self._scheduler.now()
        logger.debug("Timer resumed at step {}", self._index)
        self._tick()

    def reset(self) -> None:
        self._state = TimerState.STOPPED
        self._scheduler.cancel_frame()
        self._schedule = ()
        self._index = 0
        self._remaining_ms = 0.0
        logger.debug("Timer reset")

    # ══════════════════════════════════════════════════════════════════
    #  DISPLAY STATE
    # ══════════════════════════════════════════════════════════════════

    def get_state(self) -> DisplayState | None:
        step = self.current_step
        if step is None:
            return None

        remaining_in_rep = self._remaining_ms
        if step.type == StepType.LONG_BREAK:
            total_ms = step.duration * 1000.0
        else:
            for later in self._schedule[self._index + 1:]:
                if (later.rep_index != step.rep_index
                        or later.type == StepType.LONG_BREAK):
                    break
                remaining_in_rep += later.duration * 1000.0
            total_ms = step.total_rep_duration * 1000.0

        progress = 1.0 - remaining_in_rep / total_ms if total_ms > 0 else 0.0

        return DisplayState(
            step_name=step.type,
            time_remaining=math.ceil(self._remaining_ms / 1000.0),
            rep_index=step.rep_index,
            total_reps=step.total_reps,
            progress=progress,
        )

    # ══════════════════════════════════════════════════════════════════
    #  INTERNAL — frame loop
    # ══════════════════════════════════════════════════════════════════

    def _tick(self) -> None:
        if self._state != TimerState.RUNNING:
            return

        now = self._scheduler.now()
        delta = now - self._last_frame
        self._last_frame = now
        self._remaining_ms -= delta

        if self._remaining_ms <= 0:
            self._index += 1
            step = self.current_step
            if step is None:
                self._complete()
                return
            self._remaining_ms = step.duration * 1000.0
            logger.debug("Step {} → {} (rep {}/{})", self._index,
                         step.type.value, step.rep_index, step.total_reps)
            self._listener.on_step_change(step)
            if self._state != TimerState.RUNNING:
                return

        self._listener.on_tick(self.get_state())
        # A listener may have paused or reset us from inside the callback.
        if self._state == TimerState.RUNNING:
            self._scheduler.request_frame(self._tick)

    def _complete(self) -> None:
        self._state = TimerState.STOPPED
        self._scheduler.cancel_frame()
        logger.debug("Timer completed after {} steps", len(self._schedule))
        self._listener.on_complete()
