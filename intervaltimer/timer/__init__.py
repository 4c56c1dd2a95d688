"""Timer package."""

from .engine import (
    IntervalTimer,
    TimerState,
    DisplayState,
    TimerListener,
    TimerSignals,
)
from .schedule import (
    Preset,
    SetSpec,
    Step,
    StepType,
    build_schedule,
)
from .scheduler import FrameScheduler, QtFrameScheduler, FRAME_INTERVAL_MS

__all__ = [
    "IntervalTimer",
    "TimerState",
    "DisplayState",
    "TimerListener",
    "TimerSignals",
    "Preset",
    "SetSpec",
    "Step",
    "StepType",
    "build_schedule",
    "FrameScheduler",
    "QtFrameScheduler",
    "FRAME_INTERVAL_MS",
]
