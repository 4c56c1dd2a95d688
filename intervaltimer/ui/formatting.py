"""Small text helpers shared by the widgets."""

from __future__ import annotations

from ..timer.schedule import Preset, StepType


UNIT_SECONDS = "sec"
UNIT_MINUTES = "min"


def format_time(seconds: int) -> str:
    """``75`` → ``"1:15"``.  Negative values clamp to ``"0:00"``."""
    m, s = divmod(max(0, int(seconds)), 60)
    return f"{m}:{s:02d}"


def split_duration(seconds: int) -> tuple[int, str]:
    """Whole minutes are shown in minutes, anything else in seconds."""
    if seconds > 0 and seconds % 60 == 0:
        return seconds // 60, UNIT_MINUTES
    return seconds, UNIT_SECONDS


def join_duration(value: int, unit: str) -> int:
    return value * 60 if unit == UNIT_MINUTES else value


def step_label(step_type: StepType) -> str:
    return step_type.value.replace("_", " ").upper()


def rep_text(step_type: StepType, rep_index: int, total_reps: int) -> str:
    if step_type == StepType.LONG_BREAK:
        return "Long Break"
    return f"Set {rep_index}/{total_reps}"


def preset_summary(preset: Preset) -> str:
    return (
        f"{len(preset.sets)} steps x {preset.repetitions} reps"
        f" • Total: {format_time(preset.total_duration)}"
    )
