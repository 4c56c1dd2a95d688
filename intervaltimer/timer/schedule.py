"""Preset model and schedule builder for IntervalTimer.

A ``Preset`` describes one repetition as an ordered list of sets
(work / rest) plus how many times to repeat it and an optional long
break at the very end.  ``build_schedule`` flattens that into the
concrete list of ``Step`` objects the engine walks through.

Example
-------
``{sets: [work 10, rest 5], repetitions: 2, break_duration: 0}`` becomes::

    work (rep 1) → rest (rep 1) → work (rep 2) → rest (rep 2)
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


# ── enums ─────────────────────────────────────────────────────────────────


class StepType(Enum):
    WORK = "work"
    REST = "rest"
    LONG_BREAK = "long_break"


SET_TYPES = (StepType.WORK, StepType.REST)


# ── model ─────────────────────────────────────────────────────────────────


@dataclass(frozen=True)
class SetSpec:
    type: StepType
    duration: int  # seconds

    @classmethod
    def from_dict(cls, data: dict) -> SetSpec:
        step_type = StepType(data["type"])
        if step_type not in SET_TYPES:
            raise ValueError(f"Invalid set type: {step_type.value}")
        return cls(type=step_type, duration=int(data["duration"]))

    def to_dict(self) -> dict:
        return {"type": self.type.value, "duration": self.duration}


@dataclass(frozen=True)
class Preset:
    id: str
    name: str
    sets: tuple[SetSpec, ...]
    repetitions: int = 1
    break_duration: int = 0  # seconds, 0 = no long break

    @property
    def rep_duration(self) -> int:
        """Seconds in one repetition of the sets."""
        return sum(s.duration for s in self.sets)

    @property
    def total_duration(self) -> int:
        """Seconds for the whole workout, long break included."""
        return self.rep_duration * self.repetitions + self.break_duration

    @classmethod
    def from_dict(cls, data: dict) -> Preset:
        return cls(
            id=str(data["id"]),
            name=str(data["name"]),
            sets=tuple(SetSpec.from_dict(s) for s in data.get("sets", [])),
            repetitions=int(data.get("repetitions", 1)),
            break_duration=int(data.get("break_duration") or 0),
        )

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "name": self.name,
            "sets": [s.to_dict() for s in self.sets],
            "repetitions": self.repetitions,
            "break_duration": self.break_duration,
        }


@dataclass(frozen=True)
class Step:
    """One scheduled unit of the workout."""

    type: StepType
    duration: int  # seconds
    rep_index: int  # 1-based
    total_rep_duration: int  # seconds
    total_reps: int


# ── builder ───────────────────────────────────────────────────────────────


def build_schedule(preset: Preset) -> tuple[Step, ...]:
    """Flatten *preset* into its ordered steps.

    No validation happens here: a preset without sets yields an empty
    schedule (or just the long break), which the engine completes on
    its first tick.
    """
    rep_duration = preset.rep_duration
    steps: list[Step] = []

    for rep in range(1, preset.repetitions + 1):
        for set_spec in preset.sets:
            steps.append(Step(
                type=set_spec.type,
                duration=set_spec.duration,
                rep_index=rep,
                total_rep_duration=rep_duration,
                total_reps=preset.repetitions,
            ))

    if preset.break_duration > 0:
        # Tagged with the last repetition but tracked on its own.
        steps.append(Step(
            type=StepType.LONG_BREAK,
            duration=preset.break_duration,
            rep_index=preset.repetitions,
            total_rep_duration=preset.break_duration,
            total_reps=preset.repetitions,
        ))

    return tuple(steps)
