"""Preset storage.

Every mutating call returns the full, freshly loaded preset list so
callers can simply replace what they hold.
"""

from __future__ import annotations

import time

from loguru import logger

from ..timer.schedule import Preset, SetSpec, StepType
from .db import get_session
from .models import PresetRecord


DEFAULT_PRESETS: tuple[Preset, ...] = (
    Preset(
        id="preset-1",
        name="HIIT 20/10",
        sets=(
            SetSpec(StepType.WORK, 20),
            SetSpec(StepType.REST, 10),
        ),
        repetitions=8,
        break_duration=0,
    ),
    Preset(
        id="preset-2",
        name="Pomodoro 25/5",
        sets=(
            SetSpec(StepType.WORK, 25 * 60),
            SetSpec(StepType.REST, 5 * 60),
        ),
        repetitions=4,
        break_duration=30 * 60,
    ),
)


def new_preset_id() -> str:
    return f"preset-{int(time.time() * 1000)}"


# ── record <-> model ──────────────────────────────────────────────────────


def _to_record(preset: Preset, position: int) -> PresetRecord:
    data = preset.to_dict()
    return PresetRecord(
        id=data["id"],
        position=position,
        name=data["name"],
        repetitions=data["repetitions"],
        break_duration=data["break_duration"],
        sets=data["sets"],
    )


def _from_record(record: PresetRecord) -> Preset:
    return Preset.from_dict({
        "id": record.id,
        "name": record.name,
        "sets": record.sets or [],
        "repetitions": record.repetitions,
        "break_duration": record.break_duration,
    })


# ── public API ────────────────────────────────────────────────────────────


def load_presets() -> list[Preset]:
    """Return stored presets in order, seeding the defaults if none exist."""
    with get_session() as db:
        records = db.query(PresetRecord).order_by(PresetRecord.position).all()

    if not records:
        return seed_defaults()

    presets: list[Preset] = []
    for record in records:
        try:
            presets.append(_from_record(record))
        except (KeyError, TypeError, ValueError) as exc:
            logger.warning("Skipping unreadable preset {}: {}", record.id, exc)
    return presets


def save_presets(presets: list[Preset]) -> None:
    """Replace the stored list with *presets*."""
    with get_session() as db:
        db.query(PresetRecord).delete()
        for position, preset in enumerate(presets):
            db.add(_to_record(preset, position))


def seed_defaults() -> list[Preset]:
    presets = list(DEFAULT_PRESETS)
    save_presets(presets)
    logger.info("Seeded {} default presets", len(presets))
    return presets


def add_preset(preset: Preset) -> list[Preset]:
    presets = load_presets()
    presets.append(preset)
    save_presets(presets)
    logger.info("Added preset {} ({})", preset.id, preset.name)
    return presets


def update_preset(preset: Preset) -> list[Preset]:
    """Replace the preset with the same id.  Unknown ids change nothing."""
    presets = load_presets()
    for i, existing in enumerate(presets):
        if existing.id == preset.id:
            presets[i] = preset
            save_presets(presets)
            logger.info("Updated preset {} ({})", preset.id, preset.name)
            break
    return presets


def delete_preset(preset_id: str) -> list[Preset]:
    presets = [p for p in load_presets() if p.id != preset_id]
    save_presets(presets)
    logger.info("Deleted preset {}", preset_id)
    return presets
