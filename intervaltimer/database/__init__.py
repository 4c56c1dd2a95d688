"""Database package."""

from .db import get_session, init_db
from .models import PresetRecord
from .storage import (
    load_presets,
    save_presets,
    seed_defaults,
    add_preset,
    update_preset,
    delete_preset,
)

__all__ = [
    "get_session",
    "init_db",
    "PresetRecord",
    "load_presets",
    "save_presets",
    "seed_defaults",
    "add_preset",
    "update_preset",
    "delete_preset",
]
