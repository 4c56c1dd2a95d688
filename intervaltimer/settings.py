"""Application settings with JSON persistence.

Settings are stored at:
    ~/Library/Application Support/IntervalTimer/settings.json

Usage::

    settings = load_settings()
    settings.sound_volume = 50
    save_settings(settings)
"""

from __future__ import annotations

import json
from dataclasses import dataclass, asdict, fields
from pathlib import Path

from loguru import logger


# Same app-support directory as db.py
APP_SUPPORT_DIR = Path.home() / "Library" / "Application Support" / "IntervalTimer"
SETTINGS_PATH = APP_SUPPORT_DIR / "settings.json"


@dataclass
class Settings:
    """All user-configurable preferences."""

    # ── timer ─────────────────────────────────────────────────────────
    frame_interval_ms: int = 16            # tick cadence of the engine
    last_preset_id: str | None = None

    # ── audio ─────────────────────────────────────────────────────────
    sound_enabled: bool = True
    sound_volume: int = 70                 # 0-100

    # ── logging ───────────────────────────────────────────────────────
    log_level: str = "INFO"
    log_file: str | None = None

    # ── window ────────────────────────────────────────────────────────
    window_width: int = 480
    window_height: int = 720


def load_settings() -> Settings:
    """Load settings from disk, falling back to defaults."""
    if not SETTINGS_PATH.exists():
        return Settings()
    try:
        data = json.loads(SETTINGS_PATH.read_text(encoding="utf-8"))
        # Only use keys that exist in the dataclass
        valid_keys = {f.name for f in fields(Settings)}
        filtered = {k: v for k, v in data.items() if k in valid_keys}
        return Settings(**filtered)
    except (OSError, ValueError, TypeError, AttributeError) as exc:
        logger.warning("Ignoring unreadable settings file {}: {}", SETTINGS_PATH, exc)
    return Settings()


def save_settings(settings: Settings) -> None:
    """Write settings to disk as JSON."""
    SETTINGS_PATH.parent.mkdir(parents=True, exist_ok=True)
    SETTINGS_PATH.write_text(
        json.dumps(asdict(settings), indent=2) + "\n",
        encoding="utf-8",
    )
