"""Cue synthesis and playback using numpy + QSoundEffect.

Both cues are generated as WAV files and cached to disk, so later
launches only load them.

Sound names
-----------
- ``step_change`` — short high beep (880 Hz) when the next step begins
- ``complete``    — C5→E5→G5→C6 triangle arpeggio when the workout ends
"""

from __future__ import annotations

import io
import wave
from pathlib import Path

import numpy as np

from PyQt6.QtCore import QObject, QUrl
from PyQt6.QtMultimedia import QSoundEffect


# ── paths ────────────────────────────────────────────────────────────────

APP_SUPPORT_DIR = Path.home() / "Library" / "Application Support" / "IntervalTimer"
SOUNDS_DIR = APP_SUPPORT_DIR / "sounds"

SOUND_NAMES = (
    "step_change",
    "complete",
)

SAMPLE_RATE = 44100


# ═══════════════════════════════════════════════════════════════════════════
#  WAV SYNTHESIS HELPERS
# ═══════════════════════════════════════════════════════════════════════════


def _time_axis(duration_s: float) -> np.ndarray:
    return np.linspace(0, duration_s, int(SAMPLE_RATE * duration_s), endpoint=False)


def _sine(freq: float, duration_s: float) -> np.ndarray:
    """Pure sine wave at *freq* Hz for *duration_s* seconds."""
    return np.sin(2 * np.pi * freq * _time_axis(duration_s))


def _triangle(freq: float, duration_s: float) -> np.ndarray:
    """Triangle wave (-1..1) at *freq* Hz."""
    phase = _time_axis(duration_s) * freq
    return 2 * np.abs(2 * (phase - np.floor(phase + 0.5))) - 1


def _exp_decay(length: int, start: float = 1.0, end: float = 0.1) -> np.ndarray:
    """Exponential gain ramp from *start* down to *end*."""
    if length <= 0:
        return np.zeros(0)
    return np.geomspace(start, end, length)


def _to_wav_bytes(samples: np.ndarray) -> bytes:
    """Convert a float64 numpy array (-1..1) to 16-bit PCM WAV bytes."""
    samples = np.clip(samples, -1.0, 1.0)
    int_samples = (samples * 32767).astype(np.int16)

    buf = io.BytesIO()
    with wave.open(buf, "wb") as wf:
        wf.setnchannels(1)
        wf.setsampwidth(2)
        wf.setframerate(SAMPLE_RATE)
        wf.writeframes(int_samples.tobytes())
    return buf.getvalue()


# ═══════════════════════════════════════════════════════════════════════════
#  SOUND GENERATORS
# ═══════════════════════════════════════════════════════════════════════════


def _generate_beep() -> bytes:
    """Step change — 880 Hz sine, 100 ms, decaying."""
    tone = _sine(880.0, 0.1) * 0.6
    tone = tone * _exp_decay(len(tone))
    # Pad with silence so QSoundEffect doesn't clip
    return _to_wav_bytes(np.concatenate([tone, np.zeros(int(SAMPLE_RATE * 0.03))]))


def _generate_arpeggio() -> bytes:
    """Completion — four overlapping triangle notes, 150 ms apart."""
    notes = [523.25, 659.25, 783.99, 1046.50]  # C5, E5, G5, C6
    spacing = 0.15
    note_dur = 0.3
    placed: list[tuple[int, np.ndarray]] = []
    for i, freq in enumerate(notes):
        tone = _triangle(freq, note_dur) * 0.4
        placed.append((int(SAMPLE_RATE * spacing * i), tone * _exp_decay(len(tone))))

    mix = np.zeros(max(offset + len(tone) for offset, tone in placed))
    for offset, tone in placed:
        mix[offset:offset + len(tone)] += tone
    return _to_wav_bytes(mix)


# Map sound names to generator functions
_GENERATORS: dict[str, callable] = {
    "step_change": _generate_beep,
    "complete": _generate_arpeggio,
}


# ═══════════════════════════════════════════════════════════════════════════
#  SOUND MANAGER
# ═══════════════════════════════════════════════════════════════════════════


class SoundManager(QObject):
    """Manages cue synthesis, caching, and playback.

    Usage::

        mgr = SoundManager(parent=self)
        mgr.set_volume(70)
        mgr.play("step_change")
    """

    def __init__(
        self,
        parent: QObject | None = None,
        *,
        sounds_dir: Path | None = None,
    ) -> None:
        super().__init__(parent)
        self._enabled = True
        self._volume = 0.7  # 0.0–1.0
        self._sounds_dir = sounds_dir or SOUNDS_DIR
        self._effects: dict[str, QSoundEffect] = {}

        self._ensure_wav_files()
        self._load_effects()

    # ── public API ────────────────────────────────────────────────────

    def set_volume(self, level: int) -> None:
        """Set volume (0-100).  Updates all loaded effects."""
        self._volume = max(0, min(level, 100)) / 100.0
        for effect in self._effects.values():
            effect.setVolume(self._volume)

    def set_enabled(self, enabled: bool) -> None:
        self._enabled = enabled

    def play(self, name: str) -> None:
        """Play a sound by name.  No-op if disabled or name unknown."""
        if not self._enabled:
            return
        effect = self._effects.get(name)
        if effect is not None:
            effect.play()

    def play_step_change(self) -> None:
        self.play("step_change")

    def play_complete(self) -> None:
        self.play("complete")

    @property
    def volume(self) -> int:
        """Current volume as 0-100 integer."""
        return round(self._volume * 100)

    @property
    def enabled(self) -> bool:
        return self._enabled

    # ── internal ──────────────────────────────────────────────────────

    def _ensure_wav_files(self) -> None:
        """Generate any missing WAV files to the cache directory."""
        self._sounds_dir.mkdir(parents=True, exist_ok=True)
        for name, gen_fn in _GENERATORS.items():
            path = self._sounds_dir / f"{name}.wav"
            if not path.exists():
                path.write_bytes(gen_fn())

    def _load_effects(self) -> None:
        """Create QSoundEffect instances from cached WAV files."""
        for name in SOUND_NAMES:
            path = self._sounds_dir / f"{name}.wav"
            if path.exists():
                effect = QSoundEffect(self)
                effect.setSource(QUrl.fromLocalFile(str(path)))
                effect.setVolume(self._volume)
                self._effects[name] = effect
