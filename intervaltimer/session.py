"""Application session: the preset list and which preset is selected.

Owned by the main window and handed to whoever needs it.  The timer
engine never sees this object; it only ever receives a ``Preset``.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from .database import storage
from .timer.schedule import Preset


@dataclass
class AppSession:
    presets: list[Preset] = field(default_factory=list)
    current_preset_id: str | None = None

    @classmethod
    def load(cls, current_preset_id: str | None = None) -> AppSession:
        session = cls()
        session.reload()
        if current_preset_id is not None:
            session.select(current_preset_id)
        return session

    @property
    def current_preset(self) -> Preset | None:
        return self.find(self.current_preset_id)

    def find(self, preset_id: str | None) -> Preset | None:
        for preset in self.presets:
            if preset.id == preset_id:
                return preset
        return None

    def reload(self) -> None:
        self.presets = storage.load_presets()

    def select(self, preset_id: str) -> Preset | None:
        """Make *preset_id* current.  Unknown ids clear the selection."""
        preset = self.find(preset_id)
        self.current_preset_id = preset.id if preset else None
        return preset

    def add(self, preset: Preset) -> None:
        self.presets = storage.add_preset(preset)

    def update(self, preset: Preset) -> None:
        self.presets = storage.update_preset(preset)

    def delete(self, preset_id: str) -> None:
        self.presets = storage.delete_preset(preset_id)
        if self.current_preset_id == preset_id:
            self.current_preset_id = None
