"""UI package."""

from .timer_widget import TimerWidget
from .progress_ring import ProgressRing
from .preset_list import PresetListWidget, PresetCard
from .preset_editor import PresetEditorDialog, SetRow

__all__ = [
    "TimerWidget",
    "ProgressRing",
    "PresetListWidget",
    "PresetCard",
    "PresetEditorDialog",
    "SetRow",
]
