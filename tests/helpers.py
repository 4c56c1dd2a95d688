"""Shared test helpers for IntervalTimer."""

from intervaltimer.timer.engine import TimerListener
from intervaltimer.timer.schedule import Preset, SetSpec, StepType


class SignalCollector:
    """Utility to capture pyqtSignal emissions into a list."""

    def __init__(self):
        self.items: list = []

    def slot(self, *args):
        self.items.append(args if len(args) > 1 else args[0] if args else None)

    def __call__(self, *args):
        self.slot(*args)

    def __len__(self):
        return len(self.items)

    def __getitem__(self, idx):
        return self.items[idx]

    @property
    def last(self):
        return self.items[-1] if self.items else None

    def clear(self):
        self.items.clear()


class RecordingListener(TimerListener):
    """Keeps every notification the engine sends."""

    def __init__(self):
        self.ticks: list = []
        self.steps: list = []
        self.completions = 0

    def on_tick(self, state):
        self.ticks.append(state)

    def on_step_change(self, step):
        self.steps.append(step)

    def on_complete(self):
        self.completions += 1


class FakeFrameScheduler:
    """Deterministic virtual clock.

    ``advance(ms)`` moves time forward, running each requested frame at
    its due time (``frame_ms`` after it was requested).
    """

    def __init__(self, frame_ms: float = 16, start: float = 0.0):
        self.frame_ms = frame_ms
        self._now = start
        self._callback = None
        self._due = None
        self.requests = 0
        self.cancels = 0

    def now(self) -> float:
        return self._now

    def request_frame(self, callback) -> None:
        self._callback = callback
        self._due = self._now + self.frame_ms
        self.requests += 1

    def cancel_frame(self) -> None:
        self._callback = None
        self._due = None
        self.cancels += 1

    @property
    def pending(self) -> bool:
        return self._callback is not None

    def advance(self, ms: float) -> None:
        target = self._now + ms
        while self._callback is not None and self._due <= target:
            self._now = self._due
            callback, self._callback, self._due = self._callback, None, None
            callback()
        self._now = target


class RecordingSounds:
    """Stand-in for SoundManager that remembers what it was asked to play."""

    def __init__(self):
        self.played: list[str] = []

    def play_step_change(self):
        self.played.append("step_change")

    def play_complete(self):
        self.played.append("complete")


def make_preset(
    sets=(("work", 10), ("rest", 5)),
    repetitions: int = 1,
    break_duration: int = 0,
    preset_id: str = "test",
    name: str = "Test",
) -> Preset:
    return Preset(
        id=preset_id,
        name=name,
        sets=tuple(SetSpec(StepType(t), d) for t, d in sets),
        repetitions=repetitions,
        break_duration=break_duration,
    )
