"""Frame scheduling for the interval engine.

The engine never talks to a real clock or event loop directly.  It is
handed a ``FrameScheduler`` which knows the current time and can run a
callback on the next frame.  ``QtFrameScheduler`` is the production
implementation on top of the Qt event loop; tests swap in a virtual
clock.
"""

from __future__ import annotations

import time
from typing import Callable, Protocol

from PyQt6.QtCore import QObject, QTimer


FRAME_INTERVAL_MS = 16  # ~60 fps


class FrameScheduler(Protocol):
    def now(self) -> float:
        """Current time in milliseconds (monotonic)."""
        ...

    def request_frame(self, callback: Callable[[], None]) -> None:
        """Run *callback* once on the next frame, replacing any pending one."""
        ...

    def cancel_frame(self) -> None:
        """Drop the pending callback.  No-op when nothing is pending."""
        ...


class QtFrameScheduler(QObject):
    """Single-shot ``QTimer`` driven frames on the Qt event loop."""

    def __init__(
        self,
        parent: QObject | None = None,
        *,
        interval_ms: int = FRAME_INTERVAL_MS,
    ) -> None:
        super().__init__(parent)
        self._callback: Callable[[], None] | None = None

        self._qt_timer = QTimer(self)
        self._qt_timer.setSingleShot(True)
        self._qt_timer.setInterval(max(1, interval_ms))
        self._qt_timer.timeout.connect(self._on_timeout)

    @property
    def interval_ms(self) -> int:
        return self._qt_timer.interval()

    @property
    def is_pending(self) -> bool:
        return self._qt_timer.isActive()

    def now(self) -> float:
        return time.monotonic() * 1000.0

    def request_frame(self, callback: Callable[[], None]) -> None:
        self._callback = callback
        self._qt_timer.start()

    def cancel_frame(self) -> None:
        self._qt_timer.stop()
        self._callback = None

    def _on_timeout(self) -> None:
        callback, self._callback = self._callback, None
        if callback is not None:
            callback()
