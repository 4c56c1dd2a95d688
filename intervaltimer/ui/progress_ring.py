"""Circular progress ring widget rendered with QPainter.

- Fills clockwise as the current repetition progresses.
- Colour-coded by step type (work=coral, rest=teal, long break=purple).
- Shows m:ss in bold at the centre plus the step name and set counter.
- Smooth colour transition between steps.
- Sparkle burst when the workout completes.
"""

from __future__ import annotations

import math
import random

from PyQt6.QtCore import Qt, QRectF, QPointF, QTimer, QVariantAnimation, QEasingCurve
from PyQt6.QtGui import QPainter, QPen, QColor, QConicalGradient, QFont
from PyQt6.QtWidgets import QWidget

from ..timer.schedule import StepType
from .styles import PALETTE, colors_for


# ── helpers ──────────────────────────────────────────────────────────────────

def _lerp_color(c1: QColor, c2: QColor, t: float) -> QColor:
    """Linearly interpolate between two QColors."""
    t = max(0.0, min(1.0, t))
    return QColor(
        int(c1.red()   + (c2.red()   - c1.red())   * t),
        int(c1.green() + (c2.green() - c1.green()) * t),
        int(c1.blue()  + (c2.blue()  - c1.blue())  * t),
        int(c1.alpha() + (c2.alpha() - c1.alpha()) * t),
    )


# ── sparkle particle ────────────────────────────────────────────────────────

class _Particle:
    __slots__ = ("x", "y", "vx", "vy", "life", "color", "size")

    def __init__(self, cx: float, cy: float, color: QColor) -> None:
        angle = random.uniform(0, 2 * math.pi)
        speed = random.uniform(2.0, 6.0)
        self.x = cx
        self.y = cy
        self.vx = math.cos(angle) * speed
        self.vy = math.sin(angle) * speed
        self.life = 1.0
        self.color = QColor(color)
        self.size = random.uniform(3, 7)

    def tick(self, dt: float) -> bool:
        """Advance and return True if still alive."""
        self.x += self.vx * dt * 60
        self.y += self.vy * dt * 60
        self.vy += 0.12 * dt * 60  # gravity
        self.life -= dt * 1.8
        return self.life > 0


# ── main widget ──────────────────────────────────────────────────────────────


class ProgressRing(QWidget):
    """Custom-painted circular timer ring."""

    RING_DIAMETER = 280
    RING_THICKNESS = 14

    def __init__(self, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self.setMinimumSize(self.RING_DIAMETER + 40, self.RING_DIAMETER + 40)

        self._percent: float = 0.0
        self._time_text: str = "0:00"
        self._step_label: str = ""
        self._rep_text: str = ""
        self._step_type: StepType | None = None

        primary, secondary = colors_for(None)
        self._primary_color = QColor(primary)
        self._secondary_color = QColor(secondary)
        self._old_primary = QColor(primary)
        self._old_secondary = QColor(secondary)
        self._target_primary = QColor(primary)
        self._target_secondary = QColor(secondary)

        self._text_color = QColor(PALETTE["text"])
        self._muted_color = QColor(PALETTE["text_muted"])

        # ── color transition animation ─────────────────────────────────
        self._color_anim = QVariantAnimation(self)
        self._color_anim.setDuration(400)
        self._color_anim.setStartValue(0.0)
        self._color_anim.setEndValue(1.0)
        self._color_anim.setEasingCurve(QEasingCurve.Type.InOutQuad)
        self._color_anim.valueChanged.connect(self._on_color_anim)

        # ── celebration particles ──────────────────────────────────────
        self._particles: list[_Particle] = []
        self._particle_timer = QTimer(self)
        self._particle_timer.setInterval(16)
        self._particle_timer.timeout.connect(self._on_particle_tick)

    # ══════════════════════════════════════════════════════════════════
    #  PUBLIC API
    # ══════════════════════════════════════════════════════════════════

    @property
    def percent(self) -> float:
        return self._percent

    @property
    def time_text(self) -> str:
        return self._time_text

    @property
    def step_label(self) -> str:
        return self._step_label

    @property
    def rep_text(self) -> str:
        return self._rep_text

    @property
    def step_type(self) -> StepType | None:
        return self._step_type

    def set_percent(self, pct: float) -> None:
        """Arc fill, clamped to 0..1.  Called every frame, so no animation."""
        self._percent = max(0.0, min(1.0, pct))
        self.update()

    def set_time_text(self, text: str) -> None:
        self._time_text = text
        self.update()

    def set_step_label(self, text: str) -> None:
        self._step_label = text
        self.update()

    def set_rep_text(self, text: str) -> None:
        self._rep_text = text
        self.update()

    def apply_step(self, step_type: StepType | None) -> None:
        """Fade to the colours of *step_type* (``None`` = idle)."""
        if step_type == self._step_type:
            return
        self._step_type = step_type
        primary_hex, secondary_hex = colors_for(step_type)

        self._old_primary = QColor(self._primary_color)
        self._old_secondary = QColor(self._secondary_color)
        self._target_primary = QColor(primary_hex)
        self._target_secondary = QColor(secondary_hex)
        self._color_anim.stop()
        self._color_anim.start()

    def trigger_celebration(self) -> None:
        """Burst of sparkle particles from the ring."""
        cx = self.width() / 2
        cy = self.height() / 2
        radius = self.RING_DIAMETER / 2

        colors = [
            QColor("#FFD700"),
            QColor("#FF6B6B"),
            QColor("#4ECDC4"),
            QColor("#A18CD1"),
        ]

        for _ in range(40):
            angle = random.uniform(0, 2 * math.pi)
            px = cx + math.cos(angle) * radius
            py = cy + math.sin(angle) * radius
            self._particles.append(_Particle(px, py, random.choice(colors)))

        if not self._particle_timer.isActive():
            self._particle_timer.start()

    # ══════════════════════════════════════════════════════════════════
    #  ANIMATION SLOTS
    # ══════════════════════════════════════════════════════════════════

    def _on_color_anim(self, value: object) -> None:
        t = float(value)  # type: ignore[arg-type]
        self._primary_color = _lerp_color(self._old_primary, self._target_primary, t)
        self._secondary_color = _lerp_color(self._old_secondary, self._target_secondary, t)
        self.update()

    def _on_particle_tick(self) -> None:
        dt = 0.016
        self._particles = [p for p in self._particles if p.tick(dt)]
        if not self._particles:
            self._particle_timer.stop()
        self.update()

    # ══════════════════════════════════════════════════════════════════
    #  PAINTING
    # ══════════════════════════════════════════════════════════════════

    def paintEvent(self, event) -> None:  # type: ignore[override]
        painter = QPainter(self)
        painter.setRenderHint(QPainter.RenderHint.Antialiasing)

        w = self.width()
        h = self.height()
        cx, cy = w / 2, h / 2
        diameter = max(100, min(w, h) - 40)
        radius = diameter / 2
        thickness = self.RING_THICKNESS

        ring_rect = QRectF(cx - radius, cy - radius, diameter, diameter)

        # ── background track ─────────────────────────────────────────
        track_color = QColor(self._primary_color)
        track_color.setAlpha(35)
        track_pen = QPen(track_color, thickness, Qt.PenStyle.SolidLine)
        track_pen.setCapStyle(Qt.PenCapStyle.RoundCap)
        painter.setPen(track_pen)
        painter.drawEllipse(ring_rect)

        # ── active arc ───────────────────────────────────────────────
        if self._percent > 0.001:
            gradient = QConicalGradient(cx, cy, 90)
            gradient.setColorAt(0.0, self._primary_color)
            gradient.setColorAt(0.5, self._secondary_color)
            gradient.setColorAt(1.0, self._primary_color)

            arc_pen = QPen(gradient, thickness, Qt.PenStyle.SolidLine)
            arc_pen.setCapStyle(Qt.PenCapStyle.RoundCap)
            painter.setPen(arc_pen)

            # Qt arcs: start at 12 o'clock (90*16), go clockwise (negative)
            painter.drawArc(ring_rect, 90 * 16, -int(self._percent * 360 * 16))

        # ── centre text: time ────────────────────────────────────────
        time_font = QFont()
        time_font.setPixelSize(52)
        time_font.setWeight(QFont.Weight.Bold)
        painter.setFont(time_font)
        painter.setPen(self._text_color)

        time_rect = QRectF(ring_rect)
        time_rect.moveTop(time_rect.top() - 16)
        painter.drawText(time_rect, Qt.AlignmentFlag.AlignCenter, self._time_text)

        # ── centre text: step name ───────────────────────────────────
        label_font = QFont()
        label_font.setPixelSize(13)
        label_font.setWeight(QFont.Weight.DemiBold)
        label_font.setLetterSpacing(QFont.SpacingType.AbsoluteSpacing, 3)
        painter.setFont(label_font)

        label_color = QColor(self._primary_color)
        label_color.setAlpha(220)
        painter.setPen(label_color)

        label_rect = QRectF(ring_rect)
        label_rect.moveTop(label_rect.top() + 30)
        painter.drawText(label_rect, Qt.AlignmentFlag.AlignCenter, self._step_label)

        # ── centre text: set counter ─────────────────────────────────
        rep_font = QFont()
        rep_font.setPixelSize(11)
        painter.setFont(rep_font)
        painter.setPen(self._muted_color)

        rep_rect = QRectF(ring_rect)
        rep_rect.moveTop(rep_rect.top() + 55)
        painter.drawText(rep_rect, Qt.AlignmentFlag.AlignCenter, self._rep_text)

        # ── celebration particles ────────────────────────────────────
        for p in self._particles:
            c = QColor(p.color)
            c.setAlpha(int(255 * max(0, p.life)))
            painter.setPen(Qt.PenStyle.NoPen)
            painter.setBrush(c)
            size = p.size * p.life
            painter.drawEllipse(QPointF(p.x, p.y), size, size)

        painter.end()
