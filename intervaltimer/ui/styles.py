"""QSS stylesheet and step colors for IntervalTimer."""

from __future__ import annotations

from ..timer.schedule import StepType

# ── step colors (ring gradient pairs) ────────────────────────────────────

STEP_COLORS: dict[StepType, tuple[str, str]] = {
    StepType.WORK:       ("#FF6B6B", "#FFA07A"),   # warm coral
    StepType.REST:       ("#4ECDC4", "#44B09E"),   # cool teal
    StepType.LONG_BREAK: ("#A18CD1", "#7B68EE"),   # calm purple
}

IDLE_COLORS: tuple[str, str] = ("#4A4A5E", "#3A3A4E")

# ── palette ──────────────────────────────────────────────────────────────

PALETTE: dict[str, str] = {
    "bg":           "#1A1A2E",
    "bg_secondary": "#232340",
    "surface":      "#2A2A4A",
    "accent":       "#CBA6F7",
    "text":         "#E2E2F0",
    "text_muted":   "#7A7A9A",
    "danger":       "#F38BA8",
    "border":       "#313154",
}


def colors_for(step_type: StepType | None) -> tuple[str, str]:
    if step_type is None:
        return IDLE_COLORS
    return STEP_COLORS.get(step_type, IDLE_COLORS)


def build_stylesheet(palette: dict[str, str] | None = None) -> str:
    p = palette or PALETTE
    return f"""
    QMainWindow, QWidget, QDialog {{
        background-color: {p['bg']};
        color: {p['text']};
        font-size: 14px;
    }}
    QFrame#card {{
        background-color: {p['surface']};
        border: 1px solid {p['border']};
        border-radius: 12px;
    }}
    QLabel#title {{
        font-size: 20px;
        font-weight: bold;
    }}
    QLabel#muted {{
        color: {p['text_muted']};
        font-size: 12px;
    }}
    QPushButton {{
        background-color: {p['bg_secondary']};
        border: 1px solid {p['border']};
        border-radius: 8px;
        padding: 8px 16px;
    }}
    QPushButton#primaryButton {{
        background-color: {p['accent']};
        color: {p['bg']};
        font-weight: bold;
        min-width: 96px;
    }}
    QPushButton#dangerButton {{
        color: {p['danger']};
    }}
    QPushButton#iconButton {{
        background: transparent;
        border: none;
        padding: 4px 8px;
    }}
    QLineEdit, QSpinBox, QComboBox {{
        background-color: {p['bg_secondary']};
        border: 1px solid {p['border']};
        border-radius: 6px;
        padding: 4px 8px;
    }}
    """
