"""
Presentation derivation for the home screen.

Every colour used by the views is resolved here from two inputs: the active
``DisplayMode`` and the hover alpha derived from the clock. Nothing in this
module holds state.

Usage
-----
    from homescreen.core.theme import hover_alpha, resolve_style, build_stylesheet

    alpha = hover_alpha(state.now)
    style = resolve_style(state.mode, alpha)
    widget.setStyleSheet(build_stylesheet(style))
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime

from qfluentwidgets import Theme as FluentTheme

from homescreen.core.constants import HOVER_RAMP_END_MS, HOVER_RAMP_START_MS
from homescreen.models.home_state import DisplayMode


RGB = tuple[int, int, int]


# ======================================================================
# Palettes
# ======================================================================

@dataclass(frozen=True)
class Palette:
    background: str
    foreground: str
    foreground_muted: str
    button_rest: str
    avatar_rest: str
    tile_rest: str
    accent: RGB  # hover highlight, alpha applied at resolve time


PALETTES: dict[DisplayMode, Palette] = {
    DisplayMode.DAY: Palette(
        background="#EBEBEB",
        foreground="#2D2D2D",
        foreground_muted="#707070",
        button_rest="#FFFFFF",
        avatar_rest="#FFFFFF",
        tile_rest="#FFFFFF",
        accent=(0, 195, 227),
    ),
    DisplayMode.NIGHT: Palette(
        background="#2D2D2D",
        foreground="#FFFFFF",
        foreground_muted="#A0A0A0",
        button_rest="#464646",
        avatar_rest="#464646",
        tile_rest="#3C3C3C",
        accent=(81, 255, 238),
    ),
}

FLUENT_THEMES: dict[DisplayMode, FluentTheme] = {
    DisplayMode.DAY: FluentTheme.LIGHT,
    DisplayMode.NIGHT: FluentTheme.DARK,
}


@dataclass(frozen=True)
class StyleTable:
    """Resolved colours for one frame."""

    background: str
    foreground: str
    foreground_muted: str
    button_rest: str
    button_hover: str
    avatar_rest: str
    avatar_hover: str
    tile_rest: str
    tile_hover: str


# ======================================================================
# Hover pulse
# ======================================================================

def hover_alpha(value: datetime | int) -> float:
    """
    Intensity of the hover highlight for the given instant (or a raw count of
    milliseconds). Only the millisecond within the current second matters, so
    the pulse repeats every second: fully lit up to 300 ms, a linear ramp
    ``ms / 1000`` between 300 and 800 ms, fully lit again from 800 ms.
    """
    if isinstance(value, datetime):
        ms = value.microsecond // 1000
    else:
        ms = int(value) % 1000

    if ms <= HOVER_RAMP_START_MS or ms >= HOVER_RAMP_END_MS:
        return 1.0
    return ms / 1000


def _rgba(rgb: RGB, alpha: float) -> str:
    r, g, b = rgb
    return f"rgba({r}, {g}, {b}, {alpha:.2f})"


def resolve_style(mode: DisplayMode, alpha: float) -> StyleTable:
    """Pure (mode, alpha) -> StyleTable."""
    alpha = max(0.0, min(1.0, alpha))
    palette = PALETTES[mode]
    highlight = _rgba(palette.accent, alpha)
    return StyleTable(
        background=palette.background,
        foreground=palette.foreground,
        foreground_muted=palette.foreground_muted,
        button_rest=palette.button_rest,
        button_hover=highlight,
        avatar_rest=palette.avatar_rest,
        avatar_hover=highlight,
        tile_rest=palette.tile_rest,
        tile_hover=highlight,
    )


def fluent_theme_for(mode: DisplayMode) -> FluentTheme:
    return FLUENT_THEMES[mode]


# ======================================================================
# Stylesheet
# ======================================================================

def build_stylesheet(style: StyleTable) -> str:
    """Renders a StyleTable into QSS for the home screen widgets."""
    return f"""
QWidget#HomeScreen {{
    background-color: {style.background};
}}
QLabel {{
    color: {style.foreground};
    background: transparent;
}}
QLabel#StatusText, QLabel#GameCaption {{
    color: {style.foreground_muted};
}}
QFrame#PlayerAvatar {{
    background-color: {style.avatar_rest};
    border: 3px solid {style.avatar_rest};
    border-radius: 40px;
}}
QFrame#PlayerAvatar:hover, QFrame#PlayerAvatar[selected="true"] {{
    border: 3px solid {style.avatar_hover};
}}
QFrame#GameTile {{
    background-color: {style.tile_rest};
    border: 4px solid {style.tile_rest};
    border-radius: 4px;
}}
QFrame#GameTile:hover, QFrame#GameTile[selected="true"] {{
    border: 4px solid {style.tile_hover};
}}
QFrame#QuickAction {{
    background-color: {style.button_rest};
    border: 3px solid {style.button_rest};
    border-radius: 28px;
}}
QFrame#QuickAction:hover {{
    border: 3px solid {style.button_hover};
}}
"""
