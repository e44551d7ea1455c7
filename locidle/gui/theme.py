"""Colour theme for the main window."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Palette:
    background: str
    text: str
    primary: str
    success: str
    danger: str


NIGHT_VISION = Palette(
    background="#112119",
    text="#acecb5",
    primary="#13531c",
    success="#351866",
    danger="#661821",
)

FONT_BASE = 18
FONT_MAIN = int(FONT_BASE * 1.5)
FONT_SMALL = FONT_BASE - 3
FONT_HEADER = FONT_BASE + 3
FONT_TINY = 10


def stylesheet(palette: Palette = NIGHT_VISION) -> str:
    """Qt style sheet applying *palette* to the whole application."""
    return f"""
QWidget {{
    background-color: {palette.background};
    color: {palette.text};
    font-family: monospace;
    font-size: {FONT_BASE}px;
}}
QPushButton {{
    background-color: {palette.primary};
    border: none;
    padding: 5px 10px;
}}
QPushButton:disabled {{
    background-color: {palette.background};
    border: 1px solid {palette.primary};
    color: {palette.primary};
}}
QFrame#rule {{
    background-color: {palette.text};
}}
QScrollArea {{
    border: none;
}}
"""
