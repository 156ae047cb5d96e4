"""Screen and window related constants."""

from __future__ import annotations

SCREEN_WIDTH = 800  # Logical canvas width
SCREEN_HEIGHT = 600  # Logical canvas height
DEFAULT_WINDOW_SCALE = 1.0
WINDOW_SCALE_MIN = 0.5
WINDOW_SCALE_MAX = 2.0
FPS = 60
HUD_FONT_SIZE = 22
OVERLAY_FONT_SIZE = 40

__all__ = [
    "SCREEN_WIDTH",
    "SCREEN_HEIGHT",
    "DEFAULT_WINDOW_SCALE",
    "WINDOW_SCALE_MIN",
    "WINDOW_SCALE_MAX",
    "FPS",
    "HUD_FONT_SIZE",
    "OVERLAY_FONT_SIZE",
]
