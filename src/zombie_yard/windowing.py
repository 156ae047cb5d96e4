from __future__ import annotations

import pygame
from pygame import surface

from .screen_constants import (
    DEFAULT_WINDOW_SCALE,
    SCREEN_HEIGHT,
    SCREEN_WIDTH,
    WINDOW_SCALE_MAX,
    WINDOW_SCALE_MIN,
)

current_window_scale = DEFAULT_WINDOW_SCALE


def _window_size(scale: float) -> tuple[int, int]:
    return (
        max(1, int(SCREEN_WIDTH * scale)),
        max(1, int(SCREEN_HEIGHT * scale)),
    )


def apply_window_scale(scale: float) -> surface.Surface:
    """Open (or resize) the OS window at ``scale`` times the logical canvas."""
    global current_window_scale
    clamped = max(WINDOW_SCALE_MIN, min(WINDOW_SCALE_MAX, scale))
    current_window_scale = clamped
    window = pygame.display.set_mode(_window_size(clamped))
    pygame.display.set_caption("Zombie Yard")
    return window


def window_to_logical(pos: tuple[int, int]) -> tuple[float, float]:
    """Map a window pixel position onto canvas coordinates."""
    scale = current_window_scale or 1.0
    return pos[0] / scale, pos[1] / scale


def present(logical_surface: surface.Surface) -> None:
    """Scale the logical canvas into the window and flip."""
    window = pygame.display.get_surface()
    if window is None:
        return
    if window.get_size() == logical_surface.get_size():
        window.blit(logical_surface, (0, 0))
    else:
        pygame.transform.scale(logical_surface, window.get_size(), window)
    pygame.display.flip()


__all__ = ["apply_window_scale", "present", "window_to_logical"]
