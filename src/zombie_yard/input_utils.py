from __future__ import annotations

from typing import TYPE_CHECKING, Callable

import pygame

from .models import MoveDirection

if TYPE_CHECKING:  # pragma: no cover - typing-only imports
    from .gameplay import Game

MOVE_KEYS: dict[int, MoveDirection] = {
    pygame.K_w: MoveDirection.UP,
    pygame.K_UP: MoveDirection.UP,
    pygame.K_s: MoveDirection.DOWN,
    pygame.K_DOWN: MoveDirection.DOWN,
    pygame.K_a: MoveDirection.LEFT,
    pygame.K_LEFT: MoveDirection.LEFT,
    pygame.K_d: MoveDirection.RIGHT,
    pygame.K_RIGHT: MoveDirection.RIGHT,
}
PAUSE_KEYS = (pygame.K_ESCAPE,)
RESTART_KEYS = (pygame.K_r, pygame.K_RETURN, pygame.K_KP_ENTER)
FIRE_BUTTON = 1

PointMapper = Callable[[tuple[int, int]], tuple[float, float]]


def direction_for_key(key: int) -> MoveDirection | None:
    return MOVE_KEYS.get(key)


def _identity(pos: tuple[int, int]) -> tuple[float, float]:
    return float(pos[0]), float(pos[1])


def dispatch_event(
    game: Game, event: pygame.event.Event, *, to_logical: PointMapper = _identity
) -> None:
    """Translate one pygame event into game commands."""
    if event.type == pygame.KEYDOWN:
        if event.key in PAUSE_KEYS:
            game.toggle_pause()
            return
        if event.key in RESTART_KEYS:
            game.restart()
            return
        direction = direction_for_key(event.key)
        if direction is not None:
            game.press(direction)
        return
    if event.type == pygame.KEYUP:
        direction = direction_for_key(event.key)
        if direction is not None:
            game.release(direction)
        return
    if event.type == pygame.MOUSEMOTION:
        game.point_at(to_logical(event.pos))
        return
    if event.type == pygame.MOUSEBUTTONDOWN and event.button == FIRE_BUTTON:
        game.point_at(to_logical(event.pos))
        if not game.restart():
            game.fire()


__all__ = [
    "FIRE_BUTTON",
    "MOVE_KEYS",
    "PAUSE_KEYS",
    "RESTART_KEYS",
    "direction_for_key",
    "dispatch_event",
]
