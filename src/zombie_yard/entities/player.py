"""Player entity logic."""

from __future__ import annotations

import math
from typing import Iterable

try:
    from typing import Self
except ImportError:  # pragma: no cover - Python 3.10 fallback
    from typing_extensions import Self

import pygame

from ..colors import PLAYER_COLOR
from ..entities_constants import (
    PLAYER_BARREL_LENGTH_RATIO,
    PLAYER_RADIUS,
    PLAYER_SPEED,
)
from ..models import EntityView, InputState
from .collisions import resolve_fence_move
from .obstacles import Obstacle


class Player(pygame.sprite.Sprite):
    def __init__(
        self: Self,
        x: float,
        y: float,
        *,
        radius: float = PLAYER_RADIUS,
        speed: float = PLAYER_SPEED,
    ) -> None:
        super().__init__()
        self.radius = radius
        self.speed = speed
        self.color = PLAYER_COLOR
        self.angle = 0.0
        self.x = float(x)
        self.y = float(y)
        size = int(radius * 2)
        self.rect = pygame.Rect(0, 0, size, size)
        self.rect.center = (int(self.x), int(self.y))

    def aim(self: Self, pointer: tuple[float, float]) -> float:
        """Face the pointer and return the new facing angle."""
        self.angle = math.atan2(pointer[1] - self.y, pointer[0] - self.x)
        return self.angle

    def muzzle_position(self: Self) -> tuple[float, float]:
        barrel = self.radius * PLAYER_BARREL_LENGTH_RATIO
        return (
            self.x + math.cos(self.angle) * barrel,
            self.y + math.sin(self.angle) * barrel,
        )

    def update(
        self: Self,
        input_state: InputState,
        obstacles: Iterable[Obstacle],
        *,
        bounds: tuple[int, int],
    ) -> None:
        self.aim(input_state.pointer)

        dir_x, dir_y = input_state.move_vector()
        dx = dir_x * self.speed
        dy = dir_y * self.speed
        if dx or dy:
            self.x, self.y = resolve_fence_move(self, dx, dy, obstacles)

        width, height = bounds
        self.x = max(self.radius, min(width - self.radius, self.x))
        self.y = max(self.radius, min(height - self.radius, self.y))
        self.rect.center = (int(self.x), int(self.y))

    def view(self: Self) -> EntityView:
        return EntityView(self.x, self.y, self.radius, self.color, angle=self.angle)
