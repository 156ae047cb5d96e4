from __future__ import annotations

import math

try:
    from typing import Self
except ImportError:  # pragma: no cover - Python 3.10 fallback
    from typing_extensions import Self

import pygame

from ..colors import BULLET_COLOR
from ..entities_constants import BULLET_RADIUS, BULLET_SPEED
from ..models import EntityView
from .player import Player


class Bullet(pygame.sprite.Sprite):
    def __init__(
        self: Self,
        x: float,
        y: float,
        velocity: tuple[float, float],
        *,
        angle: float = 0.0,
        radius: float = BULLET_RADIUS,
    ) -> None:
        super().__init__()
        self.x = float(x)
        self.y = float(y)
        self.velocity = velocity
        self.angle = angle
        self.radius = radius
        self.color = BULLET_COLOR
        size = int(radius * 2)
        self.rect = pygame.Rect(0, 0, size, size)
        self.rect.center = (int(self.x), int(self.y))

    @classmethod
    def fired_by(
        cls, player: Player, pointer: tuple[float, float], *, speed: float = BULLET_SPEED
    ) -> "Bullet":
        """Spawn a bullet at the player's muzzle heading toward ``pointer``."""
        angle = player.aim(pointer)
        x, y = player.muzzle_position()
        velocity = (math.cos(angle) * speed, math.sin(angle) * speed)
        return cls(x, y, velocity, angle=angle)

    def update(self: Self) -> None:
        self.x += self.velocity[0]
        self.y += self.velocity[1]
        self.rect.center = (int(self.x), int(self.y))

    def view(self: Self) -> EntityView:
        return EntityView(self.x, self.y, self.radius, self.color, angle=self.angle)
