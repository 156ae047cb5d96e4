"""The rare missile pickup that wipes every zombie off the yard."""

from __future__ import annotations

try:
    from typing import Self
except ImportError:  # pragma: no cover - Python 3.10 fallback
    from typing_extensions import Self

import pygame

from ..colors import MISSILE_COLOR
from ..entities_constants import MISSILE_RADIUS
from ..models import EntityView


class MissilePickup(pygame.sprite.Sprite):
    """Singleton slot: placed when the cooldown expires, emptied on pickup."""

    def __init__(self: Self, *, radius: float = MISSILE_RADIUS, now_ms: float = 0.0) -> None:
        super().__init__()
        self.radius = radius
        self.color = MISSILE_COLOR
        self.x = 0.0
        self.y = 0.0
        self.active = False
        self.last_spawn_ms = float(now_ms)
        size = int(radius * 2)
        self.rect = pygame.Rect(0, 0, size, size)

    def place(self: Self, x: float, y: float) -> None:
        self.x = float(x)
        self.y = float(y)
        self.rect.center = (int(self.x), int(self.y))
        self.active = True

    def deactivate(self: Self, now_ms: float) -> None:
        self.active = False
        self.last_spawn_ms = float(now_ms)

    def view(self: Self) -> EntityView:
        return EntityView(self.x, self.y, self.radius, self.color)
