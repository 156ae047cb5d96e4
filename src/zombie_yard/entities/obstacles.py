"""Static fences and bushes of the yard."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Literal, Union

import pygame


@dataclass(frozen=True)
class Fence:
    """Blocks the player, zombies and bullets."""

    x: float
    y: float
    width: float
    height: float
    kind: Literal["fence"] = "fence"

    @property
    def rect(self) -> pygame.Rect:
        return pygame.Rect(int(self.x), int(self.y), int(self.width), int(self.height))


@dataclass(frozen=True)
class Bush:
    """Conceals zombies standing in it; never blocks movement."""

    x: float
    y: float
    width: float
    height: float
    kind: Literal["bush"] = "bush"

    @property
    def rect(self) -> pygame.Rect:
        return pygame.Rect(int(self.x), int(self.y), int(self.width), int(self.height))


Obstacle = Union[Fence, Bush]


def build_obstacles(canvas_width: float, canvas_height: float) -> list[Obstacle]:
    """Return the yard layout: five fences forming chokepoints and four bushes."""
    fences: list[Obstacle] = [
        Fence(100, 150, 150, 20),
        Fence(canvas_width - 250, canvas_height - 170, 150, 20),
        Fence(canvas_width / 2 - 10, 50, 20, 100),
        Fence(canvas_width / 2 - 10, canvas_height - 150, 20, 100),
        Fence(200, canvas_height / 2 - 10, 100, 20),
    ]
    bushes: list[Obstacle] = [
        Bush(200, canvas_height - 100, 100, 80),
        Bush(canvas_width - 300, 80, 120, 60),
        Bush(50, canvas_height / 2 - 40, 80, 80),
        Bush(canvas_width - 150, canvas_height / 2 - 50, 100, 100),
    ]
    return fences + bushes


__all__ = [
    "Bush",
    "Fence",
    "Obstacle",
    "build_obstacles",
]
