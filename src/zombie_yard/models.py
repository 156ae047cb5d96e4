"""Dataclasses that model session state and what the renderer sees."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from enum import Enum
from typing import TYPE_CHECKING

from pygame import sprite

from .gameplay_constants import ZOMBIE_SPAWN_INTERVAL_MS

if TYPE_CHECKING:  # pragma: no cover - typing-only imports
    from .entities import MissilePickup, Obstacle, Player


class GameState(Enum):
    RUNNING = "running"
    PAUSED = "paused"
    GAME_OVER = "game_over"


class MoveDirection(Enum):
    UP = (0, -1)
    DOWN = (0, 1)
    LEFT = (-1, 0)
    RIGHT = (1, 0)


@dataclass
class InputState:
    """Held movement directions and the latest pointer position."""

    held: set[MoveDirection] = field(default_factory=set)
    pointer: tuple[float, float] = (0.0, 0.0)

    def move_vector(self) -> tuple[float, float]:
        """Unit vector of the held directions, (0, 0) when idle."""
        move_x = sum(direction.value[0] for direction in self.held)
        move_y = sum(direction.value[1] for direction in self.held)
        magnitude = math.hypot(move_x, move_y)
        if magnitude == 0:
            return 0.0, 0.0
        return move_x / magnitude, move_y / magnitude


@dataclass(frozen=True)
class EntityView:
    """Read-only snapshot of a round entity handed to the presentation layer."""

    x: float
    y: float
    radius: float
    color: tuple[int, int, int]
    angle: float = 0.0
    concealed: bool = False


@dataclass
class GameSession:
    """Everything that lives for exactly one run, from start to game over."""

    player: Player
    obstacles: list[Obstacle]
    missile: MissilePickup
    bullets: sprite.Group
    zombies: sprite.Group
    canvas_size: tuple[int, int]
    score: int = 0
    zombie_spawn_interval_ms: float = ZOMBIE_SPAWN_INTERVAL_MS
    last_zombie_spawn_ms: float = 0.0

    def live_zombies(self) -> list:
        return [zombie for zombie in self.zombies if zombie.alive()]

    def live_bullets(self) -> list:
        return [bullet for bullet in self.bullets if bullet.alive()]


__all__ = [
    "EntityView",
    "GameSession",
    "GameState",
    "InputState",
    "MoveDirection",
]
