from __future__ import annotations

import pygame

from ..entities import MissilePickup, Obstacle, Player, build_obstacles
from ..entities.collisions import entity_blocked_by_fence
from ..entities_constants import (
    PLAYER_PLACEMENT_ATTEMPTS,
    PLAYER_PLACEMENT_STEP,
    PLAYER_RADIUS,
)
from ..gameplay_constants import ZOMBIE_SPAWN_INTERVAL_MS
from ..models import GameSession


def find_player_start(
    obstacles: list[Obstacle],
    canvas_size: tuple[int, int],
    *,
    radius: float = PLAYER_RADIUS,
    attempts: int = PLAYER_PLACEMENT_ATTEMPTS,
) -> tuple[float, float]:
    """Pick a start point near the center that is clear of every fence.

    Falls back to the exact center when every attempt collides; the game
    never refuses to start.
    """
    center_x = canvas_size[0] / 2
    center_y = canvas_size[1] / 2
    x, y = center_x, center_y
    probe = Player(x, y, radius=radius)
    for _ in range(attempts):
        if not entity_blocked_by_fence(probe, x, y, obstacles):
            return x, y
        print(f"Player start ({x:.0f}, {y:.0f}) hits a fence, shifting.")
        x += PLAYER_PLACEMENT_STEP[0]
        y += PLAYER_PLACEMENT_STEP[1]
    print("Could not place the player clear of fences; using the canvas center.")
    return center_x, center_y


def initialize_session(canvas_size: tuple[int, int], now_ms: float) -> GameSession:
    """Build a fresh session: new yard, new player, empty entity groups."""
    obstacles = build_obstacles(canvas_size[0], canvas_size[1])
    start_x, start_y = find_player_start(obstacles, canvas_size)
    return GameSession(
        player=Player(start_x, start_y),
        obstacles=obstacles,
        missile=MissilePickup(now_ms=now_ms),
        bullets=pygame.sprite.Group(),
        zombies=pygame.sprite.Group(),
        canvas_size=canvas_size,
        score=0,
        zombie_spawn_interval_ms=ZOMBIE_SPAWN_INTERVAL_MS,
        last_zombie_spawn_ms=now_ms,
    )


def rebase_spawn_timers(session: GameSession, now_ms: float) -> None:
    """Restart the zombie and missile timers from ``now_ms``."""
    session.last_zombie_spawn_ms = now_ms
    session.missile.last_spawn_ms = now_ms


__all__ = ["find_player_start", "initialize_session", "rebase_spawn_timers"]
