from __future__ import annotations

from typing import TYPE_CHECKING

from ..entities import Obstacle, Zombie
from ..entities.collisions import entity_blocked_by_fence
from ..entities_constants import (
    MISSILE_SPAWN_MARGIN,
    ZOMBIE_MAX_RADIUS,
    ZOMBIE_MAX_SPEED,
    ZOMBIE_MIN_RADIUS,
    ZOMBIE_MIN_SPEED,
)
from ..gameplay_constants import (
    MISSILE_COOLDOWN_MS,
    MISSILE_SPAWN_ATTEMPTS,
    ZOMBIE_SOUND_ID,
    ZOMBIE_SPAWN_ATTEMPTS,
    ZOMBIE_SPAWN_INTERVAL_DECAY,
    ZOMBIE_SPAWN_INTERVAL_FLOOR_MS,
)
from ..models import GameSession
from ..rng import get_rng

if TYPE_CHECKING:  # pragma: no cover - typing-only imports
    from ..audio import Audio

RNG = get_rng()

__all__ = [
    "find_missile_position",
    "find_zombie_spawn_position",
    "maybe_spawn_missile",
    "maybe_spawn_zombie",
    "pick_edge_position",
    "spawn_zombie",
    "tighten_zombie_spawn_interval",
]


class _Probe:
    """Circle stand-in used to test a candidate position against fences."""

    def __init__(self, x: float, y: float, radius: float) -> None:
        self.x = x
        self.y = y
        self.radius = radius


def pick_edge_position(
    radius: float, canvas_size: tuple[int, int]
) -> tuple[float, float]:
    """Random point just outside one of the four canvas edges."""
    width, height = canvas_size
    if RNG.random() < 0.5:
        x = RNG.random() * width
        y = -radius if RNG.random() < 0.5 else height + radius
    else:
        x = -radius if RNG.random() < 0.5 else width + radius
        y = RNG.random() * height
    return x, y


def find_zombie_spawn_position(
    obstacles: list[Obstacle],
    canvas_size: tuple[int, int],
    radius: float,
    *,
    attempts: int = ZOMBIE_SPAWN_ATTEMPTS,
) -> tuple[float, float] | None:
    for _ in range(attempts):
        x, y = pick_edge_position(radius, canvas_size)
        if not entity_blocked_by_fence(_Probe(x, y, radius), x, y, obstacles):
            return x, y
    return None


def spawn_zombie(session: GameSession, *, audio: Audio | None = None) -> Zombie | None:
    """Add one zombie on a canvas edge; return None when no clear spot exists."""
    radius = RNG.uniform(ZOMBIE_MIN_RADIUS, ZOMBIE_MAX_RADIUS)
    speed = RNG.uniform(ZOMBIE_MIN_SPEED, ZOMBIE_MAX_SPEED)
    position = find_zombie_spawn_position(
        session.obstacles, session.canvas_size, radius
    )
    if position is None:
        print("Could not find a fence-free spot for a zombie; skipping spawn.")
        return None
    zombie = Zombie(position[0], position[1], radius=radius, speed=speed)
    session.zombies.add(zombie)
    if audio is not None:
        zombie.attach_sound(audio.play(ZOMBIE_SOUND_ID, 0.0, loop=True))
    return zombie


def maybe_spawn_zombie(
    session: GameSession, now_ms: float, *, audio: Audio | None = None
) -> Zombie | None:
    """Spawn when the current interval has elapsed; the timer advances either way."""
    if now_ms - session.last_zombie_spawn_ms <= session.zombie_spawn_interval_ms:
        return None
    session.last_zombie_spawn_ms = now_ms
    return spawn_zombie(session, audio=audio)


def tighten_zombie_spawn_interval(session: GameSession) -> float:
    session.zombie_spawn_interval_ms = max(
        ZOMBIE_SPAWN_INTERVAL_FLOOR_MS,
        session.zombie_spawn_interval_ms * ZOMBIE_SPAWN_INTERVAL_DECAY,
    )
    return session.zombie_spawn_interval_ms


def find_missile_position(
    obstacles: list[Obstacle],
    canvas_size: tuple[int, int],
    radius: float,
    *,
    margin: float = MISSILE_SPAWN_MARGIN,
    attempts: int = MISSILE_SPAWN_ATTEMPTS,
) -> tuple[float, float] | None:
    width, height = canvas_size
    for _ in range(attempts):
        x = RNG.uniform(margin, width - margin)
        y = RNG.uniform(margin, height - margin)
        if not entity_blocked_by_fence(_Probe(x, y, radius), x, y, obstacles):
            return x, y
    return None


def maybe_spawn_missile(session: GameSession, now_ms: float) -> bool:
    """Place the missile once its cooldown ran out; return True when placed.

    The cooldown restarts even when no clear spot was found, so a blocked map
    retries once per cooldown instead of every tick.
    """
    missile = session.missile
    if missile.active:
        return False
    if now_ms - missile.last_spawn_ms <= MISSILE_COOLDOWN_MS:
        return False
    missile.last_spawn_ms = now_ms
    position = find_missile_position(
        session.obstacles, session.canvas_size, missile.radius
    )
    if position is None:
        print("Could not find a fence-free spot for the missile; skipping spawn.")
        return False
    missile.place(*position)
    return True
