from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from ..entities import Zombie
from ..entities.collisions import circles_overlap, entity_blocked_by_fence, outside_bounds
from ..gameplay_constants import MISSILE_PICKUP_SCORE, ZOMBIE_KILL_SCORE
from ..models import GameSession
from .spawn import tighten_zombie_spawn_interval

if TYPE_CHECKING:  # pragma: no cover - typing-only imports
    from ..audio import Audio


@dataclass
class CollisionReport:
    """What happened during one resolution pass."""

    bullets_blocked: int = 0
    zombies_killed: int = 0
    missile_collected: bool = False
    zombies_cleared: int = 0
    player_caught: bool = False


def remove_blocked_bullets(session: GameSession) -> int:
    """Drop bullets that sit in a fence or left the canvas."""
    width, height = session.canvas_size
    removed = 0
    for bullet in session.live_bullets():
        if entity_blocked_by_fence(
            bullet, bullet.x, bullet.y, session.obstacles
        ) or outside_bounds(bullet, width, height):
            bullet.kill()
            removed += 1
    return removed


def _kill_zombie(zombie: Zombie, audio: Audio | None) -> None:
    if audio is not None:
        zombie.stop_sound(audio)
    zombie.kill()


def resolve_bullet_hits(session: GameSession, *, audio: Audio | None = None) -> int:
    """Each bullet kills at most the first live zombie it touches."""
    kills = 0
    for bullet in session.live_bullets():
        for zombie in session.zombies.sprites():
            # A zombie killed earlier in this pass cannot be credited twice.
            if not zombie.alive():
                continue
            if circles_overlap(bullet, zombie):
                _kill_zombie(zombie, audio)
                bullet.kill()
                session.score += ZOMBIE_KILL_SCORE
                tighten_zombie_spawn_interval(session)
                kills += 1
                break
    return kills


def player_caught(session: GameSession) -> bool:
    player = session.player
    return any(circles_overlap(player, zombie) for zombie in session.live_zombies())


def clear_all_zombies(session: GameSession, *, audio: Audio | None = None) -> int:
    """Stop every zombie's sound, then empty the group."""
    zombies = session.live_zombies()
    for zombie in zombies:
        _kill_zombie(zombie, audio)
    session.zombies.empty()
    return len(zombies)


def collect_missile(
    session: GameSession, now_ms: float, *, audio: Audio | None = None
) -> int | None:
    """Pick up the missile if touched; return how many zombies it cleared."""
    missile = session.missile
    if not missile.active or not circles_overlap(session.player, missile):
        return None
    missile.deactivate(now_ms)
    session.score += MISSILE_PICKUP_SCORE
    return clear_all_zombies(session, audio=audio)


def resolve_collisions(
    session: GameSession, now_ms: float, *, audio: Audio | None = None
) -> CollisionReport:
    """Adjudicate one tick of contacts.

    Order matters: bullets inside fences are removed before they can hit a
    zombie behind the fence, and a caught player ends the pass before the
    missile can be collected.
    """
    report = CollisionReport()
    report.bullets_blocked = remove_blocked_bullets(session)
    report.zombies_killed = resolve_bullet_hits(session, audio=audio)
    if player_caught(session):
        report.player_caught = True
        return report
    cleared = collect_missile(session, now_ms, audio=audio)
    if cleared is not None:
        report.missile_collected = True
        report.zombies_cleared = cleared
    return report


__all__ = [
    "CollisionReport",
    "clear_all_zombies",
    "collect_missile",
    "player_caught",
    "remove_blocked_bullets",
    "resolve_bullet_hits",
    "resolve_collisions",
]
