"""Gameplay helpers and logic utilities."""

# ruff: noqa: F401

from .interactions import (
    CollisionReport,
    clear_all_zombies,
    collect_missile,
    player_caught,
    remove_blocked_bullets,
    resolve_bullet_hits,
    resolve_collisions,
)
from .logic import Game
from .scheduler import FrameHost, FrameScheduler, PygameFrameHost
from .spawn import (
    find_missile_position,
    find_zombie_spawn_position,
    maybe_spawn_missile,
    maybe_spawn_zombie,
    spawn_zombie,
    tighten_zombie_spawn_interval,
)
from .state import find_player_start, initialize_session, rebase_spawn_timers

__all__ = [
    "CollisionReport",
    "FrameHost",
    "FrameScheduler",
    "Game",
    "PygameFrameHost",
    "clear_all_zombies",
    "collect_missile",
    "find_missile_position",
    "find_player_start",
    "find_zombie_spawn_position",
    "initialize_session",
    "maybe_spawn_missile",
    "maybe_spawn_zombie",
    "player_caught",
    "rebase_spawn_timers",
    "remove_blocked_bullets",
    "resolve_bullet_hits",
    "resolve_collisions",
    "spawn_zombie",
    "tighten_zombie_spawn_interval",
]
