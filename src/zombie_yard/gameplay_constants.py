"""Gameplay-related constants."""

from __future__ import annotations

# --- Zombie spawning ---
ZOMBIE_SPAWN_INTERVAL_MS = 1500.0
ZOMBIE_SPAWN_INTERVAL_FLOOR_MS = 250.0
ZOMBIE_SPAWN_INTERVAL_DECAY = 0.995  # Applied per kill
ZOMBIE_SPAWN_ATTEMPTS = 50

# --- Missile pickup ---
MISSILE_COOLDOWN_MS = 60_000
MISSILE_SPAWN_ATTEMPTS = 50

# --- Scoring ---
ZOMBIE_KILL_SCORE = 10
MISSILE_PICKUP_SCORE = 100

# --- Audio ---
SHOOT_SOUND_ID = "shoot"
ZOMBIE_SOUND_ID = "zombie"
DEFAULT_SHOOT_VOLUME = 0.4

__all__ = [
    "ZOMBIE_SPAWN_INTERVAL_MS",
    "ZOMBIE_SPAWN_INTERVAL_FLOOR_MS",
    "ZOMBIE_SPAWN_INTERVAL_DECAY",
    "ZOMBIE_SPAWN_ATTEMPTS",
    "MISSILE_COOLDOWN_MS",
    "MISSILE_SPAWN_ATTEMPTS",
    "ZOMBIE_KILL_SCORE",
    "MISSILE_PICKUP_SCORE",
    "SHOOT_SOUND_ID",
    "ZOMBIE_SOUND_ID",
    "DEFAULT_SHOOT_VOLUME",
]
