"""Entity sizes, speeds and behaviour tuning."""

from __future__ import annotations

import math

# --- Player ---
PLAYER_RADIUS = 15
PLAYER_SPEED = 3.0
PLAYER_BARREL_LENGTH_RATIO = 1.5  # Barrel (and muzzle) length per radius
PLAYER_PLACEMENT_ATTEMPTS = 10
PLAYER_PLACEMENT_STEP = (25, 10)

# --- Bullet ---
BULLET_RADIUS = 5
BULLET_SPEED = 5.0

# --- Zombie ---
ZOMBIE_MIN_RADIUS = 10.0
ZOMBIE_MAX_RADIUS = 20.0
ZOMBIE_MIN_SPEED = 0.5
ZOMBIE_MAX_SPEED = 1.5
ZOMBIE_ANGLE_UPDATE_MIN_MS = 300.0
ZOMBIE_ANGLE_UPDATE_SPREAD_MS = 200.0
ZOMBIE_MAX_ANGLE_DEVIATION = math.pi / 12  # 15 degrees
ZOMBIE_MOVE_CHANCE = 0.98
ZOMBIE_BUSH_ALPHA = 0.3

# --- Zombie groan falloff ---
ZOMBIE_MAX_VOLUME = 0.3
ZOMBIE_MAX_HEARING_DISTANCE = 400.0
ZOMBIE_FULL_VOLUME_DISTANCE = 50.0
ZOMBIE_VOLUME_RAMP_SECONDS = 0.1

# --- Missile pickup ---
MISSILE_RADIUS = 12
MISSILE_SPAWN_MARGIN = 50

# --- Collision ---
HIT_TOLERANCE = 1.0

__all__ = [
    "PLAYER_RADIUS",
    "PLAYER_SPEED",
    "PLAYER_BARREL_LENGTH_RATIO",
    "PLAYER_PLACEMENT_ATTEMPTS",
    "PLAYER_PLACEMENT_STEP",
    "BULLET_RADIUS",
    "BULLET_SPEED",
    "ZOMBIE_MIN_RADIUS",
    "ZOMBIE_MAX_RADIUS",
    "ZOMBIE_MIN_SPEED",
    "ZOMBIE_MAX_SPEED",
    "ZOMBIE_ANGLE_UPDATE_MIN_MS",
    "ZOMBIE_ANGLE_UPDATE_SPREAD_MS",
    "ZOMBIE_MAX_ANGLE_DEVIATION",
    "ZOMBIE_MOVE_CHANCE",
    "ZOMBIE_BUSH_ALPHA",
    "ZOMBIE_MAX_VOLUME",
    "ZOMBIE_MAX_HEARING_DISTANCE",
    "ZOMBIE_FULL_VOLUME_DISTANCE",
    "ZOMBIE_VOLUME_RAMP_SECONDS",
    "MISSILE_RADIUS",
    "MISSILE_SPAWN_MARGIN",
    "HIT_TOLERANCE",
]
