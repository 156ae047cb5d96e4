"""Entity classes and the geometry they share."""

# ruff: noqa: F401

from .bullet import Bullet
from .collisions import (
    Box,
    bounding_box,
    circles_overlap,
    entity_blocked_by_fence,
    outside_bounds,
    point_in_bush,
    rects_overlap,
    resolve_fence_move,
)
from .missile import MissilePickup
from .obstacles import Bush, Fence, Obstacle, build_obstacles
from .player import Player
from .zombie import Zombie, zombie_volume_for_distance

__all__ = [
    "Box",
    "Bullet",
    "Bush",
    "Fence",
    "MissilePickup",
    "Obstacle",
    "Player",
    "Zombie",
    "bounding_box",
    "build_obstacles",
    "circles_overlap",
    "entity_blocked_by_fence",
    "outside_bounds",
    "point_in_bush",
    "rects_overlap",
    "resolve_fence_move",
    "zombie_volume_for_distance",
]
