"""Rectangle and circle tests shared by every entity."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Iterable, Protocol

from ..entities_constants import HIT_TOLERANCE
from .obstacles import Bush, Fence, Obstacle


class RectLike(Protocol):
    x: float
    y: float
    width: float
    height: float


class CircleLike(Protocol):
    x: float
    y: float
    radius: float


@dataclass(frozen=True)
class Box:
    x: float
    y: float
    width: float
    height: float


def bounding_box(x: float, y: float, radius: float) -> Box:
    """Square of side ``2 * radius`` centered on ``(x, y)``."""
    return Box(x - radius, y - radius, radius * 2, radius * 2)


def rects_overlap(a: RectLike, b: RectLike) -> bool:
    """Return True when both rectangles share positive area."""
    return (
        a.x < b.x + b.width
        and a.x + a.width > b.x
        and a.y < b.y + b.height
        and a.y + a.height > b.y
    )


def entity_blocked_by_fence(
    entity: CircleLike,
    next_x: float,
    next_y: float,
    obstacles: Iterable[Obstacle],
) -> bool:
    box = bounding_box(next_x, next_y, entity.radius)
    for obstacle in obstacles:
        if isinstance(obstacle, Fence) and rects_overlap(box, obstacle):
            return True
    return False


def point_in_bush(entity: CircleLike, obstacles: Iterable[Obstacle]) -> bool:
    center = Box(entity.x, entity.y, 1, 1)
    for obstacle in obstacles:
        if isinstance(obstacle, Bush) and rects_overlap(center, obstacle):
            return True
    return False


def circles_overlap(
    a: CircleLike, b: CircleLike, *, tolerance: float = HIT_TOLERANCE
) -> bool:
    dist = math.hypot(a.x - b.x, a.y - b.y)
    return dist - a.radius - b.radius < tolerance


def resolve_fence_move(
    entity: CircleLike,
    dx: float,
    dy: float,
    obstacles: Iterable[Obstacle],
) -> tuple[float, float]:
    """Return the position reached by moving ``entity`` by ``(dx, dy)``.

    Each axis is tried separately so a blocked entity slides along the fence
    instead of stopping dead. X is tested first, then Y using the resolved X,
    then X once more so diagonal approaches onto a corner do not clip it.
    """
    walls = [obstacle for obstacle in obstacles if isinstance(obstacle, Fence)]
    target_x = entity.x + dx
    target_y = entity.y + dy

    if entity_blocked_by_fence(entity, target_x, entity.y, walls):
        target_x = entity.x
    if entity_blocked_by_fence(entity, target_x, target_y, walls):
        target_y = entity.y
    if target_x != entity.x and entity_blocked_by_fence(
        entity, target_x, target_y, walls
    ):
        target_x = entity.x
    return target_x, target_y


def outside_bounds(entity: CircleLike, width: float, height: float) -> bool:
    """True once the whole circle has left the ``width`` x ``height`` field."""
    return (
        entity.x + entity.radius < 0
        or entity.x - entity.radius > width
        or entity.y + entity.radius < 0
        or entity.y - entity.radius > height
    )


__all__ = [
    "Box",
    "bounding_box",
    "circles_overlap",
    "entity_blocked_by_fence",
    "outside_bounds",
    "point_in_bush",
    "rects_overlap",
    "resolve_fence_move",
]
