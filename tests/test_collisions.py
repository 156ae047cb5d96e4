import math

import pytest

from zombie_yard.entities import Bush, Fence, Player
from zombie_yard.entities.collisions import (
    Box,
    bounding_box,
    circles_overlap,
    entity_blocked_by_fence,
    outside_bounds,
    point_in_bush,
    rects_overlap,
    resolve_fence_move,
)


class Circle:
    def __init__(self, x: float, y: float, radius: float) -> None:
        self.x = x
        self.y = y
        self.radius = radius


def test_touching_rectangles_do_not_overlap() -> None:
    assert not rects_overlap(Box(0, 0, 10, 10), Box(10, 0, 10, 10))
    assert not rects_overlap(Box(0, 0, 10, 10), Box(0, 10, 10, 10))
    assert rects_overlap(Box(0, 0, 10, 10), Box(9, 9, 10, 10))


def test_bounding_box_is_centered_square() -> None:
    assert bounding_box(50, 40, 5) == Box(45, 35, 10, 10)


def test_bushes_never_block_movement() -> None:
    entity = Circle(50, 50, 10)
    obstacles = [Bush(40, 40, 20, 20)]

    assert not entity_blocked_by_fence(entity, 50, 50, obstacles)
    assert entity_blocked_by_fence(entity, 50, 50, [Fence(40, 40, 20, 20)])


def test_point_in_bush_uses_center_only() -> None:
    bush = Bush(100, 100, 50, 50)

    assert point_in_bush(Circle(120, 120, 5), [bush])
    # Circle overlaps the bush but its center is outside.
    assert not point_in_bush(Circle(95, 120, 10), [bush])
    assert not point_in_bush(Circle(120, 120, 5), [Fence(100, 100, 50, 50)])


@pytest.mark.parametrize(
    ("distance", "expected"),
    [(20.0, True), (20.5, True), (21.0, False), (30.0, False)],
)
def test_circles_overlap_with_one_pixel_tolerance(
    distance: float, expected: bool
) -> None:
    a = Circle(0, 0, 10)
    b = Circle(distance, 0, 10)

    assert circles_overlap(a, b) is expected


def test_move_slides_along_fence_on_diagonal() -> None:
    fence = Fence(100, 150, 150, 20)
    player = Player(175, 134)
    step = 3 / math.sqrt(2)

    x, y = resolve_fence_move(player, step, step, [fence])

    assert x == pytest.approx(175 + step)
    assert y == 134
    assert not rects_overlap(bounding_box(x, y, player.radius), fence)


def test_move_blocked_on_both_axes_stays_put() -> None:
    entity = Circle(50, 50, 10)
    # Fences hugging the right and bottom sides.
    obstacles = [Fence(61, 0, 10, 200), Fence(0, 61, 200, 10)]

    assert resolve_fence_move(entity, 2, 2, obstacles) == (50, 50)


def test_outside_bounds_requires_whole_circle_to_leave() -> None:
    assert not outside_bounds(Circle(-4, 100, 5), 800, 600)
    assert outside_bounds(Circle(-6, 100, 5), 800, 600)
    assert outside_bounds(Circle(100, 606, 5), 800, 600)
    assert not outside_bounds(Circle(800, 600, 5), 800, 600)
