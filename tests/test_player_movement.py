import math

import pytest

from zombie_yard.entities import Bullet, Fence, Player
from zombie_yard.models import InputState, MoveDirection


def _input(*directions: MoveDirection, pointer=(0.0, 0.0)) -> InputState:
    return InputState(held=set(directions), pointer=pointer)


def test_diagonal_movement_is_normalized() -> None:
    player = Player(400, 300)

    player.update(
        _input(MoveDirection.UP, MoveDirection.RIGHT), [], bounds=(800, 600)
    )

    moved = math.hypot(player.x - 400, player.y - 300)
    assert moved == pytest.approx(player.speed)
    assert player.x > 400
    assert player.y < 300


def test_opposite_directions_cancel_out() -> None:
    player = Player(400, 300)

    player.update(
        _input(MoveDirection.LEFT, MoveDirection.RIGHT), [], bounds=(800, 600)
    )

    assert (player.x, player.y) == (400, 300)


def test_player_is_clamped_inside_canvas() -> None:
    player = Player(20, 20)
    state = _input(MoveDirection.UP, MoveDirection.LEFT)

    for _ in range(10):
        player.update(state, [], bounds=(800, 600))

    assert (player.x, player.y) == (15, 15)


def test_player_never_enters_fence() -> None:
    fence = Fence(100, 150, 150, 20)
    player = Player(175, 100)
    state = _input(MoveDirection.DOWN)

    for _ in range(40):
        player.update(state, [fence], bounds=(800, 600))

    assert player.y + player.radius <= fence.y


def test_player_faces_pointer_while_standing_still() -> None:
    player = Player(400, 300)

    player.update(_input(pointer=(400.0, 400.0)), [], bounds=(800, 600))

    assert player.angle == pytest.approx(math.pi / 2)
    assert (player.x, player.y) == (400, 300)


def test_bullet_leaves_from_muzzle_toward_pointer() -> None:
    player = Player(400, 300)

    bullet = Bullet.fired_by(player, (500.0, 300.0))

    assert bullet.x == pytest.approx(400 + player.radius * 1.5)
    assert bullet.y == pytest.approx(300)
    assert bullet.velocity[0] == pytest.approx(5.0)
    assert bullet.velocity[1] == pytest.approx(0.0)
    bullet.update()
    assert bullet.x == pytest.approx(400 + player.radius * 1.5 + 5.0)
