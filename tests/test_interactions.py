import pytest

from zombie_yard.entities import Bullet, Zombie
from zombie_yard.gameplay.interactions import (
    clear_all_zombies,
    player_caught,
    resolve_collisions,
)
from zombie_yard.gameplay.state import initialize_session


def _session():
    return initialize_session((800, 600), 0.0)


def _add_zombie(session, x: float, y: float, *, radius: float = 10) -> Zombie:
    zombie = Zombie(x, y, radius=radius, speed=0.0, angle_update_interval_ms=400)
    session.zombies.add(zombie)
    return zombie


def _add_bullet(session, x: float, y: float) -> Bullet:
    bullet = Bullet(x, y, (0.0, 0.0))
    session.bullets.add(bullet)
    return bullet


def test_bullet_kills_zombie_and_scores() -> None:
    session = _session()
    zombie = _add_zombie(session, 600, 380)
    bullet = _add_bullet(session, 600, 395)

    report = resolve_collisions(session, 100.0)

    assert report.zombies_killed == 1
    assert not zombie.alive()
    assert not bullet.alive()
    assert session.score == 10
    assert session.zombie_spawn_interval_ms == pytest.approx(1500 * 0.995)


def test_bullet_in_fence_is_removed_before_hitting() -> None:
    session = _session()
    # Zombie standing right behind the fence at (100, 150, 150, 20).
    zombie = _add_zombie(session, 175, 160)
    bullet = _add_bullet(session, 175, 160)

    report = resolve_collisions(session, 100.0)

    assert report.bullets_blocked == 1
    assert report.zombies_killed == 0
    assert zombie.alive()
    assert not bullet.alive()
    assert session.score == 0


def test_bullet_leaving_canvas_is_removed() -> None:
    session = _session()
    _add_bullet(session, -6, 100)

    report = resolve_collisions(session, 100.0)

    assert report.bullets_blocked == 1
    assert len(session.bullets) == 0


def test_one_bullet_kills_only_one_zombie() -> None:
    session = _session()
    first = _add_zombie(session, 600, 380)
    second = _add_zombie(session, 600, 380)
    _add_bullet(session, 600, 380)

    resolve_collisions(session, 100.0)

    assert session.score == 10
    assert first.alive() != second.alive()
    assert len(session.zombies) == 1


def test_zombie_is_never_credited_twice() -> None:
    session = _session()
    _add_zombie(session, 600, 380)
    first = _add_bullet(session, 600, 380)
    second = _add_bullet(session, 600, 382)

    report = resolve_collisions(session, 100.0)

    assert report.zombies_killed == 1
    assert session.score == 10
    assert len(session.zombies) == 0
    assert first.alive() != second.alive()


def test_killed_zombie_stops_its_sound(fake_audio) -> None:
    session = _session()
    zombie = _add_zombie(session, 600, 380)
    handle = fake_audio.play("zombie", 0.0, loop=True)
    zombie.attach_sound(handle)
    _add_bullet(session, 600, 380)

    resolve_collisions(session, 100.0, audio=fake_audio)

    assert fake_audio.stopped == [handle]


def test_touching_zombie_catches_player() -> None:
    session = _session()
    player = session.player
    # Edge gap of exactly one pixel does not count.
    _add_zombie(session, player.x + player.radius + 10 + 1, player.y)
    assert not player_caught(session)

    _add_zombie(session, player.x, player.y + player.radius + 10 + 0.5)

    assert player_caught(session)
    assert resolve_collisions(session, 100.0).player_caught is True


def test_caught_player_does_not_collect_missile() -> None:
    session = _session()
    player = session.player
    session.missile.place(player.x, player.y)
    _add_zombie(session, player.x + 5, player.y)

    report = resolve_collisions(session, 100.0)

    assert report.player_caught is True
    assert report.missile_collected is False
    assert session.missile.active is True
    assert session.score == 0


def test_missile_pickup_clears_every_zombie(fake_audio) -> None:
    session = _session()
    player = session.player
    session.missile.place(player.x, player.y)
    handles = []
    for x in (50, 700, 750):
        zombie = _add_zombie(session, x, 550)
        handle = fake_audio.play("zombie", 0.0, loop=True)
        zombie.attach_sound(handle)
        handles.append(handle)

    report = resolve_collisions(session, 5000.0, audio=fake_audio)

    assert report.missile_collected is True
    assert report.zombies_cleared == 3
    assert len(session.zombies) == 0
    assert session.score == 100
    assert session.missile.active is False
    assert session.missile.last_spawn_ms == 5000.0
    assert fake_audio.stopped == handles


def test_clear_all_zombies_on_empty_yard() -> None:
    session = _session()

    assert clear_all_zombies(session) == 0
