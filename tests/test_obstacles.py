from zombie_yard.entities import Bush, Fence, Player, build_obstacles
from zombie_yard.entities.collisions import entity_blocked_by_fence
from zombie_yard.gameplay.state import find_player_start, initialize_session


def test_layout_has_five_fences_and_four_bushes() -> None:
    obstacles = build_obstacles(800, 600)

    fences = [o for o in obstacles if isinstance(o, Fence)]
    bushes = [o for o in obstacles if isinstance(o, Bush)]
    assert len(fences) == 5
    assert len(bushes) == 4
    assert Fence(390, 50, 20, 100) in fences
    assert Fence(550, 430, 150, 20) in fences
    assert Bush(650, 250, 100, 100) in bushes


def test_layout_is_identical_between_runs() -> None:
    assert build_obstacles(800, 600) == build_obstacles(800, 600)


def test_layout_follows_canvas_size() -> None:
    fences = [o for o in build_obstacles(1000, 800) if isinstance(o, Fence)]

    assert Fence(490, 650, 20, 100) in fences


def test_player_starts_at_center_when_clear() -> None:
    obstacles = build_obstacles(800, 600)

    assert find_player_start(obstacles, (800, 600)) == (400, 300)


def test_player_start_shifts_away_from_fence() -> None:
    obstacles = [Fence(390, 290, 20, 20)]

    x, y = find_player_start(obstacles, (800, 600))

    assert (x, y) == (425, 310)
    assert not entity_blocked_by_fence(Player(x, y), x, y, obstacles)


def test_player_start_falls_back_to_center(capsys) -> None:
    obstacles = [Fence(0, 0, 800, 600)]

    assert find_player_start(obstacles, (800, 600)) == (400, 300)
    assert "canvas center" in capsys.readouterr().out


def test_initialize_session_is_empty() -> None:
    session = initialize_session((800, 600), 1234.0)

    assert session.score == 0
    assert len(session.zombies) == 0
    assert len(session.bullets) == 0
    assert session.missile.active is False
    assert session.missile.last_spawn_ms == 1234.0
    assert session.last_zombie_spawn_ms == 1234.0
    assert session.zombie_spawn_interval_ms == 1500
