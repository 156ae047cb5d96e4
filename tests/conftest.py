from types import SimpleNamespace

import pytest

from zombie_yard.audio import SoundHandle
from zombie_yard.gameplay import Game, PygameFrameHost


class RecordingPresenter:
    def __init__(self) -> None:
        self.calls: list[str] = []
        self.score = 0
        self.best = 0
        self.paused = False
        self.final_score = None
        self.zombie_views = []

    def clear(self) -> None:
        self.calls.append("clear")

    def draw_obstacles(self, obstacles) -> None:
        self.calls.append("obstacles")

    def draw_missile(self, view) -> None:
        self.calls.append("missile")

    def draw_player(self, view) -> None:
        self.calls.append("player")

    def draw_zombie(self, view) -> None:
        self.calls.append("zombie")
        self.zombie_views.append(view)

    def draw_bullet(self, view) -> None:
        self.calls.append("bullet")

    def show_score(self, score, best) -> None:
        self.score = score
        self.best = best

    def show_paused(self, paused) -> None:
        self.paused = paused

    def show_game_over(self, final_score, best) -> None:
        self.final_score = final_score
        self.best = best


class FakeAudio:
    def __init__(self) -> None:
        self.handles: list[SoundHandle] = []
        self.played: list[str] = []
        self.stopped: list[SoundHandle] = []
        self.volumes: list[tuple[SoundHandle, float, float]] = []
        self.suspended = False

    def play(self, buffer_id, volume=1.0, loop=False):
        self.played.append(buffer_id)
        handle = SoundHandle(buffer_id, volume=volume, loop=loop)
        self.handles.append(handle)
        return handle

    def set_volume(self, handle, value, ramp_seconds=0.0) -> None:
        self.volumes.append((handle, value, ramp_seconds))

    def stop(self, handle) -> None:
        self.stopped.append(handle)
        if handle in self.handles:
            self.handles.remove(handle)

    def suspend(self) -> None:
        self.suspended = True

    def resume(self) -> None:
        self.suspended = False

    def update(self, now_ms) -> None:
        pass


class MemoryScoreStore:
    def __init__(self, best: int = 0) -> None:
        self.best = best
        self.saved: list[int] = []

    def load_high_score(self) -> int:
        return self.best

    def save_high_score(self, value: int) -> None:
        self.saved.append(value)
        self.best = value


class ManualClock:
    def __init__(self) -> None:
        self.now = 0.0

    def __call__(self) -> float:
        return self.now


@pytest.fixture
def fake_audio() -> FakeAudio:
    return FakeAudio()


@pytest.fixture
def make_game():
    """Build a Game wired to recording fakes; returns a namespace of parts."""

    def _make(best: int = 0) -> SimpleNamespace:
        presenter = RecordingPresenter()
        audio = FakeAudio()
        store = MemoryScoreStore(best)
        host = PygameFrameHost()
        clock = ManualClock()
        game = Game(
            presenter=presenter,
            audio=audio,
            high_scores=store,
            frame_host=host,
            canvas_size=(800, 600),
            clock=clock,
        )
        game.init()

        def frame(timestamp: float) -> int:
            clock.now = timestamp
            return host.run_pending(timestamp)

        return SimpleNamespace(
            game=game,
            presenter=presenter,
            audio=audio,
            store=store,
            host=host,
            clock=clock,
            frame=frame,
        )

    return _make
