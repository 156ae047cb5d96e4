"""Game state machine: running, paused and game over, driven by frame callbacks."""

from __future__ import annotations

from typing import TYPE_CHECKING, Callable, Protocol

import pygame

from ..entities import Bullet
from ..gameplay_constants import DEFAULT_SHOOT_VOLUME, SHOOT_SOUND_ID
from ..models import GameSession, GameState, InputState, MoveDirection
from ..screen_constants import SCREEN_HEIGHT, SCREEN_WIDTH
from .interactions import CollisionReport, clear_all_zombies, resolve_collisions
from .scheduler import FrameHost, FrameScheduler
from .spawn import maybe_spawn_missile, maybe_spawn_zombie
from .state import initialize_session, rebase_spawn_timers

if TYPE_CHECKING:  # pragma: no cover - typing-only imports
    from ..audio import Audio
    from ..render import Presenter


class ScoreStore(Protocol):
    def load_high_score(self) -> int: ...

    def save_high_score(self, value: int) -> None: ...


class Game:
    """Owns the session and moves it between RUNNING, PAUSED and GAME_OVER."""

    def __init__(
        self,
        *,
        presenter: Presenter,
        audio: Audio,
        high_scores: ScoreStore,
        frame_host: FrameHost,
        canvas_size: tuple[int, int] = (SCREEN_WIDTH, SCREEN_HEIGHT),
        clock: Callable[[], float] = pygame.time.get_ticks,
        shoot_volume: float = DEFAULT_SHOOT_VOLUME,
    ) -> None:
        self.presenter = presenter
        self.audio = audio
        self.high_scores = high_scores
        self.scheduler = FrameScheduler(frame_host)
        self.canvas_size = canvas_size
        self.clock = clock
        self.shoot_volume = shoot_volume
        self.state = GameState.RUNNING
        self.session: GameSession | None = None
        self.input = InputState(pointer=self._canvas_center())
        self.personal_best = high_scores.load_high_score()
        self.final_score: int | None = None

    def _canvas_center(self) -> tuple[float, float]:
        return self.canvas_size[0] / 2, self.canvas_size[1] / 2

    def _require_session(self) -> GameSession:
        session = self.session
        if session is None:
            raise RuntimeError("Game.init() must be called before the game runs")
        return session

    # --- Transitions ---

    def init(self) -> None:
        """Start a fresh run, releasing everything the previous run owned."""
        now = self.clock()
        previous = self.session
        if previous is not None:
            clear_all_zombies(previous, audio=self.audio)
            previous.bullets.empty()
        self.session = initialize_session(self.canvas_size, now)
        self.input = InputState(pointer=self._canvas_center())
        self.state = GameState.RUNNING
        self.final_score = None
        self.audio.resume()
        self.presenter.show_score(0, self.personal_best)
        self.presenter.show_paused(False)
        self.presenter.show_game_over(None, self.personal_best)
        self.scheduler.arm(self._on_frame)
        print("New run started.")

    def restart(self) -> bool:
        """Restart after a game over; ignored in any other state."""
        if self.state is not GameState.GAME_OVER:
            return False
        self.init()
        return True

    def toggle_pause(self) -> GameState:
        if self.state is GameState.GAME_OVER:
            return self.state
        if self.state is GameState.RUNNING:
            self.state = GameState.PAUSED
            self.audio.suspend()
            self.presenter.show_paused(True)
        else:
            self.state = GameState.RUNNING
            # Overdue spawns must not burst out the moment play resumes.
            rebase_spawn_timers(self._require_session(), self.clock())
            self.audio.resume()
            self.presenter.show_paused(False)
        self.scheduler.arm(self._on_frame)
        return self.state

    def _game_over(self) -> None:
        session = self._require_session()
        self.state = GameState.GAME_OVER
        self.scheduler.cancel()
        final_score = session.score
        if final_score > self.personal_best:
            self.high_scores.save_high_score(final_score)
            self.personal_best = final_score
        self.final_score = final_score
        self.audio.suspend()
        self.presenter.show_game_over(final_score, self.personal_best)
        print(f"Game over. Score: {final_score}, best: {self.personal_best}")

    # --- Input ---

    def press(self, direction: MoveDirection) -> None:
        if self.state is GameState.RUNNING:
            self.input.held.add(direction)

    def release(self, direction: MoveDirection) -> None:
        self.input.held.discard(direction)

    def point_at(self, position: tuple[float, float]) -> None:
        self.input.pointer = (float(position[0]), float(position[1]))

    def fire(self) -> Bullet | None:
        if self.state is not GameState.RUNNING:
            return None
        session = self._require_session()
        bullet = Bullet.fired_by(session.player, self.input.pointer)
        session.bullets.add(bullet)
        self.audio.play(SHOOT_SOUND_ID, self.shoot_volume)
        return bullet

    # --- Frame loop ---

    def _on_frame(self, timestamp: float) -> None:
        if self.state is GameState.PAUSED:
            self.scheduler.arm(self._on_frame)
            return
        if self.state is GameState.GAME_OVER:
            return
        self.step(timestamp)
        if self.state is GameState.RUNNING:
            self.scheduler.arm(self._on_frame)

    def step(self, timestamp: float) -> CollisionReport:
        """Run one simulation tick in its fixed order."""
        session = self._require_session()
        presenter = self.presenter
        obstacles = session.obstacles
        self.audio.update(timestamp)

        presenter.clear()
        presenter.draw_obstacles(obstacles)

        maybe_spawn_missile(session, timestamp)
        if session.missile.active:
            presenter.draw_missile(session.missile.view())

        player = session.player
        player.update(self.input, obstacles, bounds=session.canvas_size)
        presenter.draw_player(player.view())

        for zombie in session.live_zombies():
            zombie.update(player, timestamp, obstacles, audio=self.audio)
            presenter.draw_zombie(zombie.view(obstacles))

        for bullet in session.live_bullets():
            bullet.update()
            presenter.draw_bullet(bullet.view())

        maybe_spawn_zombie(session, timestamp, audio=self.audio)

        score_before = session.score
        report = resolve_collisions(session, timestamp, audio=self.audio)
        if session.score != score_before:
            presenter.show_score(session.score, self.personal_best)
        if report.player_caught:
            self._game_over()
        return report


__all__ = ["Game", "ScoreStore"]
