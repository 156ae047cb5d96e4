from __future__ import annotations

from typing import Any

import pygame
from pygame import surface, time

from ..audio import init_audio
from ..config import shoot_volume
from ..gameplay import Game, PygameFrameHost
from ..input_utils import dispatch_event
from ..progress import HighScoreStore
from ..render import SurfacePresenter
from ..screens import ScreenID, ScreenTransition
from ..windowing import present, window_to_logical


def gameplay_screen(
    screen: surface.Surface,
    clock: time.Clock,
    config: dict[str, Any],
    fps: int,
    *,
    high_scores: HighScoreStore | None = None,
) -> ScreenTransition:
    """Main gameplay loop that returns the next screen transition."""

    canvas_size = (screen.get_width(), screen.get_height())
    show_fps = bool(config.get("debug", {}).get("show_fps", False))
    frame_host = PygameFrameHost()
    presenter = SurfacePresenter(canvas_size)
    audio = init_audio(config)
    game = Game(
        presenter=presenter,
        audio=audio,
        high_scores=high_scores or HighScoreStore(),
        frame_host=frame_host,
        canvas_size=canvas_size,
        shoot_volume=shoot_volume(config),
    )
    game.init()

    while True:
        clock.tick(fps)
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                return ScreenTransition(ScreenID.EXIT)
            dispatch_event(game, event, to_logical=window_to_logical)

        frame_host.run_pending(pygame.time.get_ticks())

        presenter.compose(screen, fps=clock.get_fps() if show_fps else None)
        present(screen)
