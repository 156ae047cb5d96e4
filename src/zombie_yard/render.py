"""Presentation layer: draws entity snapshots onto pygame surfaces."""

from __future__ import annotations

import math
from typing import Iterable, Protocol

import pygame
from pygame import surface

from .colors import (
    BARREL_COLOR,
    BUSH_COLOR,
    FENCE_COLOR,
    GROUND_COLOR,
    LIGHT_GRAY,
    MISSILE_FIN_COLOR,
    OVERLAY_COLOR,
    RED,
    WHITE,
    YELLOW,
)
from .entities import Fence, Obstacle
from .entities_constants import PLAYER_BARREL_LENGTH_RATIO, ZOMBIE_BUSH_ALPHA
from .models import EntityView
from .screen_constants import HUD_FONT_SIZE, OVERLAY_FONT_SIZE

_FONT_CACHE: dict[int, pygame.font.Font] = {}


class Presenter(Protocol):
    """Everything the simulation asks of the presentation layer."""

    def clear(self) -> None: ...

    def draw_obstacles(self, obstacles: Iterable[Obstacle]) -> None: ...

    def draw_missile(self, view: EntityView) -> None: ...

    def draw_player(self, view: EntityView) -> None: ...

    def draw_zombie(self, view: EntityView) -> None: ...

    def draw_bullet(self, view: EntityView) -> None: ...

    def show_score(self, score: int, best: int) -> None: ...

    def show_paused(self, paused: bool) -> None: ...

    def show_game_over(self, final_score: int | None, best: int) -> None: ...


def _load_font(size: int) -> pygame.font.Font:
    font = _FONT_CACHE.get(size)
    if font is None:
        font = pygame.font.Font(None, size)
        _FONT_CACHE[size] = font
    return font


def _center(view: EntityView) -> tuple[int, int]:
    return int(round(view.x)), int(round(view.y))


def show_message(
    screen: surface.Surface,
    text: str,
    size: int,
    color: tuple[int, int, int],
    position: tuple[int, int],
) -> None:
    try:
        font = _load_font(size)
        text_surface = font.render(text, True, color)
        text_rect = text_surface.get_rect(center=position)
        screen.blit(text_surface, text_rect)
    except pygame.error as e:
        print(f"Error rendering font or surface: {e}")


class SurfacePresenter:
    """Draws onto an offscreen world surface and composes HUD overlays."""

    def __init__(self, canvas_size: tuple[int, int]) -> None:
        self.canvas_size = canvas_size
        self.world = pygame.Surface(canvas_size)
        self.world.fill(GROUND_COLOR)
        self.score = 0
        self.best = 0
        self.paused = False
        self.final_score: int | None = None

    def clear(self) -> None:
        self.world.fill(GROUND_COLOR)

    def draw_obstacles(self, obstacles: Iterable[Obstacle]) -> None:
        for obstacle in obstacles:
            color = FENCE_COLOR if isinstance(obstacle, Fence) else BUSH_COLOR
            pygame.draw.rect(self.world, color, obstacle.rect)

    def draw_missile(self, view: EntityView) -> None:
        center = _center(view)
        radius = int(view.radius)
        pygame.draw.circle(self.world, view.color, center, radius)
        fin = max(2, radius // 2)
        pygame.draw.line(
            self.world,
            MISSILE_FIN_COLOR,
            (center[0] - fin, center[1]),
            (center[0] + fin, center[1]),
            2,
        )
        pygame.draw.line(
            self.world,
            MISSILE_FIN_COLOR,
            (center[0], center[1] - fin),
            (center[0], center[1] + fin),
            2,
        )

    def draw_player(self, view: EntityView) -> None:
        center = _center(view)
        pygame.draw.circle(self.world, view.color, center, int(view.radius))
        barrel = view.radius * PLAYER_BARREL_LENGTH_RATIO
        end = (
            int(round(view.x + barrel * math.cos(view.angle))),
            int(round(view.y + barrel * math.sin(view.angle))),
        )
        pygame.draw.line(self.world, BARREL_COLOR, center, end, 4)

    def draw_zombie(self, view: EntityView) -> None:
        radius = int(view.radius)
        if not view.concealed:
            pygame.draw.circle(self.world, view.color, _center(view), radius)
            return
        # Zombies hidden in a bush are drawn faded.
        ghost = pygame.Surface((radius * 2 + 2, radius * 2 + 2), pygame.SRCALPHA)
        alpha = int(255 * ZOMBIE_BUSH_ALPHA)
        pygame.draw.circle(ghost, (*view.color, alpha), (radius + 1, radius + 1), radius)
        center = _center(view)
        self.world.blit(ghost, (center[0] - radius - 1, center[1] - radius - 1))

    def draw_bullet(self, view: EntityView) -> None:
        pygame.draw.circle(self.world, view.color, _center(view), int(view.radius))

    def show_score(self, score: int, best: int) -> None:
        self.score = score
        self.best = best

    def show_paused(self, paused: bool) -> None:
        self.paused = paused

    def show_game_over(self, final_score: int | None, best: int) -> None:
        self.final_score = final_score
        self.best = best

    def compose(self, screen: surface.Surface, *, fps: float | None = None) -> None:
        """Blit the last drawn world frame plus HUD and overlays onto ``screen``."""
        screen.blit(self.world, (0, 0))
        width, height = self.canvas_size
        show_message(
            screen, f"Score: {self.score}", HUD_FONT_SIZE, WHITE, (70, 16)
        )
        show_message(
            screen, f"Best: {self.best}", HUD_FONT_SIZE, LIGHT_GRAY, (width - 70, 16)
        )
        if fps is not None:
            show_message(
                screen, f"{fps:.0f} FPS", HUD_FONT_SIZE, YELLOW, (width // 2, 16)
            )
        if self.final_score is not None:
            self._draw_overlay(screen)
            show_message(
                screen, "GAME OVER", OVERLAY_FONT_SIZE, RED, (width // 2, height // 2 - 50)
            )
            show_message(
                screen,
                f"Final score: {self.final_score}",
                HUD_FONT_SIZE,
                WHITE,
                (width // 2, height // 2),
            )
            show_message(
                screen,
                f"Personal best: {self.best}",
                HUD_FONT_SIZE,
                LIGHT_GRAY,
                (width // 2, height // 2 + 28),
            )
            show_message(
                screen,
                "Press R, Enter or click to play again",
                HUD_FONT_SIZE,
                YELLOW,
                (width // 2, height // 2 + 70),
            )
        elif self.paused:
            self._draw_overlay(screen)
            show_message(
                screen, "PAUSED", OVERLAY_FONT_SIZE, WHITE, (width // 2, height // 2)
            )

    def _draw_overlay(self, screen: surface.Surface) -> None:
        overlay = pygame.Surface(self.canvas_size, pygame.SRCALPHA)
        overlay.fill(OVERLAY_COLOR)
        screen.blit(overlay, (0, 0))


__all__ = ["Presenter", "SurfacePresenter", "show_message"]
