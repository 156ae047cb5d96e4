from __future__ import annotations

import math
import weakref
from typing import TYPE_CHECKING, Iterable

try:
    from typing import Self
except ImportError:  # pragma: no cover - Python 3.10 fallback
    from typing_extensions import Self

import pygame

from ..colors import ZOMBIE_COLOR
from ..entities_constants import (
    ZOMBIE_ANGLE_UPDATE_MIN_MS,
    ZOMBIE_ANGLE_UPDATE_SPREAD_MS,
    ZOMBIE_FULL_VOLUME_DISTANCE,
    ZOMBIE_MAX_ANGLE_DEVIATION,
    ZOMBIE_MAX_HEARING_DISTANCE,
    ZOMBIE_MAX_VOLUME,
    ZOMBIE_MOVE_CHANCE,
    ZOMBIE_VOLUME_RAMP_SECONDS,
)
from ..models import EntityView
from ..rng import get_rng
from .collisions import CircleLike, point_in_bush, resolve_fence_move
from .obstacles import Obstacle

if TYPE_CHECKING:  # pragma: no cover - typing-only imports
    from ..audio import Audio, SoundHandle

RNG = get_rng()


def zombie_volume_for_distance(distance: float) -> float:
    """Groan volume heard by the player at ``distance`` from a zombie."""
    if distance >= ZOMBIE_MAX_HEARING_DISTANCE:
        return 0.0
    span = ZOMBIE_MAX_HEARING_DISTANCE - ZOMBIE_FULL_VOLUME_DISTANCE
    falloff = max(0.0, distance - ZOMBIE_FULL_VOLUME_DISTANCE) / span
    volume = ZOMBIE_MAX_VOLUME * (1 - falloff)
    return max(0.0, min(ZOMBIE_MAX_VOLUME, volume))


class Zombie(pygame.sprite.Sprite):
    def __init__(
        self: Self,
        x: float,
        y: float,
        *,
        radius: float,
        speed: float,
        angle_update_interval_ms: float | None = None,
    ) -> None:
        super().__init__()
        self.x = float(x)
        self.y = float(y)
        self.radius = radius
        self.speed = speed
        self.color = ZOMBIE_COLOR
        size = int(radius * 2)
        self.rect = pygame.Rect(0, 0, size, size)
        self.rect.center = (int(self.x), int(self.y))

        self.target_angle = 0.0
        self.last_angle_update_ms: float | None = None
        if angle_update_interval_ms is None:
            angle_update_interval_ms = (
                ZOMBIE_ANGLE_UPDATE_MIN_MS + RNG.random() * ZOMBIE_ANGLE_UPDATE_SPREAD_MS
            )
        self.angle_update_interval_ms = angle_update_interval_ms
        self.max_angle_deviation = ZOMBIE_MAX_ANGLE_DEVIATION
        self.move_chance = ZOMBIE_MOVE_CHANCE
        self._sound_ref: weakref.ref[SoundHandle] | None = None

    @property
    def sound(self: Self) -> SoundHandle | None:
        if self._sound_ref is None:
            return None
        return self._sound_ref()

    def attach_sound(self: Self, handle: SoundHandle | None) -> None:
        self._sound_ref = weakref.ref(handle) if handle is not None else None

    def stop_sound(self: Self, audio: Audio) -> None:
        handle = self.sound
        if handle is not None:
            audio.stop(handle)
        self._sound_ref = None

    def _refresh_target_angle(
        self: Self, target: CircleLike, timestamp: float
    ) -> None:
        last = self.last_angle_update_ms
        if last is not None and timestamp - last <= self.angle_update_interval_ms:
            return
        direct = math.atan2(target.y - self.y, target.x - self.x)
        offset = (RNG.random() * 2 - 1) * self.max_angle_deviation
        self.target_angle = direct + offset
        self.last_angle_update_ms = timestamp

    def update(
        self: Self,
        target: CircleLike,
        timestamp: float,
        obstacles: Iterable[Obstacle],
        *,
        audio: Audio | None = None,
    ) -> bool:
        """Advance one tick; return False when the zombie hesitated."""
        if RNG.random() > self.move_chance:
            return False

        # The angle is only refreshed periodically; in between the zombie
        # keeps walking along its stale heading.
        self._refresh_target_angle(target, timestamp)
        dx = math.cos(self.target_angle) * self.speed
        dy = math.sin(self.target_angle) * self.speed
        self.x, self.y = resolve_fence_move(self, dx, dy, obstacles)
        self.rect.center = (int(self.x), int(self.y))

        handle = self.sound
        if audio is not None and handle is not None:
            distance = math.hypot(target.x - self.x, target.y - self.y)
            audio.set_volume(
                handle,
                zombie_volume_for_distance(distance),
                ZOMBIE_VOLUME_RAMP_SECONDS,
            )
        return True

    def view(self: Self, obstacles: Iterable[Obstacle]) -> EntityView:
        return EntityView(
            self.x,
            self.y,
            self.radius,
            self.color,
            angle=self.target_angle,
            concealed=point_in_bush(self, obstacles),
        )
