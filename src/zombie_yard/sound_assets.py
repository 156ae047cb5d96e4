"""Procedurally synthesized sound buffers.

The game ships without audio files: the gunshot and the zombie groan are
generated with numpy at startup and wrapped in ``pygame.mixer.Sound``
objects through ``pygame.sndarray``.
"""

from __future__ import annotations

import math

import numpy as np  # type: ignore
import pygame

from .gameplay_constants import SHOOT_SOUND_ID, ZOMBIE_SOUND_ID

SHOOT_DURATION_S = 0.12
GROAN_DURATION_S = 1.6
GROAN_BASE_HZ = 72.0
GROAN_WOBBLE_HZ = 1.25


def _mixer_format() -> tuple[int, int, int]:
    mixer_info = pygame.mixer.get_init()
    if mixer_info is None:
        raise pygame.error("mixer not initialized")
    return mixer_info


def _to_sound(wave: np.ndarray) -> pygame.mixer.Sound:
    """Convert a mono float wave in [-1, 1] to a Sound for the active mixer."""
    _, size, channels = _mixer_format()
    bits = abs(size)
    peak = float(2 ** (bits - 1) - 1)
    dtype = np.int16 if bits <= 16 else np.int32
    samples = np.clip(wave, -1.0, 1.0) * peak
    samples = samples.astype(dtype)
    if channels > 1:
        samples = np.repeat(samples[:, None], channels, axis=1)
    return pygame.sndarray.make_sound(np.ascontiguousarray(samples))


def build_shoot_wave(frequency: int) -> np.ndarray:
    """Short noise burst with a sharp exponential decay."""
    count = max(1, int(frequency * SHOOT_DURATION_S))
    t = np.arange(count) / frequency
    noise = np.random.default_rng(7).uniform(-1.0, 1.0, count)
    thump = np.sin(2 * math.pi * 110.0 * t)
    envelope = np.exp(-t * 38.0)
    return (0.7 * noise + 0.3 * thump) * envelope


def build_groan_wave(frequency: int) -> np.ndarray:
    """Low, wobbling sawtooth meant to be played on a loop."""
    count = max(1, int(frequency * GROAN_DURATION_S))
    t = np.arange(count) / frequency
    wobble = 1.0 + 0.08 * np.sin(2 * math.pi * GROAN_WOBBLE_HZ * t)
    phase = np.cumsum(GROAN_BASE_HZ * wobble) / frequency
    saw = 2.0 * (phase - np.floor(phase + 0.5))
    tremolo = 0.6 + 0.4 * np.sin(2 * math.pi * t / GROAN_DURATION_S) ** 2
    return 0.8 * saw * tremolo


def build_sound_buffers() -> dict[str, pygame.mixer.Sound]:
    frequency, _, _ = _mixer_format()
    return {
        SHOOT_SOUND_ID: _to_sound(build_shoot_wave(frequency)),
        ZOMBIE_SOUND_ID: _to_sound(build_groan_wave(frequency)),
    }


__all__ = ["build_groan_wave", "build_shoot_wave", "build_sound_buffers"]
