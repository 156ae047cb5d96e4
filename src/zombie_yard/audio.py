"""Audio collaborator: playback handles, volume ramps and global pause."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Protocol

import pygame

from .config import audio_enabled
from .gameplay_constants import SHOOT_SOUND_ID

MIXER_CHANNELS = 32
MIXER_CHANNEL_GROWTH = 8
RESERVED_CHANNELS = 1


@dataclass
class VolumeRamp:
    """Linear volume transition from ``start`` to ``target``."""

    start: float
    target: float
    started_at_ms: float
    duration_ms: float

    def value_at(self, now_ms: float) -> float:
        if self.duration_ms <= 0:
            return self.target
        progress = (now_ms - self.started_at_ms) / self.duration_ms
        progress = max(0.0, min(1.0, progress))
        return self.start + (self.target - self.start) * progress

    def finished(self, now_ms: float) -> bool:
        return now_ms - self.started_at_ms >= self.duration_ms


class SoundHandle:
    """Opaque reference to one playing sound.

    Handles are owned by the audio collaborator that created them; entities
    only keep weak references and ask the collaborator to change or stop them.
    """

    def __init__(
        self,
        buffer_id: str,
        *,
        volume: float,
        loop: bool,
        channel: Any = None,
        sound: Any = None,
    ) -> None:
        self.buffer_id = buffer_id
        self.volume = volume
        self.loop = loop
        self.channel = channel
        self.sound = sound
        self.ramp: VolumeRamp | None = None


class Audio(Protocol):
    def play(
        self, buffer_id: str, volume: float = 1.0, loop: bool = False
    ) -> SoundHandle | None: ...

    def set_volume(
        self, handle: SoundHandle, value: float, ramp_seconds: float = 0.0
    ) -> None: ...

    def stop(self, handle: SoundHandle) -> None: ...

    def suspend(self) -> None: ...

    def resume(self) -> None: ...

    def update(self, now_ms: float) -> None: ...


class SilentAudio:
    """Stand-in used when audio is disabled or the mixer is unavailable."""

    suspended = False

    def play(
        self, buffer_id: str, volume: float = 1.0, loop: bool = False
    ) -> SoundHandle | None:
        return None

    def set_volume(
        self, handle: SoundHandle, value: float, ramp_seconds: float = 0.0
    ) -> None:
        return None

    def stop(self, handle: SoundHandle) -> None:
        return None

    def suspend(self) -> None:
        self.suspended = True

    def resume(self) -> None:
        self.suspended = False

    def update(self, now_ms: float) -> None:
        return None


class MixerAudio:
    """``pygame.mixer`` backed implementation of :class:`Audio`."""

    def __init__(
        self,
        buffers: dict[str, pygame.mixer.Sound],
        *,
        clock: Callable[[], float] = pygame.time.get_ticks,
        reserved: dict[str, Any] | None = None,
    ) -> None:
        self._buffers = buffers
        self._clock = clock
        # Buffers mapped to a reserved channel never compete with groan loops.
        self._reserved = reserved or {}
        self._handles: list[SoundHandle] = []
        self.suspended = False

    @property
    def active_handles(self) -> list[SoundHandle]:
        return list(self._handles)

    def play(
        self, buffer_id: str, volume: float = 1.0, loop: bool = False
    ) -> SoundHandle | None:
        if self.suspended:
            return None
        sound = self._buffers.get(buffer_id)
        if sound is None:
            return None
        try:
            channel = self._start(buffer_id, sound, -1 if loop else 0)
        except pygame.error as exc:
            print(f"Failed to play sound {buffer_id}: {exc}")
            return None
        if channel is None:
            print(f"No free mixer channel for sound {buffer_id}; dropping it.")
            return None
        channel.set_volume(volume)
        handle = SoundHandle(
            buffer_id, volume=volume, loop=loop, channel=channel, sound=sound
        )
        self._handles.append(handle)
        return handle

    def _start(self, buffer_id: str, sound: Any, loops: int) -> Any:
        reserved = self._reserved.get(buffer_id)
        if reserved is not None:
            # The previous sound on this channel is cut off; forget its handle.
            self._handles = [h for h in self._handles if h.channel is not reserved]
            reserved.play(sound, loops=loops)
            return reserved
        channel = sound.play(loops=loops)
        if channel is None:
            total = pygame.mixer.get_num_channels() + MIXER_CHANNEL_GROWTH
            print(f"All mixer channels busy; growing the pool to {total}.")
            pygame.mixer.set_num_channels(total)
            channel = sound.play(loops=loops)
        return channel

    def set_volume(
        self, handle: SoundHandle, value: float, ramp_seconds: float = 0.0
    ) -> None:
        if handle not in self._handles:
            return
        now = self._clock()
        handle.ramp = VolumeRamp(
            start=handle.volume,
            target=value,
            started_at_ms=now,
            duration_ms=max(0.0, ramp_seconds * 1000.0),
        )
        if handle.ramp.duration_ms <= 0:
            self._apply_volume(handle, value)
            handle.ramp = None

    def stop(self, handle: SoundHandle) -> None:
        if handle in self._handles:
            self._handles.remove(handle)
        if handle.channel is not None and handle.channel.get_sound() is handle.sound:
            handle.channel.stop()
        handle.channel = None
        handle.ramp = None

    def suspend(self) -> None:
        if not self.suspended:
            pygame.mixer.pause()
            self.suspended = True

    def resume(self) -> None:
        if self.suspended:
            pygame.mixer.unpause()
            self.suspended = False

    def update(self, now_ms: float) -> None:
        """Advance volume ramps and forget handles whose sound has ended."""
        if self.suspended:
            return
        for handle in list(self._handles):
            channel = handle.channel
            if channel is None or channel.get_sound() is not handle.sound:
                self._handles.remove(handle)
                continue
            ramp = handle.ramp
            if ramp is None:
                continue
            self._apply_volume(handle, ramp.value_at(now_ms))
            if ramp.finished(now_ms):
                handle.ramp = None

    def _apply_volume(self, handle: SoundHandle, value: float) -> None:
        handle.volume = value
        if handle.channel is not None:
            handle.channel.set_volume(value)


def init_audio(config: dict[str, Any]) -> Audio:
    """Build the audio collaborator, degrading to silence on any failure."""
    if not audio_enabled(config):
        return SilentAudio()
    try:
        if pygame.mixer.get_init() is None:
            pygame.mixer.init()
        pygame.mixer.set_num_channels(MIXER_CHANNELS)
        pygame.mixer.set_reserved(RESERVED_CHANNELS)
        shoot_channel = pygame.mixer.Channel(0)
        from .sound_assets import build_sound_buffers

        buffers = build_sound_buffers()
    except Exception as exc:  # noqa: BLE001
        print(f"Audio unavailable, continuing without sound: {exc}")
        return SilentAudio()
    return MixerAudio(buffers, reserved={SHOOT_SOUND_ID: shoot_channel})


__all__ = [
    "Audio",
    "MixerAudio",
    "SilentAudio",
    "SoundHandle",
    "VolumeRamp",
    "init_audio",
]
