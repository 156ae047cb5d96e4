"""Next-frame scheduling with a single live callback."""

from __future__ import annotations

from itertools import count
from typing import Callable, Protocol

FrameCallback = Callable[[float], None]


class FrameHost(Protocol):
    """The host's request/cancel pair for display-refresh callbacks."""

    def request_frame(self, callback: FrameCallback) -> int: ...

    def cancel_frame(self, token: int) -> None: ...


class PygameFrameHost:
    """Frame host driven by the pygame screen loop.

    Callbacks requested during a frame run on the next call to
    :meth:`run_pending`; a cancelled token never fires.
    """

    def __init__(self) -> None:
        self._tokens = count(1)
        self._pending: dict[int, FrameCallback] = {}

    @property
    def pending_count(self) -> int:
        return len(self._pending)

    def request_frame(self, callback: FrameCallback) -> int:
        token = next(self._tokens)
        self._pending[token] = callback
        return token

    def cancel_frame(self, token: int) -> None:
        self._pending.pop(token, None)

    def run_pending(self, timestamp: float) -> int:
        """Fire every callback requested before this frame; return how many ran."""
        due = list(self._pending)
        fired = 0
        for token in due:
            callback = self._pending.pop(token, None)
            if callback is None:
                continue
            callback(timestamp)
            fired += 1
        return fired


class FrameScheduler:
    """Owns at most one pending frame request at any time."""

    def __init__(self, host: FrameHost) -> None:
        self._host = host
        self._token: int | None = None

    @property
    def armed(self) -> bool:
        return self._token is not None

    def arm(self, callback: FrameCallback) -> None:
        """Cancel any pending request, then request ``callback`` for the next frame."""
        self.cancel()

        def _fire(timestamp: float) -> None:
            self._token = None
            callback(timestamp)

        self._token = self._host.request_frame(_fire)

    def cancel(self) -> None:
        if self._token is not None:
            self._host.cancel_frame(self._token)
            self._token = None


__all__ = ["FrameCallback", "FrameHost", "FrameScheduler", "PygameFrameHost"]
