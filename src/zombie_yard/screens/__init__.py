"""Screen framework utilities for zombie_yard.

Each screen runs its own loop and returns a transition telling the entry
point what to show next.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class ScreenID(Enum):
    """Identifiers for the screens in the game."""

    GAMEPLAY = "gameplay"
    EXIT = "exit"


@dataclass(frozen=True)
class ScreenTransition:
    """Represents the next screen to display."""

    next_screen: ScreenID


__all__ = ["ScreenID", "ScreenTransition"]
