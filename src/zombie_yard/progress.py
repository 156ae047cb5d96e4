"""Persistence of the personal best score."""

from __future__ import annotations

import json
from pathlib import Path

from platformdirs import user_data_dir

from .config import APP_NAME


def user_high_score_path() -> Path:
    """Return the platform-specific high score file path."""
    return Path(user_data_dir(APP_NAME, APP_NAME)) / "high_score.json"


def load_high_score(*, path: Path | None = None) -> int:
    """Load the stored best score, returning 0 when absent or malformed."""
    score_path = path or user_high_score_path()
    try:
        if score_path.exists():
            loaded = json.loads(score_path.read_text(encoding="utf-8"))
            if isinstance(loaded, dict):
                value = loaded.get("high_score")
                if isinstance(value, int) and not isinstance(value, bool):
                    return max(0, value)
    except Exception as exc:  # noqa: BLE001
        print(f"Failed to load high score ({score_path}): {exc}")
    return 0


def save_high_score(value: int, *, path: Path | None = None) -> None:
    """Persist the best score to disk."""
    score_path = path or user_high_score_path()
    try:
        score_path.parent.mkdir(parents=True, exist_ok=True)
        score_path.write_text(
            json.dumps({"high_score": int(value)}, indent=2), encoding="utf-8"
        )
    except Exception as exc:  # noqa: BLE001
        print(f"Failed to save high score ({score_path}): {exc}")


class HighScoreStore:
    """File-backed store handed to the game as its persistence collaborator."""

    def __init__(self, path: Path | None = None) -> None:
        self.path = path or user_high_score_path()

    def load_high_score(self) -> int:
        return load_high_score(path=self.path)

    def save_high_score(self, value: int) -> None:
        save_high_score(value, path=self.path)


__all__ = [
    "HighScoreStore",
    "load_high_score",
    "save_high_score",
    "user_high_score_path",
]
