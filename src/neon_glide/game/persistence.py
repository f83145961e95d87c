"""Best-score storage.

`JsonBestScoreStore` keeps a single integer in a small JSON file. Anything
unreadable (missing file, bad JSON, a value that isn't a non-negative number)
reads as "no best score" or zero; write failures are logged and ignored so a
read-only home directory never interrupts a run.
"""

from __future__ import annotations

import json
import math
import os
from typing import Dict, Optional

from neon_glide.config import BEST_SCORE_KEY, SAVE_PATH


def coerce_score(value) -> int:
    """Turn a stored value into a usable score; junk becomes 0."""
    if isinstance(value, bool):
        return 0
    if isinstance(value, (int, float)):
        num = float(value)
    elif isinstance(value, str):
        try:
            num = float(value.strip())
        except ValueError:
            return 0
    else:
        return 0
    if not math.isfinite(num) or num < 0:
        return 0
    return int(num)


class MemoryBestScoreStore:
    """In-process store, used by tests and when no save path is wanted."""

    def __init__(self, value: Optional[int] = None) -> None:
        self._value = value

    def get_best_score(self) -> Optional[int]:
        return None if self._value is None else coerce_score(self._value)

    def set_best_score(self, value: int) -> None:
        self._value = int(value)


class JsonBestScoreStore:
    def __init__(self, path: str = SAVE_PATH, key: str = BEST_SCORE_KEY) -> None:
        self.path = path
        self.key = key

    def _load(self) -> Dict[str, object]:
        if not os.path.exists(self.path):
            return {}
        try:
            with open(self.path, "r", encoding="utf-8") as f:
                data = json.load(f)
        except (OSError, ValueError) as e:
            print(f"[BestScore] Ignoring unreadable save file {self.path}: {e}")
            return {}
        if not isinstance(data, dict):
            print(f"[BestScore] Ignoring malformed save file {self.path}")
            return {}
        return data

    def get_best_score(self) -> Optional[int]:
        data = self._load()
        if self.key not in data:
            return None
        raw = data[self.key]
        score = coerce_score(raw)
        if score == 0 and raw not in (0, "0"):
            print(f"[BestScore] Stored value {raw!r} is not a score; using 0")
        return score

    def set_best_score(self, value: int) -> None:
        data = self._load()
        data[self.key] = int(value)
        try:
            folder = os.path.dirname(self.path)
            if folder:
                os.makedirs(folder, exist_ok=True)
            with open(self.path, "w", encoding="utf-8") as f:
                json.dump(data, f, indent=2)
        except OSError as e:
            print(f"[BestScore] Could not write {self.path}: {e}")


__all__ = ["coerce_score", "MemoryBestScoreStore", "JsonBestScoreStore"]
