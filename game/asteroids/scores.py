"""
Best-time persistence.

A store holds one number: the longest survival time in milliseconds.
Storage problems never reach the game loop; they are logged and the
store behaves as if no best time was recorded.
"""

import json
import logging
import math
import os
from typing import Optional, Protocol

logger = logging.getLogger(__name__)


class ScoreStore(Protocol):
    def get_best_time(self) -> Optional[float]: ...

    def set_best_time(self, value: float) -> None: ...


class MemoryScoreStore:
    """Process-local store"""

    def __init__(self, best_time: Optional[float] = None):
        self.best_time = best_time

    def get_best_time(self) -> Optional[float]:
        return self.best_time

    def set_best_time(self, value: float) -> None:
        self.best_time = value


class JsonScoreStore:
    """Stores ``{"best_time": <ms>}`` in a JSON file, cached after the first read"""

    def __init__(self, path: str = "highscore.json"):
        self.path = path
        self._loaded = False
        self._cached: Optional[float] = None

    def _load(self) -> Optional[float]:
        if not os.path.exists(self.path):
            return None
        try:
            with open(self.path, "r") as f:
                data = json.load(f)
            value = data.get("best_time") if isinstance(data, dict) else None
            if value is None:
                return None
            value = float(value)
            if not math.isfinite(value) or value < 0:
                raise ValueError(f"invalid best time {value}")
            return value
        except (OSError, ValueError, TypeError) as e:
            logger.warning("Could not read best time from %s: %s", self.path, e)
            return None

    def get_best_time(self) -> Optional[float]:
        if not self._loaded:
            self._cached = self._load()
            self._loaded = True
        return self._cached

    def set_best_time(self, value: float) -> None:
        self._cached = value
        self._loaded = True
        try:
            directory = os.path.dirname(self.path)
            if directory:
                os.makedirs(directory, exist_ok=True)
            with open(self.path, "w") as f:
                json.dump({"best_time": value}, f, indent=2)
        except OSError as e:
            logger.warning("Could not save best time to %s: %s", self.path, e)


def commit_best_time(store: ScoreStore, timer: float) -> float:
    """Store max(existing, timer) and return the resulting best time"""
    current = store.get_best_time()
    if current is not None and current >= timer:
        return current
    store.set_best_time(timer)
    logger.info("New best time: %.0f ms", timer)
    return timer
