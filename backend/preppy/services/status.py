"""
Transient copy/paste/load outcome banners.

A reported outcome stays visible for `settings.status_clear_seconds` and is
then cleared by a timer. Each report bumps the flag's generation so an older
timer never clears a newer outcome.
"""

import threading
from enum import Enum
from typing import Callable, Dict, Optional

from preppy.config import settings
from preppy.logging import get_logger

logger = get_logger(__name__)


class Outcome(str, Enum):
    SUCCESS = "success"
    FAILURE = "failure"


class StatusFlag(str, Enum):
    COPY = "copy"
    PASTE = "paste"
    LOAD = "load"


def after_delay(seconds: float, callback: Callable[[], None]) -> threading.Timer:
    timer = threading.Timer(seconds, callback)
    timer.daemon = True
    timer.start()
    return timer


class StatusBoard:
    def __init__(self, clear_after_s: Optional[float] = None) -> None:
        self._clear_after_s = clear_after_s
        self._lock = threading.Lock()
        self._outcomes: Dict[StatusFlag, Outcome] = {}
        self._generations: Dict[StatusFlag, int] = {}

    @property
    def clear_after_s(self) -> float:
        if self._clear_after_s is None:
            return settings.status_clear_seconds
        return self._clear_after_s

    def report(self, flag: StatusFlag, outcome: Outcome) -> None:
        with self._lock:
            self._outcomes[flag] = outcome
            generation = self._generations.get(flag, 0) + 1
            self._generations[flag] = generation
        logger.info("status.report flag=%s outcome=%s", flag.value, outcome.value)
        after_delay(self.clear_after_s, lambda: self._clear(flag, generation))

    def _clear(self, flag: StatusFlag, generation: int) -> None:
        with self._lock:
            if self._generations.get(flag) != generation:
                return
            self._outcomes.pop(flag, None)
        logger.debug("status.cleared flag=%s", flag.value)

    def snapshot(self) -> Dict[str, str]:
        with self._lock:
            return {flag.value: outcome.value for flag, outcome in self._outcomes.items()}

    def reset(self) -> None:
        with self._lock:
            self._outcomes.clear()
            # Pending timers keep their generation and become no-ops.
            for flag in self._generations:
                self._generations[flag] += 1


status_board = StatusBoard()
