"""
Opt-in timing of the comment lexer, strict decoder and serializer.

Off unless JSONC_PROFILE is set when the package is imported or
enable_profiling() is called; never on under ``python -O``. Each hot path
records its calls, elapsed time, the characters it was handed and the units
of work it reports: comments found by the lexer, containers emitted by the
serializer.
"""

import os
import time
from dataclasses import dataclass
from dataclasses import replace
from typing import Any

_enabled = __debug__ and "JSONC_PROFILE" in os.environ
_hot_path_stats: dict[str, "HotPathStats"] = {}


@dataclass
class HotPathStats:
    """Accumulated measurements of one hot path."""

    name: str
    call_count: int = 0
    total_time_ns: int = 0
    chars_processed: int = 0
    items_processed: int = 0

    @property
    def mean_time_ns(self) -> float:
        return self.total_time_ns / self.call_count if self.call_count else 0.0

    def record(self, duration_ns: int, chars: int, items: int) -> None:
        self.call_count += 1
        self.total_time_ns += duration_ns
        self.chars_processed += chars
        self.items_processed += items


class ProfileContext:
    """
    Times the enclosed block under ``name`` while profiling is on.

    The block may set ``items`` to report how much work it did. A block
    left by an exception is recorded like any other call.
    """

    __slots__ = ("_start", "chars", "items", "name")

    def __init__(self, name: str, chars: int = 0) -> None:
        self.name = name
        self.chars = chars
        self.items = 0
        self._start: int | None = None

    def __enter__(self) -> "ProfileContext":
        if _enabled:
            self._start = time.perf_counter_ns()
        return self

    def __exit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> None:
        if self._start is None:
            return
        duration = time.perf_counter_ns() - self._start
        stats = _hot_path_stats.setdefault(self.name, HotPathStats(self.name))
        stats.record(duration, self.chars, self.items)


def enable_profiling(enabled: bool = True) -> None:
    """Turns hot path recording on or off; a no-op under ``python -O``."""
    global _enabled  # noqa: PLW0603
    _enabled = __debug__ and enabled


def profiling_enabled() -> bool:
    return _enabled


def get_hot_path_stats() -> dict[str, HotPathStats]:
    """Returns a snapshot of the statistics recorded so far."""
    return {name: replace(stats) for name, stats in _hot_path_stats.items()}


def clear_hot_path_stats() -> None:
    _hot_path_stats.clear()
