"""Pytest configuration for the corekit test suite.

Resets the process-wide log settings around every test so level, defaults and
callbacks never leak between cases, and provides a stub clock for driving
``Deferred`` timers deterministically.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Iterator, List

import pytest

from corekit.log_support import reset_log_settings


@dataclass
class FakeTimer:
    when: float
    callback: Callable[[], None]
    cancelled: bool = False

    def cancel(self) -> None:
        self.cancelled = True


class FakeClock:
    """Manual scheduler compatible with ``loop.call_later``."""

    def __init__(self) -> None:
        self.now = 0.0
        self.timers: List[FakeTimer] = []

    def call_later(self, delay: float, callback: Callable[[], None]) -> FakeTimer:
        timer = FakeTimer(self.now + delay, callback)
        self.timers.append(timer)
        return timer

    def advance(self, seconds: float) -> None:
        """Move time forward and fire due, non-cancelled timers in order."""
        self.now += seconds
        due = sorted(
            (t for t in self.timers if not t.cancelled and t.when <= self.now),
            key=lambda t: t.when,
        )
        for timer in due:
            self.timers.remove(timer)
            timer.callback()

    @property
    def pending(self) -> int:
        return sum(1 for t in self.timers if not t.cancelled)


@pytest.fixture(autouse=True)
def isolated_log_settings(monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    """Start every test from env-free, freshly created log settings."""

    for name in ("COREKIT_LOG_LEVEL", "COREKIT_LOG_COLOR", "COREKIT_LOG_CONTEXT"):
        monkeypatch.delenv(name, raising=False)
    reset_log_settings()
    yield
    reset_log_settings()


@pytest.fixture()
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture()
def captured_lines() -> Iterator[List[str]]:
    """Collect every emitted log line through the global callback."""

    from corekit.logging import set_global_log_callback

    lines: List[str] = []
    set_global_log_callback(lines.append)
    yield lines
    set_global_log_callback(None)
