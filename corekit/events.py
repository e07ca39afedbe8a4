"""Minimal named-event listener registry.

Purpose
-------
Provide the broadcast primitive used by :class:`CancellationToken` and accepted
by :func:`corekit.utils.await_event`. Listeners are plain callables registered
per event name, either persistently (``on``) or for a single delivery
(``once``).

Notes
-----
- ``emit`` delivers synchronously, in registration order, to a snapshot of the
  listeners registered at the time of the call. Listeners added during an
  emission are not invoked by that emission.
- One-shot listeners are removed *before* they are invoked, so a re-entrant
  ``emit`` from inside a listener cannot deliver to them twice.
- Exceptions raised by a listener propagate to the caller of ``emit``.
"""

from __future__ import annotations

from dataclasses import dataclass
from threading import Lock
from typing import Any, Callable, Dict, List

Listener = Callable[..., Any]


@dataclass
class _Registration:
    listener: Listener
    once: bool


class EventEmitter:
    """Synchronous event emitter with persistent and one-shot listeners."""

    def __init__(self) -> None:
        self._listeners: Dict[str, List[_Registration]] = {}
        self._listeners_lock = Lock()

    def on(self, event: str, listener: Listener) -> "EventEmitter":
        """Register ``listener`` for every future ``event`` emission."""
        self._add(event, listener, once=False)
        return self

    def once(self, event: str, listener: Listener) -> "EventEmitter":
        """Register ``listener`` for the next ``event`` emission only."""
        self._add(event, listener, once=True)
        return self

    def off(self, event: str, listener: Listener) -> "EventEmitter":
        """Remove the earliest registration of ``listener`` for ``event``.

        Unknown listeners are ignored.
        """
        with self._listeners_lock:
            regs = self._listeners.get(event)
            if not regs:
                return self
            for idx, reg in enumerate(regs):
                if reg.listener == listener:
                    del regs[idx]
                    break
            if not regs:
                del self._listeners[event]
        return self

    def emit(self, event: str, *args: Any) -> bool:
        """Invoke listeners of ``event`` with ``args``.

        Returns ``True`` when at least one listener was registered.
        """
        with self._listeners_lock:
            regs = list(self._listeners.get(event, ()))
            remaining = [reg for reg in self._listeners.get(event, ()) if not reg.once]
            if remaining:
                self._listeners[event] = remaining
            else:
                self._listeners.pop(event, None)
        for reg in regs:
            reg.listener(*args)
        return bool(regs)

    def listener_count(self, event: str) -> int:
        with self._listeners_lock:
            return len(self._listeners.get(event, ()))

    def _add(self, event: str, listener: Listener, *, once: bool) -> None:
        if not callable(listener):
            raise TypeError(f"listener must be callable, got {type(listener).__name__}")
        with self._listeners_lock:
            self._listeners.setdefault(event, []).append(_Registration(listener, once))


__all__ = ["EventEmitter", "Listener"]
