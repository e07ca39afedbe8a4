"""One-shot broadcast cancellation token.

Exposes the ``CancellationToken`` class. Consumers either poll it
(``is_cancelled`` / ``raise_if_cancelled``) or subscribe to its ``"cancel"``
event, which is emitted at most once per token.
"""

from __future__ import annotations

import logging
from threading import Lock
from typing import Callable, List

from ..events import EventEmitter
from .cancelled_error import CancelledError
from .state import State

CANCEL_EVENT = "cancel"

logger = logging.getLogger("corekit.cancellation")


class CancellationToken(EventEmitter):
    """A one-shot cancellation signal with optional cascading to child tokens.

    The first ``cancel`` call flips the token to cancelled permanently, emits
    ``"cancel"`` to the current subscribers in registration order and then
    cancels linked children. Later calls are no-ops.
    """

    def __init__(self, *, parent: "CancellationToken | None" = None) -> None:
        super().__init__()
        self._state = State()
        self._lock = Lock()
        self._children: List[CancellationToken] = []
        if parent is not None:
            parent.link_child(self)

    @property
    def cancelled(self) -> bool:  # noqa: D401 - short form
        """Whether cancellation has been requested."""
        return self._state.cancelled

    @property
    def reason(self) -> str | None:  # noqa: D401 - short form
        """Reason string supplied at cancel time (if any)."""
        return self._state.reason

    def is_cancelled(self) -> bool:
        return self._state.cancelled

    def cancel(self, reason: str | None = None) -> None:
        """Cancel the token, notify subscribers once and cascade to children."""
        with self._lock:
            if self._state.cancelled:
                return
            self._state.cancelled = True
            self._state.reason = reason
            children = list(self._children)
        logger.debug("cancellation token cancelled (reason=%r)", reason)
        self.emit(CANCEL_EVENT)
        for child in children:
            child.cancel(reason)

    def on_cancel(self, listener: Callable[[], object]) -> Callable[[], object]:
        """Subscribe ``listener`` one-shot to the cancel signal (returns it).

        The listener is removed automatically after it fired; pass it to
        :meth:`off_cancel` to unsubscribe earlier.
        """
        self.once(CANCEL_EVENT, listener)
        return listener

    def off_cancel(self, listener: Callable[[], object]) -> None:
        """Remove a listener registered with :meth:`on_cancel`."""
        self.off(CANCEL_EVENT, listener)

    def link_child(self, token: "CancellationToken") -> "CancellationToken":
        """Link a child token so parent cancellation cascades (returns child)."""
        with self._lock:
            self._children.append(token)
            should_cancel = self._state.cancelled
            reason = self._state.reason
        if should_cancel:
            token.cancel(reason)
        return token

    def raise_if_cancelled(self) -> None:
        """Raise ``CancelledError`` if the token is cancelled."""
        if self._state.cancelled:
            raise CancelledError(self._state.reason or "Cancelled")

    def child(self) -> "CancellationToken":
        """Create and link a child token (shortcut)."""
        return CancellationToken(parent=self)

    def __repr__(self) -> str:  # pragma: no cover - introspection aid
        return (
            f"CancellationToken(cancelled={self._state.cancelled}, "
            f"reason={self._state.reason!r}, children={len(self._children)}, "
            f"listeners={self.listener_count(CANCEL_EVENT)})"
        )


__all__ = ["CANCEL_EVENT", "CancellationToken"]
