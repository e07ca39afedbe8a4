"""Unit tests for the synchronous event emitter."""

from __future__ import annotations

import pytest

from corekit.events import EventEmitter


def test_emit_invokes_listeners_in_registration_order():
    emitter = EventEmitter()
    calls = []
    emitter.on("tick", lambda v: calls.append(("a", v)))
    emitter.on("tick", lambda v: calls.append(("b", v)))

    assert emitter.emit("tick", 1) is True  # nosec B101 - pytest assert in tests
    assert calls == [("a", 1), ("b", 1)]  # nosec B101 - pytest assert in tests


def test_emit_without_listeners_returns_false():
    assert EventEmitter().emit("nothing") is False  # nosec B101 - pytest assert in tests


def test_once_listener_fires_a_single_time_and_is_removed():
    emitter = EventEmitter()
    calls = []
    emitter.once("done", lambda: calls.append(1))

    emitter.emit("done")
    emitter.emit("done")

    assert calls == [1]  # nosec B101 - pytest assert in tests
    assert emitter.listener_count("done") == 0  # nosec B101 - pytest assert in tests


def test_off_removes_persistent_and_one_shot_listeners():
    emitter = EventEmitter()
    calls = []

    def persistent():
        calls.append("p")

    def one_shot():
        calls.append("o")

    emitter.on("e", persistent)
    emitter.once("e", one_shot)
    emitter.off("e", persistent).off("e", one_shot)
    emitter.off("e", persistent)  # unknown listener is ignored

    assert emitter.emit("e") is False  # nosec B101 - pytest assert in tests
    assert calls == []  # nosec B101 - pytest assert in tests


def test_listeners_added_during_emit_wait_for_next_emission():
    emitter = EventEmitter()
    calls = []

    def late():
        calls.append("late")

    def first():
        calls.append("first")
        emitter.on("e", late)

    emitter.once("e", first)
    emitter.emit("e")
    assert calls == ["first"]  # nosec B101 - pytest assert in tests

    emitter.emit("e")
    assert calls == ["first", "late"]  # nosec B101 - pytest assert in tests


def test_listener_errors_propagate_to_emitter():
    emitter = EventEmitter()

    def broken():
        raise RuntimeError("listener failed")

    emitter.on("e", broken)
    with pytest.raises(RuntimeError, match="listener failed"):
        emitter.emit("e")


def test_non_callable_listener_is_rejected():
    with pytest.raises(TypeError):
        EventEmitter().on("e", "not callable")  # type: ignore[arg-type]
