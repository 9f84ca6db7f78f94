"""Tests for the ordered listener registry."""

import pytest

from tessel.errors import MissingListenerError, ReactiveError
from tessel.reactive import Observable


def test_subscribe_returns_the_listener_given():
    """subscribe hands back the same listener so it can be kept for unsubscribe."""
    obs = Observable()

    def listener(*args):
        pass

    assert obs.subscribe(listener) is listener


def test_subscribe_accepts_block_when_listener_is_omitted():
    obs = Observable()
    received = []

    block = obs.subscribe(block=lambda *args: received.append(args))
    obs.notify(1, 2)

    assert received == [(1, 2)]
    assert block in obs


def test_subscribe_without_listener_or_block_fails_fast():
    """Nothing is registered when neither a listener nor a block is supplied."""
    obs = Observable()

    with pytest.raises(MissingListenerError):
        obs.subscribe()

    assert len(obs) == 0


def test_missing_listener_error_is_a_value_error():
    assert issubclass(MissingListenerError, ValueError)
    assert issubclass(MissingListenerError, ReactiveError)


def test_notify_delivers_in_subscription_order():
    obs = Observable()
    order = []

    for name in ("first", "second", "third"):
        obs.subscribe(lambda *args, name=name: order.append(name))

    obs.notify()
    assert order == ["first", "second", "third"]


def test_notify_passes_identical_arguments_to_every_listener():
    obs = Observable()
    seen = []

    obs.subscribe(lambda *args: seen.append(args))
    obs.subscribe(lambda *args: seen.append(args))

    obs.notify("left", "press")
    assert seen == [("left", "press"), ("left", "press")]


def test_duplicates_are_allowed_and_each_is_notified():
    obs = Observable()
    calls = []

    def listener(value):
        calls.append(value)

    obs.subscribe(listener)
    obs.subscribe(listener)
    obs.notify(7)

    assert calls == [7, 7]


def test_unsubscribe_removes_first_occurrence_only():
    obs = Observable()
    calls = []

    def listener(value):
        calls.append(value)

    obs.subscribe(listener)
    obs.subscribe(listener)

    assert obs.unsubscribe(listener) is listener
    obs.notify(1)

    assert calls == [1]
    assert obs.listeners == (listener,)


def test_unsubscribe_absent_listener_is_a_no_op():
    obs = Observable()
    obs.subscribe(print)

    assert obs.unsubscribe(len) is None
    assert obs.listeners == (print,)


def test_listener_failure_aborts_remaining_listeners():
    """An exception propagates to the caller and later listeners are skipped."""
    obs = Observable()
    calls = []

    def broken(value):
        raise RuntimeError("broken handler")

    obs.subscribe(lambda value: calls.append("before"))
    obs.subscribe(broken)
    obs.subscribe(lambda value: calls.append("after"))

    with pytest.raises(RuntimeError, match="broken handler"):
        obs.notify(1)

    assert calls == ["before"]


def test_empty_registry_is_still_truthy():
    obs = Observable()
    assert len(obs) == 0
    assert obs


def test_clear_drops_every_listener():
    obs = Observable()
    obs.subscribe(print)
    obs.subscribe(print)

    obs.clear()
    assert obs.listeners == ()
