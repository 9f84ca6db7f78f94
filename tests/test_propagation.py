"""Tests for delivery order, reentrancy and failure propagation across chains."""

import pytest

from tessel.reactive import Reactor


class TestDeliveryOrder:
    def test_depth_first_before_next_sibling(self, source):
        """All descendants of the first listener finish before the second starts."""
        order = []
        first = source.reduce(lambda value: order.append("first"))
        first.reduce(lambda value: order.append("first.child"))
        first.map(lambda value: value).reduce(lambda value: order.append("first.grandchild"))
        source.reduce(lambda value: order.append("second"))

        source.call(1)

        assert order == ["first", "first.child", "first.grandchild", "second"]

    def test_fan_out_reaches_every_branch_in_one_call(self, source):
        seen = []
        source.map(lambda v: v + 1, lambda v: seen.append(("inc", v)))
        source.map(lambda v: v * 2, lambda v: seen.append(("dbl", v)))
        source.select(lambda v: v > 100, lambda v: seen.append(("big", v)))

        source.call(5)

        assert seen == [("inc", 6), ("dbl", 10)]

    def test_long_chain_is_synchronous(self, source):
        node = source
        for _ in range(50):
            node = node.map(lambda v: v + 1)
        result = []
        node.subscribe(result.append)

        source.call(0)
        assert result == [50]


class TestReentrancy:
    def test_self_unsubscribe_keeps_current_pass(self, source):
        calls = []

        def once(value):
            calls.append(("once", value))
            source.unsubscribe(once)

        source.subscribe(once)
        source.subscribe(lambda value: calls.append(("always", value)))

        source.call(1)
        source.call(2)

        assert calls == [("once", 1), ("always", 1), ("always", 2)]

    def test_unsubscribing_later_sibling_does_not_skip_it_this_pass(self, source):
        calls = []

        def sibling(value):
            calls.append(("sibling", value))

        def remover(value):
            calls.append(("remover", value))
            source.unsubscribe(sibling)

        source.subscribe(remover)
        source.subscribe(sibling)

        source.call(1)
        source.call(2)

        assert calls == [("remover", 1), ("sibling", 1), ("remover", 2)]

    def test_subscribe_during_delivery_waits_for_next_pass(self, source):
        calls = []

        def late(value):
            calls.append(("late", value))

        def adder(value):
            calls.append(("adder", value))
            if value == 1:
                source.subscribe(late)

        source.subscribe(adder)

        source.call(1)
        assert calls == [("adder", 1)]

        source.call(2)
        assert calls == [("adder", 1), ("adder", 2), ("late", 2)]

    def test_unsubscribed_operator_stops_receiving(self, source, recorder):
        node = source.map(lambda v: v * 2, recorder)
        source.call(1)

        source.unsubscribe(node)
        source.call(2)

        assert recorder == [(2,)]

    def test_feeding_a_buffer_while_it_flushes_starts_a_new_window(self, source):
        released = []
        node = source.buffer(2)

        def sink(value):
            released.append(value)
            if value == "a":
                source.call("x")

        node.subscribe(sink)
        source.call("a")
        source.call("b")

        assert released == ["a", "b"]
        assert node.pending == ["x"]

        source.call("y")
        assert released == ["a", "b", "x", "y"]

    def test_feeding_an_accumulator_while_it_flushes(self, source):
        batches = []
        node = source.accumulate(1)

        def sink(batch):
            batches.append(batch)
            if len(batches) == 1:
                source.call("again")

        node.subscribe(sink)
        source.call("first")

        assert batches == [["first"], ["again"]]
        assert node.pending == []


class TestFailurePropagation:
    def test_error_aborts_ancestors_remaining_listeners(self, source):
        calls = []

        def broken(value):
            raise KeyError("handler")

        branch = source.map(lambda v: v)
        branch.subscribe(broken)
        branch.subscribe(lambda v: calls.append("branch sibling"))
        source.subscribe(lambda v: calls.append("root sibling"))

        with pytest.raises(KeyError):
            source.call(1)

        assert calls == []

    def test_chain_keeps_working_after_a_failure(self, source, recorder):
        def fragile(value):
            if value < 0:
                raise ValueError("negative")

        source.reduce(fragile, recorder)

        with pytest.raises(ValueError):
            source.call(-1)
        source.call(1)

        assert recorder == [(1,)]

    def test_predicate_failure_fires_neither_branch(self, source, recorder):
        node = source.select(lambda value: 1 / value)
        node.subscribe(recorder)
        node.else_(recorder)

        with pytest.raises(ZeroDivisionError):
            source.call(0)

        assert recorder == []

    def test_failed_flush_still_resets_the_window(self, source):
        batches = []

        def sink(batch):
            if len(batches) == 0 and batch == [1, 2]:
                batches.append("failed")
                raise RuntimeError("sink down")
            batches.append(batch)

        source.accumulate(2, sink)
        source.call(1)
        with pytest.raises(RuntimeError):
            source.call(2)

        source.call(3)
        source.call(4)
        assert batches == ["failed", [3, 4]]


def test_reactor_graph_can_share_a_node():
    """Two parents feeding one node deliver into the same downstream."""
    left, right, shared = Reactor(), Reactor(), Reactor()
    seen = []
    shared.subscribe(seen.append)
    left.subscribe(shared)
    right.subscribe(shared)

    left.call("l")
    right.call("r")

    assert seen == ["l", "r"]
