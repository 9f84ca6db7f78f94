"""
Tessel Reactor - Push Nodes and Fluent Composition
==================================================

This module provides the base push node of an event chain and the fluent
builder methods used to grow a chain from it.

A ``Reactor`` is an ``Observable`` that can itself be called: ``call(*args)``
records the arguments and hands them to ``invoke``, whose default behaviour
is to forward them unchanged to every listener. Operator nodes (see
``tessel.reactive.operators``) override ``invoke``.

Builder methods create an operator node, subscribe it below the current node
and return it, so chains read left to right:

    ```python
    keys = Reactor()
    keys.select(lambda key, action: key == "left").map(lambda key, action: -1, print)
    keys.call("left", "press")  # prints: -1
    ```

Delivery is synchronous and depth-first: every descendant of a node's first
listener finishes before its second listener is called.
"""

from enum import Enum
from typing import TYPE_CHECKING, Any, Callable, Optional, Tuple

from .observable import Listener, Observable
from .payload import matches, singularize

if TYPE_CHECKING:
    from .operators import (
        Accumulator,
        Buffer,
        Indexer,
        Mapper,
        Reducer,
        Rejector,
        Selector,
    )


class OperatorKind(Enum):
    """Closed set of node kinds an event chain is built from."""

    PASS_THROUGH = "pass_through"
    MAP = "map"
    REDUCE = "reduce"
    SELECT = "select"
    REJECT = "reject"
    ACCUMULATE = "accumulate"
    BUFFER = "buffer"
    INDEX = "index"


class Reactable(Observable):
    """
    Mixin providing the fluent chain builders.

    Each builder takes the operator's function (or length) first and an
    optional downstream handler ``cb`` second, and returns the new node.
    """

    def attach(self, listener: Listener, block: Optional[Listener] = None) -> Any:
        """
        Subscribe ``listener`` to this node and, if given, ``block`` to
        ``listener``.

        Returns:
            ``listener``, so further operators can be chained from it
        """
        node = self.subscribe(listener)
        if block is not None:
            node.subscribe(block)
        return node

    def map(
        self, fn: Callable[..., Any], cb: Optional[Listener] = None
    ) -> "Mapper":
        """Replace each payload with ``fn(*args)``."""
        from .operators import Mapper

        return self.attach(Mapper(fn), cb)

    def reduce(
        self, fn: Callable[..., Any], cb: Optional[Listener] = None
    ) -> "Reducer":
        """Call ``fn(*args)`` for its effect and forward the payload unchanged."""
        from .operators import Reducer

        return self.attach(Reducer(fn), cb)

    def select(
        self, fn: Callable[..., Any], cb: Optional[Listener] = None
    ) -> "Selector":
        """Forward payloads for which ``fn(*args)`` is truthy."""
        from .operators import Selector

        return self.attach(Selector(fn), cb)

    def reject(
        self, fn: Callable[..., Any], cb: Optional[Listener] = None
    ) -> "Rejector":
        """Forward payloads for which ``fn(*args)`` is falsy."""
        from .operators import Rejector

        return self.attach(Rejector(fn), cb)

    def buffer(self, length: int, block: Optional[Listener] = None) -> "Buffer":
        """Hold payloads until ``length`` arrived, then release them one by one."""
        from .operators import Buffer

        return self.attach(Buffer(length), block)

    def accumulate(
        self, length: int, block: Optional[Listener] = None
    ) -> "Accumulator":
        """Emit each run of ``length`` payloads as one list."""
        from .operators import Accumulator

        return self.attach(Accumulator(length), block)

    def with_index(self, block: Optional[Listener] = None) -> "Indexer":
        """Append a running index, starting at 0, to each payload."""
        from .operators import Indexer

        return self.attach(Indexer(), block)

    def case(self, clause: Any, block: Optional[Listener] = None) -> "Selector":
        """Forward payloads whose collapsed value matches ``clause``."""
        return self.select(lambda *args: matches(clause, singularize(args)), block)

    def eq(self, other: Any, block: Optional[Listener] = None) -> "Selector":
        """Forward payloads whose collapsed value equals ``other``."""
        return self.select(lambda *args: other == singularize(args), block)

    def not_eq(self, other: Any, block: Optional[Listener] = None) -> "Rejector":
        """Forward payloads whose collapsed value differs from ``other``."""
        return self.reject(lambda *args: other == singularize(args), block)


class Reactor(Reactable):
    """
    Base push node: forwards every call to its listeners unchanged.
    """

    kind = OperatorKind.PASS_THROUGH

    def __init__(self) -> None:
        super().__init__()
        self._last_values: Optional[Tuple[Any, ...]] = None

    @property
    def last_values(self) -> Optional[Tuple[Any, ...]]:
        """Arguments of the most recent ``call``, None before the first one."""
        return self._last_values

    def call(self, *args: Any) -> None:
        self._last_values = args
        self.invoke(*args)

    def invoke(self, *args: Any) -> None:
        self.notify(*args)

    def __call__(self, *args: Any) -> None:
        self.call(*args)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(listeners={len(self)})"
