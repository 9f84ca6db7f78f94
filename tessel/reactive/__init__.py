"""
Tessel Reactive - Push-Based Event-Stream Combinators
=====================================================

A small synchronous dataflow library: a root ``Reactor`` is fed events and
fans them out, depth-first and in subscription order, through chains of
operator nodes built with fluent methods.

    ```python
    from tessel.reactive import Reactor

    source = Reactor()
    source.accumulate(3, print)
    for n in (1, 2, 3, 4):
        source.call(n)  # prints [1, 2, 3] after the third call
    ```
"""

from .observable import Listener, Observable
from .operators import (
    Accumulator,
    Buffer,
    Conditioner,
    Indexer,
    Mapper,
    Reducer,
    Rejector,
    Selector,
    Window,
)
from .payload import Many, Payload, Single, matches, payload_of, singularize
from .reactor import OperatorKind, Reactable, Reactor

__all__ = [
    # Registry
    "Listener",
    "Observable",
    # Nodes
    "OperatorKind",
    "Reactable",
    "Reactor",
    "Mapper",
    "Reducer",
    "Conditioner",
    "Selector",
    "Rejector",
    "Window",
    "Accumulator",
    "Buffer",
    "Indexer",
    # Payloads
    "Payload",
    "Single",
    "Many",
    "payload_of",
    "singularize",
    "matches",
]
