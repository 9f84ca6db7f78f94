"""
Tessel Operators - Event Chain Node Kinds
=========================================

Every operator is a ``Reactor`` that overrides ``invoke``. Nodes are one
level below ``Reactor`` or below a single abstract base that holds the state
shared by a pair of kinds:

- ``Mapper``      MAP         replace the payload with ``fn(*args)``
- ``Reducer``     REDUCE      call ``fn(*args)``, forward the payload as-is
- ``Selector``    SELECT      truthy predicate -> main, else -> else-branch
- ``Rejector``    REJECT      falsy predicate -> main, else -> else-branch
- ``Accumulator`` ACCUMULATE  emit every ``length`` payloads as one list
- ``Buffer``      BUFFER      withhold ``length - 1`` payloads, then release
                              all ``length`` of them one at a time
- ``Indexer``     INDEX       append a running index starting at 0
"""

import logging
from abc import ABC, abstractmethod
from typing import Any, Callable, List, Optional

from tessel.errors import InvalidLengthError

from .observable import Listener
from .payload import singularize
from .reactor import OperatorKind, Reactor

logger = logging.getLogger(__name__)


class Mapper(Reactor):
    """Projection: downstream receives exactly one value, ``fn(*args)``."""

    kind = OperatorKind.MAP

    def __init__(self, fn: Callable[..., Any]) -> None:
        super().__init__()
        self._fn = fn

    def invoke(self, *args: Any) -> None:
        self.notify(self._fn(*args))


class Reducer(Reactor):
    """Side-effect tap: the result of ``fn`` is discarded."""

    kind = OperatorKind.REDUCE

    def __init__(self, fn: Callable[..., Any]) -> None:
        super().__init__()
        self._fn = fn

    def invoke(self, *args: Any) -> None:
        self._fn(*args)
        self.notify(*args)


class Conditioner(Reactor, ABC):
    """
    Two-way branch on a predicate.

    Payloads routed to the main path go to this node's own listeners; the
    others are called into the else-branch, a plain ``Reactor`` created with
    the node. Exactly one of the two paths fires per invocation.
    """

    def __init__(self, predicate: Callable[..., Any]) -> None:
        super().__init__()
        self._predicate = predicate
        self._else_branch = Reactor()

    @property
    def else_branch(self) -> Reactor:
        return self._else_branch

    def else_(self, block: Optional[Listener] = None) -> Reactor:
        """
        Access the else-branch, optionally tapping it with ``block``.

        Args:
            block: Called with every payload routed to the else-branch

        Returns:
            The else-branch, for further composition
        """
        if block is not None:
            self._else_branch.reduce(block)
        return self._else_branch

    otherwise = else_

    @abstractmethod
    def _routes_to_main(self, outcome: bool) -> bool:
        """Map a predicate outcome to the main (True) or else (False) path."""

    def invoke(self, *args: Any) -> None:
        if self._routes_to_main(bool(self._predicate(*args))):
            self.notify(*args)
        else:
            self._else_branch.call(*args)


class Selector(Conditioner):
    kind = OperatorKind.SELECT

    def _routes_to_main(self, outcome: bool) -> bool:
        return outcome


class Rejector(Conditioner):
    kind = OperatorKind.REJECT

    def _routes_to_main(self, outcome: bool) -> bool:
        return not outcome


class Window(Reactor, ABC):
    """
    Fixed-size, non-overlapping window of collapsed payloads.

    Each invocation collapses its arguments (one argument -> the bare value,
    otherwise the tuple) and appends the result. When ``length`` values are
    held, the window is swapped for an empty one and handed to ``flush``.
    """

    def __init__(self, length: int) -> None:
        if length < 1:
            raise InvalidLengthError(f"window length must be >= 1, got {length}")
        super().__init__()
        self._length = length
        self._window: List[Any] = []

    @property
    def length(self) -> int:
        return self._length

    @property
    def pending(self) -> List[Any]:
        """Values collected in the current, not yet flushed, window."""
        return list(self._window)

    def invoke(self, *args: Any) -> None:
        self._window.append(singularize(args))
        if len(self._window) >= self._length:
            batch, self._window = self._window, []
            logger.debug("%s flushing %d values", type(self).__name__, len(batch))
            self.flush(batch)

    @abstractmethod
    def flush(self, batch: List[Any]) -> None:
        """Emit a full window. Values arriving meanwhile start the next one."""


class Accumulator(Window):
    """Batching: downstream receives one list per full window."""

    kind = OperatorKind.ACCUMULATE

    def flush(self, batch: List[Any]) -> None:
        self.notify(batch)


class Buffer(Window):
    """
    Release gate: nothing passes until the window fills, then every held
    value is emitted individually, in arrival order.
    """

    kind = OperatorKind.BUFFER

    def flush(self, batch: List[Any]) -> None:
        for value in batch:
            self.notify(value)


class Indexer(Reactor):
    """Appends a sequence number to each payload; never reset."""

    kind = OperatorKind.INDEX

    def __init__(self) -> None:
        super().__init__()
        self._index = 0

    @property
    def index(self) -> int:
        """Index the next payload will carry."""
        return self._index

    def invoke(self, *args: Any) -> None:
        self.notify(*args, self._index)
        self._index += 1
