"""
Tessel Observable - Ordered Listener Registry
=============================================

This module provides the listener registry every node of an event chain is
built on. Listeners are plain callables receiving the positional argument
tuple given to ``notify``.

Unlike a set-backed observer collection, the registry is an ordered list:
insertion order is notification order, duplicates are allowed, and removal
deletes only the first matching entry.

Delivery iterates a snapshot of the list taken when ``notify`` starts, so a
listener that subscribes or unsubscribes during delivery only affects later
passes.
"""

from typing import Any, Callable, List, Optional, Tuple

from tessel.errors import MissingListenerError

Listener = Callable[..., Any]


class Observable:
    """
    Ordered subscription list with synchronous, in-order notification.

    Example:
        ```python
        source = Observable()
        source.subscribe(print)
        source.notify("left", "press")  # prints: left press
        ```
    """

    def __init__(self) -> None:
        self._listeners: List[Listener] = []

    @property
    def listeners(self) -> Tuple[Listener, ...]:
        """Currently registered listeners, in notification order."""
        return tuple(self._listeners)

    def subscribe(
        self, listener: Optional[Listener] = None, block: Optional[Listener] = None
    ) -> Listener:
        """
        Append a listener to the registry.

        Args:
            listener: Callable to register
            block: Alternative callable, used when ``listener`` is omitted

        Returns:
            The listener that was registered

        Raises:
            MissingListenerError: If neither ``listener`` nor ``block`` is given
        """
        target = listener if listener is not None else block
        if target is None:
            raise MissingListenerError("subscribe() requires a listener or a block")
        self._listeners.append(target)
        return target

    def unsubscribe(self, listener: Listener) -> Optional[Listener]:
        """
        Remove the first registered occurrence of ``listener``.

        Returns:
            The removed listener, or None if it was not registered
        """
        try:
            self._listeners.remove(listener)
        except ValueError:
            return None
        return listener

    def notify(self, *args: Any) -> None:
        """
        Call every listener with ``args``, in subscription order.

        A listener that raises aborts the pass; the exception reaches the
        caller untouched.
        """
        for listener in tuple(self._listeners):
            listener(*args)

    def clear(self) -> None:
        """Drop every listener."""
        self._listeners.clear()

    def __len__(self) -> int:
        return len(self._listeners)

    def __bool__(self) -> bool:
        # A node with no listeners is still a node.
        return True

    def __contains__(self, listener: object) -> bool:
        return listener in self._listeners
