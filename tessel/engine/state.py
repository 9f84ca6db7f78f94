"""
Tessel States
=============

A state is one screen of the application (the map editor, a menu, ...).
``StateManager`` keeps them on a stack; only the top state is stepped.
"""

import logging
from typing import TYPE_CHECKING, List, Optional, Type

from tessel.errors import EmptyStateStackError

if TYPE_CHECKING:
    from .engine import Engine, Screen
    from tessel.reactive import Reactor

logger = logging.getLogger(__name__)


class State:
    """Base state. Subclasses override the lifecycle hooks they need."""

    def __init__(self, engine: "Engine"):
        self.engine = engine

    @property
    def screen(self) -> "Screen":
        return self.engine.screen

    @property
    def input(self) -> "Reactor":
        return self.engine.input

    def init(self) -> None:
        """Called once, when the state is pushed."""

    def update(self, delta: float) -> None:
        pass

    def render(self) -> None:
        pass

    def terminate(self) -> None:
        """Called once, when the state is popped."""


class StateManager:
    def __init__(self, engine: "Engine"):
        self.engine = engine
        self._states: List[State] = []

    @property
    def current(self) -> Optional[State]:
        return self._states[-1] if self._states else None

    def __len__(self) -> int:
        return len(self._states)

    def push(self, state_cls: Type[State]) -> State:
        """Instantiate ``state_cls``, initialize it and make it current."""
        state = state_cls(self.engine)
        state.init()
        self._states.append(state)
        logger.debug("pushed state %s (depth %d)", state_cls.__name__, len(self._states))
        return state

    def pop(self) -> State:
        if not self._states:
            raise EmptyStateStackError("cannot pop: no states")
        state = self._states.pop()
        state.terminate()
        logger.debug("popped state %s (depth %d)", type(state).__name__, len(self._states))
        return state

    def step(self, delta: float) -> None:
        """Update then render the current state."""
        state = self.current
        if state is None:
            raise EmptyStateStackError("cannot step: no states")
        state.update(delta)
        self.engine.clear_screen()
        state.render()
        self.engine.frames += 1
