"""
Tessel Entry Point
==================

``step`` is called by the host once per frame. The first call creates the
engine's state manager with the map editor on top.
"""

from tessel.engine import Engine, StateManager
from tessel.states import MapEditor


def step(engine: Engine, delta: float) -> None:
    if engine.state_manager is None:
        engine.state_manager = StateManager(engine)
        engine.state_manager.push(MapEditor)
    engine.state_manager.step(delta)
