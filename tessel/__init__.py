"""
Tessel - Reactive Tile-Map Editor
=================================

A small level editor whose input handling is wired through a push-based
event-stream library (``tessel.reactive``).
"""

from .errors import (
    ConfigError,
    EmptyStateStackError,
    EngineError,
    InvalidLengthError,
    MissingListenerError,
    ReactiveError,
    SceneError,
    ScriptError,
    TesselError,
)
from .reactive import (
    Accumulator,
    Buffer,
    Indexer,
    Mapper,
    Observable,
    Reactor,
    Reducer,
    Rejector,
    Selector,
)

__version__ = "0.1.0"

__all__ = [
    # Reactive core
    "Observable",
    "Reactor",
    "Mapper",
    "Reducer",
    "Selector",
    "Rejector",
    "Accumulator",
    "Buffer",
    "Indexer",
    # Errors
    "TesselError",
    "ReactiveError",
    "MissingListenerError",
    "InvalidLengthError",
    "ConfigError",
    "EngineError",
    "EmptyStateStackError",
    "SceneError",
    "ScriptError",
]
