"""
Shared pytest fixtures for tessel tests.
"""

import pytest

from tessel.config import EditorConfig
from tessel.engine import Engine
from tessel.graphics import RecordingContext
from tessel.reactive import Reactor


@pytest.fixture
def source():
    """A fresh root reactor."""
    return Reactor()


@pytest.fixture
def recorder():
    """Collects every call as a tuple of its arguments."""

    class Recorder(list):
        def __call__(self, *args):
            self.append(args)

    return Recorder()


@pytest.fixture
def ctx():
    return RecordingContext()


@pytest.fixture
def config():
    """Small, deterministic editor config."""
    return EditorConfig(map_width=4, map_height=3, seed=7)


@pytest.fixture
def engine(config, ctx):
    return Engine(config, ctx)
