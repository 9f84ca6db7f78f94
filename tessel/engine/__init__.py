"""
Tessel Engine
=============

Screen, input and state-stack plumbing the editor runs on.
"""

from .engine import Engine, Screen
from .events import KeyAction, KeyEvent, pressed
from .script import parse_script, read_script
from .state import State, StateManager

__all__ = [
    "Engine",
    "Screen",
    "KeyAction",
    "KeyEvent",
    "pressed",
    "parse_script",
    "read_script",
    "State",
    "StateManager",
]
