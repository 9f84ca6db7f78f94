"""
Tessel Input Events
===================

Keyboard events pushed into the engine's input reactor.
"""

from dataclasses import dataclass
from enum import Enum


class KeyAction(str, Enum):
    PRESS = "press"
    REPEAT = "repeat"
    RELEASE = "release"


@dataclass(frozen=True)
class KeyEvent:
    """A key identifier and what happened to it."""

    key: str
    action: KeyAction = KeyAction.PRESS

    def __post_init__(self) -> None:
        # accepts plain strings such as "press"; raises ValueError otherwise
        object.__setattr__(self, "action", KeyAction(self.action))

    @property
    def is_down(self) -> bool:
        """True for presses and auto-repeats."""
        return self.action in (KeyAction.PRESS, KeyAction.REPEAT)


def pressed(key: str):
    """Predicate matching ``key`` going down (press or repeat)."""

    def predicate(event: KeyEvent) -> bool:
        return event.key == key and event.is_down

    return predicate
