"""
Tessel Engine
=============

The engine owns the session-wide pieces every state works with: the screen,
the drawing context and the input reactor keyboard events are fed into.
It does not loop on its own; the host calls ``tessel.main.step`` once per
frame.
"""

import logging
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Optional

from tessel.config import EditorConfig
from tessel.graphics.color import Color
from tessel.graphics.context import DrawContext, RecordingContext
from tessel.graphics.geometry import Rect
from tessel.reactive import Reactor

from .events import KeyAction, KeyEvent

if TYPE_CHECKING:
    from .state import StateManager

logger = logging.getLogger(__name__)


@dataclass
class Screen:
    w: int
    h: int
    clear_color: Color = field(default_factory=lambda: Color.mono(0))

    @property
    def rect(self) -> Rect:
        return Rect(0, 0, self.w, self.h)


class Engine:
    def __init__(
        self,
        config: Optional[EditorConfig] = None,
        context: Optional[DrawContext] = None,
    ):
        self.config = config or EditorConfig()
        self.screen = Screen(*self.config.screen_size)
        self.context: DrawContext = context if context is not None else RecordingContext()
        self.input = Reactor()
        self.state_manager: Optional["StateManager"] = None
        self.running = True
        self.frames = 0

    def feed_key(self, key: str, action: KeyAction = KeyAction.PRESS) -> KeyEvent:
        """Push a keyboard event into the input reactor."""
        event = KeyEvent(key, action)
        self.input.call(event)
        return event

    def clear_screen(self) -> None:
        self.context.clear(self.screen.clear_color)

    def quit(self) -> None:
        logger.debug("shutdown requested after %d frames", self.frames)
        self.running = False
