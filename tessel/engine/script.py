"""
Tessel Key Scripts
==================

Key scripts drive the editor without a keyboard: one event per line, the
key name followed by an optional action (``press`` when omitted). Blank
lines and ``#`` comments are ignored::

    # move two tiles right and paint
    right press
    right repeat
    right release
    space
"""

import logging
from pathlib import Path
from typing import Iterable, Iterator, Union

from tessel.errors import ScriptError

from .events import KeyAction, KeyEvent

logger = logging.getLogger(__name__)


def parse_script(lines: Iterable[str]) -> Iterator[KeyEvent]:
    """
    Parse key script lines into events.

    Raises:
        ScriptError: On a line with too many fields or an unknown action
    """
    for number, raw in enumerate(lines, start=1):
        line = raw.split("#", 1)[0].strip()
        if not line:
            continue
        parts = line.split()
        if len(parts) > 2:
            raise ScriptError(f"expected 'key [action]', got {line!r}", number)
        key = parts[0].lower()
        action = parts[1].lower() if len(parts) == 2 else KeyAction.PRESS.value
        try:
            event = KeyEvent(key, action)
        except ValueError:
            raise ScriptError(f"unknown action {action!r}", number) from None
        logger.debug("script line %d: %s %s", number, event.key, event.action.value)
        yield event


def read_script(path: Union[str, Path]) -> Iterator[KeyEvent]:
    """Parse the key script at ``path``."""
    try:
        text = Path(path).read_text()
    except OSError as exc:
        raise ScriptError(f"cannot read script {path}: {exc}") from exc
    return parse_script(text.splitlines())
