"""
Tessel Errors
=============

All tessel-specific errors inherit from TesselError so callers at the edge of
the application (the CLI) can catch the whole family in one place.
"""


class TesselError(Exception):
    """Base error for all tessel operations."""


class ReactiveError(TesselError):
    """Error raised by the reactive event-stream core."""


class MissingListenerError(ReactiveError, ValueError):
    """Raised when subscribing with neither a listener nor a block."""


class InvalidLengthError(ReactiveError, ValueError):
    """Raised when a windowing operator is built with a length below 1."""


class ConfigError(TesselError):
    """Invalid or unreadable configuration."""


class EngineError(TesselError):
    """Error in the engine loop or state lifecycle."""


class EmptyStateStackError(EngineError):
    """Raised when stepping or popping a state manager with no states."""


class SceneError(TesselError):
    """Error while manipulating the scene tree."""


class ScriptError(TesselError):
    """Malformed line in a key script."""

    def __init__(self, message: str, line_number: int = 0):
        self.line_number = line_number
        if line_number:
            message = f"line {line_number}: {message}"
        super().__init__(message)
