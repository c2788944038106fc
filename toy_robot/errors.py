"""Toy robot error hierarchy.

All custom exceptions inherit from :class:`ToyRobotError` so callers can
catch the whole family at once.

Usage:
    from toy_robot.errors import OutOfBoundsError

    try:
        engine.move()
    except OutOfBoundsError as e:
        logger.warning("Rejected move: %s", e.message)
"""

from typing import Any

__all__ = [
    "CommandParseError",
    "ConfigurationError",
    "NotPlacedError",
    "OutOfBoundsError",
    "ToyRobotError",
]


class ToyRobotError(Exception):
    """Base exception for all toy robot errors.

    ``code`` names the error kind; ``context`` holds the values involved
    (coordinates, offending input line) for log and status messages.
    """
    code: str = "TOY_ROBOT_ERROR"

    def __init__(self, message: str, context: dict[str, Any] | None = None):
        super().__init__(message)
        self.message = message
        self.context = dict(context or {})

    def __str__(self) -> str:
        text = f"[{self.code}] {self.message}"
        if not self.context:
            return text
        details = ", ".join(f"{key}={value}" for key, value in self.context.items())
        return f"{text} ({details})"


class OutOfBoundsError(ToyRobotError):
    """Move or placement that would leave the board.

    ``context`` carries the robot's coordinates *before* the rejected
    command (``x``, ``y``, ``f``).
    """
    code: str = "OutOfBounds"


class NotPlacedError(ToyRobotError):
    """Command that needs a placed robot issued before any valid place.

    The engine treats this case as a silent no-op; the class exists so that
    stricter callers (e.g. script runners) can raise it themselves.
    """
    code: str = "NotPlaced"


class CommandParseError(ToyRobotError):
    """Textual command that cannot be parsed."""
    code: str = "COMMAND_PARSE"


class ConfigurationError(ToyRobotError):
    """Invalid engine configuration value."""
    code: str = "CONFIGURATION"
