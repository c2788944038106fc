"""Common type aliases and enumerations.

``Facing`` and ``Turn`` are shared by the position model and the movement
engine; ``Severity`` tags every :class:`toy_robot.messages.StatusMessage`.
"""

from enum import StrEnum
from typing import Callable, TypeVar


class Facing(StrEnum):
    """Compass direction the robot is oriented toward.

    Values are the upper case names so that ``str(facing)`` matches the
    report format (``"2,2,NORTH"``).
    """

    NORTH = "NORTH"
    EAST = "EAST"
    SOUTH = "SOUTH"
    WEST = "WEST"


class Turn(StrEnum):
    """Rotation command (quarter turn)."""

    LEFT = "LEFT"
    RIGHT = "RIGHT"


class Severity(StrEnum):
    """Status message categories (mirrors toast severities in the UI)."""

    SUCCESS = "success"
    ERROR = "error"
    INFO = "info"


class BoundaryPolicy(StrEnum):
    """Boundary rule applied to ``move`` candidates.

    SYMMETRIC: both axes are checked against ``[0, N)``.
    LEGACY: only the axis of travel is checked, and SOUTH / WEST exclude the
        last row / column (``< N - 1``).
    """

    SYMMETRIC = "symmetric"
    LEGACY = "legacy"


T = TypeVar("T")

Listener = Callable[[T], None]
Cell = tuple[int, int]
