"""Status message value object and the constructors the engine uses.

Each command outcome produces exactly one :class:`StatusMessage`. The text
constants are part of the public contract: callers and UIs branch on the
summaries, so they are kept stable here.
"""

from dataclasses import dataclass

from toy_robot.position import Position
from toy_robot.types import Facing, Severity


STAY_ON_BOARD = "Stay on the board - choose a different move."


@dataclass(frozen=True)
class StatusMessage:
    """Notification describing the result of a command.

    Attributes:
        severity: ``success``, ``error`` or ``info``.
        summary: Short title (e.g. ``"Robot Moved"``).
        detail: Human readable detail line.
    """

    severity: Severity
    summary: str
    detail: str


def placed(position: Position) -> StatusMessage:
    return StatusMessage(
        Severity.SUCCESS, "Robot Placed", f"Placed at: {position.x},{position.y}."
    )


def invalid_placement(x: int, y: int, facing: Facing) -> StatusMessage:
    return StatusMessage(
        Severity.ERROR,
        "Invalid Placement",
        f"OutOfBounds: {x},{y},{facing} is not on the board.",
    )


def moved(position: Position) -> StatusMessage:
    return StatusMessage(
        Severity.SUCCESS, "Robot Moved", f"Moved to: {position.x},{position.y}."
    )


def invalid_move() -> StatusMessage:
    return StatusMessage(Severity.ERROR, "Invalid Move", STAY_ON_BOARD)


def turned_left(position: Position) -> StatusMessage:
    return StatusMessage(
        Severity.SUCCESS, "Robot Turned Left", f"Facing: {position.facing}."
    )


def turned_right(position: Position) -> StatusMessage:
    return StatusMessage(
        Severity.SUCCESS, "Robot Turned Right", f"Facing: {position.facing}."
    )


def report(position: Position) -> StatusMessage:
    """Report message; ``detail`` is the literal ``x,y,FACING`` triple."""
    return StatusMessage(Severity.SUCCESS, "Robot Report", str(position))
