"""Position model.

Immutable ``(x, y, facing)`` record plus the two pure helpers the engine
builds on: :func:`rotate` and :func:`next_cell`. Neither helper checks bounds;
validation lives in :mod:`toy_robot.validation`.

Coordinates follow the board convention: ``x`` grows to the east, ``y`` grows
to the north, ``(0, 0)`` is the south west corner.
"""

from dataclasses import dataclass, replace

from pyrsistent import pmap, pvector
from pyrsistent.typing import PMap, PVector

from toy_robot.types import Cell, Facing, Turn


DIRECTIONS: PVector[Facing] = pvector(
    [Facing.NORTH, Facing.EAST, Facing.SOUTH, Facing.WEST]
)
"""Rotation order. RIGHT steps forward through it, LEFT steps backward."""

MOVES: PMap[Facing, Cell] = pmap(
    {
        Facing.NORTH: (0, 1),
        Facing.EAST: (1, 0),
        Facing.SOUTH: (0, -1),
        Facing.WEST: (-1, 0),
    }
)
"""Unit displacement for a single forward move in each facing."""

_TURN_STEP = {Turn.LEFT: -1, Turn.RIGHT: 1}


def rotate(facing: Facing, turn: Turn) -> Facing:
    """Return the facing reached after a quarter turn.

    Args:
        facing (Facing): Current facing.
        turn (Turn): ``Turn.LEFT`` or ``Turn.RIGHT``.

    Returns:
        Facing: Neighbouring facing in :data:`DIRECTIONS`, wrapping around.
    """
    index = DIRECTIONS.index(Facing(facing))
    return DIRECTIONS[(index + _TURN_STEP[Turn(turn)]) % len(DIRECTIONS)]


def next_cell(x: int, y: int, facing: Facing) -> Cell:
    """Cell one step ahead of ``(x, y)`` in ``facing``. May be off the board."""
    dx, dy = MOVES[Facing(facing)]
    return x + dx, y + dy


@dataclass(frozen=True)
class Position:
    """Robot pose on the board.

    Attributes:
        x: Column index (0 at the west edge).
        y: Row index (0 at the south edge).
        facing: Direction the robot points to.
    """

    x: int
    y: int
    facing: Facing

    @property
    def cell(self) -> Cell:
        return self.x, self.y

    def moved(self) -> "Position":
        """Position one step forward. Unchecked."""
        x, y = next_cell(self.x, self.y, self.facing)
        return replace(self, x=x, y=y)

    def turned(self, turn: Turn) -> "Position":
        return replace(self, facing=rotate(self.facing, turn))

    def __str__(self) -> str:
        return f"{self.x},{self.y},{self.facing}"
