"""Read-only board view.

:class:`BoardView` attaches to an engine's position channel and keeps the
latest robot position, which is all a renderer needs. Rows are produced with
the north edge first so they can be printed top to bottom.
"""

from typing import List, Optional

from toy_robot.channel import Subscription
from toy_robot.engine import MovementEngine
from toy_robot.position import Position
from toy_robot.types import Facing

GLYPHS = {
    Facing.NORTH: "^",
    Facing.EAST: ">",
    Facing.SOUTH: "v",
    Facing.WEST: "<",
}
EMPTY = "."


class BoardView:
    """Text view of the board that follows an engine's position updates.

    Attributes:
        grid_size (int): Board side length, taken from the engine.
        robot (Position | None): Last position received, ``None`` until placed.
    """

    def __init__(self, engine: MovementEngine) -> None:
        self.grid_size = engine.grid_size
        self.robot: Optional[Position] = None
        self._subscription: Optional[Subscription[Position]] = engine.positions.subscribe(
            self._on_position
        )

    def _on_position(self, position: Position) -> None:
        self.robot = position

    def show_robot(self, x: int, y: int) -> bool:
        """True if the robot currently occupies ``(x, y)``."""
        return self.robot is not None and self.robot.cell == (x, y)

    def rows(self) -> List[List[str]]:
        """Cell glyphs, north row first."""
        rows: List[List[str]] = []
        for y in reversed(range(self.grid_size)):
            row = [
                GLYPHS[self.robot.facing] if self.show_robot(x, y) else EMPTY  # type: ignore[union-attr]
                for x in range(self.grid_size)
            ]
            rows.append(row)
        return rows

    def render(self) -> str:
        return "\n".join(" ".join(row) for row in self.rows())

    def close(self) -> None:
        """Stop tracking the engine. The last known position is kept."""
        if self._subscription is not None:
            self._subscription.unsubscribe()
            self._subscription = None
