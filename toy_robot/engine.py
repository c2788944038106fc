"""Movement engine.

:class:`MovementEngine` owns the robot's current :class:`Position` and is the
only component allowed to change it. Each command is a synchronous state
transition:

1. Commands other than ``place`` are ignored while the robot is unplaced.
2. The candidate position is validated (``is_valid_cell`` for placement,
   ``can_move`` with the configured policy for moves). Turns are always legal.
3. On success the new position is published on :attr:`positions` followed by
   a status on :attr:`statuses`. On failure nothing is published on
   :attr:`positions`.

Only ``move`` raises: an out-of-bounds move publishes an error status *and*
raises :class:`~toy_robot.errors.OutOfBoundsError`. Rejected placements are
reported through the status channel only (or silently, depending on
:attr:`EngineConfig.report_invalid_place`).

The engine is not thread safe. Callers submitting commands from more than one
thread must serialize them.
"""

import logging
from typing import Optional

from toy_robot import messages
from toy_robot.channel import ReplayChannel
from toy_robot.config import EngineConfig
from toy_robot.errors import OutOfBoundsError
from toy_robot.messages import StatusMessage
from toy_robot.position import Position
from toy_robot.types import Facing, Turn
from toy_robot.validation import can_move, is_valid_cell

logger = logging.getLogger(__name__)


class MovementEngine:
    """Single robot simulator on a square board.

    Attributes:
        config (EngineConfig): Board size and validation policy.
        positions (ReplayChannel[Position]): Position updates (replay-of-one).
        statuses (ReplayChannel[StatusMessage]): Command outcomes (replay-of-one).
    """

    def __init__(self, config: Optional[EngineConfig] = None) -> None:
        self.config = config if config is not None else EngineConfig()
        self.positions: ReplayChannel[Position] = ReplayChannel("positions")
        self.statuses: ReplayChannel[StatusMessage] = ReplayChannel("statuses")
        self._position: Optional[Position] = None

    @property
    def grid_size(self) -> int:
        return self.config.grid_size

    @property
    def position(self) -> Optional[Position]:
        """Current position (immutable value) or ``None`` while unplaced."""
        return self._position

    @property
    def is_placed(self) -> bool:
        return self._position is not None

    def is_valid_cell(self, x: int, y: int) -> bool:
        """Symmetric bounds check, independent of facing. No side effects."""
        return is_valid_cell(x, y, self.grid_size)

    def can_move(self, new_x: int, new_y: int, facing: Facing) -> bool:
        """Apply the configured boundary policy to a move destination."""
        return can_move(new_x, new_y, facing, self.grid_size, self.config.boundary_policy)

    # Commands

    def place(self, x: int, y: int, facing: Facing) -> bool:
        """Put the robot at ``(x, y)`` facing ``facing``.

        Returns:
            bool: True if the placement was applied. A rejected placement
            leaves any existing position untouched and never raises.
        """
        facing = Facing(facing)
        if not self.is_valid_cell(x, y):
            logger.warning("Ignoring placement off the board: %s,%s,%s", x, y, facing)
            if self.config.report_invalid_place:
                self._notify(messages.invalid_placement(x, y, facing))
            return False

        self._commit(Position(x, y, facing))
        logger.info("Robot placed at %s", self._position)
        self._notify(messages.placed(self._position))  # type: ignore[arg-type]
        return True

    def move(self) -> Optional[Position]:
        """Advance one cell in the current facing.

        Returns:
            Position | None: The new position, or ``None`` if unplaced.

        Raises:
            OutOfBoundsError: If the destination is off the board. The position
                is unchanged and an ``Invalid Move`` status has been published.
        """
        current = self._position
        if current is None:
            logger.debug("Ignoring MOVE before the robot is placed")
            return None

        candidate = current.moved()
        if not self.can_move(candidate.x, candidate.y, current.facing):
            logger.warning("Rejected move from %s to %s,%s", current, candidate.x, candidate.y)
            status = messages.invalid_move()
            self._notify(status)
            raise OutOfBoundsError(
                f"{status.summary}: {status.detail} Current Position: "
                f"x={current.x}, y={current.y}, f={current.facing}",
                context={"x": current.x, "y": current.y, "f": str(current.facing)},
            )

        self._commit(candidate)
        logger.info("Robot moved to %s", candidate)
        self._notify(messages.moved(candidate))
        return candidate

    def turn_left(self) -> Optional[Position]:
        return self._turn(Turn.LEFT)

    def turn_right(self) -> Optional[Position]:
        return self._turn(Turn.RIGHT)

    def report(self) -> Optional[StatusMessage]:
        """Publish the ``x,y,FACING`` report. Does not touch the position."""
        if self._position is None:
            logger.debug("Ignoring REPORT before the robot is placed")
            return None
        status = messages.report(self._position)
        self._notify(status)
        return status

    # Internals

    def _turn(self, turn: Turn) -> Optional[Position]:
        current = self._position
        if current is None:
            logger.debug("Ignoring %s before the robot is placed", turn)
            return None
        turned = current.turned(turn)
        self._commit(turned)
        logger.info("Robot turned %s, now facing %s", turn.lower(), turned.facing)
        if turn == Turn.LEFT:
            self._notify(messages.turned_left(turned))
        else:
            self._notify(messages.turned_right(turned))
        return turned

    def _commit(self, position: Position) -> None:
        self._position = position
        self.positions.publish(position)

    def _notify(self, status: StatusMessage) -> None:
        self.statuses.publish(status)
