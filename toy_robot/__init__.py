"""toy_robot
=================================

Single robot simulator on a bounded square board.

The symbols re-exported here cover the usual entry points, e.g.::

    from toy_robot import MovementEngine, Facing

    engine = MovementEngine()
    engine.place(0, 0, Facing.NORTH)
    engine.move()
    engine.report()  # StatusMessage(detail="0,1,NORTH")

See :mod:`toy_robot.engine` for the command semantics and
:mod:`toy_robot.channel` for the replay-of-one notification channels.
"""

from .board import BoardView
from .channel import ReplayChannel, Subscription
from .commands import Command, PlaceArgs, execute, parse_command, run_script
from .config import CONFIG_PRESETS, EngineConfig, get_config
from .engine import MovementEngine
from .errors import (
    CommandParseError,
    ConfigurationError,
    NotPlacedError,
    OutOfBoundsError,
    ToyRobotError,
)
from .messages import StatusMessage
from .position import DIRECTIONS, MOVES, Position, next_cell, rotate
from .types import BoundaryPolicy, Facing, Severity, Turn

__all__ = [
    # Model
    "DIRECTIONS",
    "MOVES",
    "Position",
    "next_cell",
    "rotate",
    "Facing",
    "Turn",
    "Severity",
    "StatusMessage",
    # Engine
    "BoundaryPolicy",
    "EngineConfig",
    "CONFIG_PRESETS",
    "get_config",
    "MovementEngine",
    "ReplayChannel",
    "Subscription",
    # Commands
    "Command",
    "PlaceArgs",
    "execute",
    "parse_command",
    "run_script",
    "BoardView",
    # Errors
    "ToyRobotError",
    "OutOfBoundsError",
    "NotPlacedError",
    "CommandParseError",
    "ConfigurationError",
]
