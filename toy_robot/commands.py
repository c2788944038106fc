"""Command enumeration, parsing and dispatch.

Defines the human readable :class:`Command` string enum, a parser for the
textual form (``PLACE 1,2,NORTH``, ``MOVE``, ``LEFT``, ``RIGHT``, ``REPORT``)
and :func:`execute`, the single dispatch point from a command to the
corresponding :class:`~toy_robot.engine.MovementEngine` operation.
"""

import logging
from dataclasses import dataclass
from enum import StrEnum
from typing import Callable, Dict, Iterable, List, Optional, Tuple

from toy_robot.engine import MovementEngine
from toy_robot.errors import CommandParseError, NotPlacedError, OutOfBoundsError
from toy_robot.types import Facing

logger = logging.getLogger(__name__)


class Command(StrEnum):
    """Robot commands.

    Members:
        PLACE: Put the robot on the board (needs ``PlaceArgs``).
        MOVE: One step forward.
        LEFT, RIGHT: Quarter turn.
        REPORT: Publish the current ``x,y,FACING``.
    """

    PLACE = "PLACE"
    MOVE = "MOVE"
    LEFT = "LEFT"
    RIGHT = "RIGHT"
    REPORT = "REPORT"


@dataclass(frozen=True)
class PlaceArgs:
    x: int
    y: int
    facing: Facing


ParsedCommand = Tuple[Command, Optional[PlaceArgs]]


def parse_command(text: str) -> ParsedCommand:
    """Parse one command line.

    Keywords and facings are case insensitive; surrounding whitespace and
    spaces after the commas are ignored.

    Raises:
        CommandParseError: On unknown keywords or malformed PLACE arguments.
    """
    keyword, _, rest = text.strip().partition(" ")
    try:
        command = Command(keyword.upper())
    except ValueError as e:
        raise CommandParseError("Unknown command", context={"text": text}) from e

    if command != Command.PLACE:
        if rest.strip():
            raise CommandParseError(
                f"{command} takes no arguments", context={"text": text}
            )
        return command, None

    parts = [part.strip() for part in rest.split(",")]
    if len(parts) != 3:
        raise CommandParseError("PLACE expects X,Y,F", context={"text": text})
    try:
        args = PlaceArgs(int(parts[0]), int(parts[1]), Facing(parts[2].upper()))
    except ValueError as e:
        raise CommandParseError("Invalid PLACE arguments", context={"text": text}) from e
    return command, args


def _place(engine: MovementEngine, args: Optional[PlaceArgs]) -> object:
    if args is None:
        raise CommandParseError("PLACE requires arguments")
    return engine.place(args.x, args.y, args.facing)


_DISPATCH: Dict[Command, Callable[[MovementEngine, Optional[PlaceArgs]], object]] = {
    Command.PLACE: _place,
    Command.MOVE: lambda engine, _: engine.move(),
    Command.LEFT: lambda engine, _: engine.turn_left(),
    Command.RIGHT: lambda engine, _: engine.turn_right(),
    Command.REPORT: lambda engine, _: engine.report(),
}


def execute(
    engine: MovementEngine, command: Command, args: Optional[PlaceArgs] = None
) -> object:
    """Run ``command`` against ``engine`` and return the operation's result.

    Raises:
        OutOfBoundsError: Propagated from ``MOVE``.
        CommandParseError: If ``PLACE`` is given without arguments.
    """
    return _DISPATCH[Command(command)](engine, args)


def run_script(
    engine: MovementEngine, lines: Iterable[str], strict: bool = False
) -> List[str]:
    """Execute textual commands in order and collect report details.

    Blank lines and ``#`` comments are skipped. Out-of-bounds moves are logged
    and skipped so the rest of the script still runs.

    Args:
        engine (MovementEngine): Target engine.
        lines (Iterable[str]): Command lines.
        strict (bool): Raise :class:`NotPlacedError` for commands issued
            before the first successful placement instead of ignoring them.

    Returns:
        List[str]: ``detail`` of every report produced, in order.
    """
    reports: List[str] = []
    for lineno, line in enumerate(lines, start=1):
        if not line.strip() or line.lstrip().startswith("#"):
            continue
        command, args = parse_command(line)
        if strict and command != Command.PLACE and not engine.is_placed:
            raise NotPlacedError(
                f"{command} issued before PLACE", context={"line": lineno}
            )
        try:
            result = execute(engine, command, args)
        except OutOfBoundsError as e:
            logger.info("Line %d skipped: %s", lineno, e.message)
            continue
        if command == Command.REPORT and result is not None:
            reports.append(result.detail)  # type: ignore[attr-defined]
    return reports
