# tests/unit/test_commands.py

import pytest

from toy_robot.commands import Command, PlaceArgs, parse_command
from toy_robot.errors import CommandParseError
from toy_robot.types import Facing


@pytest.mark.parametrize(
    "text, expected",
    [
        ("PLACE 1,2,NORTH", (Command.PLACE, PlaceArgs(1, 2, Facing.NORTH))),
        ("place 0, 4, west", (Command.PLACE, PlaceArgs(0, 4, Facing.WEST))),
        ("  PLACE -1,7,SOUTH  ", (Command.PLACE, PlaceArgs(-1, 7, Facing.SOUTH))),
        ("MOVE", (Command.MOVE, None)),
        ("left", (Command.LEFT, None)),
        ("RIGHT\n", (Command.RIGHT, None)),
        ("REPORT", (Command.REPORT, None)),
    ],
)
def test_parse_command(text: str, expected: tuple) -> None:
    assert parse_command(text) == expected


@pytest.mark.parametrize(
    "text",
    [
        "",
        "JUMP",
        "PLACE",
        "PLACE 1,2",
        "PLACE 1,2,UP",
        "PLACE a,2,NORTH",
        "PLACE 1,2,NORTH,EXTRA",
        "MOVE 2",
    ],
)
def test_parse_command_rejects(text: str) -> None:
    with pytest.raises(CommandParseError) as exc_info:
        parse_command(text)
    assert exc_info.value.context["text"] == text
