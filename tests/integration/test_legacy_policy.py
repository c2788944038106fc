# tests/integration/test_legacy_policy.py

import pytest

from toy_robot.config import get_config
from toy_robot.engine import MovementEngine
from toy_robot.errors import OutOfBoundsError
from toy_robot.types import BoundaryPolicy, Facing
from tests.test_utils import assert_position, attach, make_placed_engine


def _outcome(policy: BoundaryPolicy, start: tuple[int, int, Facing]) -> object:
    engine = make_placed_engine(start, boundary_policy=policy)
    try:
        return engine.move()
    except OutOfBoundsError:
        return "rejected"


@pytest.mark.parametrize("facing", list(Facing))
def test_policies_agree_on_every_placed_position(facing: Facing) -> None:
    # From an on-board cell a single step only changes the axis of travel and
    # can never land on the row / column excluded by the legacy rule.
    for x in range(5):
        for y in range(5):
            start = (x, y, facing)
            assert _outcome(BoundaryPolicy.LEGACY, start) == _outcome(
                BoundaryPolicy.SYMMETRIC, start
            )


@pytest.mark.parametrize(
    "start",
    [
        (0, 0, Facing.SOUTH),
        (0, 0, Facing.WEST),
        (4, 4, Facing.NORTH),
        (4, 4, Facing.EAST),
    ],
)
def test_legacy_rejects_off_board(start: tuple[int, int, Facing]) -> None:
    engine = make_placed_engine(start, boundary_policy=BoundaryPolicy.LEGACY)
    with pytest.raises(OutOfBoundsError):
        engine.move()
    assert_position(engine, start)


def test_legacy_engine_can_move_is_axis_only() -> None:
    engine = MovementEngine(get_config("legacy"))
    assert engine.can_move(9, 2, Facing.NORTH)
    assert not engine.can_move(0, 4, Facing.SOUTH)
    assert not engine.can_move(4, 0, Facing.WEST)
    symmetric = MovementEngine()
    assert not symmetric.can_move(9, 2, Facing.NORTH)
    assert symmetric.can_move(0, 4, Facing.SOUTH)


def test_legacy_preset_drops_invalid_place_silently() -> None:
    engine = MovementEngine(get_config("legacy"))
    positions, statuses = attach(engine)
    assert engine.place(-1, -1, Facing.NORTH) is False
    assert positions.values == [] and statuses.values == []
