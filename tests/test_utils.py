from dataclasses import dataclass, field
from typing import Generic, List, Optional, Tuple

from toy_robot.channel import ReplayChannel
from toy_robot.config import EngineConfig
from toy_robot.engine import MovementEngine
from toy_robot.messages import StatusMessage
from toy_robot.position import Position
from toy_robot.types import BoundaryPolicy, Facing, T


@dataclass
class Recorder(Generic[T]):
    """Listener collecting every value delivered by a channel."""

    values: List[T] = field(default_factory=list)

    def __call__(self, value: T) -> None:
        self.values.append(value)

    @property
    def last(self) -> Optional[T]:
        return self.values[-1] if self.values else None


def make_engine(
    grid_size: int = 5,
    boundary_policy: BoundaryPolicy = BoundaryPolicy.SYMMETRIC,
    report_invalid_place: bool = True,
) -> MovementEngine:
    return MovementEngine(
        EngineConfig(
            grid_size=grid_size,
            boundary_policy=boundary_policy,
            report_invalid_place=report_invalid_place,
        )
    )


def make_placed_engine(
    pos: Tuple[int, int, Facing], **config_kwargs: object
) -> MovementEngine:
    engine = make_engine(**config_kwargs)  # type: ignore[arg-type]
    assert engine.place(*pos)
    return engine


def attach(
    engine: MovementEngine,
) -> Tuple[Recorder[Position], Recorder[StatusMessage]]:
    """Subscribe recorders to both engine channels."""
    positions: Recorder[Position] = Recorder()
    statuses: Recorder[StatusMessage] = Recorder()
    engine.positions.subscribe(positions)
    engine.statuses.subscribe(statuses)
    return positions, statuses


def assert_position(engine: MovementEngine, expected: Tuple[int, int, Facing]) -> None:
    assert engine.position == Position(*expected), (
        f"Expected {expected}, got {engine.position}"
    )


def assert_latest(channel: ReplayChannel[T], expected: T) -> None:
    assert channel.has_value
    assert channel.latest == expected
