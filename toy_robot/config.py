"""Engine configuration.

:class:`EngineConfig` is a frozen dataclass; engines never mutate it. Named
presets live in :data:`CONFIG_PRESETS` so that applications can select a
behaviour by name (``"default"``, ``"legacy"``) and extend the registry with
their own entries.
"""

from dataclasses import dataclass, fields
from typing import Any, Dict, Mapping

from toy_robot.errors import ConfigurationError
from toy_robot.types import BoundaryPolicy


DEFAULT_GRID_SIZE = 5


@dataclass(frozen=True)
class EngineConfig:
    """Movement engine settings.

    Attributes:
        grid_size (int): Side length ``N`` of the square board.
        boundary_policy (BoundaryPolicy): Rule used to validate ``move``.
        report_invalid_place (bool): Emit an error status when a place is
            rejected. The place is never raised either way.
    """

    grid_size: int = DEFAULT_GRID_SIZE
    boundary_policy: BoundaryPolicy = BoundaryPolicy.SYMMETRIC
    report_invalid_place: bool = True

    def __post_init__(self) -> None:
        if isinstance(self.grid_size, bool) or not isinstance(self.grid_size, int):
            raise ConfigurationError(
                "grid_size must be an integer", context={"grid_size": self.grid_size}
            )
        if self.grid_size < 1:
            raise ConfigurationError(
                "grid_size must be at least 1", context={"grid_size": self.grid_size}
            )
        try:
            policy = BoundaryPolicy(self.boundary_policy)
        except ValueError as e:
            raise ConfigurationError(
                "Unknown boundary policy",
                context={"boundary_policy": self.boundary_policy},
            ) from e
        # Frozen: normalise strings to the enum through object.__setattr__
        object.__setattr__(self, "boundary_policy", policy)
        if not isinstance(self.report_invalid_place, bool):
            raise ConfigurationError(
                "report_invalid_place must be a boolean",
                context={"report_invalid_place": self.report_invalid_place},
            )

    @classmethod
    def from_mapping(cls, mapping: Mapping[str, Any]) -> "EngineConfig":
        """Build a config from plain values (e.g. parsed JSON or env).

        Raises:
            ConfigurationError: On unknown keys or invalid values.
        """
        known = {f.name for f in fields(cls)}
        unknown = sorted(set(mapping) - known)
        if unknown:
            raise ConfigurationError(
                "Unknown configuration keys", context={"keys": unknown}
            )
        return cls(**dict(mapping))


CONFIG_PRESETS: Dict[str, EngineConfig] = {
    "default": EngineConfig(),
    "legacy": EngineConfig(
        boundary_policy=BoundaryPolicy.LEGACY, report_invalid_place=False
    ),
}
"""Registry of named configurations.

``legacy`` reproduces the historical behaviour: axis-only move validation and
silently dropped invalid placements.
"""


def get_config(name: str) -> EngineConfig:
    try:
        return CONFIG_PRESETS[name]
    except KeyError as e:
        raise ConfigurationError(
            "Unknown configuration preset", context={"name": name}
        ) from e
