"""Boundary predicates.

Pure helpers used by the movement engine. ``is_valid_cell`` is the symmetric
rule used for placement and exposed to UIs; ``can_move`` applies the
configured :class:`~toy_robot.types.BoundaryPolicy` to move candidates.
"""

from toy_robot.types import BoundaryPolicy, Facing


def is_coordinate(value: object) -> bool:
    """True for plain integers (``bool`` excluded)."""
    return isinstance(value, int) and not isinstance(value, bool)


def is_valid_cell(x: int, y: int, grid_size: int) -> bool:
    """Return True if ``(x, y)`` is an integer cell on a ``grid_size`` board."""
    if not (is_coordinate(x) and is_coordinate(y)):
        return False
    return 0 <= x < grid_size and 0 <= y < grid_size


def _legacy_can_move(new_x: int, new_y: int, facing: Facing, grid_size: int) -> bool:
    # Only the axis of travel is checked; SOUTH and WEST stop one short.
    if facing == Facing.NORTH:
        return 0 <= new_y < grid_size
    if facing == Facing.EAST:
        return 0 <= new_x < grid_size
    if facing == Facing.SOUTH:
        return 0 <= new_y < grid_size - 1
    if facing == Facing.WEST:
        return 0 <= new_x < grid_size - 1
    return False


def can_move(
    new_x: int,
    new_y: int,
    facing: Facing,
    grid_size: int,
    policy: BoundaryPolicy = BoundaryPolicy.SYMMETRIC,
) -> bool:
    """Validate a move destination.

    Args:
        new_x (int): Candidate column.
        new_y (int): Candidate row.
        facing (Facing): Direction of travel.
        grid_size (int): Board side length.
        policy (BoundaryPolicy): Rule to apply.

    Returns:
        bool: True if the robot may occupy ``(new_x, new_y)``.
    """
    if policy == BoundaryPolicy.LEGACY:
        return _legacy_can_move(new_x, new_y, facing, grid_size)
    return is_valid_cell(new_x, new_y, grid_size)
