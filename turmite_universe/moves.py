"""Heading deltas and toroidal wraparound.

The grid has no edges: stepping off one side re-enters on the opposite side.
Coordinates may be transiently out of range between :func:`forward` and
:func:`wrap_position`; nothing reads the grid in between.
"""

from typing import Dict, Tuple

from turmite_universe.types import Heading


HEADING_DELTAS: Dict[Heading, Tuple[int, int]] = {
    Heading.UP: (0, -1),
    Heading.RIGHT: (1, 0),
    Heading.DOWN: (0, 1),
    Heading.LEFT: (-1, 0),
}


def forward(x: int, y: int, heading: Heading) -> Tuple[int, int]:
    """Return the unwrapped neighbour of ``(x, y)`` in direction ``heading``."""
    dx, dy = HEADING_DELTAS[heading]
    return x + dx, y + dy


def wrap_coordinate(value: int, size: int) -> int:
    """Fold ``value`` into ``[0, size)``. Idempotent."""
    return (value % size + size) % size


def wrap_position(x: int, y: int, width: int, height: int) -> Tuple[int, int]:
    """Toroidal wrap of both axes."""
    return wrap_coordinate(x, width), wrap_coordinate(y, height)


def is_in_bounds(x: int, y: int, width: int, height: int) -> bool:
    """Return True if ``(x, y)`` lies within the grid rectangle."""
    return 0 <= x < width and 0 <= y < height
