"""Ant component.

Immutable position and heading of a single turmite. ``State.ants`` holds one
per ant in driver order; every tick replaces the value instead of mutating it.
"""

from dataclasses import dataclass

from turmite_universe.types import Heading


@dataclass(frozen=True)
class Ant:
    """Turmite head.

    Attributes:
        x: Column index (0 at left), in ``[0, width)`` between ticks.
        y: Row index (0 at top), in ``[0, height)`` between ticks.
        heading: Facing direction.
    """

    x: int
    y: int
    heading: Heading = Heading.UP
