"""Simulation context.

:class:`State` bundles everything one simulation owns: the grid buffer, the
turning-rule table and the ants. It is a frozen dataclass in the manner of a
value object, with one deliberate exception: ``grid`` is a mutable buffer that
the driver writes in place, so every ``State`` derived from the same
:func:`turmite_universe.config.make_state` call shares it. Ant positions and
the tick counter are plain values and change by replacement.

Renderers must only read ``state.grid.buffer`` (a read-only view) or
``state.grid.snapshot()``.
"""

from dataclasses import dataclass
from typing import Any

from pyrsistent import pmap, pvector
from pyrsistent.typing import PMap, PVector

from turmite_universe.components import Ant
from turmite_universe.grid import Grid
from turmite_universe.rules import Rule


DEFAULT_STEPS_PER_FRAME = 100


@dataclass(frozen=True)
class State:
    """Turmite world at a tick boundary.

    Attributes:
        width (int): Grid width in cells.
        height (int): Grid height in cells.
        rule (Rule): Turning-rule table, fixed for the simulation's lifetime.
        grid (Grid): Shared, in-place mutated cell buffer.
        ants (PVector[Ant]): Ants in driver order.
        steps_per_frame (int): Ticks applied by one ``step_frame`` call.
        tick (int): Number of completed ticks.
    """

    width: int
    height: int
    rule: Rule
    grid: Grid
    ants: PVector[Ant] = pvector()
    steps_per_frame: int = DEFAULT_STEPS_PER_FRAME
    tick: int = 0

    @property
    def description(self) -> PMap[str, Any]:
        """Sparse, JSON-friendly summary for diagnostics.

        Returns:
            PMap[str, Any]: Dimensions, rule string, tick, ants and the
            per-index cell histogram. Empty or zero entries are omitted.
        """
        description: PMap[str, Any] = pmap(
            {
                "width": self.width,
                "height": self.height,
                "rule": str(self.rule),
                "steps_per_frame": self.steps_per_frame,
                "tick": self.tick,
                "ants": pvector(
                    pmap({"x": ant.x, "y": ant.y, "heading": ant.heading.name})
                    for ant in self.ants
                ),
                "visited": self.grid.visited_count(),
                "histogram": pvector(int(n) for n in self.grid.histogram()),
            }
        )
        for field, value in description.items():
            if not value:
                description = description.discard(field)
        return description
