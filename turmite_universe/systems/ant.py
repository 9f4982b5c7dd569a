"""Ant state machine.

A tick is the same fixed sequence for every ant:

1. read the rule-state index under the ant (mod ``R``);
2. turn according to ``rule[index]``;
3. write ``index + 1`` (mod ``R``) back to the cell;
4. step one cell along the new heading;
5. wrap the position onto the torus.

The only side effect is the single cell write in step 3. Nothing here can
fail for an ant that starts the tick inside the grid.
"""

from dataclasses import replace
from typing import Dict

from turmite_universe.components import Ant
from turmite_universe.grid import Grid
from turmite_universe.moves import forward, wrap_position
from turmite_universe.rules import Rule
from turmite_universe.types import Heading, Turn


TURN_OFFSETS: Dict[Turn, int] = {
    Turn.FORWARD: 0,
    Turn.RIGHT: 1,  # clockwise on screen
    Turn.BACK: 2,
    Turn.LEFT: -1,
}


def turn_heading(heading: Heading, symbol: Turn) -> Heading:
    """Rotate ``heading`` as requested by ``symbol``, modulo 4."""
    return Heading((heading + TURN_OFFSETS[symbol]) % 4)


def turn_ant(ant: Ant, symbol: Turn) -> Ant:
    return replace(ant, heading=turn_heading(ant.heading, symbol))


def move_ant(ant: Ant, width: int, height: int) -> Ant:
    """Step ``ant`` one cell forward and wrap it back into the grid."""
    x, y = forward(ant.x, ant.y, ant.heading)
    x, y = wrap_position(x, y, width, height)
    return replace(ant, x=x, y=y)


def update_ant(ant: Ant, grid: Grid, rule: Rule) -> Ant:
    """Advance ``ant`` by one tick, writing its trail into ``grid``.

    Args:
        ant (Ant): Ant at the start of the tick; must be in bounds.
        grid (Grid): Cell buffer, mutated at ``(ant.x, ant.y)``.
        rule (Rule): Turning-rule table whose length matches ``grid.period``.

    Returns:
        Ant: The ant after turning and moving.
    """
    period = len(rule)
    index = grid.get_state(ant.x, ant.y) % period
    ant = turn_ant(ant, rule[index])
    grid.set_state(ant.x, ant.y, (index + 1) % period)
    return move_ant(ant, grid.width, grid.height)
