"""Simulation step driver.

:func:`step` is one tick of every ant; :func:`step_frame` batches a fixed
number of ticks between two display refreshes. Ordering is part of the
observable behavior when ants share a cell: within a tick ants run in
ascending index order, and all ants finish tick ``k`` before any starts tick
``k + 1``. Both functions write the grid in place and return a new
:class:`State` carrying the new ants and tick count.
"""

from dataclasses import replace
from typing import Optional

from pyrsistent import pvector

from turmite_universe.state import State
from turmite_universe.systems.ant import update_ant


def step(state: State) -> State:
    """Advance every ant by one tick."""
    grid, rule = state.grid, state.rule
    ants = pvector(update_ant(ant, grid, rule) for ant in state.ants)
    return replace(state, ants=ants, tick=state.tick + 1)


def step_frame(state: State, steps: Optional[int] = None) -> State:
    """Apply ``steps`` ticks (default ``state.steps_per_frame``).

    Args:
        state (State): Current simulation context.
        steps (int | None): Tick count for this frame; ``0`` is a no-op;
            negative counts are treated as ``0``.

    Returns:
        State: Context after the batch.
    """
    if steps is None:
        steps = state.steps_per_frame
    steps = max(steps, 0)
    grid, rule = state.grid, state.rule
    ants = list(state.ants)
    for _ in range(steps):
        for i, ant in enumerate(ants):
            ants[i] = update_ant(ant, grid, rule)
    return replace(state, ants=pvector(ants), tick=state.tick + steps)


def run(state: State, frames: int) -> State:
    """Apply ``frames`` consecutive :func:`step_frame` batches."""
    for _ in range(frames):
        state = step_frame(state)
    return state
