"""Simulation setup.

:class:`SimulationConfig` carries every size and count as a runtime value;
:func:`make_state` validates it, allocates the grid and places the ants. All
failures surface here, before the first tick, as
:class:`SimulationSetupError`.

Defaults reproduce the classic two-ant demo: a 1920×1080 grid, the ``RLRL``
rule and 100 ticks per frame.
"""

import logging
from dataclasses import dataclass
from typing import List, Optional, Sequence

from pyrsistent import pvector

from turmite_universe.components import Ant
from turmite_universe.grid import Grid
from turmite_universe.moves import is_in_bounds, wrap_position
from turmite_universe.rules import Rule, resolve_rule
from turmite_universe.state import DEFAULT_STEPS_PER_FRAME, State
from turmite_universe.types import Heading

logger = logging.getLogger(__name__)


DEFAULT_WIDTH = 1920
DEFAULT_HEIGHT = 1080
DEFAULT_NUM_ANTS = 2
DEFAULT_RULE = "reference"
DEFAULT_SCALE = 1

# offsets between consecutive default ants
ANT_SPACING_X = -260
ANT_SPACING_Y = -5


class SimulationSetupError(ValueError):
    """Invalid configuration or failed allocation at setup time."""


@dataclass(frozen=True)
class SimulationConfig:
    """Setup parameters for one simulation.

    Attributes:
        width: Grid width in cells.
        height: Grid height in cells.
        rule: Registry name (see ``RULE_REGISTRY``) or literal rule string.
        num_ants: Number of ants; ignored when ``ants`` is given.
        steps_per_frame: Ticks per ``step_frame`` call.
        scale: Display pixels per cell, used by renderers only.
        ants: Explicit initial ants, overriding the default placement.
    """

    width: int = DEFAULT_WIDTH
    height: int = DEFAULT_HEIGHT
    rule: str = DEFAULT_RULE
    num_ants: int = DEFAULT_NUM_ANTS
    steps_per_frame: int = DEFAULT_STEPS_PER_FRAME
    scale: int = DEFAULT_SCALE
    ants: Optional[Sequence[Ant]] = None


def default_ant_placement(width: int, height: int, num_ants: int) -> List[Ant]:
    """Spread ``num_ants`` ants out from the grid center.

    Ant ``i`` starts at ``(width // 2 - 260 i, height // 2 - 5 i)`` wrapped
    onto the torus, facing ``UP`` for even ``i`` and ``DOWN`` for odd ``i``.
    """
    ants: List[Ant] = []
    for i in range(num_ants):
        x, y = wrap_position(
            width // 2 + i * ANT_SPACING_X,
            height // 2 + i * ANT_SPACING_Y,
            width,
            height,
        )
        ants.append(Ant(x=x, y=y, heading=Heading((i * 2) % 4)))
    return ants


def _validate(config: SimulationConfig) -> Rule:
    if config.width < 1 or config.height < 1:
        raise SimulationSetupError(
            f"Grid dimensions must be positive, got {config.width}x{config.height}"
        )
    if config.steps_per_frame < 0:
        raise SimulationSetupError(
            f"steps_per_frame must be non-negative, got {config.steps_per_frame}"
        )
    if config.scale < 1:
        raise SimulationSetupError(f"scale must be at least 1, got {config.scale}")
    if config.ants is None and config.num_ants < 1:
        raise SimulationSetupError(f"num_ants must be at least 1, got {config.num_ants}")
    if config.ants is not None:
        if len(config.ants) == 0:
            raise SimulationSetupError("Explicit ant list is empty")
        for ant in config.ants:
            if not is_in_bounds(ant.x, ant.y, config.width, config.height):
                raise SimulationSetupError(
                    f"Ant {ant} lies outside grid {config.width}x{config.height}"
                )
            if not 0 <= ant.heading < len(Heading):
                raise SimulationSetupError(f"Ant {ant} has an invalid heading")
    try:
        return resolve_rule(config.rule)
    except ValueError as e:
        raise SimulationSetupError(str(e)) from e


def make_state(config: SimulationConfig) -> State:
    """Validate ``config`` and build a fresh, zeroed simulation.

    Raises:
        SimulationSetupError: On invalid parameters or if the grid buffer
            cannot be allocated.
    """
    rule = _validate(config)
    try:
        grid = Grid(config.width, config.height, len(rule))
    except MemoryError as e:
        raise SimulationSetupError(
            f"Cannot allocate {config.width}x{config.height} grid"
        ) from e
    logger.info(
        "Allocated %dx%d grid for rule %s (period %d)",
        config.width,
        config.height,
        rule,
        len(rule),
    )

    if config.ants is not None:
        ants = [Ant(ant.x, ant.y, Heading(ant.heading)) for ant in config.ants]
    else:
        ants = default_ant_placement(config.width, config.height, config.num_ants)
    for i, ant in enumerate(ants):
        logger.debug("Ant %d starts at (%d, %d) facing %s", i, ant.x, ant.y, ant.heading.name)

    return State(
        width=config.width,
        height=config.height,
        rule=rule,
        grid=grid,
        ants=pvector(ants),
        steps_per_frame=config.steps_per_frame,
    )
