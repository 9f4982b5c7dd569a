"""Scalar to color mapping for rule-state indices.

The mapper sweeps a six-region hue wheel (red, yellow, green, cyan, blue,
magenta) with 256 intensity steps per region. It runs once per cell write,
never per rendered pixel, because the grid caches the result next to the
rule-state index.
"""

import math
from typing import Tuple

from turmite_universe.types import Color


HUE_REGIONS = 6
REGION_STEPS = 256
WHEEL_STEPS = HUE_REGIONS * REGION_STEPS


def rgb(ratio: float) -> Color:
    """Map ``ratio`` in ``[0, 1)`` onto the hue wheel.

    Ratios outside the half-open interval wrap around the wheel, so ``1.0``
    maps back to pure red. Non-finite input is treated as ``0``.

    Args:
        ratio (float): Position on the wheel.

    Returns:
        Color: ``(red << 24) | (green << 16) | (blue << 8)``; the low byte is
        left free for the rule-state index.
    """
    if not math.isfinite(ratio):
        ratio = 0.0
    ratio = ratio % 1.0
    normalized = math.floor(ratio * WHEEL_STEPS) % WHEEL_STEPS

    # distance from the start of the region
    x = normalized % REGION_STEPS
    region = normalized // REGION_STEPS

    if region == 0:  # red
        red, green, blue = 255, x, 0
    elif region == 1:  # yellow
        red, green, blue = 255 - x, 255, 0
    elif region == 2:  # green
        red, green, blue = 0, 255, x
    elif region == 3:  # cyan
        red, green, blue = 0, 255 - x, 255
    elif region == 4:  # blue
        red, green, blue = x, 0, 255
    else:  # magenta
        red, green, blue = 255, 0, 255 - x

    return (red << 24) | (green << 16) | (blue << 8)


def unpack_rgb(word: int) -> Tuple[int, int, int]:
    """Split a packed cell word (or a bare ``Color``) into ``(r, g, b)``."""
    return (word >> 24) & 0xFF, (word >> 16) & 0xFF, (word >> 8) & 0xFF
