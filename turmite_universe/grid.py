"""Packed toroidal cell buffer.

Each cell is a single ``uint32`` word fusing two facts:

* the low byte holds the rule-state index in ``[0, R)``;
* the top 24 bits cache ``rgb(index / R)`` so that rendering is a raw copy.

A cell with index ``0`` is stored as ``0`` (pure black), which keeps the
``color == 0`` iff ``index == 0`` invariant. The array has shape
``(height, width)``, so the flat row-major view is exactly the frame buffer
handed to a display.
"""

import hashlib
from functools import lru_cache

import numpy as np
import numpy.typing as npt

from turmite_universe.color import rgb
from turmite_universe.types import CellValue, RuleIndex

UInt32Array = npt.NDArray[np.uint32]
IntArray = npt.NDArray[np.intp]

STATE_MASK = 0xFF


@lru_cache(maxsize=4096)
def pack_cell(index: RuleIndex, period: int) -> CellValue:
    """Return the packed word for rule-state ``index`` of a period-``period`` rule."""
    return (rgb(index / period) | index) if index else 0


class Grid:
    """Mutable W×H cell buffer owned by a simulation context.

    ``get_state`` / ``set_state`` perform no bounds checking; callers pass
    wrapped coordinates.

    Attributes:
        width (int): Number of columns.
        height (int): Number of rows.
        period (int): Rule length ``R``; indices are taken modulo this.
        cells (UInt32Array): Backing ``(height, width)`` array.
    """

    def __init__(self, width: int, height: int, period: int) -> None:
        self.width = width
        self.height = height
        self.period = period
        self.cells: UInt32Array = np.zeros((height, width), dtype=np.uint32)

    def get_state(self, x: int, y: int) -> RuleIndex:
        """Return the rule-state index of cell ``(x, y)``."""
        return int(self.cells[y, x]) & STATE_MASK

    def set_state(self, x: int, y: int, index: RuleIndex) -> None:
        """Store ``index`` at ``(x, y)`` together with its cached color.

        Index ``0`` erases the cell to black.
        """
        self.cells[y, x] = pack_cell(index, self.period)

    def cell(self, x: int, y: int) -> CellValue:
        """Return the full packed word at ``(x, y)``."""
        return int(self.cells[y, x])

    @property
    def buffer(self) -> UInt32Array:
        """Read-only view of the cells, valid until the next tick."""
        view = self.cells.view()
        view.flags.writeable = False
        return view

    def snapshot(self) -> UInt32Array:
        """Independent copy of the cells."""
        return self.cells.copy()

    def states(self) -> UInt32Array:
        """Array of rule-state indices, same shape as ``cells``."""
        return self.cells & np.uint32(STATE_MASK)

    def histogram(self) -> IntArray:
        """Number of cells holding each rule-state index ``0..R-1``."""
        return np.bincount(self.states().ravel(), minlength=self.period)[: self.period]

    def visited_count(self) -> int:
        """Number of cells whose index is currently nonzero."""
        return int(np.count_nonzero(self.cells))

    def checksum(self) -> str:
        """SHA-256 hex digest of the little-endian buffer bytes."""
        return hashlib.sha256(self.cells.astype("<u4").tobytes()).hexdigest()
