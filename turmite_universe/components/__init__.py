"""Component dataclasses.

The simulation has a single component kind, :class:`Ant`; the grid itself is
a buffer rather than a component store (see :mod:`turmite_universe.grid`).
"""

from .ant import Ant

__all__ = ["Ant"]
