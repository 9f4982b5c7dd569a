"""Common type aliases and enumerations.

``Heading`` and ``Turn`` are the two small alphabets the automaton is built
from: where an ant faces, and what a rule-table entry asks it to do.
"""

from enum import IntEnum, StrEnum


CellValue = int
"""Packed 32-bit cell word: RGB in the top 24 bits, rule-state index below."""

RuleIndex = int
"""Per-cell counter in ``[0, R)`` selecting the next turn symbol."""

Color = int
"""Packed RGB occupying the top 24 bits of a 32-bit word (low byte zero)."""


class Heading(IntEnum):
    """Cardinal facing of an ant, in clockwise order.

    Values wrap modulo 4, so ``Heading((h + 1) % 4)`` is a clockwise turn.
    """

    UP = 0
    RIGHT = 1
    DOWN = 2
    LEFT = 3


class Turn(StrEnum):
    """Rule-table symbol."""

    FORWARD = "F"
    BACK = "B"
    LEFT = "L"
    RIGHT = "R"
