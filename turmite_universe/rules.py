"""Turning-rule tables and the named rule registry.

A rule is the fixed sequence of ``Turn`` symbols an ant consults: a cell whose
rule-state index is ``k`` makes the ant perform ``rule[k]``. The length of the
sequence is the period of every cell counter.

Letters name the turn as it appears on screen, where ``y`` grows downwards:
``R`` rotates the heading clockwise and ``L`` counter-clockwise.
"""

from dataclasses import dataclass
from typing import Dict, Iterator, Tuple

from turmite_universe.types import Turn


MAX_RULE_LENGTH = 256
"""Rule-state indices are stored in the low byte of a cell word."""

_MIRROR: Dict[Turn, Turn] = {
    Turn.LEFT: Turn.RIGHT,
    Turn.RIGHT: Turn.LEFT,
    Turn.FORWARD: Turn.FORWARD,
    Turn.BACK: Turn.BACK,
}


@dataclass(frozen=True)
class Rule:
    """Immutable turning-rule table.

    Attributes:
        symbols: Ordered turn symbols; ``len(symbols)`` is the period ``R``.
    """

    symbols: Tuple[Turn, ...]

    def __post_init__(self) -> None:
        if not 1 <= len(self.symbols) <= MAX_RULE_LENGTH:
            raise ValueError(
                f"Rule must have between 1 and {MAX_RULE_LENGTH} symbols, "
                f"got {len(self.symbols)}"
            )

    def __len__(self) -> int:
        return len(self.symbols)

    def __getitem__(self, index: int) -> Turn:
        return self.symbols[index]

    def __iter__(self) -> Iterator[Turn]:
        return iter(self.symbols)

    def __str__(self) -> str:
        return "".join(symbol.value for symbol in self.symbols)

    def mirrored(self) -> "Rule":
        """Return the rule with ``L`` and ``R`` swapped.

        For ants starting UP or DOWN, the mirrored rule draws the left-right
        mirror image of the unmirrored pattern about their starting column.
        """
        return Rule(tuple(_MIRROR[symbol] for symbol in self.symbols))


def parse_rule(text: str) -> Rule:
    """Parse a rule string such as ``"RLRL"`` (case-insensitive).

    Raises:
        ValueError: If ``text`` contains a character other than F, B, L, R or
            its length is outside ``[1, 256]``.
    """
    symbols = []
    for char in text.strip().upper():
        try:
            symbols.append(Turn(char))
        except ValueError:
            raise ValueError(
                f"Unknown turn symbol {char!r} in rule {text!r}; "
                f"expected one of {''.join(t.value for t in Turn)}"
            ) from None
    return Rule(tuple(symbols))


RULE_REGISTRY: Dict[str, str] = {
    "langton": "RL",
    "reference": "RLRL",
    "symmetric": "LLRR",
    "chaotic": "RLR",
    "square": "LRRRRRLLR",
    "triangle": "RRLLLRLLLRRR",
    "convoluted": "LLRRRLRLRLLR",
}
"""Named rule strings. ``reference`` is the default two-ant configuration."""


def resolve_rule(name_or_text: str) -> Rule:
    """Look ``name_or_text`` up in ``RULE_REGISTRY``, else parse it literally."""
    return parse_rule(RULE_REGISTRY.get(name_or_text.strip().lower(), name_or_text))
