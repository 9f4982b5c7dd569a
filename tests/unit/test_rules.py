import pytest

from turmite_universe.rules import (
    MAX_RULE_LENGTH,
    RULE_REGISTRY,
    Rule,
    parse_rule,
    resolve_rule,
)
from turmite_universe.types import Turn


def test_parse_reference_rule() -> None:
    rule = parse_rule("RLRL")
    assert rule == Rule((Turn.RIGHT, Turn.LEFT, Turn.RIGHT, Turn.LEFT))
    assert len(rule) == 4
    assert rule[1] == Turn.LEFT
    assert str(rule) == "RLRL"


def test_parse_is_case_insensitive_and_strips() -> None:
    assert parse_rule("  fbLr ") == Rule(
        (Turn.FORWARD, Turn.BACK, Turn.LEFT, Turn.RIGHT)
    )


def test_parse_rejects_unknown_symbol() -> None:
    with pytest.raises(ValueError, match="Unknown turn symbol"):
        parse_rule("RLX")


@pytest.mark.parametrize("text", ["", "R" * (MAX_RULE_LENGTH + 1)])
def test_parse_rejects_bad_length(text: str) -> None:
    with pytest.raises(ValueError):
        parse_rule(text)


def test_longest_rule_is_accepted() -> None:
    assert len(parse_rule("RL" * (MAX_RULE_LENGTH // 2))) == MAX_RULE_LENGTH


def test_mirrored_swaps_left_and_right_only() -> None:
    assert str(parse_rule("RLFB").mirrored()) == "LRFB"
    assert parse_rule("RLRL").mirrored().mirrored() == parse_rule("RLRL")


def test_rule_is_immutable() -> None:
    rule = parse_rule("RL")
    with pytest.raises(AttributeError):
        rule.symbols = ()  # type: ignore[misc]


def test_resolve_registry_names_and_literals() -> None:
    assert resolve_rule("langton") == parse_rule("RL")
    assert resolve_rule("Reference") == parse_rule(RULE_REGISTRY["reference"])
    assert resolve_rule("FB") == parse_rule("FB")


@pytest.mark.parametrize("name", sorted(RULE_REGISTRY))
def test_registry_entries_parse(name: str) -> None:
    assert len(resolve_rule(name)) == len(RULE_REGISTRY[name])
