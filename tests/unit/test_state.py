from turmite_universe.step import step
from turmite_universe.types import Heading
from tests.test_utils import make_ant_state


def test_description_omits_empty_fields() -> None:
    state = make_ant_state(ants=[(5, 5, Heading.UP)])
    description = state.description
    assert description["rule"] == "RLRL"
    assert description["width"] == 10
    assert "tick" not in description
    assert "visited" not in description
    assert list(description["histogram"]) == [100, 0, 0, 0]


def test_description_after_a_tick() -> None:
    state = step(make_ant_state(ants=[(5, 5, Heading.UP)]))
    description = state.description
    assert description["tick"] == 1
    assert description["visited"] == 1
    assert description["ants"][0]["heading"] == "RIGHT"
    assert description["ants"][0]["x"] == 6
