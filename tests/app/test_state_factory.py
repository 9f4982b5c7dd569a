from types import SimpleNamespace
from typing import Any, Dict, List

import pytest

pytest.importorskip("streamlit")

from app.config import state_factory  # noqa: E402
from turmite_universe.config import SimulationConfig  # noqa: E402


def _fake_streamlit(monkeypatch: pytest.MonkeyPatch) -> SimpleNamespace:
    errors: List[str] = []
    session: Dict[str, Any] = {}
    fake = SimpleNamespace(session_state=session, error=errors.append, errors=errors)
    monkeypatch.setattr(state_factory, "st", fake)
    return fake


def test_valid_config_is_saved_with_state(monkeypatch: pytest.MonkeyPatch) -> None:
    st = _fake_streamlit(monkeypatch)
    config = SimulationConfig(width=8, height=6, rule="langton")

    assert state_factory.make_state_and_reset(config) is True

    assert st.session_state["config"] == config
    assert st.session_state["state"].width == 8
    assert st.session_state["frames"] == 0
    assert st.errors == []


def test_invalid_config_keeps_previous_session(monkeypatch: pytest.MonkeyPatch) -> None:
    st = _fake_streamlit(monkeypatch)
    good = SimulationConfig(width=8, height=6, rule="langton")
    state_factory.make_state_and_reset(good)
    previous_state = st.session_state["state"]

    bad = SimulationConfig(width=8, height=6, rule="RLQ")
    assert state_factory.make_state_and_reset(bad) is False

    assert st.session_state["config"] == good
    assert st.session_state["state"] is previous_state
    assert len(st.errors) == 1
