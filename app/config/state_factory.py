from __future__ import annotations

import logging

import streamlit as st

from turmite_universe.config import (
    SimulationConfig,
    SimulationSetupError,
    make_state,
)

logger = logging.getLogger(__name__)


def make_state_and_reset(config: SimulationConfig) -> bool:
    """Build a fresh simulation for ``config`` and store it in session state.

    Centralizes session_state bookkeeping (config, state, frame counter) so
    the page code only has to call this on Save / Reset. The config is only
    stored once the simulation built; on failure session state is untouched.

    Returns:
        bool: True if the new simulation replaced the old one.
    """
    try:
        state = make_state(config)
    except SimulationSetupError as e:
        logger.warning("Simulation setup failed: %s", e)
        st.error(f"Simulation setup failed: {e}")
        return False
    st.session_state["config"] = config
    st.session_state["state"] = state
    st.session_state["frames"] = 0
    return True
