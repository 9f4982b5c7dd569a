import logging

import streamlit as st

from pyrsistent import thaw

from config import (
    get_config_from_widgets,
    make_state_and_reset,
    set_default_config,
)
from turmite_universe.config import SimulationConfig
from turmite_universe.renderer import render
from turmite_universe.state import State
from turmite_universe.step import step_frame

logging.basicConfig(
    level=logging.INFO, format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)

st.set_page_config(layout="wide", page_title="Turmite Universe")


def advance(frames: int) -> None:
    state: State = st.session_state["state"]
    for _ in range(frames):
        state = step_frame(state)
    st.session_state["state"] = state
    st.session_state["frames"] += frames


# --------- Main App ---------

set_default_config()
tab_sim, tab_config, tab_state = st.tabs(["Simulation", "Config", "State"])

with tab_config:
    config: SimulationConfig = get_config_from_widgets()

    if st.button("Save", key="save_config_btn", use_container_width=True):
        make_state_and_reset(config)
    st.divider()

with tab_sim:
    if "state" not in st.session_state:
        make_state_and_reset(st.session_state["config"])

    left_col, middle_col = st.columns([0.25, 0.75])

    with left_col:
        current: SimulationConfig = st.session_state["config"]
        if st.button("🔁 Reset", key="reset_btn", use_container_width=True):
            make_state_and_reset(current)
        if st.button("⏭️ Step frame", key="step_btn", use_container_width=True):
            advance(1)
        burst = int(
            st.number_input("Frames per run", min_value=1, max_value=1000, value=50)
        )
        if st.button("▶️ Run", key="run_btn", use_container_width=True):
            advance(burst)
        show_ants = st.checkbox("Mark ants", value=True, key="show_ants")

        state = st.session_state.get("state")
        if state is not None:
            st.info(f"**Rule:** {state.rule}", icon="🐜")
            st.info(f"**Tick:** {state.tick}", icon="⏱️")
            st.info(f"**Frames:** {st.session_state['frames']}", icon="🎞️")

    with middle_col:
        state = st.session_state.get("state")
        if state is not None:
            scale = st.session_state["config"].scale
            img = render(state, scale=scale, show_ants=show_ants)
            st.image(img, use_container_width=True)

with tab_state:
    state = st.session_state.get("state")
    if state is not None:
        st.json(thaw(state.description), expanded=1)
