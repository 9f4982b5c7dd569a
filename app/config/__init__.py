import streamlit as st

from turmite_universe.config import DEFAULT_NUM_ANTS, DEFAULT_RULE, SimulationConfig
from turmite_universe.rules import RULE_REGISTRY
from turmite_universe.state import DEFAULT_STEPS_PER_FRAME

from .state_factory import make_state_and_reset

__all__ = [
    "make_state_and_reset",
    "set_default_config",
    "get_config_from_widgets",
]

# The browser view is much smaller than a full HD grid.
APP_DEFAULT_WIDTH = 320
APP_DEFAULT_HEIGHT = 180
APP_DEFAULT_SCALE = 3
CUSTOM_RULE_LABEL = "custom"


def _initial_config() -> SimulationConfig:
    return SimulationConfig(
        width=APP_DEFAULT_WIDTH,
        height=APP_DEFAULT_HEIGHT,
        scale=APP_DEFAULT_SCALE,
    )


def set_default_config() -> None:
    if "config" not in st.session_state:
        st.session_state["config"] = _initial_config()


def get_config_from_widgets() -> SimulationConfig:
    current: SimulationConfig = st.session_state["config"]
    st.subheader("Grid")
    width = int(
        st.number_input("Width", min_value=1, max_value=4096, value=current.width)
    )
    height = int(
        st.number_input("Height", min_value=1, max_value=4096, value=current.height)
    )
    scale = int(st.number_input("Scale", min_value=1, max_value=16, value=current.scale))

    st.subheader("Ants")
    num_ants = int(
        st.number_input(
            "Number of ants",
            min_value=1,
            max_value=64,
            value=current.num_ants or DEFAULT_NUM_ANTS,
        )
    )
    steps_per_frame = int(
        st.number_input(
            "Ticks per frame",
            min_value=0,
            max_value=100_000,
            value=current.steps_per_frame or DEFAULT_STEPS_PER_FRAME,
        )
    )

    st.subheader("Rule")
    rule_names = list(RULE_REGISTRY.keys()) + [CUSTOM_RULE_LABEL]
    default_idx = (
        rule_names.index(current.rule)
        if current.rule in RULE_REGISTRY
        else rule_names.index(CUSTOM_RULE_LABEL)
    )
    selected = st.selectbox(
        "Preset",
        rule_names,
        index=default_idx,
        format_func=lambda name: (
            f"{name} ({RULE_REGISTRY[name]})" if name in RULE_REGISTRY else name
        ),
        key="rule_select",
    )
    if selected == CUSTOM_RULE_LABEL:
        rule = st.text_input(
            "Rule string (F, B, L, R)",
            value=current.rule if current.rule not in RULE_REGISTRY else "RL",
            key="rule_text",
        )
    else:
        rule = selected or DEFAULT_RULE

    return SimulationConfig(
        width=width,
        height=height,
        rule=rule,
        num_ants=num_ants,
        steps_per_frame=steps_per_frame,
        scale=scale,
    )
