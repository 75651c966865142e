from dataclasses import replace
from typing import Any, MutableMapping

import streamlit as st

from dungen import DEFAULT_CONFIGURATION, DungeonConfiguration


def set_default_config() -> None:
    if "config" not in st.session_state:
        st.session_state["config"] = replace(DEFAULT_CONFIGURATION, seed=0)


def advance_seed(state: MutableMapping[str, Any]) -> None:
    """Button callback: bump the seed widget and request a new run.

    Runs before the script reruns, so the seed widget picks up the new value.
    """
    current = state.get("seed", state["config"].seed or 0)
    state["seed"] = int(current) + 1
    state["regenerate"] = True


def get_config_from_widgets() -> DungeonConfiguration:
    current: DungeonConfiguration = st.session_state["config"]
    st.subheader("Grid Size")
    width: int = st.slider("Width", 2, 80, current.width, key="width")
    height: int = st.slider("Height", 2, 80, current.height, key="height")

    st.subheader("Shape")
    randomness: float = st.slider(
        "Randomness (0=straight corridors, 1=no bias)",
        0.0,
        1.0,
        current.randomness,
        step=0.01,
        key="randomness",
    )
    sparseness: float = st.slider(
        "Sparseness (fraction of closed walls opened)",
        0.0,
        1.0,
        current.sparseness,
        step=0.01,
        key="sparseness",
    )
    chance: float = st.slider(
        "Chance to remove dead ends",
        0.0,
        1.0,
        current.chance_to_remove_deadends,
        step=0.01,
        key="chance_to_remove_deadends",
    )
    seed: int = int(
        st.number_input("Seed", value=current.seed or 0, step=1, key="seed")
    )
    return DungeonConfiguration(
        width=width,
        height=height,
        randomness=randomness,
        sparseness=sparseness,
        chance_to_remove_deadends=chance,
        seed=seed,
    )
