"""Streamlit viewer that animates a generation run.

Run with ``streamlit run app/main.py``. The run happens on the generator's
worker thread; this script consumes the change stream and redraws the grid
every few events, showing the active processor as status.
"""

import time
from typing import Dict

import streamlit as st

from config import advance_seed, get_config_from_widgets, set_default_config
from dungen import DungeonConfiguration, DungeonGenerator, render_image
from dungen.analysis import summarize
from dungen.log_utils import setup_logging

# Seconds to pause per redraw, per processor label (slower passes stand out).
FRAME_DELAY: Dict[str, float] = {
    "Generating maze": 0.0,
    "Reducing density": 0.02,
    "Removing dead ends": 0.02,
}

st.set_page_config(layout="wide", page_title="DunGen")
setup_logging("INFO")
set_default_config()

config_col, view_col = st.columns([0.3, 0.7])

with config_col:
    config: DungeonConfiguration = get_config_from_widgets()
    animate: bool = st.checkbox("Animate", value=True, key="animate")
    frame_every: int = st.slider("Events per frame", 1, 200, 25, key="frame_every")
    generate = st.button("🔁 Generate", key="generate_btn", use_container_width=True)
    st.button(
        "🎲 New Seed",
        key="seed_btn",
        use_container_width=True,
        on_click=advance_seed,
        args=(st.session_state,),
    )
    generate = st.session_state.pop("regenerate", False) or generate
    st.session_state["config"] = config

with view_col:
    status = st.empty()
    canvas = st.empty()
    generator = DungeonGenerator()

    if generate and animate:
        grid = None
        for count, change in enumerate(generator.stream(config), start=1):
            grid = change.grid
            if count % frame_every:
                continue
            status.info(change.label, icon="⛏️")
            canvas.image(render_image(grid, highlight=change.cells), use_container_width=True)
            delay = FRAME_DELAY.get(change.label, 0.0)
            if delay:
                time.sleep(delay)
        if grid is not None:
            st.session_state["grid"] = grid
    elif generate or "grid" not in st.session_state:
        st.session_state["grid"] = generator.generate(config)

    grid = st.session_state["grid"]
    status.success("Done", icon="✅")
    canvas.image(render_image(grid), use_container_width=True)
    st.json(dict(summarize(grid)), expanded=True)
