import os
import sys
from pathlib import Path

import streamlit as st

# --- Streamlit import bootstrap ---
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from revenue_story.engine.config.config_loader import load_story_settings
from revenue_story.engine.runners.story_runner import generate
from ui.presets import apply_preset, build_presets_by_group
from ui.pulse import get_pulse
from ui.sections import (
    render_concentration,
    render_controls,
    render_histogram,
    render_hero,
    render_momentum,
    render_validation,
)


# ------------------------------------------------------------
# Constants
# ------------------------------------------------------------
# YAML, JSON or extensionless, same loader as the CLI
BASE_CONFIG_PATH = Path(os.environ.get("REVENUE_STORY_CONFIG", ROOT / "config.yaml"))

# ------------------------------------------------------------
# App setup
# ------------------------------------------------------------
st.set_page_config(
    page_title="Revenue Concentration Story",
    layout="wide",
)

# ------------------------------------------------------------
# Helpers
# ------------------------------------------------------------

def load_base_config() -> dict:
    """Story settings from the base config file, or the built-in defaults."""
    try:
        return load_story_settings(BASE_CONFIG_PATH)
    except (KeyError, ValueError) as e:
        st.error(f"{BASE_CONFIG_PATH.name}: {e}")
        st.stop()


@st.cache_data(show_spinner=False)
def cached_generate(story_cfg: dict):
    # one generation per distinct config for the lifetime of the server
    return generate(story_cfg)


# ------------------------------------------------------------
# Session state
# ------------------------------------------------------------
if "story_config" not in st.session_state:
    st.session_state.story_config = load_base_config()

cfg = st.session_state.story_config
pulse = get_pulse(st.session_state)

# ------------------------------------------------------------
# Sidebar: presets + controls
# ------------------------------------------------------------
with st.sidebar:
    st.header("Presets")
    for group, names in build_presets_by_group().items():
        st.caption(group)
        for name in names:
            if st.button(name, use_container_width=True):
                apply_preset(cfg, load_base_config, name)
                st.rerun()

    render_controls(cfg)

# ------------------------------------------------------------
# Main page
# ------------------------------------------------------------
errors, _ = render_validation(cfg)
if errors:
    st.stop()

result = cached_generate(dict(cfg))
frames = result.to_frames()

render_hero(result, pulse)
st.divider()
render_concentration(result, frames)
st.divider()
render_momentum(frames)
st.divider()
render_histogram(frames)

with st.expander("Raw data (JSON)"):
    st.json(result.to_dict(), expanded=False)
