# app.py
import streamlit as st

from puppy_bowl.config import configure_logging, load_app_config, ui_css
from puppy_bowl.views import init, reload_roster

# ---------- Config & logging ----------
if "app_config" not in st.session_state:
    st.session_state.app_config = load_app_config()
cfg = st.session_state.app_config
configure_logging(cfg.log_level)

# ---------- Page & Theme ----------
st.set_page_config(page_title=cfg.page_title, layout="centered")
st.markdown(ui_css(), unsafe_allow_html=True)
st.title(cfg.page_title)

with st.sidebar:
    st.caption(f"API: {cfg.api_url}")
    st.button(
        "Reload roster",
        key="reload-roster",
        on_click=reload_roster,
        args=(st.session_state, cfg.api_url, cfg.request_timeout),
        width="stretch",
    )

# ---------- Containers: overlays sit above the list and survive its re-render ----------
overlay_container = st.empty()
list_container = st.empty()
st.divider()
form_container = st.empty()

init(
    st.session_state,
    list_container,
    form_container,
    overlay_container,
    api_url=cfg.api_url,
    timeout=cfg.request_timeout,
)
