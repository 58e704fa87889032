from __future__ import annotations

# Standard Library Imports
import logging
import sys
from pathlib import Path

# Third-Party Imports
import streamlit as st

# Add the 'src' directory to sys.path
_CURRENT_FILE_DIR = Path(__file__).resolve().parent
_SRC_DIR = _CURRENT_FILE_DIR.parent

if str(_SRC_DIR) not in sys.path:
    sys.path.insert(0, str(_SRC_DIR))

# Local Application Imports
from config.settings import Settings
from core.dependencies import DependencyContainer
from ui.pages import LegalInfoPageRenderer, SettingsPageRenderer
from ui.state.session_manager import SessionStateManager

PAGES = ("Website Settings", "Legal Info")

st.set_page_config(
    page_title=Settings.APP_TITLE,
    layout="wide",
    initial_sidebar_state="expanded",
    menu_items={
        'Get help': None,
        'Report a Bug': None,
        'About': None
    }
)


@st.cache_resource
def get_container() -> DependencyContainer:
    return DependencyContainer()


container = get_container()
ui_logger = container.get_logger()

SessionStateManager.initialize_all_session_state()

with st.sidebar:
    st.header(Settings.APP_TITLE)
    page = st.radio(
        "Page",
        PAGES,
        index=PAGES.index(SessionStateManager.get_active_page()) if SessionStateManager.get_active_page() in PAGES else 0,
    )
    SessionStateManager.set_active_page(page)

    if st.button("🔄 Reload content", use_container_width=True):
        ui_logger.info("Operator requested a reload of all panels")
        SessionStateManager.reset_panels()
        st.rerun()

try:
    client = container.client
except ValueError as e:
    ui_logger.error(f"Cannot start: {e}")
    st.error(f"{e}")
    st.stop()

if page == "Legal Info":
    LegalInfoPageRenderer(client, logging.getLogger(f"{Settings.LOGGER_NAME}.legal")).render_page()
else:
    SettingsPageRenderer(client, logging.getLogger(f"{Settings.LOGGER_NAME}.settings")).render_page()
