"""
Centralized session state management for the content admin application.

Panel controllers live in Streamlit session state so that fetched content,
open dialogs and transient notices survive reruns. A full page reload starts
a new session, which re-fetches everything.
"""

from typing import Any, Callable, Dict, List, TypeVar

import streamlit as st

T = TypeVar("T")


def _default(value: Any) -> Any:
    return value() if callable(value) else value


class SessionStateManager:
    """Manages Streamlit session state with type-safe accessors."""

    PANEL_KEY_PREFIX = "panel_"

    APP_KEYS: Dict[str, Any] = {
        "active_page": "Website Settings",
    }

    @classmethod
    def initialize_all_session_state(cls) -> None:
        """Initialize missing session state keys with their default values."""
        for key, default in cls.APP_KEYS.items():
            if key not in st.session_state:
                st.session_state[key] = _default(default)

    @classmethod
    def reset_app_state(cls) -> None:
        """Reset page selection to defaults."""
        for key, default in cls.APP_KEYS.items():
            st.session_state[key] = _default(default)

    @classmethod
    def get_active_page(cls) -> str:
        """Get the currently selected page."""
        return st.session_state.get("active_page", cls.APP_KEYS["active_page"])

    @classmethod
    def set_active_page(cls, page: str) -> None:
        """Set the currently selected page."""
        st.session_state["active_page"] = page

    @classmethod
    def get_panel(cls, name: str, factory: Callable[[], T]) -> T:
        """Get the controller of a panel, creating it on first use."""
        key = f"{cls.PANEL_KEY_PREFIX}{name}"
        if key not in st.session_state:
            st.session_state[key] = factory()
        return st.session_state[key]

    @classmethod
    def panel_names(cls) -> List[str]:
        """Names of all panels created in this session."""
        return [k[len(cls.PANEL_KEY_PREFIX):] for k in list(st.session_state.keys()) if k.startswith(cls.PANEL_KEY_PREFIX)]

    @classmethod
    def reset_panels(cls) -> None:
        """Drop every panel controller so that each panel re-fetches on next display."""
        for name in cls.panel_names():
            del st.session_state[f"{cls.PANEL_KEY_PREFIX}{name}"]
