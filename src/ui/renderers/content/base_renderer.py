"""
Shared rendering pieces for content manager panels.

Provides:
- lazy controller lookup in session state
- fetch-on-first-display
- transient notice display
- the delete confirmation dialog
"""

import logging
from typing import Any, Coroutine, Optional

import streamlit as st

from api.content_client import ContentAPIClient
from ui.services.content import PanelController
from ui.state.session_manager import SessionStateManager
from ui.ui_utils import run_async


class ContentPanelRenderer:
    """Base class for the Streamlit rendering of one content panel."""

    panel_name = ""
    title = ""

    def __init__(self, client: ContentAPIClient, logger_obj: Optional[logging.Logger] = None):
        """Initialize the renderer."""
        self.client = client
        self.logger = logger_obj or logging.getLogger(__name__)

    def _create_controller(self) -> PanelController:
        raise NotImplementedError

    @property
    def controller(self) -> Any:
        """Get or create this panel's controller."""
        return SessionStateManager.get_panel(self.panel_name, self._create_controller)

    def _key(self, *parts: Any) -> str:
        return "_".join([self.panel_name, *(str(p) for p in parts)])

    def _run(self, coro: Coroutine[Any, Any, Any]) -> Any:
        return run_async(coro)

    def _run_and_rerun(self, coro: Coroutine[Any, Any, Any]) -> None:
        """Run a controller action, then redraw with the updated state."""
        self._run(coro)
        st.rerun()

    def ensure_loaded(self) -> None:
        """Fetch the panel's content the first time it is displayed."""
        controller = self.controller
        if not controller.loaded_once:
            self.logger.info(f"Loading {self.panel_name} panel")
            self._run(controller.load())

    def render(self) -> None:
        self.ensure_loaded()
        self.render_panel()
        self._render_notice()
        self._render_delete_confirmation()

    def render_panel(self) -> None:
        raise NotImplementedError

    def _render_notice(self) -> None:
        notice = self.controller.notice
        if notice is None:
            return
        if notice.is_error:
            st.error(notice.message)
        elif notice.severity == "info":
            st.info(notice.message)
        else:
            st.success(notice.message)

    def _render_delete_confirmation(self) -> None:
        """Render the delete confirmation dialog if a delete is pending."""
        controller = self.controller
        pending = getattr(controller, "pending_delete", None)
        if pending is None:
            return

        st.markdown("---")
        st.error(f"""
        ⚠️ **This action is permanent and cannot be undone!**

        Are you sure you want to delete **{pending.label or pending.item_id}**?
        """)

        confirm = st.checkbox(
            f"I understand this will permanently delete {pending.label or pending.item_id}",
            key=self._key("confirm_delete", pending.level, pending.item_id),
        )

        col1, col2 = st.columns(2)
        with col1:
            if st.button(
                "🗑️ Delete Permanently",
                key=self._key("btn_confirm_delete"),
                disabled=not confirm,
                type="primary",
                use_container_width=True,
            ):
                self._run_and_rerun(controller.confirm_delete())
        with col2:
            if st.button("Cancel", key=self._key("btn_cancel_delete"), use_container_width=True):
                controller.cancel_delete()
                st.rerun()
