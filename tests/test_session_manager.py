"""
Tests for SessionStateManager.
"""
from unittest.mock import Mock

from ui.state.session_manager import SessionStateManager


class TestSessionStateManager:

    def test_initialize_defaults(self, session_state):
        SessionStateManager.initialize_all_session_state()
        assert session_state["active_page"] == "Website Settings"

    def test_initialize_keeps_existing(self, session_state):
        session_state["active_page"] = "Legal Info"
        SessionStateManager.initialize_all_session_state()
        assert SessionStateManager.get_active_page() == "Legal Info"

    def test_reset_app_state(self, session_state):
        SessionStateManager.set_active_page("Legal Info")
        SessionStateManager.reset_app_state()
        assert SessionStateManager.get_active_page() == "Website Settings"

    def test_get_panel_creates_once(self, session_state):
        factory = Mock(side_effect=lambda: object())

        first = SessionStateManager.get_panel("faq", factory)
        second = SessionStateManager.get_panel("faq", factory)

        assert first is second
        factory.assert_called_once()

    def test_reset_panels(self, session_state):
        SessionStateManager.get_panel("faq", object)
        SessionStateManager.get_panel("terms", object)
        session_state["active_page"] = "Legal Info"

        assert sorted(SessionStateManager.panel_names()) == ["faq", "terms"]
        SessionStateManager.reset_panels()

        assert SessionStateManager.panel_names() == []
        assert session_state["active_page"] == "Legal Info"
