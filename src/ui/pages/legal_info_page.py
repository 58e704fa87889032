"""
Legal Info page: one tab per legal content panel.
"""

import logging
from typing import List, Tuple

import streamlit as st

from api.content_client import ContentAPIClient
from ui.renderers.content import (
    CaregiverTermsRenderer,
    ContactInfoRenderer,
    ContentPanelRenderer,
    FAQRenderer,
    PrivacyPolicyRenderer,
    TermsRenderer,
)


class LegalInfoPageRenderer:
    """Handles rendering of the Legal Info page."""

    TAB_LABELS = ("Terms & Conditions", "Privacy Policy", "FAQs", "Caregiver Terms", "Contact Info")

    def __init__(self, client: ContentAPIClient, logger: logging.Logger):
        self.client = client
        self.logger = logger

    def tabs(self) -> List[Tuple[str, ContentPanelRenderer]]:
        renderers = [
            TermsRenderer(self.client, self.logger),
            PrivacyPolicyRenderer(self.client, self.logger),
            FAQRenderer(self.client, self.logger),
            CaregiverTermsRenderer(self.client, self.logger),
            ContactInfoRenderer(self.client, self.logger),
        ]
        return list(zip(self.TAB_LABELS, renderers))

    def render_page(self) -> None:
        st.title("📜 Legal Info")
        tabs = self.tabs()
        # st.tabs renders every tab body, so all five panels fetch on first display
        for container, (_, panel) in zip(st.tabs([label for label, _ in tabs]), tabs):
            with container:
                panel.render()
