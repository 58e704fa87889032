"""
Website Settings page.

Stacks the site identity, social links, About Us, Our Story and Founder
panels. Each panel fetches its content independently the first time it is
displayed.
"""

import logging
from typing import List

import streamlit as st

from api.content_client import ContentAPIClient
from ui.renderers.content import (
    ContentPanelRenderer,
    SocialLinksRenderer,
    WebsiteSettingsRenderer,
    about_us_renderer,
    founder_renderer,
    our_story_renderer,
)


class SettingsPageRenderer:
    """Handles rendering of the Website Settings page."""

    def __init__(self, client: ContentAPIClient, logger: logging.Logger):
        """
        Initialize the settings page renderer.

        Args:
            client: Client of the content API
            logger: Logger instance for error reporting
        """
        self.client = client
        self.logger = logger

    def panels(self) -> List[ContentPanelRenderer]:
        return [
            WebsiteSettingsRenderer(self.client, self.logger),
            SocialLinksRenderer(self.client, self.logger),
            about_us_renderer(self.client, self.logger),
            our_story_renderer(self.client, self.logger),
            founder_renderer(self.client, self.logger),
        ]

    def render_page(self) -> None:
        st.title("⚙️ Website Settings")
        for i, panel in enumerate(self.panels()):
            if i:
                st.divider()
            panel.render()
