"""
Singleton content panels: Website Settings, About Us, Founder, Our Story
and Contact Info.
"""

import logging
from dataclasses import asdict
from typing import Any, Dict, List, Optional, Tuple

import streamlit as st

from api.content_client import ContentAPIClient
from api.resources import ABOUT_US, CONTACT_INFO, FOUNDER, OUR_STORY, SITE_SETTINGS, SingletonResource
from config.api import APIConfig
from core.models import ContactInfo, PageSection, SiteIdentity
from ui.services.content import SingletonPanelController
from ui.ui_utils import display_value, to_image_upload

from .base_renderer import ContentPanelRenderer


class SingletonPanelRenderer(ContentPanelRenderer):
    """Renders one singleton record as a two-column table plus its edit form."""

    resource: SingletonResource = SITE_SETTINGS
    field_labels: Dict[str, str] = {}
    image_labels: Dict[str, str] = {}
    multiline_fields: Tuple[str, ...] = ()
    empty_message = "No data found."

    def _create_controller(self) -> SingletonPanelController:
        return SingletonPanelController(self.client, self.resource, self.logger)

    def field_values(self) -> Dict[str, Any]:
        return self.controller.record or {}

    def display_rows(self) -> List[Tuple[str, str, str]]:
        """(label, kind, value) rows; image values are URLs, or the placeholder when absent."""
        controller = self.controller
        record = self.field_values()
        rows: List[Tuple[str, str, str]] = [
            (label, "text", display_value(record.get(name))) for name, label in self.field_labels.items()
        ]
        rows += [
            (label, "image", controller.image_url(name) or APIConfig.IMAGE_PLACEHOLDER)
            for name, label in self.image_labels.items()
        ]
        return rows

    def render_panel(self) -> None:
        controller = self.controller
        header, action = st.columns([4, 1])
        with header:
            st.subheader(self.title)
        with action:
            if st.button(controller.action_label, key=self._key("btn_open"), use_container_width=True):
                controller.open_editor()
                st.rerun()

        if controller.record is None:
            st.info(self.empty_message)
        else:
            self._render_record()

        if controller.is_editing:
            self._render_edit_dialog()

    def _render_record(self) -> None:
        for label, kind, value in self.display_rows():
            col_label, col_value = st.columns([1, 3])
            with col_label:
                st.markdown(f"**{label}**")
            with col_value:
                if kind == "image" and value != APIConfig.IMAGE_PLACEHOLDER:
                    st.image(value, width=100)
                else:
                    st.write(value)

    def _render_edit_dialog(self) -> None:
        """Render the add/edit form."""
        controller = self.controller
        st.markdown("---")
        st.markdown(f"#### {controller.action_label} {self.title}")

        with st.form(self._key("form")):
            values = {}
            for name, label in self.field_labels.items():
                if name in self.multiline_fields:
                    values[name] = st.text_area(label, value=controller.form.get(name, ""), key=self._key("field", name))
                else:
                    values[name] = st.text_input(label, value=controller.form.get(name, ""), key=self._key("field", name))

            uploads = {}
            for name, label in self.image_labels.items():
                uploads[name] = st.file_uploader(
                    f"Upload {label}",
                    type=["png", "jpg", "jpeg", "gif", "webp"],
                    key=self._key("upload", name),
                )

            col1, col2 = st.columns(2)
            with col1:
                save = st.form_submit_button("Save", use_container_width=True)
            with col2:
                cancel = st.form_submit_button("Cancel", use_container_width=True)

        if save:
            controller.update_form(**values)
            for name, uploaded in uploads.items():
                controller.attach_image(name, to_image_upload(uploaded))
            self._run_and_rerun(controller.submit())
        elif cancel:
            controller.cancel()
            st.rerun()


class WebsiteSettingsRenderer(SingletonPanelRenderer):
    panel_name = "website_settings"
    title = "Website Identity"
    resource = SITE_SETTINGS
    field_labels = {"site_name": "Website Name", "caption": "Caption", "tagline": "Tagline"}
    image_labels = {"logo": "Logo", "banner1": "Banner 1", "banner2": "Banner 2", "banner3": "Banner 3"}
    multiline_fields = ("tagline",)
    empty_message = "Loading settings or no data found..."

    def identity(self) -> Optional[SiteIdentity]:
        record = self.controller.record
        return SiteIdentity.from_api(record) if record else None

    def field_values(self) -> Dict[str, Any]:
        identity = self.identity()
        return asdict(identity) if identity else {}


class PageSectionRenderer(SingletonPanelRenderer):
    """About Us, Founder and Our Story share the title/content/image layout."""

    field_labels = {"title": "Title", "content": "Content"}
    multiline_fields = ("content",)

    def __init__(
        self,
        client: ContentAPIClient,
        resource: SingletonResource,
        title: str,
        logger_obj: Optional[logging.Logger] = None,
    ):
        super().__init__(client, logger_obj)
        self.resource = resource
        self.panel_name = f"section_{resource.name}"
        self.title = title
        self.image_labels = {resource.image_fields[0]: "Image"}

    def section(self) -> Optional[PageSection]:
        record = self.controller.record
        return PageSection.from_api(record, self.resource.image_fields[0]) if record else None

    def field_values(self) -> Dict[str, Any]:
        section = self.section()
        return asdict(section) if section else {}

    def render_panel(self) -> None:
        super().render_panel()
        section = self.section()
        if section is not None and section.image is None:
            st.caption("No image uploaded yet.")


class ContactInfoRenderer(SingletonPanelRenderer):
    panel_name = "contact_info"
    title = "Contact Information"
    resource = CONTACT_INFO
    field_labels = {"phone": "Phone Number", "email": "Email Address", "address": "Office Address"}
    multiline_fields = ("address",)
    empty_message = "No contact information added yet."

    def contact(self) -> Optional[ContactInfo]:
        record = self.controller.record
        return ContactInfo.from_api(record) if record else None

    def field_values(self) -> Dict[str, Any]:
        contact = self.contact()
        return asdict(contact) if contact else {}


def about_us_renderer(client: ContentAPIClient, logger_obj: Optional[logging.Logger] = None) -> PageSectionRenderer:
    return PageSectionRenderer(client, ABOUT_US, "About Us", logger_obj)


def founder_renderer(client: ContentAPIClient, logger_obj: Optional[logging.Logger] = None) -> PageSectionRenderer:
    return PageSectionRenderer(client, FOUNDER, "Founder", logger_obj)


def our_story_renderer(client: ContentAPIClient, logger_obj: Optional[logging.Logger] = None) -> PageSectionRenderer:
    return PageSectionRenderer(client, OUR_STORY, "Our Story", logger_obj)
