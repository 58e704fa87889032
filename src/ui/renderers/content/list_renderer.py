"""
List-backed content panels: FAQs and social links.
"""

from typing import List

import pandas as pd
import streamlit as st

from config.api import APIConfig
from ui.services.content import FAQPanelController, SocialLinksPanelController
from ui.ui_utils import format_active, truncate_preview

from .base_renderer import ContentPanelRenderer


class ListPanelRenderer(ContentPanelRenderer):
    """A table of items, a selector for row actions and an add/edit form."""

    empty_message = "No items found."
    add_label = "➕ Add"

    def display_frame(self) -> pd.DataFrame:
        raise NotImplementedError

    def row_labels(self) -> List[str]:
        return [self.controller.describe(item) for item in self.controller.items]

    def render_panel(self) -> None:
        controller = self.controller
        header, action = st.columns([4, 1])
        with header:
            st.subheader(self.title)
        with action:
            if st.button(self.add_label, key=self._key("btn_add"), use_container_width=True):
                controller.open_create()
                st.rerun()

        if not controller.items:
            st.info(self.empty_message)
        else:
            st.dataframe(self.display_frame(), use_container_width=True, hide_index=True)
            self._render_row_actions()

        if controller.is_editing:
            self._render_edit_dialog()

    def _render_row_actions(self) -> None:
        controller = self.controller
        ids = [item.id for item in controller.items]
        labels = dict(zip(ids, self.row_labels()))

        col_select, col_edit, col_delete = st.columns([3, 1, 1])
        with col_select:
            selected = st.selectbox(
                "Select entry",
                options=ids,
                format_func=lambda item_id: labels.get(item_id, str(item_id)),
                key=self._key("select_row"),
            )
        with col_edit:
            if st.button("✏️ Edit", key=self._key("btn_edit"), use_container_width=True):
                controller.open_edit(selected)
                st.rerun()
        with col_delete:
            if st.button("🗑️ Delete", key=self._key("btn_delete"), use_container_width=True):
                controller.request_delete(selected)
                st.rerun()

    def _field_key(self, name: str) -> str:
        return self._key("field", self.controller.editing_id or "new", name)

    def _render_form_fields(self) -> dict:
        raise NotImplementedError

    def _render_edit_dialog(self) -> None:
        controller = self.controller
        verb = "Edit" if controller.editing_id is not None else "Add"
        st.markdown("---")
        st.markdown(f"#### {verb} {controller.noun}")

        with st.form(self._key("form", controller.editing_id or "new")):
            values = self._render_form_fields()
            col1, col2 = st.columns(2)
            with col1:
                save = st.form_submit_button("Save", use_container_width=True)
            with col2:
                cancel = st.form_submit_button("Cancel", use_container_width=True)

        if save:
            controller.update_form(**values)
            self._run_and_rerun(controller.submit())
        elif cancel:
            controller.cancel()
            st.rerun()


class FAQRenderer(ListPanelRenderer):
    panel_name = "faq"
    title = "FAQs"
    empty_message = "No FAQs found."
    add_label = "➕ Add FAQ"

    def _create_controller(self) -> FAQPanelController:
        return FAQPanelController(self.client, self.logger)

    def display_frame(self) -> pd.DataFrame:
        rows = [
            {
                "Question": faq.question,
                "Answer": truncate_preview(faq.answer, APIConfig.ANSWER_PREVIEW_CHARS),
                "Status": format_active(faq.is_active),
            }
            for faq in self.controller.items
        ]
        return pd.DataFrame(rows, columns=["Question", "Answer", "Status"])

    def _render_form_fields(self) -> dict:
        form = self.controller.form
        return {
            "question": st.text_input("Question", value=form["question"], key=self._field_key("question")),
            "answer": st.text_area("Answer", value=form["answer"], key=self._field_key("answer")),
            "is_active": st.checkbox("Active", value=bool(form["is_active"]), key=self._field_key("is_active")),
        }


class SocialLinksRenderer(ListPanelRenderer):
    panel_name = "social_links"
    title = "Social Media Links"
    empty_message = "No social links added yet."
    add_label = "➕ Add Link"

    def _create_controller(self) -> SocialLinksPanelController:
        return SocialLinksPanelController(self.client, self.logger)

    def display_frame(self) -> pd.DataFrame:
        rows = [{"Platform": link.platform, "URL": link.url} for link in self.controller.items]
        return pd.DataFrame(rows, columns=["Platform", "URL"])

    def _render_form_fields(self) -> dict:
        form = self.controller.form
        platforms = list(APIConfig.SOCIAL_PLATFORMS)
        index = platforms.index(form["platform"]) if form["platform"] in platforms else None
        return {
            "platform": st.selectbox(
                "Platform",
                options=platforms,
                index=index,
                placeholder="Select platform",
                key=self._field_key("platform"),
            )
            or "",
            "url": st.text_input("URL", value=form["url"], key=self._field_key("url")),
        }
