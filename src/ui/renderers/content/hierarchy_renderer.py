"""
Legal content panels: Privacy Policy, Caregiver Terms and Terms & Conditions.

Each topic is shown in an expander with its subtopics beneath it. Terms &
Conditions additionally lists the subpoints of every subtopic with an
inline add/edit input per subtopic.
"""

from typing import Tuple

import streamlit as st

from core.models import LegalTopic, Subpoint, Subtopic
from ui.services.content import (
    CaregiverTermsPanelController,
    PrivacyPolicyPanelController,
    TermsPanelController,
)
from ui.ui_utils import truncate_preview

from .base_renderer import ContentPanelRenderer


class HierarchyPanelRenderer(ContentPanelRenderer):
    """Topics with nested subtopics, plus the topic and subtopic dialogs."""

    empty_message = "No terms found."
    add_label = "➕ Add Term"
    subtopic_label = "Sub Number"

    def subtopics_of(self, topic: LegalTopic) -> Tuple[Subtopic, ...]:
        return self.controller.subtopics_for(topic.id)

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
        for topic in controller.items:
            self._render_topic(topic)

        if controller.subtopic_dialog.open:
            self._render_subtopic_dialog()
        elif controller.is_editing:
            self._render_topic_dialog()

    def _render_topic(self, topic: LegalTopic) -> None:
        controller = self.controller
        with st.expander(topic.title or f"#{topic.id}", expanded=False):
            st.write(truncate_preview(topic.content))
            col_edit, col_delete, col_add = st.columns(3)
            with col_edit:
                if st.button("✏️ Edit", key=self._key("btn_edit", topic.id)):
                    controller.open_edit(topic.id)
                    st.rerun()
            with col_delete:
                if st.button("🗑️ Delete", key=self._key("btn_delete", topic.id)):
                    controller.request_delete(topic.id)
                    st.rerun()
            with col_add:
                if st.button("➕ Add Subtopic", key=self._key("btn_add_sub", topic.id)):
                    controller.open_subtopic_create(topic.id)
                    st.rerun()
            self._render_subtopics(topic)

    def _render_subtopics(self, topic: LegalTopic) -> None:
        subtopics = self.subtopics_of(topic)
        if not subtopics:
            st.caption("No subtopics.")
            return
        for subtopic in subtopics:
            self._render_subtopic(topic, subtopic)

    def _render_subtopic(self, topic: LegalTopic, subtopic: Subtopic) -> None:
        controller = self.controller
        col_text, col_edit, col_delete = st.columns([6, 1, 1])
        with col_text:
            st.markdown(f"**{subtopic.label}** {truncate_preview(subtopic.content)}")
        with col_edit:
            if st.button("✏️", key=self._key("btn_edit_sub", subtopic.id)):
                controller.open_subtopic_edit(topic.id, subtopic)
                st.rerun()
        with col_delete:
            if st.button("🗑️", key=self._key("btn_delete_sub", subtopic.id)):
                controller.request_subtopic_delete(topic.id, subtopic)
                st.rerun()

    def _render_topic_dialog(self) -> None:
        controller = self.controller
        verb = "Edit" if controller.editing_id is not None else "Add"
        st.markdown("---")
        st.markdown(f"#### {verb} {controller.noun}")

        form_id = controller.editing_id or "new"
        with st.form(self._key("topic_form", form_id)):
            title = st.text_input("Title", value=controller.form["title"], key=self._key("field_title", form_id))
            content = st.text_area("Content", value=controller.form["content"], key=self._key("field_content", form_id))
            col1, col2 = st.columns(2)
            with col1:
                save = st.form_submit_button("Save", use_container_width=True)
            with col2:
                cancel = st.form_submit_button("Cancel", use_container_width=True)

        if save:
            controller.update_form(title=title, content=content)
            self._run_and_rerun(controller.submit())
        elif cancel:
            controller.cancel()
            st.rerun()

    def _render_subtopic_dialog(self) -> None:
        controller = self.controller
        dialog = controller.subtopic_dialog
        verb = "Edit" if dialog.editing_id is not None else "Add"
        st.markdown("---")
        st.markdown(f"#### {verb} {controller.subtopic_noun}")

        form_id = f"{dialog.parent_id}_{dialog.editing_id or 'new'}"
        with st.form(self._key("subtopic_form", form_id)):
            label = st.text_input(self.subtopic_label, value=dialog.label, key=self._key("field_sub_label", form_id))
            content = st.text_area("Content", value=dialog.content, key=self._key("field_sub_content", form_id))
            col1, col2 = st.columns(2)
            with col1:
                save = st.form_submit_button("Save", use_container_width=True)
            with col2:
                cancel = st.form_submit_button("Cancel", use_container_width=True)

        if save:
            controller.update_subtopic_form(label=label, content=content)
            self._run_and_rerun(controller.submit_subtopic())
        elif cancel:
            controller.cancel_subtopic()
            st.rerun()


class PrivacyPolicyRenderer(HierarchyPanelRenderer):
    panel_name = "privacy_policy"
    title = "Privacy Policy"
    empty_message = "No privacy policies found."
    add_label = "➕ Add Policy"
    subtopic_label = "Subtopic Title"

    def _create_controller(self) -> PrivacyPolicyPanelController:
        return PrivacyPolicyPanelController(self.client, self.logger)

    def _render_subtopics(self, topic: LegalTopic) -> None:
        controller = self.controller
        if topic.id not in controller.expanded:
            if st.button("Show subtopics", key=self._key("btn_expand", topic.id)):
                self._run_and_rerun(controller.expand(topic.id))
            return
        if st.button("Hide subtopics", key=self._key("btn_collapse", topic.id)):
            controller.collapse(topic.id)
            st.rerun()
        super()._render_subtopics(topic)


class CaregiverTermsRenderer(HierarchyPanelRenderer):
    panel_name = "caregiver_terms"
    title = "Caregiver Terms"

    def _create_controller(self) -> CaregiverTermsPanelController:
        return CaregiverTermsPanelController(self.client, self.logger)


class TermsRenderer(HierarchyPanelRenderer):
    panel_name = "terms"
    title = "Terms & Conditions"

    def _create_controller(self) -> TermsPanelController:
        return TermsPanelController(self.client, self.logger)

    def _render_subtopic(self, topic: LegalTopic, subtopic: Subtopic) -> None:
        super()._render_subtopic(topic, subtopic)
        for subpoint in subtopic.subpoints:
            self._render_subpoint(subtopic, subpoint)
        self._render_subpoint_input(subtopic)

    def _render_subpoint(self, subtopic: Subtopic, subpoint: Subpoint) -> None:
        controller = self.controller
        col_text, col_edit, col_delete = st.columns([6, 1, 1])
        with col_text:
            st.markdown(f"&nbsp;&nbsp;&nbsp;&nbsp;• {subpoint.point}")
        with col_edit:
            if st.button("✏️", key=self._key("btn_edit_point", subpoint.id)):
                controller.edit_subpoint(subtopic.id, subpoint)
                st.rerun()
        with col_delete:
            if st.button("🗑️", key=self._key("btn_delete_point", subpoint.id)):
                controller.request_subpoint_delete(subtopic.id, subpoint)
                st.rerun()

    def _render_subpoint_input(self, subtopic: Subtopic) -> None:
        controller = self.controller
        draft = controller.draft_for(subtopic.id)
        with st.form(self._key("point_form", subtopic.id, draft.editing_id or "new"), clear_on_submit=True):
            text = st.text_input(
                "Subpoint",
                value=draft.text,
                placeholder="Add a subpoint",
                label_visibility="collapsed",
                key=self._key("field_point", subtopic.id, draft.editing_id or "new"),
            )
            col1, col2 = st.columns(2)
            with col1:
                save = st.form_submit_button("Update" if draft.editing_id is not None else "Add")
            with col2:
                cancel = st.form_submit_button("Cancel", disabled=draft.editing_id is None)

        if save:
            controller.set_subpoint_text(subtopic.id, text)
            self._run_and_rerun(controller.submit_subpoint(subtopic.id))
        elif cancel:
            controller.cancel_subpoint_edit(subtopic.id)
            st.rerun()
