"""Controllers for legal content organised as topics with subtopics.

Privacy Policy loads subtopics lazily when a policy is expanded and caches
them per policy. Caregiver Terms receive subtopics embedded in the topic
list. Terms & Conditions (see ``terms_panel``) add a third level.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, replace
from typing import Any, Optional

from api.content_client import ContentAPIClient
from api.error_handling import ContentAPIError
from api.resources import (
    CAREGIVER_SUBTOPIC,
    CAREGIVER_TERMS,
    PRIVACY_POLICY,
    PRIVACY_SUBTOPIC,
    ChildResource,
    CollectionResource,
)
from core.models import LegalTopic, Subtopic

from .list_panel import ListPanelController, PendingDelete
from .panel_state import PanelStatus, RequestSequencer, response_message


@dataclass
class SubtopicDialog:
    """Form state of the subtopic add/edit dialog."""

    parent_id: Optional[int] = None
    editing_id: Optional[int] = None
    label: str = ""
    content: str = ""
    open: bool = False


class HierarchicalPanelController(ListPanelController):
    """Topic list with an independent add/edit/delete dialog for subtopics."""

    noun = "Term"
    subtopic_noun = "Subtopic"
    form_defaults = {"title": "", "content": ""}

    def __init__(
        self,
        client: ContentAPIClient,
        resource: CollectionResource,
        child: ChildResource,
        logger_obj: Optional[logging.Logger] = None,
    ):
        super().__init__(client, resource, LegalTopic.from_api, logger_obj)
        self.child = child
        self.subtopic_dialog = SubtopicDialog()
        self._subtree_sequencers: dict[int, RequestSequencer] = {}

    def to_form(self, item: LegalTopic) -> dict[str, Any]:
        return {"title": item.title, "content": item.content}

    def describe(self, item: LegalTopic) -> str:
        return item.title

    def subtopics_for(self, topic_id: int) -> tuple[Subtopic, ...]:
        return self.find(topic_id).subtopics

    def _parse_subtopic(self, data: dict[str, Any]) -> Subtopic:
        return Subtopic.from_api(data, self.child.parent_field, self.child.label_field or "title")

    def _subtree_token(self, parent_id: int) -> tuple[RequestSequencer, int]:
        sequencer = self._subtree_sequencers.setdefault(parent_id, RequestSequencer())
        return sequencer, sequencer.next()

    async def _refresh_subtree(self, parent_id: int) -> None:
        """Re-fetch whatever holds the subtopics of ``parent_id``."""
        await self.load()

    # --- subtopic dialog ----------------------------------------------------

    def open_subtopic_create(self, parent_id: int) -> None:
        self.clear_notice()
        self.subtopic_dialog = SubtopicDialog(parent_id=parent_id, open=True)
        self.status = PanelStatus.EDITING

    def open_subtopic_edit(self, parent_id: int, subtopic: Subtopic) -> None:
        self.clear_notice()
        self.subtopic_dialog = SubtopicDialog(
            parent_id=parent_id,
            editing_id=subtopic.id,
            label=subtopic.label,
            content=subtopic.content,
            open=True,
        )
        self.status = PanelStatus.EDITING

    def update_subtopic_form(self, label: Optional[str] = None, content: Optional[str] = None) -> None:
        if label is not None:
            self.subtopic_dialog.label = label
        if content is not None:
            self.subtopic_dialog.content = content

    def cancel_subtopic(self) -> None:
        self.subtopic_dialog = SubtopicDialog()
        self.status = self._settled_status(bool(self.items))

    def subtopic_payload(self) -> dict[str, Any]:
        dialog = self.subtopic_dialog
        payload: dict[str, Any] = {self.child.parent_field: dialog.parent_id, "content": dialog.content}
        if self.child.label_field:
            payload[self.child.label_field] = dialog.label
        return payload

    async def submit_subtopic(self) -> bool:
        dialog = self.subtopic_dialog
        if dialog.parent_id is None:
            raise ValueError("Subtopic dialog has no parent topic")
        if not self._begin_submit():
            return False
        try:
            if dialog.editing_id is not None:
                response = await self.client.send_json(
                    "PUT", self.child.item_path(dialog.editing_id), self.subtopic_payload()
                )
                message = response_message(response, f"{self.subtopic_noun} updated")
            else:
                response = await self.client.send_json("POST", self.child.path, self.subtopic_payload())
                message = response_message(response, f"{self.subtopic_noun} added")
        except ContentAPIError as e:
            self._fail_submit(f"Failed to save {self.subtopic_noun.lower()}", e)
            return False

        self.logger.info(f"{message} (parent {dialog.parent_id})")
        self.subtopic_dialog = SubtopicDialog()
        self.status = self._settled_status(bool(self.items))
        await self._refresh_subtree(dialog.parent_id)
        self._notify(message)
        return True

    def request_subtopic_delete(self, parent_id: int, subtopic: Subtopic) -> None:
        self.clear_notice()
        self.pending_delete = PendingDelete("subtopic", subtopic.id, parent_id=parent_id, label=subtopic.label)

    # --- delete dispatch ----------------------------------------------------

    def _delete_noun(self, pending: PendingDelete) -> str:
        if pending.level == "subtopic":
            return self.subtopic_noun
        return self.noun

    async def _delete(self, pending: PendingDelete) -> None:
        if pending.level == "subtopic":
            await self.client.delete(self.child.item_path(pending.item_id))
            await self._refresh_subtree(pending.parent_id)
            return
        await super()._delete(pending)


class PrivacyPolicyPanelController(HierarchicalPanelController):
    """Policies load up front; each policy's subtopics load when it is expanded."""

    noun = "Privacy policy"

    def __init__(self, client: ContentAPIClient, logger_obj: Optional[logging.Logger] = None):
        super().__init__(client, PRIVACY_POLICY, PRIVACY_SUBTOPIC, logger_obj)
        self.subtopics: dict[int, tuple[Subtopic, ...]] = {}
        self.expanded: set[int] = set()

    def subtopics_for(self, topic_id: int) -> tuple[Subtopic, ...]:
        return self.subtopics.get(topic_id, ())

    def _after_load(self) -> None:
        present = {item.id for item in self.items}
        # Deleting a parent does not cascade here; its cached subtree is simply dropped.
        self.subtopics = {pid: subs for pid, subs in self.subtopics.items() if pid in present}
        self.expanded &= present

    async def expand(self, policy_id: int, force: bool = False) -> bool:
        """Load (or reuse the cached) subtopics of one policy."""
        self.expanded.add(policy_id)
        if policy_id in self.subtopics and not force:
            return True
        return await self._fetch_subtopics(policy_id)

    def collapse(self, policy_id: int) -> None:
        self.expanded.discard(policy_id)

    async def _fetch_subtopics(self, policy_id: int) -> bool:
        sequencer, token = self._subtree_token(policy_id)
        try:
            data = await self.client.get(self.child.list_path(policy_id))
        except ContentAPIError as e:
            self.logger.error(f"Failed to fetch subtopics of policy {policy_id}: {e}")
            return False
        if not sequencer.is_current(token):
            self.logger.debug(f"Dropping stale subtopics response for policy {policy_id}")
            return False
        self.subtopics[policy_id] = tuple(self._parse_subtopic(row) for row in (data or []) if isinstance(row, dict))
        return True

    async def _refresh_subtree(self, parent_id: int) -> None:
        await self.expand(parent_id, force=True)


class CaregiverTermsPanelController(HierarchicalPanelController):
    """Caregiver terms arrive with their subtopics embedded."""

    noun = "Term"

    def __init__(self, client: ContentAPIClient, logger_obj: Optional[logging.Logger] = None):
        super().__init__(client, CAREGIVER_TERMS, CAREGIVER_SUBTOPIC, logger_obj)

    def _parse_topic(self, data: dict[str, Any]) -> LegalTopic:
        subtopics = tuple(
            self._parse_subtopic(row) for row in (data.get("subtopics") or []) if isinstance(row, dict)
        )
        return replace(LegalTopic.from_api(data), subtopics=subtopics)

    async def _fetch_items(self) -> list[LegalTopic]:
        data = await self.client.get(self.resource.path)
        return [self._parse_topic(row) for row in (data or []) if isinstance(row, dict)]

    def _on_fetch_error(self, error: ContentAPIError) -> None:
        super()._on_fetch_error(error)
        self._notify("Failed to fetch terms", "error")
