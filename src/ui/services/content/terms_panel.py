"""Terms & Conditions: terms, their subtopics, and the subtopics' subpoints.

The full tree is assembled before first display: one request for the terms,
one per term for its subtopics, one per subtopic for its subpoints, issued
sequentially in that order. After a mutation only the affected part of the
tree is fetched again.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, replace
from typing import Any, Optional

from api.content_client import ContentAPIClient
from api.error_handling import ContentAPIError
from api.resources import TERMS, TERMS_SUBPOINT, TERMS_SUBTOPIC
from core.models import LegalTopic, Subpoint, Subtopic

from .hierarchy_panel import HierarchicalPanelController
from .list_panel import PendingDelete
from .panel_state import response_message


async def fetch_subpoints(client: ContentAPIClient, subtopic_id: int) -> tuple[Subpoint, ...]:
    data = await client.get(TERMS_SUBPOINT.list_path(subtopic_id))
    return tuple(Subpoint.from_api(row) for row in (data or []) if isinstance(row, dict))


async def fetch_subtopics_with_subpoints(client: ContentAPIClient, term_id: int) -> tuple[Subtopic, ...]:
    """Subtopics of one term with their subpoints; raises ContentAPIError."""
    data = await client.get(TERMS_SUBTOPIC.list_path(term_id))
    subtopics = []
    for row in data or []:
        if not isinstance(row, dict):
            continue
        subtopic = Subtopic.from_api(row, TERMS_SUBTOPIC.parent_field, TERMS_SUBTOPIC.label_field)
        subtopics.append(replace(subtopic, subpoints=await fetch_subpoints(client, subtopic.id)))
    return tuple(subtopics)


async def fetch_term_subtree(
    client: ContentAPIClient,
    term_id: int,
    logger_obj: Optional[logging.Logger] = None,
) -> tuple[Subtopic, ...]:
    """Like fetch_subtopics_with_subpoints, but empty if any request fails."""
    logger = logger_obj or logging.getLogger(__name__)
    try:
        return await fetch_subtopics_with_subpoints(client, term_id)
    except ContentAPIError as e:
        logger.warning(f"Could not load subtopics of term {term_id}: {e}")
        return ()


async def fetch_terms_tree(client: ContentAPIClient, logger_obj: Optional[logging.Logger] = None) -> list[LegalTopic]:
    """Fetch every term with its nested subtopics and subpoints."""
    data = await client.get(TERMS.path)
    tree = []
    for row in data or []:
        if not isinstance(row, dict):
            continue
        term = LegalTopic.from_api(row)
        tree.append(replace(term, subtopics=await fetch_term_subtree(client, term.id, logger_obj)))
    return tree


@dataclass
class SubpointDraft:
    """Inline subpoint input of one subtopic."""

    text: str = ""
    editing_id: Optional[int] = None


class TermsPanelController(HierarchicalPanelController):
    noun = "Term"

    def __init__(self, client: ContentAPIClient, logger_obj: Optional[logging.Logger] = None):
        super().__init__(client, TERMS, TERMS_SUBTOPIC, logger_obj)
        # Keyed by subtopic id so that inputs of different subtopics never interfere
        self.subpoint_drafts: dict[int, SubpointDraft] = {}

    async def _fetch_items(self) -> list[LegalTopic]:
        return await fetch_terms_tree(self.client, self.logger)

    def _on_fetch_error(self, error: ContentAPIError) -> None:
        super()._on_fetch_error(error)
        self._notify("Failed to fetch terms.", "error")

    def _after_load(self) -> None:
        live = {sub.id for term in self.items for sub in term.subtopics}
        self.subpoint_drafts = {sid: draft for sid, draft in self.subpoint_drafts.items() if sid in live}

    def _replace_term(self, term_id: int, subtopics: tuple[Subtopic, ...]) -> None:
        self.items = [replace(t, subtopics=subtopics) if t.id == term_id else t for t in self.items]
        self._after_load()

    def _term_of_subtopic(self, subtopic_id: int) -> Optional[LegalTopic]:
        for term in self.items:
            if any(sub.id == subtopic_id for sub in term.subtopics):
                return term
        return None

    async def _refresh_subtree(self, parent_id: int) -> None:
        sequencer, token = self._subtree_token(parent_id)
        try:
            subtopics = await fetch_subtopics_with_subpoints(self.client, parent_id)
        except ContentAPIError as e:
            # Keep the subtopics already on screen
            self.logger.error(f"Failed to refresh subtopics of term {parent_id}: {e}")
            return
        if not sequencer.is_current(token):
            self.logger.debug(f"Dropping stale subtree response for term {parent_id}")
            return
        self._replace_term(parent_id, subtopics)

    async def _refresh_subpoints(self, subtopic_id: int) -> None:
        term = self._term_of_subtopic(subtopic_id)
        if term is None:
            self.logger.warning(f"Subtopic {subtopic_id} is no longer loaded; skipping subpoint refresh")
            return
        try:
            points = await fetch_subpoints(self.client, subtopic_id)
        except ContentAPIError as e:
            self.logger.error(f"Failed to refresh subpoints of subtopic {subtopic_id}: {e}")
            return
        subtopics = tuple(replace(s, subpoints=points) if s.id == subtopic_id else s for s in term.subtopics)
        self._replace_term(term.id, subtopics)

    # --- subpoints ----------------------------------------------------------

    def draft_for(self, subtopic_id: int) -> SubpointDraft:
        return self.subpoint_drafts.setdefault(subtopic_id, SubpointDraft())

    def set_subpoint_text(self, subtopic_id: int, text: str) -> None:
        self.draft_for(subtopic_id).text = text

    def edit_subpoint(self, subtopic_id: int, subpoint: Subpoint) -> None:
        self.clear_notice()
        self.subpoint_drafts[subtopic_id] = SubpointDraft(text=subpoint.point, editing_id=subpoint.id)

    def cancel_subpoint_edit(self, subtopic_id: int) -> None:
        self.subpoint_drafts.pop(subtopic_id, None)

    async def submit_subpoint(self, subtopic_id: int) -> bool:
        draft = self.draft_for(subtopic_id)
        if not draft.text.strip():
            self._notify("Subpoint cannot be empty.", "error")
            return False
        previous_status = self.status
        if not self._begin_submit():
            return False
        try:
            if draft.editing_id is not None:
                payload: dict[str, Any] = {"point": draft.text}
                response = await self.client.send_json("PUT", TERMS_SUBPOINT.item_path(draft.editing_id), payload)
                message = response_message(response, "Subpoint updated.")
            else:
                payload = {"subtopic_id": subtopic_id, "point": draft.text}
                response = await self.client.send_json("POST", TERMS_SUBPOINT.path, payload)
                message = response_message(response, "Subpoint added.")
        except ContentAPIError as e:
            self.logger.error(f"Subpoint error on subtopic {subtopic_id}: {e}")
            self._notify("Subpoint error.", "error")
            self.status = previous_status
            return False

        self.status = previous_status
        self.subpoint_drafts.pop(subtopic_id, None)
        await self._refresh_subpoints(subtopic_id)
        self._notify(message)
        return True

    def request_subpoint_delete(self, subtopic_id: int, subpoint: Subpoint) -> None:
        self.clear_notice()
        self.pending_delete = PendingDelete("subpoint", subpoint.id, parent_id=subtopic_id, label=subpoint.point)

    def _delete_noun(self, pending: PendingDelete) -> str:
        if pending.level == "subpoint":
            return "Subpoint"
        return super()._delete_noun(pending)

    async def _delete(self, pending: PendingDelete) -> None:
        if pending.level == "subpoint":
            await self.client.delete(TERMS_SUBPOINT.item_path(pending.item_id))
            await self._refresh_subpoints(pending.parent_id)
            return
        await super()._delete(pending)
