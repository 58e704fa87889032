"""Controllers for panels backed by a repeating list (FAQs, social links)."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Callable, Optional

from api.content_client import ContentAPIClient
from api.error_handling import ContentAPIError
from api.resources import FAQS, SOCIAL_LINKS, CollectionResource
from config.api import APIConfig
from core.models import FAQ, SocialLink

from .panel_state import PanelController, PanelStatus, response_message


@dataclass(frozen=True)
class PendingDelete:
    """A delete the operator asked for but has not confirmed yet."""

    level: str
    item_id: int
    parent_id: Optional[int] = None
    label: str = ""


class ListPanelController(PanelController):
    """Fetch/add/edit/delete cycle over a flat collection.

    Create and update share one dialog; ``editing_id`` tells them apart.
    Every mutation is followed by a full re-fetch of the list.
    """

    noun = "Item"
    form_defaults: dict[str, Any] = {}

    def __init__(
        self,
        client: ContentAPIClient,
        resource: CollectionResource,
        parser: Callable[[dict[str, Any]], Any],
        logger_obj: Optional[logging.Logger] = None,
    ):
        super().__init__(client, logger_obj)
        self.resource = resource
        self.parser = parser
        self.items: list[Any] = []
        self.form: dict[str, Any] = dict(self.form_defaults)
        self.editing_id: Optional[int] = None
        self.pending_delete: Optional[PendingDelete] = None

    # --- fetching -----------------------------------------------------------

    async def _fetch_items(self) -> list[Any]:
        data = await self.client.get(self.resource.path)
        return [self.parser(row) for row in (data or []) if isinstance(row, dict)]

    def _on_fetch_error(self, error: ContentAPIError) -> None:
        self.logger.error(f"Failed to fetch {self.resource.name}: {error}")

    async def load(self) -> bool:
        token = self._begin_request()
        try:
            items = await self._fetch_items()
        except ContentAPIError as e:
            self.loaded_once = True
            self._on_fetch_error(e)
            return False
        if self._is_stale(token, self.resource.name):
            return False
        self.loaded_once = True
        self.items = items
        self._after_load()
        if not self.is_editing:
            self.status = self._settled_status(bool(items))
        return True

    def _after_load(self) -> None:
        """Hook for subclasses that keep state derived from ``items``."""

    def find(self, item_id: int) -> Any:
        for item in self.items:
            if item.id == item_id:
                return item
        raise KeyError(f"No {self.resource.name} with id {item_id}")

    # --- add / edit dialog --------------------------------------------------

    def to_form(self, item: Any) -> dict[str, Any]:
        raise NotImplementedError

    def to_payload(self) -> dict[str, Any]:
        return dict(self.form)

    def can_submit(self) -> bool:
        return True

    def open_create(self) -> None:
        self.clear_notice()
        self.form = dict(self.form_defaults)
        self.editing_id = None
        self.status = PanelStatus.EDITING

    def open_edit(self, item_id: int) -> None:
        self.clear_notice()
        self.form = self.to_form(self.find(item_id))
        self.editing_id = item_id
        self.status = PanelStatus.EDITING

    def update_form(self, **values: Any) -> None:
        for name, value in values.items():
            if name not in self.form_defaults:
                raise KeyError(f"Unknown field for {self.resource.name}: {name}")
            self.form[name] = value

    def cancel(self) -> None:
        self.editing_id = None
        self.status = self._settled_status(bool(self.items))

    async def submit(self) -> bool:
        if not self.can_submit():
            self._notify(f"Please fill in all {self.noun.lower()} fields", "error")
            return False
        if not self._begin_submit():
            return False
        payload = self.to_payload()
        try:
            if self.editing_id is not None:
                response = await self.client.send_json("PUT", self.resource.item_path(self.editing_id), payload)
                message = response_message(response, f"{self.noun} updated")
            else:
                response = await self.client.send_json("POST", self.resource.path, payload)
                message = response_message(response, f"{self.noun} added")
        except ContentAPIError as e:
            self._fail_submit(f"Failed to submit {self.noun.lower()}", e)
            return False

        if self.editing_id is None and isinstance(response, dict):
            self.logger.info(f"{message} ({self.resource.name}, assigned id={response.get('id')})")
        else:
            self.logger.info(f"{message} ({self.resource.name}, id={self.editing_id})")
        self.editing_id = None
        self.status = self._settled_status(bool(self.items))
        await self.load()
        self._notify(message)
        return True

    # --- delete -------------------------------------------------------------

    def request_delete(self, item_id: int) -> None:
        self.clear_notice()
        self.pending_delete = PendingDelete("item", item_id, label=self.describe(self.find(item_id)))

    def cancel_delete(self) -> None:
        self.pending_delete = None

    def describe(self, item: Any) -> str:
        return str(item.id)

    async def _delete(self, pending: PendingDelete) -> None:
        await self.client.delete(self.resource.item_path(pending.item_id))
        await self.load()

    def _delete_noun(self, pending: PendingDelete) -> str:
        return self.noun

    async def confirm_delete(self) -> bool:
        """Issue the delete the operator confirmed; nothing happens without a pending request."""
        pending = self.pending_delete
        if pending is None:
            return False
        self.pending_delete = None
        noun = self._delete_noun(pending)
        try:
            await self._delete(pending)
        except ContentAPIError as e:
            self.logger.error(f"Failed to delete {pending.level} {pending.item_id}: {e}")
            self._notify(f"Failed to delete {noun.lower()}", "error")
            return False
        self.logger.info(f"Deleted {pending.level} {pending.item_id} from {self.resource.name}")
        self._notify(f"{noun} deleted", "info")
        return True


class FAQPanelController(ListPanelController):
    noun = "FAQ"
    form_defaults = {"question": "", "answer": "", "is_active": True}

    def __init__(self, client: ContentAPIClient, logger_obj: Optional[logging.Logger] = None):
        super().__init__(client, FAQS, FAQ.from_api, logger_obj)

    def to_form(self, item: FAQ) -> dict[str, Any]:
        return {"question": item.question, "answer": item.answer, "is_active": item.is_active}

    def to_payload(self) -> dict[str, Any]:
        return {
            "question": self.form["question"],
            "answer": self.form["answer"],
            "is_active": 1 if self.form["is_active"] else 0,
        }

    def describe(self, item: FAQ) -> str:
        return item.question


class SocialLinksPanelController(ListPanelController):
    noun = "Social link"
    form_defaults = {"platform": "", "url": ""}

    def __init__(self, client: ContentAPIClient, logger_obj: Optional[logging.Logger] = None):
        super().__init__(client, SOCIAL_LINKS, SocialLink.from_api, logger_obj)

    def to_form(self, item: SocialLink) -> dict[str, Any]:
        return {"platform": item.platform, "url": item.url}

    def can_submit(self) -> bool:
        return self.form["platform"] in APIConfig.SOCIAL_PLATFORMS and bool(str(self.form["url"]).strip())

    def describe(self, item: SocialLink) -> str:
        return f"{item.platform} ({item.url})"
