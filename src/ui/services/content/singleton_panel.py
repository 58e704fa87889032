"""Controller for panels backed by a singleton resource.

Website Settings, About Us, Founder, Our Story and Contact Info all share
this shape: fetch one record, offer "Add" or "Edit", submit every editable
field (plus any newly chosen images) to the save endpoint, then re-fetch.
"""

from __future__ import annotations

import logging
from typing import Any, Optional

from api.content_client import ContentAPIClient, ImageUpload
from api.error_handling import ContentAPIError
from api.resources import SingletonResource

from .panel_state import PanelController, PanelStatus, response_message


class SingletonPanelController(PanelController):
    """Fetch/edit/submit cycle for one singleton content record."""

    SAVE_SUCCESS = "Saved successfully"
    SAVE_FAILURE = "Something went wrong. Please try again."

    def __init__(
        self,
        client: ContentAPIClient,
        resource: SingletonResource,
        logger_obj: Optional[logging.Logger] = None,
    ):
        super().__init__(client, logger_obj)
        self.resource = resource
        self.record: Optional[dict[str, Any]] = None
        self.form: dict[str, str] = {name: "" for name in resource.text_fields}
        self.images: dict[str, ImageUpload] = {}

    @property
    def action_label(self) -> str:
        return "Edit" if self.record is not None else "Add"

    def image_url(self, field: str) -> Optional[str]:
        """Displayable URL of the record's image in ``field``, if any."""
        if self.record is None or self.resource.upload_prefix is None:
            return None
        return self.client.upload_url(self.resource.upload_prefix, self.record.get(field))

    async def _fetch(self) -> Optional[dict[str, Any]]:
        data = await self.client.get(self.resource.read_path)
        if self.resource.read_returns_list:
            return data[0] if isinstance(data, list) and data else None
        if isinstance(data, dict) and data:
            return data
        return None

    async def load(self) -> bool:
        """Fetch the record; on failure keep whatever is displayed."""
        token = self._begin_request()
        try:
            record = await self._fetch()
        except ContentAPIError as e:
            self.logger.error(f"Failed to fetch {self.resource.name}: {e}")
            self.loaded_once = True
            return False
        if self._is_stale(token, self.resource.name):
            return False
        self.loaded_once = True
        self.record = record
        if not self.is_editing:
            self._prefill()
            self.status = self._settled_status(record is not None)
        return True

    def _prefill(self) -> None:
        source = self.record or {}
        self.form = {name: "" if source.get(name) is None else str(source.get(name)) for name in self.resource.text_fields}

    def open_editor(self) -> None:
        self.clear_notice()
        self._prefill()
        self.images = {}
        self.status = PanelStatus.EDITING

    def cancel(self) -> None:
        self.images = {}
        self.status = self._settled_status(self.record is not None)

    def update_form(self, **values: Any) -> None:
        for name, value in values.items():
            if name not in self.form:
                raise KeyError(f"Unknown field for {self.resource.name}: {name}")
            self.form[name] = "" if value is None else str(value)

    def attach_image(self, field: str, upload: Optional[ImageUpload]) -> None:
        if field not in self.resource.image_fields:
            raise KeyError(f"{self.resource.name} has no image field {field!r}")
        if upload is None:
            self.images.pop(field, None)
        else:
            self.images[field] = upload

    def build_payload(self) -> tuple[dict[str, str], dict[str, ImageUpload]]:
        """Text fields always; image parts only for newly chosen files."""
        return dict(self.form), {name: upload for name, upload in self.images.items() if upload is not None}

    async def submit(self) -> bool:
        if not self._begin_submit():
            return False
        fields, files = self.build_payload()
        method = self.resource.update_method if self.record is not None else "POST"
        try:
            if self.resource.image_fields:
                response = await self.client.send_form(method, self.resource.save_path, fields, files)
            else:
                response = await self.client.send_json(method, self.resource.save_path, fields)
        except ContentAPIError as e:
            self._fail_submit(self.SAVE_FAILURE, e)
            return False

        self.logger.info(f"Saved {self.resource.name} ({method}, images: {sorted(files) or 'none'})")
        self.images = {}
        self.status = self._settled_status(self.record is not None)
        await self.load()
        self._notify(response_message(response, self.SAVE_SUCCESS))
        return True
