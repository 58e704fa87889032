"""Shared state machinery for content manager panels.

Every panel moves through the same states::

    IDLE (no data) -> LOADED -> EDITING -> SUBMITTING -> LOADED | EDITING

Notices are transient: they are replaced or cleared by the operator's next
action and never form a persistent error state.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Any, Optional

from api.content_client import ContentAPIClient


class PanelStatus(Enum):
    IDLE = "idle"
    LOADED = "loaded"
    EDITING = "editing"
    SUBMITTING = "submitting"


@dataclass(frozen=True)
class Notice:
    """A short-lived success/info/error message shown to the operator."""

    message: str
    severity: str = "success"

    @property
    def is_error(self) -> bool:
        return self.severity == "error"


class RequestSequencer:
    """Hands out increasing tokens so that only the latest response is applied."""

    def __init__(self) -> None:
        self._latest = 0

    def next(self) -> int:
        self._latest += 1
        return self._latest

    def is_current(self, token: int) -> bool:
        return token == self._latest


def response_message(response: Any, default: str) -> str:
    """Prefer the backend's ``message`` field over a default notice text."""
    if isinstance(response, dict) and response.get("message"):
        return str(response["message"])
    return default


class PanelController:
    """Base class holding the status, notice and request sequencing of one panel."""

    def __init__(self, client: ContentAPIClient, logger_obj: Optional[logging.Logger] = None):
        self.client = client
        self.logger = logger_obj or logging.getLogger(__name__)
        self.status = PanelStatus.IDLE
        self.notice: Optional[Notice] = None
        self.loaded_once = False
        self._sequencer = RequestSequencer()

    @property
    def is_editing(self) -> bool:
        return self.status in (PanelStatus.EDITING, PanelStatus.SUBMITTING)

    def clear_notice(self) -> None:
        self.notice = None

    def _notify(self, message: str, severity: str = "success") -> None:
        self.notice = Notice(message, severity)

    def _begin_request(self) -> int:
        return self._sequencer.next()

    def _is_stale(self, token: int, what: str) -> bool:
        if self._sequencer.is_current(token):
            return False
        self.logger.debug(f"Dropping stale {what} response (request {token})")
        return True

    def _begin_submit(self) -> bool:
        """Move to SUBMITTING; refuse if a submit is already in flight."""
        if self.status == PanelStatus.SUBMITTING:
            self.logger.warning(f"{type(self).__name__}: submit ignored, one is already in flight")
            return False
        self.clear_notice()
        self.status = PanelStatus.SUBMITTING
        return True

    def _fail_submit(self, message: str, error: Exception) -> None:
        self.logger.error(f"{message}: {error}")
        self._notify(message, "error")
        self.status = PanelStatus.EDITING

    def _settled_status(self, has_data: bool) -> PanelStatus:
        return PanelStatus.LOADED if has_data else PanelStatus.IDLE
