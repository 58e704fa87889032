"""REST client for the website content backend."""

import asyncio
import logging
from dataclasses import dataclass
from typing import Any, Mapping, Optional

import aiohttp
import backoff

from config.api import APIConfig
from config.settings import Settings

from .error_handling import ContentAPIError, categorize_error

_module_logger = logging.getLogger(__name__)


def _backoff_handler(details):
    """Handler for logging backoff attempts with error categorization."""
    exception = details["exception"]
    error_category = categorize_error(exception)
    _module_logger.warning(
        f"Backing off {details['wait']:.1f}s after {error_category.value} error "
        f"(attempt {details['tries']}/{APIConfig.get_read_max_tries()}): {exception}"
    )


@dataclass(frozen=True)
class ImageUpload:
    """An image file chosen in a form, ready to be sent as a multipart part."""

    filename: str
    content: bytes
    content_type: str = "application/octet-stream"


def build_form_data(fields: Mapping[str, Any], files: Optional[Mapping[str, ImageUpload]] = None) -> aiohttp.FormData:
    """Build a multipart payload: every text field, plus each attached file under its field name."""
    form = aiohttp.FormData()
    for name, value in fields.items():
        form.add_field(name, "" if value is None else str(value))
    for name, upload in (files or {}).items():
        if upload is None:
            continue
        form.add_field(name, upload.content, filename=upload.filename, content_type=upload.content_type)
    return form


class ContentAPIClient:
    """Client for reading and mutating content through the admin REST API."""

    def __init__(self, base_url: Optional[str] = None, logger_obj: Optional[logging.Logger] = None):
        self.logger = logger_obj or logging.getLogger(__name__)
        self.config = APIConfig()
        self.base_url = Settings.get_base_url(base_url)
        self.request_count = 0

    def url_for(self, path: str) -> str:
        """Get the full URL of an admin API path."""
        return self.config.get_endpoint_url(self.base_url, path)

    def upload_url(self, prefix: str, filename: Optional[str]) -> Optional[str]:
        """Resolve a stored image filename to a displayable URL."""
        if not filename:
            return None
        return self.config.get_upload_url(self.base_url, prefix, filename)

    def _timeout(self) -> aiohttp.ClientTimeout:
        return aiohttp.ClientTimeout(total=self.config.get_request_timeout())

    async def _request(self, method: str, url: str, json_body: Any = None, form: Optional[aiohttp.FormData] = None) -> Any:
        """Issue one request and decode its JSON body (None when empty)."""
        self.request_count += 1
        async with aiohttp.ClientSession(timeout=self._timeout()) as session:
            async with session.request(method, url, json=json_body, data=form) as resp:
                resp.raise_for_status()
                return await resp.json(content_type=None)

    @backoff.on_exception(
        backoff.expo,
        (aiohttp.ClientConnectionError, asyncio.TimeoutError),
        max_tries=APIConfig.get_read_max_tries,
        on_backoff=_backoff_handler,
        jitter=backoff.full_jitter,
        base=APIConfig.RETRY_BASE_DELAY,
        max_value=APIConfig.RETRY_MAX_DELAY,
    )
    async def _read(self, url: str) -> Any:
        return await self._request("GET", url)

    async def _call(self, method: str, path: str, json_body: Any = None, form: Optional[aiohttp.FormData] = None) -> Any:
        url = self.url_for(path)
        try:
            if method == "GET":
                return await self._read(url)
            return await self._request(method, url, json_body=json_body, form=form)
        except (aiohttp.ClientError, asyncio.TimeoutError, ValueError) as e:
            error = ContentAPIError.from_exception(method, url, e)
            self.logger.error(f"Request failed with {error.category.value} error: {e}")
            raise error from e

    async def get(self, path: str) -> Any:
        """Fetch a resource; returns the decoded JSON body."""
        return await self._call("GET", path)

    async def send_json(self, method: str, path: str, payload: Mapping[str, Any]) -> Any:
        """Create or update a resource with a JSON body."""
        return await self._call(method, path, json_body=dict(payload))

    async def send_form(
        self,
        method: str,
        path: str,
        fields: Mapping[str, Any],
        files: Optional[Mapping[str, ImageUpload]] = None,
    ) -> Any:
        """Create or update a resource with a multipart body."""
        return await self._call(method, path, form=build_form_data(fields, files))

    async def delete(self, path: str) -> Any:
        """Delete a resource."""
        return await self._call("DELETE", path)
