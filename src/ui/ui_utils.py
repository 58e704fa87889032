from __future__ import annotations

# Standard Library Imports
import asyncio
import concurrent.futures
import logging
from typing import Any, Coroutine, Optional, TypeVar

# Local Application Imports
from api.content_client import ImageUpload
from config.api import APIConfig

T = TypeVar("T")

_logger = logging.getLogger(__name__)


def run_async(coro: Coroutine[Any, Any, T]) -> T:
    """Run a controller coroutine from sync context, handling Streamlit's event loop."""
    try:
        asyncio.get_running_loop()
    except RuntimeError:
        # No running loop (CLI context)
        return asyncio.run(coro)

    # Inside a running event loop (Streamlit): separate thread with its own loop
    def _thread_target() -> T:
        loop = asyncio.new_event_loop()
        asyncio.set_event_loop(loop)
        try:
            return loop.run_until_complete(coro)
        finally:
            loop.close()

    with concurrent.futures.ThreadPoolExecutor(max_workers=1) as pool:
        return pool.submit(_thread_target).result()


def truncate_preview(text: Optional[str], limit: int = APIConfig.CONTENT_PREVIEW_CHARS) -> str:
    """Shorten text for list previews, marking the cut with an ellipsis."""
    text = text or ""
    if len(text) <= limit:
        return text
    return text[:limit] + "..."


def format_active(is_active: bool) -> str:
    return "Active" if is_active else "Inactive"


def display_value(value: Any, placeholder: str = APIConfig.IMAGE_PLACEHOLDER) -> str:
    """Render empty values as the placeholder."""
    if value is None or (isinstance(value, str) and not value.strip()):
        return placeholder
    return str(value)


def to_image_upload(uploaded_file: Any) -> Optional[ImageUpload]:
    """Convert a Streamlit ``UploadedFile`` into a multipart-ready upload."""
    if uploaded_file is None:
        return None
    content_type = getattr(uploaded_file, "type", None) or "application/octet-stream"
    _logger.debug(f"Attaching upload {uploaded_file.name} ({content_type})")
    return ImageUpload(filename=uploaded_file.name, content=uploaded_file.getvalue(), content_type=content_type)
