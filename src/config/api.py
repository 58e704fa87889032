"""API configuration for the content backend."""

import os
from typing import Optional


class APIConfig:
    """API configuration and settings."""

    # Route prefixes, relative to the configured base URL
    API_PREFIX = "/api/admin"
    UPLOADS_PREFIX = "/uploads"

    # Request settings. No timeout unless one is configured.
    REQUEST_TIMEOUT: Optional[float] = None
    TIMEOUT_ENV = "CONTENT_API_TIMEOUT"

    # Retry settings (reads only; mutations are never retried)
    READ_MAX_TRIES = 1
    READ_MAX_TRIES_ENV = "CONTENT_API_READ_MAX_TRIES"
    RETRY_BASE_DELAY = 2
    RETRY_MAX_DELAY = 30

    # Form options
    SOCIAL_PLATFORMS = ("Facebook", "Twitter", "Instagram", "LinkedIn", "YouTube", "TikTok")

    # Display settings
    ANSWER_PREVIEW_CHARS = 120
    CONTENT_PREVIEW_CHARS = 100
    IMAGE_PLACEHOLDER = "—"

    @classmethod
    def get_request_timeout(cls) -> Optional[float]:
        """Total request timeout in seconds, or None for no timeout."""
        raw = os.environ.get(cls.TIMEOUT_ENV)
        if not raw:
            return cls.REQUEST_TIMEOUT
        return float(raw)

    @classmethod
    def get_read_max_tries(cls) -> int:
        """Number of attempts for a read request (1 means no retry)."""
        raw = os.environ.get(cls.READ_MAX_TRIES_ENV)
        if not raw:
            return cls.READ_MAX_TRIES
        return max(1, int(raw))

    @classmethod
    def get_endpoint_url(cls, base_url: str, path: str) -> str:
        """Get the full URL for an admin API path."""
        return f"{base_url}{cls.API_PREFIX}/{path.lstrip('/')}"

    @classmethod
    def get_upload_url(cls, base_url: str, prefix: str, filename: str) -> str:
        """Get the displayable URL of an uploaded image."""
        return f"{base_url}{cls.UPLOADS_PREFIX}/{prefix}/{filename}"
