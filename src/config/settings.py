"""Application-wide settings and configuration."""

import os
from pathlib import Path
from typing import Optional


class Settings:
    """Centralized application settings."""

    # Project paths
    PROJECT_ROOT = Path(__file__).parent.parent.parent
    LOGS_DIR = PROJECT_ROOT / "logs"

    # Backend location (externally supplied)
    BASE_URL_ENV = "CONTENT_API_BASE_URL"

    # UI settings
    APP_TITLE = "Site Content Admin"
    LOGGER_NAME = "content_admin"

    @classmethod
    def ensure_directories(cls) -> None:
        """Ensure all required directories exist."""
        cls.LOGS_DIR.mkdir(parents=True, exist_ok=True)

    @classmethod
    def get_base_url(cls, custom_url: Optional[str] = None) -> str:
        """Get the backend base URL, with optional override.

        Raises:
            ValueError: if neither an override nor the environment variable is set.
        """
        base_url = custom_url or os.environ.get(cls.BASE_URL_ENV, "")
        base_url = base_url.strip().rstrip("/")
        if not base_url:
            raise ValueError(f"Backend base URL is not configured; set {cls.BASE_URL_ENV}")
        return base_url
