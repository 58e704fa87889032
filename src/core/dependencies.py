"""Dependency injection container for the application."""

import logging
from typing import Optional

from api.content_client import ContentAPIClient
from config.settings import Settings
from utils.logger_setup import setup_logging


class DependencyContainer:
    """Container for managing application dependencies."""

    def __init__(self, base_url: Optional[str] = None, logger_name: str = Settings.LOGGER_NAME):
        Settings.ensure_directories()
        self.logger = setup_logging(logger_name)
        self.base_url = base_url

        self._client: Optional[ContentAPIClient] = None

    @property
    def client(self) -> ContentAPIClient:
        """Get or create the content API client.

        Raises:
            ValueError: if no backend base URL is configured.
        """
        if self._client is None:
            self._client = ContentAPIClient(self.base_url, logger_obj=self.logger)
            self.logger.info(f"Content API client targets {self._client.base_url}")
        return self._client

    def get_logger(self, name: Optional[str] = None) -> logging.Logger:
        """Get a logger instance."""
        if name:
            return logging.getLogger(name)
        return self.logger
