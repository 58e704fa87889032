"""Failure categories for requests to the content backend."""

import asyncio
import json
from enum import Enum
from typing import Optional, Tuple

import aiohttp


class ErrorCategory(Enum):
    """Where a content request went wrong."""
    NETWORK = "network"
    SERVER = "server"
    CLIENT = "client"
    TIMEOUT = "timeout"
    DATA = "data"
    UNKNOWN = "unknown"


def categorize_status(status: int) -> ErrorCategory:
    """4xx means the admin sent something the backend rejected; 5xx means the backend failed."""
    if 400 <= status < 500:
        return ErrorCategory.CLIENT
    if 500 <= status < 600:
        return ErrorCategory.SERVER
    return ErrorCategory.UNKNOWN


def describe_error(exception: Exception) -> Tuple[ErrorCategory, Optional[int]]:
    """Category of a failed content request plus its HTTP status, when it got that far."""
    if isinstance(exception, asyncio.TimeoutError):
        return ErrorCategory.TIMEOUT, None
    if isinstance(exception, aiohttp.ClientResponseError):
        return categorize_status(exception.status), exception.status
    if isinstance(exception, aiohttp.ClientError):
        return ErrorCategory.NETWORK, None
    # Malformed JSON bodies surface as ValueError subclasses
    if isinstance(exception, (json.JSONDecodeError, ValueError)):
        return ErrorCategory.DATA, None
    return ErrorCategory.UNKNOWN, None


def categorize_error(exception: Exception) -> ErrorCategory:
    return describe_error(exception)[0]


class ContentAPIError(Exception):
    """Raised when a request to the content backend fails."""

    def __init__(
        self,
        message: str,
        category: ErrorCategory = ErrorCategory.UNKNOWN,
        status: Optional[int] = None,
    ):
        self.message = message
        self.category = category
        self.status = status
        super().__init__(self.message)

    @classmethod
    def from_exception(cls, method: str, url: str, exception: Exception) -> "ContentAPIError":
        """Wrap a transport/parsing exception with its category."""
        category, status = describe_error(exception)
        return cls(f"{method} {url} failed ({category.value}): {exception}", category, status)
