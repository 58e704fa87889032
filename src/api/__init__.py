"""API clients and communication modules."""

from .content_client import ContentAPIClient, ImageUpload, build_form_data
from .error_handling import ContentAPIError, ErrorCategory, categorize_error, describe_error

__all__ = [
    "ContentAPIClient",
    "ImageUpload",
    "build_form_data",
    "ContentAPIError",
    "ErrorCategory",
    "categorize_error",
    "describe_error",
]
