"""Configuration management for the Site Content Admin."""

from .api import APIConfig
from .settings import Settings

__all__ = ["Settings", "APIConfig"]
