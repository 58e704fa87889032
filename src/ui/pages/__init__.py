"""Top-level pages of the content admin application."""

from .legal_info_page import LegalInfoPageRenderer
from .settings_page import SettingsPageRenderer

__all__ = ['LegalInfoPageRenderer', 'SettingsPageRenderer']
