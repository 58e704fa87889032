"""Content manager panel renderers.

- Singleton panels (WebsiteSettingsRenderer, PageSectionRenderer, ContactInfoRenderer)
- List panels (FAQRenderer, SocialLinksRenderer)
- Legal hierarchy panels (PrivacyPolicyRenderer, CaregiverTermsRenderer, TermsRenderer)
"""

from .base_renderer import ContentPanelRenderer
from .hierarchy_renderer import CaregiverTermsRenderer, PrivacyPolicyRenderer, TermsRenderer
from .list_renderer import FAQRenderer, SocialLinksRenderer
from .singleton_renderer import (
    ContactInfoRenderer,
    PageSectionRenderer,
    WebsiteSettingsRenderer,
    about_us_renderer,
    founder_renderer,
    our_story_renderer,
)

__all__ = [
    'ContentPanelRenderer',
    'WebsiteSettingsRenderer',
    'PageSectionRenderer',
    'ContactInfoRenderer',
    'FAQRenderer',
    'SocialLinksRenderer',
    'PrivacyPolicyRenderer',
    'CaregiverTermsRenderer',
    'TermsRenderer',
    'about_us_renderer',
    'founder_renderer',
    'our_story_renderer',
]
