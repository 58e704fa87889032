"""UI service layer: panel controllers that drive the content API."""

from .content import (
    CaregiverTermsPanelController,
    FAQPanelController,
    PrivacyPolicyPanelController,
    SingletonPanelController,
    SocialLinksPanelController,
    TermsPanelController,
)

__all__ = [
    "SingletonPanelController",
    "FAQPanelController",
    "SocialLinksPanelController",
    "PrivacyPolicyPanelController",
    "CaregiverTermsPanelController",
    "TermsPanelController",
]
