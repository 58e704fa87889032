"""
Content manager panel controllers.

Each controller owns the view state of one admin panel: the fetched
content, the open dialog's form, pending deletes and the transient notice.
Controllers are plain Python objects kept in Streamlit session state and
driven by the renderers in ``ui.renderers.content``.
"""

from .hierarchy_panel import (
    CaregiverTermsPanelController,
    HierarchicalPanelController,
    PrivacyPolicyPanelController,
    SubtopicDialog,
)
from .list_panel import (
    FAQPanelController,
    ListPanelController,
    PendingDelete,
    SocialLinksPanelController,
)
from .panel_state import Notice, PanelController, PanelStatus, RequestSequencer
from .singleton_panel import SingletonPanelController
from .terms_panel import SubpointDraft, TermsPanelController, fetch_terms_tree

__all__ = [
    "CaregiverTermsPanelController",
    "FAQPanelController",
    "HierarchicalPanelController",
    "ListPanelController",
    "Notice",
    "PanelController",
    "PanelStatus",
    "PendingDelete",
    "PrivacyPolicyPanelController",
    "RequestSequencer",
    "SingletonPanelController",
    "SocialLinksPanelController",
    "SubpointDraft",
    "SubtopicDialog",
    "TermsPanelController",
    "fetch_terms_tree",
]
