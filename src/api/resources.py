"""Endpoint tables for the content backend's resource groups.

Paths are relative to ``APIConfig.API_PREFIX``. Collections follow the
conventional layout: ``GET path`` lists, ``POST path`` creates,
``PUT path/{id}`` updates and ``DELETE path/{id}`` deletes. Child collections
are listed per parent with ``GET path/{parent_id}``.
"""

from dataclasses import dataclass
from typing import Optional, Tuple


@dataclass(frozen=True)
class SingletonResource:
    """A content entity with at most one instance server-side."""

    name: str
    read_path: str
    save_path: str
    text_fields: Tuple[str, ...]
    image_fields: Tuple[str, ...] = ()
    upload_prefix: Optional[str] = None
    # Read endpoint returns a list whose first element is the record
    read_returns_list: bool = False
    # HTTP method used to save when a record already exists
    update_method: str = "POST"


@dataclass(frozen=True)
class CollectionResource:
    """A flat list of records addressed by numeric identifier."""

    name: str
    path: str

    def item_path(self, item_id: int) -> str:
        return f"{self.path}/{item_id}"


@dataclass(frozen=True)
class ChildResource:
    """Records nested under a parent record via a foreign-key field."""

    name: str
    path: str
    parent_field: str
    label_field: Optional[str] = None

    def item_path(self, item_id: int) -> str:
        return f"{self.path}/{item_id}"

    def list_path(self, parent_id: int) -> str:
        return f"{self.path}/{parent_id}"


SITE_SETTINGS = SingletonResource(
    name="settings",
    read_path="get-settings",
    save_path="save-settings",
    text_fields=("site_name", "caption", "tagline"),
    image_fields=("logo", "banner1", "banner2", "banner3"),
    upload_prefix="website-settings",
)

ABOUT_US = SingletonResource(
    name="about",
    read_path="get-about",
    save_path="add-about",
    text_fields=("title", "content"),
    image_fields=("about_image",),
    upload_prefix="about",
    read_returns_list=True,
)

FOUNDER = SingletonResource(
    name="founder",
    read_path="get-founder",
    save_path="add-founder",
    text_fields=("title", "content"),
    image_fields=("founder_image",),
    upload_prefix="founder",
    read_returns_list=True,
)

OUR_STORY = SingletonResource(
    name="story",
    read_path="get-story",
    save_path="add-story",
    text_fields=("title", "content"),
    image_fields=("story_image",),
    upload_prefix="story",
    read_returns_list=True,
)

CONTACT_INFO = SingletonResource(
    name="contact",
    read_path="contact-info",
    save_path="contact-info",
    text_fields=("phone", "email", "address"),
    update_method="PUT",
)

SOCIAL_LINKS = CollectionResource(name="social", path="social")
FAQS = CollectionResource(name="faq", path="faq")

PRIVACY_POLICY = CollectionResource(name="privacy", path="privacy-policy")
PRIVACY_SUBTOPIC = ChildResource(
    name="privacy-subtopic",
    path="privacy-subtopic",
    parent_field="privacy_policy_id",
    label_field="title",
)

TERMS = CollectionResource(name="terms", path="terms")
TERMS_SUBTOPIC = ChildResource(
    name="terms-subtopic",
    path="terms-subtopic",
    parent_field="terms_id",
    label_field="sub_number",
)
TERMS_SUBPOINT = ChildResource(
    name="terms-subpoint",
    path="terms-subpoint",
    parent_field="subtopic_id",
)

CAREGIVER_TERMS = CollectionResource(name="caregiver-terms", path="caregiver-terms")
CAREGIVER_SUBTOPIC = ChildResource(
    name="caregiver-terms-subtopic",
    path="caregiver-terms-subtopic",
    parent_field="caregiver_terms_id",
    label_field="sub_number",
)

SINGLETONS = {r.name: r for r in (SITE_SETTINGS, ABOUT_US, FOUNDER, OUR_STORY, CONTACT_INFO)}
COLLECTIONS = {r.name: r for r in (SOCIAL_LINKS, FAQS, PRIVACY_POLICY, TERMS, CAREGIVER_TERMS)}
