"""Typed records for the content served by the admin API."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any


def _text(value: Any) -> str:
    return "" if value is None else str(value)


@dataclass(frozen=True)
class SiteIdentity:
    """Website branding: name, caption, tagline, logo and three banners."""

    site_name: str
    caption: str
    tagline: str
    logo: str | None = None
    banner1: str | None = None
    banner2: str | None = None
    banner3: str | None = None

    @classmethod
    def from_api(cls, data: dict[str, Any]) -> SiteIdentity:
        return cls(
            site_name=_text(data.get("site_name")),
            caption=_text(data.get("caption")),
            tagline=_text(data.get("tagline")),
            logo=data.get("logo") or None,
            banner1=data.get("banner1") or None,
            banner2=data.get("banner2") or None,
            banner3=data.get("banner3") or None,
        )


@dataclass(frozen=True)
class PageSection:
    """About Us, Founder or Our Story: a title, body text and one image."""

    id: int | None
    title: str
    content: str
    image: str | None = None

    @classmethod
    def from_api(cls, data: dict[str, Any], image_field: str) -> PageSection:
        return cls(
            id=data.get("id"),
            title=_text(data.get("title")),
            content=_text(data.get("content")),
            image=data.get(image_field) or None,
        )


@dataclass(frozen=True)
class ContactInfo:
    phone: str
    email: str
    address: str

    @classmethod
    def from_api(cls, data: dict[str, Any]) -> ContactInfo:
        return cls(
            phone=_text(data.get("phone")),
            email=_text(data.get("email")),
            address=_text(data.get("address")),
        )


@dataclass(frozen=True)
class SocialLink:
    id: int
    platform: str
    url: str

    @classmethod
    def from_api(cls, data: dict[str, Any]) -> SocialLink:
        return cls(id=data["id"], platform=_text(data.get("platform")), url=_text(data.get("url")))


@dataclass(frozen=True)
class FAQ:
    id: int
    question: str
    answer: str
    is_active: bool = True

    @classmethod
    def from_api(cls, data: dict[str, Any]) -> FAQ:
        return cls(
            id=data["id"],
            question=_text(data.get("question")),
            answer=_text(data.get("answer")),
            is_active=bool(data.get("is_active")),
        )


@dataclass(frozen=True)
class Subpoint:
    """A single text line under a Terms subtopic."""

    id: int
    subtopic_id: int | None
    point: str

    @classmethod
    def from_api(cls, data: dict[str, Any]) -> Subpoint:
        return cls(id=data["id"], subtopic_id=data.get("subtopic_id"), point=_text(data.get("point")))


@dataclass(frozen=True)
class Subtopic:
    """A numbered or titled entry under a legal topic.

    ``label`` holds ``sub_number`` for Terms and Caregiver Terms and
    ``title`` for Privacy Policy subtopics.
    """

    id: int
    parent_id: int | None
    label: str
    content: str
    subpoints: tuple[Subpoint, ...] = field(default_factory=tuple)

    @classmethod
    def from_api(cls, data: dict[str, Any], parent_field: str, label_field: str) -> Subtopic:
        return cls(
            id=data["id"],
            parent_id=data.get(parent_field),
            label=_text(data.get(label_field)),
            content=_text(data.get("content")),
        )


@dataclass(frozen=True)
class LegalTopic:
    """A Term, Privacy Policy or Caregiver Term with its subtopics."""

    id: int
    title: str
    content: str
    subtopics: tuple[Subtopic, ...] = field(default_factory=tuple)

    @classmethod
    def from_api(cls, data: dict[str, Any]) -> LegalTopic:
        return cls(id=data["id"], title=_text(data.get("title")), content=_text(data.get("content")))
