"""Core value types shared by every portfolio entity."""

from __future__ import annotations

import enum
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Optional, Union


def to_utc(moment: datetime) -> datetime:
    """Return ``moment`` expressed in UTC; naive datetimes are rejected."""
    if moment.tzinfo is None or moment.utcoffset() is None:
        raise ValueError("timestamp must be timezone-aware")
    return moment.astimezone(timezone.utc)


@dataclass(frozen=True)
class ObjRef:
    """Reference to an object held in the object store."""

    urn: str


@dataclass(frozen=True)
class HtmlElement:
    """A block of rich content given as raw HTML."""

    html: str


@dataclass(frozen=True)
class ImageElement:
    """A block of rich content showing a stored image."""

    html: str
    source: ObjRef
    alt: Optional[str] = None


Element = Union[HtmlElement, ImageElement]


@dataclass(kw_only=True)
class Base:
    """Bookkeeping fields common to every stored entity."""

    id: str
    insert_date_time: datetime
    created_by: str
    update_date_time: Optional[datetime] = None
    updated_by: Optional[str] = None
    is_active: bool = True

    def __post_init__(self) -> None:
        self.insert_date_time = to_utc(self.insert_date_time)
        if self.update_date_time is not None:
            self.update_date_time = to_utc(self.update_date_time)


class AttachmentKind(enum.Enum):
    """The broad kinds of file an entity may carry."""

    IMAGE = "image"
    DOCUMENT = "document"
    CERTIFICATE = "certificate"
    AUDIO = "audio"
    VIDEO = "video"
    OTHER = "other"


@dataclass(frozen=True)
class AttachmentType:
    """Kind of an attachment; ``OTHER`` carries a custom type name."""

    kind: AttachmentKind
    custom_type: Optional[str] = None

    def __post_init__(self) -> None:
        if self.kind is AttachmentKind.OTHER:
            if not self.custom_type:
                raise ValueError("an OTHER attachment needs a custom type")
        elif self.custom_type is not None:
            raise ValueError(f"{self.kind.name} attachments take no custom type")

    @classmethod
    def other(cls, custom_type: str) -> AttachmentType:
        """Build an attachment type of a custom kind."""
        return cls(AttachmentKind.OTHER, custom_type)