"""Media library port implemented by the host CMS.

Resolvers only need a numeric attachment identifier and a way to look up the
metadata, mime type and attached file for it. Host model objects are adapted
to :class:`MediaItemSource`; storage is reached through :class:`MediaLibrary`.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Mapping, Protocol, runtime_checkable

from ..domain.metadata import ImageMetadata
from ..exceptions import ensure_attachment


@runtime_checkable
class MediaItemSource(Protocol):
    """Resolver source object carrying the attachment identifier."""

    @property
    def database_id(self) -> int:
        """Numeric attachment identifier in the host database."""


class MediaLibrary(Protocol):
    """Read access to attachments stored by the host."""

    def get_metadata(self, attachment_id: int) -> ImageMetadata | None:
        """Return validated metadata or ``None`` when the attachment has none."""

    def get_mime_type(self, attachment_id: int) -> str | None:
        """Return the mime type of the uploaded file."""

    def get_attached_file(self, attachment_id: int) -> str | None:
        """Return the uploads-relative path of the original file."""


@dataclass(slots=True)
class Attachment:
    """Attachment record as stored by the host."""

    id: int
    file: str
    mime_type: str
    metadata: Mapping[str, Any] | ImageMetadata | None = None


@dataclass(frozen=True, slots=True)
class MediaItemModel:
    """Media item handed to resolvers as the GraphQL source object."""

    database_id: int
    mime_type: str | None = None
    source_url: str | None = None


@dataclass(slots=True)
class InMemoryMediaLibrary:
    """Dictionary backed :class:`MediaLibrary` for embedding and tests."""

    attachments: dict[int, Attachment] = field(default_factory=dict)
    log: logging.Logger = field(default_factory=lambda: logging.getLogger(__name__))

    def add(self, attachment: Attachment) -> Attachment:
        self.attachments[attachment.id] = attachment
        return attachment

    def get(self, attachment_id: int) -> Attachment:
        """Return the attachment or raise :class:`AttachmentNotFoundError`."""

        return ensure_attachment(self.attachments.get(attachment_id), attachment_id=attachment_id)

    def get_metadata(self, attachment_id: int) -> ImageMetadata | None:
        attachment = self.attachments.get(attachment_id)
        if attachment is None or attachment.metadata is None:
            self.log.debug("media.metadata.missing", extra={"attachment_id": attachment_id})
            return None
        if isinstance(attachment.metadata, ImageMetadata):
            return attachment.metadata
        return ImageMetadata.from_mapping(
            attachment.metadata, record=f"attachment {attachment_id}"
        )

    def get_mime_type(self, attachment_id: int) -> str | None:
        attachment = self.attachments.get(attachment_id)
        return attachment.mime_type if attachment is not None else None

    def get_attached_file(self, attachment_id: int) -> str | None:
        attachment = self.attachments.get(attachment_id)
        return attachment.file if attachment is not None else None


__all__ = [
    "Attachment",
    "InMemoryMediaLibrary",
    "MediaItemModel",
    "MediaItemSource",
    "MediaLibrary",
]
