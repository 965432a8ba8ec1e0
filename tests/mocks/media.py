"""Test doubles and fixtures data for attachment metadata."""

from __future__ import annotations

from typing import Any, Dict, List

from perflab_graphql.domain.metadata import ImageMetadata
from perflab_graphql.media.library import Attachment, InMemoryMediaLibrary


UPLOADS_URL = "https://cdn.example.test/wp-content/uploads"

JPEG_PHOTO_ID = 7
PLAIN_PHOTO_ID = 8
WEBP_UPLOAD_ID = 9
NO_METADATA_ID = 10
VIDEO_ID = 11


def size_entry(
    file: str,
    width: int,
    height: int,
    *,
    mime: str = "image/jpeg",
    webp: str | None = None,
) -> Dict[str, Any]:
    entry: Dict[str, Any] = {
        "file": file,
        "width": width,
        "height": height,
        "mime-type": mime,
        "filesize": width * height // 10,
        "sources": {mime: {"file": file, "filesize": width * height // 10}},
    }
    if webp is not None:
        entry["sources"]["image/webp"] = {"file": webp, "filesize": width * height // 20}
    return entry


def photo_metadata(*, webp: bool = True, primary_webp: bool = True) -> Dict[str, Any]:
    """Metadata of a 2400x1600 JPEG uploaded to ``2024/05``.

    With ``webp`` every size except ``thumbnail`` (cropped 150x150) and
    ``large`` has a WebP rendition.
    """

    sizes = {
        "thumbnail": size_entry("photo-150x150.jpg", 150, 150),
        "medium": size_entry(
            "photo-300x200.jpg", 300, 200, webp="photo-300x200-jpg.webp" if webp else None
        ),
        "medium_large": size_entry(
            "photo-768x512.jpg", 768, 512, webp="photo-768x512-jpg.webp" if webp else None
        ),
        "large": size_entry("photo-1024x683.jpg", 1024, 683),
        "1536x1536": size_entry(
            "photo-1536x1024.jpg", 1536, 1024, webp="photo-1536x1024-jpg.webp" if webp else None
        ),
    }
    sources: Dict[str, Any] = {"image/jpeg": {"file": "photo.jpg", "filesize": 512000}}
    if webp and primary_webp:
        sources["image/webp"] = {"file": "photo-jpg.webp", "filesize": 256000}
    return {
        "width": 2400,
        "height": 1600,
        "file": "2024/05/photo.jpg",
        "filesize": 512000,
        "sizes": sizes,
        "sources": sources,
        "image_meta": {"aperture": "0", "credit": "", "camera": ""},
        "dominant_color": "a1b2c3",
        "has_transparency": False,
    }


def scenario_metadata() -> Dict[str, Any]:
    """Two-size record with a WebP rendition for ``medium`` only."""

    return {
        "file": "a.jpg",
        "sizes": {
            "medium": {
                "file": "a-m.jpg",
                "mime-type": "image/jpeg",
                "sources": {"image/webp": {"file": "a-m.webp"}},
            },
            "thumb": {"file": "a-t.jpg", "mime-type": "image/jpeg", "sources": {}},
        },
    }


def video_metadata() -> Dict[str, Any]:
    """Metadata the host stores for an MP4 upload; it has no ``sizes``."""

    return {
        "filesize": 1000,
        "mime_type": "video/mp4",
        "length": 12,
        "width": 640,
        "height": 360,
        "fileformat": "mp4",
    }


def build_library(*attachments: Attachment) -> InMemoryMediaLibrary:
    library = InMemoryMediaLibrary()
    for attachment in attachments:
        library.add(attachment)
    return library


class RecordingMediaLibrary(InMemoryMediaLibrary):
    """In-memory library remembering every metadata it handed out."""

    def __init__(self) -> None:
        super().__init__()
        self.reads: List[ImageMetadata | None] = []

    def get_metadata(self, attachment_id: int) -> ImageMetadata | None:
        metadata = super().get_metadata(attachment_id)
        self.reads.append(metadata)
        return metadata
