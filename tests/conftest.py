from __future__ import annotations

import pytest

from perflab_graphql.config import PerfLabSettings
from perflab_graphql.core.app import create_schema
from perflab_graphql.media.library import Attachment, InMemoryMediaLibrary
from tests.mocks.media import (
    JPEG_PHOTO_ID,
    NO_METADATA_ID,
    PLAIN_PHOTO_ID,
    UPLOADS_URL,
    VIDEO_ID,
    WEBP_UPLOAD_ID,
    build_library,
    photo_metadata,
    video_metadata,
)


@pytest.fixture
def settings() -> PerfLabSettings:
    return PerfLabSettings(uploads_base_url=UPLOADS_URL)


@pytest.fixture
def library() -> InMemoryMediaLibrary:
    webp_upload = photo_metadata()
    webp_upload["file"] = "2024/05/upload.webp"
    return build_library(
        Attachment(JPEG_PHOTO_ID, "2024/05/photo.jpg", "image/jpeg", photo_metadata()),
        Attachment(PLAIN_PHOTO_ID, "2024/05/photo.jpg", "image/jpeg", photo_metadata(webp=False)),
        Attachment(WEBP_UPLOAD_ID, "2024/05/upload.webp", "image/webp", webp_upload),
        Attachment(NO_METADATA_ID, "2024/05/doc.pdf", "application/pdf", None),
        Attachment(VIDEO_ID, "2024/05/clip.mp4", "video/mp4", video_metadata()),
    )


@pytest.fixture
def schema(library, settings):
    return create_schema(library, settings)
