"""Media library access and srcset computation."""

from .library import (
    Attachment,
    InMemoryMediaLibrary,
    MediaItemModel,
    MediaItemSource,
    MediaLibrary,
)
from .srcset import (
    FULL_SIZE,
    ImageSource,
    SrcSetCalculator,
    constrain_dimensions,
    image_matches_ratio,
    relative_upload_dir,
)

__all__ = [
    "Attachment",
    "FULL_SIZE",
    "ImageSource",
    "InMemoryMediaLibrary",
    "MediaItemModel",
    "MediaItemSource",
    "MediaLibrary",
    "SrcSetCalculator",
    "constrain_dimensions",
    "image_matches_ratio",
    "relative_upload_dir",
]
