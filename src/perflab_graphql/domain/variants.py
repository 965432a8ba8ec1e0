"""Format-variant selection over attachment metadata.

When an image has alternate renditions (for example WebP files generated next
to each JPEG size), :func:`select_variant` rewrites the metadata so every size
points at the alternate file. Sizes without that alternate are dropped, so a
srcset computed from the result never mixes formats.
"""

from __future__ import annotations

import posixpath
from dataclasses import dataclass
from enum import Enum
from typing import Callable, Mapping

import structlog

from ..exceptions import MalformedMetadataError
from .metadata import ImageMetadata

logger = structlog.get_logger(__name__)

WEBP_MIME_TYPE = "image/webp"

MetadataTransform = Callable[[ImageMetadata, str], ImageMetadata]


class ImageVariant(str, Enum):
    """Renditions a srcset can be computed from."""

    ORIGINAL = "original"
    WEBP = "webp"


DEFAULT_VARIANT_MIME_TYPES: Mapping[str, str] = {ImageVariant.WEBP.value: WEBP_MIME_TYPE}


def _dirname(path: str) -> str:
    return posixpath.dirname(path) or "."


def select_variant(
    metadata: ImageMetadata, format: str, original_mime_type: str
) -> ImageMetadata:
    """Return ``metadata`` restricted to the ``format`` renditions.

    ``original_mime_type`` is the mime type of the uploaded file; when it
    already equals ``format`` the record is returned as is. The comparison is
    exact, mime types are stored lowercase by the host.

    Raises:
        MalformedMetadataError: If ``metadata`` has no ``sizes`` mapping.
    """

    if original_mime_type == format:
        return metadata
    if metadata.sizes is None:
        raise MalformedMetadataError("metadata has no sizes mapping")

    changes: dict[str, object] = {}
    primary = metadata.sources.get(format)
    if primary is not None:
        changes["file"] = f"{_dirname(metadata.file)}/{primary.file}"
        if primary.filesize is not None:
            changes["filesize"] = primary.filesize

    sizes = {}
    for label, entry in metadata.sizes.items():
        alternate = entry.alternate(format)
        if alternate is None:
            logger.debug("perflab.variant.size_dropped", size=label, format=format)
            continue
        update: dict[str, object] = {"file": alternate.file, "mime_type": format}
        if alternate.filesize is not None:
            update["filesize"] = alternate.filesize
        sizes[label] = entry.model_copy(update=update)
    changes["sizes"] = sizes

    return metadata.model_copy(update=changes)


@dataclass(frozen=True, slots=True)
class FormatSubstitution:
    """Metadata transform selecting the ``format`` rendition of every size."""

    format: str

    def __call__(self, metadata: ImageMetadata, original_mime_type: str) -> ImageMetadata:
        return select_variant(metadata, self.format, original_mime_type)


def variant_transform(
    variant: ImageVariant | str,
    mime_types: Mapping[str, str] | None = None,
) -> FormatSubstitution | None:
    """Return the transform for ``variant`` or ``None`` for the original files.

    Raises:
        ValueError: If ``variant`` is not a known :class:`ImageVariant`.
        KeyError: If no mime type is configured for ``variant``.
    """

    variant = ImageVariant(variant)
    if variant is ImageVariant.ORIGINAL:
        return None
    mapping = DEFAULT_VARIANT_MIME_TYPES if mime_types is None else mime_types
    return FormatSubstitution(mapping[variant.value])


__all__ = [
    "DEFAULT_VARIANT_MIME_TYPES",
    "FormatSubstitution",
    "ImageVariant",
    "MetadataTransform",
    "WEBP_MIME_TYPE",
    "select_variant",
    "variant_transform",
]
