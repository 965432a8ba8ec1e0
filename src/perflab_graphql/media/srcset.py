"""Responsive ``srcset`` calculation over attachment metadata.

Reproduces the host's candidate selection: every generated size plus the full
image whose aspect ratio matches the requested source within one pixel, wider
candidates capped by ``max_srcset_image_width``. A metadata transform can be
passed to :meth:`SrcSetCalculator.srcset`; it is applied to that single read
only.
"""

from __future__ import annotations

import math
import posixpath
import re
from dataclasses import dataclass

import structlog

from ..domain.metadata import ImageMetadata
from ..domain.variants import MetadataTransform
from .library import MediaLibrary

logger = structlog.get_logger(__name__)

FULL_SIZE = "full"

_EDIT_HASH = re.compile(r"-e[0-9]{13}")
_UPLOADS_MARKER = "wp-content/uploads"


def _round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


def constrain_dimensions(
    current_width: int, current_height: int, max_width: int = 0, max_height: int = 0
) -> tuple[int, int]:
    """Scale ``current_width`` x ``current_height`` down to fit the bounds.

    A bound of ``0`` means unconstrained in that direction. The aspect ratio is
    kept and neither side drops below one pixel.
    """

    if not max_width and not max_height:
        return current_width, current_height

    width_ratio = height_ratio = 1.0
    did_width = did_height = False
    if 0 < max_width < current_width:
        width_ratio = max_width / current_width
        did_width = True
    if 0 < max_height < current_height:
        height_ratio = max_height / current_height
        did_height = True

    smaller_ratio = min(width_ratio, height_ratio)
    larger_ratio = max(width_ratio, height_ratio)
    if (
        _round_half_up(current_width * larger_ratio) > max_width
        or _round_half_up(current_height * larger_ratio) > max_height
    ):
        ratio = smaller_ratio
    else:
        ratio = larger_ratio

    width = max(1, _round_half_up(current_width * ratio))
    height = max(1, _round_half_up(current_height * ratio))

    # off-by-one from float rounding
    if did_width and width == max_width - 1:
        width = max_width
    if did_height and height == max_height - 1:
        height = max_height
    return width, height


def image_matches_ratio(
    source_width: int, source_height: int, target_width: int, target_height: int
) -> bool:
    """Return whether two sizes share an aspect ratio within one pixel."""

    if source_width > target_width:
        constrained = constrain_dimensions(source_width, source_height, target_width)
        expected = (target_width, target_height)
    else:
        constrained = constrain_dimensions(target_width, target_height, source_width)
        expected = (source_width, source_height)
    return abs(constrained[0] - expected[0]) <= 1 and abs(constrained[1] - expected[1]) <= 1


def relative_upload_dir(file: str) -> str:
    """Return the uploads-relative directory of ``file`` ("" for the root)."""

    dirname = posixpath.dirname(file)
    if dirname in ("", "."):
        return ""
    marker = dirname.find(_UPLOADS_MARKER)
    if marker != -1:
        dirname = dirname[marker + len(_UPLOADS_MARKER):].lstrip("/")
    return dirname


@dataclass(frozen=True, slots=True)
class ImageSource:
    """URL and pixel size of the rendition used as ``src``."""

    url: str
    width: int
    height: int


@dataclass(frozen=True, slots=True)
class _Candidate:
    file: str
    width: int
    height: int


@dataclass(slots=True)
class SrcSetCalculator:
    """Compute srcset strings for attachments of a :class:`MediaLibrary`."""

    library: MediaLibrary
    uploads_base_url: str
    max_srcset_image_width: int = 2048

    def read_metadata(
        self, attachment_id: int, *, transform: MetadataTransform | None = None
    ) -> ImageMetadata | None:
        """Read metadata once, applying ``transform`` to this read only."""

        metadata = self.library.get_metadata(attachment_id)
        if metadata is None or transform is None or metadata.sizes is None:
            return metadata
        original_mime_type = self.library.get_mime_type(attachment_id) or ""
        return transform(metadata, original_mime_type)

    def srcset(
        self,
        attachment_id: int,
        size: str,
        *,
        transform: MetadataTransform | None = None,
    ) -> str | None:
        """Return the srcset for ``size`` or ``None`` when fewer than two
        candidates match."""

        metadata = self.read_metadata(attachment_id, transform=transform)
        if metadata is None:
            return None
        source = self.image_source(attachment_id, metadata, size)
        if source is None:
            return None
        result = self.calculate(source, metadata)
        logger.debug(
            "perflab.srcset.computed",
            attachment_id=attachment_id,
            size=size,
            transformed=transform is not None,
            empty=result is None,
        )
        return result

    def image_source(
        self, attachment_id: int, metadata: ImageMetadata, size: str
    ) -> ImageSource | None:
        """Resolve the ``src`` rendition for ``size``, falling back to the
        full image when the size was not generated."""

        sizes = metadata.sizes or {}
        entry = sizes.get(size) if size != FULL_SIZE else None
        if entry is not None:
            return ImageSource(
                url=self._base_url(metadata.file) + entry.file,
                width=entry.width,
                height=entry.height,
            )
        attached = self.library.get_attached_file(attachment_id)
        if not attached:
            return None
        return ImageSource(
            url=f"{self.uploads_base_url.rstrip('/')}/{attached.lstrip('/')}",
            width=metadata.width,
            height=metadata.height,
        )

    def calculate(self, source: ImageSource, metadata: ImageMetadata) -> str | None:
        """Build the srcset string for ``source`` from the metadata candidates."""

        if not metadata.sizes or len(metadata.file) < 4:
            return None
        if source.width < 1:
            return None

        candidates = [
            _Candidate(entry.file, entry.width, entry.height)
            for entry in metadata.sizes.values()
        ]
        thumbnail = metadata.sizes.get("thumbnail")
        if thumbnail is None or thumbnail.mime_type != "image/gif":
            candidates.append(
                _Candidate(posixpath.basename(metadata.file), metadata.width, metadata.height)
            )
        elif metadata.file in source.url:
            return None

        dirname = relative_upload_dir(metadata.file)
        if dirname:
            dirname += "/"
        base_url = self._base_url(metadata.file)

        edit_hash = _EDIT_HASH.search(posixpath.basename(source.url))
        if edit_hash and edit_hash.group(0) not in posixpath.basename(metadata.file):
            return None

        sources: dict[int, str] = {}
        src_matched = False
        for candidate in candidates:
            is_src = False
            if not src_matched and f"{dirname}{candidate.file}" in source.url:
                src_matched = is_src = True
            if edit_hash and edit_hash.group(0) not in candidate.file:
                continue
            if (
                self.max_srcset_image_width
                and candidate.width > self.max_srcset_image_width
                and not is_src
            ):
                continue
            if not image_matches_ratio(
                source.width, source.height, candidate.width, candidate.height
            ):
                continue
            url = base_url + candidate.file
            if is_src:
                # the src rendition always leads the list
                sources = {candidate.width: url} | {
                    width: other for width, other in sources.items() if width != candidate.width
                }
            else:
                sources[candidate.width] = url

        if not src_matched or len(sources) < 2:
            return None
        return ", ".join(
            f"{url.replace(' ', '%20')} {width}w" for width, url in sources.items()
        )

    def _base_url(self, file: str) -> str:
        dirname = relative_upload_dir(file)
        base = self.uploads_base_url.rstrip("/") + "/"
        return base + (f"{dirname}/" if dirname else "")


__all__ = [
    "FULL_SIZE",
    "ImageSource",
    "SrcSetCalculator",
    "constrain_dimensions",
    "image_matches_ratio",
    "relative_upload_dir",
]
