"""Typed view of the attachment metadata record stored by the host CMS.

The host keeps metadata as a loosely structured mapping (``file``, ``width``,
``height``, ``sizes``, ``sources`` ...). The models below validate that
mapping once on read and keep unknown keys verbatim, so a record can be
round-tripped back to the host shape with :meth:`ImageMetadata.to_mapping`.
Models are frozen; transforms derive new records with ``model_copy``.
"""

from __future__ import annotations

from typing import Any, Mapping

from pydantic import BaseModel, ConfigDict, Field, field_validator

from ..exceptions import handle_validation_errors


def _empty_list_as_mapping(value: Any) -> Any:
    # PHP serialises an empty associative array as a JSON list.
    if isinstance(value, list) and not value:
        return {}
    return value


class FormatSource(BaseModel):
    """Alternate-format rendition of an image (``sources[<mime>]``)."""

    model_config = ConfigDict(frozen=True, extra="allow")

    file: str = ""
    filesize: int | None = None


class SizeEntry(BaseModel):
    """One generated rendition of the image at a named size."""

    model_config = ConfigDict(frozen=True, extra="allow", populate_by_name=True)

    file: str
    width: int = 0
    height: int = 0
    mime_type: str | None = Field(default=None, alias="mime-type")
    filesize: int | None = None
    sources: dict[str, FormatSource] = Field(default_factory=dict)

    @field_validator("sources", mode="before")
    @classmethod
    def normalize_sources(cls, value: Any) -> Any:
        return _empty_list_as_mapping(value)

    def alternate(self, mime_type: str) -> FormatSource | None:
        """Return the rendition for ``mime_type`` if one with a file exists."""

        source = self.sources.get(mime_type)
        if source is None or not source.file:
            return None
        return source


class ImageMetadata(BaseModel):
    """Size-indexed metadata of one uploaded image."""

    model_config = ConfigDict(frozen=True, extra="allow", populate_by_name=True)

    file: str = ""
    width: int = 0
    height: int = 0
    filesize: int | None = None
    sizes: dict[str, SizeEntry] | None = None
    sources: dict[str, FormatSource] = Field(default_factory=dict)
    dominant_color: str | None = None
    has_transparency: bool | None = None

    @field_validator("sizes", "sources", mode="before")
    @classmethod
    def normalize_mappings(cls, value: Any) -> Any:
        return _empty_list_as_mapping(value)

    @classmethod
    def from_mapping(
        cls, data: Mapping[str, Any], *, record: str | None = None
    ) -> "ImageMetadata":
        """Validate a host metadata mapping.

        Raises:
            MalformedMetadataError: If ``sizes`` is not a mapping or any entry
                has the wrong shape. Records without ``sizes`` (audio, video)
                are valid.
        """

        with handle_validation_errors(record=record):
            return cls.model_validate(data)

    def to_mapping(self) -> dict[str, Any]:
        """Return the record using the host's key names."""

        return self.model_dump(by_alias=True, exclude_none=True)


__all__ = ["FormatSource", "ImageMetadata", "SizeEntry"]
