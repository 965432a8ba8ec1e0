"""Minimal host media item types.

Stands in for the CMS schema the Performance Lab fields extend: the
``MediaItem`` object type, the ``MediaItemSizeEnum`` of registered image sizes
and the ``mediaItem(id:)`` root field.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Any, Iterable, Mapping

from ..config import PerfLabSettings
from ..media.library import MediaItemModel, MediaLibrary
from .registry import ROOT_QUERY, TypeRegistry

SIZE_ENUM = "MediaItemSizeEnum"
MEDIA_ITEM = "MediaItem"

_UNSAFE = re.compile(r"[^A-Za-z0-9_]")


def safe_enum_name(value: str) -> str:
    """Return a GraphQL-safe enum name (``1536x1536`` -> ``_1536X1536``)."""

    name = _UNSAFE.sub("_", value).upper()
    if name[:1].isdigit():
        name = f"_{name}"
    return name


def register_size_enum(registry: TypeRegistry, sizes: Iterable[str]) -> None:
    registry.register_enum_type(
        SIZE_ENUM,
        {
            safe_enum_name(size): {
                "value": size,
                "description": f"MediaItem with the {size} size",
            }
            for size in sizes
        },
        description="The size of the media item object.",
    )


def register_media_item_types(
    registry: TypeRegistry, library: MediaLibrary, settings: PerfLabSettings
) -> None:
    """Register the host media item schema backed by ``library``."""

    base_url = settings.uploads_base_url.rstrip("/")

    def resolve_media_item(
        _source: Any, args: Mapping[str, Any], _info: Any
    ) -> MediaItemModel | None:
        attachment_id = args["id"]
        mime_type = library.get_mime_type(attachment_id)
        if mime_type is None:
            return None
        attached = library.get_attached_file(attachment_id)
        return MediaItemModel(
            database_id=attachment_id,
            mime_type=mime_type,
            source_url=f"{base_url}/{attached.lstrip('/')}" if attached else None,
        )

    if not registry.has_type(SIZE_ENUM):
        register_size_enum(registry, settings.image_sizes)

    registry.register_object_type(
        MEDIA_ITEM,
        {
            "databaseId": {
                "type": ["non_null", "Int"],
                "description": "The unique identifier stored in the database",
                "resolve": lambda source, _args, _info: source.database_id,
            },
            "mimeType": {
                "type": "String",
                "description": "The mime type of the media item",
                "resolve": lambda source, _args, _info: source.mime_type,
            },
            "sourceUrl": {
                "type": "String",
                "description": "Url of the original file",
                "resolve": lambda source, _args, _info: source.source_url,
            },
        },
        description="The mediaItem type",
    )
    registry.register_field(
        ROOT_QUERY,
        "mediaItem",
        {
            "type": MEDIA_ITEM,
            "args": {"id": {"type": ["non_null", "Int"]}},
            "description": "A media item looked up by its database id",
            "resolve": resolve_media_item,
        },
    )


@dataclass(slots=True)
class MediaItemTypes:
    """Schema plugin wrapping :func:`register_media_item_types`."""

    library: MediaLibrary
    settings: PerfLabSettings

    def register_types(self, registry: TypeRegistry) -> None:
        register_media_item_types(registry, self.library, self.settings)


__all__ = [
    "MEDIA_ITEM",
    "MediaItemTypes",
    "SIZE_ENUM",
    "register_media_item_types",
    "register_size_enum",
    "safe_enum_name",
]
