"""Dominant color formatting."""

from __future__ import annotations

from enum import Enum
from typing import Callable


class DominantColorFormat(str, Enum):
    """Output formats supported for the dominant color field."""

    HEX = "hex"


def _as_hex(color: str) -> str:
    return f"#{color}"


_FORMATTERS: dict[DominantColorFormat, Callable[[str], str]] = {
    DominantColorFormat.HEX: _as_hex,
}


def format_dominant_color(
    color: str | None, fmt: DominantColorFormat | str | None = None
) -> str | None:
    """Format a stored dominant color (hex digits without ``#``).

    Unknown or missing formats fall back to hex. Returns ``None`` when no
    color has been computed for the image yet.
    """

    if not color:
        return None
    try:
        formatter = _FORMATTERS[DominantColorFormat(fmt)]
    except ValueError:
        formatter = _as_hex
    return formatter(color)


__all__ = ["DominantColorFormat", "format_dominant_color"]
