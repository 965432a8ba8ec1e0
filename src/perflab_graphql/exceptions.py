"""Domain level exceptions and helpers for the Performance Lab extension."""

from __future__ import annotations

from contextlib import contextmanager
from dataclasses import dataclass
from typing import Iterator, TypeVar

from pydantic import ValidationError

__all__ = [
    "PerfLabError",
    "MalformedMetadataError",
    "AttachmentNotFoundError",
    "SchemaRegistryError",
    "UnknownTypeError",
    "DuplicateTypeError",
    "ensure_attachment",
    "handle_validation_errors",
]

T = TypeVar("T")


class PerfLabError(Exception):
    """Base class for extension specific errors."""


class MalformedMetadataError(PerfLabError, ValueError):
    """Raised when an attachment metadata record lacks the expected structure."""


class AttachmentNotFoundError(PerfLabError, LookupError):
    """Raised when an attachment could not be located in the media library."""


class SchemaRegistryError(PerfLabError):
    """Base class for type registry failures."""


class UnknownTypeError(SchemaRegistryError, KeyError):
    """Raised when a type name is referenced before it was registered."""

    def __str__(self) -> str:
        return str(self.args[0]) if self.args else ""


class DuplicateTypeError(SchemaRegistryError):
    """Raised when a type name is registered twice."""


@dataclass(slots=True)
class _RecordContext:
    """Internal helper describing the record for error messages."""

    record: str | None = None

    def format(self, message: str) -> str:
        if self.record:
            return f"{self.record}: {message}"
        return message


def ensure_attachment(record: T | None, *, attachment_id: int) -> T:
    """Ensure an attachment exists, otherwise raise :class:`AttachmentNotFoundError`."""

    if record is None:
        raise AttachmentNotFoundError(f"attachment '{attachment_id}' not found")
    return record


def _summarize(exc: ValidationError) -> str:
    parts = []
    for error in exc.errors():
        location = ".".join(str(item) for item in error.get("loc", ())) or "<root>"
        parts.append(f"{location}: {error.get('msg', 'invalid')}")
    return "; ".join(parts)


@contextmanager
def handle_validation_errors(*, record: str | None = None) -> Iterator[None]:
    """Translate pydantic validation errors into :class:`MalformedMetadataError`."""

    context = _RecordContext(record)
    try:
        yield
    except ValidationError as exc:
        raise MalformedMetadataError(context.format(_summarize(exc))) from exc
