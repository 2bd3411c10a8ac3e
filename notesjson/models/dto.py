"""
Portable wire form of a note, as written to and read from export files.

The DTO carries no id: exported files identify notes by value only, and every
import mints fresh ids in the store.
"""

from __future__ import annotations

import re
from datetime import datetime, timezone
from typing import Annotated, Iterable, List

from pydantic import BeforeValidator, PlainSerializer, WithJsonSchema

from ._base import WireModel
from .note import NewNote, Note

# ---------------------------------------------------------------------------
# Timestamp helpers
# ---------------------------------------------------------------------------

# Date and time part are both required; a bare date is not a timestamp.
_ISO_DATETIME_RE = re.compile(r"^\d{4}-\d{2}-\d{2}[T ]\d{2}:\d{2}")

# Sub-second digits are dropped anyway; strip them so any fraction length parses.
_FRACTION_RE = re.compile(r"(\d{2}:\d{2}:\d{2})[.,]\d+")


def normalize_timestamp(dt: datetime) -> datetime:
    """UTC, whole seconds. Naive values are taken to be UTC already."""
    if dt.tzinfo is None:
        dt = dt.replace(tzinfo=timezone.utc)
    return dt.astimezone(timezone.utc).replace(microsecond=0)


def format_timestamp(dt: datetime) -> str:
    """ISO-8601 with a ``Z`` designator, e.g. ``2025-09-13T10:15:30Z``."""
    dt = normalize_timestamp(dt)
    # strftime("%Y") does not zero-pad years below 1000 on every platform.
    return (
        f"{dt.year:04d}-{dt.month:02d}-{dt.day:02d}"
        f"T{dt.hour:02d}:{dt.minute:02d}:{dt.second:02d}Z"
    )


def parse_timestamp(value) -> datetime:
    if isinstance(value, datetime):
        return normalize_timestamp(value)
    if not isinstance(value, str):
        raise ValueError("timestamp must be an ISO-8601 date-time string")
    text = value.strip()
    if not _ISO_DATETIME_RE.match(text):
        raise ValueError(f"not an ISO-8601 date-time: {value!r}")
    if text.endswith(("Z", "z")):
        text = text[:-1] + "+00:00"
    text = _FRACTION_RE.sub(r"\1", text, count=1)
    try:
        return normalize_timestamp(datetime.fromisoformat(text))
    except (ValueError, OverflowError):
        # OverflowError: the UTC equivalent falls outside years 1..9999
        raise ValueError(f"not an ISO-8601 date-time: {value!r}") from None


IsoDateTime = Annotated[
    datetime,
    BeforeValidator(parse_timestamp),
    PlainSerializer(format_timestamp, return_type=str),
    WithJsonSchema({"type": "string", "format": "date-time"}),
]

# Missing and null content both mean "no content".
OptionalText = Annotated[str, BeforeValidator(lambda v: "" if v is None else v)]


class NoteDTO(WireModel):
    """One exported note. Field order is the order written to JSON."""

    title: str
    content: OptionalText = ""
    timestamp: IsoDateTime


# ---------------------------------------------------------------------------
# Mapping
# ---------------------------------------------------------------------------


def to_dto(note: Note) -> NoteDTO:
    return NoteDTO(
        title=note.title,
        content=note.content or "",
        timestamp=note.timestamp,
    )


def to_dtos(notes: Iterable[Note]) -> List[NoteDTO]:
    return [to_dto(n) for n in notes]


def from_dto(dto: NoteDTO) -> NewNote:
    """Always a request for a new note; imported notes keep the DTO's timestamp."""
    return NewNote(title=dto.title, content=dto.content, timestamp=dto.timestamp)


def dedup_key(title: str, timestamp: datetime) -> str:
    """Merge-import identity: title and second-precision timestamp. Content is ignored."""
    return f"{title}|{format_timestamp(timestamp)}"
