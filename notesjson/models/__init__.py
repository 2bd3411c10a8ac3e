"""Public exports for note data models."""

from __future__ import annotations

from .dto import (
    NoteDTO,
    dedup_key,
    format_timestamp,
    from_dto,
    parse_timestamp,
    to_dto,
    to_dtos,
)
from .note import NewNote, Note, clean_input

__all__ = [
    "Note",
    "NewNote",
    "NoteDTO",
    "clean_input",
    "dedup_key",
    "format_timestamp",
    "from_dto",
    "parse_timestamp",
    "to_dto",
    "to_dtos",
]
