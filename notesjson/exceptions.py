"""Error types raised by the notes store, codec and exchange engine."""

from __future__ import annotations

from typing import Any, List, Optional


class NotesError(Exception):
    """Base notesjson error."""


class ValidationError(NotesError):
    """A write was rejected, e.g. the title is empty after trimming."""


class NotFoundError(NotesError):
    """No note exists with the requested id."""

    def __init__(self, note_id: str):
        super().__init__(f"Note not found: {note_id}")
        self.note_id = note_id


class DecodeError(NotesError):
    """Bytes are not valid JSON or do not match the exported note shape."""

    def __init__(self, message: str, errors: Optional[List[Any]] = None):
        super().__init__(message)
        self.errors = errors or []


class NoNotesError(NotesError):
    """Export from an empty store, or import of an empty note list."""


class FileAccessError(NotesError):
    """Reading or writing an export file failed."""

    def __init__(self, message: str, path: Optional[str] = None):
        super().__init__(message)
        self.path = path
