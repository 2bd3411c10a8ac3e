"""Local note store with JSON export and merge/replace import."""

from .codec import decode_notes, encode_notes
from .config import NotesConfig
from .exceptions import (
    DecodeError,
    FileAccessError,
    NoNotesError,
    NotesError,
    NotFoundError,
    ValidationError,
)
from .exchange import ImportMode, ImportSummary, NoteExchange
from .models import NewNote, Note, NoteDTO
from .store import InMemoryNoteStore, NoteStore, SqliteNoteStore, seed_samples

__all__ = [
    "Note",
    "NewNote",
    "NoteDTO",
    "NoteStore",
    "InMemoryNoteStore",
    "SqliteNoteStore",
    "seed_samples",
    "NoteExchange",
    "ImportMode",
    "ImportSummary",
    "NotesConfig",
    "encode_notes",
    "decode_notes",
    "NotesError",
    "ValidationError",
    "NotFoundError",
    "DecodeError",
    "NoNotesError",
    "FileAccessError",
]
