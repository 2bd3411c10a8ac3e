"""Note persistence backends."""

from .base import NoteStore, utc_now
from .memory import InMemoryNoteStore
from .samples import SAMPLE_NOTES, seed_samples
from .sqlite import SqliteNoteStore

__all__ = [
    "NoteStore",
    "InMemoryNoteStore",
    "SqliteNoteStore",
    "SAMPLE_NOTES",
    "seed_samples",
    "utc_now",
]
