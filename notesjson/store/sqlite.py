"""
SQLite-backed note store.

One table, one row per note. ``seq`` records insertion order and is kept on
update so that timestamp ties sort the same way before and after an edit.
Each mutation is its own transaction and is committed before returning.
"""

from __future__ import annotations

import logging
import sqlite3
import threading
from datetime import datetime, timezone
from pathlib import Path
from typing import List, Optional, Union

from ..exceptions import NotFoundError
from ..models import Note
from .base import Clock, NoteStore

LOGGER = logging.getLogger(__name__)

_SCHEMA = """
CREATE TABLE IF NOT EXISTS notes (
    seq       INTEGER PRIMARY KEY AUTOINCREMENT,
    id        TEXT NOT NULL UNIQUE,
    title     TEXT NOT NULL,
    content   TEXT,
    timestamp TEXT NOT NULL
)
"""

_INDEX = "CREATE INDEX IF NOT EXISTS idx_notes_timestamp ON notes (timestamp DESC, seq DESC)"


def _encode_ts(dt: datetime) -> str:
    # Fixed-width UTC text so lexical order equals chronological order.
    dt = dt.astimezone(timezone.utc)
    return (
        f"{dt.year:04d}-{dt.month:02d}-{dt.day:02d}"
        f"T{dt.hour:02d}:{dt.minute:02d}:{dt.second:02d}"
        f".{dt.microsecond:06d}+00:00"
    )


def _decode_ts(raw: str) -> datetime:
    return datetime.fromisoformat(raw).astimezone(timezone.utc)


def _row_to_note(row: sqlite3.Row) -> Note:
    return Note(
        id=row["id"],
        title=row["title"],
        content=row["content"],
        timestamp=_decode_ts(row["timestamp"]),
    )


class SqliteNoteStore(NoteStore):
    """Durable store in a single SQLite file (or ``":memory:"``)."""

    def __init__(self, path: Union[str, Path], clock: Optional[Clock] = None):
        super().__init__(clock=clock)
        self.path = str(path)
        if self.path != ":memory:":
            Path(self.path).parent.mkdir(parents=True, exist_ok=True)
        self._lock = threading.Lock()
        self._conn = sqlite3.connect(self.path, check_same_thread=False, timeout=30.0)
        self._conn.row_factory = sqlite3.Row
        with self._conn:
            self._conn.execute(_SCHEMA)
            self._conn.execute(_INDEX)
        LOGGER.debug("notes.sqlite.open path=%s", self.path)

    # ------------------------------------------------------------- lifecycle

    def close(self) -> None:
        with self._lock:
            self._conn.close()
        LOGGER.debug("notes.sqlite.close path=%s", self.path)

    def __enter__(self) -> "SqliteNoteStore":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()

    # ----------------------------------------------------------------- reads

    def get(self, note_id: str) -> Note:
        with self._lock:
            row = self._conn.execute(
                "SELECT id, title, content, timestamp FROM notes WHERE id = ?",
                (note_id,),
            ).fetchone()
        if row is None:
            raise NotFoundError(note_id)
        return _row_to_note(row)

    def list(self) -> List[Note]:
        with self._lock:
            rows = self._conn.execute(
                "SELECT id, title, content, timestamp FROM notes "
                "ORDER BY timestamp DESC, seq DESC"
            ).fetchall()
        return [_row_to_note(r) for r in rows]

    def count(self) -> int:
        with self._lock:
            return self._conn.execute("SELECT COUNT(*) FROM notes").fetchone()[0]

    # ------------------------------------------------------------ primitives

    def _insert(self, note: Note) -> None:
        with self._lock, self._conn:
            self._conn.execute(
                "INSERT INTO notes (id, title, content, timestamp) VALUES (?, ?, ?, ?)",
                (note.id, note.title, note.content, _encode_ts(note.timestamp)),
            )

    def _replace(self, note: Note) -> None:
        with self._lock, self._conn:
            cur = self._conn.execute(
                "UPDATE notes SET title = ?, content = ?, timestamp = ? WHERE id = ?",
                (note.title, note.content, _encode_ts(note.timestamp), note.id),
            )
        if cur.rowcount == 0:
            raise NotFoundError(note.id)

    def _remove(self, note_id: str) -> None:
        with self._lock, self._conn:
            cur = self._conn.execute("DELETE FROM notes WHERE id = ?", (note_id,))
        if cur.rowcount == 0:
            raise NotFoundError(note_id)

    def _clear(self) -> int:
        with self._lock, self._conn:
            removed = self._conn.execute("SELECT COUNT(*) FROM notes").fetchone()[0]
            self._conn.execute("DELETE FROM notes")
        return removed
