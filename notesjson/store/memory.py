from __future__ import annotations

import threading
from typing import Dict, List, Optional, Tuple

from ..exceptions import NotFoundError
from ..models import Note
from .base import Clock, NoteStore


class InMemoryNoteStore(NoteStore):
    """Dict-backed store for tests and throwaway sessions."""

    def __init__(self, clock: Optional[Clock] = None):
        super().__init__(clock=clock)
        self._lock = threading.RLock()
        # id -> (insertion sequence, note)
        self._rows: Dict[str, Tuple[int, Note]] = {}
        self._seq = 0

    def get(self, note_id: str) -> Note:
        with self._lock:
            row = self._rows.get(note_id)
        if row is None:
            raise NotFoundError(note_id)
        return row[1]

    def list(self) -> List[Note]:
        with self._lock:
            rows = list(self._rows.values())
        rows.sort(key=lambda r: (r[1].timestamp, r[0]), reverse=True)
        return [note for _, note in rows]

    def count(self) -> int:
        with self._lock:
            return len(self._rows)

    def _insert(self, note: Note) -> None:
        with self._lock:
            self._seq += 1
            self._rows[note.id] = (self._seq, note)

    def _replace(self, note: Note) -> None:
        with self._lock:
            row = self._rows.get(note.id)
            if row is None:
                raise NotFoundError(note.id)
            self._rows[note.id] = (row[0], note)

    def _remove(self, note_id: str) -> None:
        with self._lock:
            if self._rows.pop(note_id, None) is None:
                raise NotFoundError(note_id)

    def _clear(self) -> int:
        with self._lock:
            removed = len(self._rows)
            self._rows.clear()
            return removed
