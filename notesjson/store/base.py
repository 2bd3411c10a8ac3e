"""
Store contract shared by all backends.

The base class owns validation and timestamp policy so every write path,
including bulk import, goes through the same rules. Backends only implement
the storage primitives.
"""

from __future__ import annotations

import logging
import uuid
from abc import ABC, abstractmethod
from datetime import datetime, timezone
from typing import Callable, List, Optional

from ..exceptions import ValidationError
from ..models import Note

LOGGER = logging.getLogger(__name__)

Clock = Callable[[], datetime]


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


def _as_utc(dt: datetime) -> datetime:
    if dt.tzinfo is None:
        return dt.replace(tzinfo=timezone.utc)
    return dt.astimezone(timezone.utc)


def _require_title(title: Optional[str]) -> str:
    if title is None or not title.strip():
        raise ValidationError("Title must not be empty")
    return title


def _normalize_content(content: Optional[str]) -> Optional[str]:
    return content if content else None


class NoteStore(ABC):
    """Sole owner of persisted notes.

    Writers must be serialized by the caller; each mutation is atomic and
    committed before it returns, so readers never see a half-applied write.
    """

    def __init__(self, clock: Optional[Clock] = None):
        self._clock: Clock = clock or utc_now

    # ------------------------------------------------------------------ public

    def create(
        self,
        title: str,
        content: Optional[str] = None,
        timestamp: Optional[datetime] = None,
    ) -> Note:
        """Create a note with a fresh id; ``timestamp`` defaults to now."""
        note = Note(
            id=str(uuid.uuid4()),
            title=_require_title(title),
            content=_normalize_content(content),
            timestamp=_as_utc(timestamp) if timestamp else self._clock(),
        )
        self._insert(note)
        LOGGER.debug("notes.store.create id=%s", note.id)
        return note

    def update(
        self,
        note_id: str,
        title: Optional[str] = None,
        content: Optional[str] = None,
    ) -> Note:
        """Replace title and/or content and bump the timestamp to now.

        ``None`` leaves a field unchanged; empty content clears it.
        """
        current = self.get(note_id)
        note = Note(
            id=current.id,
            title=_require_title(current.title if title is None else title),
            content=current.content if content is None else _normalize_content(content),
            timestamp=self._clock(),
        )
        self._replace(note)
        LOGGER.debug("notes.store.update id=%s", note.id)
        return note

    def delete(self, note_id: str) -> None:
        self._remove(note_id)
        LOGGER.debug("notes.store.delete id=%s", note_id)

    def delete_all(self) -> int:
        """Remove every note; returns how many were removed. Never fails on empty."""
        removed = self._clear()
        LOGGER.info("notes.store.delete_all removed=%d", removed)
        return removed

    def count(self) -> int:
        return len(self.list())

    def __len__(self) -> int:
        return self.count()

    @abstractmethod
    def get(self, note_id: str) -> Note:
        """Return the note or raise NotFoundError."""

    @abstractmethod
    def list(self) -> List[Note]:
        """All notes, newest timestamp first; ties go to the later insertion."""

    # -------------------------------------------------------------- primitives

    @abstractmethod
    def _insert(self, note: Note) -> None: ...

    @abstractmethod
    def _replace(self, note: Note) -> None:
        """Overwrite an existing note, keeping its insertion position."""

    @abstractmethod
    def _remove(self, note_id: str) -> None:
        """Delete one note or raise NotFoundError."""

    @abstractmethod
    def _clear(self) -> int: ...
