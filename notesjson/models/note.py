"""Persisted note entity and its id-less constructor payload."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Optional, Tuple


@dataclass(frozen=True)
class Note:
    """A stored note.

    ``id`` is minted by the store and never changes. ``timestamp`` is the last
    edit time (creation time until the first update), always timezone-aware UTC.
    """

    id: str
    title: str
    content: Optional[str]
    timestamp: datetime

    @property
    def display_title(self) -> str:
        return self.title if self.title else "Untitled"

    @property
    def has_content(self) -> bool:
        return bool(self.content)

    @property
    def formatted_timestamp(self) -> str:
        """Medium date, short time in local time, e.g. ``Sep 13, 2025, 10:15 AM``."""
        try:
            local = self.timestamp.astimezone()
        except OverflowError:
            # local offset pushes the value outside years 1..9999
            local = self.timestamp
        return local.strftime("%b %d, %Y, %I:%M %p")


@dataclass(frozen=True)
class NewNote:
    """Payload for creating a note; the store assigns the id."""

    title: str
    content: Optional[str] = None
    timestamp: Optional[datetime] = None


def clean_input(title: str, content: Optional[str]) -> Tuple[str, Optional[str]]:
    """Normalize text typed by a user: trim both fields, empty content -> None."""
    title = (title or "").strip()
    content = (content or "").strip()
    return title, (content or None)
