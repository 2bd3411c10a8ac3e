from __future__ import annotations

from datetime import datetime, timedelta
from typing import List, Optional

from ..models import Note
from .base import NoteStore, utc_now

SAMPLE_NOTES = [
    ("Meeting Notes", "Discussed project timeline, budget allocation, and team responsibilities.", 0),
    ("Shopping List", "Milk, Bread, Eggs, Butter, Cheese", -2),
    ("Important Reminder", "Call the dentist to schedule appointment", -24),
    ("Vacation Ideas", "Research flights to Japan, check hotel availability", -48),
    ("Book Notes", "Short note content", -72),
]


def seed_samples(store: NoteStore, now: Optional[datetime] = None) -> List[Note]:
    """Populate ``store`` with demo notes spread over the last three days."""
    now = now or utc_now()
    return [
        store.create(title, content, timestamp=now + timedelta(hours=offset))
        for title, content, offset in SAMPLE_NOTES
    ]
