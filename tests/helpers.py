"""Shared fixtures for the notesjson tests."""

from datetime import datetime, timedelta, timezone

T0 = datetime(2025, 9, 13, 10, 15, 30, tzinfo=timezone.utc)


class FakeClock:
    """Deterministic clock; every call moves time forward by ``step``."""

    def __init__(self, start=T0, step=timedelta(seconds=1)):
        self.now = start
        self.step = step

    def __call__(self):
        current = self.now
        self.now = self.now + self.step
        return current
