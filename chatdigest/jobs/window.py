"""
Collection window for the daily run.

The collector is scheduled at 03:00. It gathers everything from 03:45 the
previous day up to 03:00 today and files it under the previous day's date.
"""
from __future__ import annotations

from datetime import datetime, time, timedelta

from ..storage.models import DateWindow

CUTOFF = time(3, 0)
WINDOW_START = time(3, 45)


def compute_window(now: datetime) -> DateWindow:
    """
    Window for a run at `now`; never reads the clock.

    A naive `now` is local wall time and the window stays naive. An aware
    `now` is moved to the system's local zone first, and each boundary gets
    the UTC offset in force on its own date, so a DST change between the
    two days is respected.
    """
    if now.tzinfo is None:
        before = datetime.combine(now.date(), CUTOFF)
        after = datetime.combine(before.date() - timedelta(days=1), WINDOW_START)
    else:
        local_day = now.astimezone().date()
        before = datetime.combine(local_day, CUTOFF).astimezone()
        after = datetime.combine(local_day - timedelta(days=1), WINDOW_START).astimezone()
    return DateWindow(after=after, before=before, label=after.date().isoformat())
