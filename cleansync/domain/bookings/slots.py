"""
Slot suggestion for the shared cleaning crew calendar.

Candidates start at window open and advance one session length at a time
while the whole session still fits before window close. A candidate is
rejected when any existing booking starts less than one session length away
from it, in either direction. The check compares start times only, so it
assumes every booking lasts exactly one session.

When nothing on the requested day clears, the window open of the next day is
returned without checking that day.
"""

from datetime import date, datetime, time, timedelta
from typing import Iterable

from ...config import SESSION_LENGTH_HOURS, WORKING_HOURS_END, WORKING_HOURS_START


def working_window(day: date, start_hour: int = WORKING_HOURS_START, end_hour: int = WORKING_HOURS_END):
    """Return (open, close) datetimes of the crew's working day"""
    return datetime.combine(day, time(hour=start_hour)), datetime.combine(day, time(hour=end_hour))


def is_slot_clear(candidate: datetime, existing: Iterable[datetime], session_length: timedelta) -> bool:
    return all(abs(booked - candidate) >= session_length for booked in existing)


def suggest_slot(
    requested: date,
    existing: Iterable[datetime],
    start_hour: int = WORKING_HOURS_START,
    end_hour: int = WORKING_HOURS_END,
    session_hours: int = SESSION_LENGTH_HOURS,
) -> datetime:
    """
    Pick the first open slot on `requested`.

    Args:
        requested: Calendar day the client asked for
        existing: Start times of that day's active bookings
        start_hour: Hour the working window opens
        end_hour: Hour the working window closes
        session_hours: Length of one cleaning session

    Returns:
        Start time of the suggested slot; never None
    """
    booked = list(existing)
    session_length = timedelta(hours=session_hours)
    window_open, window_close = working_window(requested, start_hour, end_hour)

    candidate = window_open
    while candidate + session_length <= window_close:
        if is_slot_clear(candidate, booked, session_length):
            return candidate
        candidate += session_length

    return window_open + timedelta(days=1)


def day_bounds(day: date) -> tuple[datetime, datetime]:
    """Inclusive start and exclusive end of a calendar day"""
    start = datetime.combine(day, time.min)
    return start, start + timedelta(days=1)


def is_weekend(day: date) -> bool:
    """True when `day` is a Saturday or Sunday"""
    return day.weekday() >= 5
