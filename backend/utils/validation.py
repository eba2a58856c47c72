"""
Timetable entry validation
"""
from typing import List, Sequence, Tuple

from backend.models import ScheduleEntry

REQUIRED_FIELDS = {
    'course_code': "Course code",
    'course_title': "Course title",
    'day': "Day",
    'start_time': "Start time",
    'end_time': "End time",
}


def validate_schedule_entry(entry: ScheduleEntry,
                            time_slots: Sequence[str],
                            days: Sequence[str]) -> Tuple[bool, List[str]]:
    """
    Check a class entry before it is saved

    Args:
        entry: entry to check
        time_slots: ordered slot labels of the grid
        days: ordered weekday names of the grid

    Returns:
        (is valid, list of error messages)
    """
    errors = []

    # Required fields
    for name, label in REQUIRED_FIELDS.items():
        if not getattr(entry, name).strip():
            errors.append(f"{label} is required")

    if entry.day and entry.day not in days:
        errors.append(f"Unknown day: {entry.day}")

    for name in ('start_time', 'end_time'):
        value = getattr(entry, name)
        if not value:
            continue
        if value not in time_slots:
            errors.append(f"{REQUIRED_FIELDS[name]} {value} is not one of the timetable slots")

    # Ordering is by position in the slot list
    if entry.start_time in time_slots and entry.end_time in time_slots:
        if time_slots.index(entry.start_time) >= time_slots.index(entry.end_time):
            errors.append(f"{entry.course_code or 'Class'} must end after it starts")

    return len(errors) == 0, errors


def slot_span(entry: ScheduleEntry, time_slots: Sequence[str]) -> Tuple[int, int]:
    """
    Half-open [start, end) slot index interval of an entry

    Raises:
        ValueError: when a time is missing from time_slots
    """
    return time_slots.index(entry.start_time), time_slots.index(entry.end_time)


def find_slot_conflicts(entries: Sequence[ScheduleEntry],
                        time_slots: Sequence[str]) -> List[Tuple[ScheduleEntry, ScheduleEntry, str]]:
    """
    Pairs of same-day entries whose slot intervals overlap

    Exports only show the first of the pair, so the UI warns about these.
    Entries with times outside time_slots, or that end before they start,
    are ignored: the grid never draws them.

    Returns:
        list of (earlier entry, later entry, day)
    """
    conflicts = []
    spans = []
    for entry in entries:
        try:
            start, end = slot_span(entry, time_slots)
        except ValueError:
            continue
        if start >= end:
            continue
        spans.append((entry, start, end))

    for i, (first, f_start, f_end) in enumerate(spans):
        for second, s_start, s_end in spans[i + 1:]:
            if first.day != second.day:
                continue
            if f_start < s_end and s_start < f_end:
                conflicts.append((first, second, first.day))

    return conflicts
