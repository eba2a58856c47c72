"""
Day x time-slot grid shared by every timetable export
"""
from typing import Dict, List, Optional, Sequence

import pandas as pd

from backend.models import ScheduleEntry

TIMETABLE_TITLE = "Class Timetable"
CORNER_LABEL = "Day/Time"

# (fill, border) per course, picked by course_color()
COURSE_PALETTE = [
    ('#DBEAFE', '#93C5FD'),  # blue
    ('#DCFCE7', '#86EFAC'),  # green
    ('#F3E8FF', '#D8B4FE'),  # purple
    ('#FEF9C3', '#FDE047'),  # yellow
    ('#FCE7F3', '#F9A8D4'),  # pink
    ('#FFEDD5', '#FDBA74'),  # orange
    ('#CCFBF1', '#5EEAD4'),  # teal
    ('#E0E7FF', '#A5B4FC'),  # indigo
]


def slot_index_map(time_slots: Sequence[str]) -> Dict[str, int]:
    """First position of each slot label"""
    index = {}
    for i, slot in enumerate(time_slots):
        index.setdefault(slot, i)
    return index


def find_entry_for_slot(entries: Sequence[ScheduleEntry],
                        day: str,
                        time_slot: str,
                        time_slots: Sequence[str],
                        slot_index: Optional[Dict[str, int]] = None) -> Optional[ScheduleEntry]:
    """
    Entry shown in a (day, time slot) cell

    An entry occupies slots [start, end); the end slot itself is free.
    Entries whose start or end time is not a known slot are skipped.
    When several entries overlap the cell, the first one wins.

    Args:
        entries: timetable entries
        day: row day
        time_slot: column slot label
        time_slots: ordered slot labels
        slot_index: precomputed slot_index_map(time_slots)

    Returns:
        matching entry or None
    """
    if slot_index is None:
        slot_index = slot_index_map(time_slots)

    current = slot_index.get(time_slot)
    if current is None:
        return None

    for entry in entries:
        if entry.day != day:
            continue
        start = slot_index.get(entry.start_time)
        end = slot_index.get(entry.end_time)
        if start is None or end is None:
            continue
        if start <= current < end:
            return entry
    return None


def format_cell_text(entry: Optional[ScheduleEntry]) -> str:
    if entry is None:
        return ""
    return (f"{entry.course_code}: {entry.course_title}\n"
            f"Location: {entry.location}\n"
            f"Lecturer: {entry.lecturer}")


def build_cell_matrix(entries: Sequence[ScheduleEntry],
                      time_slots: Sequence[str],
                      days: Sequence[str]) -> List[List[Optional[ScheduleEntry]]]:
    """Entry (or None) for every day row and slot column"""
    slot_index = slot_index_map(time_slots)
    return [
        [find_entry_for_slot(entries, day, slot, time_slots, slot_index) for slot in time_slots]
        for day in days
    ]


def build_timetable_rows(entries: Sequence[ScheduleEntry],
                         time_slots: Sequence[str],
                         days: Sequence[str],
                         title: str = TIMETABLE_TITLE) -> List[List[str]]:
    """
    Rows of the spreadsheet export

    Returns:
        [[title], [], ["Day/Time", *slots], [day, cell, ...] for each day]
    """
    rows = [
        [title],
        [],
        [CORNER_LABEL] + list(time_slots),
    ]
    matrix = build_cell_matrix(entries, time_slots, days)
    for day, cells in zip(days, matrix):
        rows.append([day] + [format_cell_text(entry) for entry in cells])
    return rows


def to_dataframe(entries: Sequence[ScheduleEntry],
                 time_slots: Sequence[str],
                 days: Sequence[str]) -> pd.DataFrame:
    """
    Grid as a DataFrame: one row per day, one column per slot

    Empty cells hold "".
    """
    matrix = build_cell_matrix(entries, time_slots, days)
    data = [[format_cell_text(entry) for entry in cells] for cells in matrix]
    df = pd.DataFrame(data, index=list(days), columns=list(time_slots))
    df.index.name = CORNER_LABEL
    return df


def course_color(course_code: str) -> tuple:
    """
    Stable (fill, border) colours for a course code

    Uses the 31-multiplier string hash with signed 32-bit overflow so a
    course keeps its colour across sessions.
    """
    h = 0
    for ch in course_code:
        h = (ord(ch) + ((h << 5) - h)) & 0xFFFFFFFF
    if h >= 0x80000000:
        h -= 0x100000000
    return COURSE_PALETTE[abs(h) % len(COURSE_PALETTE)]
