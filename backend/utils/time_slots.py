"""
Time slot and weekday sequences for the timetable grid
"""
import re
from datetime import time
from typing import List

DEFAULT_DAYS = ["Monday", "Tuesday", "Wednesday", "Thursday", "Friday"]

_LABEL_RE = re.compile(r'^\s*(\d{1,2}):(\d{2})\s*([AaPp][Mm])\s*$')


def format_time_label(hour: int, minute: int = 0) -> str:
    """
    Format a 24h time as a slot label

    Args:
        hour: 0-23
        minute: 0-59

    Returns:
        label such as "8:00 AM" or "1:00 PM"
    """
    if not 0 <= hour <= 23 or not 0 <= minute <= 59:
        raise ValueError(f"Invalid time: {hour}:{minute:02d}")

    suffix = "AM" if hour < 12 else "PM"
    display_hour = hour % 12 or 12
    return f"{display_hour}:{minute:02d} {suffix}"


def parse_time_label(label: str) -> time:
    """
    Parse a slot label into a time

    Args:
        label: such as "9:00 AM"

    Returns:
        datetime.time

    Raises:
        ValueError: when the label is not h:mm AM/PM
    """
    match = _LABEL_RE.match(label or '')
    if not match:
        raise ValueError(f"Time format error: {label!r} (expected e.g. 9:00 AM)")

    hour, minute, suffix = int(match.group(1)), int(match.group(2)), match.group(3).upper()
    if not 1 <= hour <= 12 or minute > 59:
        raise ValueError(f"Invalid time: {label!r}")

    if suffix == "AM":
        hour = 0 if hour == 12 else hour
    else:
        hour = 12 if hour == 12 else hour + 12
    return time(hour, minute)


def generate_time_slots(start_hour: int = 8, end_hour: int = 17) -> List[str]:
    """
    Hourly slot labels from start_hour to end_hour inclusive

    The last label is only ever used as an end time.
    """
    if start_hour > end_hour:
        raise ValueError(f"start_hour {start_hour} is after end_hour {end_hour}")
    return [format_time_label(h) for h in range(start_hour, end_hour + 1)]


DEFAULT_TIME_SLOTS = generate_time_slots(8, 17)
