"""
Class timetable entry model
"""
from dataclasses import dataclass, asdict
from typing import Optional

ENTRY_FIELDS = (
    'course_code',
    'course_title',
    'day',
    'start_time',
    'end_time',
    'location',
    'lecturer',
)


@dataclass(frozen=True)
class ScheduleEntry:
    """One class in the weekly timetable"""
    course_code: str
    course_title: str
    day: str
    start_time: str
    end_time: str
    location: str = ""
    lecturer: str = ""
    id: Optional[int] = None

    def to_dict(self) -> dict:
        """
        Convert to a dict (for session storage)

        Returns:
            all fields, including the row id
        """
        return asdict(self)

    def to_record(self) -> dict:
        """
        Row payload for the timetable table

        The id column is generated by the database, so it is never sent.

        Returns:
            dict of the seven entry fields
        """
        return {name: getattr(self, name) for name in ENTRY_FIELDS}

    @classmethod
    def from_dict(cls, data: dict) -> 'ScheduleEntry':
        """
        Build an entry from a database row or form data

        Args:
            data: dict with the entry fields; missing text fields become ""

        Returns:
            ScheduleEntry
        """
        values = {name: str(data.get(name) or '').strip() for name in ENTRY_FIELDS}
        row_id = data.get('id')
        return cls(id=int(row_id) if row_id is not None else None, **values)

    def __str__(self) -> str:
        return f"{self.course_code} ({self.day} {self.start_time}-{self.end_time})"
