from . import timetable

__all__ = [
    'timetable'
]
