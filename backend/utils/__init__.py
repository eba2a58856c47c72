from .time_slots import DEFAULT_DAYS, DEFAULT_TIME_SLOTS, generate_time_slots, parse_time_label
from .validation import validate_schedule_entry, find_slot_conflicts

__all__ = [
    'DEFAULT_DAYS',
    'DEFAULT_TIME_SLOTS',
    'generate_time_slots',
    'parse_time_label',
    'validate_schedule_entry',
    'find_slot_conflicts'
]
