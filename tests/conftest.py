"""
Shared fixtures
"""
import pytest

from backend.models import ScheduleEntry
from backend.utils.notifications import RecordingNotifier

TIME_SLOTS = ["8:00 AM", "9:00 AM", "10:00 AM", "11:00 AM"]
DAYS = ["Monday", "Tuesday"]


@pytest.fixture
def time_slots():
    return list(TIME_SLOTS)


@pytest.fixture
def days():
    return list(DAYS)


@pytest.fixture
def lpu201():
    return ScheduleEntry(
        course_code="LPU201",
        course_title="Constitutional Law 1",
        day="Monday",
        start_time="9:00 AM",
        end_time="11:00 AM",
        location="Law Theatre 1",
        lecturer="Prof. Adebayo",
    )


@pytest.fixture
def entries(lpu201):
    return [
        lpu201,
        ScheduleEntry("LJI201", "Nigerian Legal System 1", "Tuesday",
                      "8:00 AM", "9:00 AM", "Law Theatre 2", "Dr. Nwachukwu"),
    ]


@pytest.fixture
def notifier():
    return RecordingNotifier()
