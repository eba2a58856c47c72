"""
Model tests
"""
import pytest

from backend.models import ExportResult, ScheduleEntry, PullState


def test_entry_from_row():
    entry = ScheduleEntry.from_dict({
        'id': '7',
        'course_code': ' LPU 201 ',
        'course_title': 'Constitutional Law 1',
        'day': 'Tuesday',
        'start_time': '9:00 AM',
        'end_time': '11:00 AM',
        'location': None,
        'lecturer': 'Prof. Adebayo',
        'created_at': '2025-01-01T00:00:00',
    })

    assert entry.id == 7
    assert entry.course_code == 'LPU 201'
    assert entry.location == ''


def test_record_excludes_id(lpu201):
    record = ScheduleEntry.from_dict({**lpu201.to_dict(), 'id': 3}).to_record()

    assert 'id' not in record
    assert record['course_code'] == 'LPU201'
    assert len(record) == 7


def test_entry_round_trip_through_dict(lpu201):
    assert ScheduleEntry.from_dict(lpu201.to_dict()) == lpu201


def test_entry_is_immutable(lpu201):
    with pytest.raises(AttributeError):
        lpu201.day = "Friday"


def test_pull_state_reset_keeps_refreshing_flag():
    state = PullState(pull_distance=90, can_refresh=True, is_refreshing=True)

    state.reset_pull()

    assert state.pull_distance == 0
    assert state.can_refresh is False
    assert state.is_refreshing is True


def test_export_result_save(tmp_path):
    result = ExportResult.ok("class-timetable.csv", "text/csv", b"a,b\n")

    path = result.save(str(tmp_path / "exports"))

    assert result.size == 4
    assert open(path, 'rb').read() == b"a,b\n"


def test_failed_export_cannot_be_saved(tmp_path):
    result = ExportResult.failed("class-timetable.pdf", "application/pdf", "boom")

    assert result.success is False
    assert result.size == 0
    with pytest.raises(ValueError):
        result.save(str(tmp_path))
