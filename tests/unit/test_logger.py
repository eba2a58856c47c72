"""
Logging setup tests
"""
import json

import pytest
import structlog

from backend.utils.logger import get_logger, setup_logging


@pytest.fixture(autouse=True)
def reset_structlog():
    yield
    structlog.reset_defaults()


def last_json_line(captured):
    return json.loads(captured.err.strip().splitlines()[-1])


def test_json_output_goes_to_stderr(capsys):
    setup_logging(json_output=True, log_level="info")
    get_logger("tests.logger").info("export_done", file_name="class-timetable.pdf")

    captured = capsys.readouterr()
    record = last_json_line(captured)

    assert captured.out == ""
    assert record["event"] == "export_done"
    assert record["level"] == "info"
    assert record["file_name"] == "class-timetable.pdf"
    assert "timestamp" in record


def test_level_filters_lower_events(capsys):
    setup_logging(json_output=True, log_level="WARNING")
    logger = get_logger("tests.logger")
    logger.info("hidden")
    logger.warning("shown")

    err = capsys.readouterr().err
    assert "hidden" not in err
    assert "shown" in err


def test_unknown_level_falls_back_to_info(capsys):
    setup_logging(json_output=True, log_level="chatty")
    get_logger("tests.logger").info("still_logged")

    assert last_json_line(capsys.readouterr())["event"] == "still_logged"


def test_exception_rendered_into_json(capsys):
    setup_logging(json_output=True)
    try:
        raise RuntimeError("boom")
    except RuntimeError:
        get_logger("tests.logger").error("refresh_failed", exc_info=True)

    record = last_json_line(capsys.readouterr())
    assert "RuntimeError: boom" in record["exception"]
