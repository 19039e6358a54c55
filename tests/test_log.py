import json
import logging

import pytest
import structlog

from configmap_healthcheck.core.log import get_logger, setup_logging


@pytest.fixture(autouse=True)
def reset_logging():
    root = logging.getLogger()
    level = root.level
    yield
    structlog.reset_defaults()
    for handler in root.handlers[:]:
        if isinstance(handler.formatter, structlog.stdlib.ProcessorFormatter):
            root.removeHandler(handler)
    root.setLevel(level)


def test_json_format_renders_one_object_per_line(capsys: pytest.CaptureFixture[str]) -> None:
    setup_logging("INFO", "json")

    get_logger("tests").info("volume_modified", volume="/etc/config")

    record = json.loads(capsys.readouterr().out.strip())
    assert record["event"] == "volume_modified"
    assert record["level"] == "info"
    assert record["logger_name"] == "tests"
    assert record["volume"] == "/etc/config"
    assert "timestamp" in record


def test_level_filters_lower_events(capsys: pytest.CaptureFixture[str]) -> None:
    setup_logging("WARNING", "json")

    get_logger("tests").info("ignored")

    assert capsys.readouterr().out == ""


def test_stdlib_records_share_the_json_format(capsys: pytest.CaptureFixture[str]) -> None:
    setup_logging("INFO", "json")

    logging.getLogger("uvicorn.error").info("Application startup complete.")

    record = json.loads(capsys.readouterr().out.strip())
    assert record["event"] == "Application startup complete."
    assert record["level"] == "info"
    assert record["logger"] == "uvicorn.error"
    assert "timestamp" in record
