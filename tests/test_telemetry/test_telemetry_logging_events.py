from __future__ import annotations

import json
import logging
from datetime import datetime, timezone

from orientation_relay.telemetry.events import ROTATION_CHANGED, TelemetryEvent, rotation_changed_event
from orientation_relay.telemetry.logging_setup import JsonFormatter, configure_logging
from orientation_relay.telemetry.storage import TelemetryStorage, default_storage


def test_telemetry_storage_should_append_jsonl_events(telemetry_tmpdir) -> None:
    storage = TelemetryStorage(logs_dir=telemetry_tmpdir / "events")
    first = rotation_changed_event(1, timestamp=datetime(2024, 1, 1, tzinfo=timezone.utc))
    second = TelemetryEvent(
        timestamp=datetime(2024, 1, 1, 12, tzinfo=timezone.utc),
        event_type="relay_disabled",
        payload={},
        context={"reason": "screen off"},
    )
    path = storage.append_event(first)
    assert storage.append_event(second) == path
    assert path.name == "relay_20240101.jsonl"

    lines = [json.loads(line) for line in path.read_text(encoding="utf-8").splitlines()]
    assert [line["event_type"] for line in lines] == [ROTATION_CHANGED, "relay_disabled"]
    assert lines[0]["payload"] == {"rotation": 1, "degrees": 90}
    assert lines[0]["timestamp"] == "2024-01-01T00:00:00+00:00"
    assert lines[1]["context"] == {"reason": "screen off"}


def test_default_storage_should_root_events_under_base_dir(telemetry_tmpdir) -> None:
    storage = default_storage(telemetry_tmpdir)
    assert storage.logs_dir == telemetry_tmpdir / "events"
    assert storage.logs_dir.is_dir()


def test_rotation_changed_event_should_default_timestamp_and_context() -> None:
    event = rotation_changed_event(3)
    assert event.timestamp.tzinfo is not None
    assert event.payload == {"rotation": 3, "degrees": 270}
    assert event.context == {}
    assert event.level == "INFO"


def test_json_formatter_should_include_extra_fields() -> None:
    record = logging.makeLogRecord(
        {
            "name": "relay_tests.formatter",
            "levelno": logging.INFO,
            "levelname": "INFO",
            "msg": "Rotation changed to %s",
            "args": (2,),
            "rotation": 2,
            "unserializable": object(),
        }
    )
    payload = json.loads(JsonFormatter().format(record))
    assert payload["message"] == "Rotation changed to 2"
    assert payload["level"] == "INFO"
    assert payload["name"] == "relay_tests.formatter"
    assert payload["rotation"] == 2
    assert "unserializable" not in payload
    assert "levelno" not in payload
    assert payload["timestamp"].endswith("+00:00")


def test_configure_logging_should_write_json_file(tmp_path) -> None:
    logger = configure_logging(log_dir=tmp_path, level="info", logger_name="relay_tests.json")
    try:
        logger.info("Rotation changed", extra={"rotation": 1})
        for handler in logger.handlers:
            handler.flush()
        lines = (tmp_path / "relay_current.jsonl").read_text(encoding="utf-8").splitlines()
        last = json.loads(lines[-1])
        assert last["message"] == "Rotation changed"
        assert last["rotation"] == 1
        assert logger.propagate is False
        assert len(logger.handlers) == 2
    finally:
        for handler in list(logger.handlers):
            handler.close()
        logger.handlers.clear()
