from __future__ import annotations

import logging
import threading
from pathlib import Path
from typing import Callable

import pytest

from orientation_relay.config.models import AppConfig, RelayConfig, SourceConfig, TelemetryConfig
from orientation_relay.relay.rotation_relay import RotationRelay


class RecordingConsumer:
    """Thread-safe stand-in for the window manager's rotation callback."""

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self.calls: list[int] = []

    def __call__(self, rotation: int) -> None:
        with self._lock:
            self.calls.append(rotation)

    @property
    def count(self) -> int:
        with self._lock:
            return len(self.calls)


@pytest.fixture
def consumer() -> RecordingConsumer:
    return RecordingConsumer()


@pytest.fixture
def relay(consumer: RecordingConsumer) -> RotationRelay:
    return RotationRelay(consumer)


@pytest.fixture
def relay_factory(consumer: RecordingConsumer) -> Callable[..., RotationRelay]:
    def _factory(**overrides: object) -> RotationRelay:
        callback = overrides.pop("on_rotation_changed", consumer)
        return RotationRelay(callback, **overrides)  # type: ignore[arg-type]

    return _factory


@pytest.fixture
def app_config() -> AppConfig:
    return AppConfig(
        relay=RelayConfig(start_enabled=True, initial_rotation=0, log_enabled=True),
        source=SourceConfig(action="test.ROTATION_CHANGED", rotation_key="rotation", poll_interval_sec=0.01),
        telemetry=TelemetryConfig(log_level="DEBUG", logs_dir="logs", record_events=True),
    )


@pytest.fixture
def telemetry_tmpdir(tmp_path_factory: pytest.TempPathFactory) -> Path:
    return tmp_path_factory.mktemp("telemetry")


@pytest.fixture
def test_logger() -> logging.Logger:
    logger = logging.getLogger("relay_tests")
    logger.setLevel(logging.DEBUG)
    return logger
