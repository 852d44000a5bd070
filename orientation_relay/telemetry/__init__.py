"""Telemetry and logging subsystem package."""
from .events import ROTATION_CHANGED, TelemetryEvent, rotation_changed_event
from .logging_setup import JsonFormatter, configure_logging
from .storage import TelemetryStorage, default_storage

__all__ = [
    "ROTATION_CHANGED",
    "TelemetryEvent",
    "rotation_changed_event",
    "JsonFormatter",
    "configure_logging",
    "TelemetryStorage",
    "default_storage",
]
