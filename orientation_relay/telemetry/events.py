"""Structured telemetry models for rotation changes."""
from __future__ import annotations

from dataclasses import asdict, dataclass, field
from datetime import datetime
from typing import Any, Dict

from orientation_relay.core.enums import rotation_to_degrees
from orientation_relay.core.time_utils import now_utc

ROTATION_CHANGED = "rotation_changed"


@dataclass(slots=True)
class TelemetryEvent:
    """Generic event used by JSON-line logs under ``logs/relay_YYYYMMDD.jsonl``."""

    timestamp: datetime
    event_type: str
    level: str = "INFO"
    payload: Dict[str, Any] = field(default_factory=dict)
    context: Dict[str, Any] = field(default_factory=dict)

    def to_dict(self) -> Dict[str, Any]:
        data = asdict(self)
        data["timestamp"] = self.timestamp.isoformat()
        return data


def rotation_changed_event(
    rotation: int,
    *,
    timestamp: datetime | None = None,
    context: Dict[str, Any] | None = None,
) -> TelemetryEvent:
    """Build the event recorded whenever the relay notifies its consumer."""

    return TelemetryEvent(
        timestamp=timestamp or now_utc(),
        event_type=ROTATION_CHANGED,
        payload={"rotation": rotation, "degrees": rotation_to_degrees(rotation)},
        context=dict(context or {}),
    )


__all__ = ["ROTATION_CHANGED", "TelemetryEvent", "rotation_changed_event"]
