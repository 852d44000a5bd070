"""Helpers for persisting telemetry events."""
from __future__ import annotations

import json
import threading
from pathlib import Path

from orientation_relay.core.errors import TelemetryError
from orientation_relay.telemetry.events import TelemetryEvent


class TelemetryStorage:
    """Append structured telemetry events to daily JSON-line files.

    The runtime hands one instance to the relay's change handler; each
    notified rotation change becomes one line. Appends are serialized so the
    channel worker and the control thread can share the storage.
    """

    def __init__(self, *, logs_dir: Path) -> None:
        self._logs_dir = logs_dir
        self._logs_dir.mkdir(parents=True, exist_ok=True)
        self._lock = threading.Lock()

    @property
    def logs_dir(self) -> Path:
        return self._logs_dir

    def append_event(self, event: TelemetryEvent) -> Path:
        """Append ``event`` as JSON to ``logs/relay_YYYYMMDD.jsonl``."""

        date_str = event.timestamp.strftime("%Y%m%d")
        path = self._logs_dir / f"relay_{date_str}.jsonl"
        try:
            with self._lock, path.open("a", encoding="utf-8") as handle:
                json.dump(event.to_dict(), handle, ensure_ascii=False)
                handle.write("\n")
        except OSError as exc:  # pragma: no cover - filesystem errors are rare
            raise TelemetryError(f"Failed to write telemetry event: {exc}") from exc
        return path


def default_storage(base_dir: Path) -> TelemetryStorage:
    """Factory returning storage rooted under ``base_dir``."""

    return TelemetryStorage(logs_dir=base_dir / "events")


__all__ = ["TelemetryStorage", "default_storage"]
