"""Debounced rotation relay.

``RotationRelay`` accepts raw rotation codes from any source thread, drops
indeterminate and duplicate values, and notifies exactly one consumer when
the proposed rotation changes while the relay is enabled. While disabled the
relay keeps tracking the latest code silently but reports ``UNKNOWN`` so the
consumer never acts on a value the relay no longer vouches for.
"""
from __future__ import annotations

import logging
import threading

from orientation_relay.core.enums import Rotation, is_valid_rotation, rotation_to_degrees
from orientation_relay.core.types import AvailabilityProbe, RotationCallback
from orientation_relay.relay.models import RelayState

LOGGER = logging.getLogger(__name__)


class RotationRelay:
    """Gate and de-duplicate rotation updates for a single consumer.

    ``on_rotation_changed`` is fixed at construction; there is no way to add
    or swap consumers afterwards. ``availability`` optionally narrows
    :meth:`can_detect_orientation` to the health of the feeding source.
    """

    def __init__(
        self,
        on_rotation_changed: RotationCallback,
        *,
        log_enabled: bool = False,
        availability: AvailabilityProbe | None = None,
        logger: logging.Logger | None = None,
    ) -> None:
        self._on_rotation_changed = on_rotation_changed
        self._availability = availability
        self._logger = logger or LOGGER
        self._lock = threading.Lock()
        self._enabled = False
        self._current_rotation: int = Rotation.UNKNOWN.value
        self._log_enabled = log_enabled

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------
    def enable(self) -> None:
        with self._lock:
            if self._enabled:
                return
            self._enabled = True
            log_enabled = self._log_enabled
        self._log(log_enabled, "Orientation relay enabled")

    def disable(self) -> None:
        with self._lock:
            if not self._enabled:
                return
            self._enabled = False
            log_enabled = self._log_enabled
        self._log(log_enabled, "Orientation relay disabled")

    def set_log_enabled(self, enable: bool) -> None:
        with self._lock:
            self._log_enabled = bool(enable)

    # ------------------------------------------------------------------
    # Ingestion
    # ------------------------------------------------------------------
    def on_rotation_update(self, code: object) -> None:
        """Accept a raw rotation code from the signal source.

        Invalid codes and repeats of the current value are dropped. A new
        valid code always replaces the tracked rotation; the consumer is only
        called if the relay was enabled at the moment the code was accepted.

        The consumer runs after the lock is released. Concurrent callers can
        therefore see their notifications reordered; feed the relay from a
        single thread (as :class:`QueueRotationChannel` does) when the consumer
        needs changes in acceptance order.
        """

        if not is_valid_rotation(code):
            return
        rotation = int(code)  # type: ignore[call-overload]
        with self._lock:
            if rotation == self._current_rotation:
                return
            self._current_rotation = rotation
            notify = self._enabled
            log_enabled = self._log_enabled
        self._log(
            log_enabled,
            "Proposed rotation changed",
            rotation=rotation,
            degrees=rotation_to_degrees(rotation),
            notified=notify,
        )
        if notify:
            self._on_rotation_changed(rotation)

    def set_current_rotation(self, rotation: int) -> None:
        """Seed the tracked rotation out-of-band; never notifies the consumer."""

        with self._lock:
            self._current_rotation = rotation

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------
    def get_proposed_rotation(self) -> int:
        """Return the current rotation, or ``Rotation.UNKNOWN`` while disabled."""

        return self.state.proposed_rotation

    def can_detect_orientation(self) -> bool:
        if self._availability is None:
            return True
        return bool(self._availability())

    @property
    def enabled(self) -> bool:
        with self._lock:
            return self._enabled

    @property
    def state(self) -> RelayState:
        with self._lock:
            return RelayState(
                enabled=self._enabled,
                current_rotation=self._current_rotation,
                log_enabled=self._log_enabled,
            )

    def _log(self, log_enabled: bool, message: str, **extra: object) -> None:
        level = logging.INFO if log_enabled else logging.DEBUG
        self._logger.log(level, message, extra=extra)


__all__ = ["RotationRelay"]
