"""Queue-backed inbound channel feeding a :class:`RotationRelay`.

Producers on any thread ``submit`` raw rotation codes or broadcast messages;
a single daemon worker drains the queue and calls
``RotationRelay.on_rotation_update``. The channel is transport agnostic: a
socket listener, a polling loop or a test just push items into it.
"""
from __future__ import annotations

import logging
import queue
import threading
from typing import Any, Mapping, Union

from orientation_relay.config.models import DEFAULT_ROTATION_ACTION
from orientation_relay.core.errors import IntentDecodeError, RotationSourceError
from orientation_relay.relay.rotation_relay import RotationRelay

from .intents import RotationIntent, extract_rotation

LOGGER = logging.getLogger(__name__)

ChannelItem = Union[int, RotationIntent, Mapping[str, Any], str, bytes]


class QueueRotationChannel:
    """Deliver queued rotation observations to a relay on a worker thread."""

    def __init__(
        self,
        relay: RotationRelay,
        *,
        action: str = DEFAULT_ROTATION_ACTION,
        rotation_key: str = "rotation",
        maxsize: int = 0,
        poll_interval_sec: float = 0.25,
        logger: logging.Logger | None = None,
    ) -> None:
        self._relay = relay
        self._action = action
        self._rotation_key = rotation_key
        self._poll_interval = poll_interval_sec
        self._queue: queue.Queue[ChannelItem] = queue.Queue(maxsize=maxsize)
        self._logger = logger or LOGGER
        self._stop = threading.Event()
        self._thread: threading.Thread | None = None
        self._closed = False
        self._submit_lock = threading.Lock()

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------
    def start(self) -> None:
        if self._closed:
            raise RotationSourceError("Rotation channel already stopped")
        if self._thread is not None:
            raise RotationSourceError("Rotation channel already started")
        self._thread = threading.Thread(target=self._run, name="rotation-channel", daemon=True)
        self._thread.start()
        self._logger.info("Rotation channel started", extra={"action": self._action})

    def stop(self, timeout: float | None = 2.0) -> None:
        """Stop the worker; items still queued are delivered before it exits."""

        with self._submit_lock:
            if self._closed:
                return
            self._closed = True
        self._stop.set()
        if self._thread is not None:
            self._thread.join(timeout)
        # Nothing can be queued once closed; flush what the worker left behind.
        if self._thread is None or not self._thread.is_alive():
            self.drain()
        self._logger.info("Rotation channel stopped", extra={"pending": self._queue.qsize()})

    @property
    def closed(self) -> bool:
        return self._closed

    def is_running(self) -> bool:
        return self._thread is not None and self._thread.is_alive() and not self._stop.is_set()

    # ------------------------------------------------------------------
    # Producer side
    # ------------------------------------------------------------------
    def submit(self, item: ChannelItem) -> None:
        with self._submit_lock:
            if self._closed:
                raise RotationSourceError("Cannot submit to a stopped rotation channel")
            try:
                self._queue.put_nowait(item)
            except queue.Full as exc:
                raise RotationSourceError("Rotation channel queue is full") from exc

    def drain(self) -> int:
        """Deliver every pending item on the calling thread; return the count."""

        delivered = 0
        while True:
            try:
                item = self._queue.get_nowait()
            except queue.Empty:
                return delivered
            self._deliver(item)
            delivered += 1

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------
    def _run(self) -> None:
        while not self._stop.is_set():
            try:
                item = self._queue.get(timeout=self._poll_interval)
            except queue.Empty:
                continue
            self._deliver(item)
        self.drain()

    def _deliver(self, item: ChannelItem) -> None:
        try:
            code = self._decode(item)
        except IntentDecodeError as exc:
            self._logger.warning("Dropping undecodable rotation message: %s", exc)
            return
        if code is None:
            return
        try:
            self._relay.on_rotation_update(code)
        except Exception:  # pragma: no cover - consumer callback failure
            self._logger.exception("Rotation consumer failed", extra={"rotation": code})

    def _decode(self, item: ChannelItem) -> int | None:
        if isinstance(item, bool):
            raise IntentDecodeError("Boolean is not a rotation code")
        if isinstance(item, int):
            return item
        if isinstance(item, RotationIntent):
            intent = item
        elif isinstance(item, Mapping):
            intent = RotationIntent.from_dict(item)
        elif isinstance(item, (str, bytes)):
            intent = RotationIntent.from_json(item)
        else:
            raise IntentDecodeError(f"Unsupported rotation message type: {type(item).__name__}")
        return extract_rotation(intent, action=self._action, rotation_key=self._rotation_key)


__all__ = ["QueueRotationChannel", "ChannelItem"]
