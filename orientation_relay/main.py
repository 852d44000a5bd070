from __future__ import annotations

import logging
import signal
import sys
import threading
from dataclasses import dataclass
from pathlib import Path
from typing import Iterable, Sequence

from pydantic import ValidationError

from orientation_relay.config.loader import DEFAULT_CONFIG_PATH, load_relay_config
from orientation_relay.config.models import AppConfig
from orientation_relay.core.errors import ConfigurationError, RotationSourceError, TelemetryError
from orientation_relay.core.types import RotationCallback
from orientation_relay.relay.rotation_relay import RotationRelay
from orientation_relay.source.channel import ChannelItem, QueueRotationChannel
from orientation_relay.telemetry import configure_logging
from orientation_relay.telemetry.events import rotation_changed_event
from orientation_relay.telemetry.storage import TelemetryStorage, default_storage


@dataclass(slots=True)
class RelayRuntime:
    """The wired relay and the channel feeding it."""

    relay: RotationRelay
    channel: QueueRotationChannel

    def start(self) -> None:
        self.channel.start()

    def stop(self) -> None:
        self.channel.stop()
        self.relay.disable()


def build_change_handler(
    storage: TelemetryStorage | None,
    logger: logging.Logger,
) -> RotationCallback:
    """Return the consumer callback: log the change and record telemetry."""

    def handle_rotation_changed(rotation: int) -> None:
        logger.info("Rotation changed", extra={"rotation": rotation})
        if storage is None:
            return
        try:
            storage.append_event(rotation_changed_event(rotation))
        except TelemetryError as exc:
            logger.warning("Failed to record rotation change: %s", exc)

    return handle_rotation_changed


def build_runtime(
    config: AppConfig,
    *,
    logger: logging.Logger,
    storage: TelemetryStorage | None = None,
    on_rotation_changed: RotationCallback | None = None,
) -> RelayRuntime:
    """Wire relay and channel according to ``config`` (nothing is started)."""

    callback = on_rotation_changed or build_change_handler(storage, logger.getChild("consumer"))
    channel: QueueRotationChannel | None = None

    def source_available() -> bool:
        return channel is not None and channel.is_running()

    relay = RotationRelay(
        callback,
        log_enabled=config.relay.log_enabled,
        availability=source_available,
        logger=logger.getChild("relay"),
    )
    channel = QueueRotationChannel(
        relay,
        action=config.source.action,
        rotation_key=config.source.rotation_key,
        maxsize=config.source.queue_maxsize,
        poll_interval_sec=config.source.poll_interval_sec,
        logger=logger.getChild("channel"),
    )
    if config.relay.initial_rotation is not None:
        relay.set_current_rotation(config.relay.initial_rotation)
    if config.relay.start_enabled:
        relay.enable()
    return RelayRuntime(relay=relay, channel=channel)


def parse_input_line(line: str) -> ChannelItem | None:
    """Turn one stdin line into a channel item (bare integer or JSON intent)."""

    text = line.strip()
    if not text:
        return None
    try:
        return int(text)
    except ValueError:
        return text


def feed_lines(channel: QueueRotationChannel, lines: Iterable[str], logger: logging.Logger) -> None:
    for line in lines:
        item = parse_input_line(line)
        if item is None:
            continue
        try:
            channel.submit(item)
        except RotationSourceError as exc:
            logger.warning("Rotation input dropped: %s", exc)
            if channel.closed:
                return


def _load_config(config_path: Path) -> AppConfig:
    try:
        return load_relay_config(config_path)
    except (FileNotFoundError, ValueError, ValidationError) as exc:
        raise ConfigurationError(f"Invalid relay config {config_path}: {exc}") from exc


def resolve_logs_dir(config_path: Path, logs_dir: str) -> Path:
    """Resolve ``logs_dir``; relative paths are taken from the config file's directory."""

    path = Path(logs_dir)
    if not path.is_absolute():
        path = config_path.resolve().parent / path
    return path.resolve()


def main(argv: Sequence[str] | None = None) -> None:
    args = list(sys.argv[1:] if argv is None else argv)
    config_path = Path(args[0]) if args else DEFAULT_CONFIG_PATH
    config = _load_config(config_path)

    telemetry_root = resolve_logs_dir(config_path, config.telemetry.logs_dir)
    logger = configure_logging(log_dir=telemetry_root, level=config.telemetry.log_level)
    logger.info("Bootstrapping orientation relay", extra={"config": str(config_path)})
    storage = default_storage(telemetry_root) if config.telemetry.record_events else None

    runtime = build_runtime(config, logger=logger, storage=storage)
    stop_event = threading.Event()

    def _request_stop(signum: int, _: object) -> None:
        logger.info("Received signal", extra={"signal": signum})
        stop_event.set()

    signal.signal(signal.SIGINT, _request_stop)
    signal.signal(signal.SIGTERM, _request_stop)

    runtime.start()
    reader = threading.Thread(
        target=feed_lines,
        args=(runtime.channel, sys.stdin, logger.getChild("stdin")),
        name="rotation-stdin",
        daemon=True,
    )
    reader.start()
    try:
        while not stop_event.is_set() and reader.is_alive():
            stop_event.wait(0.5)
    except KeyboardInterrupt:  # pragma: no cover - manual exit
        logger.info("Interrupted by user")
    finally:
        runtime.stop()
        logger.info(
            "Shutdown complete",
            extra={"last_rotation": runtime.relay.state.current_rotation},
        )


if __name__ == "__main__":
    try:
        main()
    except Exception as exc:  # pragma: no cover - top-level safety
        print(f"Fatal error: {exc}", file=sys.stderr)
        raise
