"""Typed configuration models for the orientation relay.

The config subsystem relies on pydantic to validate ``config/relay.yml`` and
to provide strongly-typed objects to the runtime. Every section has defaults
so an empty file yields a working (disabled, quiet) relay.
"""
from __future__ import annotations

import logging
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, PositiveFloat, field_validator

from orientation_relay.core.enums import is_valid_rotation

DEFAULT_ROTATION_ACTION = "orientation_relay.action.ROTATION_CHANGED"


class RelayConfig(BaseModel):
    """Relay lifecycle defaults applied at startup.

    ``initial_rotation`` seeds the relay through ``set_current_rotation`` when
    the real orientation is already known (for example after a restart of the
    window manager); it must be one of the closed rotation codes.
    """

    start_enabled: bool = False
    initial_rotation: Optional[int] = None
    log_enabled: bool = Field(False, description="Verbose relay transition logging")

    model_config = ConfigDict(frozen=True)

    @field_validator("initial_rotation")
    @classmethod
    def _check_initial_rotation(cls, value: Optional[int]) -> Optional[int]:
        if value is not None and not is_valid_rotation(value):
            raise ValueError(f"initial_rotation must be 0-3, got {value}")
        return value


class SourceConfig(BaseModel):
    """Inbound rotation channel settings.

    ``action`` and ``rotation_key`` describe the broadcast messages the relay
    listens for: only messages whose action matches and which carry the key
    are forwarded.
    """

    action: str = Field(DEFAULT_ROTATION_ACTION, min_length=1)
    rotation_key: str = Field("rotation", min_length=1)
    queue_maxsize: int = Field(0, ge=0, description="0 means unbounded")
    poll_interval_sec: PositiveFloat = 0.25


class TelemetryConfig(BaseModel):
    """Logging/telemetry switches."""

    log_level: str = Field("INFO")
    logs_dir: str = Field("data/logs")
    record_events: bool = True

    @field_validator("log_level")
    @classmethod
    def _check_log_level(cls, value: str) -> str:
        normalized = value.upper()
        if not isinstance(logging.getLevelName(normalized), int):
            raise ValueError(f"Unknown log level: {value}")
        return normalized


class AppConfig(BaseModel):
    """Runtime config composed of relay, source and telemetry sections."""

    relay: RelayConfig = Field(default_factory=RelayConfig)
    source: SourceConfig = Field(default_factory=SourceConfig)
    telemetry: TelemetryConfig = Field(default_factory=TelemetryConfig)
