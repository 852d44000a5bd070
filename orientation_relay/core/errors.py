"""Error hierarchy shared by the relay subsystems.

The relay itself never raises: malformed rotation codes are the expected
"indeterminate" signal and are absorbed. The classes below cover the
surrounding plumbing (config, inbound channels, telemetry persistence).
Submodules should raise the most specific error available.
"""
from __future__ import annotations


class CoreError(Exception):
    """Base class for all custom exceptions in the application."""


class ConfigurationError(CoreError):
    """Raised when configuration files are missing or invalid."""


class RotationSourceError(CoreError):
    """Raised when an inbound rotation channel is misused (e.g. stopped)."""


class IntentDecodeError(CoreError):
    """Raised when an inbound rotation message cannot be decoded."""


class TelemetryError(CoreError):
    """Raised for telemetry/logging persistence issues."""
