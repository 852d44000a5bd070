"""Top-level package for the orientation relay service.

The relay sits between a rotation signal source and a window-management
consumer. Subpackages cover configuration, core contracts, the relay state
machine, inbound rotation channels and telemetry.
"""

from .relay import RelayState, RotationRelay

__all__ = ["RelayState", "RotationRelay"]
