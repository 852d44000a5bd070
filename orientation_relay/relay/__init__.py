"""Rotation relay state machine package."""
from .models import RelayState
from .rotation_relay import RotationRelay

__all__ = ["RelayState", "RotationRelay"]
