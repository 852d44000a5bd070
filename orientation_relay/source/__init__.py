"""Inbound rotation sources package."""
from .channel import ChannelItem, QueueRotationChannel
from .intents import RotationIntent, extract_rotation

__all__ = ["ChannelItem", "QueueRotationChannel", "RotationIntent", "extract_rotation"]
