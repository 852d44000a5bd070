"""Datamodels describing the relay's observable state.

:class:`RelayState` is an immutable snapshot taken under the relay lock, so
every field in one instance belongs to the same moment. The relay answers
``get_proposed_rotation`` from it and never hands out its mutable internals.
"""
from __future__ import annotations

from dataclasses import dataclass

from orientation_relay.core.enums import Rotation


@dataclass(frozen=True, slots=True)
class RelayState:
    """Point-in-time view of a :class:`~orientation_relay.relay.RotationRelay`.

    ``current_rotation`` is the last accepted or seeded code and is tracked
    while disabled too; :meth:`proposed_rotation` applies the enabled gate and
    backs ``RotationRelay.get_proposed_rotation``.
    """

    enabled: bool = False
    current_rotation: int = Rotation.UNKNOWN.value
    log_enabled: bool = False

    @property
    def proposed_rotation(self) -> int:
        if self.enabled:
            return self.current_rotation
        return Rotation.UNKNOWN.value


__all__ = ["RelayState"]
