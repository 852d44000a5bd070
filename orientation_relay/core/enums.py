"""Rotation codes shared across the relay subsystems.

Codes follow the display-surface convention: ``0`` is the natural
orientation and every step adds 90 degrees clockwise. ``UNKNOWN`` is the
indeterminate sentinel reported whenever the relay cannot vouch for a value.
"""
from __future__ import annotations

from enum import IntEnum


class Rotation(IntEnum):
    """Closed set of display rotations plus the indeterminate sentinel."""

    UNKNOWN = -1
    ROTATION_0 = 0
    ROTATION_90 = 1
    ROTATION_180 = 2
    ROTATION_270 = 3


VALID_ROTATIONS: frozenset[int] = frozenset(
    member.value for member in Rotation if member is not Rotation.UNKNOWN
)


def is_valid_rotation(code: object) -> bool:
    """Return ``True`` if ``code`` is an integer inside the closed rotation set."""

    if isinstance(code, bool) or not isinstance(code, int):
        return False
    return code in VALID_ROTATIONS


def rotation_to_degrees(code: object) -> int | None:
    """Map a rotation code to clockwise degrees (``None`` when invalid)."""

    if not is_valid_rotation(code):
        return None
    return int(code) * 90  # type: ignore[call-overload]


__all__ = ["Rotation", "VALID_ROTATIONS", "is_valid_rotation", "rotation_to_degrees"]
