"""Shared type aliases for readability and contract enforcement.

The relay passes plain integers across its seams; the aliases below name the
roles those integers and callables play so signatures stay readable.
"""
from __future__ import annotations

from typing import Any, Callable, Mapping, TypeAlias

RotationCallback: TypeAlias = Callable[[int], None]
AvailabilityProbe: TypeAlias = Callable[[], bool]

JSONLike: TypeAlias = Mapping[str, Any]
