"""Rotation broadcast messages.

Sources deliver rotation observations as broadcast-style messages: an
``action`` naming the event plus a mapping of ``extras``. The relay only
cares about messages whose action matches its configured action and which
carry the rotation key. Everything else is addressed to someone else and is
skipped without touching the relay.
"""
from __future__ import annotations

import json
from dataclasses import dataclass, field
from typing import Any, Dict, Mapping

from orientation_relay.core.enums import Rotation
from orientation_relay.core.errors import IntentDecodeError
from orientation_relay.core.types import JSONLike


@dataclass(frozen=True, slots=True)
class RotationIntent:
    """A single inbound broadcast message."""

    action: str
    extras: Dict[str, Any] = field(default_factory=dict)

    @classmethod
    def from_dict(cls, payload: JSONLike) -> "RotationIntent":
        if not isinstance(payload, Mapping):
            raise IntentDecodeError(f"Intent payload must be a mapping, got {type(payload).__name__}")
        action = payload.get("action")
        if not isinstance(action, str) or not action:
            raise IntentDecodeError("Intent payload requires a non-empty `action`")
        extras = payload.get("extras", {})
        if extras is None:
            extras = {}
        if not isinstance(extras, Mapping):
            raise IntentDecodeError("Intent `extras` must be a mapping")
        return cls(action=action, extras=dict(extras))

    @classmethod
    def from_json(cls, text: str | bytes) -> "RotationIntent":
        try:
            payload = json.loads(text)
        except (TypeError, ValueError) as exc:
            raise IntentDecodeError(f"Malformed intent JSON: {exc}") from exc
        return cls.from_dict(payload)

    def has_extra(self, key: str) -> bool:
        return key in self.extras

    def get_int_extra(self, key: str, default: int) -> int:
        """Return ``extras[key]`` when it is an integer, else ``default``."""

        value = self.extras.get(key, default)
        if isinstance(value, bool) or not isinstance(value, int):
            return default
        return value


def extract_rotation(intent: RotationIntent, *, action: str, rotation_key: str) -> int | None:
    """Return the rotation code carried by ``intent``.

    ``None`` means the message is not addressed to the relay (different action
    or no rotation extra). A present but non-integer value maps to
    ``Rotation.UNKNOWN`` so the relay treats it as an indeterminate reading.
    """

    if intent.action != action:
        return None
    if not intent.has_extra(rotation_key):
        return None
    return intent.get_int_extra(rotation_key, Rotation.UNKNOWN.value)


__all__ = ["RotationIntent", "extract_rotation"]
