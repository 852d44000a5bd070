from __future__ import annotations

import pytest

from orientation_relay.core.enums import Rotation
from orientation_relay.core.errors import IntentDecodeError
from orientation_relay.source.intents import RotationIntent, extract_rotation

ACTION = "test.ROTATION_CHANGED"


def test_rotation_intent_should_parse_json() -> None:
    intent = RotationIntent.from_json('{"action": "test.ROTATION_CHANGED", "extras": {"rotation": 1}}')
    assert intent == RotationIntent(action=ACTION, extras={"rotation": 1})


def test_rotation_intent_should_default_missing_extras() -> None:
    assert RotationIntent.from_dict({"action": ACTION}).extras == {}
    assert RotationIntent.from_dict({"action": ACTION, "extras": None}).extras == {}


@pytest.mark.parametrize(
    "text",
    [
        "not json",
        "[1, 2]",
        '{"extras": {"rotation": 1}}',
        '{"action": "", "extras": {}}',
        '{"action": "x", "extras": [1]}',
    ],
)
def test_rotation_intent_should_reject_malformed_payloads(text: str) -> None:
    with pytest.raises(IntentDecodeError):
        RotationIntent.from_json(text)


def test_extract_rotation_should_return_code_for_matching_action() -> None:
    intent = RotationIntent(action=ACTION, extras={"rotation": 3})
    assert extract_rotation(intent, action=ACTION, rotation_key="rotation") == 3


def test_extract_rotation_should_skip_other_actions() -> None:
    intent = RotationIntent(action="other.ACTION", extras={"rotation": 3})
    assert extract_rotation(intent, action=ACTION, rotation_key="rotation") is None


def test_extract_rotation_should_skip_messages_without_rotation_extra() -> None:
    intent = RotationIntent(action=ACTION, extras={"orientation": 3})
    assert extract_rotation(intent, action=ACTION, rotation_key="rotation") is None


@pytest.mark.parametrize("value", ["1", 1.5, None, True])
def test_extract_rotation_should_map_non_integers_to_unknown(value) -> None:
    intent = RotationIntent(action=ACTION, extras={"rotation": value})
    assert extract_rotation(intent, action=ACTION, rotation_key="rotation") == Rotation.UNKNOWN


def test_extract_rotation_should_pass_out_of_range_integers_through() -> None:
    intent = RotationIntent(action=ACTION, extras={"rotation": 9})
    assert extract_rotation(intent, action=ACTION, rotation_key="rotation") == 9
