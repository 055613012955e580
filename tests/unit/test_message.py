"""Unit tests for the typed message values."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from rdmtext import (
    BoolField,
    FieldKind,
    GroupField,
    IntValue,
    Message,
    MessageSchema,
    StringField,
    UInt8Field,
    build_message,
)


@pytest.fixture
def personality() -> Message:
    schema = MessageSchema(
        "DMX_PERSONALITY",
        [
            UInt8Field("personality"),
            StringField("description", 0, 32),
            GroupField("slots", [UInt8Field("offset"), BoolField("enabled")], 0, 5),
        ],
    )
    return build_message(schema, ["2", "dimmer", "0", "true", "1", "0"])


class TestIntValue:
    """Test integer value validation."""

    def test_value_must_fit_kind(self) -> None:
        """Test a value outside its kind's range is rejected."""
        with pytest.raises(ValidationError, match="out of range"):
            IntValue(name="n", field_kind=FieldKind.UINT8, value=256)

    def test_kind_must_be_integer(self) -> None:
        """Test the kind tag must be an integer kind."""
        with pytest.raises(ValidationError, match="not an integer kind"):
            IntValue(name="n", field_kind=FieldKind.BOOL, value=1)

    def test_no_coercion(self) -> None:
        """Test integer values are not coerced from text."""
        with pytest.raises(ValidationError):
            IntValue(name="n", field_kind=FieldKind.UINT8, value="12")  # type: ignore[arg-type]


class TestMessage:
    """Test message access helpers."""

    def test_get(self, personality: Message) -> None:
        """Test values can be looked up by name."""
        value = personality.get("personality")

        assert isinstance(value, IntValue)
        assert value.value == 2
        assert personality.get("missing") is None

    def test_frozen(self, personality: Message) -> None:
        """Test messages cannot be modified after building."""
        with pytest.raises(ValidationError):
            personality.name = "Other"  # type: ignore[misc]

    def test_as_dict(self, personality: Message) -> None:
        """Test conversion to plain data."""
        assert personality.as_dict() == {
            "personality": 2,
            "description": "dimmer",
            "slots": [{"offset": 0, "enabled": True}, {"offset": 1, "enabled": False}],
        }

    def test_json_keeps_structure(self, personality: Message) -> None:
        """Test a message survives a JSON dump and reload unchanged."""
        restored = Message.model_validate_json(personality.model_dump_json())

        assert restored == personality
