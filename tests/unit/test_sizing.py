"""Unit tests for token count calculation."""

from __future__ import annotations

from rdmtext import (
    BaseMessage,
    BoolField,
    FixedInt,
    GroupField,
    MessageSchema,
    Repeated,
    StringField,
    UInt8Field,
    field_token_counts,
    max_tokens,
    min_tokens,
)


class Slot(BaseMessage):
    """Group element."""

    offset: int = FixedInt(bits=16)
    enabled: bool


class Slots(BaseMessage):
    """Message with one repeated group."""

    personality: int = FixedInt(bits=8)
    slots: list[Slot] = Repeated(min_repeat=1, max_repeat=3)


class TestTokenCounts:
    """Test token count utilities."""

    def test_flat_schema(self) -> None:
        """Test scalars count one token each."""
        schema = MessageSchema(
            "Flat", [BoolField("b"), UInt8Field("n"), StringField("s", 0, 32)]
        )

        assert min_tokens(schema) == 3
        assert max_tokens(schema) == 3

    def test_group_schema(self, group_schema: MessageSchema) -> None:
        """Test a group multiplies its child count by its repeat bounds."""
        assert field_token_counts(group_schema) == {"group": (0, 10)}
        assert min_tokens(group_schema) == 0
        assert max_tokens(group_schema) == 10

    def test_nested_groups(self) -> None:
        """Test nested group ranges multiply through."""
        schema = MessageSchema(
            "Nested",
            [
                GroupField(
                    "outer",
                    [UInt8Field("id"), GroupField("inner", [BoolField("b")], 1, 2)],
                    1,
                    3,
                )
            ],
        )

        assert field_token_counts(schema) == {"outer": (2, 9)}

    def test_model_class(self) -> None:
        """Test declarative classes are accepted directly."""
        assert field_token_counts(Slots) == {"personality": (1, 1), "slots": (2, 6)}
        assert min_tokens(Slots) == 3
        assert max_tokens(Slots) == 7
