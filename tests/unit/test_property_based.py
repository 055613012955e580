"""Property-based tests using hypothesis."""

from __future__ import annotations

import pytest
from hypothesis import given
from hypothesis import strategies as st

from rdmtext import (
    BoolField,
    BuildErrorKind,
    FieldKind,
    GroupField,
    IntField,
    MessageSchema,
    OutOfRangeError,
    StringField,
    StringMessageBuilder,
    UInt8Field,
    build_message,
    render_message,
)
from rdmtext.codec.schema import int_bounds

INT_KINDS = [
    FieldKind.UINT8,
    FieldKind.UINT16,
    FieldKind.UINT32,
    FieldKind.INT8,
    FieldKind.INT16,
    FieldKind.INT32,
]


def _schema(kind: FieldKind) -> MessageSchema:
    return MessageSchema("Int", [IntField(kind.value, kind)])


class TestIntegerProperties:
    """Property-based tests for integer conversion."""

    @pytest.mark.parametrize("kind", INT_KINDS)
    def test_just_outside_range_fails(self, kind: FieldKind) -> None:
        """Test lo-1 and hi+1 are rejected as out of range."""
        lo, hi = int_bounds(kind)
        for value in (lo - 1, hi + 1):
            with pytest.raises(OutOfRangeError):
                build_message(_schema(kind), [str(value)])

    @pytest.mark.parametrize("kind", INT_KINDS)
    @given(data=st.data())
    def test_in_range_roundtrip(self, kind: FieldKind, data: st.DataObject) -> None:
        """Test any in-range literal renders back to the same decimal text."""
        lo, hi = int_bounds(kind)
        value = data.draw(st.integers(min_value=lo, max_value=hi))
        message = build_message(_schema(kind), [str(value)])

        assert render_message(message) == f"{kind.value}: {value}\n"

    @given(value=st.integers().filter(lambda v: not -128 <= v <= 127))
    def test_never_clamped(self, value: int) -> None:
        """Test out-of-range values always fail rather than clamp."""
        builder = StringMessageBuilder([str(value)])

        assert builder.traverse(_schema(FieldKind.INT8)) is False
        assert isinstance(builder.get_error(), OutOfRangeError)


class TestBoolProperties:
    """Property-based tests for boolean conversion."""

    @given(
        literal=st.sampled_from(["true", "false"]).flatmap(
            lambda word: st.tuples(*[st.sampled_from([c.lower(), c.upper()]) for c in word])
        )
    )
    def test_any_case_accepted(self, literal: tuple[str, ...]) -> None:
        """Test every case spelling of true/false is accepted and canonicalised."""
        token = "".join(literal)
        message = build_message(MessageSchema("Bool", [BoolField("b")]), [token])

        assert render_message(message) == f"b: {token.lower()}\n"

    @given(token=st.text().filter(lambda t: t.lower() not in {"true", "false", "1", "0"}))
    def test_everything_else_rejected(self, token: str) -> None:
        """Test any other text fails."""
        builder = StringMessageBuilder([token])

        assert builder.traverse(MessageSchema("Bool", [BoolField("b")])) is False


class TestStringProperties:
    """Property-based tests for string length bounds."""

    @given(token=st.text(min_size=2, max_size=8))
    def test_within_bounds_verbatim(self, token: str) -> None:
        """Test in-bounds text renders verbatim."""
        message = build_message(MessageSchema("Str", [StringField("s", 2, 8)]), [token])

        assert render_message(message) == f"s: {token}\n"

    @given(token=st.one_of(st.text(max_size=1), st.text(min_size=9, max_size=40)))
    def test_outside_bounds_fails(self, token: str) -> None:
        """Test out-of-bounds text fails."""
        builder = StringMessageBuilder([token])

        assert builder.traverse(MessageSchema("Str", [StringField("s", 2, 8)])) is False


class TestGroupProperties:
    """Property-based tests for group multiplicity."""

    @given(repeats=st.integers(min_value=0, max_value=8))
    def test_repeats_follow_tokens(self, repeats: int) -> None:
        """Test a group takes min(available, max_repeat) repetitions."""
        schema = MessageSchema(
            "Group", [GroupField("g", [BoolField("b"), UInt8Field("n")], 0, 5)]
        )
        tokens = ["true", "1"] * repeats
        message = build_message(schema, tokens)

        assert render_message(message).count("g {\n") == min(repeats, 5)

    @given(
        min_repeat=st.integers(min_value=1, max_value=4),
        token_count=st.integers(min_value=0, max_value=9),
    )
    def test_below_minimum_fails(self, min_repeat: int, token_count: int) -> None:
        """Test fewer than min_repeat full repetitions fails on the group."""
        schema = MessageSchema(
            "Group", [GroupField("g", [BoolField("b"), UInt8Field("n")], min_repeat, 5)]
        )
        builder = StringMessageBuilder(["0"] * token_count)
        full_repeats = token_count // 2
        succeeded = builder.traverse(schema)

        if full_repeats < min_repeat:
            assert succeeded is False
            error = builder.get_error()
            assert error is not None
            assert error.kind is BuildErrorKind.INSUFFICIENT_GROUP_REPEATS
        elif token_count % 2:
            # A partial repetition past the minimum
            assert succeeded is False
            error = builder.get_error()
            assert error is not None
            assert error.kind is BuildErrorKind.INSUFFICIENT_INPUT
        else:
            assert succeeded is True
