"""Pytest configuration and shared fixtures."""

from __future__ import annotations

import pytest

from rdmtext import (
    BoolField,
    GroupField,
    Int8Field,
    Int16Field,
    Int32Field,
    MessageSchema,
    StringField,
    UInt8Field,
    UInt16Field,
    UInt32Field,
)


@pytest.fixture
def simple_schema() -> MessageSchema:
    """One field of every scalar kind."""
    return MessageSchema(
        "Test Descriptor",
        [
            BoolField("bool1"),
            BoolField("bool2"),
            BoolField("bool3"),
            BoolField("bool4"),
            BoolField("bool5"),
            BoolField("bool6"),
            UInt8Field("uint8"),
            UInt16Field("uint16"),
            UInt32Field("uint32"),
            Int8Field("int8"),
            Int16Field("int16"),
            Int32Field("int32"),
            StringField("string", 0, 32),
        ],
    )


@pytest.fixture
def group_schema() -> MessageSchema:
    """A single group of (bool, uint8) repeated 0-5 times."""
    return MessageSchema(
        "Test Descriptor",
        [GroupField("group", [BoolField("bool"), UInt8Field("uint8")], 0, 5)],
    )
