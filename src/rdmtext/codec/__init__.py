"""Text-to-message codec for rdmtext.

This module provides the schema data model, the token-consuming builder, the
typed message values it produces, and the canonical text printer.
"""

from __future__ import annotations

from .builder import BuilderState, StringMessageBuilder, build_message, build_model
from .message import (
    BoolValue,
    FieldValue,
    GroupInstance,
    GroupValue,
    IntValue,
    Message,
    StringValue,
)
from .printer import MessagePrinter, format_value, render_message
from .schema import (
    BoolField,
    FieldKind,
    GroupField,
    Int8Field,
    Int16Field,
    Int32Field,
    IntField,
    MessageSchema,
    SchemaField,
    StringField,
    UInt8Field,
    UInt16Field,
    UInt32Field,
    int_bounds,
)

__all__ = [
    "build_message",
    "build_model",
    "render_message",
    "format_value",
    "StringMessageBuilder",
    "BuilderState",
    "MessagePrinter",
    "MessageSchema",
    "SchemaField",
    "FieldKind",
    "BoolField",
    "IntField",
    "StringField",
    "GroupField",
    "UInt8Field",
    "UInt16Field",
    "UInt32Field",
    "Int8Field",
    "Int16Field",
    "Int32Field",
    "int_bounds",
    "Message",
    "FieldValue",
    "BoolValue",
    "IntValue",
    "StringValue",
    "GroupValue",
    "GroupInstance",
]
