"""rdmtext: RDM Text Message Builder

A Python library that turns command-line style text tokens into validated,
typed protocol messages, and renders them back to canonical text. Schemas
describe an ordered sequence of fixed-width integer, boolean, bounded string
and repeating group fields.

Key Features:
- Schema-driven, single-pass token conversion with precise diagnostics
- Exact integer ranges per bit width (uint8 .. int32), no clamping
- Nested repeating groups with minimum/maximum multiplicity
- Canonical text rendering for round-trip checks
- Declarative schemas from Pydantic models

Quick Start:
    >>> from rdmtext import BoolField, MessageSchema, StringField, UInt8Field
    >>> from rdmtext import build_message, render_message
    >>>
    >>> schema = MessageSchema(
    ...     "Example", [BoolField("bool"), UInt8Field("uint8"), StringField("string", 0, 32)]
    ... )
    >>> message = build_message(schema, ["true", "255", "foo"])
    >>> print(render_message(message), end="")
    bool: true
    uint8: 255
    string: foo
"""

from __future__ import annotations

from .codec import (
    BoolField,
    BoolValue,
    BuilderState,
    FieldKind,
    GroupField,
    GroupInstance,
    GroupValue,
    Int8Field,
    Int16Field,
    Int32Field,
    IntField,
    IntValue,
    Message,
    MessagePrinter,
    MessageSchema,
    StringField,
    StringMessageBuilder,
    StringValue,
    UInt8Field,
    UInt16Field,
    UInt32Field,
    build_message,
    build_model,
    render_message,
)
from .config import BuilderConfig, PrinterConfig
from .exceptions import (
    BuildError,
    BuildErrorKind,
    BuilderStateError,
    InsufficientGroupRepeatsError,
    InsufficientInputError,
    InvalidBooleanError,
    InvalidIntegerError,
    OutOfRangeError,
    RdmTextError,
    SchemaError,
    StringLengthError,
    TrailingInputError,
)
from .models import BaseMessage, BoundedStr, FixedInt, Repeated
from .utils import field_token_counts, max_tokens, min_tokens

__version__ = "0.1.0"

__all__ = [
    # Core API
    "StringMessageBuilder",
    "BuilderState",
    "MessagePrinter",
    "build_message",
    "build_model",
    "render_message",
    # Schema
    "MessageSchema",
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
    # Values
    "Message",
    "BoolValue",
    "IntValue",
    "StringValue",
    "GroupValue",
    "GroupInstance",
    # Declarative models
    "BaseMessage",
    "FixedInt",
    "BoundedStr",
    "Repeated",
    # Configuration
    "BuilderConfig",
    "PrinterConfig",
    # Exceptions
    "RdmTextError",
    "SchemaError",
    "BuilderStateError",
    "BuildError",
    "BuildErrorKind",
    "InsufficientInputError",
    "InvalidBooleanError",
    "InvalidIntegerError",
    "OutOfRangeError",
    "StringLengthError",
    "InsufficientGroupRepeatsError",
    "TrailingInputError",
    # Sizing
    "field_token_counts",
    "min_tokens",
    "max_tokens",
    # Version
    "__version__",
]
