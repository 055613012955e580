"""Exception hierarchy for rdmtext.

This module defines all custom exceptions used throughout the package.
All exceptions inherit from RdmTextError for easy catching of any rdmtext-specific error.
"""

from __future__ import annotations

import enum


class RdmTextError(Exception):
    """Base exception for all rdmtext errors."""

    pass


class SchemaError(RdmTextError):
    """Raised when a message schema is invalid or cannot be introspected.

    Examples:
        - String bounds are invalid (e.g., min_length > max_length)
        - Group repeat bounds are invalid (e.g., min_repeat > max_repeat)
        - Group with no child fields
        - Unsupported annotation on a declarative message model
    """

    pass


class BuilderStateError(RdmTextError):
    """Raised when a builder is driven outside its single-use lifecycle.

    Examples:
        - Calling traverse() a second time on the same builder
    """

    pass


class BuildErrorKind(enum.Enum):
    """The reason a token sequence failed to build into a message."""

    INSUFFICIENT_INPUT = "InsufficientInput"
    INVALID_BOOLEAN = "InvalidBoolean"
    INVALID_INTEGER = "InvalidInteger"
    OUT_OF_RANGE = "OutOfRange"
    STRING_LENGTH_VIOLATION = "StringLengthViolation"
    INSUFFICIENT_GROUP_REPEATS = "InsufficientGroupRepeats"
    TRAILING_INPUT = "TrailingInput"


class BuildError(RdmTextError):
    """Raised (or recorded) when tokens cannot be built into a message.

    Attributes:
        field_name: Name of the field that failed
        path: Dotted location of the field, including group instance indexes
            (e.g. ``"slots[1].address"``)
        reason: Human-readable description of the failure
        kind: Machine-readable failure category
    """

    kind: BuildErrorKind

    def __init__(self, field_name: str, reason: str, path: str | None = None) -> None:
        self.field_name = field_name
        self.reason = reason
        self.path = path if path is not None else field_name
        super().__init__(f"{self.path}: {reason}")


class InsufficientInputError(BuildError):
    """Raised when the tokens run out before the schema is satisfied."""

    kind = BuildErrorKind.INSUFFICIENT_INPUT


class InvalidBooleanError(BuildError):
    """Raised when a token is not one of true/false/1/0."""

    kind = BuildErrorKind.INVALID_BOOLEAN


class InvalidIntegerError(BuildError):
    """Raised when a token is not a base-10 integer."""

    kind = BuildErrorKind.INVALID_INTEGER


class OutOfRangeError(BuildError):
    """Raised when an integer token does not fit the field's bit width and sign."""

    kind = BuildErrorKind.OUT_OF_RANGE


class StringLengthError(BuildError):
    """Raised when a string token is shorter or longer than the field allows."""

    kind = BuildErrorKind.STRING_LENGTH_VIOLATION


class InsufficientGroupRepeatsError(BuildError):
    """Raised when a group repeats fewer times than its minimum."""

    kind = BuildErrorKind.INSUFFICIENT_GROUP_REPEATS


class TrailingInputError(BuildError):
    """Raised in strict mode when tokens remain after the schema is satisfied."""

    kind = BuildErrorKind.TRAILING_INPUT
