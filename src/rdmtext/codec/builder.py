"""Build typed messages from text tokens.

This module provides StringMessageBuilder, which walks a MessageSchema in
declaration order and converts one token per scalar field, and the
build_message()/build_model() helpers that raise on failure instead.

Tokens line up positionally with a pre-order walk of the schema: a scalar
consumes one token, a group consumes one token per scalar child for every
repetition. Groups repeat greedily until the tokens run out or ``max_repeat``
is reached.
"""

from __future__ import annotations

import enum
import logging
import re
from typing import Sequence, TypeVar, cast

from pydantic import BaseModel

from ..config import BuilderConfig
from ..exceptions import (
    BuildError,
    BuilderStateError,
    InsufficientGroupRepeatsError,
    InsufficientInputError,
    InvalidBooleanError,
    InvalidIntegerError,
    OutOfRangeError,
    SchemaError,
    StringLengthError,
    TrailingInputError,
)
from .message import BoolValue, GroupInstance, GroupValue, IntValue, Message, StringValue
from .schema import BoolField, GroupField, IntField, MessageSchema, SchemaField, StringField

logger = logging.getLogger(__name__)

T = TypeVar("T", bound=BaseModel)

_TRUE_LITERALS = frozenset({"true", "1"})
_FALSE_LITERALS = frozenset({"false", "0"})
_INTEGER_RE = re.compile(r"[+-]?[0-9]+")


class BuilderState(enum.Enum):
    """Lifecycle of a StringMessageBuilder."""

    FRESH = "fresh"
    TRAVERSING = "traversing"
    SUCCEEDED = "succeeded"
    FAILED = "failed"


class StringMessageBuilder:
    """Single-use builder that turns a token sequence into a Message.

    The first conversion failure aborts the traversal and is kept as the
    builder's error; the partially built values are discarded. A successful
    result is handed out exactly once by get_message().

    Example:
        >>> builder = StringMessageBuilder(["true", "255", "foo"])
        >>> if builder.traverse(schema):
        ...     message = builder.get_message()
        ... else:
        ...     print(f"Error with field: {builder.get_error()}")
    """

    def __init__(self, tokens: Sequence[str], config: BuilderConfig | None = None) -> None:
        """Initialize the builder.

        Args:
            tokens: Raw text tokens, already split (e.g. command line arguments)
            config: Builder options (defaults to BuilderConfig())
        """
        self._tokens = tuple(tokens)
        self._config = config or BuilderConfig()
        self._cursor = 0
        self._state = BuilderState.FRESH
        self._error: BuildError | None = None
        self._message: Message | None = None

    @property
    def state(self) -> BuilderState:
        return self._state

    @property
    def remaining_tokens(self) -> tuple[str, ...]:
        """Tokens not consumed by the traversal."""
        return self._tokens[self._cursor :]

    def traverse(self, schema: MessageSchema) -> bool:
        """Walk ``schema`` and build a message from the tokens.

        Args:
            schema: Schema to build against

        Returns:
            True if the message was built, False if a failure was recorded

        Raises:
            BuilderStateError: If the builder has already traversed a schema
        """
        if self._state is not BuilderState.FRESH:
            raise BuilderStateError(
                f"Builder already used (state: {self._state.value}); create a new builder"
            )
        self._state = BuilderState.TRAVERSING

        try:
            values = self._build_fields(schema.fields, "")
            self._check_trailing(schema)
        except BuildError as err:
            self._error = err
            self._state = BuilderState.FAILED
            logger.debug("Failed to build %s: %s (%s)", schema.name, err, err.kind.value)
            return False

        self._message = Message(name=schema.name, fields=values)
        self._state = BuilderState.SUCCEEDED
        return True

    def get_message(self) -> Message | None:
        """Hand over the built message.

        Returns:
            The message on the first call after a successful traversal;
            None before traversal, after a failure, and on later calls
        """
        if self._state is not BuilderState.SUCCEEDED:
            return None
        message, self._message = self._message, None
        return message

    def get_error(self) -> BuildError | None:
        """Return the first failure recorded during traversal, if any."""
        return self._error

    def _build_fields(
        self, fields: Sequence[SchemaField], prefix: str
    ) -> tuple[BoolValue | IntValue | StringValue | GroupValue, ...]:
        return tuple(self._build_field(field, prefix) for field in fields)

    def _build_field(
        self, field: SchemaField, prefix: str
    ) -> BoolValue | IntValue | StringValue | GroupValue:
        path = f"{prefix}{field.name}"

        if isinstance(field, GroupField):
            return self._build_group(field, path)

        if self._cursor >= len(self._tokens):
            raise InsufficientInputError(field.name, "no input left for this field", path)
        token = self._tokens[self._cursor]
        self._cursor += 1

        if isinstance(field, BoolField):
            return BoolValue(name=field.name, value=_convert_bool(field, token, path))
        if isinstance(field, IntField):
            return IntValue(
                name=field.name, field_kind=field.kind, value=_convert_int(field, token, path)
            )
        if isinstance(field, StringField):
            return StringValue(name=field.name, value=_convert_string(field, token, path))

        raise SchemaError(f"Field {path}: unsupported schema field {type(field).__name__}")

    def _build_group(self, field: GroupField, path: str) -> GroupValue:
        instances: list[GroupInstance] = []
        while self._cursor < len(self._tokens) and len(instances) < field.max_repeat:
            prefix = f"{path}[{len(instances)}]."
            try:
                values = self._build_fields(field.fields, prefix)
            except InsufficientInputError as err:
                # A partial repetition above the minimum stays an input error
                if len(instances) >= field.min_repeat:
                    raise
                raise InsufficientGroupRepeatsError(
                    field.name,
                    f"expected at least {field.min_repeat} repetitions, got {len(instances)} "
                    f"(input ran out at {err.path})",
                    path,
                ) from err
            instances.append(GroupInstance(fields=values))

        if len(instances) < field.min_repeat:
            raise InsufficientGroupRepeatsError(
                field.name,
                f"expected at least {field.min_repeat} repetitions, got {len(instances)}",
                path,
            )
        return GroupValue(name=field.name, instances=tuple(instances))

    def _check_trailing(self, schema: MessageSchema) -> None:
        leftover = len(self._tokens) - self._cursor
        if leftover == 0:
            return
        if not self._config.allow_trailing_tokens:
            raise TrailingInputError(
                schema.name, f"{leftover} unused token(s) after the last field"
            )
        logger.debug("Ignoring %d trailing token(s) after %s", leftover, schema.name)


def _convert_bool(field: BoolField, token: str, path: str) -> bool:
    literal = token.lower()
    if literal in _TRUE_LITERALS:
        return True
    if literal in _FALSE_LITERALS:
        return False
    raise InvalidBooleanError(
        field.name, f"'{token}' is not a boolean (expected true/false or 1/0)", path
    )


def _convert_int(field: IntField, token: str, path: str) -> int:
    if not _INTEGER_RE.fullmatch(token):
        raise InvalidIntegerError(field.name, f"'{token}' is not a base-10 integer", path)

    lo, hi = field.min_value, field.max_value
    try:
        value = int(token)
    except ValueError as err:
        # Only reachable for digit strings longer than the interpreter's int limit
        raise OutOfRangeError(
            field.name, f"'{token}' out of range [{lo}, {hi}] for {field.kind.value}", path
        ) from err

    if value < lo or value > hi:
        raise OutOfRangeError(
            field.name, f"{value} out of range [{lo}, {hi}] for {field.kind.value}", path
        )
    return value


def _convert_string(field: StringField, token: str, path: str) -> str:
    if not field.min_length <= len(token) <= field.max_length:
        raise StringLengthError(
            field.name,
            f"length {len(token)} outside [{field.min_length}, {field.max_length}]",
            path,
        )
    return token


def build_message(
    schema: MessageSchema, tokens: Sequence[str], config: BuilderConfig | None = None
) -> Message:
    """Build a message from tokens, raising on failure.

    Args:
        schema: Schema to build against
        tokens: Raw text tokens
        config: Builder options

    Returns:
        The built message

    Raises:
        BuildError: The first conversion failure (a subclass per error kind)

    Examples:
        ```python
        from rdmtext import BoolField, MessageSchema, build_message

        schema = MessageSchema("IDENTIFY_DEVICE", [BoolField("identify")])
        message = build_message(schema, ["on"])  # raises InvalidBooleanError
        ```
    """
    builder = StringMessageBuilder(tokens, config)
    if not builder.traverse(schema):
        raise cast(BuildError, builder.get_error())
    return cast(Message, builder.get_message())


def build_model(
    model_class: type[T], tokens: Sequence[str], config: BuilderConfig | None = None
) -> T:
    """Build tokens straight into an instance of a declarative message model.

    Args:
        model_class: BaseMessage subclass describing the schema
        tokens: Raw text tokens
        config: Builder options

    Returns:
        Validated ``model_class`` instance

    Raises:
        SchemaError: If the model cannot be expressed as a schema
        BuildError: The first conversion failure
    """
    schema = MessageSchema.from_model(model_class)
    message = build_message(schema, tokens, config)
    return model_class.model_validate(message.as_dict())
