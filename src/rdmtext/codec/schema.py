"""Field and message schemas.

A schema is an immutable, ordered description of the fields a message carries.
Scalar fields consume exactly one token each when a message is built; a group
field repeats its child fields between ``min_repeat`` and ``max_repeat`` times.

Schemas can be written out directly::

    schema = MessageSchema(
        "DMX_PERSONALITY",
        [
            UInt8Field("personality"),
            GroupField("slots", [UInt16Field("offset"), BoolField("enabled")], 0, 5),
        ],
    )

or introspected from a declarative BaseMessage with MessageSchema.from_model().
"""

from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import Any, Iterator, Sequence, Type, Union, get_args, get_origin

from pydantic import BaseModel
from pydantic.fields import FieldInfo

from ..exceptions import SchemaError


class FieldKind(enum.Enum):
    """The closed set of field types a schema can describe."""

    BOOL = "bool"
    UINT8 = "uint8"
    UINT16 = "uint16"
    UINT32 = "uint32"
    INT8 = "int8"
    INT16 = "int16"
    INT32 = "int32"
    STRING = "string"
    GROUP = "group"


# (bits, signed) for each integer kind
_INT_LAYOUT: dict[FieldKind, tuple[int, bool]] = {
    FieldKind.UINT8: (8, False),
    FieldKind.UINT16: (16, False),
    FieldKind.UINT32: (32, False),
    FieldKind.INT8: (8, True),
    FieldKind.INT16: (16, True),
    FieldKind.INT32: (32, True),
}


def is_int_kind(kind: FieldKind) -> bool:
    """Return True if ``kind`` is one of the fixed-width integer kinds."""
    return kind in _INT_LAYOUT


def int_bounds(kind: FieldKind) -> tuple[int, int]:
    """Return the inclusive (min, max) range representable by an integer kind.

    Raises:
        SchemaError: If ``kind`` is not an integer kind
    """
    if kind not in _INT_LAYOUT:
        raise SchemaError(f"{kind.value} is not an integer kind")
    bits, signed = _INT_LAYOUT[kind]
    if signed:
        return -(1 << (bits - 1)), (1 << (bits - 1)) - 1
    return 0, (1 << bits) - 1


def int_kind(bits: int, signed: bool = False) -> FieldKind:
    """Look up the integer kind with the given bit width and signedness.

    Raises:
        SchemaError: If no kind has that width
    """
    for kind, layout in _INT_LAYOUT.items():
        if layout == (bits, signed):
            return kind
    raise SchemaError(f"Unsupported integer width: {bits} bits (supported: 8, 16, 32)")


@dataclass(frozen=True)
class BoolField:
    """A boolean field."""

    name: str

    @property
    def kind(self) -> FieldKind:
        return FieldKind.BOOL


@dataclass(frozen=True)
class IntField:
    """A fixed-width integer field.

    Attributes:
        name: Field name
        kind: One of the UINT*/INT* kinds
    """

    name: str
    kind: FieldKind

    def __post_init__(self) -> None:
        if not is_int_kind(self.kind):
            raise SchemaError(f"Field {self.name}: {self.kind.value} is not an integer kind")

    @property
    def bits(self) -> int:
        return _INT_LAYOUT[self.kind][0]

    @property
    def signed(self) -> bool:
        return _INT_LAYOUT[self.kind][1]

    @property
    def min_value(self) -> int:
        return int_bounds(self.kind)[0]

    @property
    def max_value(self) -> int:
        return int_bounds(self.kind)[1]


@dataclass(frozen=True)
class StringField:
    """A string field with an inclusive length range.

    Attributes:
        name: Field name
        min_length: Minimum length in characters (inclusive)
        max_length: Maximum length in characters (inclusive)
    """

    name: str
    min_length: int
    max_length: int

    def __post_init__(self) -> None:
        if self.min_length < 0:
            raise SchemaError(f"Field {self.name}: min_length must be >= 0, got {self.min_length}")
        if self.min_length > self.max_length:
            raise SchemaError(
                f"Field {self.name}: invalid length bounds: "
                f"min_length={self.min_length} > max_length={self.max_length}"
            )

    @property
    def kind(self) -> FieldKind:
        return FieldKind.STRING


@dataclass(frozen=True)
class GroupField:
    """A repeating group of child fields.

    Each repetition consumes one token per scalar child (nested groups repeat
    in turn), and becomes one group instance of the built message.

    Attributes:
        name: Field name
        fields: Child fields, in order
        min_repeat: Minimum number of repetitions (inclusive)
        max_repeat: Maximum number of repetitions (inclusive)
    """

    name: str
    fields: tuple[SchemaField, ...]
    min_repeat: int
    max_repeat: int

    def __post_init__(self) -> None:
        # Accept any sequence but store an immutable tuple
        object.__setattr__(self, "fields", tuple(self.fields))
        if not self.fields:
            raise SchemaError(f"Group {self.name} has no fields")
        _check_fields(self.fields)
        if self.min_repeat < 0:
            raise SchemaError(f"Group {self.name}: min_repeat must be >= 0, got {self.min_repeat}")
        if self.min_repeat > self.max_repeat:
            raise SchemaError(
                f"Group {self.name}: invalid repeat bounds: "
                f"min_repeat={self.min_repeat} > max_repeat={self.max_repeat}"
            )
        if not any(_can_take_token(child) for child in self.fields):
            raise SchemaError(
                f"Group {self.name}: a repetition cannot consume any token "
                f"(every child is a group with max_repeat=0)"
            )

    @property
    def kind(self) -> FieldKind:
        return FieldKind.GROUP


def _can_take_token(field: SchemaField) -> bool:
    if isinstance(field, GroupField):
        # Children were checked when the nested group was built
        return field.max_repeat > 0
    return True


SchemaField = Union[BoolField, IntField, StringField, GroupField]


def UInt8Field(name: str) -> IntField:
    """Create an unsigned 8-bit integer field."""
    return IntField(name, FieldKind.UINT8)


def UInt16Field(name: str) -> IntField:
    """Create an unsigned 16-bit integer field."""
    return IntField(name, FieldKind.UINT16)


def UInt32Field(name: str) -> IntField:
    """Create an unsigned 32-bit integer field."""
    return IntField(name, FieldKind.UINT32)


def Int8Field(name: str) -> IntField:
    """Create a signed 8-bit integer field."""
    return IntField(name, FieldKind.INT8)


def Int16Field(name: str) -> IntField:
    """Create a signed 16-bit integer field."""
    return IntField(name, FieldKind.INT16)


def Int32Field(name: str) -> IntField:
    """Create a signed 32-bit integer field."""
    return IntField(name, FieldKind.INT32)


def _check_fields(fields: Sequence[Any]) -> None:
    for field in fields:
        if not isinstance(field, (BoolField, IntField, StringField, GroupField)):
            raise SchemaError(f"Unsupported schema field: {field!r}")


@dataclass(frozen=True)
class MessageSchema:
    """Schema for an entire message.

    Example:
        >>> schema = MessageSchema.from_model(DeviceLabel)
        >>> for field in schema:
        ...     print(f"{field.name}: {field.kind.value}")
    """

    name: str
    fields: tuple[SchemaField, ...]

    def __post_init__(self) -> None:
        object.__setattr__(self, "fields", tuple(self.fields))
        _check_fields(self.fields)

    def __iter__(self) -> Iterator[SchemaField]:
        return iter(self.fields)

    def __len__(self) -> int:
        return len(self.fields)

    @classmethod
    def from_model(cls, model_class: Type[BaseModel]) -> MessageSchema:
        """Create a schema from a Pydantic model.

        Supported annotations:
            - ``bool``
            - ``int`` with FixedInt(bits=..., signed=...)
            - ``str`` with BoundedStr(min_length=..., max_length=...)
            - ``list[SubModel]`` with Repeated(min_repeat=..., max_repeat=...)

        Args:
            model_class: Pydantic model class

        Returns:
            MessageSchema instance, named by the model's ``rdmtext_name``
            class variable if set, else by the class name

        Raises:
            SchemaError: If a field's annotation or constraints are unsupported
        """
        name = getattr(model_class, "rdmtext_name", None) or model_class.__name__
        return cls(name, _fields_from_model(model_class))


def _fields_from_model(model_class: Type[BaseModel]) -> tuple[SchemaField, ...]:
    return tuple(
        _extract_field(field_name, field_info)
        for field_name, field_info in model_class.model_fields.items()
    )


def _extract_field(name: str, field_info: FieldInfo) -> SchemaField:
    """Extract a schema field from a Pydantic FieldInfo."""
    annotation = field_info.annotation
    if annotation is None:
        raise SchemaError(f"Field {name} has no type annotation")

    # Pydantic v2 stores length constraints in metadata
    min_length = None
    max_length = None
    for constraint in field_info.metadata:
        if hasattr(constraint, "min_length"):
            min_length = constraint.min_length
        if hasattr(constraint, "max_length"):
            max_length = constraint.max_length

    extra = field_info.json_schema_extra if isinstance(field_info.json_schema_extra, dict) else {}

    if annotation is bool:
        return BoolField(name)

    if annotation is int:
        bits = extra.get("bits")
        if not isinstance(bits, int):
            raise SchemaError(
                f"Field {name}: integer fields require FixedInt(bits=..., signed=...)"
            )
        return IntField(name, int_kind(bits, bool(extra.get("signed", False))))

    if annotation is str:
        if max_length is None:
            raise SchemaError(f"Field {name}: string fields require a max_length")
        return StringField(name, min_length or 0, max_length)

    if get_origin(annotation) is list:
        args = get_args(annotation)
        element = args[0] if args else None
        if not (isinstance(element, type) and issubclass(element, BaseModel)):
            raise SchemaError(f"Field {name}: lists must hold a model class, got {element}")
        if max_length is None:
            raise SchemaError(f"Field {name}: repeated groups require Repeated(max_repeat=...)")
        return GroupField(name, _fields_from_model(element), min_length or 0, max_length)

    raise SchemaError(
        f"Field {name}: unsupported type {annotation}. "
        f"Supported: bool, FixedInt int, bounded str, repeated model list."
    )
