"""Typed message values produced by the builder.

A Message is an ordered tuple of field values, one per schema entry. Values are
frozen Pydantic models discriminated on ``kind``, so a message can be dumped to
and validated from JSON without losing integer widths or group structure.
"""

from __future__ import annotations

from typing import Annotated, Any, Literal, Union

from pydantic import BaseModel, ConfigDict, StrictBool, StrictInt, StrictStr, model_validator
from pydantic import Field as _Field

from .schema import FieldKind, int_bounds, is_int_kind


class _ValueModel(BaseModel):
    model_config = ConfigDict(frozen=True, extra="forbid")


class BoolValue(_ValueModel):
    """A boolean field value."""

    kind: Literal["bool"] = "bool"
    name: str
    value: StrictBool


class IntValue(_ValueModel):
    """An integer field value tagged with the kind it was built as.

    The value is always a plain Python int; ``field_kind`` records the original
    width and signedness, and the value must fit it.
    """

    kind: Literal["int"] = "int"
    name: str
    field_kind: FieldKind
    value: StrictInt

    @model_validator(mode="after")
    def check_range(self) -> IntValue:
        if not is_int_kind(self.field_kind):
            raise ValueError(f"{self.field_kind.value} is not an integer kind")
        lo, hi = int_bounds(self.field_kind)
        if not lo <= self.value <= hi:
            raise ValueError(
                f"value {self.value} out of range [{lo}, {hi}] for {self.field_kind.value}"
            )
        return self


class StringValue(_ValueModel):
    """A string field value."""

    kind: Literal["string"] = "string"
    name: str
    value: StrictStr


class GroupInstance(_ValueModel):
    """One repetition of a group: the values of the group's child fields."""

    fields: tuple[FieldValue, ...]

    def as_dict(self) -> dict[str, Any]:
        return _as_dict(self.fields)


class GroupValue(_ValueModel):
    """A group field value: every repetition, in the order consumed."""

    kind: Literal["group"] = "group"
    name: str
    instances: tuple[GroupInstance, ...]

    def __len__(self) -> int:
        return len(self.instances)


# A single field value; `kind` selects the variant.
FieldValue = Annotated[
    Union[BoolValue, IntValue, StringValue, GroupValue],
    _Field(discriminator="kind"),
]

ScalarValue = Union[BoolValue, IntValue, StringValue]


class Message(_ValueModel):
    """A built message.

    Attributes:
        name: Name of the schema the message was built from
        fields: One value per top-level schema field, in schema order
    """

    name: str
    fields: tuple[FieldValue, ...]

    def field_count(self) -> int:
        """Return the number of top-level fields."""
        return len(self.fields)

    def get(self, name: str) -> BoolValue | IntValue | StringValue | GroupValue | None:
        """Return the first top-level value called ``name``, or None."""
        for field_value in self.fields:
            if field_value.name == name:
                return field_value
        return None

    def as_dict(self) -> dict[str, Any]:
        """Return the message as plain data.

        Scalars map to their Python values and groups to lists of dicts, which
        is the shape a declarative BaseMessage validates from.

        Example:
            >>> message.as_dict()
            {'personality': 2, 'slots': [{'offset': 0, 'enabled': True}]}
        """
        return _as_dict(self.fields)


def _as_dict(fields: tuple[Any, ...]) -> dict[str, Any]:
    result: dict[str, Any] = {}
    for field_value in fields:
        if isinstance(field_value, GroupValue):
            result[field_value.name] = [instance.as_dict() for instance in field_value.instances]
        else:
            result[field_value.name] = field_value.value
    return result


# Resolve forward references for models that use FieldValue.
GroupInstance.model_rebuild()
GroupValue.model_rebuild()
Message.model_rebuild()
