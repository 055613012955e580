"""Field helpers for declarative messages.

These wrap Pydantic's Field() so that a model both validates its own values and
carries the metadata MessageSchema.from_model() needs.
"""

from __future__ import annotations

from typing import Any, cast

from pydantic import Field
from pydantic.fields import FieldInfo

from ..codec.schema import int_bounds, int_kind


def FixedInt(*, bits: int, signed: bool = False, **kwargs: Any) -> FieldInfo:
    """Create a fixed-width integer field.

    The bit width and signedness select the schema kind (e.g. ``bits=16,
    signed=True`` is INT16) and also bound the model field to that range.

    Args:
        bits: Number of bits (8, 16 or 32)
        signed: Whether the integer is signed (default False)
        **kwargs: Additional Field() arguments

    Returns:
        Pydantic FieldInfo suitable for use as a field default/metadata.

    Raises:
        SchemaError: If ``bits`` is not 8, 16 or 32

    Example:
        >>> class Message(BaseMessage):
        ...     temperature: int = FixedInt(bits=16, signed=True)
    """
    lo, hi = int_bounds(int_kind(bits, signed))
    return cast(
        FieldInfo,
        Field(ge=lo, le=hi, json_schema_extra={"bits": bits, "signed": signed}, **kwargs),
    )


def BoundedStr(*, max_length: int, min_length: int = 0, **kwargs: Any) -> FieldInfo:
    """Create a string field with an inclusive length range.

    Args:
        max_length: Maximum length in characters
        min_length: Minimum length in characters (default 0)
        **kwargs: Additional Field() arguments

    Example:
        >>> class DeviceLabel(BaseMessage):
        ...     label: str = BoundedStr(max_length=32)
    """
    return cast(FieldInfo, Field(min_length=min_length, max_length=max_length, **kwargs))


def Repeated(*, max_repeat: int, min_repeat: int = 0, **kwargs: Any) -> FieldInfo:
    """Create a repeating group field from a ``list[SubModel]`` annotation.

    Args:
        max_repeat: Maximum number of repetitions
        min_repeat: Minimum number of repetitions (default 0)
        **kwargs: Additional Field() arguments

    Example:
        >>> class SensorList(BaseMessage):
        ...     sensors: list[SensorDefinition] = Repeated(min_repeat=1, max_repeat=8)
    """
    return cast(FieldInfo, Field(min_length=min_repeat, max_length=max_repeat, **kwargs))
