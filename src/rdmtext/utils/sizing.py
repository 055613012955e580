"""Token count calculation utilities.

This module provides functions to calculate how many tokens a schema accepts
without building a message.
"""

from __future__ import annotations

from pydantic import BaseModel

from ..codec.schema import GroupField, MessageSchema, SchemaField


def _as_schema(schema_or_class: MessageSchema | type[BaseModel]) -> MessageSchema:
    if isinstance(schema_or_class, MessageSchema):
        return schema_or_class
    return MessageSchema.from_model(schema_or_class)


def field_token_range(field: SchemaField) -> tuple[int, int]:
    """Return the (min, max) number of tokens a single field consumes.

    Scalars consume exactly one token. A group consumes its per-repetition
    range multiplied by its repeat bounds.
    """
    if isinstance(field, GroupField):
        per_min = sum(field_token_range(child)[0] for child in field.fields)
        per_max = sum(field_token_range(child)[1] for child in field.fields)
        return field.min_repeat * per_min, field.max_repeat * per_max
    return 1, 1


def field_token_counts(
    schema_or_class: MessageSchema | type[BaseModel],
) -> dict[str, tuple[int, int]]:
    """Get the (min, max) token count of each top-level field.

    Args:
        schema_or_class: Schema, or declarative message class

    Returns:
        Dictionary mapping field names to their token range

    Example:
        >>> field_token_counts(schema)
        {'personality': (1, 1), 'slots': (0, 10)}
    """
    schema = _as_schema(schema_or_class)
    return {field.name: field_token_range(field) for field in schema.fields}


def min_tokens(schema_or_class: MessageSchema | type[BaseModel]) -> int:
    """Calculate the fewest tokens that can satisfy a schema.

    Raises:
        SchemaError: If a declarative class cannot be introspected
    """
    schema = _as_schema(schema_or_class)
    return sum(field_token_range(field)[0] for field in schema.fields)


def max_tokens(schema_or_class: MessageSchema | type[BaseModel]) -> int:
    """Calculate the most tokens a schema consumes; further tokens are trailing input.

    Raises:
        SchemaError: If a declarative class cannot be introspected
    """
    schema = _as_schema(schema_or_class)
    return sum(field_token_range(field)[1] for field in schema.fields)
