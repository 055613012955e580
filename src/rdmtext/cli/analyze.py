"""Schema loading and analysis CLI command."""

from __future__ import annotations

import importlib.util
import inspect
import logging
import sys
from pathlib import Path

from ..codec.schema import GroupField, IntField, MessageSchema, SchemaField, StringField
from ..models.base import BaseMessage
from ..utils.sizing import field_token_range, max_tokens, min_tokens

logger = logging.getLogger(__name__)


def load_schemas(file_path: Path) -> dict[str, MessageSchema]:
    """Load every schema defined in a Python file.

    Module-level MessageSchema objects and BaseMessage subclasses defined in the
    file are both collected, keyed by schema name.

    Args:
        file_path: Path to Python file containing schema definitions

    Returns:
        Schemas by name, in definition order where the module preserves it

    Raises:
        ValueError: If the file cannot be loaded as a module
        SchemaError: If a BaseMessage subclass cannot be introspected
    """
    spec = importlib.util.spec_from_file_location("rdmtext_user_module", file_path)
    if spec is None or spec.loader is None:
        raise ValueError(f"Could not load module from {file_path}")

    module = importlib.util.module_from_spec(spec)
    sys.modules["rdmtext_user_module"] = module
    spec.loader.exec_module(module)

    schemas: dict[str, MessageSchema] = {}
    for obj in vars(module).values():
        if isinstance(obj, MessageSchema):
            schemas[obj.name] = obj

    for _name, obj in inspect.getmembers(module, inspect.isclass):
        # Only include classes defined in this file (not imported)
        if (
            obj is not BaseMessage
            and issubclass(obj, BaseMessage)
            and obj.__module__ == "rdmtext_user_module"
        ):
            schema = MessageSchema.from_model(obj)
            schemas[schema.name] = schema

    logger.info("Loaded %d schema(s) from %s", len(schemas), file_path)
    return schemas


def analyze_file(file_path: Path) -> None:
    """Print an analysis of every schema in a Python file.

    Args:
        file_path: Path to Python file containing schema definitions
    """
    schemas = load_schemas(file_path)
    if not schemas:
        print(f"No schemas found in {file_path}")
        return

    print("|" * 7, "rdmtext: RDM Text Message Builder", "|" * 7)
    print(f"{len(schemas)} schema{'s' if len(schemas) != 1 else ''} loaded.")
    print()

    for schema in schemas.values():
        analyze_schema(schema)


def analyze_schema(schema: MessageSchema) -> None:
    """Print a field-by-field breakdown of a single schema.

    Args:
        schema: Schema to analyze
    """
    print(f"{'=' * 19} {schema.name} {'=' * 19}")
    print(f"Tokens accepted: {min_tokens(schema)} to {max_tokens(schema)}")
    print()

    for i, field in enumerate(schema.fields, 1):
        _print_field(field, f"{i}.", depth=1)
    print()


def _describe(field: SchemaField) -> str:
    if isinstance(field, IntField):
        return f"{field.kind.value} [{field.min_value}-{field.max_value}]"
    if isinstance(field, StringField):
        return f"string (length {field.min_length}-{field.max_length})"
    if isinstance(field, GroupField):
        return f"group (repeats {field.min_repeat}-{field.max_repeat})"
    return field.kind.value


def _print_field(field: SchemaField, label: str, depth: int) -> None:
    lo, hi = field_token_range(field)
    tokens = f"{lo}" if lo == hi else f"{lo}-{hi}"
    field_desc = f"{label} {field.name}"
    info = _describe(field)

    # Token column ends at 54 characters
    dots_needed = 54 - 4 * depth - len(field_desc) - len(tokens) - len(" tok")
    dots = "." * max(1, dots_needed)
    print(f"{'    ' * depth}{field_desc}{dots}{tokens} tok  {info}")

    if isinstance(field, GroupField):
        for i, child in enumerate(field.fields, 1):
            _print_field(child, f"{label}{i}.", depth + 1)
