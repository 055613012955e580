"""Canonical text rendering of built messages.

Each scalar renders as ``name: value`` on its own line. Each group instance
renders as a ``name {`` ... ``}`` block with its children indented two spaces
per nesting level::

    personality: 2
    slots {
      offset: 0
      enabled: true
    }
"""

from __future__ import annotations

from typing import Sequence

from ..config import PrinterConfig
from .message import BoolValue, GroupValue, IntValue, Message, StringValue


class MessagePrinter:
    """Renders messages to canonical text."""

    def __init__(self, config: PrinterConfig | None = None) -> None:
        self._config = config or PrinterConfig()

    def render(self, message: Message) -> str:
        """Render every field of ``message`` in schema order.

        Args:
            message: Message to render

        Returns:
            The rendered text; empty for a message with no fields
        """
        lines: list[str] = []
        self._render_fields(message.fields, 0, lines)
        return "".join(lines)

    def _render_fields(
        self,
        fields: Sequence[BoolValue | IntValue | StringValue | GroupValue],
        depth: int,
        lines: list[str],
    ) -> None:
        pad = " " * (self._config.indent * depth)
        for field_value in fields:
            if isinstance(field_value, GroupValue):
                for instance in field_value.instances:
                    lines.append(f"{pad}{field_value.name} {{\n")
                    self._render_fields(instance.fields, depth + 1, lines)
                    lines.append(f"{pad}}}\n")
            else:
                lines.append(f"{pad}{field_value.name}: {format_value(field_value)}\n")


def format_value(field_value: BoolValue | IntValue | StringValue) -> str:
    """Return the canonical text of a scalar value.

    Booleans are always ``true``/``false``, integers plain base-10 and strings
    verbatim.
    """
    if isinstance(field_value, BoolValue):
        return "true" if field_value.value else "false"
    if isinstance(field_value, IntValue):
        return str(field_value.value)
    return field_value.value


def render_message(message: Message, config: PrinterConfig | None = None) -> str:
    """Render ``message`` to canonical text.

    Example:
        >>> render_message(build_message(schema, ["TRUE", "255", "foo"]))
        'bool: true\\nuint8: 255\\nstring: foo\\n'
    """
    return MessagePrinter(config).render(message)
