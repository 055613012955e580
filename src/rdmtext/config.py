"""Configuration for building and printing messages.

The defaults reproduce the canonical behaviour: trailing tokens are ignored
and nested fields are indented by two spaces per level.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class BuilderConfig:
    """Options for StringMessageBuilder.

    Attributes:
        allow_trailing_tokens: If False, tokens left over after the whole schema
            has been satisfied fail the build with TrailingInputError
            (default True, leftovers are ignored).

    Examples:
        ```python
        from rdmtext import BuilderConfig, StringMessageBuilder

        builder = StringMessageBuilder(["1", "extra"], BuilderConfig(allow_trailing_tokens=False))
        ```
    """

    allow_trailing_tokens: bool = True


@dataclass(frozen=True)
class PrinterConfig:
    """Options for MessagePrinter.

    Attributes:
        indent: Spaces added per group nesting level (default 2, the canonical format)
    """

    indent: int = 2

    def __post_init__(self) -> None:
        """Validate configuration parameters."""
        if self.indent < 0:
            raise ValueError(f"indent must be >= 0, got {self.indent}")
