"""Base class for declarative message schemas.

A BaseMessage subclass describes a schema with ordinary Pydantic fields; the
builder introspects it with MessageSchema.from_model() and validates built
messages back into it.
"""

from __future__ import annotations

from typing import ClassVar

from pydantic import BaseModel, ConfigDict


class BaseMessage(BaseModel):
    """Base class for all declarative rdmtext messages.

    Messages should inherit from this class and define fields using the helpers
    in rdmtext.models.fields (FixedInt, BoundedStr, Repeated).

    Example:
        >>> from typing import ClassVar
        >>> class SlotInfo(BaseMessage):
        ...     offset: int = FixedInt(bits=16)
        ...     slot_type: int = FixedInt(bits=8)
        >>> class SlotInfoReply(BaseMessage):
        ...     slots: list[SlotInfo] = Repeated(min_repeat=1, max_repeat=46)
        ...
        ...     rdmtext_name: ClassVar[str | None] = "SLOT_INFO"

    Attributes:
        rdmtext_name: Schema name (optional, defaults to the class name)
    """

    model_config = ConfigDict(
        # Lax validation so Message.as_dict() and JSON data both validate
        strict=False,
        # Validate on assignment
        validate_assignment=True,
        # Forbid extra fields not defined in schema
        extra="forbid",
    )

    rdmtext_name: ClassVar[str | None] = None
