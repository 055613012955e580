"""Example RDM parameter schemas.

Schemas can be written directly with the field classes, or declared as
BaseMessage models. Both kinds are picked up by ``rdmtext --analyze`` and
``rdmtext --schema``:

    rdmtext --analyze examples/rdm_schemas.py
    rdmtext --schema examples/rdm_schemas.py --message DMX_START_ADDRESS 17
    rdmtext --schema examples/rdm_schemas.py --message SLOT_INFO 0 1 1 0
"""

from __future__ import annotations

from typing import ClassVar

from rdmtext import (
    BaseMessage,
    BoolField,
    BoundedStr,
    FixedInt,
    GroupField,
    MessageSchema,
    Repeated,
    StringField,
    UInt8Field,
    UInt16Field,
)

DMX_START_ADDRESS = MessageSchema("DMX_START_ADDRESS", [UInt16Field("dmx_address")])

IDENTIFY_DEVICE = MessageSchema("IDENTIFY_DEVICE", [BoolField("identify")])

DEVICE_LABEL = MessageSchema("DEVICE_LABEL", [StringField("label", 0, 32)])

DMX_PERSONALITY = MessageSchema(
    "DMX_PERSONALITY",
    [
        UInt8Field("personality"),
        GroupField("slots", [UInt16Field("offset"), BoolField("enabled")], 0, 5),
    ],
)


class SlotInfo(BaseMessage):
    """One slot of the current personality."""

    offset: int = FixedInt(bits=16)
    slot_type: int = FixedInt(bits=8)


class SlotInfoReply(BaseMessage):
    """SLOT_INFO parameter data."""

    slots: list[SlotInfo] = Repeated(min_repeat=1, max_repeat=46)

    rdmtext_name: ClassVar[str | None] = "SLOT_INFO"


class SensorDefinition(BaseMessage):
    """SENSOR_DEFINITION parameter data."""

    sensor: int = FixedInt(bits=8)
    sensor_type: int = FixedInt(bits=8)
    unit: int = FixedInt(bits=8)
    prefix: int = FixedInt(bits=8)
    range_min: int = FixedInt(bits=16, signed=True)
    range_max: int = FixedInt(bits=16, signed=True)
    normal_min: int = FixedInt(bits=16, signed=True)
    normal_max: int = FixedInt(bits=16, signed=True)
    recorded_supported: bool
    description: str = BoundedStr(max_length=32)

    rdmtext_name: ClassVar[str | None] = "SENSOR_DEFINITION"
