"""Pydantic message modeling for rdmtext.

This module provides the BaseMessage class and field helpers for declaring
message schemas as Pydantic models.
"""

from __future__ import annotations

from .base import BaseMessage
from .fields import BoundedStr, FixedInt, Repeated

__all__ = [
    "BaseMessage",
    "BoundedStr",
    "FixedInt",
    "Repeated",
]
