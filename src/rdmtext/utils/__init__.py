"""Utility functions for rdmtext.

This module provides schema sizing helpers.
"""

from __future__ import annotations

from .sizing import field_token_counts, field_token_range, max_tokens, min_tokens

__all__ = [
    "field_token_counts",
    "field_token_range",
    "max_tokens",
    "min_tokens",
]
