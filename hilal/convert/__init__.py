"""Adjustment data conversion utilities.

This module provides functions for converting calendar adjustment data
to and from its JSON wire format.

Examples:
    >>> from hilal.convert import adjustments_to_json, adjustments_from_json

    >>> text = adjustments_to_json({1544: 60737})
    >>> adjustments_from_json(text)
    {1544: 60737}
"""

from __future__ import annotations

from hilal.convert.json import adjustments_from_json, adjustments_to_json

__all__ = [
    "adjustments_to_json",
    "adjustments_from_json",
]
