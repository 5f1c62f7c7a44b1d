"""Internal utilities for Hilal.

This module contains private implementation details:
    - Constants and magic numbers
    - The Umm al-Qura month-start table
    - Julian Day and tabular calendar arithmetic
    - Validation helpers

Note: This module is not part of the public API.
"""

from __future__ import annotations

from hilal._internal.validation import (
    validate_gregorian_components,
    validate_hijri_year,
    validate_month,
    validate_offset,
)

__all__: list[str] = [
    "validate_gregorian_components",
    "validate_hijri_year",
    "validate_month",
    "validate_offset",
]
