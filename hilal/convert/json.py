"""JSON serialization for calendar adjustment data.

Adjustments travel as a flat JSON object whose keys are Umm al-Qura
table offsets written as decimal strings and whose values are the MJD of
the replacement month start:

    {"1544":60737,"1545":60766}

Functions:
    adjustments_to_json: Encode an offset mapping as a JSON string.
    adjustments_from_json: Decode a JSON string into an offset mapping.

Examples:
    >>> adjustments_to_json({1545: 60766, 1544: 60737})
    '{"1544":60737,"1545":60766}'

    >>> adjustments_from_json('{"1544":60737,"1545":60766}')
    {1544: 60737, 1545: 60766}
"""

from __future__ import annotations

import json
import logging
import re
from typing import Any, Mapping

from hilal.errors import JSONProcessingError

logger = logging.getLogger(__name__)

_OFFSET_KEY = re.compile(r"[+-]?[0-9]+")


def adjustments_to_json(adjustments: Mapping[int, int]) -> str:
    """Encode adjustment data as a compact JSON object.

    Keys are sorted numerically so equal mappings encode identically.

    Raises:
        JSONProcessingError: If a key or value is not an integer.
    """
    try:
        payload = {}
        for key, value in sorted(adjustments.items()):
            payload[str(int(key))] = _require_int(str(key), value)
        return json.dumps(payload, separators=(",", ":"))
    except (TypeError, ValueError) as exc:
        raise JSONProcessingError(f"JSON serialization failed: {exc}") from exc


def adjustments_from_json(text: str | bytes) -> dict[int, int]:
    """Decode adjustment data from a JSON object.

    Keys that do not parse as integers are skipped with a warning rather
    than failing the whole document.

    Args:
        text: The JSON document.

    Returns:
        Mapping of table offset to MJD.

    Raises:
        JSONProcessingError: If the text is not valid JSON, the top level
            is not an object, or a value is not an integer.
    """
    try:
        data: Any = json.loads(text)
    except (TypeError, ValueError) as exc:
        raise JSONProcessingError(f"JSON deserialization failed: {exc}") from exc

    if not isinstance(data, dict):
        raise JSONProcessingError(
            f"JSON data is not in the expected format: expected object, "
            f"got {type(data).__name__}"
        )

    adjustments: dict[int, int] = {}
    for key, value in data.items():
        value = _require_int(key, value)
        if not _OFFSET_KEY.fullmatch(key):
            logger.warning("skipping adjustment with non-integer key %r", key)
            continue
        adjustments[int(key)] = value
    return adjustments


def _require_int(key: str, value: Any) -> int:
    # bool is an int subclass but never a valid MJD
    if isinstance(value, bool) or not isinstance(value, int):
        raise JSONProcessingError(
            f"JSON data is not in the expected format: value for {key!r} "
            f"must be an integer, got {type(value).__name__}"
        )
    return value


__all__ = ["adjustments_to_json", "adjustments_from_json"]
