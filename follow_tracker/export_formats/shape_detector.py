"""
Structural detection of Instagram export shapes.

The two exports look different at the top level:

- followers_1.json is an array of entries, each with a "string_list_data"
  array of {"href", "value", "timestamp"} items.
- following.json is an object whose "relationships_following" key holds the
  array of entries.

Detection looks at structure only, never at file names.
"""

from __future__ import annotations

from enum import Enum
from typing import Any

FOLLOWERS_FIELD = "string_list_data"
FOLLOWING_FIELD = "relationships_following"


class ExportShape(str, Enum):
    """The export shapes this tool understands."""

    FOLLOWERS = "followers"
    FOLLOWING = "following"


SUPPORTED_SHAPES = frozenset(ExportShape)


def detect_type(value: Any) -> ExportShape | None:
    """Classify a parsed JSON value as a followers or following export.

    Only the first element of a followers array is inspected, so an empty
    array is never recognized.

    Args:
        value: A value returned by parse_json.

    Returns:
        ExportShape.FOLLOWERS, ExportShape.FOLLOWING, or None if the value
        matches neither shape.

    Examples:
        >>> detect_type([{"string_list_data": [{"value": "bob"}]}])
        <ExportShape.FOLLOWERS: 'followers'>
        >>> detect_type({"relationships_following": []})
        <ExportShape.FOLLOWING: 'following'>
        >>> detect_type([]) is None
        True
    """
    if isinstance(value, list):
        if value and isinstance(value[0], dict):
            if isinstance(value[0].get(FOLLOWERS_FIELD), list):
                return ExportShape.FOLLOWERS
        return None

    if isinstance(value, dict):
        if isinstance(value.get(FOLLOWING_FIELD), list):
            return ExportShape.FOLLOWING
        return None

    return None


def describe_value(value: Any, max_keys: int = 5) -> str:
    """Describe a JSON value's top-level shape for error messages.

    Examples:
        >>> describe_value([])
        'an empty array'
        >>> describe_value({"a": 1, "b": 2})
        'an object with keys: a, b'
        >>> describe_value(42)
        'a number'
    """
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "a boolean"
    if isinstance(value, (int, float)):
        return "a number"
    if isinstance(value, str):
        return "a string"
    if isinstance(value, list):
        if not value:
            return "an empty array"
        if isinstance(value[0], dict):
            return f"an array whose first entry has no '{FOLLOWERS_FIELD}' list"
        return "an array whose first entry is not an object"
    if isinstance(value, dict):
        if not value:
            return "an empty object"
        keys = list(value.keys())
        shown = ", ".join(str(k) for k in keys[:max_keys])
        if len(keys) > max_keys:
            shown += f", ... ({len(keys) - max_keys} more)"
        return f"an object with keys: {shown}"
    return type(value).__name__
