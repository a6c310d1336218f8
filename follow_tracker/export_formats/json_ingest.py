"""
JSON ingestion for Instagram export files.

Exports downloaded from Instagram are sometimes saved with a leading UTF-8
byte-order mark. parse_json tolerates that and reports every other failure as
None instead of raising, so callers decide how to surface the error.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

logger = logging.getLogger(__name__)

BYTE_ORDER_MARK = "\ufeff"


def _reject_constant(name: str) -> Any:
    # json.loads accepts NaN/Infinity by default; strict JSON does not.
    raise ValueError(f"Invalid JSON constant: {name}")


def _loads_strict(text: str) -> Any:
    return json.loads(text, parse_constant=_reject_constant)


def parse_json(text: str) -> Any | None:
    """Parse export text into a JSON value.

    Tries a strict parse first. If that fails, strips a single leading
    byte-order mark and retries once.

    Args:
        text: Raw file contents.

    Returns:
        The parsed value, or None if the text is not valid JSON. Note that the
        JSON literal ``null`` also yields None.

    Examples:
        >>> parse_json('[1, 2]')
        [1, 2]
        >>> parse_json('\\ufeff{"a": 1}')
        {'a': 1}
        >>> parse_json('not json') is None
        True
    """
    if not isinstance(text, str):
        logger.debug("Cannot parse %s as JSON text", type(text).__name__)
        return None

    try:
        return _loads_strict(text)
    except (ValueError, RecursionError):
        pass

    cleaned = text[1:] if text.startswith(BYTE_ORDER_MARK) else text
    try:
        return _loads_strict(cleaned)
    except (ValueError, RecursionError) as e:
        logger.debug("Failed to parse JSON: %s", e)
        return None


def read_export_text(path: str | Path) -> str:
    """Read an export file as UTF-8 text.

    The byte-order mark, if any, is kept; parse_json deals with it.

    Raises:
        FileNotFoundError: If the file does not exist.
        UnicodeDecodeError: If the file is not UTF-8.
    """
    with open(path, "r", encoding="utf-8") as f:
        return f.read()
