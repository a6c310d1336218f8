"""
Extract AccountRecord lists from parsed Instagram exports.

Extraction is forgiving: an entry that does not have the expected structure
yields no record and is skipped, it never fails the whole file. Deciding
whether an empty result is an error is left to the caller.
"""

from __future__ import annotations

import logging
from typing import Any

from follow_tracker.export_formats.models import AccountRecord
from follow_tracker.export_formats.shape_detector import FOLLOWERS_FIELD, FOLLOWING_FIELD

logger = logging.getLogger(__name__)


def _first_string_list_item(entry: dict[str, Any]) -> dict[str, Any] | None:
    """Return entry["string_list_data"][0] if it is a dict, else None."""
    items = entry.get(FOLLOWERS_FIELD)
    if isinstance(items, list) and items and isinstance(items[0], dict):
        return items[0]
    return None


def _clean_timestamp(value: Any) -> int | None:
    # Zero and non-integers carry no information.
    if isinstance(value, bool) or not isinstance(value, int) or value == 0:
        return None
    return value


def _clean_username(value: Any) -> str | None:
    if isinstance(value, str) and value:
        return value
    return None


def _clean_title(value: Any) -> str | None:
    # Any non-empty scalar title names the account; numbers are stringified.
    if isinstance(value, bool):
        return None
    if isinstance(value, (int, float)) and value:
        return str(value)
    return _clean_username(value)


def _follower_from_entry(entry: Any) -> AccountRecord | None:
    if not isinstance(entry, dict):
        return None
    item = _first_string_list_item(entry)
    if item is None:
        return None
    username = _clean_username(item.get("value"))
    if username is None:
        return None
    return AccountRecord(username=username, timestamp=_clean_timestamp(item.get("timestamp")))


def _following_from_entry(entry: Any) -> AccountRecord | None:
    # Plain string entries are the whole username.
    if isinstance(entry, str):
        return AccountRecord(username=entry) if entry else None

    if not isinstance(entry, dict):
        return None

    item = _first_string_list_item(entry)

    title = _clean_title(entry.get("title"))
    if title is not None:
        timestamp = item.get("timestamp") if item is not None else None
        if not _clean_timestamp(timestamp):
            timestamp = entry.get("timestamp")
        return AccountRecord(username=title, timestamp=_clean_timestamp(timestamp))

    if item is not None:
        username = _clean_username(item.get("value"))
        if username is not None:
            return AccountRecord(
                username=username, timestamp=_clean_timestamp(item.get("timestamp"))
            )

    return None


def extract_followers(value: Any) -> list[AccountRecord]:
    """Extract accounts from a followers export (followers_1.json).

    Args:
        value: Parsed JSON, expected to be an array of entries.

    Returns:
        One AccountRecord per well-formed entry, in input order. Entries
        without a usable string_list_data value are dropped.

    Examples:
        >>> extract_followers([{"string_list_data": [{"value": "bob", "timestamp": 100}]}])
        [AccountRecord(username='bob', full_name=None, timestamp=100)]
        >>> extract_followers({"not": "a list"})
        []
    """
    if not isinstance(value, list):
        return []

    records = []
    for entry in value:
        record = _follower_from_entry(entry)
        if record is not None:
            records.append(record)

    dropped = len(value) - len(records)
    if dropped:
        logger.debug("Dropped %d malformed followers entries", dropped)
    return records


def extract_following(value: Any) -> list[AccountRecord]:
    """Extract accounts from a following export (following.json).

    Each entry under "relationships_following" resolves its username in order:

    1. a "title" field (timestamp from string_list_data, else a sibling
       "timestamp"),
    2. string_list_data[0]["value"] with its timestamp,
    3. the entry itself when it is a plain string.

    Entries matching none of these are dropped.

    Args:
        value: Parsed JSON, expected to be an object.

    Returns:
        AccountRecords in input order.
    """
    if not isinstance(value, dict):
        return []
    entries = value.get(FOLLOWING_FIELD)
    if not isinstance(entries, list):
        return []

    records = []
    for entry in entries:
        record = _following_from_entry(entry)
        if record is not None:
            records.append(record)

    dropped = len(entries) - len(records)
    if dropped:
        logger.debug("Dropped %d malformed following entries", dropped)
    return records
