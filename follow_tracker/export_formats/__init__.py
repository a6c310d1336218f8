"""
Export formats module for Instagram follower data.

This module turns the raw text of Instagram's followers_1.json and
following.json exports into lists of AccountRecord.

Usage:
    from follow_tracker.export_formats import parse_json, detect_type, extract_followers

    data = parse_json(read_export_text("followers_1.json"))
    if detect_type(data) is ExportShape.FOLLOWERS:
        followers = extract_followers(data)
"""

from follow_tracker.export_formats.extractors import extract_followers, extract_following
from follow_tracker.export_formats.json_ingest import (
    BYTE_ORDER_MARK,
    parse_json,
    read_export_text,
)
from follow_tracker.export_formats.models import (
    AccountRecord,
    ComparisonResult,
    ComparisonStats,
)
from follow_tracker.export_formats.shape_detector import (
    FOLLOWERS_FIELD,
    FOLLOWING_FIELD,
    SUPPORTED_SHAPES,
    ExportShape,
    describe_value,
    detect_type,
)

__all__ = [
    # Records
    "AccountRecord",
    "ComparisonResult",
    "ComparisonStats",
    # Ingestion
    "BYTE_ORDER_MARK",
    "parse_json",
    "read_export_text",
    # Shape detection
    "ExportShape",
    "FOLLOWERS_FIELD",
    "FOLLOWING_FIELD",
    "SUPPORTED_SHAPES",
    "describe_value",
    "detect_type",
    # Extraction
    "extract_followers",
    "extract_following",
]
