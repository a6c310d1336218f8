"""
Follow Tracker

Compare an Instagram followers export against a following export and find
who does not follow back.

Usage:
    from follow_tracker import analyze_files

    outcome = analyze_files("followers_1.json", "following.json")
    for account in outcome.result.not_followers_back:
        print(account.username)
"""

from follow_tracker.comparison import compare, normalize_username
from follow_tracker.errors import (
    AnalysisError,
    EmptyResultError,
    ParseError,
    UnrecognizedFormatError,
    WrongCombinationError,
)
from follow_tracker.export_formats import (
    AccountRecord,
    ComparisonResult,
    ComparisonStats,
    ExportShape,
    detect_type,
    extract_followers,
    extract_following,
    parse_json,
)
from follow_tracker.pipeline import AnalysisOutcome, analyze_exports, analyze_files

__all__ = [
    # Core operations
    "parse_json",
    "detect_type",
    "extract_followers",
    "extract_following",
    "compare",
    "normalize_username",
    # Orchestration
    "analyze_exports",
    "analyze_files",
    "AnalysisOutcome",
    # Types
    "AccountRecord",
    "ComparisonResult",
    "ComparisonStats",
    "ExportShape",
    # Errors
    "AnalysisError",
    "EmptyResultError",
    "ParseError",
    "UnrecognizedFormatError",
    "WrongCombinationError",
]
