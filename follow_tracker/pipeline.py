"""
Orchestration of a full followers/following analysis.

This is the caller-level contract every host follows:

1. parse both files, failing if either is not JSON;
2. detect both shapes, failing if either is unrecognized;
3. swap the inputs when they arrive as (following, followers);
4. fail on any other combination than (followers, following);
5. extract both lists, failing if either is empty;
6. compare.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path

from follow_tracker.comparison import compare
from follow_tracker.errors import (
    EmptyResultError,
    ParseError,
    UnrecognizedFormatError,
    WrongCombinationError,
)
from follow_tracker.export_formats import (
    ComparisonResult,
    ExportShape,
    describe_value,
    detect_type,
    extract_followers,
    extract_following,
    parse_json,
    read_export_text,
)

logger = logging.getLogger(__name__)

POSITIONS = ("first", "second")


@dataclass(frozen=True)
class AnalysisOutcome:
    """Result of analyze_exports.

    Attributes:
        result: The comparison result.
        swapped: True if the inputs were given as (following, followers) and
            were swapped before extraction. Hosts should tell the user.
    """

    result: ComparisonResult
    swapped: bool = False


def analyze_exports(first_text: str, second_text: str) -> AnalysisOutcome:
    """Run the whole analysis on the raw text of two export files.

    Args:
        first_text: Contents of the file expected to be followers_1.json.
        second_text: Contents of the file expected to be following.json.

    Returns:
        An AnalysisOutcome.

    Raises:
        ParseError: If either text is not valid JSON.
        UnrecognizedFormatError: If either value is not an Instagram export.
        WrongCombinationError: If both files are the same export type.
        EmptyResultError: If either export yields no accounts.
    """
    first_data = parse_json(first_text)
    second_data = parse_json(second_text)

    failed = [
        position
        for position, data in zip(POSITIONS, (first_data, second_data))
        if data is None
    ]
    if failed:
        raise ParseError(failed)

    first_type = detect_type(first_data)
    second_type = detect_type(second_data)

    if first_type is None:
        raise UnrecognizedFormatError("first", describe_value(first_data))
    if second_type is None:
        raise UnrecognizedFormatError("second", describe_value(second_data))

    swapped = False
    if first_type is ExportShape.FOLLOWING and second_type is ExportShape.FOLLOWERS:
        first_data, second_data = second_data, first_data
        swapped = True
        logger.info("Files were in reverse order; swapped followers and following")
    elif first_type is not ExportShape.FOLLOWERS or second_type is not ExportShape.FOLLOWING:
        raise WrongCombinationError(first_type.value, second_type.value)

    followers = extract_followers(first_data)
    following = extract_following(second_data)

    if not followers:
        raise EmptyResultError("followers")
    if not following:
        raise EmptyResultError("following")

    logger.info(
        "Comparing %d followers against %d following", len(followers), len(following)
    )
    return AnalysisOutcome(result=compare(followers, following), swapped=swapped)


def analyze_files(first_path: str | Path, second_path: str | Path) -> AnalysisOutcome:
    """Read two export files and run analyze_exports on their contents.

    Raises:
        FileNotFoundError: If either file does not exist.
        AnalysisError: See analyze_exports.
    """
    logger.debug("Reading exports %s and %s", first_path, second_path)
    return analyze_exports(read_export_text(first_path), read_export_text(second_path))
