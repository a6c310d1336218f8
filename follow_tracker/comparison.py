"""
Set comparison between a followers list and a following list.

Usernames are matched after trimming whitespace and lower-casing. The
normalized form is only used for matching; records keep their original
username for display.
"""

from __future__ import annotations

from typing import Any, Iterable, Sequence

from follow_tracker.export_formats.models import (
    AccountRecord,
    ComparisonResult,
    ComparisonStats,
)


def normalize_username(username: Any) -> str:
    """Return the matching key for a username.

    Examples:
        >>> normalize_username("  Alice ")
        'alice'
        >>> normalize_username(None)
        ''
    """
    if not username:
        return ""
    return str(username).strip().lower()


def _username_set(records: Iterable[AccountRecord]) -> set[str]:
    normalized = (normalize_username(r.username) for r in records)
    return {u for u in normalized if u}


def compare(
    followers: Sequence[AccountRecord], following: Sequence[AccountRecord]
) -> ComparisonResult:
    """Classify accounts into not-following-back, not-followers-back and mutual.

    not_following_back and mutual_followers keep the followers order;
    not_followers_back keeps the following order. Records whose username
    normalizes to an empty string land in none of the lists but still count
    towards the totals.

    Args:
        followers: Accounts that follow the user.
        following: Accounts the user follows.

    Returns:
        A ComparisonResult with the three lists and their counts.
    """
    follower_usernames = _username_set(followers)
    following_usernames = _username_set(following)

    not_following_back = []
    mutual_followers = []
    for record in followers:
        normalized = normalize_username(record.username)
        if not normalized:
            continue
        if normalized in following_usernames:
            mutual_followers.append(record)
        else:
            not_following_back.append(record)

    not_followers_back = []
    for record in following:
        normalized = normalize_username(record.username)
        if normalized and normalized not in follower_usernames:
            not_followers_back.append(record)

    stats = ComparisonStats(
        total_followers=len(followers),
        total_following=len(following),
        mutual_count=len(mutual_followers),
        not_following_back_count=len(not_following_back),
        not_followers_back_count=len(not_followers_back),
    )
    return ComparisonResult(
        not_following_back=tuple(not_following_back),
        not_followers_back=tuple(not_followers_back),
        mutual_followers=tuple(mutual_followers),
        stats=stats,
    )
