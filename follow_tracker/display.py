"""Formatting helpers shared by the CLI and the TUI."""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Iterable

from follow_tracker.comparison import normalize_username
from follow_tracker.export_formats import AccountRecord, ComparisonResult

# CLI name -> (ComparisonResult attribute, title)
CATEGORIES: dict[str, tuple[str, str]] = {
    "not-following-back": (
        "not_following_back",
        "They Follow You (You Don't Follow Back)",
    ),
    "not-followers-back": (
        "not_followers_back",
        "You Follow Them (They Don't Follow Back)",
    ),
    "mutual": ("mutual_followers", "Mutual Followers"),
}

CATEGORY_CHOICES = list(CATEGORIES)


def truncate(text: str, max_len: int = 50) -> str:
    """Truncate text with ellipsis."""
    if len(text) <= max_len:
        return text
    return text[:max_len - 3] + "..."


def format_timestamp(timestamp: int | None) -> str:
    """Render an epoch-seconds timestamp as a UTC date, or '-' if unknown."""
    if timestamp is None:
        return "-"
    try:
        return datetime.fromtimestamp(timestamp, tz=timezone.utc).strftime("%Y-%m-%d")
    except (OverflowError, OSError, ValueError):
        return "-"


def get_category(result: ComparisonResult, category: str) -> tuple[AccountRecord, ...]:
    """Return the accounts for a CLI category name."""
    if category not in CATEGORIES:
        raise ValueError(
            f"Unknown category '{category}'. "
            f"Choices: {', '.join(CATEGORY_CHOICES)}"
        )
    attr, _ = CATEGORIES[category]
    return getattr(result, attr)


def filter_accounts(accounts: Iterable[AccountRecord], query: str) -> list[AccountRecord]:
    """Keep accounts whose username or full name contains query (case-insensitive)."""
    needle = normalize_username(query)
    if not needle:
        return list(accounts)
    matches = []
    for account in accounts:
        haystack = account.username.lower()
        if account.full_name:
            haystack += " " + account.full_name.lower()
        if needle in haystack:
            matches.append(account)
    return matches


def format_summary(result: ComparisonResult) -> list[str]:
    """Summary lines, in the order they are shown to the user."""
    stats = result.stats
    return [
        f"You have {stats.total_followers:,} followers",
        f"You follow {stats.total_following:,} people",
        f"{stats.mutual_count:,} mutual connections",
        f"{stats.not_followers_back_count:,} don't follow you back",
        f"{stats.not_following_back_count:,} you could follow back",
    ]
