"""
Canonical record types for follower/following exports.

Both Instagram export shapes are normalized into AccountRecord before any
comparison happens. ComparisonResult is the only thing the hosts (CLI, TUI)
ever render.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any


@dataclass(frozen=True)
class AccountRecord:
    """A single account from an export.

    Attributes:
        username: Non-empty identifier exactly as found in the export.
        full_name: Display name, when the export carries one.
        timestamp: When the relationship was recorded (epoch seconds).
    """

    username: str
    full_name: str | None = None
    timestamp: int | None = None

    def __post_init__(self) -> None:
        if not isinstance(self.username, str) or not self.username:
            raise ValueError("AccountRecord requires a non-empty username")

    def to_dict(self) -> dict[str, Any]:
        """Return a JSON-serializable dict, omitting unset optional fields."""
        data: dict[str, Any] = {"username": self.username}
        if self.full_name is not None:
            data["full_name"] = self.full_name
        if self.timestamp is not None:
            data["timestamp"] = self.timestamp
        return data


@dataclass(frozen=True)
class ComparisonStats:
    total_followers: int
    total_following: int
    mutual_count: int
    not_following_back_count: int
    not_followers_back_count: int

    def to_dict(self) -> dict[str, int]:
        return {
            "total_followers": self.total_followers,
            "total_following": self.total_following,
            "mutual_count": self.mutual_count,
            "not_following_back_count": self.not_following_back_count,
            "not_followers_back_count": self.not_followers_back_count,
        }


@dataclass(frozen=True)
class ComparisonResult:
    """Outcome of comparing a followers list against a following list.

    Note: mutual_followers is drawn from the followers side only. When the
    same account appears in both exports with different full_name/timestamp
    values, the followers-side record is the one kept.

    Attributes:
        not_following_back: Followers the user does not follow back.
        not_followers_back: Accounts the user follows that do not follow back.
        mutual_followers: Followers the user also follows.
        stats: Summary counts.
    """

    not_following_back: tuple[AccountRecord, ...] = field(default_factory=tuple)
    not_followers_back: tuple[AccountRecord, ...] = field(default_factory=tuple)
    mutual_followers: tuple[AccountRecord, ...] = field(default_factory=tuple)
    stats: ComparisonStats = field(
        default_factory=lambda: ComparisonStats(0, 0, 0, 0, 0)
    )

    def to_dict(self) -> dict[str, Any]:
        """Return the result as plain JSON-serializable data."""
        return {
            "not_following_back": [r.to_dict() for r in self.not_following_back],
            "not_followers_back": [r.to_dict() for r in self.not_followers_back],
            "mutual_followers": [r.to_dict() for r in self.mutual_followers],
            "stats": self.stats.to_dict(),
        }
