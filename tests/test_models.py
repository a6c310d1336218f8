"""Tests for follow_tracker/export_formats/models.py."""

from __future__ import annotations

import dataclasses

import pytest

from follow_tracker import AccountRecord, compare


class TestAccountRecord:
    """Tests for AccountRecord."""

    def test_empty_username_rejected(self):
        """A record is never built without a username."""
        with pytest.raises(ValueError, match="non-empty username"):
            AccountRecord(username="")

    def test_non_string_username_rejected(self):
        with pytest.raises(ValueError):
            AccountRecord(username=None)

    def test_frozen(self):
        """Records are immutable."""
        record = AccountRecord(username="bob")
        with pytest.raises(dataclasses.FrozenInstanceError):
            record.username = "carol"

    def test_to_dict_omits_unset_fields(self):
        assert AccountRecord(username="bob").to_dict() == {"username": "bob"}

    def test_to_dict_full(self):
        record = AccountRecord(username="bob", full_name="Bob B", timestamp=100)
        assert record.to_dict() == {"username": "bob", "full_name": "Bob B", "timestamp": 100}


class TestComparisonResult:
    """Tests for ComparisonResult.to_dict()."""

    def test_to_dict(self):
        result = compare(
            [AccountRecord(username="bob", timestamp=100)],
            [AccountRecord(username="carol", timestamp=200)],
        )
        assert result.to_dict() == {
            "not_following_back": [{"username": "bob", "timestamp": 100}],
            "not_followers_back": [{"username": "carol", "timestamp": 200}],
            "mutual_followers": [],
            "stats": {
                "total_followers": 1,
                "total_following": 1,
                "mutual_count": 0,
                "not_following_back_count": 1,
                "not_followers_back_count": 1,
            },
        }
