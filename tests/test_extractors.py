"""Tests for follow_tracker/export_formats/extractors.py."""

from __future__ import annotations

from follow_tracker.export_formats import AccountRecord, extract_followers, extract_following


class TestExtractFollowers:
    """Tests for extract_followers()."""

    def test_sample_export(self, followers_export):
        """Extract every account of the sample export, in order."""
        records = extract_followers(followers_export)
        assert [r.username for r in records] == ["alice", "bob", "Carol", "dave"]
        assert records[0].timestamp == 1700000000
        assert records[0].full_name is None

    def test_drops_malformed_entry(self, make_follower):
        """One good entry plus one without string_list_data yields one record."""
        data = [make_follower("bob", 100), {"title": "", "media_list_data": []}]
        assert extract_followers(data) == [AccountRecord(username="bob", timestamp=100)]

    def test_drops_various_malformed_entries(self, make_follower):
        """Entries without a usable value are skipped, order is kept."""
        data = [
            make_follower("first"),
            {"string_list_data": []},
            {"string_list_data": ["not a dict"]},
            {"string_list_data": [{"href": "https://www.instagram.com/x"}]},
            {"string_list_data": [{"value": ""}]},
            {"string_list_data": [{"value": 12345}]},
            {"string_list_data": "nope"},
            "plain string",
            None,
            42,
            make_follower("last"),
        ]
        assert [r.username for r in extract_followers(data)] == ["first", "last"]

    def test_uses_first_string_list_item(self):
        """Only the first string_list_data item is used."""
        data = [{"string_list_data": [{"value": "one"}, {"value": "two"}]}]
        assert [r.username for r in extract_followers(data)] == ["one"]

    def test_missing_timestamp(self, make_follower):
        """Timestamp is optional."""
        assert extract_followers([make_follower("bob")])[0].timestamp is None

    def test_invalid_timestamps_dropped(self):
        """Non-integer and zero timestamps become None."""
        data = [
            {"string_list_data": [{"value": "a", "timestamp": "100"}]},
            {"string_list_data": [{"value": "b", "timestamp": 0}]},
            {"string_list_data": [{"value": "c", "timestamp": True}]},
        ]
        assert [r.timestamp for r in extract_followers(data)] == [None, None, None]

    def test_username_kept_as_is(self, make_follower):
        """Extraction does not normalize usernames."""
        assert extract_followers([make_follower(" Bob ")])[0].username == " Bob "

    def test_non_list_input(self):
        """Non-array input yields an empty list."""
        assert extract_followers({"relationships_following": []}) == []
        assert extract_followers(None) == []
        assert extract_followers("text") == []

    def test_empty_list(self):
        assert extract_followers([]) == []


class TestExtractFollowing:
    """Tests for extract_following()."""

    def test_sample_export(self, following_export):
        """Extract every account of the sample export, in order."""
        records = extract_following(following_export)
        assert records == [
            AccountRecord(username="carol", timestamp=1700000500),
            AccountRecord(username="alice", timestamp=1700000600),
            AccountRecord(username="erin", timestamp=1700000700),
            AccountRecord(username="frank"),
        ]

    def test_title_takes_priority(self):
        """With both title and string_list_data, the title is the username."""
        data = {
            "relationships_following": [
                {
                    "title": "from_title",
                    "string_list_data": [{"value": "from_value", "timestamp": 5}],
                }
            ]
        }
        assert extract_following(data) == [AccountRecord(username="from_title", timestamp=5)]

    def test_title_timestamp_falls_back_to_sibling(self):
        """Title entries without a nested timestamp use the sibling timestamp."""
        data = {
            "relationships_following": [
                {"title": "a", "string_list_data": [{"href": "x"}], "timestamp": 7},
                {"title": "b", "timestamp": 8},
                {"title": "c"},
            ]
        }
        assert [r.timestamp for r in extract_following(data)] == [7, 8, None]

    def test_empty_title_falls_through_to_value(self):
        """An empty title does not count; the nested value is used."""
        data = {
            "relationships_following": [
                {"title": "", "string_list_data": [{"value": "bob", "timestamp": 9}]}
            ]
        }
        assert extract_following(data) == [AccountRecord(username="bob", timestamp=9)]

    def test_plain_string_entry(self):
        """A plain string entry is the username with no timestamp."""
        data = {"relationships_following": ["dave"]}
        assert extract_following(data) == [AccountRecord(username="dave")]

    def test_drops_unmatched_entries(self):
        """Entries matching no pattern are dropped without raising."""
        data = {
            "relationships_following": [
                {"title": "keep"},
                {},
                {"title": ""},
                {"string_list_data": [{"href": "no value"}]},
                {"string_list_data": []},
                "",
                None,
                7,
                ["nested"],
                "also_keep",
            ]
        }
        assert [r.username for r in extract_following(data)] == ["keep", "also_keep"]

    def test_numeric_title_stringified(self):
        """Non-empty numeric titles name the account; false-y scalars do not."""
        data = {
            "relationships_following": [
                {"title": 123, "timestamp": 4},
                {"title": 0, "string_list_data": [{"value": "zero_title"}]},
                {"title": True},
                {"title": {"nested": "x"}},
            ]
        }
        assert extract_following(data) == [
            AccountRecord(username="123", timestamp=4),
            AccountRecord(username="zero_title"),
        ]

    def test_missing_key(self):
        """Objects without relationships_following yield nothing."""
        assert extract_following({"relationships_followers": ["a"]}) == []

    def test_key_not_a_list(self):
        assert extract_following({"relationships_following": "a"}) == []

    def test_non_object_input(self, followers_export):
        """A followers array is not a following export."""
        assert extract_following(followers_export) == []
        assert extract_following(None) == []
