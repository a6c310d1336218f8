"""Pytest configuration and shared fixtures for follow_tracker tests."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

import pytest

# Path to fixtures directory
FIXTURES_DIR = Path(__file__).parent / "fixtures"


@pytest.fixture
def fixtures_dir() -> Path:
    """Return path to fixtures directory."""
    return FIXTURES_DIR


@pytest.fixture
def followers_path() -> Path:
    """Return path to the sample followers export."""
    return FIXTURES_DIR / "followers_1.json"


@pytest.fixture
def following_path() -> Path:
    """Return path to the sample following export."""
    return FIXTURES_DIR / "following.json"


@pytest.fixture
def followers_export(followers_path) -> list[dict[str, Any]]:
    """Return the parsed sample followers export."""
    return json.loads(followers_path.read_text(encoding="utf-8"))


@pytest.fixture
def following_export(following_path) -> dict[str, Any]:
    """Return the parsed sample following export."""
    return json.loads(following_path.read_text(encoding="utf-8"))


def follower_entry(username: str, timestamp: int | None = None) -> dict[str, Any]:
    """Helper to build one followers_1.json entry."""
    item: dict[str, Any] = {
        "href": f"https://www.instagram.com/{username}",
        "value": username,
    }
    if timestamp is not None:
        item["timestamp"] = timestamp
    return {"title": "", "media_list_data": [], "string_list_data": [item]}


def following_entry(username: str, timestamp: int | None = None) -> dict[str, Any]:
    """Helper to build one relationships_following entry keyed by title."""
    item: dict[str, Any] = {"href": f"https://www.instagram.com/_u/{username}"}
    if timestamp is not None:
        item["timestamp"] = timestamp
    return {"title": username, "string_list_data": [item]}


def write_json(path: Path, data: Any, bom: bool = False) -> Path:
    """Helper to write data as a JSON export file."""
    text = json.dumps(data, ensure_ascii=False)
    if bom:
        text = "\ufeff" + text
    path.write_text(text, encoding="utf-8")
    return path


@pytest.fixture
def make_follower():
    """Return the follower_entry helper."""
    return follower_entry


@pytest.fixture
def make_following():
    """Return the following_entry helper."""
    return following_entry


@pytest.fixture
def write_export(tmp_path):
    """Return a helper that writes data to tmp_path/<name> as JSON."""
    def _write(name: str, data: Any, bom: bool = False) -> Path:
        return write_json(tmp_path / name, data, bom=bom)
    return _write
