"""Shared test fixtures."""

import pytest

from linkdinger.client import LinkdingClient

BASE_URL = "https://links.example.com"
API_URL = f"{BASE_URL}/api"


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Keep a developer's real Linkding settings out of the tests."""
    for name in ("LINKDING_URL", "LINKDING_API_TOKEN", "LINKDING_ALLOWED_USERS"):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def client():
    with LinkdingClient(BASE_URL, "test-token") as c:
        yield c


def make_bookmark(**overrides) -> dict:
    """A bookmark as returned by the Linkding API."""
    data = {
        "id": 1,
        "url": "https://example.com",
        "title": "Example Domain",
        "description": "This domain is for use in illustrative examples.",
        "notes": "",
        "web_archive_snapshot_url": None,
        "favicon_url": None,
        "preview_image_url": None,
        "is_archived": False,
        "unread": False,
        "shared": False,
        "tag_names": [],
        "date_added": "2025-02-10T18:30:00.000000Z",
        "date_modified": "2025-02-10T18:30:00.000000Z",
    }
    data.update(overrides)
    return data


def make_check(bookmark: dict | None = None, auto_tags: list[str] | None = None) -> dict:
    """A /bookmarks/check/ response."""
    return {
        "bookmark": bookmark,
        "metadata": {
            "title": "Example Domain",
            "description": "This domain is for use in illustrative examples.",
        },
        "auto_tags": auto_tags or [],
    }


@pytest.fixture
def bookmark_data() -> dict:
    return make_bookmark(tag_names=["a", "b"], notes="old note")


@pytest.fixture
def bookmark_list() -> dict:
    return {
        "count": 2,
        "next": None,
        "previous": None,
        "results": [
            make_bookmark(id=2, url="https://python.org", title="Python", tag_names=["python"]),
            make_bookmark(id=1, url="https://example.com", title="", tag_names=[]),
        ],
    }


@pytest.fixture
def tag_list() -> dict:
    return {
        "count": 2,
        "next": None,
        "previous": None,
        "results": [
            {"id": 1, "name": "python", "date_added": "2025-02-10T18:30:00Z"},
            {"id": 2, "name": "reading", "date_added": "2025-02-11T09:00:00Z"},
        ],
    }
