"""Tests for building models from Linkding JSON."""

from datetime import timezone

import pytest
from conftest import make_bookmark, make_check

from linkdinger.errors import MalformedResponse
from linkdinger.models import Bookmark, BookmarkPage, CheckResult, Tag, TagPage


class TestBookmark:
    def test_from_dict(self):
        b = Bookmark.from_dict(make_bookmark(tag_names=["x"], unread=True))
        assert b.id == 1
        assert b.tag_names == ["x"]
        assert b.unread is True
        assert b.date_added.tzinfo == timezone.utc
        assert b.date_added.hour == 18

    def test_null_text_fields_become_empty(self):
        b = Bookmark.from_dict(make_bookmark(title=None, notes=None, tag_names=None))
        assert b.title == ""
        assert b.notes == ""
        assert b.tag_names == []

    def test_bad_timestamp_is_none(self):
        assert Bookmark.from_dict(make_bookmark(date_added="yesterday")).date_added is None

    def test_string_tag_names_rejected(self):
        with pytest.raises(MalformedResponse, match="tag_names"):
            Bookmark.from_dict(make_bookmark(tag_names="abc"))

    def test_non_string_tag_rejected(self):
        with pytest.raises(MalformedResponse, match="tag_names"):
            Bookmark.from_dict(make_bookmark(tag_names=["ok", 3]))

    def test_missing_id(self):
        data = make_bookmark()
        del data["id"]
        with pytest.raises(MalformedResponse, match="'id'"):
            Bookmark.from_dict(data)


class TestCheckResult:
    def test_unknown_url(self):
        result = CheckResult.from_dict(make_check(auto_tags=["a"]))
        assert result.bookmark is None
        assert result.auto_tags == ["a"]
        assert result.metadata.description.startswith("This domain")

    def test_missing_optional_sections(self):
        result = CheckResult.from_dict({"bookmark": None})
        assert result.metadata.title == ""
        assert result.auto_tags == []

    def test_auto_tags_must_be_a_list(self):
        data = make_check()
        data["auto_tags"] = "news"
        with pytest.raises(MalformedResponse, match="auto_tags"):
            CheckResult.from_dict(data)

    def test_not_an_object(self):
        with pytest.raises(MalformedResponse):
            CheckResult.from_dict(["nope"])


class TestPages:
    def test_bookmark_page(self, bookmark_list):
        page = BookmarkPage.from_dict(bookmark_list)
        assert page.count == 2
        assert page.next is None
        assert page.results[0].title == "Python"

    def test_tag_page(self, tag_list):
        page = TagPage.from_dict(tag_list)
        assert [t.name for t in page.results] == ["python", "reading"]
        assert isinstance(page.results[0], Tag)

    def test_results_must_be_a_list(self):
        with pytest.raises(MalformedResponse, match="results"):
            BookmarkPage.from_dict({"count": 1, "results": "oops"})
        with pytest.raises(MalformedResponse, match="results"):
            TagPage.from_dict({"count": 0, "results": None})

    def test_page_without_results(self):
        with pytest.raises(MalformedResponse, match="results"):
            TagPage.from_dict({"count": 0})
