"""Tests for URL / hashtag / note extraction."""

import pytest

from linkdinger.extractor import extract, extract_hashtags, extract_note, extract_urls


class TestExtractUrls:
    def test_single_url(self):
        assert extract_urls("https://example.com") == ["https://example.com"]

    def test_http_and_https(self):
        text = "http://a.example/x and https://b.example/y"
        assert extract_urls(text) == ["http://a.example/x", "https://b.example/y"]

    def test_scheme_is_case_insensitive(self):
        assert extract_urls("HTTPS://Example.com/Path") == ["HTTPS://Example.com/Path"]

    def test_no_normalisation(self):
        assert extract_urls("https://Example.com/") == ["https://Example.com/"]

    def test_stops_at_forbidden_characters(self):
        assert extract_urls('<https://example.com/a>') == ["https://example.com/a"]
        assert extract_urls('"https://example.com/b"') == ["https://example.com/b"]
        assert extract_urls("[https://example.com/c]") == ["https://example.com/c"]

    def test_duplicates_preserved_in_order(self):
        text = "https://b.example https://a.example https://b.example"
        assert extract_urls(text) == [
            "https://b.example",
            "https://a.example",
            "https://b.example",
        ]

    @pytest.mark.parametrize(
        "text",
        ["", "just words", "#tag only", "ftp://example.com", "example.com", "https:/broken"],
    )
    def test_no_urls(self, text):
        assert extract_urls(text) == []


class TestExtractHashtags:
    def test_strips_hash(self):
        assert extract_hashtags("#tech #reading") == ["tech", "reading"]

    def test_duplicates_preserved(self):
        assert extract_hashtags("#a #b #a") == ["a", "b", "a"]

    def test_word_characters_only(self):
        assert extract_hashtags("#c++ #foo-bar #snake_case #v2") == ["c", "foo", "snake_case", "v2"]

    def test_lone_hash_ignored(self):
        assert extract_hashtags("# heading") == []


class TestExtractNote:
    def test_removes_urls_and_tags(self):
        text = "https://example.com Great article #programming"
        assert extract_note(text, ["https://example.com"]) == "Great article"

    def test_empty_becomes_none(self):
        assert extract_note("https://example.com  #a ", ["https://example.com"]) is None

    def test_removes_first_occurrence_per_match(self):
        text = "https://x.example https://x.example note"
        assert extract_note(text, ["https://x.example"]) == "https://x.example note"


class TestExtract:
    def test_url_with_tags(self):
        result = extract("https://example.com #tech #reading")
        assert result.urls == ["https://example.com"]
        assert result.tags == ["tech", "reading"]
        assert result.note is None

    def test_url_with_note_and_tag(self):
        result = extract("https://example.com Great article #programming")
        assert result.urls == ["https://example.com"]
        assert result.tags == ["programming"]
        assert result.note == "Great article"

    def test_tags_and_note_without_urls(self):
        result = extract("nothing to save #idea")
        assert result.urls == []
        assert result.tags == ["idea"]
        assert result.note == "nothing to save"

    def test_multiple_urls_share_tags_and_note(self):
        result = extract("https://a.example read later https://b.example #queue")
        assert result.urls == ["https://a.example", "https://b.example"]
        assert result.tags == ["queue"]
        assert result.note == "read later"

    def test_fragment_in_url_is_also_a_tag(self):
        result = extract("https://example.com/#intro")
        assert result.urls == ["https://example.com/#intro"]
        assert result.tags == ["intro"]
        assert result.note is None

    def test_empty_string(self):
        result = extract("")
        assert result.urls == []
        assert result.tags == []
        assert result.note is None
