"""Tests for text and source sanitization."""

from valuation_mcp.utils.sanitize import sanitize_sources, text_list, text_or_default


class TestTextOrDefault:
    """Tests for text_or_default function."""

    def test_none_uses_fallback(self) -> None:
        assert text_or_default(None, "N/A") == "N/A"

    def test_empty_uses_fallback(self) -> None:
        assert text_or_default("", "Last Year") == "Last Year"

    def test_text_unchanged(self) -> None:
        """Text passes through untouched, whitespace and unicode included."""
        text = "  กรณีฐาน\nline two "
        assert text_or_default(text) == text

    def test_number_stringified(self) -> None:
        assert text_or_default(2024) == "2024"

    def test_default_fallback_is_empty(self) -> None:
        assert text_or_default(None) == ""


class TestTextList:
    """Tests for text_list function."""

    def test_list_of_strings(self) -> None:
        assert text_list(["a", "b"]) == ["a", "b"]

    def test_non_list(self) -> None:
        assert text_list("a") == []
        assert text_list(None) == []

    def test_items_coerced_and_nones_dropped(self) -> None:
        assert text_list([1, None, "x"]) == ["1", "x"]


class TestSanitizeSources:
    """Tests for sanitize_sources function."""

    def test_plain_entries(self) -> None:
        entries = [{"title": "10-K", "uri": "https://example.com/a"}]
        assert sanitize_sources(entries) == entries

    def test_grounding_chunks(self) -> None:
        chunks = [{"web": {"title": "News", "uri": "https://example.com/n"}}, {"retrieved": {}}]
        assert sanitize_sources(chunks) == [{"title": "News", "uri": "https://example.com/n"}]

    def test_drops_incomplete(self) -> None:
        entries = [
            {"title": "", "uri": "https://example.com/a"},
            {"title": "No uri"},
            {"title": 3, "uri": "https://example.com/b"},
            "https://example.com/c",
        ]
        assert sanitize_sources(entries) == []

    def test_dedupes_by_uri_keeping_first(self) -> None:
        entries = [
            {"title": "First", "uri": "https://example.com/a"},
            {"title": "Other", "uri": "https://example.com/b"},
            {"title": "Second", "uri": "https://example.com/a"},
        ]
        result = sanitize_sources(entries)
        assert [s["title"] for s in result] == ["First", "Other"]

    def test_extra_keys_dropped(self) -> None:
        entries = [{"title": "T", "uri": "u", "snippet": "..."}]
        assert sanitize_sources(entries) == [{"title": "T", "uri": "u"}]

    def test_non_list(self) -> None:
        assert sanitize_sources(None) == []
        assert sanitize_sources({"title": "T", "uri": "u"}) == []
