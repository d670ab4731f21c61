"""Unit tests for listing normalisation and fixed summaries."""

from homesearch.agent.results import (
    DEFAULT_SNIPPET,
    DEFAULT_TITLE,
    DEFAULT_URL,
    normalize_listing,
    normalize_listings,
    templated_summary,
)
from homesearch.models import NormalizedResult


class TestNormalizeListing:
    def test_all_fields_present(self):
        item = normalize_listing(
            {"name": "Sunny Loft", "content": "Two bed loft", "url": "https://x.test/1"}
        )
        assert item == NormalizedResult("Sunny Loft", "Two bed loft", "https://x.test/1")

    def test_snippet_falls_back_to_snippet_field(self):
        item = normalize_listing({"name": "A", "snippet": "short text", "url": "u"})
        assert item.snippet == "short text"

    def test_content_wins_over_snippet(self):
        item = normalize_listing({"content": "long text", "snippet": "short text"})
        assert item.snippet == "long text"

    def test_everything_missing(self):
        item = normalize_listing({})
        assert item.title == "Property Listing"
        assert item.snippet == "No description available"
        assert item.url == "#"

    def test_blank_and_non_string_values_use_fallbacks(self):
        item = normalize_listing({"name": "  ", "content": None, "snippet": 7, "url": ""})
        assert item == NormalizedResult(DEFAULT_TITLE, DEFAULT_SNIPPET, DEFAULT_URL)

    def test_order_preserved(self):
        items = normalize_listings([{"name": "first"}, {"name": "second"}, {"name": "third"}])
        assert [i.title for i in items] == ["first", "second", "third"]


class TestTemplatedSummary:
    def test_query_only(self):
        assert templated_summary(2, "loft") == (
            'Found 2 properties matching your search for "loft".'
        )

    def test_with_location_and_budget(self):
        text = templated_summary(3, "2 bedroom condo", "Austin, TX", 450000)
        assert text == (
            'Found 3 properties matching your search for "2 bedroom condo"'
            " in Austin, TX with a budget of $450000."
        )

    def test_deterministic(self):
        args = (5, "house", "Denver", 300000)
        assert templated_summary(*args) == templated_summary(*args)

    def test_absent_hints_not_rendered(self):
        text = templated_summary(1, "house")
        for marker in ("undefined", "null", "None", " in ", "budget"):
            assert marker not in text
