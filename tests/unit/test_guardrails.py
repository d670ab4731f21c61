"""Unit tests for query validation and request parsing."""

import pytest

from homesearch.errors import ValidationError
from homesearch.security.guardrails import (
    BUDGET_INVALID,
    LOCATION_INVALID,
    QUERY_REQUIRED,
    parse_search_request,
    validate_query,
)


class TestValidateQuery:
    def test_valid_query(self):
        ok, reason = validate_query("2 bedroom condo")
        assert ok is True
        assert reason is None

    def test_empty_query(self):
        ok, reason = validate_query("")
        assert ok is False
        assert reason == QUERY_REQUIRED

    def test_whitespace_only(self):
        ok, _ = validate_query("   \t ")
        assert ok is False

    def test_non_string(self):
        ok, _ = validate_query(42)
        assert ok is False

    def test_missing(self):
        ok, _ = validate_query(None)
        assert ok is False

    def test_too_long(self):
        ok, reason = validate_query("a" * 1000)
        assert ok is False
        assert "length" in reason.lower()


class TestParseSearchRequest:
    def test_query_only(self):
        req = parse_search_request({"query": "  loft  "})
        assert req.query == "loft"
        assert req.budget is None
        assert req.location is None

    def test_all_fields(self):
        req = parse_search_request(
            {"query": "2 bedroom condo", "budget": 450000, "location": " Austin, TX "}
        )
        assert req.budget == 450000
        assert req.location == "Austin, TX"

    def test_numeric_string_budget(self):
        req = parse_search_request({"query": "house", "budget": "300000"})
        assert req.budget == 300000

    def test_integral_float_budget(self):
        req = parse_search_request({"query": "house", "budget": 300000.0})
        assert req.budget == 300000

    @pytest.mark.parametrize("budget", [None, ""])
    def test_blank_budget_is_absent(self, budget):
        req = parse_search_request({"query": "house", "budget": budget})
        assert req.budget is None

    @pytest.mark.parametrize("budget", [0, -5, "abc", 12.5, True, [1]])
    def test_invalid_budget(self, budget):
        with pytest.raises(ValidationError, match=BUDGET_INVALID):
            parse_search_request({"query": "house", "budget": budget})

    def test_blank_location_is_absent(self):
        req = parse_search_request({"query": "house", "location": "   "})
        assert req.location is None

    def test_invalid_location(self):
        with pytest.raises(ValidationError, match=LOCATION_INVALID):
            parse_search_request({"query": "house", "location": 12})

    @pytest.mark.parametrize("payload", [{}, {"query": ""}, {"query": "  "}, [], "loft", None])
    def test_missing_query(self, payload):
        with pytest.raises(ValidationError, match=QUERY_REQUIRED):
            parse_search_request(payload)

    def test_query_checked_before_budget(self):
        with pytest.raises(ValidationError, match=QUERY_REQUIRED):
            parse_search_request({"query": "", "budget": "abc"})
