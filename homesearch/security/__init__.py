"""Security module -- input validation."""

from homesearch.security.guardrails import (
    check_search_request,
    parse_search_request,
    validate_query,
)

__all__ = ["check_search_request", "parse_search_request", "validate_query"]
