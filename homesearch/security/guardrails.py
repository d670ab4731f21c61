"""Input validation for inbound search requests."""

from typing import Any, Optional, Tuple

from homesearch.errors import ValidationError
from homesearch.models import SearchRequest
from homesearch.utils.config import settings

QUERY_REQUIRED = "Query is required"
BUDGET_INVALID = "Budget must be a positive integer"
LOCATION_INVALID = "Location must be text"


def validate_query(query: Any) -> Tuple[bool, Optional[str]]:
    """Validate presence, type and length of a user query."""
    if not isinstance(query, str) or not query.strip():
        return False, QUERY_REQUIRED
    if len(query) > settings.max_query_length:
        return False, f"Query exceeds max length ({settings.max_query_length} chars)."
    return True, None


def _parse_budget(value: Any) -> Optional[int]:
    if value is None or value == "":
        return None
    # bool is an int subclass; reject it explicitly.
    if isinstance(value, bool):
        raise ValidationError(BUDGET_INVALID)
    if isinstance(value, float):
        if not value.is_integer():
            raise ValidationError(BUDGET_INVALID)
        value = int(value)
    elif isinstance(value, str):
        try:
            value = int(value.strip())
        except ValueError:
            raise ValidationError(BUDGET_INVALID) from None
    elif not isinstance(value, int):
        raise ValidationError(BUDGET_INVALID)
    if value <= 0:
        raise ValidationError(BUDGET_INVALID)
    return value


def _parse_location(value: Any) -> Optional[str]:
    if value is None:
        return None
    if not isinstance(value, str):
        raise ValidationError(LOCATION_INVALID)
    return value.strip() or None


def parse_search_request(payload: Any) -> SearchRequest:
    """Turn a decoded JSON body into a ``SearchRequest``.

    The query is checked first so an empty query always yields the same
    message regardless of the other fields.
    """
    if not isinstance(payload, dict):
        raise ValidationError(QUERY_REQUIRED)

    ok, reason = validate_query(payload.get("query"))
    if not ok:
        raise ValidationError(reason)

    return SearchRequest(
        query=payload["query"].strip(),
        budget=_parse_budget(payload.get("budget")),
        location=_parse_location(payload.get("location")),
    )


def check_search_request(request: SearchRequest) -> None:
    """Re-check a ``SearchRequest`` built without ``parse_search_request``."""
    ok, reason = validate_query(request.query)
    if not ok:
        raise ValidationError(reason)
    budget = request.budget
    if budget is not None and (isinstance(budget, bool) or not isinstance(budget, int) or budget <= 0):
        raise ValidationError(BUDGET_INVALID)
    if request.location is not None and not isinstance(request.location, str):
        raise ValidationError(LOCATION_INVALID)
