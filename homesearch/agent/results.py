"""Response assembly -- provider field normalisation and fixed summaries."""

from typing import Any, Iterable, List, Optional, Sequence

from homesearch.models import NormalizedResult, RawListing, SearchRequest

NO_RESULTS_SUMMARY = (
    "No properties found matching your criteria. "
    "Try adjusting your search terms or location."
)
DEFAULT_TITLE = "Property Listing"
DEFAULT_SNIPPET = "No description available"
DEFAULT_URL = "#"


def _first_text(listing: RawListing, keys: Sequence[str], default: str) -> str:
    """Return the first non-blank string among *keys*, else *default*."""
    for key in keys:
        value: Any = listing.get(key)
        if isinstance(value, str) and value.strip():
            return value.strip()
    return default


def normalize_listing(listing: RawListing) -> NormalizedResult:
    return NormalizedResult(
        title=_first_text(listing, ("name",), DEFAULT_TITLE),
        snippet=_first_text(listing, ("content", "snippet"), DEFAULT_SNIPPET),
        url=_first_text(listing, ("url",), DEFAULT_URL),
    )


def normalize_listings(listings: Iterable[RawListing]) -> List[NormalizedResult]:
    """Normalise in provider order."""
    return [normalize_listing(item) for item in listings]


def templated_summary(
    count: int,
    query: str,
    location: Optional[str] = None,
    budget: Optional[int] = None,
) -> str:
    """Deterministic summary used when no summarizer is configured."""
    text = f'Found {count} properties matching your search for "{query}"'
    if location:
        text += f" in {location}"
    if budget:
        text += f" with a budget of ${budget}"
    return text + "."


def templated_summary_for(request: SearchRequest, count: int) -> str:
    return templated_summary(count, request.query, request.location, request.budget)
