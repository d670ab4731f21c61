"""Pipeline state schema -- the single TypedDict that flows through every node."""

from typing import List, Literal, Optional, TypedDict

from homesearch.models import NormalizedResult, PipelineResponse, RawListing, SearchRequest

Branch = Literal["no_results", "templated", "summarize"]


class PipelineState(TypedDict, total=False):
    """State carried across the LangGraph state machine.

    Every node receives the full state and returns a *partial* dict with only
    the keys it wants to update.  A fresh state is built for every request.
    """

    # Input
    request: SearchRequest

    # Query builder
    search_query: str

    # Listing provider
    listings: List[RawListing]
    results: List[NormalizedResult]

    # Summary (one of the three branches fills this)
    branch: Branch
    summary: Optional[str]

    # Output
    response: Optional[PipelineResponse]
