"""Node implementations for the search graph.

Each node receives the full ``PipelineState`` and returns a *partial* dict
with only the keys it updates.  Nodes raise on failure; LangGraph propagates
the exception out of ``invoke`` and nothing partial is returned.
"""

from typing import Any, Dict, Optional

from homesearch.agent.results import (
    NO_RESULTS_SUMMARY,
    normalize_listings,
    templated_summary_for,
)
from homesearch.agent.state import Branch, PipelineState
from homesearch.llm.summarizer import ListingSummarizer
from homesearch.models import PipelineResponse
from homesearch.utils.config import Capabilities
from homesearch.utils.logger import get_logger
from homesearch.web.query_builder import build_search_query
from homesearch.web.search_provider import ListingProvider

log = get_logger(__name__)


class PipelineNodes:
    """Stage functions bound to the collaborators of one pipeline."""

    def __init__(
        self,
        searcher: ListingProvider,
        capabilities: Capabilities,
        summarizer: Optional[ListingSummarizer] = None,
    ):
        self.searcher = searcher
        self.capabilities = capabilities
        self.summarizer = summarizer

    # ---- Nodes -----------------------------------------------------------

    def build_query(self, state: PipelineState) -> Dict[str, Any]:
        req = state["request"]
        search_query = build_search_query(req.query, req.budget, req.location)
        log.info("Built search query: %s", search_query)
        return {"search_query": search_query}

    def fetch_listings(self, state: PipelineState) -> Dict[str, Any]:
        """One call to the listing provider; normalise what comes back."""
        listings = self.searcher.search(state["search_query"])
        log.info("%s returned %d listings", self.searcher.name, len(listings))
        return {"listings": listings, "results": normalize_listings(listings)}

    def route(self, state: PipelineState) -> Branch:
        """Conditional edge: pick the summary branch."""
        if not state.get("listings"):
            return "no_results"
        if not self.capabilities.has_summary_credential or self.summarizer is None:
            return "templated"
        return "summarize"

    def no_results(self, state: PipelineState) -> Dict[str, Any]:
        log.info("No listings found -- skipping summarizer")
        return {"branch": "no_results", "summary": NO_RESULTS_SUMMARY, "results": []}

    def templated_summary(self, state: PipelineState) -> Dict[str, Any]:
        log.info("Summarizer not configured -- using templated summary")
        summary = templated_summary_for(state["request"], len(state["results"]))
        return {"branch": "templated", "summary": summary}

    def summarize(self, state: PipelineState) -> Dict[str, Any]:
        log.info("Summarizing %d listings via %s", len(state["results"]), self.summarizer.model)
        summary = self.summarizer.summarize(state["request"], state["results"])
        return {"branch": "summarize", "summary": summary}

    def assemble(self, state: PipelineState) -> Dict[str, Any]:
        response = PipelineResponse(
            summary=state["summary"],
            results=list(state.get("results") or []),
        )
        log.info("Done -- branch=%s, results=%d", state.get("branch"), len(response.results))
        return {"response": response}
