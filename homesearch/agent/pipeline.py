"""Top-level search pipeline: validation, configuration checks, graph run."""

from typing import Any, Optional

from homesearch.agent.graph import build_graph
from homesearch.agent.nodes import PipelineNodes
from homesearch.agent.state import PipelineState
from homesearch.errors import ConfigurationError
from homesearch.llm.summarizer import ListingSummarizer
from homesearch.models import PipelineResponse, SearchRequest
from homesearch.security.guardrails import check_search_request, parse_search_request
from homesearch.utils.config import Capabilities, settings
from homesearch.utils.logger import get_logger
from homesearch.web.linkup_search import LinkupSearch
from homesearch.web.search_provider import ListingProvider

log = get_logger(__name__)


class SearchPipeline:
    """Answers a ``SearchRequest`` with a ``PipelineResponse``.

    Collaborators are created from ``settings`` unless passed in.  The
    capability descriptor decides, once, whether searching is possible at all
    and whether the LLM summary stage runs.  Instances hold no per-request
    state, so one pipeline can serve concurrent requests.
    """

    def __init__(
        self,
        searcher: Optional[ListingProvider] = None,
        summarizer: Optional[ListingSummarizer] = None,
        capabilities: Optional[Capabilities] = None,
    ):
        self.capabilities = capabilities or Capabilities.from_settings(settings)

        if searcher is None and self.capabilities.has_listing_credential:
            searcher = LinkupSearch()
        if summarizer is None and self.capabilities.has_summary_credential:
            summarizer = ListingSummarizer()

        self._searcher = searcher
        self._graph = None
        if searcher is not None:
            self._graph = build_graph(
                PipelineNodes(searcher, self.capabilities, summarizer)
            )

    def search(self, request: SearchRequest) -> PipelineResponse:
        """Run one request end to end.

        Raises ``ValidationError`` for an empty query or a non-positive budget
        and ``ConfigurationError`` when no listing credential is configured,
        both before any network call, and ``ProviderError`` when either outbound
        call fails.
        """
        check_search_request(request)

        if not self.capabilities.has_listing_credential or self._graph is None:
            log.error("LINKUP_API_KEY is not configured")
            raise ConfigurationError(
                "Search service is not configured. Please add your LINKUP_API_KEY."
            )

        log.info("Search request: query=%r location=%r budget=%r",
                 request.query, request.location, request.budget)
        initial_state: PipelineState = {"request": request, "summary": None, "response": None}
        result = self._graph.invoke(initial_state)
        return result["response"]

    def search_payload(self, payload: Any) -> PipelineResponse:
        """Validate a decoded JSON body, then search."""
        return self.search(parse_search_request(payload))
