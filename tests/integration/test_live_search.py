"""Integration test -- live Linkup (and optionally OpenAI) search.

Requires: valid LINKUP_API_KEY in .env; OPENAI_API_KEY enables the LLM summary.
"""

import pytest

from homesearch.agent.pipeline import SearchPipeline
from homesearch.models import SearchRequest
from homesearch.utils.config import Capabilities, settings


@pytest.mark.integration
def test_full_search_flow():
    caps = Capabilities.from_settings(settings)
    if not caps.has_listing_credential:
        pytest.skip("LINKUP_API_KEY not configured")

    pipeline = SearchPipeline(capabilities=caps)
    response = pipeline.search(
        SearchRequest("2 bedroom condo for sale", location="Austin, TX")
    )

    assert response.summary
    for item in response.results:
        assert item.title and item.snippet and item.url
