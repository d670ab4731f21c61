"""Listing summarizer -- condenses search results into a short paragraph.

Default model: gpt-3.5-turbo (configurable via OPENAI_SUMMARY_MODEL).
"""

from typing import List

from homesearch.llm.base import BaseLLM
from homesearch.models import NormalizedResult, SearchRequest
from homesearch.utils.config import settings
from homesearch.utils.logger import get_logger

log = get_logger(__name__)

FALLBACK_SUMMARY = "No summary available"

SYSTEM_PROMPT = (
    "You are a helpful real estate assistant. Provide concise, factual "
    "summaries of real estate search results."
)

SUMMARY_PROMPT = """Based on the following real estate search results, provide a concise summary that addresses the user's query: "{query}"{budget_clause}{location_clause}.

Search Results:
{listings}

Please provide a 2-3 sentence summary focusing on the most relevant properties and key details."""


def build_summary_prompt(request: SearchRequest, listings: List[NormalizedResult]) -> str:
    """Render the user message; absent hints leave no trace in the text."""
    budget_clause = f" with a budget of ${request.budget}" if request.budget else ""
    location_clause = f" in {request.location}" if request.location else ""
    rendered = "\n\n".join(f"{item.title}: {item.snippet}" for item in listings)
    return SUMMARY_PROMPT.format(
        query=request.query,
        budget_clause=budget_clause,
        location_clause=location_clause,
        listings=rendered,
    )


class ListingSummarizer(BaseLLM):
    """Turns a non-empty set of listings into a 2-3 sentence synthesis."""

    def __init__(self, model: str | None = None, **kwargs):
        super().__init__(model=model or settings.summary_model, **kwargs)

    def summarize(self, request: SearchRequest, listings: List[NormalizedResult]) -> str:
        """Call the model once; raises ``ProviderError`` if the call fails."""
        messages = [
            {"role": "system", "content": SYSTEM_PROMPT},
            {"role": "user", "content": build_summary_prompt(request, listings)},
        ]
        text = self.complete(
            messages,
            temperature=settings.summary_temperature,
            max_tokens=settings.summary_max_tokens,
        )
        if not text or not text.strip():
            log.warning("Summarizer returned no text, using fallback")
            return FALLBACK_SUMMARY
        return text.strip()
