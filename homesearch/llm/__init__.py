"""LLM module -- OpenAI-compatible chat wrapper and the listing summarizer."""

from homesearch.llm.base import BaseLLM
from homesearch.llm.summarizer import ListingSummarizer

__all__ = ["BaseLLM", "ListingSummarizer"]
