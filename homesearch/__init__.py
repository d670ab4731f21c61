"""Real-estate search: deep-search listings plus an optional LLM summary."""

__version__ = "0.1.0"
