"""Agent module -- LangGraph search pipeline."""

from homesearch.agent.graph import build_graph
from homesearch.agent.pipeline import SearchPipeline
from homesearch.agent.state import PipelineState

__all__ = ["build_graph", "PipelineState", "SearchPipeline"]
