"""LangGraph state machine wiring.

State flows:

  build_query -> fetch_listings -> [route]
                                      |
                 +--------------------+--------------------+
                 |                    |                    |
            (no_results)         (templated)          (summarize)
                 |                    |                    |
                 +--------------------+--------------------+
                                      |
                                   assemble
                                      |
                                     END

Any node may raise; the exception leaves ``invoke`` and the run is failed.
"""

from langgraph.graph import END, StateGraph

from homesearch.agent.nodes import PipelineNodes
from homesearch.agent.state import PipelineState


def build_graph(nodes: PipelineNodes):
    """Construct and compile the search graph.  Returns a runnable."""
    g = StateGraph(PipelineState)

    # -- add nodes ----------------------------------------------------------
    g.add_node("build_query", nodes.build_query)
    g.add_node("fetch_listings", nodes.fetch_listings)
    g.add_node("no_results", nodes.no_results)
    g.add_node("templated_summary", nodes.templated_summary)
    g.add_node("summarize", nodes.summarize)
    g.add_node("assemble", nodes.assemble)

    # -- edges --------------------------------------------------------------
    g.set_entry_point("build_query")
    g.add_edge("build_query", "fetch_listings")

    # Conditional: empty vs templated vs LLM summary
    g.add_conditional_edges(
        "fetch_listings",
        nodes.route,
        {
            "no_results": "no_results",
            "templated": "templated_summary",
            "summarize": "summarize",
        },
    )

    # Common tail
    g.add_edge("no_results", "assemble")
    g.add_edge("templated_summary", "assemble")
    g.add_edge("summarize", "assemble")
    g.add_edge("assemble", END)

    return g.compile()
