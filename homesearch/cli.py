"""CLI entry point for the real-estate search pipeline.

Run with ``python -m homesearch`` or the ``homesearch`` console script.
"""

import argparse
import sys

from homesearch.agent.pipeline import SearchPipeline
from homesearch.errors import HomeSearchError
from homesearch.models import PipelineResponse
from homesearch.security.guardrails import parse_search_request
from homesearch.utils.config import settings
from homesearch.utils.logger import get_logger

log = get_logger(__name__)


def print_response(response: PipelineResponse) -> None:
    print(f"\nSummary:\n{response.summary}\n")
    if response.results:
        print("Results:")
        for i, item in enumerate(response.results, 1):
            print(f"  [{i}] {item.title}")
            print(f"      {item.snippet[:200]}")
            print(f"      {item.url}")
    print()


def run_query(pipeline: SearchPipeline, query: str, budget=None, location=None) -> bool:
    """Run a single search and print results.  Returns False on error."""
    try:
        request = parse_search_request(
            {"query": query, "budget": budget, "location": location}
        )
        print(f"\nQuery: {request.query}")
        print("Searching...")
        response = pipeline.search(request)
    except HomeSearchError as exc:
        print(f"\nError: {exc}\n")
        return False
    print_response(response)
    return True


def interactive_mode(pipeline: SearchPipeline, budget=None, location=None) -> None:
    """REPL loop for interactive searching."""
    print("Home Search  (type 'quit' or 'exit' to stop)\n")
    while True:
        try:
            query = input("You: ").strip()
        except (EOFError, KeyboardInterrupt):
            print("\nGoodbye.")
            break
        if query.lower() in ("quit", "exit", "q"):
            print("Goodbye.")
            break
        if not query:
            continue
        run_query(pipeline, query, budget=budget, location=location)


def serve() -> None:
    import uvicorn

    uvicorn.run("homesearch.server.app:app", host=settings.host, port=settings.port)


def main() -> None:
    parser = argparse.ArgumentParser(description="Real-estate listing search")
    parser.add_argument("query", nargs="?", help="Single query to run")
    parser.add_argument("--budget", "-b", help="Budget in dollars")
    parser.add_argument("--location", "-l", help="City, neighbourhood or region")
    parser.add_argument("--interactive", "-i", action="store_true",
                        help="Start interactive REPL mode")
    parser.add_argument("--serve", action="store_true",
                        help="Run the HTTP API with uvicorn")
    parser.add_argument("--verbose", "-v", action="store_true",
                        help="Enable DEBUG logging")
    args = parser.parse_args()

    if args.verbose:
        import logging
        for name in list(logging.root.manager.loggerDict):
            if name.startswith("homesearch"):
                logging.getLogger(name).setLevel(logging.DEBUG)

    if args.serve:
        serve()
        return

    pipeline = SearchPipeline()

    if args.interactive:
        interactive_mode(pipeline, budget=args.budget, location=args.location)
    elif args.query:
        if not run_query(pipeline, args.query, budget=args.budget, location=args.location):
            sys.exit(1)
    else:
        parser.print_help()
        sys.exit(1)


if __name__ == "__main__":
    main()
