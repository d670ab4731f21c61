"""FastAPI application exposing the search pipeline."""

from typing import Any, Optional

from anyio import to_thread
from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from homesearch.agent.pipeline import SearchPipeline
from homesearch.errors import ConfigurationError, ProviderError, ValidationError
from homesearch.security.guardrails import QUERY_REQUIRED, parse_search_request
from homesearch.utils.logger import get_logger

log = get_logger(__name__)

GENERIC_FAILURE = "Failed to process search request. Please try again."


def _error(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"error": message})


def create_app(pipeline: Optional[SearchPipeline] = None) -> FastAPI:
    """Build the app.  The pipeline is created from settings on first use."""
    app = FastAPI(title="Home Search API")
    app.state.pipeline = pipeline

    def _pipeline() -> SearchPipeline:
        if app.state.pipeline is None:
            app.state.pipeline = SearchPipeline()
        return app.state.pipeline

    @app.post("/api/search", response_model=None)
    async def search_endpoint(request: Request) -> Any:
        try:
            body = await request.json()
        except ValueError:
            return _error(400, QUERY_REQUIRED)

        try:
            search_request = parse_search_request(body)
        except ValidationError as exc:
            return _error(400, str(exc))

        try:
            pipeline = _pipeline()
            response = await to_thread.run_sync(pipeline.search, search_request)
        except ValidationError as exc:
            return _error(400, str(exc))
        except ConfigurationError as exc:
            return _error(500, str(exc))
        except ProviderError as exc:
            log.error("Search failed at %s (status=%s): %s",
                      exc.provider, exc.status_code, exc.body or exc)
            return _error(500, GENERIC_FAILURE)
        except Exception:
            log.exception("Search API error")
            return _error(500, GENERIC_FAILURE)

        return response.to_dict()

    return app


app = create_app()
