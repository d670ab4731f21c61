"""Server module -- FastAPI surface for the search pipeline."""

from homesearch.server.app import create_app

__all__ = ["create_app"]
