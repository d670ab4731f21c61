"""Web module -- query building and the Linkup listing provider."""

from homesearch.web.linkup_search import LinkupSearch
from homesearch.web.query_builder import build_search_query
from homesearch.web.search_provider import ListingProvider

__all__ = ["ListingProvider", "LinkupSearch", "build_search_query"]
