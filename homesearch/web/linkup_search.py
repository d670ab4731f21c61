"""Linkup deep-search implementation (our sole listing provider)."""

import json
from typing import Any, Dict, List, Optional

import httpx

from homesearch.errors import ConfigurationError, ProviderError
from homesearch.models import RawListing
from homesearch.utils.config import settings
from homesearch.utils.logger import get_logger
from homesearch.web.search_provider import ListingProvider

log = get_logger(__name__)


class LinkupSearch(ListingProvider):
    """Listing search via the Linkup ``/search`` endpoint.

    One POST per call, no retries.  The payload is read defensively: a
    missing or non-list ``results`` field is an empty result, not an error.
    """

    name = "Linkup"

    def __init__(
        self,
        api_key: Optional[str] = None,
        base_url: Optional[str] = None,
        timeout: Optional[float] = None,
        depth: Optional[str] = None,
    ):
        self._api_key = api_key or settings.linkup_api_key
        if not self._api_key:
            raise ConfigurationError("LINKUP_API_KEY is not set")
        self._url = (base_url or settings.linkup_base_url).rstrip("/") + "/search"
        self._timeout = timeout if timeout is not None else settings.search_timeout
        self._depth = depth or settings.search_depth

    def search(self, query: str) -> List[RawListing]:
        """Execute a Linkup search and return the raw listing dicts."""
        body = {"q": query, "depth": self._depth, "outputType": "searchResults"}
        headers = {
            "Content-Type": "application/json",
            "Authorization": f"Bearer {self._api_key}",
        }
        try:
            with httpx.Client(timeout=self._timeout) as client:
                resp = client.post(self._url, json=body, headers=headers)
        except httpx.TimeoutException as exc:
            log.error("Linkup request timed out after %.1fs", self._timeout)
            raise ProviderError(self.name, message="Linkup request timed out") from exc
        except httpx.HTTPError as exc:
            log.error("Linkup request failed: %s", exc)
            raise ProviderError(self.name, message=f"Linkup request failed: {exc}") from exc

        if not resp.is_success:
            log.error("Linkup API error: %s %s", resp.status_code, resp.text)
            raise ProviderError(self.name, resp.status_code, resp.text)

        try:
            data = resp.json()
        except ValueError as exc:
            log.error("Linkup returned non-JSON body: %s", resp.text[:200])
            raise ProviderError(
                self.name, resp.status_code, resp.text, "Linkup returned a malformed body"
            ) from exc

        if not isinstance(data, dict):
            log.error("Linkup returned a non-object body: %s", resp.text[:200])
            raise ProviderError(
                self.name, resp.status_code, resp.text, "Linkup returned a malformed body"
            )

        log.debug("Linkup response: %s", json.dumps(data, indent=2)[:4000])
        return _extract_listings(data)


def _extract_listings(data: Dict[str, Any]) -> List[RawListing]:
    """Pull the listing array out of a Linkup payload, dropping junk items."""
    items = data.get("results")
    if not isinstance(items, list):
        return []
    return [item for item in items if isinstance(item, dict)]
