"""Abstract listing-provider interface."""

from abc import ABC, abstractmethod
from typing import List

from homesearch.models import RawListing


class ListingProvider(ABC):
    """Abstract interface -- swap implementations without touching callers."""

    name: str = "listing provider"

    @abstractmethod
    def search(self, query: str) -> List[RawListing]:
        """Return raw candidate listings for *query*, in provider order.

        An empty list means the provider answered but found nothing.  Failures
        raise ``ProviderError``.
        """
        ...
