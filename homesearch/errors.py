"""Error taxonomy for the search pipeline."""

from typing import Optional


class HomeSearchError(Exception):
    """Base class for every error the pipeline raises on purpose."""


class ValidationError(HomeSearchError):
    """The inbound request is unusable; nothing was sent to any provider."""


class ConfigurationError(HomeSearchError):
    """A required provider credential is missing."""


class ProviderError(HomeSearchError):
    """An outbound provider call failed.

    ``status_code`` is ``None`` when no HTTP response was received (timeout or
    transport failure).  ``body`` holds the raw response text for logging and
    is never shown to callers.
    """

    def __init__(
        self,
        provider: str,
        status_code: Optional[int] = None,
        body: str = "",
        message: Optional[str] = None,
    ):
        self.provider = provider
        self.status_code = status_code
        self.body = body
        detail = message or f"{provider} API error: {status_code} - {body}"
        super().__init__(detail)
