"""Base LLM wrapper -- model-agnostic by design.

Any OpenAI-compatible API can be used by passing a different model name or
base URL.  Defaults are read from ``settings`` but can be overridden
per-instance.
"""

from typing import Any, Dict, List, Optional

from openai import (
    APIConnectionError,
    APIResponseValidationError,
    APIStatusError,
    APITimeoutError,
    OpenAI,
)

from homesearch.errors import ProviderError
from homesearch.utils.config import settings
from homesearch.utils.logger import get_logger

log = get_logger(__name__)


class BaseLLM:
    """Thin wrapper around the OpenAI chat completions API.

    The SDK's built-in retries are disabled: each ``complete`` call is exactly
    one request, and any failure surfaces as ``ProviderError``.
    """

    provider = "OpenAI"

    def __init__(
        self,
        model: str | None = None,
        api_key: str | None = None,
        base_url: str | None = None,
        timeout: float | None = None,
    ):
        self.model = model or settings.summary_model
        self._client = OpenAI(
            api_key=api_key or settings.openai_api_key,
            base_url=base_url or settings.openai_base_url or None,
            timeout=timeout if timeout is not None else settings.summary_timeout,
            max_retries=0,
        )

    def complete(
        self,
        messages: List[Dict[str, str]],
        temperature: float = 0.7,
        **kwargs: Any,
    ) -> Optional[str]:
        """Send *messages* to the model and return the assistant reply text.

        Returns ``None`` when the response is well-formed but carries no text.
        """
        try:
            resp = self._client.chat.completions.create(
                model=self.model,
                messages=messages,
                temperature=temperature,
                **kwargs,
            )
        except APIResponseValidationError as exc:
            body = exc.response.text if exc.response is not None else ""
            raise self._malformed(exc.status_code, body) from exc
        except APIStatusError as exc:
            body = exc.response.text if exc.response is not None else ""
            log.error("%s API error: %s %s", self.provider, exc.status_code, body)
            raise ProviderError(self.provider, exc.status_code, body) from exc
        except APITimeoutError as exc:
            log.error("%s request timed out", self.provider)
            raise ProviderError(self.provider, message=f"{self.provider} request timed out") from exc
        except APIConnectionError as exc:
            log.error("%s request failed: %s", self.provider, exc)
            raise ProviderError(
                self.provider, message=f"{self.provider} request failed: {exc}"
            ) from exc
        except ValueError as exc:
            # JSON decoding of a 2xx body
            raise self._malformed(200, str(exc)) from exc

        choices = getattr(resp, "choices", None)
        if not isinstance(choices, list):
            raise self._malformed(200, str(resp)[:1000])
        if not choices:
            return None
        msg = getattr(choices[0], "message", None)
        content = getattr(msg, "content", None)
        if content is not None and not isinstance(content, str):
            raise self._malformed(200, repr(content)[:1000])
        return content

    def _malformed(self, status_code: Optional[int], body: str) -> ProviderError:
        log.error("%s returned a malformed body: %s", self.provider, body[:200])
        return ProviderError(
            self.provider, status_code, body, f"{self.provider} returned a malformed body"
        )
