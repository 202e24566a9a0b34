"""Quote provider client.

The service layer only depends on the ``QuoteClient`` capability: a
single ``get_quote()`` call returning the quote text.  Tests swap in a
stub; production uses :class:`RandomQuoteClient`, which fetches a
random quote over HTTP with the ``requests`` library.

Unlike a best‑effort client, failures here are not turned into
default values.  Every transport error, non‑2xx status or malformed
payload raises :class:`QuoteProviderError`, which the API layer turns
into a ``502`` response.  There are no retries.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from typing import Any, Optional

import requests

from ..core.exceptions import QuoteProviderError

logger = logging.getLogger(__name__)


class QuoteClient(ABC):
    """Capability interface for anything that can hand out a quote."""

    @abstractmethod
    def get_quote(self) -> str:
        """Return the text of one quote."""

    def close(self) -> None:
        """Release any resources held by the client."""


class RandomQuoteClient(QuoteClient):
    """Fetch quotes from a JSON HTTP endpoint.

    The endpoint is expected to answer ``GET`` with either an object
    holding the quote under ``field`` or a list of such objects (the
    first element is used).
    """

    def __init__(
        self,
        *,
        url: str,
        field: str = "content",
        timeout: float = 5,
        session: Optional[requests.Session] = None,
    ) -> None:
        """Initialise the client.

        Args:
            url: Full URL of the random quote endpoint.
            field: Key of the JSON payload that holds the quote text.
            timeout: Seconds to wait for the provider before giving up.
            session: Optional requests session.  If not supplied a
                session will be created automatically.
        """
        self.url = url
        self.field = field
        self.timeout = timeout
        self.session = session or requests.Session()

    def get_quote(self) -> str:
        try:
            logger.debug("Requesting quote from %s", self.url)
            response = self.session.get(self.url, timeout=self.timeout)
            response.raise_for_status()
            payload = response.json()
        except requests.HTTPError as exc:
            status = exc.response.status_code if exc.response is not None else None
            logger.error("Quote provider returned an error (%s): %s", status, exc)
            raise QuoteProviderError(f"Quote provider returned status {status}") from exc
        except requests.JSONDecodeError as exc:
            logger.error("Quote provider sent invalid JSON: %s", exc)
            raise QuoteProviderError("Quote provider sent invalid JSON") from exc
        except requests.RequestException as exc:
            logger.error("Quote provider request failed: %s", exc)
            raise QuoteProviderError(f"Quote provider unreachable: {exc}") from exc
        except ValueError as exc:
            logger.error("Quote provider sent invalid JSON: %s", exc)
            raise QuoteProviderError("Quote provider sent invalid JSON") from exc
        return self._extract_quote(payload)

    def _extract_quote(self, payload: Any) -> str:
        """Pull the quote text out of a decoded response body."""
        if isinstance(payload, list):
            payload = payload[0] if payload else None
        if not isinstance(payload, dict) or not isinstance(payload.get(self.field), str):
            logger.error("Quote provider payload has no %r field: %r", self.field, payload)
            raise QuoteProviderError(f"Quote provider payload has no {self.field!r} field")
        return payload[self.field]

    def close(self) -> None:
        self.session.close()
