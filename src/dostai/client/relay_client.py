"""HTTP client for the relay service.

Hides the wire format of POST /generate from the chat session.
"""

import logging
from typing import Any

import httpx

from .config import RELAY_URL, REQUEST_TIMEOUT

logger = logging.getLogger("dostai.client")


class RelayError(Exception):
    """Raised when the relay cannot produce a reply (network, timeout or non-200)."""


class RelayClient:
    """Async client for the relay's /generate endpoint.

    Example:
        async with RelayClient() as relay:
            text = await relay.generate("2+2?")
    """

    def __init__(
        self,
        base_url: str = RELAY_URL,
        timeout: float = REQUEST_TIMEOUT,
        **client_kwargs: Any
    ) -> None:
        self._client = httpx.AsyncClient(base_url=base_url, timeout=timeout, **client_kwargs)

    async def generate(self, prompt: str) -> str:
        """Send a prompt and return the relay's text.

        Raises:
            RelayError: On any transport failure or non-200 response
        """
        try:
            response = await self._client.post("/generate", json={"prompt": prompt})
        except httpx.HTTPError as e:
            logger.warning("Relay unreachable: %s", e)
            raise RelayError(f"Relay request failed: {e}") from e

        if response.status_code != 200:
            logger.warning("Relay answered %s: %s", response.status_code, response.text[:100])
            raise RelayError(f"Relay returned HTTP {response.status_code}")

        return response.text

    async def close(self) -> None:
        await self._client.aclose()

    async def __aenter__(self) -> "RelayClient":
        return self

    async def __aexit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> None:
        await self.close()
