from abc import ABC, abstractmethod
from typing import Any


class ProviderError(Exception):
    """Raised when the generative-model provider fails to produce text.

    Wraps the provider-specific exception (network, auth, quota, bad input)
    so callers only ever have to handle one error type.
    """

    def __init__(self, message: str, cause: BaseException | None = None):
        super().__init__(message)
        self.cause = cause


class TextGenerator(ABC):
    """Abstract base class for text generation providers.

    This module hides the design decision of which model provider answers
    prompts. Implementations must handle:
    - API client setup and authentication
    - Extracting the text of a single, complete response
    - Converting every provider failure into ProviderError

    Supports async context manager protocol for proper resource cleanup:
        async with provider:
            text = await provider.generate("hello")
    """

    @abstractmethod
    async def generate(self, prompt: str) -> str:
        """Generate text for a single prompt.

        Args:
            prompt: The user's prompt, passed to the model as-is

        Returns:
            The generated text

        Raises:
            ProviderError: On any failure during model invocation
        """

    @abstractmethod
    async def close(self) -> None:
        """Close any open connections or resources."""

    async def __aenter__(self) -> "TextGenerator":
        """Async context manager entry."""
        return self

    async def __aexit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> None:
        """Async context manager exit with automatic cleanup.

        Note: Suppresses "Event loop is closed" errors during cleanup.
        This is a known harmless race condition in httpx/anyio cleanup:
        https://github.com/encode/httpx/issues/914
        """
        try:
            await self.close()
        except RuntimeError as e:
            if "Event loop is closed" not in str(e):
                raise
