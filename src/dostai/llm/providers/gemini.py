"""Google Gemini text provider implementation.

Uses the official Google GenAI SDK for async generation.
Reference: https://github.com/googleapis/python-genai

The prompt is sent exactly as received: no system instruction, no history
and no generation config.
"""

from typing import Any

from google import genai

from ..base import ProviderError, TextGenerator

DEFAULT_MODEL = "gemini-2.0-flash"

# Finish reasons that still leave usable text; anything else (SAFETY,
# RECITATION, BLOCKLIST, ...) is a failure
ALLOWED_FINISH_REASONS = frozenset({"STOP", "MAX_TOKENS", "FINISH_REASON_UNSPECIFIED"})


def _reason_name(reason: Any) -> str:
    """Normalize an SDK enum member or plain string to its upper-case name."""
    return str(getattr(reason, "name", reason)).upper()


class GeminiProvider(TextGenerator):
    """Google Gemini text provider.

    Hidden design decisions:
    - Google GenAI client initialization (one client, shared across requests)
    - Extraction of text from candidates and parts
    - Mapping of SDK exceptions to ProviderError
    """

    def __init__(
        self,
        api_key: str,
        model: str = DEFAULT_MODEL,
        client: Any | None = None,
        **client_kwargs: Any
    ):
        """Initialize Gemini provider.

        Args:
            api_key: Google AI API key
            model: Model identifier
            client: Pre-built genai client (tests inject a stub here)
            **client_kwargs: Additional kwargs for genai.Client
        """
        self._model = model
        self._client = client if client is not None else genai.Client(api_key=api_key, **client_kwargs)

    @property
    def model(self) -> str:
        """Get the model name."""
        return self._model

    def _extract_content(self, response: Any) -> str:
        """Extract text content from a Gemini response.

        Args:
            response: Gemini GenerateContentResponse

        Returns:
            Text content, or empty string for a response that carries no text

        Raises:
            ProviderError: If the prompt was blocked or generation stopped
                for a reason other than a normal finish
        """
        feedback = getattr(response, "prompt_feedback", None)
        block_reason = getattr(feedback, "block_reason", None)
        if block_reason:
            raise ProviderError(f"Gemini blocked the prompt: {_reason_name(block_reason)}")

        candidates = getattr(response, "candidates", None)
        if candidates:
            candidate = candidates[0]
            finish_reason = getattr(candidate, "finish_reason", None)
            if finish_reason and _reason_name(finish_reason) not in ALLOWED_FINISH_REASONS:
                raise ProviderError(f"Gemini stopped generating: {_reason_name(finish_reason)}")
            if candidate.content and candidate.content.parts:
                texts = [part.text for part in candidate.content.parts if getattr(part, "text", None)]
                if texts:
                    return "".join(texts)

        # Fallback to response.text (may raise or return None)
        try:
            return response.text or ""
        except (ValueError, AttributeError):
            return ""

    async def generate(self, prompt: str) -> str:
        """Generate text for a prompt using Google Gemini.

        Args:
            prompt: The user's prompt

        Returns:
            Generated text (empty string when the model returns no text)

        Raises:
            ProviderError: If the SDK call fails for any reason
        """
        try:
            response = await self._client.aio.models.generate_content(
                model=self._model,
                contents=prompt,
            )
        except Exception as e:
            raise ProviderError(f"Gemini request failed: {e}", cause=e) from e

        return self._extract_content(response)

    async def close(self) -> None:
        """Close the Gemini client.

        Note: The Google GenAI client doesn't require explicit closing,
        but we implement this for interface consistency.
        """
        pass
