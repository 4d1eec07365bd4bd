from typing import Any

from .base import TextGenerator
from .providers import GeminiProvider


def create_text_generator(provider: str, **config: Any) -> TextGenerator:
    """Create a text generation provider instance.

    This factory function hides the instantiation logic for providers.

    Args:
        provider: Provider type (only 'gemini' is supported)
        **config: Provider-specific configuration
            For Gemini:
                - api_key: str (required)
                - model: str (default: 'gemini-2.0-flash')

    Returns:
        Initialized text generator

    Raises:
        ValueError: If provider type is not supported
        TypeError: If required configuration is missing

    Examples:
        >>> provider = create_text_generator(
        ...     "gemini",
        ...     api_key="...",
        ... )
    """
    provider_lower = provider.lower()

    if provider_lower == "gemini":
        if "api_key" not in config:
            raise TypeError("Gemini provider requires 'api_key' in config")
        return GeminiProvider(**config)

    raise ValueError(
        f"Unsupported provider: {provider}. "
        f"Supported providers: 'gemini'"
    )
