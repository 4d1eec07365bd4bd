from .base import ProviderError, TextGenerator
from .factory import create_text_generator
from .providers import DEFAULT_MODEL, GeminiProvider

__all__ = [
    "DEFAULT_MODEL",
    "GeminiProvider",
    "ProviderError",
    "TextGenerator",
    "create_text_generator",
]
