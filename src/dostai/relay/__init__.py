"""Relay service: HTTP front for the model provider.

Module structure:
- config.py: Settings read from the environment
- models.py: Request body schema
- logs.py: Rich-backed logging setup
- app.py: FastAPI application factory and the /generate endpoint
"""

from .app import FAILED_BODY, create_app
from .config import ConfigError, RelaySettings
from .logs import configure_logging
from .models import PromptRequest

__all__ = [
    "FAILED_BODY",
    "ConfigError",
    "PromptRequest",
    "RelaySettings",
    "configure_logging",
    "create_app",
]
