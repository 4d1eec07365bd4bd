"""FastAPI relay between the chat client and the model provider.

One endpoint, POST /generate: takes {"prompt": str}, asks the provider for a
completion and returns the text as a plain-text body. Failures never leak
detail to the caller; they are logged here and answered with "failed".
"""

import asyncio
import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import PlainTextResponse

from ..llm import TextGenerator, create_text_generator
from .config import RelaySettings
from .models import PromptRequest

logger = logging.getLogger("dostai.relay")

FAILED_BODY = "failed"


def create_app(
    settings: RelaySettings | None = None,
    provider: TextGenerator | None = None,
) -> FastAPI:
    """Build the relay application.

    Args:
        settings: Relay settings (defaults to RelaySettings.from_env())
        provider: Text generator to use; when omitted, a Gemini provider is
            created from settings.api_key during startup

    Returns:
        Configured FastAPI app
    """
    settings = settings or RelaySettings.from_env()

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        if app.state.provider is None:
            if not settings.api_key:
                raise RuntimeError("GEMINI_API_KEY not set. Please configure it in environment or .env")
            app.state.provider = create_text_generator(
                "gemini", api_key=settings.api_key, model=settings.model
            )
        logger.info("Relay ready: model=%s port=%s", settings.model, settings.port)
        try:
            yield
        finally:
            await app.state.provider.close()
            logger.info("Relay stopped")

    app = FastAPI(title="Dost AI Relay", lifespan=lifespan)
    app.state.settings = settings
    app.state.provider = provider

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.post("/generate", response_class=PlainTextResponse)
    async def generate(request: Request) -> PlainTextResponse:
        """Forward the prompt to the provider and return its text."""
        try:
            body = await request.json()
            prompt_request = PromptRequest.model_validate(body)
        except ValueError as e:
            # Covers both malformed JSON and pydantic validation errors
            logger.warning("Rejected request: %s", str(e).splitlines()[0])
            return PlainTextResponse(FAILED_BODY, status_code=500)

        provider: TextGenerator = request.app.state.provider
        try:
            text = await asyncio.wait_for(
                provider.generate(prompt_request.prompt),
                timeout=settings.provider_timeout,
            )
        except asyncio.TimeoutError:
            logger.error("Provider call timed out after %.1fs", settings.provider_timeout)
            return PlainTextResponse(FAILED_BODY, status_code=500)
        except Exception:
            logger.exception("Provider call failed")
            return PlainTextResponse(FAILED_BODY, status_code=500)

        logger.info(
            "Generated %d chars for a %d char prompt",
            len(text),
            len(prompt_request.prompt),
        )
        return PlainTextResponse(text)

    return app
