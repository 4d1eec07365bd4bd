"""Pytest configuration and shared fixtures."""
import asyncio

import pytest

from dostai.llm import TextGenerator
from dostai.relay import RelaySettings


class FakeGenerator(TextGenerator):
    """TextGenerator that records prompts and replies from a script."""

    def __init__(
        self,
        reply: str = "generated text",
        error: Exception | None = None,
        delay: float = 0.0,
        echo: bool = False,
    ):
        self.reply = reply
        self.error = error
        self.delay = delay
        self.echo = echo
        self.prompts: list[str] = []
        self.closed = False

    async def generate(self, prompt: str) -> str:
        self.prompts.append(prompt)
        if self.delay:
            await asyncio.sleep(self.delay)
        if self.error is not None:
            raise self.error
        return prompt if self.echo else self.reply

    async def close(self) -> None:
        self.closed = True


class FakeRelay:
    """Relay stand-in for the chat session and UI.

    When gated, generate() waits until `release` is set, so tests can look
    at the pending state.
    """

    def __init__(self, reply: str = "4", error: Exception | None = None, gated: bool = False):
        self.reply = reply
        self.error = error
        self.gated = gated
        self.release = asyncio.Event()
        self.prompts: list[str] = []

    async def generate(self, prompt: str) -> str:
        self.prompts.append(prompt)
        if self.gated:
            await self.release.wait()
        if self.error is not None:
            raise self.error
        return self.reply


@pytest.fixture
def settings():
    """Relay settings with a fake key and a short provider timeout."""
    return RelaySettings(api_key="fake-key", provider_timeout=0.2)


@pytest.fixture
def fake_generator():
    return FakeGenerator()


@pytest.fixture
def relay():
    return FakeRelay()
