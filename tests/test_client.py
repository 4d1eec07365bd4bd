"""Tests for the chat client core: models, session and relay client."""
import asyncio
import json

import httpx
import pytest
from hypothesis import given
from hypothesis import strategies as st
from pydantic import ValidationError

from dostai.client import (
    ERROR_REPLY,
    GREETING,
    ChatSession,
    Conversation,
    RelayClient,
    RelayError,
    Sender,
    SubmitOutcome,
)
from dostai.client.formatting import format_time
from dostai.relay import RelaySettings, create_app

from .conftest import FakeGenerator, FakeRelay

whitespace = st.text(alphabet=" \t\n\r\f\v", max_size=20)


class TestConversation:
    """Tests for the immutable conversation model."""

    def test_seeded_has_single_greeting(self):
        conversation = Conversation.seeded()

        assert len(conversation) == 1
        assert conversation.last.sender is Sender.BOT
        assert conversation.last.text == GREETING

    def test_append_returns_new_conversation(self):
        original = Conversation.seeded()

        updated = original.append("hi", Sender.USER)

        assert len(original) == 1
        assert len(updated) == 2
        assert updated.messages[:1] == original.messages
        assert updated.last.text == "hi"

    @given(st.lists(st.text(), min_size=1, max_size=30))
    def test_ids_are_unique_and_increasing(self, texts: list[str]):
        """Property test: ids grow strictly even when appends share a millisecond."""
        conversation = Conversation()
        for text in texts:
            conversation = conversation.append(text, Sender.USER)

        ids = [m.id for m in conversation.messages]
        assert ids == sorted(ids)
        assert len(set(ids)) == len(ids)
        assert [m.text for m in conversation.messages] == texts

    def test_get_by_id(self):
        conversation = Conversation.seeded().append("hi", Sender.USER)
        message = conversation.last

        assert conversation.get(message.id) is message
        with pytest.raises(KeyError):
            conversation.get(-1)

    def test_messages_are_immutable(self):
        message = Conversation.seeded().last

        with pytest.raises(ValidationError):
            message.text = "changed"  # type: ignore[misc]


class TestSubmission:
    """Tests for ChatSession's submit / pending / settle cycle."""

    @pytest.mark.asyncio
    async def test_submit_appends_user_then_bot(self, relay):
        session = ChatSession(relay)

        outcome = await session.submit("2+2?")

        assert outcome is SubmitOutcome.RESOLVED
        texts = [(m.sender, m.text) for m in session.conversation.messages]
        assert texts == [(Sender.BOT, GREETING), (Sender.USER, "2+2?"), (Sender.BOT, "4")]
        assert relay.prompts == ["2+2?"]
        assert not session.pending

    @pytest.mark.asyncio
    async def test_raw_prompt_is_kept_and_sent(self, relay):
        session = ChatSession(relay)

        await session.submit("  spaced  ")

        assert session.conversation.messages[1].text == "  spaced  "
        assert relay.prompts == ["  spaced  "]

    @pytest.mark.asyncio
    async def test_relay_text_is_stored_verbatim(self):
        session = ChatSession(FakeRelay(reply="# Title\n\n- item\n"))

        await session.submit("list")

        assert session.conversation.last.text == "# Title\n\n- item\n"

    @pytest.mark.asyncio
    async def test_blank_prompt_is_a_no_op(self, relay):
        session = ChatSession(relay)
        changes = []
        session.subscribe(lambda: changes.append(1))

        outcome = await session.submit("   \n")

        assert outcome is SubmitOutcome.EMPTY
        assert len(session.conversation) == 1
        assert relay.prompts == []
        assert changes == []

    @given(whitespace)
    def test_begin_ignores_any_whitespace(self, prompt: str):
        """Property test: whitespace-only prompts never add a message."""
        session = ChatSession(FakeRelay())

        assert session.begin(prompt) is None
        assert len(session.conversation) == 1
        assert not session.pending

    @pytest.mark.asyncio
    async def test_user_message_is_added_before_reply(self):
        relay = FakeRelay(gated=True)
        session = ChatSession(relay)

        task = asyncio.create_task(session.submit("2+2?"))
        await asyncio.sleep(0)

        assert session.pending
        assert [m.text for m in session.conversation.messages] == [GREETING, "2+2?"]

        relay.release.set()
        assert await task is SubmitOutcome.RESOLVED
        assert not session.pending
        assert session.conversation.last.text == "4"

    @pytest.mark.asyncio
    async def test_overlapping_submission_is_rejected(self):
        relay = FakeRelay(gated=True)
        session = ChatSession(relay)

        first = asyncio.create_task(session.submit("first"))
        await asyncio.sleep(0)

        outcome = await session.submit("second")

        assert outcome is SubmitOutcome.REJECTED
        assert [m.text for m in session.conversation.messages] == [GREETING, "first"]
        assert relay.prompts == ["first"]

        relay.release.set()
        await first
        assert [m.text for m in session.conversation.messages] == [GREETING, "first", "4"]

    @pytest.mark.asyncio
    async def test_failure_adds_error_message_and_settles(self):
        session = ChatSession(FakeRelay(error=RelayError("HTTP 500")))

        outcome = await session.submit("hello")

        assert outcome is SubmitOutcome.FAILED
        assert not session.pending
        last = session.conversation.last
        assert last.sender is Sender.BOT
        assert last.error
        assert last.text == ERROR_REPLY

    @pytest.mark.asyncio
    async def test_can_submit_again_after_failure(self):
        relay = FakeRelay(error=RelayError("down"))
        session = ChatSession(relay)
        await session.submit("one")

        relay.error = None
        assert await session.submit("two") is SubmitOutcome.RESOLVED
        assert session.conversation.last.text == "4"

    def test_two_phase_operations(self, relay):
        session = ChatSession(relay)

        assert session.begin("hi") == "hi"
        assert session.pending
        session.resolve("hello")

        assert not session.pending
        assert [m.sender for m in session.conversation.messages] == [Sender.BOT, Sender.USER, Sender.BOT]

    @pytest.mark.asyncio
    async def test_complete_settles_an_accepted_prompt(self, relay):
        session = ChatSession(relay)
        prompt = session.begin("2+2?")

        assert session.begin("again") is None
        assert await session.complete(prompt) is SubmitOutcome.RESOLVED
        assert relay.prompts == ["2+2?"]
        assert [m.text for m in session.conversation.messages] == [GREETING, "2+2?", "4"]

    @pytest.mark.asyncio
    async def test_listeners_fire_on_every_change(self, relay):
        session = ChatSession(relay)
        snapshots = []
        session.subscribe(lambda: snapshots.append((len(session.conversation), session.pending)))

        await session.submit("hi")

        assert snapshots == [(2, True), (3, False)]


class TestCopyIndicator:
    """Tests for per-message copy indicators."""

    @pytest.mark.asyncio
    async def test_copy_returns_raw_text_and_marks_message(self, relay):
        session = ChatSession(relay)
        greeting = session.conversation.last

        assert session.copy(greeting.id) == GREETING
        assert session.is_copied(greeting.id)
        session.close()

    @pytest.mark.asyncio
    async def test_indicator_clears_after_duration(self, relay):
        session = ChatSession(relay, copy_indicator_seconds=0.05)
        greeting_id = session.conversation.last.id

        session.copy(greeting_id)
        await asyncio.sleep(0.15)

        assert not session.is_copied(greeting_id)

    @pytest.mark.asyncio
    async def test_indicators_are_independent(self, relay):
        session = ChatSession(relay, copy_indicator_seconds=0.3)
        await session.submit("hi")
        first, second = session.conversation.messages[0].id, session.conversation.messages[1].id

        session.copy(first)
        await asyncio.sleep(0.15)
        session.copy(second)
        assert session.copied_ids == {first, second}

        await asyncio.sleep(0.22)
        assert not session.is_copied(first)
        assert session.is_copied(second)

        await asyncio.sleep(0.15)
        assert session.copied_ids == frozenset()

    @pytest.mark.asyncio
    async def test_copying_again_restarts_timer(self, relay):
        session = ChatSession(relay, copy_indicator_seconds=0.2)
        greeting_id = session.conversation.last.id

        session.copy(greeting_id)
        await asyncio.sleep(0.12)
        session.copy(greeting_id)
        await asyncio.sleep(0.12)

        assert session.is_copied(greeting_id)
        session.close()
        assert not session.is_copied(greeting_id)

    @pytest.mark.asyncio
    async def test_unknown_message_raises(self, relay):
        session = ChatSession(relay)

        with pytest.raises(KeyError):
            session.copy(12345)


class TestRelayClient:
    """Tests for the httpx relay client."""

    @pytest.mark.asyncio
    async def test_posts_prompt_and_returns_text(self):
        requests = []

        def handler(request: httpx.Request) -> httpx.Response:
            requests.append(request)
            return httpx.Response(200, text="4")

        async with RelayClient("http://relay.test", transport=httpx.MockTransport(handler)) as relay:
            assert await relay.generate("2+2?") == "4"

        assert requests[0].method == "POST"
        assert requests[0].url.path == "/generate"
        assert json.loads(requests[0].content) == {"prompt": "2+2?"}

    @pytest.mark.asyncio
    @pytest.mark.parametrize("status", [400, 500, 503])
    async def test_non_200_raises(self, status):
        transport = httpx.MockTransport(lambda request: httpx.Response(status, text="failed"))

        async with RelayClient("http://relay.test", transport=transport) as relay:
            with pytest.raises(RelayError):
                await relay.generate("hi")

    @pytest.mark.asyncio
    async def test_network_error_raises(self):
        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ConnectError("connection refused", request=request)

        async with RelayClient("http://relay.test", transport=httpx.MockTransport(handler)) as relay:
            with pytest.raises(RelayError):
                await relay.generate("hi")

    @pytest.mark.asyncio
    async def test_against_relay_app(self):
        """Client and relay agree on the wire format."""
        generator = FakeGenerator(reply="4")
        app = create_app(RelaySettings(api_key="fake-key"), generator)

        async with RelayClient("http://relay.test", transport=httpx.ASGITransport(app=app)) as relay:
            session = ChatSession(relay)
            assert await session.submit("2+2?") is SubmitOutcome.RESOLVED

        assert generator.prompts == ["2+2?"]
        assert session.conversation.last.text == "4"


def test_format_time_is_hour_minute():
    from datetime import datetime

    assert format_time(datetime(2024, 5, 1, 9, 7, 45)) == "09:07"
