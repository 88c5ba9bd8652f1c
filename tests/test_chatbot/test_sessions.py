"""
Tests for the chat session store.
"""

import asyncio
from unittest.mock import patch

import pytest

from chatbot import SessionNotFoundError, SessionStore, Transcript


class TestSessionStore:
    def test_create_returns_new_transcript(self, sessions):
        session_id, transcript = sessions.create()
        assert isinstance(transcript, Transcript)
        assert sessions.get(session_id) is transcript
        assert len(sessions) == 1

    def test_sessions_are_independent(self, sessions):
        first_id, first = sessions.create()
        second_id, second = sessions.create()
        assert first_id != second_id
        assert first is not second

    def test_unknown_session(self, sessions):
        with pytest.raises(SessionNotFoundError) as exc_info:
            sessions.get("missing")
        assert exc_info.value.session_id == "missing"

    def test_not_found_is_a_key_error(self, sessions):
        with pytest.raises(KeyError):
            sessions.get("missing")

    def test_close_forgets_and_closes(self, sessions):
        session_id, transcript = sessions.create()
        sessions.close(session_id)

        assert transcript.closed
        with pytest.raises(SessionNotFoundError):
            sessions.get(session_id)

    def test_close_unknown(self, sessions):
        with pytest.raises(SessionNotFoundError):
            sessions.close("missing")

    def test_close_all(self, mock_advisor):
        store = SessionStore(mock_advisor)
        transcripts = [store.create()[1] for _ in range(3)]
        store.close_all()

        assert len(store) == 0
        assert all(t.closed for t in transcripts)


class FakeClock:
    """Manually advanced monotonic clock."""

    def __init__(self):
        self.now = 0.0

    def __call__(self) -> float:
        return self.now


class TestSessionEviction:
    def test_idle_session_evicted_on_create(self, mock_advisor):
        clock = FakeClock()
        store = SessionStore(mock_advisor, ttl_seconds=60, clock=clock)
        idle_id, idle = store.create()

        clock.now = 61
        store.create()

        assert idle.closed
        assert len(store) == 1
        with pytest.raises(SessionNotFoundError):
            store.get(idle_id)

    def test_get_keeps_session_alive(self, mock_advisor):
        clock = FakeClock()
        store = SessionStore(mock_advisor, ttl_seconds=60, clock=clock)
        session_id, transcript = store.create()

        clock.now = 50
        store.get(session_id)
        clock.now = 100
        store.create()

        assert store.get(session_id) is transcript
        assert not transcript.closed

    def test_submit_keeps_session_alive(self, mock_advisor):
        clock = FakeClock()
        store = SessionStore(mock_advisor, ttl_seconds=60, clock=clock)
        session_id, transcript = store.create()

        clock.now = 50
        asyncio.run(transcript.submit("Where is the castle?"))
        clock.now = 100
        store.create()

        assert not transcript.closed
        assert store.get(session_id) is transcript

    def test_capacity_evicts_least_recently_used(self, mock_advisor):
        store = SessionStore(mock_advisor, max_sessions=2, clock=FakeClock())
        first_id, first = store.create()
        second_id, second = store.create()
        store.get(first_id)

        store.create()

        assert len(store) == 2
        assert second.closed
        assert not first.closed
        with pytest.raises(SessionNotFoundError):
            store.get(second_id)

    def test_late_reply_for_evicted_session_discarded(self, mock_advisor):
        clock = FakeClock()
        store = SessionStore(mock_advisor, ttl_seconds=60, clock=clock)

        async def scenario():
            release = asyncio.Event()

            async def slow_reply(message):
                await release.wait()
                return "Too late."

            mock_advisor.request_advice.side_effect = slow_reply
            session_id, transcript = store.create()

            pending = asyncio.create_task(transcript.submit("hello"))
            await asyncio.sleep(0)
            clock.now = 61
            store.create()
            release.set()
            return session_id, transcript, await pending

        session_id, transcript, reply = asyncio.run(scenario())

        assert reply is None
        assert transcript.closed
        assert [m.text for m in transcript.messages][1:] == ["hello"]
        with pytest.raises(SessionNotFoundError):
            store.get(session_id)

    def test_eviction_logged(self, mock_advisor):
        clock = FakeClock()
        store = SessionStore(mock_advisor, ttl_seconds=60, clock=clock)
        idle_id, _ = store.create()
        clock.now = 61

        with patch("chatbot.sessions.log_request") as log_request:
            store.create()

        evictions = [c for c in log_request.call_args_list if c.args[1] == "Chat session evicted"]
        assert len(evictions) == 1
        assert evictions[0].kwargs == {"session": idle_id, "reason": "idle"}
