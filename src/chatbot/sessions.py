"""In-memory registry of chat transcripts, one per visitor session.

Nothing is persisted. Sessions idle for longer than SESSION_TTL_SECONDS, or
beyond MAX_SESSIONS (least recently used first), are closed and dropped
whenever a new session is opened.
"""

import time
import uuid
from collections import OrderedDict
from typing import Callable

from api.logging import get_logger, log_request
from chatbot.transcript import Transcript
from llm.base import BaseAdviceProvider

logger = get_logger(__name__)

SESSION_TTL_SECONDS = 60 * 60
MAX_SESSIONS = 1000


class SessionNotFoundError(KeyError):
    """Raised when a chat session id is unknown or already closed."""

    def __init__(self, session_id: str):
        self.session_id = session_id
        super().__init__(f"Chat session not found: {session_id}")


class SessionStore:
    """Holds open transcripts keyed by session id, least recently used first."""

    def __init__(
        self,
        advisor: BaseAdviceProvider,
        ttl_seconds: float = SESSION_TTL_SECONDS,
        max_sessions: int = MAX_SESSIONS,
        clock: Callable[[], float] = time.monotonic,
    ):
        self._advisor = advisor
        self._ttl_seconds = ttl_seconds
        self._max_sessions = max_sessions
        self._clock = clock
        self._sessions: OrderedDict[str, Transcript] = OrderedDict()

    def __len__(self) -> int:
        return len(self._sessions)

    def create(self) -> tuple[str, Transcript]:
        self.evict_idle()

        session_id = uuid.uuid4().hex
        transcript = Transcript(self._advisor, clock=self._clock)
        self._sessions[session_id] = transcript

        while len(self._sessions) > self._max_sessions:
            oldest_id = next(iter(self._sessions))
            self._evict(oldest_id, reason="capacity")

        log_request(logger, "Chat session opened", session=session_id, open=len(self._sessions))
        return session_id, transcript

    def get(self, session_id: str) -> Transcript:
        try:
            transcript = self._sessions[session_id]
        except KeyError:
            raise SessionNotFoundError(session_id) from None
        transcript.touch()
        self._sessions.move_to_end(session_id)
        return transcript

    def close(self, session_id: str) -> None:
        """Close and forget a session.

        Raises:
            SessionNotFoundError: If the session does not exist.
        """
        transcript = self._sessions.pop(session_id, None)
        if transcript is None:
            raise SessionNotFoundError(session_id)
        transcript.close()
        log_request(logger, "Chat session closed", session=session_id)

    def evict_idle(self) -> int:
        """Close sessions idle for longer than the TTL.

        Returns:
            Number of sessions evicted.
        """
        now = self._clock()
        expired = [
            session_id
            for session_id, transcript in self._sessions.items()
            if now - transcript.last_active > self._ttl_seconds
        ]
        for session_id in expired:
            self._evict(session_id, reason="idle")
        return len(expired)

    def _evict(self, session_id: str, reason: str) -> None:
        transcript = self._sessions.pop(session_id)
        transcript.close()
        log_request(logger, "Chat session evicted", session=session_id, reason=reason)

    def close_all(self) -> None:
        for transcript in self._sessions.values():
            transcript.close()
        self._sessions.clear()
