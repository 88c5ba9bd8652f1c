"""
Chat transcript for the guide's side-panel assistant.

Handles:
1. Append-only message history with monotonically increasing ids
2. The Idle/Sending busy flag gating submissions
3. One advice request per accepted submission
"""

import itertools
import time
from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum
from typing import Callable

from api.logging import get_logger
from llm.base import BaseAdviceProvider
from llm.config import EMPTY_RESPONSE_MESSAGE

logger = get_logger(__name__)

WELCOME_MESSAGE = (
    "Hello! I am your AI Prague Guide. Ask me anything about local rules, transport, or tips!"
)


class ChatRole(str, Enum):
    USER = "user"
    ASSISTANT = "assistant"


class ChatState(str, Enum):
    """Request state of a transcript. At most one request is in flight."""

    IDLE = "idle"
    SENDING = "sending"


@dataclass(frozen=True)
class ChatMessage:
    """A message in the conversation history."""

    id: int
    role: ChatRole
    text: str
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))


class Transcript:
    """Conversation between a visitor and the advice provider.

    Messages are only ever appended. While a request is in flight the
    transcript is in ChatState.SENDING and further submissions are ignored.
    """

    def __init__(
        self,
        advisor: BaseAdviceProvider,
        welcome: bool = True,
        clock: Callable[[], float] = time.monotonic,
    ):
        self._advisor = advisor
        self._clock = clock
        self.last_active = clock()
        self._messages: list[ChatMessage] = []
        self._ids = itertools.count()
        self._closed = False
        self.state = ChatState.IDLE
        self.input_buffer = ""

        if welcome:
            self._append(ChatRole.ASSISTANT, WELCOME_MESSAGE)

    def touch(self) -> None:
        """Record activity, keeping the session from idling out."""
        self.last_active = self._clock()

    @property
    def messages(self) -> tuple[ChatMessage, ...]:
        return tuple(self._messages)

    @property
    def is_sending(self) -> bool:
        return self.state is ChatState.SENDING

    @property
    def closed(self) -> bool:
        return self._closed

    @property
    def last_message_id(self) -> int | None:
        """Id of the newest message, for views that scroll to it."""
        return self._messages[-1].id if self._messages else None

    def _append(self, role: ChatRole, text: str) -> ChatMessage:
        message = ChatMessage(id=next(self._ids), role=role, text=text)
        self._messages.append(message)
        return message

    def can_submit(self, raw_text: str) -> bool:
        """Whether submit(raw_text) would be accepted right now."""
        return bool(raw_text.strip()) and not self.is_sending and not self._closed

    async def submit(self, raw_text: str | None = None) -> ChatMessage | None:
        """Send a visitor message and wait for the reply.

        The user message is stored verbatim; trimming is only used to
        reject blank input. Blank input, a submission while another is in
        flight, and a closed transcript are ignored.

        Args:
            raw_text: Message text. Defaults to the current input buffer.

        Returns:
            The appended assistant message, or None if the submission was
            ignored or the transcript was closed before the reply arrived.
        """
        text = self.input_buffer if raw_text is None else raw_text
        if not self.can_submit(text):
            return None

        self.touch()
        self._append(ChatRole.USER, text)
        self.state = ChatState.SENDING
        self.input_buffer = ""

        try:
            reply = await self._advisor.request_advice(text)
        finally:
            self.state = ChatState.IDLE
            self.touch()

        if self._closed:
            logger.info("Discarding reply for closed transcript")
            return None

        return self._append(ChatRole.ASSISTANT, reply or EMPTY_RESPONSE_MESSAGE)

    def close(self) -> None:
        """Tear down the transcript. A reply still in flight is dropped."""
        self._closed = True
