"""
Chatbot module for the guide's AI assistant.

Keeps per-visitor transcripts and forwards questions to an advice provider.
"""

from chatbot.sessions import SessionNotFoundError, SessionStore
from chatbot.transcript import (
    WELCOME_MESSAGE,
    ChatMessage,
    ChatRole,
    ChatState,
    Transcript,
)

__all__ = [
    "WELCOME_MESSAGE",
    "ChatMessage",
    "ChatRole",
    "ChatState",
    "SessionNotFoundError",
    "SessionStore",
    "Transcript",
]
