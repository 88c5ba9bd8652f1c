"""
Pydantic models for Prague Guide API request/response schemas.
"""

from datetime import datetime
from typing import Literal

from pydantic import BaseModel, Field


# --- Regulation Models ---


class RegulationItemModel(BaseModel):
    """A single regulation, fine or warning entry."""

    kind: Literal["fine", "warning", "info"]
    title: str
    body: str = Field(description="Displayable HTML fragment")
    fine_amount: str | None = Field(default=None, description="Maximum fine, e.g. '10,000 CZK'")
    legal_reference: str | None = Field(default=None, description="Legal citation")


class RegulationSectionModel(BaseModel):
    """A named group of regulation entries."""

    id: str
    title: str
    items: list[RegulationItemModel]


class RegulationSearchResponse(BaseModel):
    """Response from GET /regulations."""

    query: str = Field(description="The search query as received")
    sections: list[RegulationSectionModel]
    total_items: int = Field(description="Number of matching items across sections")
    no_results: bool = Field(description="True when nothing matched the query")
    reset_query: str = Field(default="", description="Query that clears the filter")


# --- Guide Models ---


class GuideEntryModel(BaseModel):
    heading: str
    text: str
    highlight: str | None = None


class GuideChapterModel(BaseModel):
    """A numbered chapter of the guide."""

    number: int
    title: str
    entries: list[GuideEntryModel]
    searchable: bool = Field(
        default=False,
        description="Chapter content comes from GET /regulations",
    )


class GuideResponse(BaseModel):
    """Response from GET /guide."""

    chapters: list[GuideChapterModel]
    legal_basis: str
    emergency_numbers: dict[str, str]


# --- Chat Models ---


class ChatMessageModel(BaseModel):
    """A message in the conversation history."""

    id: int = Field(description="Increases with insertion order")
    role: Literal["user", "assistant"]
    text: str
    created_at: datetime


class ChatSessionResponse(BaseModel):
    """Response from POST /chat/sessions and GET /chat/sessions/{id}."""

    session_id: str
    messages: list[ChatMessageModel]
    state: Literal["idle", "sending"]
    last_message_id: int | None = Field(
        default=None,
        description="Newest message id, for scrolling it into view",
    )


class ChatSubmitRequest(BaseModel):
    """Request body for POST /chat/sessions/{id}/messages."""

    text: str = Field(description="The visitor's message, sent verbatim")


class ChatSubmitResponse(ChatSessionResponse):
    """Response from POST /chat/sessions/{id}/messages."""

    accepted: bool = Field(description="False if the message was blank or a reply is pending")
    reply: ChatMessageModel | None = Field(default=None, description="The assistant reply")


class ChatCloseResponse(BaseModel):
    """Response from DELETE /chat/sessions/{id}."""

    success: bool = True
    session_id: str


# --- System Models ---


class HealthResponse(BaseModel):
    """Response from GET /health."""

    status: str = "ok"
    version: str = "1.0.0"
    advisor: str = Field(description="Advice provider name")
    advisor_configured: bool = Field(description="Whether an API key is configured")


class ErrorResponse(BaseModel):
    """Error response."""

    error: str
    detail: str | None = None
