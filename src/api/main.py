"""
Prague Visitors Guide API.

FastAPI server exposing the guide content, the regulation search and the
AI guide chat as plain data for a front end to render.
"""

from contextlib import asynccontextmanager

from dotenv import load_dotenv

# Load environment variables before other imports
load_dotenv()

from fastapi import FastAPI, HTTPException, Query
from fastapi.middleware.cors import CORSMiddleware

from api.logging import get_logger, log_error, log_request
from api.models import (
    ChatCloseResponse,
    ChatMessageModel,
    ChatSessionResponse,
    ChatSubmitRequest,
    ChatSubmitResponse,
    ErrorResponse,
    GuideChapterModel,
    GuideEntryModel,
    GuideResponse,
    HealthResponse,
    RegulationItemModel,
    RegulationSearchResponse,
    RegulationSectionModel,
)
from chatbot import ChatMessage, SessionNotFoundError, SessionStore, Transcript
from guide import CHAPTERS, EMERGENCY_NUMBERS, LEGAL_BASIS, REGULATIONS, filter_sections
from llm import BaseAdviceProvider, get_provider

logger = get_logger(__name__)


# Global service instances
_advisor: BaseAdviceProvider | None = None
_sessions: SessionStore | None = None


def get_advisor() -> BaseAdviceProvider:
    """Get or create the advice provider."""
    global _advisor
    if _advisor is None:
        _advisor = get_provider("gemini")
    return _advisor


def get_sessions() -> SessionStore:
    """Get or create the chat session store."""
    global _sessions
    if _sessions is None:
        _sessions = SessionStore(get_advisor())
    return _sessions


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan - initialize services on startup."""
    logger.info("Starting Prague Guide API...")

    advisor = get_advisor()
    if advisor.is_configured:
        logger.info(f"Advice provider ready: {advisor.provider_name} ({advisor.default_model})")
    else:
        logger.warning("No Gemini API key set - chat will answer with a fixed apology")

    get_sessions()
    logger.info("Prague Guide API ready")
    yield

    # Cleanup on shutdown
    logger.info("Shutting down Prague Guide API...")
    global _sessions
    if _sessions is not None:
        _sessions.close_all()
        _sessions = None


app = FastAPI(
    title="Prague Visitors Guide",
    description="Essential information and regulations for visitors to Prague, with an AI guide chat",
    version="1.0.0",
    lifespan=lifespan,
)

# Enable CORS for frontend access
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


def _message_model(message: ChatMessage) -> ChatMessageModel:
    return ChatMessageModel(
        id=message.id,
        role=message.role.value,
        text=message.text,
        created_at=message.created_at,
    )


def _session_fields(session_id: str, transcript: Transcript) -> dict:
    return {
        "session_id": session_id,
        "messages": [_message_model(m) for m in transcript.messages],
        "state": transcript.state.value,
        "last_message_id": transcript.last_message_id,
    }


def _get_transcript(session_id: str) -> Transcript:
    try:
        return get_sessions().get(session_id)
    except SessionNotFoundError as e:
        logger.warning(f"Unknown chat session: {e.session_id}")
        raise HTTPException(status_code=404, detail=f"Chat session not found: {session_id}")


@app.get("/health", response_model=HealthResponse, tags=["System"])
async def health():
    """Health check endpoint."""
    advisor = get_advisor()
    return HealthResponse(
        advisor=advisor.provider_name,
        advisor_configured=advisor.is_configured,
    )


# --- Guide Endpoints ---


@app.get("/guide", response_model=GuideResponse, tags=["Guide"])
async def guide():
    """
    Get every chapter of the visitors guide.

    The infractions chapter is marked `searchable`; its entries are served
    by GET /regulations.
    """
    chapters = [
        GuideChapterModel(
            number=chapter.number,
            title=chapter.title,
            entries=[
                GuideEntryModel(heading=e.heading, text=e.text, highlight=e.highlight)
                for e in chapter.entries
            ],
            searchable=chapter.searchable,
        )
        for chapter in CHAPTERS
    ]
    return GuideResponse(
        chapters=chapters,
        legal_basis=LEGAL_BASIS,
        emergency_numbers=dict(EMERGENCY_NUMBERS),
    )


@app.get("/regulations", response_model=RegulationSearchResponse, tags=["Guide"])
async def regulations(
    q: str = Query(default="", description="Case-insensitive substring to search for"),
):
    """
    Search infractions and penalties.

    Matches the query against each entry's title, text, legal reference and
    fine amount. Sections without a matching entry are left out. An empty
    query returns everything.
    """
    sections = filter_sections(REGULATIONS, q)

    result = [
        RegulationSectionModel(
            id=section.id,
            title=section.title,
            items=[
                RegulationItemModel(
                    kind=item.kind.value,
                    title=item.title,
                    body=item.body,
                    fine_amount=item.fine_amount,
                    legal_reference=item.legal_reference,
                )
                for item in section.items
            ],
        )
        for section in sections
    ]
    total_items = sum(len(section.items) for section in result)

    if q:
        log_request(logger, "Regulation search", query=q, sections=len(result), items=total_items)

    return RegulationSearchResponse(
        query=q,
        sections=result,
        total_items=total_items,
        no_results=not result,
    )


# --- Chat Endpoints ---


@app.post("/chat/sessions", response_model=ChatSessionResponse, tags=["Chat"])
async def create_chat_session():
    """Open a new chat transcript, starting with the guide's welcome message."""
    session_id, transcript = get_sessions().create()
    return ChatSessionResponse(**_session_fields(session_id, transcript))


@app.get(
    "/chat/sessions/{session_id}",
    response_model=ChatSessionResponse,
    responses={404: {"model": ErrorResponse, "description": "Chat session not found"}},
    tags=["Chat"],
)
async def get_chat_session(session_id: str):
    """Get the transcript and busy state of a chat session."""
    transcript = _get_transcript(session_id)
    return ChatSessionResponse(**_session_fields(session_id, transcript))


@app.post(
    "/chat/sessions/{session_id}/messages",
    response_model=ChatSubmitResponse,
    responses={
        404: {"model": ErrorResponse, "description": "Chat session not found"},
        500: {"model": ErrorResponse, "description": "Internal server error"},
    },
    tags=["Chat"],
)
async def submit_chat_message(session_id: str, body: ChatSubmitRequest):
    """
    Send a message to the AI guide and wait for the reply.

    Blank messages, and messages sent while a previous reply is still
    pending, are ignored: the response has `accepted=false` and the
    transcript is unchanged.
    """
    transcript = _get_transcript(session_id)

    accepted = transcript.can_submit(body.text)
    if not accepted:
        log_request(
            logger,
            "Chat message ignored",
            session=session_id,
            state=transcript.state.value,
            blank=not body.text.strip(),
        )
        return ChatSubmitResponse(accepted=False, **_session_fields(session_id, transcript))

    log_request(logger, "Chat submit", session=session_id, chars=len(body.text))

    try:
        reply = await transcript.submit(body.text)
    except Exception as e:
        log_error(logger, "Chat failed", e, session=session_id)
        raise HTTPException(
            status_code=500,
            detail=f"Chat failed: {type(e).__name__}: {e}",
        )

    if reply is not None:
        log_request(logger, "Chat reply", session=session_id, chars=len(reply.text))

    return ChatSubmitResponse(
        accepted=True,
        reply=_message_model(reply) if reply is not None else None,
        **_session_fields(session_id, transcript),
    )


@app.delete(
    "/chat/sessions/{session_id}",
    response_model=ChatCloseResponse,
    responses={404: {"model": ErrorResponse, "description": "Chat session not found"}},
    tags=["Chat"],
)
async def close_chat_session(session_id: str):
    """Close a chat session. A reply still pending for it is discarded."""
    try:
        get_sessions().close(session_id)
    except SessionNotFoundError:
        raise HTTPException(status_code=404, detail=f"Chat session not found: {session_id}")
    return ChatCloseResponse(session_id=session_id)


# Run with: uvicorn api.main:app --reload
if __name__ == "__main__":
    import uvicorn

    uvicorn.run(app, host="0.0.0.0", port=8000)
