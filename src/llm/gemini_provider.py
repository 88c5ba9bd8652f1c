"""Google Gemini provider for the Prague guide chat.

Sends each visitor question as a single, stateless generate_content call
with a fixed persona and temperature.

Reads the credential from the environment (see llm.config):
- GEMINI_API_KEY, GOOGLE_API_KEY or API_KEY
- LANGFUSE_PUBLIC_KEY / LANGFUSE_SECRET_KEY (optional, for tracing)
"""

from google import genai
from langfuse import observe
from openinference.instrumentation.google_genai import GoogleGenAIInstrumentor

from api.logging import get_logger, log_error
from llm.base import BaseAdviceProvider
from llm.config import (
    DEFAULT_MODEL,
    EMPTY_RESPONSE_MESSAGE,
    NO_CREDENTIAL_MESSAGE,
    REQUEST_FAILED_MESSAGE,
    SYSTEM_PROMPT_NAME,
    TEMPERATURE,
    find_api_key,
)
from prompts import load_prompt

logger = get_logger(__name__)

# Initialize instrumentation once at module load
_instrumentor = GoogleGenAIInstrumentor()
if not _instrumentor.is_instrumented_by_opentelemetry:
    _instrumentor.instrument()


class GeminiProvider(BaseAdviceProvider):
    """Google Gemini provider answering visitor questions about Prague."""

    provider_name = "gemini"

    # Available models
    MODELS = {
        "flash": "gemini-2.5-flash",
        "flash-lite": "gemini-2.5-flash-lite",
        "2.0-flash": "gemini-2.0-flash",
    }

    def __init__(self, model: str | None = None, api_key: str | None = None):
        """Initialize Gemini provider.

        The client is only created when a credential is available; without
        one every call returns NO_CREDENTIAL_MESSAGE and no request is made.

        Args:
            model: Short name ("flash", "flash-lite") or full model ID.
            api_key: Explicit credential. Looked up in the environment if None.
        """
        api_key = api_key or find_api_key()
        self._client = genai.Client(api_key=api_key) if api_key else None
        self._model = self._resolve_model(model or DEFAULT_MODEL)
        self._system_instruction = load_prompt(SYSTEM_PROMPT_NAME)

        if self._client is None:
            logger.warning("No Gemini API key configured - chat replies are disabled")

    def _resolve_model(self, model: str) -> str:
        """Resolve short model name to full model ID."""
        return self.MODELS.get(model, model)

    @property
    def default_model(self) -> str:
        return self._model

    @property
    def is_configured(self) -> bool:
        return self._client is not None

    @observe(name="gemini-prague-advice")
    async def request_advice(self, message: str) -> str:
        """Ask Gemini for advice on a visitor's question.

        Args:
            message: The visitor's question, passed verbatim.

        Returns:
            The generated text, or a fixed apology if no credential is
            configured or the request fails.
        """
        if self._client is None:
            return NO_CREDENTIAL_MESSAGE

        try:
            response = await self._client.aio.models.generate_content(
                model=self._model,
                contents=message,
                config={
                    "system_instruction": self._system_instruction,
                    "temperature": TEMPERATURE,
                },
            )
            return response.text or EMPTY_RESPONSE_MESSAGE
        except Exception as e:
            log_error(logger, "Gemini API error", e, model=self._model, chars=len(message))
            return REQUEST_FAILED_MESSAGE
