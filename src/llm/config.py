"""
Configuration for the Prague guide advice model.

The credential is looked up once, when the advisor is constructed.
"""

import os


# =============================================================================
# Credentials
# =============================================================================

# First non-empty variable wins
CREDENTIAL_ENV_VARS = ("GEMINI_API_KEY", "GOOGLE_API_KEY", "API_KEY")


def find_api_key() -> str | None:
    """Return the first configured Gemini credential, or None."""
    for name in CREDENTIAL_ENV_VARS:
        value = os.getenv(name)
        if value:
            return value
    return None


# =============================================================================
# Model Configuration
# =============================================================================

DEFAULT_MODEL = os.getenv("PRAGUE_GUIDE_MODEL", "gemini-2.5-flash")
TEMPERATURE = 0.7
SYSTEM_PROMPT_NAME = "prague_guide_v1"


# =============================================================================
# User-facing fallback messages
# =============================================================================

NO_CREDENTIAL_MESSAGE = (
    "I'm sorry, but I cannot connect to the Prague Guide AI at the moment. "
    "Please check your connection or API key."
)
REQUEST_FAILED_MESSAGE = "Sorry, I'm having trouble accessing the guide database right now."
EMPTY_RESPONSE_MESSAGE = "I couldn't generate a response. Please try again."
