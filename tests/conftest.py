"""
Pytest fixtures for the Prague Guide tests.
"""

import sys
from pathlib import Path
from unittest.mock import AsyncMock, MagicMock, patch

import pytest
from fastapi.testclient import TestClient

# Add src to path for imports
src_path = Path(__file__).parent.parent / "src"
sys.path.insert(0, str(src_path))

import api.main as api_main
from chatbot import SessionStore
from llm.config import CREDENTIAL_ENV_VARS


@pytest.fixture
def no_credentials(monkeypatch):
    """Remove every Gemini credential from the environment."""
    for name in CREDENTIAL_ENV_VARS:
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def mock_advisor():
    """Mock advice provider answering every question with a fixed reply."""
    mock = MagicMock()
    mock.provider_name = "gemini"
    mock.default_model = "gemini-2.5-flash"
    mock.is_configured = True
    mock.request_advice = AsyncMock(return_value="Night quiet starts at 22:00.")
    return mock


@pytest.fixture
def sessions(mock_advisor) -> SessionStore:
    return SessionStore(mock_advisor)


@pytest.fixture
def client(mock_advisor, sessions):
    """
    Test client with mocked dependencies.

    Mocks:
    - the advice provider (no real Gemini calls)
    - the session store (fresh per test)
    """
    with patch.object(api_main, "get_advisor", return_value=mock_advisor):
        with patch.object(api_main, "get_sessions", return_value=sessions):
            yield TestClient(api_main.app)
