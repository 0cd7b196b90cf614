"""
Pytest configuration and shared fixtures.
"""
import pytest
import sys
from pathlib import Path
from unittest.mock import AsyncMock, MagicMock, patch

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent))


# =============================================================================
# Profile fixtures
# =============================================================================

@pytest.fixture
def openai_profile():
    """Provide an OpenAI profile without generation parameters."""
    from sermo.profile import Profile
    from sermo.providers import Provider
    return Profile(
        provider=Provider.OPENAI,
        api_key="sk-test-key-12345",
        model_name="gpt-4o-mini",
    )


@pytest.fixture
def ollama_profile():
    """Provide a local Ollama profile with generation parameters."""
    from sermo.profile import Profile
    from sermo.providers import Provider
    return Profile(
        provider=Provider.OLLAMA,
        model_name="gemma3",
        temperature=0.7,
        max_tokens=100,
    )


@pytest.fixture
def google_profile():
    """Provide a Google profile whose default URL carries placeholders."""
    from sermo.profile import Profile
    from sermo.providers import Provider
    return Profile(
        provider=Provider.GOOGLE,
        api_key="AIza-secret-key-9876",
        model_name="gemini-pro",
    )


# =============================================================================
# Response body fixtures
# =============================================================================

@pytest.fixture
def chat_response_body():
    """Provide a chat-completion response body."""
    return '{"id":"cmpl-1","choices":[{"index":0,"message":{"role":"assistant","content":"hi"}}]}'


@pytest.fixture
def ollama_response_body():
    """Provide an Ollama /api/chat response body."""
    return '{"model":"gemma3","message":{"role":"assistant","content":"hi"},"done":true}'


# =============================================================================
# HTTP fixtures
# =============================================================================

@pytest.fixture
def mock_http_client():
    """Patch httpx.Client; yields the client object used inside `with`."""
    with patch("httpx.Client") as mock_client_class:
        mock_client = MagicMock()
        mock_client_class.return_value.__enter__.return_value = mock_client
        yield mock_client


@pytest.fixture
def mock_async_http_client():
    """Patch httpx.AsyncClient; yields the client object used inside `async with`."""
    with patch("httpx.AsyncClient") as mock_client_class:
        mock_client = AsyncMock()
        mock_client.__aenter__ = AsyncMock(return_value=mock_client)
        mock_client.__aexit__ = AsyncMock(return_value=None)
        mock_client_class.return_value = mock_client
        yield mock_client


# =============================================================================
# Logging fixtures
# =============================================================================

@pytest.fixture
def reset_logging():
    """Restore default logging configuration after the test."""
    from sermo.logging import configure_logging, LogLevel
    yield
    configure_logging(LogLevel.INFO, json_format=False)
