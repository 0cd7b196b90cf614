"""
Unit tests for ChatClient, AsyncChatClient and Profile sending.
"""
import json

import httpx
import pytest

from sermo.client import AsyncChatClient, ChatClient
from sermo.exceptions import DeserializationError, EmptyResponseError, HTTPStatusError


class TestChatClient:
    """Tests for ChatClient."""

    def test_init(self, openai_profile):
        """Test client initialization."""
        client = ChatClient(openai_profile)
        assert client.profile is openai_profile

    def test_send_standard(self, openai_profile, mock_http_client, chat_response_body):
        """Test a full round trip with the choices shape."""
        mock_http_client.post.return_value = httpx.Response(200, text=chat_response_body)

        assert ChatClient(openai_profile).send("hello") == "hi"

        args, kwargs = mock_http_client.post.call_args
        assert args[0] == "https://api.openai.com/v1/chat/completions"
        sent = json.loads(kwargs["content"])
        assert sent == {"model": "gpt-4o-mini", "messages": [{"role": "user", "content": "hello"}]}

    def test_send_ollama_provider(self, ollama_profile, mock_http_client, ollama_response_body):
        """Test a full round trip with the Ollama shape."""
        mock_http_client.post.return_value = httpx.Response(200, text=ollama_response_body)

        assert ChatClient(ollama_profile).send("hello") == "hi"

        args, kwargs = mock_http_client.post.call_args
        assert args[0] == "http://localhost:11434/api/chat"
        sent = json.loads(kwargs["content"])
        assert sent["stream"] is False
        assert sent["temperature"] == 0.7
        assert sent["max_tokens"] == 100

    def test_send_ollama_forces_shape(self, openai_profile, mock_http_client, ollama_response_body):
        """Test send_ollama uses the Ollama shapes with any provider."""
        mock_http_client.post.return_value = httpx.Response(200, text=ollama_response_body)

        assert ChatClient(openai_profile).send_ollama("hello") == "hi"

        _, kwargs = mock_http_client.post.call_args
        assert json.loads(kwargs["content"])["stream"] is False

    def test_status_error_skips_parsing(self, openai_profile, mock_http_client):
        """Test a 500 raises HTTPStatusError without reading the body."""
        mock_http_client.post.return_value = httpx.Response(500, text="not json at all")

        with pytest.raises(HTTPStatusError) as exc_info:
            ChatClient(openai_profile).send("hello")
        assert exc_info.value.status_code == 500

    def test_empty_choices(self, openai_profile, mock_http_client):
        """Test an empty choices list surfaces EmptyResponseError."""
        mock_http_client.post.return_value = httpx.Response(200, text='{"choices":[]}')

        with pytest.raises(EmptyResponseError):
            ChatClient(openai_profile).send("hello")

    def test_wrong_shape(self, ollama_profile, mock_http_client, chat_response_body):
        """Test a body in the wrong shape surfaces DeserializationError."""
        mock_http_client.post.return_value = httpx.Response(200, text=chat_response_body)

        with pytest.raises(DeserializationError):
            ChatClient(ollama_profile).send("hello")


class TestProfileSend:
    """Tests for the Profile send shortcuts."""

    def test_send_single(self, openai_profile, mock_http_client, chat_response_body):
        """Test Profile.send_single delegates to ChatClient."""
        mock_http_client.post.return_value = httpx.Response(200, text=chat_response_body)

        assert openai_profile.send_single("hello") == "hi"

    def test_send_ollama(self, ollama_profile, mock_http_client, ollama_response_body):
        """Test Profile.send_ollama."""
        mock_http_client.post.return_value = httpx.Response(200, text=ollama_response_body)

        assert ollama_profile.send_ollama("hello") == "hi"

    def test_google_url(self, google_profile, mock_http_client, chat_response_body):
        """Test the Google URL carries model and key."""
        mock_http_client.post.return_value = httpx.Response(200, text=chat_response_body)

        google_profile.send_single("hello")

        args, _ = mock_http_client.post.call_args
        assert "models/gemini-pro:generateContent" in args[0]
        assert args[0].endswith("key=AIza-secret-key-9876")


class TestAsyncChatClient:
    """Tests for AsyncChatClient."""

    def test_send_is_async(self, openai_profile):
        """Test that send is an async function."""
        import asyncio

        client = AsyncChatClient(openai_profile)
        assert asyncio.iscoroutinefunction(client.send)

    @pytest.mark.asyncio
    async def test_send(self, openai_profile, mock_async_http_client, chat_response_body):
        """Test a full async round trip."""
        mock_async_http_client.post.return_value = httpx.Response(200, text=chat_response_body)

        assert await AsyncChatClient(openai_profile).send("hello") == "hi"

    @pytest.mark.asyncio
    async def test_send_ollama(self, openai_profile, mock_async_http_client, ollama_response_body):
        """Test the async Ollama path."""
        mock_async_http_client.post.return_value = httpx.Response(200, text=ollama_response_body)

        assert await AsyncChatClient(openai_profile).send_ollama("hello") == "hi"

    @pytest.mark.asyncio
    async def test_empty_choices(self, openai_profile, mock_async_http_client):
        """Test an empty choices list surfaces EmptyResponseError."""
        mock_async_http_client.post.return_value = httpx.Response(200, text='{"choices":[]}')

        with pytest.raises(EmptyResponseError):
            await AsyncChatClient(openai_profile).send("hello")
