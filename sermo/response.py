"""Completion extraction from provider response bodies."""

from typing import TYPE_CHECKING

from pydantic import BaseModel, ValidationError

from sermo.exceptions import DeserializationError, EmptyResponseError
from sermo.providers import Provider
from sermo.request import ChatMessage

if TYPE_CHECKING:
    from sermo.profile import Profile


class ChatChoice(BaseModel):
    """One generated alternative; Ollama returns this shape directly."""
    message: ChatMessage


class OllamaChatResponse(ChatChoice):
    """Ollama /api/chat non-streaming response."""


class ChatResponse(BaseModel):
    """Chat-completion response with an ordered list of choices."""
    choices: list[ChatChoice]


def parse_ollama_completion(body: str) -> str:
    """Return the message content of an Ollama response body."""
    try:
        response = OllamaChatResponse.model_validate_json(body)
    except ValidationError as e:
        raise DeserializationError(str(e), provider=Provider.OLLAMA.slug) from e
    return response.message.content


def parse_chat_completion(body: str, provider: Provider = Provider.OTHER) -> str:
    """
    Return the content of the first choice in a chat-completion body.

    Raises:
        DeserializationError: If the body is not a chat-completion response.
        EmptyResponseError: If the choices list is empty.
    """
    try:
        response = ChatResponse.model_validate_json(body)
    except ValidationError as e:
        raise DeserializationError(str(e), provider=provider.slug) from e

    if not response.choices:
        raise EmptyResponseError("No choices in response", provider=provider.slug)
    return response.choices[0].message.content


def parse_completion(body: str, profile: "Profile") -> str:
    """
    Extract the completion text from body using the profile's response shape.

    Args:
        body: Raw HTTP response body.
        profile: Profile whose provider selects the expected shape.

    Returns:
        The completion string.
    """
    if profile.provider is Provider.OLLAMA:
        return parse_ollama_completion(body)
    return parse_chat_completion(body, profile.provider)
