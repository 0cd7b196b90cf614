"""Chat request payloads for the standard and Ollama wire shapes."""

from typing import Optional, TYPE_CHECKING

from pydantic import BaseModel, ValidationError
from pydantic_core import PydanticSerializationError

from sermo.exceptions import SerializationError
from sermo.providers import Provider

if TYPE_CHECKING:
    from sermo.profile import Profile


class ChatMessage(BaseModel):
    """Single message in a chat conversation."""
    role: str
    content: str


class ChatRequest(BaseModel):
    """Chat-completion request accepted by OpenAI-compatible providers."""
    model: str
    messages: list[ChatMessage]
    temperature: Optional[float] = None
    max_tokens: Optional[int] = None


class OllamaChatRequest(BaseModel):
    """Ollama /api/chat request; identical to ChatRequest plus the stream flag."""
    model: str
    messages: list[ChatMessage]
    stream: bool = False
    temperature: Optional[float] = None
    max_tokens: Optional[int] = None


def user_message(content: str) -> ChatMessage:
    """Create the single user-role message every request carries."""
    return ChatMessage(role="user", content=content)


def _dump(request: BaseModel) -> str:
    # Unset generation parameters are omitted, not sent as null.
    try:
        return request.model_dump_json(exclude_none=True)
    except PydanticSerializationError as e:
        raise SerializationError(f"Failed to serialize request: {e}") from e


def build_ollama_request(profile: "Profile", message: str) -> str:
    """
    Serialize an Ollama-shaped request for message.

    Args:
        profile: Profile supplying model and generation parameters.
        message: Text sent as the user message, passed through verbatim.

    Returns:
        Compact JSON payload.
    """
    try:
        request = OllamaChatRequest(
            model=profile.model_name,
            messages=[user_message(message)],
            stream=False,
            temperature=profile.temperature,
            max_tokens=profile.max_tokens,
        )
    except ValidationError as e:
        raise SerializationError(f"Invalid request fields: {e}") from e
    return _dump(request)


def build_request(profile: "Profile", message: str) -> str:
    """
    Serialize the request shape that matches profile.provider.

    The Ollama shape is used iff the provider is Ollama, the standard
    chat-completion shape otherwise.

    Args:
        profile: Profile supplying provider, model and generation parameters.
        message: Text sent as the user message, passed through verbatim.

    Returns:
        Compact JSON payload.
    """
    if profile.provider is Provider.OLLAMA:
        return build_ollama_request(profile, message)

    try:
        request = ChatRequest(
            model=profile.model_name,
            messages=[user_message(message)],
            temperature=profile.temperature,
            max_tokens=profile.max_tokens,
        )
    except ValidationError as e:
        raise SerializationError(f"Invalid request fields: {e}") from e
    return _dump(request)
