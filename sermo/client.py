"""Chat clients: request builder, transport and response extractor wired together."""

from sermo.exceptions import SermoError
from sermo.logging import get_logger
from sermo.profile import Profile
from sermo.request import build_ollama_request, build_request
from sermo.response import parse_completion, parse_ollama_completion
from sermo.transport import async_post_json, post_json

# Module logger
logger = get_logger("client")


class ChatClient:
    """
    Blocking client sending single messages for one profile.

    Args:
        profile: Provider, credentials and generation parameters.
    """

    def __init__(self, profile: Profile):
        self.profile = profile

    def send(self, message: str) -> str:
        """
        Send one user message and return the completion text.

        Args:
            message: Text of the user message.

        Returns:
            The first completion returned by the provider.

        Raises:
            TransportError: If the provider could not be reached.
            HTTPStatusError: If the provider answered with a non-200 status.
            DeserializationError: If the body does not match the provider's shape.
            EmptyResponseError: If the provider returned no choices.
        """
        logger.debug("Sending message", provider=self.profile.provider.slug, model=self.profile.model_name)
        try:
            body = post_json(build_request(self.profile, message), self.profile)
            return parse_completion(body, self.profile)
        except SermoError as e:
            logger.error("Chat request failed", provider=self.profile.provider.slug, error=str(e))
            raise

    def send_ollama(self, message: str) -> str:
        """Like send, but always with the Ollama request and response shapes."""
        logger.debug("Sending Ollama message", model=self.profile.model_name)
        try:
            body = post_json(build_ollama_request(self.profile, message), self.profile)
            return parse_ollama_completion(body)
        except SermoError as e:
            logger.error("Ollama request failed", error=str(e))
            raise


class AsyncChatClient:
    """
    Async client sending single messages for one profile.

    Args:
        profile: Provider, credentials and generation parameters.
    """

    def __init__(self, profile: Profile):
        self.profile = profile

    async def send(self, message: str) -> str:
        """Async variant of ChatClient.send."""
        logger.debug("Sending message", provider=self.profile.provider.slug, model=self.profile.model_name)
        try:
            body = await async_post_json(build_request(self.profile, message), self.profile)
            return parse_completion(body, self.profile)
        except SermoError as e:
            logger.error("Chat request failed", provider=self.profile.provider.slug, error=str(e))
            raise

    async def send_ollama(self, message: str) -> str:
        """Async variant of ChatClient.send_ollama."""
        logger.debug("Sending Ollama message", model=self.profile.model_name)
        try:
            body = await async_post_json(build_ollama_request(self.profile, message), self.profile)
            return parse_ollama_completion(body)
        except SermoError as e:
            logger.error("Ollama request failed", error=str(e))
            raise
