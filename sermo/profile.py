"""Profile: provider, credentials, model and generation parameters."""

from dataclasses import dataclass
from typing import Any, Optional

from sermo.extraction import extract_json, extract_json_flexible
from sermo.logging import mask_secret
from sermo.providers import Provider


@dataclass(frozen=True)
class Profile:
    """
    Everything needed to talk to one LLM endpoint.

    Attributes:
        provider: Backend vendor; selects request shape, response shape and
            default URL.
        api_key: Static bearer token. Also substituted for ~api_key~ in URLs.
        model_name: Model identifier. Also substituted for ~model~ in URLs.
        temperature: Sampling temperature, omitted from requests when None.
        max_tokens: Output token limit, omitted from requests when None.
        api_url: Custom endpoint; empty means the provider default.
    """

    provider: Provider = Provider.OLLAMA
    api_key: str = ""
    model_name: str = ""
    temperature: Optional[float] = None
    max_tokens: Optional[int] = None
    api_url: str = ""

    @classmethod
    def from_str(
        cls,
        provider_slug: str,
        model_name: str,
        api_key: str,
        temperature: Optional[float] = None,
        max_tokens: Optional[int] = None,
    ) -> "Profile":
        """Build a profile from a provider slug; unknown slugs select OTHER."""
        return cls(
            provider=Provider.from_slug(provider_slug),
            api_key=api_key,
            model_name=model_name,
            temperature=temperature,
            max_tokens=max_tokens,
        )

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Profile":
        """Inverse of to_dict; missing keys take their defaults."""
        return cls(
            provider=Provider.from_slug(data.get("provider") or Provider.OLLAMA.slug),
            api_key=data.get("api_key") or "",
            model_name=data.get("model_name") or "",
            temperature=data.get("temperature"),
            max_tokens=data.get("max_tokens"),
            api_url=data.get("api_url") or "",
        )

    def to_dict(self, redact: bool = False) -> dict[str, Any]:
        """
        Convert to a plain dictionary with the provider as its slug.

        Args:
            redact: Mask the API key, for logs and displays.
        """
        return {
            "provider": self.provider.slug,
            "api_key": mask_secret(self.api_key, self.api_key) if redact else self.api_key,
            "model_name": self.model_name,
            "temperature": self.temperature,
            "max_tokens": self.max_tokens,
            "api_url": self.api_url,
        }

    # ========== Sending ==========

    def send_single(self, message: str) -> str:
        """Send one user message and return the completion text."""
        from sermo.client import ChatClient

        return ChatClient(self).send(message)

    def send_ollama(self, message: str) -> str:
        """Send one user message using the Ollama request and response shapes."""
        from sermo.client import ChatClient

        return ChatClient(self).send_ollama(message)

    # ========== Extraction ==========

    def extract_json(self, text: str, is_object: bool, target: Any = None) -> Optional[Any]:
        """See sermo.extraction.extract_json."""
        return extract_json(text, is_object, target)

    def extract_json_flexible(self, text: str, target: Any = None) -> Optional[Any]:
        """See sermo.extraction.extract_json_flexible."""
        return extract_json_flexible(text, target)

    def __repr__(self) -> str:
        return (
            f"Profile(provider={self.provider.slug}, model_name={self.model_name!r}, "
            f"api_url={self.api_url!r})"
        )
