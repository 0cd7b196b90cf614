"""Registry of supported LLM providers and their static metadata."""

from enum import Enum


class Provider(Enum):
    """
    Closed set of LLM API vendors.

    The enum value is the provider's slug. ``OTHER`` is the fallback for
    anything unrecognized and points at a generic local endpoint.
    """

    OLLAMA = "ollama"
    OPENAI = "openai"
    ANTHROPIC = "anthropic"
    GOOGLE = "google"
    XAI = "xai"
    MISTRAL = "mistral"
    DEEPSEEK = "deepseek"
    GROQ = "groq"
    TOGETHER = "together"
    OTHER = "other"

    @property
    def slug(self) -> str:
        """Lowercase machine-readable name."""
        return self.value

    @property
    def display_name(self) -> str:
        """Human-readable name, as shown in a provider menu."""
        return _DISPLAY_NAMES[self]

    @property
    def default_url(self) -> str:
        """Completion endpoint template; may contain ~model~ and ~api_key~."""
        return _DEFAULT_URLS[self]

    @property
    def index(self) -> int:
        """Numeric index used by menus; OTHER sits past the selectable range."""
        return _INDEX_ORDER.index(self) if self in _INDEX_ORDER else len(_INDEX_ORDER)

    def __str__(self) -> str:
        return self.display_name

    @classmethod
    def from_slug(cls, slug: str) -> "Provider":
        """Case-insensitive lookup; unknown slugs map to OTHER."""
        try:
            return cls((slug or "").lower())
        except ValueError:
            return cls.OTHER

    @classmethod
    def from_index(cls, index: int) -> "Provider":
        """Map 0..8 to OLLAMA..TOGETHER; any other integer maps to OTHER."""
        if 0 <= index < len(_INDEX_ORDER):
            return _INDEX_ORDER[index]
        return cls.OTHER

    @classmethod
    def list_selectable(cls) -> dict[str, str]:
        """Index string -> display name for indices 1..8, in index order."""
        return {str(i): cls.from_index(i).display_name for i in range(1, len(_INDEX_ORDER))}


_INDEX_ORDER = (
    Provider.OLLAMA,
    Provider.OPENAI,
    Provider.ANTHROPIC,
    Provider.GOOGLE,
    Provider.XAI,
    Provider.MISTRAL,
    Provider.DEEPSEEK,
    Provider.GROQ,
    Provider.TOGETHER,
)

_DISPLAY_NAMES = {
    Provider.OLLAMA: "Ollama",
    Provider.OPENAI: "OpenAI",
    Provider.ANTHROPIC: "Anthropic",
    Provider.GOOGLE: "Google Gemini",
    Provider.XAI: "X.ai",
    Provider.MISTRAL: "Mistral",
    Provider.DEEPSEEK: "Deepseek",
    Provider.GROQ: "Groq",
    Provider.TOGETHER: "TogetherAI",
    Provider.OTHER: "Other",
}

_DEFAULT_URLS = {
    Provider.OLLAMA: "http://localhost:11434/api/chat",
    Provider.OPENAI: "https://api.openai.com/v1/chat/completions",
    Provider.ANTHROPIC: "https://api.anthropic.com/v1/messages",
    Provider.GOOGLE: "https://generativelanguage.googleapis.com/v1beta/models/~model~:generateContent?key=~api_key~",
    Provider.XAI: "https://api.x.ai/v1/chat/completions",
    Provider.MISTRAL: "https://api.mixtral.ai/v1/chat/completions",
    Provider.DEEPSEEK: "https://api.deepseek.com/v1/chat/completions",
    Provider.GROQ: "https://api.groq.com/openai/v1/chat/completions",
    Provider.TOGETHER: "https://api.together.xyz/v1/chat/completions",
    Provider.OTHER: "http://localhost:8000/v1/chat/completions",
}
