"""
Unified configuration management for sermo.

Supports loading from:
- Environment variables
- YAML config files (sermo.yaml)
- Programmatic overrides

Priority (highest to lowest):
1. Programmatic overrides
2. Environment variables
3. YAML config files
4. Default values

Usage:
    from sermo.config import settings

    # Access settings
    settings.profile.provider
    settings.log.level

    # Build a ready-to-use Profile
    profile = settings.to_profile()

    # Reload from files
    settings.reload()
"""

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional

import yaml

from sermo.logging import configure_logging, get_logger
from sermo.profile import Profile

# Module logger
logger = get_logger("config")


# =============================================================================
# Configuration Dataclasses
# =============================================================================

@dataclass
class ProfileSettings:
    """Default profile configuration."""
    provider: str = "ollama"
    model_name: str = ""
    api_key: str = ""
    api_url: str = ""
    temperature: Optional[float] = None
    max_tokens: Optional[int] = None


@dataclass
class LogSettings:
    """Logging configuration."""
    level: str = "INFO"
    json_format: bool = False


@dataclass
class Settings:
    """
    Main settings container.

    Provides unified access to all configuration.
    """
    profile: ProfileSettings = field(default_factory=ProfileSettings)
    log: LogSettings = field(default_factory=LogSettings)

    # Internal state
    _config_file: Optional[Path] = None
    _env_prefix: str = "SERMO_"

    def __post_init__(self):
        """Load configuration after initialization."""
        self._load_from_yaml()
        self._load_from_env()

    def _load_from_env(self):
        """Load settings from environment variables."""
        prefix = self._env_prefix

        # Profile settings
        if val := os.getenv(f"{prefix}PROVIDER"):
            self.profile.provider = val
        if val := os.getenv(f"{prefix}MODEL"):
            self.profile.model_name = val
        if val := os.getenv(f"{prefix}API_KEY"):
            self.profile.api_key = val
        if val := os.getenv(f"{prefix}API_URL"):
            self.profile.api_url = val
        if val := os.getenv(f"{prefix}TEMPERATURE"):
            self.profile.temperature = float(val)
        if val := os.getenv(f"{prefix}MAX_TOKENS"):
            self.profile.max_tokens = int(val)

        # Log settings
        if val := os.getenv(f"{prefix}LOG_LEVEL"):
            self.log.level = val.upper()
        if val := os.getenv(f"{prefix}LOG_JSON"):
            self.log.json_format = val.lower() in ("true", "1", "yes")

    def _load_from_yaml(self):
        """Load settings from the first YAML config file found."""
        search_paths = [
            Path.cwd() / "sermo.yaml",
            Path.cwd() / "sermo.yml",
            Path.home() / ".sermo" / "config.yaml",
        ]

        for config_path in search_paths:
            if config_path.exists():
                self._config_file = config_path
                self._apply_yaml_config(config_path)
                break

    def _apply_yaml_config(self, path: Path):
        """Apply config from YAML file."""
        try:
            with open(path, 'r', encoding='utf-8') as f:
                data = yaml.safe_load(f) or {}
        except (OSError, yaml.YAMLError) as e:
            logger.warn("Failed to load config", path=str(path), error=str(e))
            return

        if profile := data.get("profile"):
            for key, val in profile.items():
                if hasattr(self.profile, key):
                    setattr(self.profile, key, val)

        if log := data.get("log"):
            for key, val in log.items():
                if hasattr(self.log, key):
                    setattr(self.log, key, val)

    def reload(self):
        """Reload configuration from all sources."""
        self.profile = ProfileSettings()
        self.log = LogSettings()
        self._config_file = None

        self._load_from_yaml()
        self._load_from_env()

    def apply_logging(self):
        """Push the log section to every sermo logger."""
        configure_logging(self.log.level, self.log.json_format)

    def to_profile(self) -> Profile:
        """Build a Profile from the profile section."""
        return Profile.from_dict({
            "provider": self.profile.provider,
            "api_key": self.profile.api_key,
            "model_name": self.profile.model_name,
            "temperature": self.profile.temperature,
            "max_tokens": self.profile.max_tokens,
            "api_url": self.profile.api_url,
        })

    def to_dict(self) -> dict:
        """Convert settings to dictionary."""
        return {
            "profile": {
                "provider": self.profile.provider,
                "model_name": self.profile.model_name,
                "api_url": self.profile.api_url,
                "temperature": self.profile.temperature,
                "max_tokens": self.profile.max_tokens,
                # Exclude api_key for security
            },
            "log": {
                "level": self.log.level,
                "json_format": self.log.json_format,
            }
        }

    def __repr__(self) -> str:
        return f"Settings(config_file={self._config_file})"


# =============================================================================
# Global Settings Instance
# =============================================================================

# Create singleton settings instance
settings = Settings()


def get_settings() -> Settings:
    """Get the global settings instance."""
    return settings


def configure(**kwargs):
    """
    Configure settings programmatically.

    Args:
        **kwargs: Settings to override in format "section_key=value"

    Example:
        configure(profile_model_name="gpt-4o", log_level="DEBUG")
    """
    for key, value in kwargs.items():
        parts = key.split("_", 1)
        if len(parts) == 2:
            section, attr = parts
            if hasattr(settings, section):
                section_obj = getattr(settings, section)
                if hasattr(section_obj, attr):
                    setattr(section_obj, attr, value)
