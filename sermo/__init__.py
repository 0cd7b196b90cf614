"""
sermo - One client for many LLM chat APIs.

This package builds provider-appropriate chat requests, sends them over HTTP
and extracts a single completion, plus helpers for pulling JSON values out of
free-form model output.
"""

from sermo.providers import Provider
from sermo.profile import Profile
from sermo.client import ChatClient, AsyncChatClient
from sermo.extraction import extract_json, extract_json_flexible
from sermo.logging import get_logger, configure_logging, StructuredLogger, LogLevel
from sermo.exceptions import (
    SermoError,
    SerializationError,
    RequestError,
    TransportError,
    HTTPStatusError,
    ResponseError,
    DeserializationError,
    EmptyResponseError,
    get_user_message,
)

__version__ = "0.1.0"
__all__ = [
    # Core
    "Provider",
    "Profile",
    "ChatClient",
    "AsyncChatClient",
    # Extraction
    "extract_json",
    "extract_json_flexible",
    # Logging
    "get_logger",
    "configure_logging",
    "StructuredLogger",
    "LogLevel",
    # Exceptions
    "SermoError",
    "SerializationError",
    "RequestError",
    "TransportError",
    "HTTPStatusError",
    "ResponseError",
    "DeserializationError",
    "EmptyResponseError",
    "get_user_message",
]
