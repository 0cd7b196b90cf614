"""
Exception hierarchy for sermo.

This module defines a structured exception hierarchy that enables:
- Clear separation of request-side and response-side failures
- Rich error context for debugging
- User-friendly error messages

Usage:
    from sermo.exceptions import HTTPStatusError

    raise HTTPStatusError("HTTP error: 500", status_code=500)
"""

from typing import Any


class SermoError(Exception):
    """
    Base exception for all sermo errors.

    All custom exceptions inherit from this class, enabling
    catch-all handling when needed.

    Attributes:
        user_message: User-friendly error description
        context: Additional context for debugging
    """

    user_message: str = "An error occurred"

    def __init__(self, message: str, **context: Any):
        super().__init__(message)
        self.context = context

    def __str__(self) -> str:
        base = super().__str__()
        if self.context:
            ctx_str = ", ".join(f"{k}={v}" for k, v in self.context.items())
            return f"{base} ({ctx_str})"
        return base


class SerializationError(SermoError):
    """
    Outgoing payload could not be encoded as JSON.

    The request shapes are fixed, so this is practically unreachable.
    """
    user_message = "Failed to encode the request payload"


# ============================================================================
# Request Errors
# ============================================================================

class RequestError(SermoError):
    """Base class for failures while talking to the provider."""
    user_message = "Request to the LLM provider failed"


class TransportError(RequestError):
    """
    The HTTP call itself failed (DNS, refused connection, TLS, ...).

    The underlying httpx exception is chained as ``__cause__``.
    """
    user_message = "Cannot reach the LLM provider. Please check the URL and your network."


class HTTPStatusError(RequestError):
    """
    Provider answered with a status code other than 200.

    The response body is never parsed in this case.
    """
    user_message = "The LLM provider returned an HTTP error"

    @property
    def status_code(self) -> int:
        """Numeric HTTP status returned by the provider."""
        return self.context.get("status_code", 0)


# ============================================================================
# Response Errors
# ============================================================================

class ResponseError(SermoError):
    """Base class for failures while reading the provider's answer."""
    user_message = "Could not read the LLM provider response"


class DeserializationError(ResponseError):
    """
    Response body does not match the expected shape for the provider.

    The message carries the original parser message.
    """
    user_message = "The LLM provider returned an unexpected response"


class EmptyResponseError(ResponseError):
    """Provider returned a well-formed response with zero choices."""
    user_message = "The LLM provider returned no completion"


# ============================================================================
# Utility Functions
# ============================================================================

def get_user_message(error: Exception) -> str:
    """
    Get a user-friendly error message.

    Args:
        error: The exception

    Returns:
        User-friendly message string
    """
    if isinstance(error, SermoError):
        return error.user_message
    return str(error)
