"""
HTTP transport for chat requests.

One POST per call, a fresh httpx client per call, no retries and no timeout:
a provider that never answers blocks the caller.
"""

from typing import TYPE_CHECKING

import httpx

from sermo.exceptions import HTTPStatusError, TransportError
from sermo.logging import get_logger, mask_secret

if TYPE_CHECKING:
    from sermo.profile import Profile

# Module logger
logger = get_logger("transport")

MODEL_PLACEHOLDER = "~model~"
API_KEY_PLACEHOLDER = "~api_key~"


def resolve_url(profile: "Profile") -> str:
    """
    Resolve the endpoint for profile.

    Uses profile.api_url when set, the provider default otherwise, then
    substitutes every ~model~ and ~api_key~ placeholder.
    """
    url = profile.api_url or profile.provider.default_url
    url = url.replace(MODEL_PLACEHOLDER, profile.model_name)
    url = url.replace(API_KEY_PLACEHOLDER, profile.api_key)
    return url


def _headers(profile: "Profile") -> dict[str, str]:
    return {
        "Authorization": f"Bearer {profile.api_key}",
        "Content-Type": "application/json",
    }


def _check_status(response: httpx.Response, safe_url: str) -> str:
    logger.response(response.status_code, url=safe_url, size=len(response.content))
    if response.status_code != 200:
        raise HTTPStatusError(
            f"HTTP error: {response.status_code}",
            status_code=response.status_code,
        )
    return response.text


def post_json(payload: str, profile: "Profile") -> str:
    """
    POST payload to the profile's endpoint and return the raw body.

    Args:
        payload: Serialized JSON request.
        profile: Profile supplying URL, model and API key.

    Returns:
        Response body text of a 200 answer.

    Raises:
        TransportError: If the HTTP call could not be completed.
        HTTPStatusError: If the status code is anything but 200.
    """
    url = resolve_url(profile)
    safe_url = mask_secret(url, profile.api_key)
    logger.request("POST", url=safe_url, provider=profile.provider.slug)

    try:
        with httpx.Client(timeout=None, follow_redirects=True) as client:
            response = client.post(url, content=payload.encode("utf-8"), headers=_headers(profile))
    except (httpx.HTTPError, httpx.InvalidURL, UnicodeEncodeError) as e:
        raise TransportError(mask_secret(str(e), profile.api_key), url=safe_url) from e

    return _check_status(response, safe_url)


async def async_post_json(payload: str, profile: "Profile") -> str:
    """Async variant of post_json with the same contract."""
    url = resolve_url(profile)
    safe_url = mask_secret(url, profile.api_key)
    logger.request("POST", url=safe_url, provider=profile.provider.slug)

    try:
        async with httpx.AsyncClient(timeout=None, follow_redirects=True) as client:
            response = await client.post(url, content=payload.encode("utf-8"), headers=_headers(profile))
    except (httpx.HTTPError, httpx.InvalidURL, UnicodeEncodeError) as e:
        raise TransportError(mask_secret(str(e), profile.api_key), url=safe_url) from e

    return _check_status(response, safe_url)
