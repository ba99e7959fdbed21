"""HTTP client side of the gateway: issuing Fizzy API calls and normalizing responses."""

import json
import re
from typing import Any

import httpx

from src.config import RemoteEndpoint
from .schemas import RemoteRequest
from .exceptions import RemoteAPIError, RemoteUnavailableError


CARD_LOCATION_PATTERN = re.compile(r"/cards/(\d+)")


def build_headers(endpoint: RemoteEndpoint) -> dict[str, str]:
    """Headers sent with every Fizzy API call.

    The Authorization header is omitted entirely when no token is configured.
    """
    headers = {
        "Accept": "application/json",
        "Content-Type": "application/json",
    }
    if endpoint.token:
        headers["Authorization"] = f"Bearer {endpoint.token}"
    return headers


def normalize_response(response: httpx.Response) -> Any:
    """Turn a Fizzy API response into a JSON-serializable result.

    Args:
        response: The raw HTTP response.

    Returns:
        - For 201 with a Location header: a synthetic creation record
          carrying the card number parsed from the location, if any.
        - For 201 without Location: {"success": True}.
        - For an empty body: {}.
        - Otherwise the decoded JSON, or {"html": text} when the body
          is not JSON (some endpoints answer with HTML fragments).

    Raises:
        RemoteAPIError: If the status code is not 2xx.
    """
    if not response.is_success:
        raise RemoteAPIError(status_code=response.status_code, body=response.text)

    if response.status_code == 201:
        location = response.headers.get("Location")
        if location:
            match = CARD_LOCATION_PATTERN.search(location)
            return {
                "success": True,
                "message": "Card created",
                "cardNumber": match.group(1) if match else None,
                "location": location,
            }
        return {"success": True}

    text = response.text
    if not text:
        return {}

    try:
        return json.loads(text)
    except json.JSONDecodeError:
        return {"html": text}


async def send_request(
    client: httpx.AsyncClient,
    endpoint: RemoteEndpoint,
    request: RemoteRequest,
) -> httpx.Response:
    """Issue one request against the account-scoped Fizzy API.

    Args:
        client: Shared HTTP client.
        endpoint: Fizzy location and credentials.
        request: Method, path and body to send.

    Returns:
        The raw HTTP response, whatever its status.

    Raises:
        RemoteUnavailableError: If the API could not be reached.
    """
    url = endpoint.url_for(request.path)
    kwargs: dict[str, Any] = {"headers": build_headers(endpoint)}
    if request.body is not None:
        kwargs["json"] = request.body

    try:
        return await client.request(request.method, url, **kwargs)
    except httpx.TimeoutException as e:
        raise RemoteUnavailableError(url=url, reason=f"Request timed out: {e}")
    except httpx.ConnectError as e:
        raise RemoteUnavailableError(url=url, reason=str(e))
    except httpx.RequestError as e:
        raise RemoteUnavailableError(url=url, reason=f"Request failed: {e}")
