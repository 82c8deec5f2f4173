from typing import Any

import aiohttp
from .error import IotAuthenticationException, IotAuthorizationException


async def raise_for_status_with_message(resp: aiohttp.ClientResponse) -> None:
    """
    A wrapper around `raise_for_status` to show the error message returned by the
    google API when it's present.

    Google APIs answer errors with an envelope such as
    `{"error": {"code": 401, "message": "...", "status": "UNAUTHENTICATED"}}`

    Note: this will exhaust the request body if it raises an exception
    """
    if resp.ok:
        return None

    try:
        body = await resp.json()
    except (aiohttp.ContentTypeError, ValueError):
        # Proxies and load balancers answer with HTML pages or undecodable bytes,
        # just defer the error reporting back to aiohttp.
        resp.raise_for_status()

    error_message = None
    if isinstance(body, dict):
        error = body.get("error")
        if isinstance(error, dict):
            error_message = error.get("message")
        elif isinstance(error, str):
            error_message = body.get("error_description", error)

    if error_message is None:
        error_message = resp.reason

    if resp.status == 401:
        raise IotAuthenticationException(error_message)
    elif resp.status == 403:
        raise IotAuthorizationException(error_message)

    raise aiohttp.ClientResponseError(
        resp.request_info,
        resp.history,
        status=resp.status,
        message=error_message,
        headers=resp.headers,
    )


async def read_body(resp: aiohttp.ClientResponse) -> Any:
    """
    Returns the decoded JSON body when the response says it is JSON, the raw text otherwise.
    An empty body gives `None`.

    Raises `ValueError` if the body can't be decoded.
    """
    if resp.content_type == "application/json" or resp.content_type.endswith("+json"):
        return await resp.json()

    text = await resp.text()
    return text if text.strip() else None
