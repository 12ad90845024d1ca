# ibportal/errors.py
"""Client Portal error types."""

import json

import httpx

UNDESCRIBED_ERROR = "interactive brokers did not describe error"


class ClientPortalError(Exception):
    """Base exception for Client Portal errors."""
    pass


class IBError(ClientPortalError):
    """Error envelope returned by the gateway: {"error": "..."}."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class StatusCodeError(ClientPortalError):
    """Response carried a non-success HTTP status."""

    def __init__(self, status_code: int, err: Exception):
        super().__init__(f"invalid status code '{status_code}': {err}")
        self.status_code = status_code
        self.err = err


def decode_error(response: httpx.Response, read_body) -> IBError:
    """Build an IBError from a failed response.

    The body is parsed as the gateway's error envelope. When it is not that
    shape, the raw body text becomes the message.

    Args:
        response: The non-success response (still open)
        read_body: Callable returning the full response body as bytes

    Returns:
        IBError describing the failure
    """
    try:
        body = read_body(response)
    except Exception:
        return IBError(UNDESCRIBED_ERROR)

    text = body.decode("utf-8", errors="replace")
    try:
        payload = json.loads(text)
    except ValueError:
        return IBError(text)

    if isinstance(payload, dict) and isinstance(payload.get("error"), str):
        return IBError(payload["error"])
    return IBError(text)
