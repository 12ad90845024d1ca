# ibportal/transport.py
"""HTTP transport for the Client Portal Web API.

Wraps an httpx.Client and a base URL. Responses are opened in streaming
mode so the caller decides when the body is read; the caller must close
every response it receives.
"""

import json
import logging
from typing import Any

import httpx
from pydantic import BaseModel

logger = logging.getLogger(__name__)

Query = tuple[str, str]
Param = tuple[str, str]


def substitute_params(path: str, *params: Param) -> str:
    """Replace each {key} placeholder in path with its value.

    Substitution is a literal replace applied in order. Placeholders without
    a matching key are left as they are.
    """
    for key, value in params:
        path = path.replace("{" + key + "}", value)
    return path


def encode_body(body: Any) -> bytes:
    """Serialize a request body to JSON bytes.

    Pydantic models are dumped by alias with unset fields left out. Raises
    TypeError when the value is not JSON-representable.
    """
    if isinstance(body, BaseModel):
        body = body.model_dump(mode="json", by_alias=True, exclude_none=True)
    return json.dumps(body).encode("utf-8")


class Transport:
    """GET/POST/DELETE primitives against a fixed base URL."""

    def __init__(self, base_url: str, http_client: httpx.Client) -> None:
        self.base_url = base_url
        self._http = http_client

    @property
    def http_client(self) -> httpx.Client:
        return self._http

    def set_http_client(self, http_client: httpx.Client) -> None:
        self._http = http_client

    def url_for(self, path: str) -> str:
        # No normalization: base_url must not end with a slash.
        return f"{self.base_url}/{path}"

    def get(self, path: str, queries: list[Query] | None = None) -> httpx.Response:
        params = httpx.QueryParams(queries) if queries else None
        return self._send("GET", path, params=params)

    def post(self, path: str, body: Any) -> httpx.Response:
        content = encode_body(body)
        return self._send(
            "POST",
            path,
            content=content,
            headers={"Content-Type": "application/json"},
        )

    def delete(self, path: str) -> httpx.Response:
        return self._send("DELETE", path)

    def _send(self, method: str, path: str, **kwargs) -> httpx.Response:
        request = self._http.build_request(method, self.url_for(path), **kwargs)
        logger.debug(f"{method} {request.url}")
        return self._http.send(request, stream=True)
