import json
import os

import httpx
import pytest
from ibportal.client import Client

BASE_URL = "http://127.0.0.1:5555"


def pytest_collection_modifyitems(config, items):
    """Skip live gateway tests unless IBPORTAL_GATEWAY_URL is set."""
    if os.environ.get("IBPORTAL_GATEWAY_URL"):
        return

    skip_gateway = pytest.mark.skip(
        reason="Client Portal gateway not available (set IBPORTAL_GATEWAY_URL)"
    )
    for item in items:
        if "gateway" in item.keywords:
            item.add_marker(skip_gateway)


class FakeGateway:
    """MockTransport handler that records requests and replays one response."""

    def __init__(self):
        self.requests: list[httpx.Request] = []
        self.status_code = 200
        self.body: bytes = b"{}"
        self.error: Exception | None = None

    def respond(self, status_code: int = 200, body=None, text: str | None = None):
        self.status_code = status_code
        if text is not None:
            self.body = text.encode()
        else:
            self.body = json.dumps(body).encode()

    def fail(self, error: Exception):
        self.error = error

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self.error is not None:
            raise self.error
        return httpx.Response(self.status_code, content=self.body)

    @property
    def last_request(self) -> httpx.Request:
        assert self.requests, "no request was sent"
        return self.requests[-1]

    def last_json(self):
        return json.loads(self.last_request.content)


@pytest.fixture
def gateway():
    return FakeGateway()


@pytest.fixture
def client(gateway):
    http_client = httpx.Client(transport=httpx.MockTransport(gateway))
    with Client(BASE_URL, http_client) as c:
        yield c
    http_client.close()


@pytest.fixture
def make_client(gateway):
    """Build a client against the fake gateway with custom options."""
    created = []

    def _make(base_url: str = BASE_URL, **kwargs) -> Client:
        http_client = httpx.Client(transport=httpx.MockTransport(gateway))
        created.append(http_client)
        return Client(base_url, http_client, **kwargs)

    yield _make

    for http_client in created:
        http_client.close()
