"""Tests for the shared request/response pipeline across every endpoint."""

import httpx
import pytest
from ibportal.client import Client, _type_adapter
from ibportal.errors import IBError, StatusCodeError
from ibportal.schemas.base import LenientList
from ibportal.schemas.contract import (
    SearchContractsInput,
    SearchStrikesInput,
    SecType,
    SecurityDefinitionInfoInput,
)
from ibportal.schemas.market_data import MarketDataHistoryInput
from ibportal.schemas.order import Order, PlaceOrderReplyInput, PlaceOrdersInput
from ibportal.schemas.position import Position
from pydantic import ValidationError

ENDPOINTS = {
    "search_contracts": lambda c: c.search_contracts(SearchContractsInput(symbol="AAPL")),
    "search_strikes": lambda c: c.search_strikes(
        SearchStrikesInput(conid="265598", sec_type=SecType.OPTION, month="DEC23")
    ),
    "security_definition_info": lambda c: c.security_definition_info(
        SecurityDefinitionInfoInput(conid="265598", sec_type=SecType.OPTION)
    ),
    "portfolio_accounts": lambda c: c.portfolio_accounts(),
    "sub_accounts": lambda c: c.sub_accounts(),
    "sub_accounts_large": lambda c: c.sub_accounts_large(1),
    "account_information": lambda c: c.account_information("U123"),
    "account_summary": lambda c: c.account_summary("U123"),
    "positions": lambda c: c.positions("U123"),
    "positions_by_contract_id": lambda c: c.positions_by_contract_id("U123", "265598"),
    "place_orders": lambda c: c.place_orders("U123", PlaceOrdersInput(orders=[Order(conid=1)])),
    "place_order_reply": lambda c: c.place_order_reply(
        "reply-1", PlaceOrderReplyInput(confirmed=True)
    ),
    "cancel_order": lambda c: c.cancel_order("U123", "42"),
    "live_orders": lambda c: c.live_orders(),
    "order_status": lambda c: c.order_status("42"),
    "market_data_history": lambda c: c.market_data_history(
        MarketDataHistoryInput(conid="265598")
    ),
}

endpoint_params = pytest.mark.parametrize(
    "call", list(ENDPOINTS.values()), ids=list(ENDPOINTS.keys())
)


class TestEndpointPipeline:
    @endpoint_params
    def test_broker_error_envelope(self, client, gateway, call):
        gateway.respond(503, {"error": "no bridge"})

        with pytest.raises(StatusCodeError) as exc_info:
            call(client)

        assert "invalid status code '503': no bridge" in str(exc_info.value)
        assert exc_info.value.status_code == 503
        assert isinstance(exc_info.value.err, IBError)

    @endpoint_params
    def test_unexpected_status_with_plain_body(self, client, gateway, call):
        gateway.respond(500, text="failed")

        with pytest.raises(StatusCodeError, match="invalid status code '500': failed"):
            call(client)

    @endpoint_params
    def test_invalid_json_is_a_decode_error(self, client, gateway, call):
        gateway.respond(200, text="garbage")

        with pytest.raises(ValidationError) as exc_info:
            call(client)

        assert "line 1 column 1" in str(exc_info.value)

    @endpoint_params
    def test_body_read_failure_surfaces_unchanged(self, make_client, gateway, call):
        gateway.respond(200, {})

        def failing_read(response):
            raise httpx.ReadError("failed to read response body")

        client = make_client(read_body=failing_read)

        with pytest.raises(httpx.ReadError, match="failed to read response body"):
            call(client)

    @endpoint_params
    def test_transport_failure_surfaces_unchanged(self, client, gateway, call):
        gateway.fail(httpx.ConnectError("failed to connect"))

        with pytest.raises(httpx.ConnectError, match="failed to connect"):
            call(client)

    @endpoint_params
    def test_sends_exactly_one_request(self, client, gateway, call):
        gateway.respond(500, text="failed")

        with pytest.raises(StatusCodeError):
            call(client)

        assert len(gateway.requests) == 1

    @endpoint_params
    def test_response_closed_on_success(self, make_client, gateway, call):
        seen = []

        def recording_read(response):
            seen.append(response)
            return response.read()

        gateway.respond(200, {})
        client = make_client(read_body=recording_read)

        try:
            call(client)
        except ValidationError:
            # List endpoints reject {}; the response must still be closed.
            pass

        assert seen and all(r.is_closed for r in seen)

    @endpoint_params
    def test_response_closed_on_error_status(self, make_client, gateway, call):
        seen = []

        def recording_read(response):
            seen.append(response)
            return response.read()

        gateway.respond(400, {"error": "bad"})
        client = make_client(read_body=recording_read)

        with pytest.raises(StatusCodeError):
            call(client)

        assert seen and all(r.is_closed for r in seen)

    @endpoint_params
    def test_response_closed_on_read_failure(self, make_client, gateway, call):
        seen = []

        def failing_read(response):
            seen.append(response)
            raise httpx.ReadError("boom")

        gateway.respond(200, {})
        client = make_client(read_body=failing_read)

        with pytest.raises(httpx.ReadError):
            call(client)

        assert seen and all(r.is_closed for r in seen)

    @endpoint_params
    def test_status_error_with_unreadable_body(self, make_client, gateway, call):
        def failing_read(response):
            raise httpx.ReadError("boom")

        gateway.respond(502, text="bad gateway")
        client = make_client(read_body=failing_read)

        with pytest.raises(
            StatusCodeError,
            match="invalid status code '502': interactive brokers did not describe error",
        ):
            call(client)


LIST_ENDPOINTS = [
    "search_contracts",
    "security_definition_info",
    "portfolio_accounts",
    "sub_accounts",
    "positions",
    "positions_by_contract_id",
    "place_orders",
    "place_order_reply",
]


class TestListDecoding:
    @pytest.mark.parametrize("name", LIST_ENDPOINTS)
    def test_null_body_is_an_empty_list(self, client, gateway, name):
        gateway.respond(200, None)

        assert ENDPOINTS[name](client) == []

    def test_type_adapters_are_reused(self):
        _type_adapter.cache_clear()

        first = _type_adapter(LenientList[Position])
        second = _type_adapter(LenientList[Position])

        assert first is second
        assert _type_adapter.cache_info().hits == 1


class TestPortfolioAccountsRequest:
    def test_issues_single_get_without_query_or_body(self, make_client, gateway):
        gateway.respond(200, [])
        client = make_client("http://host:5555")

        accounts = client.portfolio_accounts()

        assert accounts == []
        assert len(gateway.requests) == 1
        request = gateway.last_request
        assert request.method == "GET"
        assert str(request.url) == "http://host:5555/v1/api/portfolio/accounts"
        assert request.url.query == b""
        assert request.content == b""


class TestClientLifecycle:
    def test_base_url(self, client):
        assert client.base_url == "http://127.0.0.1:5555"

    def test_does_not_close_injected_http_client(self, gateway):
        http_client = httpx.Client(transport=httpx.MockTransport(gateway))

        with Client("http://127.0.0.1:5555", http_client):
            pass

        assert not http_client.is_closed
        http_client.close()

    def test_closes_owned_http_client(self, gateway):
        http_client = httpx.Client(transport=httpx.MockTransport(gateway))

        with Client("http://127.0.0.1:5555", http_client, owns_http_client=True):
            pass

        assert http_client.is_closed

    def test_creates_default_http_client(self):
        client = Client("http://127.0.0.1:5555")
        client.close()

    def test_set_http_client_redirects_requests(self, client, gateway):
        seen = []

        def other(request):
            seen.append(request)
            return httpx.Response(200, json=[])

        other_client = httpx.Client(transport=httpx.MockTransport(other))
        client.set_http_client(other_client)

        assert client.portfolio_accounts() == []
        assert gateway.requests == []
        assert len(seen) == 1
        other_client.close()

    def test_repeat_calls_return_independent_values(self, client, gateway):
        gateway.respond(200, {"call": [1.0], "put": [2.0]})
        params = SearchStrikesInput(conid="1", sec_type=SecType.OPTION, month="DEC23")

        first = client.search_strikes(params)
        second = client.search_strikes(params)

        assert first == second
        assert first is not second
        assert len(gateway.requests) == 2
