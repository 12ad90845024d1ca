# ibportal/client.py
"""Typed client for the Client Portal Web API.

Every endpoint follows the same round trip: build the path and query or
body, send it through the Transport, reject non-success statuses with a
StatusCodeError, then decode the JSON body into the endpoint's schema.
Nothing is retried; every error reaches the caller unchanged.

The gateway must already be running and authenticated, typically at
https://127.0.0.1:5555 with a self-signed certificate:

    client = Client("https://127.0.0.1:5555", httpx.Client(verify=False))
    accounts = client.portfolio_accounts()
"""

import functools
import logging
from collections.abc import Callable
from typing import Any

import httpx
from pydantic import TypeAdapter

from ibportal.errors import StatusCodeError, decode_error
from ibportal.schemas.base import LenientList
from ibportal.schemas.contract import (
    Contract,
    SearchContractsInput,
    SearchStrikes,
    SearchStrikesInput,
    SecurityDefinitionInfo,
    SecurityDefinitionInfoInput,
)
from ibportal.schemas.market_data import MarketDataHistory, MarketDataHistoryInput
from ibportal.schemas.order import (
    CancelOrder,
    LiveOrders,
    OrderStatus,
    PlaceOrderReplyInput,
    PlaceOrderResult,
    PlaceOrdersInput,
)
from ibportal.schemas.portfolio import AccountSummary, PortfolioAccount, SubAccountsLarge
from ibportal.schemas.position import Position
from ibportal.transport import Transport, substitute_params

logger = logging.getLogger(__name__)

BodyReader = Callable[[httpx.Response], bytes]

# Contracts
SEARCH_CONTRACTS_PATH = "v1/api/iserver/secdef/search"
SEARCH_STRIKES_PATH = "v1/api/iserver/secdef/strikes"
SECDEF_INFO_PATH = "v1/api/iserver/secdef/info"

# Portfolio
PORTFOLIO_ACCOUNTS_PATH = "v1/api/portfolio/accounts"
SUB_ACCOUNTS_PATH = "v1/api/portfolio/subaccounts"
SUB_ACCOUNTS_LARGE_PATH = "v1/api/portfolio/subaccounts2"
ACCOUNT_INFORMATION_PATH = "v1/api/portfolio/{accountId}/meta"
ACCOUNT_SUMMARY_PATH = "v1/api/portfolio/{accountId}/summary"
POSITIONS_PATH = "v1/api/portfolio/{accountId}/positions/{pageId}"
POSITION_BY_CONID_PATH = "v1/api/portfolio/{accountId}/position/{conid}"

# Orders
PLACE_ORDERS_PATH = "v1/api/iserver/account/{accountId}/orders"
PLACE_ORDER_REPLY_PATH = "v1/api/iserver/reply/{replyid}"
CANCEL_ORDER_PATH = "v1/api/iserver/account/{accountId}/order/{orderId}"
LIVE_ORDERS_PATH = "v1/api/iserver/account/orders"
ORDER_STATUS_PATH = "v1/api/iserver/account/order/status/{orderId}"

# Market data
MARKET_DATA_HISTORY_PATH = "v1/api/iserver/marketdata/history"


def read_all(response: httpx.Response) -> bytes:
    """Default body reader: drain the streamed response."""
    return response.read()


@functools.cache
def _type_adapter(output_type: Any) -> TypeAdapter:
    return TypeAdapter(output_type)


class Client:
    """Client Portal Web API binding.

    Holds only the base URL and the HTTP client, so one instance may be
    shared by concurrent callers as far as httpx.Client allows.
    """

    def __init__(
        self,
        base_url: str,
        http_client: httpx.Client | None = None,
        *,
        read_body: BodyReader | None = None,
        owns_http_client: bool = False,
    ) -> None:
        """Initialize the client.

        Args:
            base_url: Gateway URL without a trailing slash
            http_client: Preconfigured httpx.Client (TLS, timeouts, transport).
                A default client is created and owned when omitted.
            read_body: Callable that drains a response body. Defaults to
                httpx's own read; override to inject read failures.
            owns_http_client: Close http_client in close() even though it
                was passed in.
        """
        self._owns_http_client = owns_http_client or http_client is None
        if http_client is None:
            http_client = httpx.Client()
        self._transport = Transport(base_url, http_client)
        self._read_body = read_body or read_all

    @property
    def base_url(self) -> str:
        return self._transport.base_url

    def set_http_client(self, http_client: httpx.Client) -> None:
        """Replace the HTTP client used for subsequent calls."""
        if self._owns_http_client:
            self._transport.http_client.close()
            self._owns_http_client = False
        self._transport.set_http_client(http_client)

    def close(self) -> None:
        if self._owns_http_client:
            self._transport.http_client.close()

    def __enter__(self) -> "Client":
        return self

    def __exit__(self, *exc_info: Any) -> None:
        self.close()

    # ------------------------------------------------------------------
    # Response handling
    # ------------------------------------------------------------------

    def _decode(self, response: httpx.Response, output_type: Any) -> Any:
        try:
            if not response.is_success:
                logger.warning(
                    f"Gateway returned {response.status_code} for "
                    f"{response.request.method} {response.request.url.path}"
                )
                raise StatusCodeError(
                    response.status_code, decode_error(response, self._read_body)
                )
            body = self._read_body(response)
        finally:
            response.close()

        return _type_adapter(output_type).validate_json(body)

    # ------------------------------------------------------------------
    # Contracts
    # ------------------------------------------------------------------

    def search_contracts(self, params: SearchContractsInput) -> list[Contract]:
        """Search contracts by symbol, or by company name when params.name is set."""
        response = self._transport.post(SEARCH_CONTRACTS_PATH, params)
        return self._decode(response, LenientList[Contract])

    def search_strikes(self, params: SearchStrikesInput) -> SearchStrikes:
        """Get the call and put strikes of an underlying for one month."""
        response = self._transport.get(SEARCH_STRIKES_PATH, params.to_query())
        return self._decode(response, SearchStrikes)

    def security_definition_info(
        self, params: SecurityDefinitionInfoInput
    ) -> list[SecurityDefinitionInfo]:
        response = self._transport.get(SECDEF_INFO_PATH, params.to_query())
        return self._decode(response, LenientList[SecurityDefinitionInfo])

    # ------------------------------------------------------------------
    # Portfolio
    # ------------------------------------------------------------------

    def portfolio_accounts(self) -> list[PortfolioAccount]:
        response = self._transport.get(PORTFOLIO_ACCOUNTS_PATH)
        return self._decode(response, LenientList[PortfolioAccount])

    def sub_accounts(self) -> list[PortfolioAccount]:
        response = self._transport.get(SUB_ACCOUNTS_PATH)
        return self._decode(response, LenientList[PortfolioAccount])

    def sub_accounts_large(self, page: int) -> SubAccountsLarge:
        """Get one page of sub-accounts; the caller iterates pages."""
        response = self._transport.get(SUB_ACCOUNTS_LARGE_PATH, [("page", str(page))])
        return self._decode(response, SubAccountsLarge)

    def account_information(self, account_id: str) -> PortfolioAccount:
        path = substitute_params(ACCOUNT_INFORMATION_PATH, ("accountId", account_id))
        response = self._transport.get(path)
        return self._decode(response, PortfolioAccount)

    def account_summary(self, account_id: str) -> AccountSummary:
        path = substitute_params(ACCOUNT_SUMMARY_PATH, ("accountId", account_id))
        response = self._transport.get(path)
        return self._decode(response, AccountSummary)

    def positions(self, account_id: str, page: int = 0) -> list[Position]:
        """Get one page of positions for an account (pages start at 0)."""
        path = substitute_params(
            POSITIONS_PATH,
            ("accountId", account_id),
            ("pageId", str(page)),
        )
        response = self._transport.get(path)
        return self._decode(response, LenientList[Position])

    def positions_by_contract_id(self, account_id: str, conid: str) -> list[Position]:
        path = substitute_params(
            POSITION_BY_CONID_PATH,
            ("conid", conid),
            ("accountId", account_id),
        )
        response = self._transport.get(path)
        return self._decode(response, LenientList[Position])

    # ------------------------------------------------------------------
    # Orders
    # ------------------------------------------------------------------

    def place_orders(self, account_id: str, params: PlaceOrdersInput) -> list[PlaceOrderResult]:
        """Submit orders.

        The gateway may answer with confirmation questions instead of order
        ids; reply to each through place_order_reply.
        """
        path = substitute_params(PLACE_ORDERS_PATH, ("accountId", account_id))
        response = self._transport.post(path, params)
        return self._decode(response, LenientList[PlaceOrderResult])

    def place_order_reply(
        self, reply_id: str, params: PlaceOrderReplyInput
    ) -> list[PlaceOrderResult]:
        path = substitute_params(PLACE_ORDER_REPLY_PATH, ("replyid", reply_id))
        response = self._transport.post(path, params)
        return self._decode(response, LenientList[PlaceOrderResult])

    def cancel_order(self, account_id: str, order_id: str) -> CancelOrder:
        path = substitute_params(
            CANCEL_ORDER_PATH,
            ("accountId", account_id),
            ("orderId", order_id),
        )
        response = self._transport.delete(path)
        return self._decode(response, CancelOrder)

    def live_orders(self) -> LiveOrders:
        response = self._transport.get(LIVE_ORDERS_PATH)
        return self._decode(response, LiveOrders)

    def order_status(self, order_id: str) -> OrderStatus:
        path = substitute_params(ORDER_STATUS_PATH, ("orderId", order_id))
        response = self._transport.get(path)
        return self._decode(response, OrderStatus)

    # ------------------------------------------------------------------
    # Market data
    # ------------------------------------------------------------------

    def market_data_history(self, params: MarketDataHistoryInput) -> MarketDataHistory:
        response = self._transport.get(MARKET_DATA_HISTORY_PATH, params.to_query())
        return self._decode(response, MarketDataHistory)
