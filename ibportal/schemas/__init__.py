"""Request and response schemas for the Client Portal Web API."""

from ibportal.schemas.base import NUMERIC_SENTINEL, LenientFloat, LenientList
from ibportal.schemas.contract import (
    Contract,
    ContractSection,
    Right,
    SearchContractsInput,
    SearchStrikes,
    SearchStrikesInput,
    SecType,
    SecurityDefinitionInfo,
    SecurityDefinitionInfoInput,
)
from ibportal.schemas.market_data import Bar, MarketDataHistory, MarketDataHistoryInput
from ibportal.schemas.order import (
    CancelOrder,
    LiveOrder,
    LiveOrders,
    Order,
    OrderSide,
    OrderStatus,
    OrderType,
    PlaceOrderReplyInput,
    PlaceOrderResult,
    PlaceOrdersInput,
    TimeInForce,
)
from ibportal.schemas.portfolio import (
    AccountInformation,
    AccountParent,
    AccountSummary,
    AccountSummaryEntry,
    PortfolioAccount,
    SubAccount,
    SubAccountsLarge,
    SubAccountsMetadata,
)
from ibportal.schemas.position import Position

__all__ = [
    "AccountInformation",
    "AccountParent",
    "AccountSummary",
    "AccountSummaryEntry",
    "Bar",
    "CancelOrder",
    "Contract",
    "ContractSection",
    "LenientFloat",
    "LenientList",
    "LiveOrder",
    "LiveOrders",
    "MarketDataHistory",
    "MarketDataHistoryInput",
    "NUMERIC_SENTINEL",
    "Order",
    "OrderSide",
    "OrderStatus",
    "OrderType",
    "PlaceOrderReplyInput",
    "PlaceOrderResult",
    "PlaceOrdersInput",
    "PortfolioAccount",
    "Position",
    "Right",
    "SearchContractsInput",
    "SearchStrikes",
    "SearchStrikesInput",
    "SecType",
    "SecurityDefinitionInfo",
    "SecurityDefinitionInfoInput",
    "SubAccount",
    "SubAccountsLarge",
    "SubAccountsMetadata",
    "TimeInForce",
]
