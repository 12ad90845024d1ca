"""Order placement, reply, cancel and status schemas."""

from enum import Enum
from typing import Any

from pydantic import BaseModel, Field

from ibportal.schemas.base import LenientFloat, LenientList, PortalModel, SnakeModel


class TimeInForce(str, Enum):
    GOOD_TILL_CANCELED = "GTC"
    OPEN_PRICE_GUARANTEE = "OPG"
    DAY = "DAY"
    IMMEDIATE_OR_CANCEL = "IOC"


class OrderSide(str, Enum):
    BUY = "BUY"
    SELL = "SELL"


class OrderType(str, Enum):
    LIMIT = "LMT"
    MARKET = "MKT"
    STOP = "STP"
    STOP_LIMIT = "STOP_LIMIT"
    MID_PRICE = "MIDPRICE"
    TRAIL = "TRAIL"
    TRAIL_LIMIT = "TRAILLMT"


class Order(PortalModel):
    """A single order ticket. Fields left as None are not sent."""

    acct_id: str | None = None
    conid: int | None = None
    conidex: str | None = None
    sec_type: str | None = None
    c_oid: str | None = Field(None, alias="cOID")
    parent_id: str | None = None
    order_type: OrderType | None = None
    listing_exchange: str | None = None
    is_single_group: bool | None = None
    outside_rth: bool | None = Field(None, alias="outsideRTH")
    price: float | None = None
    aux_price: float | str | None = None
    side: OrderSide | None = None
    ticker: str | None = None
    tif: TimeInForce | None = None
    trailing_amt: float | None = None
    trailing_type: str | None = None
    referrer: str | None = None
    quantity: int | None = None
    cash_qty: float | None = None
    fx_qty: int | None = None
    use_adaptive: bool | None = None
    is_ccy_conv: bool | None = None
    allocation_method: str | None = None
    strategy: str | None = None
    strategy_parameters: dict[str, Any] | None = None


class PlaceOrdersInput(BaseModel):
    """Body for POST iserver/account/{accountId}/orders."""

    orders: list[Order]


class PlaceOrderReplyInput(BaseModel):
    """Body for POST iserver/reply/{replyid}."""

    confirmed: bool


class PlaceOrderResult(SnakeModel):
    """Either an accepted order or a confirmation question.

    Questions carry id and message; answer them with place_order_reply.
    """

    order_id: str | None = None
    order_status: str | None = None
    local_order_id: str | None = None
    encrypted_message: str | None = Field(None, alias="encrypt_message")
    id: str | None = None
    message: LenientList[str] = Field(default_factory=list)


class CancelOrder(SnakeModel):
    order_id: int | None = None
    msg: str | None = None
    conid: int | None = None
    account: str | None = None


class LiveOrder(PortalModel):
    acct: str | None = None
    conidex: str | None = None
    conid: int | None = None
    order_id: int | None = None
    cash_ccy: str | None = None
    size_and_fills: str | None = None
    order_desc: str | None = None
    description1: str | None = None
    ticker: str | None = None
    sec_type: str | None = None
    listing_exchange: str | None = None
    remaining_quantity: float | None = None
    filled_quantity: float | None = None
    company_name: str | None = None
    status: str | None = None
    orig_order_type: str | None = None
    supports_tax_opt: str | None = None
    last_execution_time: str | None = None
    last_execution_time_r: int | None = Field(None, alias="lastExecutionTime_r")
    order_type: str | None = None
    order_ref: str | None = Field(None, alias="order_ref")
    side: str | None = None
    time_in_force: str | None = None
    price: LenientFloat | None = None
    bg_color: str | None = None
    fg_color: str | None = None


class LiveOrders(PortalModel):
    filters: LenientList[str] = Field(default_factory=list)
    orders: LenientList[LiveOrder] = Field(default_factory=list)
    snapshot: bool | None = None


class OrderStatus(SnakeModel):
    sub_type: str | None = None
    request_id: str | None = None
    order_id: int | None = None
    conidex: str | None = None
    symbol: str | None = None
    side: str | None = None
    contract_description_1: str | None = None
    listing_exchange: str | None = None
    option_acct: str | None = None
    company_name: str | None = None
    size: str | None = None
    total_size: str | None = None
    currency: str | None = None
    account: str | None = None
    order_type: str | None = None
    limit_price: str | None = None
    stop_price: str | None = None
    cum_fill: str | None = None
    order_status: str | None = None
    order_status_description: str | None = None
    tif: str | None = None
    fg_color: str | None = None
    bg_color: str | None = None
    order_not_editable: bool | None = None
    editable_fields: str | None = None
    cannot_cancel_order: bool | None = None
    outside_rth: bool | None = None
    deactivate_order: bool | None = None
    use_price_mgmt_algo: bool | None = None
    sec_type: str | None = None
    available_chart_periods: str | None = None
    order_description: str | None = None
    order_description_with_contract: str | None = None
    alert_active: int | None = None
    child_order_type: str | None = None
    size_and_fills: str | None = None
    exit_strategy_display_price: str | None = None
    exit_strategy_chart_description: str | None = None
    exit_strategy_tool_availability: int | None = None
    allowed_duplicate_opposite: bool | None = None
    order_time: str | None = None
    oca_group_id: str | None = None
