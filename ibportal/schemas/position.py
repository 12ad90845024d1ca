"""Portfolio position schema."""

from pydantic import Field

from ibportal.schemas.base import LenientFloat, LenientList, PortalModel


class Position(PortalModel):
    """Position row from portfolio/{accountId}/positions and .../position/{conid}.

    Quantities and prices use LenientFloat because the gateway emits them as
    numbers on some accounts and as quoted strings on others.
    """

    acct_id: str | None = None
    conid: int | None = None
    contract_desc: str | None = None
    asset_class: str | None = None
    position: LenientFloat | None = None
    mkt_price: LenientFloat | None = None
    mkt_value: LenientFloat | None = None
    currency: str | None = None
    avg_cost: LenientFloat | None = None
    avg_price: LenientFloat | None = None
    realized_pnl: LenientFloat | None = None
    unrealized_pnl: LenientFloat | None = None
    exchs: str | None = None
    expiry: str | None = None
    put_or_call: str | None = None
    multiplier: LenientFloat | None = None
    strike: str | None = None
    exercise_style: str | None = None
    und_conid: int | None = None
    con_exch_map: LenientList[str] = Field(default_factory=list)
    base_mkt_value: LenientFloat | None = None
    base_mkt_price: LenientFloat | None = None
    base_avg_cost: LenientFloat | None = None
    base_avg_price: LenientFloat | None = None
    base_realized_pnl: LenientFloat | None = None
    base_unrealized_pnl: LenientFloat | None = None
    name: str | None = None
    last_trading_day: str | None = None
    group: str | None = None
    sector: str | None = None
    sector_group: str | None = None
    ticker: str | None = None
    und_comp: str | None = None
    und_sym: str | None = None
    full_name: str | None = None
    page_size: int | None = None
    model: str | None = None
