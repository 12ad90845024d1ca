"""Historical market data schemas."""

from dataclasses import dataclass

from pydantic import Field

from ibportal.schemas.base import LenientList, PortalModel
from ibportal.transport import Query


@dataclass(frozen=True)
class MarketDataHistoryInput:
    """Query for GET iserver/marketdata/history.

    period and bar use the gateway's duration syntax, e.g. "1d", "5min".
    """

    conid: str
    exchange: str = ""
    period: str = ""
    bar: str = ""
    outside_rth: bool = False

    def to_query(self) -> list[Query]:
        queries = [("conid", self.conid)]
        if self.exchange:
            queries.append(("exchange", self.exchange))
        if self.period:
            queries.append(("period", self.period))
        if self.bar:
            queries.append(("bar", self.bar))
        if self.outside_rth:
            queries.append(("outsideRth", "true"))
        return queries


class Bar(PortalModel):
    """OHLCV bar; t is epoch milliseconds."""

    o: float | None = None
    c: float | None = None
    h: float | None = None
    l: float | None = None  # noqa: E741
    v: float | None = None
    t: int | None = None


class MarketDataHistory(PortalModel):
    server_id: str | None = None
    symbol: str | None = None
    text: str | None = None
    price_factor: int | None = None
    start_time: str | None = None
    high: str | None = None
    low: str | None = None
    time_period: str | None = None
    bar_length: int | None = None
    md_availability: str | None = None
    mkt_data_delay: int | None = None
    outside_rth: bool | None = None
    trading_day_duration: int | None = None
    volume_factor: int | None = None
    price_display_rule: int | None = None
    price_display_value: str | None = None
    negative_capable: bool | None = None
    message_version: int | None = None
    data: LenientList[Bar] = Field(default_factory=list)
    points: int | None = None
    travel_time: int | None = None
