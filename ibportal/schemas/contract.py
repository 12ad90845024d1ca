"""Contract search and security definition schemas."""

from dataclasses import dataclass
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field

from ibportal.schemas.base import LenientList, PortalModel
from ibportal.transport import Query


class SecType(str, Enum):
    """Security type of a contract."""

    OPTION = "OPT"
    STOCK = "STK"
    WARRANT = "WAR"


class Right(str, Enum):
    """Option right."""

    CALL = "C"
    PUT = "P"


class SearchContractsInput(BaseModel):
    """Body for POST iserver/secdef/search."""

    model_config = ConfigDict(populate_by_name=True)

    symbol: str
    name: bool = False
    sec_type: SecType | None = Field(None, alias="sectype")


class ContractSection(PortalModel):
    sec_type: str | None = None
    months: str | None = None
    symbol: str | None = None
    exchange: str | None = None
    leg_sec_type: str | None = None


class Contract(PortalModel):
    conid: str | None = None
    company_header: str | None = None
    company_name: str | None = None
    symbol: str | None = None
    description: str | None = None
    restricted: str | None = None
    fop: str | None = None
    opt: str | None = None
    war: str | None = None
    sections: LenientList[ContractSection] = Field(default_factory=list)


@dataclass(frozen=True)
class SearchStrikesInput:
    """Query for GET iserver/secdef/strikes."""

    conid: str
    sec_type: SecType | str
    month: str
    exchange: str = ""

    def to_query(self) -> list[Query]:
        queries = [
            ("conid", self.conid),
            ("sectype", _enum_value(self.sec_type)),
            ("month", self.month),
        ]
        if self.exchange:
            queries.append(("exchange", self.exchange))
        return queries


class SearchStrikes(PortalModel):
    call: LenientList[float] = Field(default_factory=list)
    put: LenientList[float] = Field(default_factory=list)


@dataclass(frozen=True)
class SecurityDefinitionInfoInput:
    """Query for GET iserver/secdef/info.

    Only conid and sec_type are always sent; the rest are dropped from the
    query when left empty or zero.
    """

    conid: str
    sec_type: SecType | str
    month: str = ""
    exchange: str = ""
    strike: float = 0.0
    right: Right | str = ""

    def to_query(self) -> list[Query]:
        queries = [
            ("conid", self.conid),
            ("sectype", _enum_value(self.sec_type)),
        ]
        if self.month:
            queries.append(("month", self.month))
        if self.exchange:
            queries.append(("exchange", self.exchange))
        if self.strike != 0:
            queries.append(("strike", f"{self.strike:f}"))
        if self.right:
            queries.append(("right", _enum_value(self.right)))
        return queries


class SecurityDefinitionInfo(PortalModel):
    conid: int | None = None
    symbol: str | None = None
    sec_type: str | None = None
    exchange: str | None = None
    listing_exchange: str | None = None
    right: str | None = None
    strike: float | None = None
    currency: str | None = None
    cusip: str | None = None
    coupon: str | None = None
    desc1: str | None = None
    desc2: str | None = None
    maturity_date: str | None = None
    multiplier: str | None = None
    trading_class: str | None = None
    valid_exchanges: str | None = None


def _enum_value(value: Enum | str) -> str:
    return value.value if isinstance(value, Enum) else value
