"""Portfolio account and account summary schemas."""

from pydantic import ConfigDict, Field

from ibportal.schemas.base import LenientFloat, LenientList, PortalModel


class AccountParent(PortalModel):
    mmc: LenientList[str] = Field(default_factory=list)
    account_id: str | None = None
    is_m_parent: bool | None = Field(None, alias="isMParent")
    is_m_child: bool | None = Field(None, alias="isMChild")
    is_multiplex: bool | None = None


class PortfolioAccount(PortalModel):
    """Account as listed by portfolio/accounts, subaccounts and {accountId}/meta."""

    id: str | None = None
    account_id: str | None = None
    account_van: str | None = None
    account_title: str | None = None
    display_name: str | None = None
    account_alias: str | None = None
    account_status: int | None = None
    currency: str | None = None
    type: str | None = None
    trading_type: str | None = None
    faclient: bool | None = None
    clearing_status: str | None = None
    covestor: bool | None = None
    parent: AccountParent | None = None
    desc: str | None = None


# Sub-accounts and account metadata share the account listing shape.
SubAccount = PortfolioAccount
AccountInformation = PortfolioAccount


class SubAccountsMetadata(PortalModel):
    total: int | None = None
    page_size: int | None = None
    # Spelled this way by the gateway.
    page_nume: int | None = None


class SubAccountsLarge(PortalModel):
    metadata: SubAccountsMetadata | None = None
    subaccounts: LenientList[PortfolioAccount] = Field(default_factory=list)


class AccountSummaryEntry(PortalModel):
    """One summary line. value may arrive as a number or a quoted number."""

    amount: float | None = None
    currency: str | None = None
    is_null: bool | None = None
    timestamp: int | None = None
    value: LenientFloat | None = None


def _summary_alias(name: str) -> str:
    return name.replace("_", "-")


Entry = AccountSummaryEntry | None


class AccountSummary(PortalModel):
    """Financial summary for an account.

    Keys ending in -c, -f and -s are the commodity, futures and securities
    segment breakdowns of the same line.
    """

    model_config = ConfigDict(alias_generator=_summary_alias)

    accountready: Entry = None
    accounttype: Entry = None
    accruedcash: Entry = None
    accruedcash_c: Entry = None
    accruedcash_f: Entry = None
    accruedcash_s: Entry = None
    accrueddividend: Entry = None
    accrueddividend_c: Entry = None
    accrueddividend_f: Entry = None
    accrueddividend_s: Entry = None
    availablefunds: Entry = None
    availablefunds_c: Entry = None
    availablefunds_f: Entry = None
    availablefunds_s: Entry = None
    billable: Entry = None
    billable_c: Entry = None
    billable_f: Entry = None
    billable_s: Entry = None
    buyingpower: Entry = None
    cushion: Entry = None
    daytradesremaining: Entry = None
    daytradesremaining_t1: Entry = Field(None, alias="daytradesremainingt+1")
    daytradesremaining_t2: Entry = Field(None, alias="daytradesremainingt+2")
    daytradesremaining_t3: Entry = Field(None, alias="daytradesremainingt+3")
    daytradesremaining_t4: Entry = Field(None, alias="daytradesremainingt+4")
    equitywithloanvalue: Entry = None
    equitywithloanvalue_c: Entry = None
    equitywithloanvalue_f: Entry = None
    equitywithloanvalue_s: Entry = None
    excessliquidity: Entry = None
    excessliquidity_c: Entry = None
    excessliquidity_f: Entry = None
    excessliquidity_s: Entry = None
    fullavailablefunds: Entry = None
    fullavailablefunds_c: Entry = None
    fullavailablefunds_f: Entry = None
    fullavailablefunds_s: Entry = None
    fullexcessliquidity: Entry = None
    fullexcessliquidity_c: Entry = None
    fullexcessliquidity_f: Entry = None
    fullexcessliquidity_s: Entry = None
    fullinitmarginreq: Entry = None
    fullinitmarginreq_c: Entry = None
    fullinitmarginreq_f: Entry = None
    fullinitmarginreq_s: Entry = None
    fullmaintmarginreq: Entry = None
    fullmaintmarginreq_c: Entry = None
    fullmaintmarginreq_f: Entry = None
    fullmaintmarginreq_s: Entry = None
    grosspositionvalue: Entry = None
    grosspositionvalue_c: Entry = None
    grosspositionvalue_f: Entry = None
    grosspositionvalue_s: Entry = None
    guarantee: Entry = None
    guarantee_c: Entry = None
    guarantee_f: Entry = None
    guarantee_s: Entry = None
    highestseverity: Entry = None
    highestseverity_c: Entry = None
    highestseverity_f: Entry = None
    highestseverity_s: Entry = None
    indianstockhaircut: Entry = None
    indianstockhaircut_c: Entry = None
    indianstockhaircut_f: Entry = None
    indianstockhaircut_s: Entry = None
    initmarginreq: Entry = None
    initmarginreq_c: Entry = None
    initmarginreq_f: Entry = None
    initmarginreq_s: Entry = None
    leverage: Entry = None
    leverage_c: Entry = None
    leverage_f: Entry = None
    leverage_s: Entry = None
    lookaheadavailablefunds: Entry = None
    lookaheadavailablefunds_c: Entry = None
    lookaheadavailablefunds_f: Entry = None
    lookaheadavailablefunds_s: Entry = None
    lookaheadexcessliquidity: Entry = None
    lookaheadexcessliquidity_c: Entry = None
    lookaheadexcessliquidity_f: Entry = None
    lookaheadexcessliquidity_s: Entry = None
    lookaheadinitmarginreq: Entry = None
    lookaheadinitmarginreq_c: Entry = None
    lookaheadinitmarginreq_f: Entry = None
    lookaheadinitmarginreq_s: Entry = None
    lookaheadmaintmarginreq: Entry = None
    lookaheadmaintmarginreq_c: Entry = None
    lookaheadmaintmarginreq_f: Entry = None
    lookaheadmaintmarginreq_s: Entry = None
    lookaheadnextchange: Entry = None
    maintmarginreq: Entry = None
    maintmarginreq_c: Entry = None
    maintmarginreq_f: Entry = None
    maintmarginreq_s: Entry = None
    netliquidation: Entry = None
    netliquidation_c: Entry = None
    netliquidation_f: Entry = None
    netliquidation_s: Entry = None
    netliquidationuncertainty: Entry = None
    nlvandmargininreview: Entry = None
    pasharesvalue: Entry = None
    pasharesvalue_c: Entry = None
    pasharesvalue_f: Entry = None
    pasharesvalue_s: Entry = None
    postexpirationexcess: Entry = None
    postexpirationexcess_c: Entry = None
    postexpirationexcess_f: Entry = None
    postexpirationexcess_s: Entry = None
    postexpirationmargin: Entry = None
    postexpirationmargin_c: Entry = None
    postexpirationmargin_f: Entry = None
    postexpirationmargin_s: Entry = None
    previousdayequitywithloanvalue: Entry = None
    previousdayequitywithloanvalue_c: Entry = None
    previousdayequitywithloanvalue_f: Entry = None
    previousdayequitywithloanvalue_s: Entry = None
    segmenttitle_c: Entry = None
    segmenttitle_f: Entry = None
    segmenttitle_s: Entry = None
    totalcashvalue: Entry = None
    totalcashvalue_c: Entry = None
    totalcashvalue_f: Entry = None
    totalcashvalue_s: Entry = None
    totaldebitcardpendingcharges: Entry = None
    totaldebitcardpendingcharges_c: Entry = None
    totaldebitcardpendingcharges_f: Entry = None
    totaldebitcardpendingcharges_s: Entry = None
    tradingtype_f: Entry = None
    tradingtype_s: Entry = None
