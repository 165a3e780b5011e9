"""Response models for the Open Exchange Rates API."""

from typing import Annotated, Any, Dict, Literal, Optional

from pydantic import BaseModel, BeforeValidator, ConfigDict, Field, RootModel, StringConstraints

CurrencyCode = Annotated[str, StringConstraints(min_length=3, max_length=3)]
Rate = Annotated[float, Field(gt=0)]
Amount = Annotated[float, Field(ge=0)]
Count = Annotated[int, Field(ge=0)]
Rates = Dict[CurrencyCode, Rate]

def _upper(value: Any) -> Any:
    return value.upper() if isinstance(value, str) else value

class OpenExchangeModel(BaseModel):
    model_config = ConfigDict(extra="ignore", populate_by_name=True)

class RatesResponse(OpenExchangeModel):
    """Fields shared by every rates style response"""

    disclaimer: Optional[Annotated[str, StringConstraints(min_length=5)]] = None
    license: Optional[Annotated[str, StringConstraints(min_length=5)]] = None

class ErrorEnvelope(OpenExchangeModel):
    error: Literal[True]
    status: Literal[400, 401, 403, 404, 429]
    message: Literal[
        "not_found",
        "missing_app_id",
        "invalid_app_id",
        "not_allowed",
        "access_restricted",
        "invalid_base",
    ]
    description: str

class Currencies(RootModel[Dict[CurrencyCode, Annotated[str, StringConstraints(min_length=1)]]]):
    pass

class LatestRates(RatesResponse):
    timestamp: Optional[Count] = None
    base: Optional[CurrencyCode] = None
    rates: Rates

class HistoricalRates(RatesResponse):
    timestamp: Count
    historical: Literal[True]
    base: Optional[CurrencyCode] = None
    rates: Rates

class TimeSeries(RatesResponse):
    start_date: str
    end_date: str
    base: CurrencyCode
    rates: Dict[str, Rates]

class ConversionQuery(OpenExchangeModel):
    from_currency: str = Field(alias="from")
    to_currency: str = Field(alias="to")
    amount: Amount

class ConversionInfo(OpenExchangeModel):
    rate: Amount
    timestamp: Optional[Count] = None

class Conversion(RatesResponse):
    query: ConversionQuery
    info: ConversionInfo
    historical: Optional[bool] = None
    date: Optional[str] = None
    result: Amount

class OHLCData(OpenExchangeModel):
    open: Amount
    high: Amount
    low: Amount
    close: Amount
    average: Amount

class OHLC(RatesResponse):
    start_date: str
    end_date: str
    base: Optional[CurrencyCode] = None
    rates: Dict[str, Dict[str, OHLCData]]

class PlanFeatures(OpenExchangeModel):
    base: bool
    symbols: bool
    experimental: bool
    time_series: bool = Field(alias="time-series")
    convert: bool
    bid_ask: bool = Field(alias="bid-ask")
    ohlc: bool
    spot: bool

class Plan(OpenExchangeModel):
    name: str
    quota: str
    update_frequency: str
    features: PlanFeatures

class AccountStatus(OpenExchangeModel):
    app_id: str
    status: Annotated[Literal["ACTIVE", "INACTIVE"], BeforeValidator(_upper)]
    plan: Plan

class Usage(OpenExchangeModel):
    requests: Count
    requests_quota: Annotated[int, Field(gt=0)]
    requests_remaining: Count
    days_elapsed: Count
    days_remaining: Count
    daily_average: Amount

class UsageResponse(OpenExchangeModel):
    status: int
    data: AccountStatus
    usage: Usage
