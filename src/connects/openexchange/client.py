# src/connects/openexchange/client.py
# Created: 2026-03-05 16:08:52
# Author: Connects

from typing import Dict, Iterable, Optional, Type, TypeVar, Union
from dataclasses import dataclass, replace

from pydantic import BaseModel

from ..api.api_client import APIConfig, RequestDescriptor, ResponseEnvelope, Transport
from ..api.connect import BaseConnect
from ..core.config import Config
from . import endpoints
from .errors import ERROR_STATUSES, OPENEXCHANGE_ERRORS, OPENEXCHANGE_MESSAGE_TABLE
from .schemas import (
    OHLC,
    Conversion,
    Currencies,
    ErrorEnvelope,
    HistoricalRates,
    LatestRates,
    TimeSeries,
    UsageResponse
)

M = TypeVar('M', bound=BaseModel)

BASE_URL = "https://openexchangerates.org/api"

@dataclass(frozen=True)
class OpenExchangeConfig:
    """Immutable Open Exchange Rates client settings"""
    app_id: str
    base_currency: str = "USD"
    timeout: float = 10.0
    base_url: str = BASE_URL

    def __post_init__(self):
        if not isinstance(self.app_id, str) or not self.app_id.strip():
            raise OPENEXCHANGE_ERRORS.error("CONFIG_INVALID_APP_ID", {"app_id": self.app_id})
        object.__setattr__(self, "app_id", self.app_id.strip())

        if not isinstance(self.base_currency, str) or len(self.base_currency.strip()) != 3:
            raise OPENEXCHANGE_ERRORS.error(
                "CONFIG_INVALID_BASE_CURRENCY",
                {"base_currency": self.base_currency}
            )
        object.__setattr__(self, "base_currency", self.base_currency.strip().upper())

    @classmethod
    def from_config(cls, config: Config) -> "OpenExchangeConfig":
        section = config.section("openexchange")
        app_id = section.get("app_id")
        return cls(
            app_id=str(app_id) if app_id is not None else "",
            base_currency=section.get("base_currency", "USD"),
            timeout=float(section.get("timeout", 10.0))
        )

class OpenExchange(BaseConnect):
    """
    Open Exchange Rates client.

    Fetches latest, historical, time series and OHLC rates, converts amounts
    and reports account usage. The app_id is sent as a query parameter on
    every request.

    Example:
        async with OpenExchange(OpenExchangeConfig(app_id="...")) as client:
            rates = await client.get_rates(symbols=["eur", "gbp"])
    """

    vendor = OPENEXCHANGE_ERRORS.vendor
    catalog = OPENEXCHANGE_ERRORS
    table = OPENEXCHANGE_MESSAGE_TABLE

    def __init__(self, config: OpenExchangeConfig, transport: Optional[Transport] = None):
        self.config = config
        super().__init__(
            APIConfig(base_url=config.base_url, timeout=config.timeout),
            transport
        )

    def _authorize(self, request: RequestDescriptor) -> RequestDescriptor:
        query = dict(request.query or {})
        query["app_id"] = self.config.app_id
        return replace(request, query=query)

    def _handle(self, response: ResponseEnvelope, schema: Type[M]) -> M:
        status, body = response.status, response.body

        if status == 200:
            return self.responses.validate(schema, body, "RESPONSE_ERROR", status=status, response_body=body)

        if status in ERROR_STATUSES:
            error = self.responses.validate(
                ErrorEnvelope,
                body,
                "RESPONSE_ERROR",
                status=status,
                response_body=body
            )
            raise self.responses.fail(status, error.message, description=error.description, response_body=body)

        # Undocumented status: accept the body only if it still looks like a result
        return self.responses.validate(schema, body, "SERVICE_UNAVAILABLE", status=status, response_body=body)

    def _base(self, base: Optional[str]) -> str:
        return base if base else self.config.base_currency

    async def get_status(self) -> UsageResponse:
        """Get plan details and API usage for the configured app_id"""
        return await self._call(endpoints.status, UsageResponse)

    async def list_currencies(self) -> Dict[str, str]:
        """Map of every supported currency code to its full name"""
        currencies = await self._call(endpoints.currencies, Currencies)
        return currencies.root

    async def get_rates(
        self,
        base: Optional[str] = None,
        symbols: Optional[Union[str, Iterable[str]]] = None
    ) -> Dict[str, float]:
        """
        Get latest exchange rates

        Args:
            base: Base currency, defaults to the configured base currency
            symbols: Limit the result to these currency codes, a list or a comma separated string

        Returns:
            Mapping of currency code to rate
        """
        latest = await self._call(endpoints.latest, LatestRates, self._base(base), symbols)
        return latest.rates

    async def get_historical_rates(
        self,
        date: str,
        base: Optional[str] = None,
        symbols: Optional[Union[str, Iterable[str]]] = None
    ) -> HistoricalRates:
        """
        Get exchange rates for a past date

        Args:
            date: Date formatted as YYYY-MM-DD
            base: Base currency, defaults to the configured base currency
            symbols: Limit the result to these currency codes, a list or a comma separated string
        """
        return await self._call(endpoints.historical, HistoricalRates, date, self._base(base), symbols)

    async def get_time_series(
        self,
        start: str,
        end: str,
        base: Optional[str] = None,
        symbols: Optional[Union[str, Iterable[str]]] = None
    ) -> TimeSeries:
        """
        Get rates for every day between two dates (YYYY-MM-DD, inclusive)
        """
        return await self._call(
            endpoints.time_series,
            TimeSeries,
            start,
            end,
            self._base(base),
            symbols
        )

    async def convert(
        self,
        amount: float,
        from_currency: str,
        to_currency: str,
        date: Optional[str] = None
    ) -> Conversion:
        """
        Convert an amount between two currencies

        Args:
            amount: Amount to convert
            from_currency: Source currency code, any case
            to_currency: Target currency code, any case
            date: Use the rates of this date (YYYY-MM-DD) instead of the latest

        Returns:
            Conversion with the applied rate and the result
        """
        return await self._call(endpoints.convert, Conversion, amount, from_currency, to_currency, date)

    async def get_ohlc(
        self,
        start_date: str,
        period: str,
        base: Optional[str] = None,
        symbols: Optional[Union[str, Iterable[str]]] = None
    ) -> OHLC:
        """Get open/high/low/close/average rates for a period such as 1d, 1w or 1m"""
        return await self._call(
            endpoints.ohlc,
            OHLC,
            start_date,
            period,
            self._base(base),
            symbols
        )
