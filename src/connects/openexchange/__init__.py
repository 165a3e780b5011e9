"""
Open Exchange Rates connect.
"""

from .client import OpenExchange, OpenExchangeConfig
from .errors import OPENEXCHANGE_ERRORS, OPENEXCHANGE_MESSAGE_TABLE
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

__all__ = [
    'OpenExchange',
    'OpenExchangeConfig',
    'OPENEXCHANGE_ERRORS',
    'OPENEXCHANGE_MESSAGE_TABLE',
    'OHLC',
    'Conversion',
    'Currencies',
    'ErrorEnvelope',
    'HistoricalRates',
    'LatestRates',
    'TimeSeries',
    'UsageResponse'
]
