"""Request builders for Open Exchange Rates endpoints.

Currency codes are trimmed and upper-cased, symbol lists comma-joined, and
empty query values dropped before anything reaches the transport.
"""

from typing import Any, Dict, Iterable, Optional, Union

from ..api.api_client import RequestDescriptor, RequestMethod
from ..core.utils import compact_query, join_codes, normalize_code

STATUS = "status.json"
CURRENCIES = "currencies.json"
LATEST = "latest.json"
TIME_SERIES = "time-series.json"
CONVERT = "convert.json"
OHLC = "ohlc.json"

def _get(path: str, params: Optional[Dict[str, Any]] = None) -> RequestDescriptor:
    query = compact_query(params or {})
    return RequestDescriptor(path=path, method=RequestMethod.GET, query=query or None)

def _rates_params(base: Optional[str], symbols: Optional[Union[str, Iterable[str]]]) -> Dict[str, Any]:
    return {"base": normalize_code(base), "symbols": join_codes(symbols)}

def status() -> RequestDescriptor:
    return _get(STATUS)

def currencies() -> RequestDescriptor:
    return _get(CURRENCIES)

def latest(base: Optional[str] = None, symbols: Optional[Union[str, Iterable[str]]] = None) -> RequestDescriptor:
    return _get(LATEST, _rates_params(base, symbols))

def historical(
    date: str,
    base: Optional[str] = None,
    symbols: Optional[Union[str, Iterable[str]]] = None
) -> RequestDescriptor:
    return _get(f"historical/{str(date).strip()}.json", _rates_params(base, symbols))

def time_series(
    start: str,
    end: str,
    base: Optional[str] = None,
    symbols: Optional[Union[str, Iterable[str]]] = None
) -> RequestDescriptor:
    return _get(TIME_SERIES, {"start": start, "end": end, **_rates_params(base, symbols)})

def convert(
    amount: float,
    from_currency: str,
    to_currency: str,
    date: Optional[str] = None
) -> RequestDescriptor:
    return _get(CONVERT, {
        "amount": amount,
        "from": normalize_code(from_currency),
        "to": normalize_code(to_currency),
        "date": date,
    })

def ohlc(
    start_date: str,
    period: str,
    base: Optional[str] = None,
    symbols: Optional[Union[str, Iterable[str]]] = None
) -> RequestDescriptor:
    return _get(OHLC, {"start_date": start_date, "period": period, **_rates_params(base, symbols)})
