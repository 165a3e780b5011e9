import pytest

from connects.api.api_client import RequestMethod
from connects.api.errors import ConnectError
from connects.core.config import Config
from connects.openexchange import OpenExchange, OpenExchangeConfig

DISCLAIMER = "Usage subject to terms: https://openexchangerates.org/terms"
LICENSE = "https://openexchangerates.org/license"

LATEST = {
    "disclaimer": DISCLAIMER,
    "license": LICENSE,
    "timestamp": 1700000000,
    "base": "USD",
    "rates": {"EUR": 0.92, "GBP": 0.79}
}

CONVERSION = {
    "disclaimer": DISCLAIMER,
    "license": LICENSE,
    "query": {"from": "USD", "to": "EUR", "amount": 100},
    "info": {"timestamp": 1700000000, "rate": 0.92},
    "historical": False,
    "date": "2024-01-01",
    "result": 92.0
}

USAGE = {
    "status": 200,
    "data": {
        "app_id": "app",
        "status": "active",
        "plan": {
            "name": "Enterprise",
            "quota": "100,000 requests / month",
            "update_frequency": "30-minute",
            "features": {
                "base": True,
                "symbols": True,
                "experimental": True,
                "time-series": True,
                "convert": True,
                "bid-ask": False,
                "ohlc": True,
                "spot": False
            }
        }
    },
    "usage": {
        "requests": 100,
        "requests_quota": 100000,
        "requests_remaining": 99900,
        "days_elapsed": 3,
        "days_remaining": 27,
        "daily_average": 33
    }
}

def error_body(status, message):
    return {"error": True, "status": status, "message": message, "description": f"{message} description"}

@pytest.fixture
def oxr(transport):
    return OpenExchange(OpenExchangeConfig(app_id=" app "), transport)

def test_config_validation():
    """Test that invalid settings are rejected at construction"""
    with pytest.raises(ConnectError) as exc_info:
        OpenExchangeConfig(app_id="")
    assert exc_info.value.code == "CONFIG_INVALID_APP_ID"

    with pytest.raises(ConnectError) as exc_info:
        OpenExchangeConfig(app_id="app", base_currency="EURO")
    assert exc_info.value.code == "CONFIG_INVALID_BASE_CURRENCY"
    assert "EURO" in exc_info.value.message

    config = OpenExchangeConfig(app_id="app", base_currency=" eur ")
    assert config.base_currency == "EUR"

def test_config_from_config():
    """Test building the client settings from Config"""
    config = Config()
    config.set("openexchange.app_id", "from-config")
    oxr_config = OpenExchangeConfig.from_config(config)
    assert oxr_config.app_id == "from-config"
    assert oxr_config.base_currency == "USD"

@pytest.mark.asyncio
async def test_get_rates(oxr, transport):
    """Test latest rates and the default base currency"""
    transport.queue(200, LATEST)

    rates = await oxr.get_rates(symbols=["eur", " gbp"])

    assert rates == {"EUR": 0.92, "GBP": 0.79}
    request = transport.last
    assert request.method is RequestMethod.GET
    assert request.path == "latest.json"
    assert request.query == {"base": "USD", "symbols": "EUR,GBP", "app_id": "app"}

@pytest.mark.asyncio
async def test_get_rates_symbols_string(oxr, transport):
    """Test that a single code string is not split into letters"""
    transport.queue(200, LATEST)
    transport.queue(200, LATEST)

    await oxr.get_rates(symbols="eur")
    assert transport.last.query["symbols"] == "EUR"

    await oxr.get_rates(symbols="eur,gbp")
    assert transport.last.query["symbols"] == "EUR,GBP"

@pytest.mark.asyncio
async def test_unusable_symbols_are_unhandled(oxr, transport):
    """Test that input the request builder cannot use surfaces as a ConnectError"""
    with pytest.raises(ConnectError) as exc_info:
        await oxr.get_rates(symbols=123)

    assert exc_info.value.code == "UNHANDLED_ERROR"
    assert isinstance(exc_info.value.cause, TypeError)
    assert exc_info.value.metadata["endpoint"] == "latest"
    assert transport.requests == []

@pytest.mark.asyncio
async def test_convert_uppercases_codes(oxr, transport):
    """Test that conversion codes are upper-cased whatever the input case"""
    transport.queue(200, CONVERSION)

    result = await oxr.convert(100, "usd", "eur")

    assert result.result == 92.0
    assert result.query.from_currency == "USD"
    request = transport.last
    assert request.path == "convert.json"
    assert request.query["from"] == "USD"
    assert request.query["to"] == "EUR"
    assert request.query["amount"] == "100"
    assert "date" not in request.query

@pytest.mark.asyncio
async def test_historical_rates(oxr, transport):
    """Test rates for a past date"""
    transport.queue(200, {**LATEST, "historical": True})

    result = await oxr.get_historical_rates("2024-01-01", base="gbp")

    assert result.historical is True
    assert transport.last.path == "historical/2024-01-01.json"
    assert transport.last.query["base"] == "GBP"

@pytest.mark.asyncio
async def test_time_series_and_ohlc(oxr, transport):
    """Test time series and OHLC requests"""
    transport.queue(200, {
        "start_date": "2024-01-01",
        "end_date": "2024-01-02",
        "base": "USD",
        "rates": {"2024-01-01": {"EUR": 0.9}, "2024-01-02": {"EUR": 0.91}}
    })
    transport.queue(200, {
        "start_date": "2024-01-01T00:00:00Z",
        "end_date": "2024-01-02T00:00:00Z",
        "base": "USD",
        "rates": {"2024-01-01": {"EUR": {"open": 0.9, "high": 0.95, "low": 0.89, "close": 0.91, "average": 0.92}}}
    })

    series = await oxr.get_time_series("2024-01-01", "2024-01-02")
    assert series.rates["2024-01-02"]["EUR"] == 0.91
    assert transport.last.query["start"] == "2024-01-01"

    ohlc = await oxr.get_ohlc("2024-01-01T00:00:00Z", "1d", symbols=["eur"])
    assert ohlc.rates["2024-01-01"]["EUR"].close == 0.91
    assert transport.last.path == "ohlc.json"
    assert transport.last.query["period"] == "1d"
    assert transport.last.query["symbols"] == "EUR"

@pytest.mark.asyncio
async def test_currencies_and_status(oxr, transport):
    """Test the currency list and account usage"""
    transport.queue(200, {"USD": "United States Dollar", "EUR": "Euro"})
    transport.queue(200, USAGE)

    assert await oxr.list_currencies() == {"USD": "United States Dollar", "EUR": "Euro"}

    status = await oxr.get_status()
    assert status.data.status == "ACTIVE"
    assert status.data.plan.features.time_series is True
    assert status.usage.requests_remaining == 99900

@pytest.mark.parametrize("status,message,expected", [
    (404, "not_found", "NOT_FOUND"),
    (401, "missing_app_id", "MISSING_APP_ID"),
    (401, "invalid_app_id", "INVALID_APP_ID"),
    (429, "not_allowed", "NOT_ALLOWED"),
    (403, "access_restricted", "NOT_ALLOWED"),
    (400, "invalid_base", "RESPONSE_ERROR"),
])
@pytest.mark.asyncio
async def test_error_mapping(oxr, transport, status, message, expected):
    """Test the vendor message to error code mapping"""
    transport.queue(status, error_body(status, message))

    with pytest.raises(ConnectError) as exc_info:
        await oxr.get_rates()

    error = exc_info.value
    assert error.vendor == "OpenExchange"
    assert error.code == expected
    assert error.metadata["endpoint"] == "latest.json"
    assert error.metadata["description"] == f"{message} description"

@pytest.mark.asyncio
async def test_unexpected_error_body(oxr, transport):
    """Test that an error status without the error envelope is a response error"""
    transport.queue(401, "Unauthorized")

    with pytest.raises(ConnectError) as exc_info:
        await oxr.get_rates()
    assert exc_info.value.code == "RESPONSE_ERROR"

@pytest.mark.asyncio
async def test_invalid_success_body(oxr, transport):
    """Test that a 200 with the wrong shape is a response error"""
    transport.queue(200, {"rates": {"EUR": -1}})

    with pytest.raises(ConnectError) as exc_info:
        await oxr.get_rates()
    assert exc_info.value.code == "RESPONSE_ERROR"

@pytest.mark.asyncio
async def test_undocumented_status(oxr, transport):
    """Test statuses outside the documented set"""
    transport.queue(503, "Service Unavailable")
    transport.queue(202, LATEST)

    with pytest.raises(ConnectError) as exc_info:
        await oxr.get_rates()
    assert exc_info.value.code == "SERVICE_UNAVAILABLE"

    assert await oxr.get_rates() == {"EUR": 0.92, "GBP": 0.79}
