import pytest

from pydantic import ValidationError

from connects.openexchange.schemas import (
    Conversion,
    Currencies,
    ErrorEnvelope,
    HistoricalRates,
    LatestRates
)

def test_latest_rates_minimal():
    """Test that only the rates are required"""
    latest = LatestRates.model_validate({"rates": {"EUR": 0.9}})
    assert latest.base is None
    assert latest.disclaimer is None

def test_rates_must_be_positive():
    with pytest.raises(ValidationError):
        LatestRates.model_validate({"rates": {"EUR": 0}})

def test_currency_codes_are_three_characters():
    with pytest.raises(ValidationError):
        LatestRates.model_validate({"rates": {"EURO": 0.9}})
    with pytest.raises(ValidationError):
        Currencies.model_validate({"US": "United States Dollar"})

def test_short_disclaimer_is_rejected():
    with pytest.raises(ValidationError):
        LatestRates.model_validate({"disclaimer": "hi", "rates": {"EUR": 0.9}})

def test_historical_requires_flag_and_timestamp():
    """Test that historical responses must say so"""
    with pytest.raises(ValidationError):
        HistoricalRates.model_validate({"timestamp": 1, "rates": {"EUR": 0.9}})
    with pytest.raises(ValidationError):
        HistoricalRates.model_validate({"historical": True, "rates": {"EUR": 0.9}})

def test_conversion_aliases():
    """Test the from/to aliases of the conversion query"""
    conversion = Conversion.model_validate({
        "query": {"from": "GBP", "to": "INR", "amount": 10},
        "info": {"rate": 104.5},
        "result": 1045.0
    })
    assert conversion.query.from_currency == "GBP"
    assert conversion.query.to_currency == "INR"

def test_error_envelope():
    """Test the vendor error envelope"""
    error = ErrorEnvelope.model_validate({
        "error": True,
        "status": 401,
        "message": "invalid_app_id",
        "description": "Invalid App ID provided."
    })
    assert error.message == "invalid_app_id"

    with pytest.raises(ValidationError):
        ErrorEnvelope.model_validate({
            "error": True,
            "status": 500,
            "message": "invalid_app_id",
            "description": "x"
        })
