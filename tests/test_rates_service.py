"""
Rates Service Tests - Unit Tests for Pipeline Orchestration

This module contains unit tests for RatesService: the order in which
validation, fetching and decoding run, and the conversion of each
failure into a RatesFailed result.

Files that USE this module:
- pytest (test runner executes these tests)

Files that this module USES:
- nbprates.application.rates_service (RatesService to test)
- nbprates.adapters.parsing.nbp_xml (real decoder for end-to-end decoding)
- nbprates.domain (results and errors)
- unittest.mock (Mock for the rate source)
- pytest (testing framework)
"""
import pytest  # Testing framework for writing and running tests

from unittest.mock import Mock  # Mock rate source
from datetime import date  # Query dates
from decimal import Decimal  # Exact decimal expectations

from nbprates.application.rates_service import RatesService  # Service to test
from nbprates.application.range_validator import RangeValidator
from nbprates.domain import (
    CurrencyCode,
    EmptyResultError,
    InvalidRangeError,
    MalformedPayloadError,
    RatesFailed,
    RatesOk,
    TransportError,
)

TWO_DAYS = (
    "<ExchangeRatesSeries><Table>C</Table><Code>EUR</Code><Rates>"
    "<Rate><No>001/C/NBP/2024</No><EffectiveDate>2024-01-02</EffectiveDate><Bid>4.2500</Bid><Ask>4.3400</Ask></Rate>"
    "<Rate><No>002/C/NBP/2024</No><EffectiveDate>2024-01-03</EffectiveDate><Bid>4.2600</Bid><Ask>4.3300</Ask></Rate>"
    "</Rates></ExchangeRatesSeries>"
)


@pytest.fixture
def source():
    mock_source = Mock()
    mock_source.fetch.return_value = TWO_DAYS
    return mock_source


class TestRatesService:
    def test_init_defaults(self, source):
        service = RatesService(source=source)
        assert service.source is source
        assert service.validator.max_days == 7

    def test_get_rates_success(self, source):
        result = RatesService(source=source).get_rates(CurrencyCode.EUR, date(2024, 1, 2), date(2024, 1, 5))

        assert isinstance(result, RatesOk)
        assert result.ok
        assert [record.date for record in result.records] == [date(2024, 1, 2), date(2024, 1, 3)]
        assert result.records[1].bid_diff == Decimal("0.0100")
        source.fetch.assert_called_once_with(CurrencyCode.EUR, date(2024, 1, 2), date(2024, 1, 5))

    def test_unwrap_returns_records(self, source):
        result = RatesService(source=source).get_rates(CurrencyCode.EUR, date(2024, 1, 2), date(2024, 1, 3))
        assert len(result.unwrap()) == 2

    def test_inverted_range_does_not_contact_source(self, source):
        result = RatesService(source=source).get_rates(CurrencyCode.EUR, date(2024, 1, 5), date(2024, 1, 2))

        assert isinstance(result, RatesFailed)
        assert isinstance(result.error, InvalidRangeError)
        source.fetch.assert_not_called()

    def test_too_wide_range_does_not_contact_source(self, source):
        result = RatesService(source=source).get_rates(CurrencyCode.EUR, date(2024, 1, 1), date(2024, 1, 9))

        assert isinstance(result.error, InvalidRangeError)
        assert result.error.max_days == 7
        source.fetch.assert_not_called()

    def test_custom_validator_is_used(self, source):
        service = RatesService(source=source, validator=RangeValidator(max_days=1))
        result = service.get_rates(CurrencyCode.EUR, date(2024, 1, 1), date(2024, 1, 3))
        assert isinstance(result.error, InvalidRangeError)

    def test_transport_error_is_returned_untouched(self, source):
        error = TransportError(CurrencyCode.CHF, status_code=404)
        source.fetch.side_effect = error

        result = RatesService(source=source).get_rates(CurrencyCode.CHF, date(2024, 1, 2), date(2024, 1, 3))

        assert isinstance(result, RatesFailed)
        assert result.error is error
        assert not result.ok

    def test_unwrap_reraises_error(self, source):
        source.fetch.side_effect = TransportError(CurrencyCode.CHF, status_code=500)
        result = RatesService(source=source).get_rates(CurrencyCode.CHF, date(2024, 1, 2), date(2024, 1, 3))

        with pytest.raises(TransportError, match="HTTP 500"):
            result.unwrap()

    def test_empty_payload_is_a_failure(self, source):
        source.fetch.return_value = "<ExchangeRatesSeries><Rates /></ExchangeRatesSeries>"

        result = RatesService(source=source).get_rates(CurrencyCode.EUR, date(2024, 1, 6), date(2024, 1, 7))

        assert isinstance(result.error, EmptyResultError)

    def test_malformed_payload_is_a_failure(self, source):
        source.fetch.return_value = "not xml at all"

        result = RatesService(source=source).get_rates(CurrencyCode.EUR, date(2024, 1, 2), date(2024, 1, 3))

        assert isinstance(result.error, MalformedPayloadError)

    def test_decoder_receives_raw_body(self, source):
        decoder = Mock()
        decoder.decode.return_value = []
        service = RatesService(source=source, decoder=decoder)

        result = service.get_rates(CurrencyCode.EUR, date(2024, 1, 2), date(2024, 1, 3))

        decoder.decode.assert_called_once_with(TWO_DAYS)
        assert result == RatesOk(())

    def test_unexpected_errors_propagate(self, source):
        source.fetch.side_effect = KeyError("bug")

        with pytest.raises(KeyError):
            RatesService(source=source).get_rates(CurrencyCode.EUR, date(2024, 1, 2), date(2024, 1, 3))
