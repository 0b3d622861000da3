"""Tests for the phonenumbers-backed phone parser (E.164)."""

from outreach.application import ParsedPhone, ParseFailed
from outreach.infrastructure.phone import PhonenumbersParser

parser = PhonenumbersParser()


def test_parse_with_country_code_returns_e164():
    result = parser.parse("+39 312 345 6789")
    assert isinstance(result, ParsedPhone)
    assert result.e164 == "+393123456789"
    assert result.country == "IT"

    result = parser.parse("+1 202 555 1234")
    assert isinstance(result, ParsedPhone)
    assert result.e164 == "+12025551234"
    assert result.national_number == "2025551234"
    assert result.country == "US"
    assert result.is_valid is True


def test_parse_without_country_code_uses_default_region():
    result = parser.parse("202 555 1234", default_region="US")
    assert isinstance(result, ParsedPhone)
    assert result.e164 == "+12025551234"

    result = parser.parse("312 345 6789", default_region="it")
    assert isinstance(result, ParsedPhone)
    assert result.e164 == "+393123456789"


def test_unassignable_number_parses_but_is_not_valid():
    result = parser.parse("+15551234567")
    assert isinstance(result, ParsedPhone)
    assert result.is_valid is False
    assert result.national_number == "5551234567"
    assert result.country is None
    assert result.format("E.164") == "+15551234567"


def test_parse_failures_are_values_not_exceptions():
    assert isinstance(parser.parse(""), ParseFailed)
    assert isinstance(parser.parse("   "), ParseFailed)
    assert isinstance(parser.parse("abc"), ParseFailed)
    assert isinstance(parser.parse("+abc"), ParseFailed)
    # No leading + and no region to resolve a country code
    assert isinstance(parser.parse("2025551234"), ParseFailed)


def test_parse_whitespace_stripped():
    result = parser.parse("  +12025551234  ")
    assert isinstance(result, ParsedPhone)
    assert result.e164 == "+12025551234"
