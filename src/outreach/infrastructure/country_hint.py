"""Guess a phone number's country from state / ZIP hints when no country code was entered."""

import logging
import re

from outreach.application.dto import CountryHint, ParsedPhone, RegionHints
from outreach.application.ports import PhoneParser
from outreach.domain.phone_rules import MIN_NATIONAL_DIGITS, digits_only
from outreach.infrastructure.phone import PhonenumbersParser

logger = logging.getLogger(__name__)

DEFAULT_COUNTRY = "US"

US_STATES = frozenset(
    {
        "AL", "AK", "AZ", "AR", "CA", "CO", "CT", "DE", "FL", "GA",
        "HI", "ID", "IL", "IN", "IA", "KS", "KY", "LA", "ME", "MD",
        "MA", "MI", "MN", "MS", "MO", "MT", "NE", "NV", "NH", "NJ",
        "NM", "NY", "NC", "ND", "OH", "OK", "OR", "PA", "RI", "SC",
        "SD", "TN", "TX", "UT", "VT", "VA", "WA", "WV", "WI", "WY",
        "DC",
    }
)
CA_PROVINCES = frozenset(
    {"AB", "BC", "MB", "NB", "NL", "NS", "NT", "NU", "ON", "PE", "QC", "SK", "YT"}
)

_NANP_COUNTRIES = frozenset({"US", "CA"})

_US_ZIP = re.compile(r"^\d{5}$")
_US_ZIP_PLUS_4 = re.compile(r"^\d{5}-\d{4}$")
_CA_POSTAL = re.compile(r"^[A-Z]\d[A-Z] ?\d[A-Z]\d$")

_PLACEHOLDERS = frozenset({"-", "null", "undefined"})

TOO_SHORT_WARNING = (
    "Phone number is too short. Please enter a complete number with country code."
)
TEST_NUMBER_WARNING = (
    "This appears to be a US test number (555 prefix). "
    "Verify this is correct before sending SMS."
)
AUTO_DETECTED_WARNING = (
    "Country code was auto-detected but may be incorrect. "
    "Please verify and manually assign if needed."
)
UNDETECTED_WARNING = (
    "Could not automatically detect country code. "
    "Please manually select the country code."
)


def infer_country(hints: RegionHints) -> str:
    """Pick the parsing region: state wins over ZIP, ZIP over the default.

    A bare five-digit ZIP only counts when the default is already a North
    American country; many other postcode systems use five digits too.
    """
    default = (hints.default_country or DEFAULT_COUNTRY).strip().upper()
    state = (hints.state or "").strip().upper()
    if state in US_STATES:
        return "US"
    if state in CA_PROVINCES:
        return "CA"
    zip_code = (hints.zip_code or "").strip().upper()
    if _US_ZIP_PLUS_4.match(zip_code):
        return "US"
    if _US_ZIP.match(zip_code) and default in _NANP_COUNTRIES:
        return "US"
    if _CA_POSTAL.match(zip_code):
        return "CA"
    return default


def _is_us_test_number(parsed: ParsedPhone) -> bool:
    return (
        parsed.country == "US"
        and len(parsed.national_number) == 10
        and parsed.national_number.startswith("555")
    )


class RegionCountryGuesser:
    """CountryGuesser port. Tries the hinted region first, then international auto-detection."""

    def __init__(self, parser: PhoneParser | None = None) -> None:
        self._parser = parser or PhonenumbersParser()

    def guess(self, raw: str, hints: RegionHints) -> CountryHint:
        trimmed = (raw or "").strip()
        if not trimmed or trimmed.lower() in _PLACEHOLDERS:
            return CountryHint(normalized=None)

        digits = digits_only(trimmed)
        if len(digits) < MIN_NATIONAL_DIGITS:
            return CountryHint(
                normalized=None,
                requires_manual_assignment=True,
                warning=TOO_SHORT_WARNING,
            )

        country = infer_country(hints)
        parsed = self._parser.parse(digits, country)
        if isinstance(parsed, ParsedPhone) and parsed.is_valid:
            if _is_us_test_number(parsed):
                return CountryHint(
                    normalized=parsed.e164, confidence="low", warning=TEST_NUMBER_WARNING
                )
            if parsed.country == country:
                return CountryHint(normalized=parsed.e164, confidence="high")
            detected = parsed.country or "unknown"
            return CountryHint(
                normalized=parsed.e164,
                confidence="low",
                warning=(
                    f"Detected country code: {detected}. "
                    "Verify this matches the contact's location."
                ),
            )

        auto = self._parser.parse("+" + digits)
        if isinstance(auto, ParsedPhone) and auto.is_valid:
            logger.debug("Country auto-detected as %s", auto.country)
            return CountryHint(
                normalized=auto.e164,
                confidence="low",
                requires_manual_assignment=True,
                warning=AUTO_DETECTED_WARNING,
            )

        return CountryHint(
            normalized=None,
            requires_manual_assignment=True,
            warning=UNDETECTED_WARNING,
        )
