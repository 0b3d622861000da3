"""Turn a raw phone string into an editable, best-effort E.164 value."""

import logging

from outreach.application.dto import CountryHint, ParsedPhone, RegionHints
from outreach.application.ports import CountryGuesser, PhoneParser
from outreach.domain import (
    CONFIDENCE_HIGH,
    CONFIDENCE_LOW,
    CONFIDENCE_MANUAL,
    PhoneNormalizationResult,
)
from outreach.domain.phone_rules import (
    E164_PREFIX,
    MIN_NATIONAL_DIGITS,
    digits_only,
    is_blank,
    strip_separators,
)

logger = logging.getLogger(__name__)

FALLBACK_COUNTRY = "US"

UNDELIVERABLE_WARNING = (
    "This phone number may not be valid or deliverable. "
    "Please verify before sending SMS."
)
FORMAT_WARNING = "Phone number format may be incorrect. Please verify and fix if needed."
TOO_SHORT_WARNING = "Phone number is too short. Please enter a complete phone number."
COUNTRY_MISSING_WARNING = (
    "Country code missing. Please select the correct country code from the "
    "dropdown to complete the phone number."
)
MANUAL_ASSIGNMENT_WARNING = (
    "Country code could not be confirmed. Please verify the country code "
    "before sending SMS."
)
LOW_CONFIDENCE_WARNING = (
    "Country code was inferred from location hints. Please verify it "
    "before sending SMS."
)


class PhoneNormalizer:
    """
    Decision tree over the raw input. Always returns a value to seed an editable
    field; never empty for non-blank input, at most one warning.
    """

    def __init__(self, parser: PhoneParser, guesser: CountryGuesser) -> None:
        self._parser = parser
        self._guesser = guesser

    def normalize(
        self, raw: str | None, hints: RegionHints | None = None
    ) -> PhoneNormalizationResult:
        if is_blank(raw):
            return PhoneNormalizationResult("", CONFIDENCE_HIGH, None)
        hints = hints or RegionHints()
        cleaned = strip_separators(raw)
        if cleaned.startswith(E164_PREFIX):
            return self._normalize_international(cleaned)
        return self._normalize_national(raw, digits_only(cleaned), hints)

    def _normalize_international(self, cleaned: str) -> PhoneNormalizationResult:
        result = self._parser.parse(cleaned)
        if isinstance(result, ParsedPhone):
            return _from_parsed(result)
        logger.debug("Keeping unparseable phone as entered: %s", result.reason)
        return PhoneNormalizationResult(cleaned, CONFIDENCE_MANUAL, FORMAT_WARNING)

    def _normalize_national(
        self, raw: str, digits: str, hints: RegionHints
    ) -> PhoneNormalizationResult:
        if len(digits) < MIN_NATIONAL_DIGITS:
            # Input with no digits at all is kept as typed so the field is never blanked.
            return PhoneNormalizationResult(
                digits or raw.strip(), CONFIDENCE_MANUAL, TOO_SHORT_WARNING
            )

        # Location hints go to the guesser so a mismatch with the detected country is flagged.
        if is_blank(hints.state) and is_blank(hints.zip_code):
            result = self._parser.parse(digits, hints.default_country)
            if isinstance(result, ParsedPhone) and result.country:
                return _from_parsed(result)

        hint = self._guesser.guess(
            raw,
            RegionHints(
                state=hints.state,
                zip_code=hints.zip_code,
                default_country=hints.default_country or FALLBACK_COUNTRY,
            ),
        )
        if hint.normalized and hint.normalized.startswith(E164_PREFIX):
            return _from_hint(hint)
        return PhoneNormalizationResult(digits, CONFIDENCE_MANUAL, COUNTRY_MISSING_WARNING)


def _from_parsed(parsed: ParsedPhone) -> PhoneNormalizationResult:
    if parsed.is_valid:
        return PhoneNormalizationResult(parsed.format("E.164"), CONFIDENCE_HIGH, None)
    return PhoneNormalizationResult(
        parsed.format("E.164"), CONFIDENCE_LOW, UNDELIVERABLE_WARNING
    )


def _from_hint(hint: CountryHint) -> PhoneNormalizationResult:
    if hint.requires_manual_assignment:
        return PhoneNormalizationResult(
            hint.normalized, CONFIDENCE_MANUAL, hint.warning or MANUAL_ASSIGNMENT_WARNING
        )
    if hint.confidence == CONFIDENCE_LOW:
        return PhoneNormalizationResult(
            hint.normalized, CONFIDENCE_LOW, hint.warning or LOW_CONFIDENCE_WARNING
        )
    return PhoneNormalizationResult(hint.normalized, CONFIDENCE_HIGH, hint.warning)
