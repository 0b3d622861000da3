"""Phone parsing on Google's libphonenumber (phonenumbers package)."""

import phonenumbers

from outreach.application.dto import ParsedPhone, ParseFailed


class PhonenumbersParser:
    """PhoneParser port backed by phonenumbers.

    default_region is only consulted when the input has no leading + (e.g.
    "202 555 1234" with default_region "US"). A number that parses but is not
    assignable is returned with is_valid False rather than rejected.
    """

    def parse(
        self, text: str, default_region: str | None = None
    ) -> ParsedPhone | ParseFailed:
        if not text or not str(text).strip():
            return ParseFailed(reason="empty input")
        region = default_region.upper() if default_region else None
        try:
            parsed = phonenumbers.parse(str(text).strip(), region)
        except phonenumbers.NumberParseException as e:
            return ParseFailed(reason=str(e))
        return ParsedPhone(
            national_number=phonenumbers.national_significant_number(parsed),
            country=phonenumbers.region_code_for_number(parsed),
            is_valid=phonenumbers.is_valid_number(parsed),
            e164=phonenumbers.format_number(parsed, phonenumbers.PhoneNumberFormat.E164),
        )
