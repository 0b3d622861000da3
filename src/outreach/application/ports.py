"""Application ports (interfaces). Implemented by infrastructure adapters."""

from typing import Protocol

from outreach.application.dto import CountryHint, ParsedPhone, ParseFailed, RegionHints


class PhoneParser(Protocol):
    """Turns a phone string into a structured number. Must not raise."""

    def parse(
        self, text: str, default_region: str | None = None
    ) -> ParsedPhone | ParseFailed:
        """Parse text; default_region is used only when text has no leading +."""
        ...


class CountryGuesser(Protocol):
    """Guesses the country of a phone number entered without a country code."""

    def guess(self, raw: str, hints: RegionHints) -> CountryHint:
        """Return a hint; normalized is None when no country could be settled."""
        ...
