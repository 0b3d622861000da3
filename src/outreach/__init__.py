"""
Outreach core: contact validity and phone normalization, clean-architecture layout.

- domain: entities (Contact, ValidityVerdict, PhoneNormalizationResult) and phone rules.
- application: use cases (ValidityResolver, PhoneNormalizer, ContactReviewService), ports, DTOs.
- infrastructure: adapters (PhonenumbersParser, RegionCountryGuesser).
"""

from outreach.application import (
    ContactReviewService,
    ContactUpdate,
    CountryHint,
    ParsedPhone,
    ParseFailed,
    PhoneNormalizer,
    RegionHints,
    UpdateInvalid,
    ValidityCounts,
    ValidityDisplay,
    ValidityResolver,
    contact_from_payload,
)
from outreach.domain import (
    BackendVerdict,
    Contact,
    PhoneNormalizationResult,
    ValidityVerdict,
)
from outreach.infrastructure import PhonenumbersParser, RegionCountryGuesser


def build_review_service(default_country: str | None = None) -> ContactReviewService:
    """Wire the resolver and normalizer on the phonenumbers-backed adapters."""
    parser = PhonenumbersParser()
    return ContactReviewService(
        ValidityResolver(parser),
        PhoneNormalizer(parser, RegionCountryGuesser(parser)),
        default_country=default_country,
    )


__all__ = [
    "BackendVerdict",
    "Contact",
    "ContactReviewService",
    "ContactUpdate",
    "CountryHint",
    "ParseFailed",
    "ParsedPhone",
    "PhoneNormalizationResult",
    "PhoneNormalizer",
    "PhonenumbersParser",
    "RegionCountryGuesser",
    "RegionHints",
    "UpdateInvalid",
    "ValidityCounts",
    "ValidityDisplay",
    "ValidityResolver",
    "ValidityVerdict",
    "build_review_service",
    "contact_from_payload",
]
