"""Application layer: use cases, ports, and DTOs. Depends only on domain."""

from outreach.application.dto import (
    ContactUpdate,
    CountryHint,
    ParsedPhone,
    ParseFailed,
    RegionHints,
    UpdateInvalid,
    ValidityCounts,
    ValidityDisplay,
    contact_from_payload,
)
from outreach.application.normalizer import PhoneNormalizer
from outreach.application.ports import CountryGuesser, PhoneParser
from outreach.application.review_service import ContactReviewService
from outreach.application.validity import ValidityResolver

__all__ = [
    "ContactReviewService",
    "ContactUpdate",
    "CountryGuesser",
    "CountryHint",
    "ParseFailed",
    "ParsedPhone",
    "PhoneNormalizer",
    "PhoneParser",
    "RegionHints",
    "UpdateInvalid",
    "ValidityCounts",
    "ValidityDisplay",
    "ValidityResolver",
    "contact_from_payload",
]
