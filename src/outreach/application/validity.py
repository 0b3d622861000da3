"""Decide whether a contact is usable for outreach, and why."""

import logging
from dataclasses import dataclass

from outreach.application.dto import ParsedPhone
from outreach.application.ports import PhoneParser
from outreach.domain import Contact, ValidityVerdict
from outreach.domain.phone_rules import (
    E164_PREFIX,
    is_blank,
    national_length_ok,
    strip_separators,
)

logger = logging.getLogger(__name__)

PHONE_NOT_E164_EMAIL_INVALID = (
    "Phone number exists but is not in E.164 format (must start with + and "
    "include country code). Email is also invalid or missing."
)
PHONE_INVALID_EMAIL_INVALID = (
    "Phone number exists but is invalid or not in E.164 format. "
    "Email is also invalid or missing."
)
PHONE_NOT_E164 = (
    "Phone number exists but is not in E.164 format "
    "(must start with + and include country code)"
)
BACKEND_VALID = "Valid contact (computed by backend)"
BACKEND_INVALID = "Invalid contact (computed by backend)"
WEBSITE_INVALID = "Website exists but is invalid (websiteValid = false)"
VALID_EMAIL_AND_PHONE = "Valid email and valid phone number (E.164 format) present"
VALID_EMAIL = "Valid email address present"
VALID_PHONE = "Valid phone number (E.164 format) present"
MISSING_EMAIL_OR_PHONE = "Missing valid email or valid phone number (E.164 format)"


@dataclass(frozen=True)
class PhoneCheck:
    exists: bool
    cleaned: str
    valid: bool

    @property
    def has_prefix(self) -> bool:
        return self.cleaned.startswith(E164_PREFIX)

    @property
    def blocks(self) -> bool:
        return self.exists and not self.valid


class ValidityResolver:
    """Backend verdict first, local rules as fallback. The client may downgrade, never upgrade."""

    def __init__(self, parser: PhoneParser) -> None:
        self._parser = parser

    def check_phone(self, phone: str | None) -> PhoneCheck:
        """Format and length only; parser-flagged-invalid numbers still pass."""
        if is_blank(phone):
            return PhoneCheck(exists=False, cleaned="", valid=False)
        cleaned = strip_separators(phone)
        if not cleaned.startswith(E164_PREFIX):
            return PhoneCheck(exists=True, cleaned=cleaned, valid=False)
        result = self._parser.parse(cleaned)
        valid = isinstance(result, ParsedPhone) and national_length_ok(
            result.national_number
        )
        return PhoneCheck(exists=True, cleaned=cleaned, valid=valid)

    def resolve(self, contact: Contact) -> ValidityVerdict:
        phone = self.check_phone(contact.phone)
        email_valid = contact.email_valid is True
        phone_blocks = phone.blocks and not email_valid

        verdict = contact.backend_verdict
        if verdict is not None:
            if phone_blocks:
                logger.debug("Backend verdict overridden by phone rule for %s", contact.id)
                return ValidityVerdict(False, _phone_block_reason(phone))
            if verdict.reason and verdict.reason.strip():
                return ValidityVerdict(verdict.valid, verdict.reason)
            return ValidityVerdict(
                verdict.valid, BACKEND_VALID if verdict.valid else BACKEND_INVALID
            )

        has_website = not is_blank(contact.website)
        if has_website and contact.website_valid is False:
            return ValidityVerdict(False, WEBSITE_INVALID)

        if phone_blocks:
            return ValidityVerdict(False, _phone_block_reason(phone))

        has_valid_email_or_phone = email_valid or phone.valid
        website_ok = not has_website or contact.website_valid is True
        if has_valid_email_or_phone and website_ok:
            if email_valid and phone.valid:
                return ValidityVerdict(True, VALID_EMAIL_AND_PHONE)
            if email_valid:
                return ValidityVerdict(True, VALID_EMAIL)
            return ValidityVerdict(True, VALID_PHONE)

        if phone.exists and not phone.has_prefix:
            return ValidityVerdict(False, PHONE_NOT_E164)
        return ValidityVerdict(False, MISSING_EMAIL_OR_PHONE)


def _phone_block_reason(phone: PhoneCheck) -> str:
    if phone.has_prefix:
        return PHONE_INVALID_EMAIL_INVALID
    return PHONE_NOT_E164_EMAIL_INVALID
