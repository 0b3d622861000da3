"""Contact review: verdicts, filters, counts, bulk selection and update preparation."""

from collections.abc import Iterable

from outreach.application.dto import (
    ContactUpdate,
    RegionHints,
    UpdateInvalid,
    ValidityCounts,
    ValidityDisplay,
)
from outreach.application.normalizer import PhoneNormalizer
from outreach.application.validity import ValidityResolver
from outreach.domain import Contact, PhoneNormalizationResult, ValidityVerdict

VALIDITY_FILTERS = ("all", "valid", "invalid")

LABEL_VALID = "Valid"
LABEL_INVALID = "Invalid"
LABEL_UNKNOWN = "Unknown"

UPDATE_REQUIRES_EMAIL_OR_PHONE = (
    "Please provide at least an email address or phone number."
)


def label_for(verdict: ValidityVerdict) -> str:
    if verdict.is_valid is True:
        return LABEL_VALID
    if verdict.is_valid is False:
        return LABEL_INVALID
    return LABEL_UNKNOWN


class ContactReviewService:
    """Everything the contacts dashboard derives from a contact list. Stateless."""

    def __init__(
        self,
        resolver: ValidityResolver,
        normalizer: PhoneNormalizer,
        *,
        default_country: str | None = None,
    ) -> None:
        self._resolver = resolver
        self._normalizer = normalizer
        self._default_country = default_country

    def verdict_for(self, contact: Contact) -> ValidityVerdict:
        return self._resolver.resolve(contact)

    def display_for(self, contact: Contact) -> ValidityDisplay:
        """Badge label and tooltip reason for one row."""
        verdict = self.verdict_for(contact)
        return ValidityDisplay(label=label_for(verdict), reason=verdict.reason)

    def filter_contacts(
        self, contacts: Iterable[Contact], validity_filter: str = "all"
    ) -> list[Contact]:
        """Return contacts matching the filter ("all", "valid" or "invalid"), order kept."""
        if validity_filter not in VALIDITY_FILTERS:
            raise ValueError(
                f"Unknown validity filter {validity_filter!r}; expected one of {VALIDITY_FILTERS}"
            )
        if validity_filter == "all":
            return list(contacts)
        wanted = validity_filter == "valid"
        return [c for c in contacts if self.verdict_for(c).is_valid is wanted]

    def count_validity(self, contacts: Iterable[Contact]) -> ValidityCounts:
        valid = invalid = unknown = 0
        for contact in contacts:
            is_valid = self.verdict_for(contact).is_valid
            if is_valid is True:
                valid += 1
            elif is_valid is False:
                invalid += 1
            else:
                unknown += 1
        return ValidityCounts(valid=valid, invalid=invalid, unknown=unknown)

    def prune_bulk_selection(
        self, contacts: Iterable[Contact], selected_ids: Iterable[int | str]
    ) -> set[int | str]:
        """Keep only selected ids whose contact is invalid. Unknown ids are dropped."""
        selected = set(selected_ids)
        return {
            c.id
            for c in contacts
            if c.id in selected and self.verdict_for(c).is_valid is False
        }

    def hints_for(self, contact: Contact) -> RegionHints:
        return RegionHints(
            state=contact.state,
            zip_code=contact.zip_code,
            default_country=self._default_country,
        )

    def normalize_phone(
        self, raw: str | None, hints: RegionHints | None = None
    ) -> PhoneNormalizationResult:
        if hints is None:
            hints = RegionHints(default_country=self._default_country)
        return self._normalizer.normalize(raw, hints)

    def normalize_phone_field(self, contact: Contact) -> PhoneNormalizationResult:
        """Seed an editable phone field from a contact's phone and location hints."""
        return self.normalize_phone(contact.phone, self.hints_for(contact))

    def prepare_update(
        self,
        email: str | None,
        phone: str | None,
        hints: RegionHints | None = None,
    ) -> ContactUpdate | UpdateInvalid:
        """Re-normalize the phone before it is persisted. Needs an email or a phone."""
        email_clean = (email or "").strip() or None
        phone_clean = (phone or "").strip() or None
        if email_clean is None and phone_clean is None:
            return UpdateInvalid(reason=UPDATE_REQUIRES_EMAIL_OR_PHONE)
        if phone_clean is None:
            return ContactUpdate(email=email_clean, phone=None)

        result = self.normalize_phone(phone_clean, hints)
        return ContactUpdate(
            email=email_clean,
            phone=result.normalized,
            phone_confidence=result.confidence,
            phone_warning=result.warning,
        )
