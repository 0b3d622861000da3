"""Application DTOs: parse results, country hints, use-case outcomes, payload conversion."""

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any, Literal

from outreach.domain import BackendVerdict, Confidence, Contact


@dataclass(frozen=True)
class ParsedPhone:
    """A phone string the parser understood. is_valid is the parser's own assignability check."""

    national_number: str
    country: str | None
    is_valid: bool
    e164: str

    def format(self, scheme: str = "E164") -> str:
        if scheme.replace(".", "").upper() != "E164":
            raise ValueError(f"Unsupported phone format scheme: {scheme}")
        return self.e164


@dataclass(frozen=True)
class ParseFailed:
    """The parser could not make a phone number out of the input."""

    reason: str


@dataclass(frozen=True)
class RegionHints:
    """Location hints used to guess a phone number's country."""

    state: str | None = None
    zip_code: str | None = None
    default_country: str | None = None


@dataclass(frozen=True)
class CountryHint:
    """Outcome of guessing a country for a phone number without a country code."""

    normalized: str | None
    confidence: Literal["high", "low"] = "low"
    requires_manual_assignment: bool = False
    warning: str | None = None


@dataclass(frozen=True)
class ValidityDisplay:
    label: str
    reason: str


@dataclass(frozen=True)
class ValidityCounts:
    valid: int = 0
    invalid: int = 0
    unknown: int = 0


@dataclass(frozen=True)
class ContactUpdate:
    """Values ready to be sent to the update-contact API."""

    email: str | None
    phone: str | None
    phone_confidence: Confidence | None = None
    phone_warning: str | None = None

    @property
    def sms_ready(self) -> bool:
        return bool(self.phone) and self.phone.startswith("+") and self.phone_warning is None


@dataclass(frozen=True)
class UpdateInvalid:
    reason: str


_FIELD_ALIASES = {
    "id": ("id",),
    "email": ("email",),
    "email_valid": ("email_valid", "emailValid"),
    "phone": ("phone", "phone_number", "phoneNumber"),
    "website": ("website",),
    "website_valid": ("website_valid", "websiteValid"),
    "computed_valid": ("computed_valid", "computedValid"),
    "computed_reason": ("computed_validation_reason", "computedValidationReason"),
    "state": ("state",),
    "zip_code": ("zip_code", "zipCode", "zipcode"),
}


def _pick(payload: Mapping[str, Any], field: str) -> Any:
    for key in _FIELD_ALIASES[field]:
        if payload.get(key) is not None:
            return payload[key]
    return None


def _str_or_none(value: Any) -> str | None:
    return value if isinstance(value, str) else None


def _bool_or_none(value: Any) -> bool | None:
    return value if isinstance(value, bool) else None


def contact_from_payload(payload: Mapping[str, Any]) -> Contact:
    """Build a strict Contact from a loosely typed backend or UI payload.

    Accepts camelCase and snake_case keys. Flags that are not real booleans
    become None; computedValid becomes a BackendVerdict only when it is a bool.
    """
    computed_valid = _pick(payload, "computed_valid")
    verdict = None
    if isinstance(computed_valid, bool):
        verdict = BackendVerdict(
            valid=computed_valid,
            reason=_str_or_none(_pick(payload, "computed_reason")),
        )
    contact_id = _pick(payload, "id")
    if not isinstance(contact_id, (int, str)) or isinstance(contact_id, bool):
        contact_id = None
    return Contact(
        id=contact_id,
        email=_str_or_none(_pick(payload, "email")),
        email_valid=_bool_or_none(_pick(payload, "email_valid")),
        phone=_str_or_none(_pick(payload, "phone")),
        website=_str_or_none(_pick(payload, "website")),
        website_valid=_bool_or_none(_pick(payload, "website_valid")),
        backend_verdict=verdict,
        state=_str_or_none(_pick(payload, "state")),
        zip_code=_str_or_none(_pick(payload, "zip_code")),
    )
