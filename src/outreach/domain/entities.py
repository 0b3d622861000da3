"""Domain entities: Contact, BackendVerdict, ValidityVerdict, PhoneNormalizationResult."""

from dataclasses import dataclass
from typing import Literal

Confidence = Literal["high", "low", "manual"]

CONFIDENCE_HIGH: Confidence = "high"
CONFIDENCE_LOW: Confidence = "low"
CONFIDENCE_MANUAL: Confidence = "manual"


@dataclass(frozen=True)
class BackendVerdict:
    """
    Server-computed validity (SMTP/DNS probes, website checks).
    Present on a Contact only when the backend sent a real boolean.
    """

    valid: bool
    reason: str | None = None


@dataclass(frozen=True)
class Contact:
    """
    A scraped business contact as seen by the validity engine.
    Read-only; built once at the boundary by contact_from_payload.
    """

    email: str | None = None
    email_valid: bool | None = None
    phone: str | None = None
    website: str | None = None
    website_valid: bool | None = None
    backend_verdict: BackendVerdict | None = None
    state: str | None = None
    zip_code: str | None = None
    id: int | str | None = None


@dataclass(frozen=True)
class ValidityVerdict:
    """Whether a contact can be used for outreach. is_valid None means unknown."""

    is_valid: bool | None
    reason: str

    def __post_init__(self):
        if not self.reason or not self.reason.strip():
            raise ValueError("ValidityVerdict reason must be non-empty.")


@dataclass(frozen=True)
class PhoneNormalizationResult:
    """
    Best-effort canonical phone value for an editable field.
    normalized is not guaranteed to be E.164; check warning before automated sending.
    """

    normalized: str
    confidence: Confidence
    warning: str | None = None

    @property
    def needs_review(self) -> bool:
        return self.warning is not None
