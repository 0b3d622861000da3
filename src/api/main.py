"""
FastAPI backend: contact validity and phone normalization endpoints.
Run with uvicorn: uvicorn api.main:app --reload
"""

import logging
from pathlib import Path
from typing import Any, Literal

from dotenv import load_dotenv

# Load .env from repo root (when run from repo root or from Docker)
for path in (
    Path(__file__).resolve().parent.parent.parent / ".env",
    Path.cwd() / ".env",
):
    if path.exists():
        load_dotenv(path)
        break

from fastapi import FastAPI, HTTPException, Request
from pydantic import BaseModel

from outreach import (
    ContactReviewService,
    RegionHints,
    UpdateInvalid,
    build_review_service,
    contact_from_payload,
)
from outreach.application.review_service import label_for
from outreach.config import load_settings

settings = load_settings()

logging.basicConfig(
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    level=settings.log_level,
)
logger = logging.getLogger(__name__)

app = FastAPI(title="Outreach Contacts API")


def get_service(app: FastAPI) -> ContactReviewService:
    if getattr(app.state, "review_service", None) is None:
        logger.info("Review service default country: %s", settings.default_country)
        app.state.review_service = build_review_service(settings.default_country)
    return app.state.review_service


# --- REST: health ---


@app.get("/health")
def health():
    return {"status": "ok"}


# --- REST: contact validity ---


class ContactValidityBody(BaseModel):
    contacts: list[dict[str, Any]]
    validity_filter: Literal["all", "valid", "invalid"] = "all"


class VerdictItem(BaseModel):
    id: int | str | None = None
    is_valid: bool | None
    reason: str
    label: str


class ValidityCountsItem(BaseModel):
    valid: int
    invalid: int
    unknown: int


class ContactValidityResponse(BaseModel):
    verdicts: list[VerdictItem]
    counts: ValidityCountsItem


@app.post("/contacts/validity")
def contacts_validity(body: ContactValidityBody, request: Request) -> ContactValidityResponse:
    service = get_service(request.app)
    contacts = [contact_from_payload(payload) for payload in body.contacts]
    counts = service.count_validity(contacts)
    verdicts = []
    for contact in service.filter_contacts(contacts, body.validity_filter):
        verdict = service.verdict_for(contact)
        verdicts.append(
            VerdictItem(
                id=contact.id,
                is_valid=verdict.is_valid,
                reason=verdict.reason,
                label=label_for(verdict),
            )
        )
    return ContactValidityResponse(
        verdicts=verdicts,
        counts=ValidityCountsItem(
            valid=counts.valid, invalid=counts.invalid, unknown=counts.unknown
        ),
    )


# --- REST: phone normalization ---


class NormalizePhoneBody(BaseModel):
    phone: str | None = None
    state: str | None = None
    zip_code: str | None = None
    default_country: str | None = None


class NormalizedPhoneItem(BaseModel):
    normalized: str
    confidence: Literal["high", "low", "manual"]
    warning: str | None = None


@app.post("/phones/normalize")
def normalize_phone(body: NormalizePhoneBody, request: Request) -> NormalizedPhoneItem:
    service = get_service(request.app)
    contact = contact_from_payload(
        {"phone": body.phone, "state": body.state, "zip_code": body.zip_code}
    )
    hints = service.hints_for(contact)
    if body.default_country:
        hints = RegionHints(
            state=hints.state,
            zip_code=hints.zip_code,
            default_country=body.default_country,
        )
    result = service.normalize_phone(contact.phone, hints)
    return NormalizedPhoneItem(
        normalized=result.normalized,
        confidence=result.confidence,
        warning=result.warning,
    )


class PrepareUpdateBody(BaseModel):
    email: str | None = None
    phone: str | None = None
    state: str | None = None
    zip_code: str | None = None


class PreparedUpdateItem(BaseModel):
    email: str | None = None
    phone: str | None = None
    phone_confidence: Literal["high", "low", "manual"] | None = None
    phone_warning: str | None = None
    sms_ready: bool


@app.post("/contacts/prepare-update")
def prepare_update(body: PrepareUpdateBody, request: Request) -> PreparedUpdateItem:
    service = get_service(request.app)
    hints = service.hints_for(
        contact_from_payload({"state": body.state, "zip_code": body.zip_code})
    )
    result = service.prepare_update(body.email, body.phone, hints)
    if isinstance(result, UpdateInvalid):
        raise HTTPException(status_code=422, detail=result.reason)
    if result.phone_warning:
        logger.info("Phone needs review before sending: %s", result.phone_warning)
    return PreparedUpdateItem(
        email=result.email,
        phone=result.phone,
        phone_confidence=result.phone_confidence,
        phone_warning=result.phone_warning,
        sms_ready=result.sms_ready,
    )
