"""API tests. No external services; the engine is pure."""

import pytest
from fastapi.testclient import TestClient

from api.main import app
from outreach.application import ContactReviewService, PhoneNormalizer
from outreach.domain import ValidityVerdict
from outreach.infrastructure import PhonenumbersParser, RegionCountryGuesser


@pytest.fixture
def client():
    return TestClient(app)


def test_health(client):
    r = client.get("/health")
    assert r.status_code == 200
    assert r.json() == {"status": "ok"}


def _payloads():
    return [
        {"id": 1, "email": "a@b.co", "emailValid": True},
        {"id": 2, "phone": "555-123-4567"},
        {"id": 3, "phone": "+1 202 555 1234", "computedValid": False},
    ]


def test_validity_all_with_counts(client):
    r = client.post("/contacts/validity", json={"contacts": _payloads()})
    assert r.status_code == 200
    body = r.json()
    assert body["counts"] == {"valid": 1, "invalid": 2, "unknown": 0}
    assert [v["id"] for v in body["verdicts"]] == [1, 2, 3]
    assert body["verdicts"][0] == {
        "id": 1,
        "is_valid": True,
        "reason": "Valid email address present",
        "label": "Valid",
    }
    assert body["verdicts"][2]["reason"] == "Invalid contact (computed by backend)"


def test_validity_filter_applies_to_verdicts_not_counts(client):
    r = client.post(
        "/contacts/validity",
        json={"contacts": _payloads(), "validity_filter": "invalid"},
    )
    assert r.status_code == 200
    body = r.json()
    assert [v["id"] for v in body["verdicts"]] == [2, 3]
    assert all(v["label"] == "Invalid" for v in body["verdicts"])
    assert body["counts"]["valid"] == 1


class CountingResolver:
    def __init__(self):
        self.calls = 0

    def resolve(self, contact):
        self.calls += 1
        return ValidityVerdict(True, "Valid email address present")


def test_validity_resolves_each_row_once_after_counting(client, monkeypatch):
    resolver = CountingResolver()
    service = ContactReviewService(
        resolver, PhoneNormalizer(PhonenumbersParser(), RegionCountryGuesser())
    )
    monkeypatch.setattr(app.state, "review_service", service, raising=False)
    r = client.post("/contacts/validity", json={"contacts": _payloads()})
    assert r.status_code == 200
    assert [v["label"] for v in r.json()["verdicts"]] == ["Valid"] * 3
    # One pass for the counts, one for the rows.
    assert resolver.calls == 6


def test_validity_bad_filter_is_422(client):
    r = client.post(
        "/contacts/validity", json={"contacts": [], "validity_filter": "maybe"}
    )
    assert r.status_code == 422


def test_normalize_phone(client):
    r = client.post(
        "/phones/normalize", json={"phone": "(202) 555-1234", "state": "DC"}
    )
    assert r.status_code == 200
    assert r.json() == {"normalized": "+12025551234", "confidence": "high", "warning": None}


def test_normalize_phone_flags_state_mismatch(client):
    r = client.post(
        "/phones/normalize", json={"phone": "506 234 5678", "state": "TX"}
    )
    assert r.status_code == 200
    body = r.json()
    assert body["normalized"] == "+15062345678"
    assert body["confidence"] == "low"
    assert body["warning"].startswith("Detected country code: CA.")


def test_normalize_phone_too_short(client):
    r = client.post("/phones/normalize", json={"phone": "123"})
    assert r.status_code == 200
    body = r.json()
    assert body["normalized"] == "123"
    assert body["confidence"] == "manual"
    assert "too short" in body["warning"]


def test_normalize_phone_with_request_default_country(client):
    r = client.post(
        "/phones/normalize", json={"phone": "312 345 6789", "default_country": "IT"}
    )
    assert r.json()["normalized"] == "+393123456789"


def test_prepare_update(client):
    r = client.post(
        "/contacts/prepare-update",
        json={"email": " owner@example.com ", "phone": "+1 202-555-1234"},
    )
    assert r.status_code == 200
    assert r.json() == {
        "email": "owner@example.com",
        "phone": "+12025551234",
        "phone_confidence": "high",
        "phone_warning": None,
        "sms_ready": True,
    }


def test_prepare_update_requires_email_or_phone(client):
    r = client.post("/contacts/prepare-update", json={"email": "", "phone": "  "})
    assert r.status_code == 422
    assert r.json()["detail"] == "Please provide at least an email address or phone number."
