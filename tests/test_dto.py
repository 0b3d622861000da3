"""Tests for payload conversion and value objects."""

import pytest

from outreach.application import ParsedPhone, contact_from_payload
from outreach.domain import BackendVerdict, Contact, PhoneNormalizationResult, ValidityVerdict


def test_camel_case_payload() -> None:
    contact = contact_from_payload(
        {
            "id": 17,
            "email": "owner@example.com",
            "emailValid": True,
            "phone": "+1 202 555 1234",
            "website": "example.com",
            "websiteValid": False,
            "computedValid": True,
            "computedValidationReason": "SMTP probe succeeded",
            "state": "NY",
            "zipCode": "10001",
            "status": "new",
        }
    )
    assert contact == Contact(
        id=17,
        email="owner@example.com",
        email_valid=True,
        phone="+1 202 555 1234",
        website="example.com",
        website_valid=False,
        backend_verdict=BackendVerdict(True, "SMTP probe succeeded"),
        state="NY",
        zip_code="10001",
    )


def test_snake_case_payload() -> None:
    contact = contact_from_payload(
        {"phone_number": "555", "computed_valid": False, "zip_code": "K1A 0B1"}
    )
    assert contact.phone == "555"
    assert contact.backend_verdict == BackendVerdict(False, None)
    assert contact.zip_code == "K1A 0B1"


@pytest.mark.parametrize("computed", [None, "true", 1, 0, "false"])
def test_non_boolean_backend_verdict_is_ignored(computed) -> None:
    contact = contact_from_payload(
        {"computedValid": computed, "computedValidationReason": "whatever"}
    )
    assert contact.backend_verdict is None


def test_null_alias_falls_through_to_next_alias() -> None:
    contact = contact_from_payload(
        {"phone": None, "phoneNumber": "+12025551234", "zip_code": None, "zipCode": "78701"}
    )
    assert contact.phone == "+12025551234"
    assert contact.zip_code == "78701"


def test_loose_fields_become_none() -> None:
    contact = contact_from_payload(
        {"id": True, "email": 42, "emailValid": "yes", "websiteValid": 1, "phone": ["+1"]}
    )
    assert contact == Contact()


def test_backend_reason_must_be_a_string() -> None:
    contact = contact_from_payload({"computedValid": True, "computedValidationReason": 5})
    assert contact.backend_verdict == BackendVerdict(True, None)


def test_verdict_reason_must_be_non_empty() -> None:
    with pytest.raises(ValueError):
        ValidityVerdict(True, "")
    with pytest.raises(ValueError):
        ValidityVerdict(False, "   ")
    assert ValidityVerdict(None, "Unknown").is_valid is None


def test_parsed_phone_format() -> None:
    parsed = ParsedPhone("2025551234", "US", True, "+12025551234")
    assert parsed.format() == "+12025551234"
    assert parsed.format("E.164") == "+12025551234"
    with pytest.raises(ValueError):
        parsed.format("NATIONAL")


def test_needs_review() -> None:
    assert PhoneNormalizationResult("+12025551234", "high").needs_review is False
    assert PhoneNormalizationResult("123", "manual", "Too short").needs_review is True
