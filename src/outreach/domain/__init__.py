"""Domain layer: entities, value objects and phone rules. No dependencies on outer layers."""

from outreach.domain.entities import (
    CONFIDENCE_HIGH,
    CONFIDENCE_LOW,
    CONFIDENCE_MANUAL,
    BackendVerdict,
    Confidence,
    Contact,
    PhoneNormalizationResult,
    ValidityVerdict,
)

__all__ = [
    "BackendVerdict",
    "CONFIDENCE_HIGH",
    "CONFIDENCE_LOW",
    "CONFIDENCE_MANUAL",
    "Confidence",
    "Contact",
    "PhoneNormalizationResult",
    "ValidityVerdict",
]
