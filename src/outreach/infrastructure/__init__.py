"""Infrastructure layer: concrete implementations of application ports."""

from outreach.infrastructure.country_hint import RegionCountryGuesser, infer_country
from outreach.infrastructure.phone import PhonenumbersParser

__all__ = [
    "PhonenumbersParser",
    "RegionCountryGuesser",
    "infer_country",
]
