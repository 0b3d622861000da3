"""Phone string rules shared by the validity resolver and the normalizer."""

import re

# Separators stripped before parsing. Digits and "+" are kept.
PHONE_SEPARATOR_CHARS = frozenset(" -().")

MIN_NATIONAL_DIGITS = 7
MAX_NATIONAL_DIGITS = 15

E164_PREFIX = "+"

_NON_DIGITS = re.compile(r"[^0-9]")


def is_blank(value: str | None) -> bool:
    return value is None or not value.strip()


def strip_separators(raw: str) -> str:
    """Trim and drop separator characters; everything else is kept as-is."""
    return "".join(ch for ch in raw.strip() if ch not in PHONE_SEPARATOR_CHARS)


def digits_only(raw: str) -> str:
    return _NON_DIGITS.sub("", raw)


def national_length_ok(national_number: str) -> bool:
    return MIN_NATIONAL_DIGITS <= len(national_number) <= MAX_NATIONAL_DIGITS
