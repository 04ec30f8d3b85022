"""Pure validation predicates for plates, documents, emails and phones."""

import re
from typing import Optional

PLATE_RE = re.compile(r"[A-Z]{3}-[0-9][A-Z0-9][0-9]{2}")
EMAIL_RE = re.compile(r"[A-Za-z0-9+_.-]+@[A-Za-z0-9.-]+\.[A-Za-z]{2,}")
_NON_DIGIT = re.compile(r"[^0-9]")

INDIVIDUAL_DOC_LEN = 11
ORGANIZATION_DOC_LEN = 14
MIN_PHONE_DIGITS = 10


def digits_only(s: Optional[str]) -> str:
    """Strip everything but 0-9; '' for None."""
    return _NON_DIGIT.sub("", s or "")


def _valid_digit_document(s: Optional[str], length: int) -> bool:
    """
    Simplified document check: exact digit count and not one digit repeated.
    No check-digit arithmetic is done.
    """
    if s is None:
        return False
    digits = digits_only(s)
    return len(digits) == length and len(set(digits)) > 1


def is_valid_individual_document(s: Optional[str]) -> bool:
    return _valid_digit_document(s, INDIVIDUAL_DOC_LEN)


def is_valid_organization_document(s: Optional[str]) -> bool:
    return _valid_digit_document(s, ORGANIZATION_DOC_LEN)


def is_valid_document(s: Optional[str]) -> bool:
    """Either document form is accepted."""
    return is_valid_individual_document(s) or is_valid_organization_document(s)


def is_valid_email(s: Optional[str]) -> bool:
    return s is not None and EMAIL_RE.fullmatch(s) is not None


def is_valid_phone(s: Optional[str]) -> bool:
    return s is not None and len(digits_only(s)) >= MIN_PHONE_DIGITS


def is_valid_plate(s: Optional[str]) -> bool:
    """Plate format AAA-9A99 (uppercase only)."""
    return s is not None and PLATE_RE.fullmatch(s) is not None
