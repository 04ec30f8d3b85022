"""
Unit tests for the validation predicates: plate format, simplified document
checks (length + not all-same digits), email and phone.
"""

import pytest

from locatecar.utils.validation import (
    is_valid_document,
    is_valid_email,
    is_valid_individual_document,
    is_valid_organization_document,
    is_valid_phone,
    is_valid_plate,
)


@pytest.mark.parametrize("plate", ["ABC-1A23", "XYZ-9999", "AAA-0A00"])
def test_valid_plates(plate):
    assert is_valid_plate(plate)


@pytest.mark.parametrize("plate", ["ABCD-123", "abc-1a23", "ABC1A23", "ABC-1a23", "", None, " ABC-1A23"])
def test_invalid_plates(plate):
    assert not is_valid_plate(plate)


def test_individual_document():
    assert is_valid_individual_document("12345678901")
    assert is_valid_individual_document("123.456.789-01")  # punctuation is stripped
    assert not is_valid_individual_document("11111111111")
    assert not is_valid_individual_document("1234567890")
    assert not is_valid_individual_document(None)


def test_organization_document():
    assert is_valid_organization_document("12345678000155")
    assert is_valid_organization_document("12.345.678/0001-55")
    assert not is_valid_organization_document("77777777777777")
    assert not is_valid_organization_document("12345678901")


def test_document_accepts_either_form():
    assert is_valid_document("12345678901")
    assert is_valid_document("12345678000155")
    assert not is_valid_document("123456789012")
    assert not is_valid_document("00000000000")


def test_email():
    assert is_valid_email("ana@mail.com")
    assert is_valid_email("first.last+tag@sub.domain.com.br")
    assert not is_valid_email("ana@mail")
    assert not is_valid_email("ana mail@x.com")
    assert not is_valid_email("@mail.com")
    assert not is_valid_email(None)


def test_phone_needs_ten_digits():
    assert is_valid_phone("(11) 9999-9999")
    assert not is_valid_phone("9999-9999")
    assert not is_valid_phone(None)
