# tests/utils/test_validators.py

import pytest

from bizdesk.utils import validators


@pytest.mark.parametrize("email", ["a@b.com", "jan.de-vries+factuur@bedrijf.nl"])
def test_valid_emails(email):
    assert validators.is_valid_email(email)


@pytest.mark.parametrize("email", ["not-an-email", "a@b", "a b@c.com", "a@b.com\n", "", None])
def test_invalid_emails(email):
    assert not validators.is_valid_email(email)


def test_is_valid_url():
    assert validators.is_valid_url("https://example.com/path?q=1")
    assert not validators.is_valid_url("example.com")
    assert not validators.is_valid_url("")


def test_is_valid_phone():
    assert validators.is_valid_phone("+31 (0)20 123 4567")
    assert not validators.is_valid_phone("12345")
    assert not validators.is_valid_phone("020-CALL-NOW")


def test_is_valid_vat_id():
    assert validators.is_valid_vat_id("NL123456789B01")
    assert validators.is_valid_vat_id("nl 1234 5678 9b01")
    assert not validators.is_valid_vat_id("123456789")
    assert not validators.is_valid_vat_id("NL123")


def test_required_and_empty():
    assert validators.is_empty(None)
    assert validators.is_empty("   ")
    assert not validators.is_empty("x")
    assert validators.is_required(0)
    assert not validators.is_required(" ")
    assert not validators.is_required(None)


def test_length_checks():
    assert validators.has_min_length("abc", 3)
    assert not validators.has_min_length(" ab ", 3)
    assert not validators.has_min_length(None, 1)
    assert validators.has_max_length("abc", 3)
    assert validators.has_max_length(None, 3)
    assert not validators.has_max_length("abcd", 3)


def test_number_checks():
    assert validators.is_in_range(5, 1, 10)
    assert validators.is_in_range(10, 1, 10)
    assert not validators.is_in_range(11, 1, 10)
    assert validators.is_positive_number("2.5")
    assert not validators.is_positive_number(0)
    assert validators.is_non_negative_number(0)
    assert not validators.is_non_negative_number("abc")
    assert not validators.is_non_negative_number(True)
