"""
Name: Password Hashing Tests
"""

import pytest

from paydesk.identity.passwords import hash_password, verify_password

pytestmark = pytest.mark.unit


def test_hash_is_salted_and_not_plaintext():
    first = hash_password("s3cret")
    second = hash_password("s3cret")

    assert first != "s3cret"
    assert first != second
    assert first.startswith("$argon2")


def test_verify_accepts_correct_password():
    assert verify_password("s3cret", hash_password("s3cret")) is True


def test_verify_rejects_wrong_password():
    assert verify_password("nope", hash_password("s3cret")) is False


def test_verify_rejects_malformed_hash():
    assert verify_password("s3cret", "not-a-hash") is False
