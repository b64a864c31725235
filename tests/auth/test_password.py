"""Tests for password hashing and validation."""

import pytest

from lerncasino.auth.password import (
    PasswordStrengthError,
    dummy_password_hash,
    hash_password,
    validate_password_strength,
    verify_password,
)


class TestHashing:
    def test_hash_and_verify(self):
        hashed = hash_password("geheim1")
        assert verify_password("geheim1", hashed)

    def test_wrong_password(self):
        hashed = hash_password("geheim1")
        assert not verify_password("geheim2", hashed)

    def test_salted(self):
        assert hash_password("same") != hash_password("same")

    def test_invalid_hash_does_not_raise(self):
        assert not verify_password("geheim1", "not-a-hash")

    def test_dummy_hash_is_stable_and_rejects_ordinary_passwords(self):
        assert dummy_password_hash() is dummy_password_hash()
        assert not verify_password("", dummy_password_hash())
        assert not verify_password("geheim1", dummy_password_hash())


class TestStrength:
    def test_minimum_length(self):
        validate_password_strength("abcd")
        with pytest.raises(PasswordStrengthError, match="at least 4"):
            validate_password_strength("abc")

    def test_empty(self):
        with pytest.raises(PasswordStrengthError, match="required"):
            validate_password_strength("")
        with pytest.raises(PasswordStrengthError):
            validate_password_strength(None)

    def test_custom_minimum(self):
        with pytest.raises(PasswordStrengthError):
            validate_password_strength("abcdef", min_length=8)
