"""Unit tests for password hashing helpers."""

from quill.util.password import (
    MAX_PASSWORD_BYTES,
    ensure_hashed,
    fits_bcrypt,
    hash_password,
    is_hashed,
    verify_password,
)


class TestPasswordHashing:
    """Tests for bcrypt helpers."""

    def test_hash_and_verify(self):
        hashed = hash_password("secret123")

        assert hashed != "secret123"
        assert is_hashed(hashed)
        assert verify_password("secret123", hashed)
        assert not verify_password("wrong", hashed)

    def test_ensure_hashed_does_not_rehash(self):
        hashed = hash_password("secret123")

        assert ensure_hashed(hashed) == hashed
        assert is_hashed(ensure_hashed("plain"))

    def test_verify_against_non_hash_is_false(self):
        assert verify_password("secret123", "secret123") is False

    def test_fits_bcrypt_counts_bytes_not_characters(self):
        assert fits_bcrypt("a" * MAX_PASSWORD_BYTES)
        assert fits_bcrypt("é" * (MAX_PASSWORD_BYTES // 2))
        assert not fits_bcrypt("é" * (MAX_PASSWORD_BYTES // 2 + 1))
        assert not fits_bcrypt("a" * (MAX_PASSWORD_BYTES + 1))
