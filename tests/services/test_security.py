"""Tests for password hashing."""

from admin_backend.services.security import hash_password, verify_password


def test_hash_and_verify():
    hashed = hash_password("correct horse")
    assert hashed.startswith("$2")
    assert verify_password("correct horse", hashed)
    assert not verify_password("wrong horse", hashed)


def test_hashes_are_salted():
    assert hash_password("same") != hash_password("same")


def test_rounds_from_environment(monkeypatch):
    monkeypatch.setenv("BCRYPT_ROUNDS", "5")
    assert hash_password("x").startswith("$2b$05$")


def test_malformed_hash_is_a_mismatch():
    assert not verify_password("x", "not-a-bcrypt-hash")
