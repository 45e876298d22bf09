# tests/test_security.py

import pytest

from core.errors import InvalidInputError
from core.security import PasswordHasher, create_token, decode_token, digest_token


@pytest.fixture
def hasher():
    return PasswordHasher(rounds=4)


def test_hash_then_verify(hasher):
    digest = hasher.hash("password1")
    assert digest != "password1"
    assert hasher.verify("password1", digest) is True


def test_verify_rejects_other_password(hasher):
    digest = hasher.hash("password1")
    assert hasher.verify("password2", digest) is False
    assert hasher.verify("", digest) is False


def test_hashes_are_salted(hasher):
    assert hasher.hash("password1") != hasher.hash("password1")


def test_verify_malformed_digest_returns_false(hasher):
    assert hasher.verify("password1", "not-a-hash") is False
    assert hasher.verify("password1", "") is False
    assert hasher.verify(None, hasher.hash("password1")) is False


@pytest.mark.parametrize("bad", ["", None, "x" * 73, "é" * 40])
def test_hash_rejects_empty_and_oversized(hasher, bad):
    with pytest.raises(InvalidInputError):
        hasher.hash(bad)


def test_token_roundtrip_carries_ids():
    token = create_token(7, "abc123")
    claims = decode_token(token)
    assert claims["sub"] == "7"
    assert claims["jti"] == "abc123"


def test_decode_rejects_tampered_token():
    token = create_token(7, "abc123")
    header, payload, signature = token.split(".")
    tampered = f"{header}.{payload}.{signature[:-2]}xx"
    assert decode_token(tampered) is None
    assert decode_token("garbage") is None


def test_digest_is_stable_and_hides_secret():
    token = create_token(1, "t1")
    assert digest_token(token) == digest_token(token)
    assert token not in digest_token(token)
    assert len(digest_token(token)) == 64


def test_verify_rejects_password_extended_past_72_bytes(hasher):
    digest = hasher.hash("a" * 72)
    assert hasher.verify("a" * 72, digest) is True
    assert hasher.verify("a" * 72 + "EXTRA", digest) is False
